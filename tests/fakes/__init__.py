"""
Fake Gateway Implementations for Testing.

This package provides an in-memory fake implementation of the HevyGateway
interface for fast, isolated testing. No network access required.

Features:
- Implements the same Protocol interface as HevyClient
- Supports seeding with test data
- Supports failure injection and call recording
- Factory functions for common test scenarios

Usage:
    from tests.fakes import FakeHevyGateway, create_hevy_gateway

    # Direct instantiation
    gateway = FakeHevyGateway()
    gateway.seed_templates([{"id": "t1", "title": "Bench Press (Barbell)"}])

    # Factory function with a small pre-populated catalog
    gateway = create_hevy_gateway()
"""
from typing import Any, Dict, List, Optional

from tests.fakes.hevy_gateway import FakeGatewayError, FakeHevyGateway


# =============================================================================
# Sample Data
# =============================================================================

SAMPLE_TEMPLATES: List[Dict[str, Any]] = [
    {
        "id": "79D0BB3A",
        "title": "Bench Press (Barbell)",
        "type": "weight_reps",
        "primary_muscle_group": "chest",
        "equipment": "barbell",
    },
    {
        "id": "D04AC939",
        "title": "Squat (Barbell)",
        "type": "weight_reps",
        "primary_muscle_group": "quadriceps",
        "equipment": "barbell",
    },
    {
        "id": "C6272009",
        "title": "Deadlift (Barbell)",
        "type": "weight_reps",
        "primary_muscle_group": "lower_back",
        "equipment": "barbell",
    },
    {
        "id": "3601968B",
        "title": "Incline Bench Press (Dumbbell)",
        "type": "weight_reps",
        "primary_muscle_group": "chest",
        "equipment": "dumbbell",
    },
]


def make_workout(
    workout_id: str,
    *,
    title: str = "Workout",
    start_time: str = "2024-01-15T10:00:00Z",
    end_time: str = "2024-01-15T11:15:00Z",
    exercises: Optional[List[Dict[str, Any]]] = None,
) -> Dict[str, Any]:
    """Build a remote workout payload."""
    return {
        "id": workout_id,
        "title": title,
        "start_time": start_time,
        "end_time": end_time,
        "exercises": exercises or [],
    }


def make_exercise(template_id: str, sets: List[Dict[str, Any]]) -> Dict[str, Any]:
    """Build a remote workout exercise payload."""
    return {"exercise_template_id": template_id, "sets": sets}


def make_set(
    weight_kg: Optional[float],
    reps: Optional[int],
    set_type: str = "normal",
) -> Dict[str, Any]:
    """Build a remote set payload."""
    return {"type": set_type, "weight_kg": weight_kg, "reps": reps}


# =============================================================================
# Factory Functions
# =============================================================================


def create_hevy_gateway(
    *,
    templates: Optional[List[Dict[str, Any]]] = None,
    num_workouts: int = 0,
) -> FakeHevyGateway:
    """
    Create a FakeHevyGateway with a seeded template catalog.

    Args:
        templates: Template payloads (defaults to SAMPLE_TEMPLATES)
        num_workouts: Number of generated workouts, most recent first

    Returns:
        Seeded FakeHevyGateway
    """
    gateway = FakeHevyGateway()
    gateway.seed_templates(SAMPLE_TEMPLATES if templates is None else templates)
    gateway.seed_workouts([
        make_workout(
            f"w{i}",
            title=f"Workout {i}",
            exercises=[make_exercise("79D0BB3A", [make_set(60 + i, 5)])],
        )
        for i in range(num_workouts)
    ])
    return gateway


__all__ = [
    "FakeHevyGateway",
    "FakeGatewayError",
    "SAMPLE_TEMPLATES",
    "create_hevy_gateway",
    "make_workout",
    "make_exercise",
    "make_set",
]
