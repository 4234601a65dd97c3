"""
Unit tests for the workout summary service.

Tests cover:
- Duration formatting
- Best set selection
- Pagination of the workout list
- Bounded concurrent detail fetches and failure propagation
- Name resolution and exercise filtering
"""
import asyncio
from datetime import date

import pytest

from backend.core.exercise_catalog import ExerciseTemplateCache
from backend.core.workout_summary_service import (
    WorkoutSummaryService,
    format_duration,
    select_best_set,
)
from domain.models import BestSet, WorkoutSet
from tests.fakes import (
    FakeGatewayError,
    create_hevy_gateway,
    make_exercise,
    make_set,
    make_workout,
)


def make_service(gateway, **kwargs) -> WorkoutSummaryService:
    return WorkoutSummaryService(gateway, ExerciseTemplateCache(gateway), **kwargs)


def sets(*specs):
    return [WorkoutSet.model_validate(make_set(*spec)) for spec in specs]


# =============================================================================
# Duration Tests
# =============================================================================


@pytest.mark.unit
class TestFormatDuration:
    """Tests for format_duration."""

    def test_over_an_hour(self):
        assert format_duration("2024-01-15T10:00:00Z", "2024-01-15T11:15:00Z") == "1h 15m"

    def test_under_an_hour(self):
        assert format_duration("2024-01-15T10:00:00Z", "2024-01-15T10:45:00Z") == "45m"

    def test_exactly_one_hour(self):
        assert format_duration("2024-01-15T10:00:00Z", "2024-01-15T11:00:00Z") == "1h 0m"

    def test_rounds_to_nearest_minute(self):
        assert format_duration("2024-01-15T10:00:00Z", "2024-01-15T10:44:30Z") == "45m"
        assert format_duration("2024-01-15T10:00:00Z", "2024-01-15T10:44:29Z") == "44m"

    def test_offsets_are_respected(self):
        assert format_duration("2024-01-15T10:00:00+00:00", "2024-01-15T12:30:00+02:00") == "30m"

    def test_missing_timestamp(self):
        assert format_duration(None, "2024-01-15T10:45:00Z") == "0m"
        assert format_duration("2024-01-15T10:00:00Z", "") == "0m"

    def test_unparseable_timestamp(self):
        assert format_duration("yesterday", "2024-01-15T10:45:00Z") == "0m"

    def test_negative_span_is_zero(self):
        assert format_duration("2024-01-15T11:00:00Z", "2024-01-15T10:00:00Z") == "0m"


# =============================================================================
# Best Set Tests
# =============================================================================


@pytest.mark.unit
class TestSelectBestSet:
    """Tests for select_best_set."""

    def test_heaviest_qualifying_set(self):
        best = select_best_set(sets((60, 10), (80, 5), (70, 8)))
        assert best == BestSet(weight_kg=80, reps=5)

    def test_tie_keeps_first_occurrence(self):
        best = select_best_set(sets((100, 3), (100, 5)))
        assert best.reps == 3

    def test_warmups_are_ignored(self):
        best = select_best_set(sets((120, 1, "warmup"), (100, 3)))
        assert best == BestSet(weight_kg=100, reps=3)

    def test_dropset_and_failure_sets_qualify(self):
        assert select_best_set(sets((90, 6, "dropset"))).weight_kg == 90
        assert select_best_set(sets((95, 4, "failure"))).weight_kg == 95

    def test_sets_missing_weight_or_reps_are_ignored(self):
        assert select_best_set(sets((None, 10), (80, None), (0, 5), (80, 0))) is None

    def test_no_sets(self):
        assert select_best_set([]) is None


# =============================================================================
# Service Tests
# =============================================================================


@pytest.mark.unit
class TestSummarizeRecentWorkouts:
    """Tests for WorkoutSummaryService.summarize_recent_workouts."""

    @pytest.mark.asyncio
    async def test_scenario_bench_filter_keeps_matching_workouts(self):
        gateway = create_hevy_gateway()
        gateway.seed_workouts([
            make_workout("w1", title="Push", exercises=[
                make_exercise("79D0BB3A", [make_set(60, 10), make_set(80, 5), make_set(70, 8)]),
                make_exercise("D04AC939", [make_set(100, 5)]),
            ]),
            make_workout("w2", title="Legs", exercises=[
                make_exercise("D04AC939", [make_set(110, 5)]),
            ]),
            make_workout("w3", title="Push", exercises=[
                make_exercise("3601968B", [make_set(30, 10)]),
            ]),
        ])
        service = make_service(gateway)

        result = await service.summarize_recent_workouts(count=3, exercise_filter="bench")

        assert [w.id for w in result] == ["w1", "w3"]
        assert [e.name for e in result[0].exercises] == ["Bench Press (Barbell)"]
        assert result[0].exercises[0].best_set == BestSet(weight_kg=80, reps=5)
        assert result[1].exercises[0].name == "Incline Bench Press (Dumbbell)"

    @pytest.mark.asyncio
    async def test_summary_fields(self):
        gateway = create_hevy_gateway()
        gateway.seed_workouts([
            make_workout(
                "w1",
                title="Push Day",
                start_time="2024-01-15T10:00:00Z",
                end_time="2024-01-15T11:15:00Z",
                exercises=[make_exercise("79D0BB3A", [make_set(80, 5)])],
            ),
        ])
        service = make_service(gateway)

        [summary] = await service.summarize_recent_workouts(count=1)

        assert summary.id == "w1"
        assert summary.title == "Push Day"
        assert summary.date == "2024-01-15T10:00:00Z"
        assert summary.duration == "1h 15m"
        assert summary.exercises[0].exercise_id == "79D0BB3A"
        assert len(summary.exercises[0].sets) == 1

    @pytest.mark.asyncio
    async def test_unknown_template_id_is_used_as_name(self):
        gateway = create_hevy_gateway()
        gateway.seed_workouts([
            make_workout("w1", exercises=[make_exercise("CUSTOM01", [make_set(20, 12)])]),
        ])
        service = make_service(gateway)

        [summary] = await service.summarize_recent_workouts(count=1)

        assert summary.exercises[0].name == "CUSTOM01"

    @pytest.mark.asyncio
    async def test_exercise_without_qualifying_sets_has_no_best_set(self):
        gateway = create_hevy_gateway()
        gateway.seed_workouts([
            make_workout("w1", exercises=[
                make_exercise("79D0BB3A", [make_set(40, 10, "warmup")]),
            ]),
        ])
        service = make_service(gateway)

        [summary] = await service.summarize_recent_workouts(count=1)

        assert summary.exercises[0].best_set is None
        dumped = summary.model_dump(by_alias=True, exclude_none=True)
        assert "bestSet" not in dumped["exercises"][0]
        assert dumped["exercises"][0]["exerciseId"] == "79D0BB3A"

    @pytest.mark.asyncio
    async def test_filter_is_case_insensitive(self):
        gateway = create_hevy_gateway(num_workouts=2)
        service = make_service(gateway)

        result = await service.summarize_recent_workouts(count=2, exercise_filter="BENCH PRESS")

        assert len(result) == 2

    @pytest.mark.asyncio
    async def test_filter_without_matches_returns_empty(self):
        gateway = create_hevy_gateway(num_workouts=3)
        service = make_service(gateway)

        assert await service.summarize_recent_workouts(count=3, exercise_filter="curl") == []

    @pytest.mark.asyncio
    async def test_empty_filter_keeps_everything(self):
        gateway = create_hevy_gateway(num_workouts=2)
        service = make_service(gateway)

        assert len(await service.summarize_recent_workouts(count=2, exercise_filter="")) == 2

    @pytest.mark.asyncio
    async def test_no_workouts(self):
        gateway = create_hevy_gateway()
        service = make_service(gateway)

        assert await service.summarize_recent_workouts(count=5) == []

    @pytest.mark.asyncio
    async def test_template_catalog_failure_propagates(self):
        gateway = create_hevy_gateway(num_workouts=2)
        gateway.fail("get_exercise_templates")
        service = make_service(gateway)

        with pytest.raises(FakeGatewayError):
            await service.summarize_recent_workouts(count=2)

        assert gateway.calls_to("get_workouts") == []


@pytest.mark.unit
class TestRecentWorkoutsWithDetails:
    """Tests for paging and the detail fan-out."""

    @pytest.mark.asyncio
    async def test_pages_until_count_reached(self):
        gateway = create_hevy_gateway(num_workouts=40)
        service = make_service(gateway)

        workouts = await service.get_recent_workouts_with_details(25)

        assert [c["page"] for c in gateway.calls_to("get_workouts")] == [1, 2, 3]
        assert all(c["page_size"] == 10 for c in gateway.calls_to("get_workouts"))
        assert [w.id for w in workouts] == [f"w{i}" for i in range(25)]

    @pytest.mark.asyncio
    async def test_stops_on_short_page(self):
        gateway = create_hevy_gateway(num_workouts=12)
        service = make_service(gateway)

        workouts = await service.get_recent_workouts_with_details(30)

        assert [c["page"] for c in gateway.calls_to("get_workouts")] == [1, 2]
        assert len(workouts) == 12

    @pytest.mark.asyncio
    async def test_results_follow_list_order_when_fetches_finish_out_of_order(self):
        gateway = create_hevy_gateway(num_workouts=6)
        gateway.delays = {f"w{i}": 0.12 - i * 0.02 for i in range(6)}
        service = make_service(gateway, detail_concurrency=6)

        workouts = await service.get_recent_workouts_with_details(6)

        completed = [c["id"] for c in gateway.calls_to("get_workout")]
        assert completed == [f"w{i}" for i in reversed(range(6))]
        assert [w.id for w in workouts] == [f"w{i}" for i in range(6)]
        assert all(w.exercises for w in workouts)

    @pytest.mark.asyncio
    async def test_detail_fetches_are_bounded(self):
        gateway = create_hevy_gateway(num_workouts=20)
        gateway.delay = 0.005
        service = make_service(gateway, detail_concurrency=4)

        await service.get_recent_workouts_with_details(20)

        assert gateway.max_in_flight <= 4
        assert len(gateway.calls_to("get_workout")) == 20

    @pytest.mark.asyncio
    async def test_detail_failure_fails_whole_operation(self):
        gateway = create_hevy_gateway(num_workouts=5)
        gateway.fail("get_workout", ids=["w3"])
        service = make_service(gateway)

        with pytest.raises(FakeGatewayError):
            await service.summarize_recent_workouts(count=5)

    @pytest.mark.asyncio
    async def test_remaining_fetches_are_cancelled_after_failure(self):
        gateway = create_hevy_gateway(num_workouts=10)
        gateway.delay = 0.01
        gateway.fail("get_workout", ids=["w0"])
        service = make_service(gateway, detail_concurrency=1)

        with pytest.raises(FakeGatewayError):
            await service.get_recent_workouts_with_details(10)

        await asyncio.sleep(0.05)
        assert len(gateway.calls_to("get_workout")) == 1

    @pytest.mark.asyncio
    async def test_cancelled_fetches_are_finished_before_failure_propagates(self):
        gateway = create_hevy_gateway(num_workouts=4)
        gateway.delays = {"w0": 0.0, "w1": 0.0, "w2": 0.5, "w3": 0.5}
        gateway.fail("get_workout", ids=["w0", "w1"])
        service = make_service(gateway, detail_concurrency=4)

        with pytest.raises(FakeGatewayError):
            await service.get_recent_workouts_with_details(4)

        assert gateway.in_flight == 0
        assert len(gateway.calls_to("get_workout")) == 2

    def test_concurrency_must_be_positive(self):
        gateway = create_hevy_gateway()
        with pytest.raises(ValueError):
            make_service(gateway, detail_concurrency=0)


@pytest.mark.unit
class TestWorkoutLookups:
    """Tests for the read-only workout lookups."""

    @pytest.mark.asyncio
    async def test_list_workouts_passes_date_range(self):
        gateway = create_hevy_gateway()
        gateway.seed_workouts([
            make_workout("w1", title="Push", start_time="2024-05-20T10:00:00Z",
                         end_time="2024-05-20T10:45:00Z"),
            make_workout("w2", title="Legs", start_time="2024-05-10T10:00:00Z",
                         end_time="2024-05-10T11:00:00Z"),
            make_workout("w3", title="Pull", start_time="2024-04-01T10:00:00Z",
                         end_time="2024-04-01T11:00:00Z"),
        ])
        service = make_service(gateway)

        rows = await service.list_workouts(
            start_date=date(2024, 5, 1),
            end_date=date(2024, 5, 31),
        )

        assert [r.id for r in rows] == ["w1", "w2"]
        assert rows[0].duration == "45m"
        assert rows[1].duration == "1h 0m"
        [call] = gateway.calls_to("get_workouts")
        assert call["start_date"] == date(2024, 5, 1)
        assert call["end_date"] == date(2024, 5, 31)
        assert call["page"] == 1
        assert call["page_size"] == 10

    @pytest.mark.asyncio
    async def test_list_workouts_does_not_load_catalog(self):
        gateway = create_hevy_gateway(num_workouts=2)
        service = make_service(gateway)

        await service.list_workouts(page=2, page_size=5)

        assert gateway.calls_to("get_exercise_templates") == []
        assert gateway.calls_to("get_workouts")[0]["page"] == 2

    @pytest.mark.asyncio
    async def test_get_workout_resolves_names(self):
        gateway = create_hevy_gateway()
        exercise = make_exercise("D04AC939", [make_set(100, 5), make_set(120, 3)])
        exercise["notes"] = "Belt on top sets"
        workout = make_workout("w1", title="Legs", exercises=[exercise])
        workout["description"] = "Heavy day"
        gateway.seed_workouts([workout])
        service = make_service(gateway)

        workout = await service.get_workout("w1")

        assert workout.title == "Legs"
        assert workout.description == "Heavy day"
        assert workout.duration == "1h 15m"
        [squat] = workout.exercises
        assert squat.name == "Squat (Barbell)"
        assert squat.notes == "Belt on top sets"
        assert squat.best_set == BestSet(weight_kg=120, reps=3)
        assert len(gateway.calls_to("get_exercise_templates")) == 1

    @pytest.mark.asyncio
    async def test_get_workout_failure_propagates(self):
        gateway = create_hevy_gateway()
        service = make_service(gateway)

        with pytest.raises(FakeGatewayError):
            await service.get_workout("missing")

    @pytest.mark.asyncio
    async def test_workout_count(self):
        gateway = create_hevy_gateway(num_workouts=7)
        assert await make_service(gateway).get_workout_count() == 7

    @pytest.mark.asyncio
    async def test_workout_events(self):
        gateway = create_hevy_gateway()
        gateway.events = [{"type": "deleted", "id": "w9", "deleted_at": "2024-05-02T08:00:00Z"}]
        service = make_service(gateway)

        events = await service.get_workout_events(date(2024, 5, 1))

        assert events == gateway.events
        assert gateway.calls_to("get_workout_events") == [{"since": date(2024, 5, 1)}]
