"""
Tool Schemas for the analytics tools.

Defines the JSON-schema descriptions of the tools a caller (for example an
AI agent) can invoke. Parameter validation itself is done by the pydantic
models in ``backend.services.tool_params``.
"""

from typing import Any, Dict, List, Optional

from backend.core.constants import (
    DEFAULT_LOOKBACK_DAYS,
    DEFAULT_SUMMARY_COUNT,
    FIRST_PAGE,
    MAX_LOOKBACK_DAYS,
    MAX_SUMMARY_COUNT,
    WORKOUTS_PAGE_SIZE,
)

GET_WORKOUT_SUMMARY = "get-workout-summary"
GET_LIFT_PROGRESSION = "get-lift-progression"
SEARCH_EXERCISE_TEMPLATES = "search-exercise-templates"
GET_EXERCISE_NAME = "get-exercise-name"
GET_WORKOUTS = "get-workouts"
GET_WORKOUT = "get-workout"
GET_WORKOUT_COUNT = "get-workout-count"
GET_WORKOUT_EVENTS = "get-workout-events"


GET_WORKOUT_SUMMARY_SCHEMA = {
    "name": GET_WORKOUT_SUMMARY,
    "description": "Returns multiple recent workouts with full details (exercise names, sets, weights, reps) in a single call. Use this to review recent training history.",
    "parameters": {
        "type": "object",
        "properties": {
            "count": {
                "type": "integer",
                "description": f"Number of recent workouts to fetch (default: {DEFAULT_SUMMARY_COUNT}, max: {MAX_SUMMARY_COUNT})",
                "default": DEFAULT_SUMMARY_COUNT,
            },
            "exerciseFilter": {
                "type": "string",
                "description": "Optional filter to only show specific exercises (e.g., 'bench', 'squat')",
            },
        },
    },
}

GET_LIFT_PROGRESSION_SCHEMA = {
    "name": GET_LIFT_PROGRESSION,
    "description": "Track progression on specific lifts with optional goal targets. Returns estimated 1RM, progress percentage toward goals, PRs, trends, and recent session history.",
    "parameters": {
        "type": "object",
        "properties": {
            "exercises": {
                "type": "array",
                "description": "Exercises to track with optional goals",
                "minItems": 1,
                "items": {
                    "type": "object",
                    "properties": {
                        "name": {
                            "type": "string",
                            "description": "Exercise name to search for (e.g., 'Bench Press (Barbell)', 'Squat')",
                        },
                        "goalKg": {
                            "type": "number",
                            "description": "Optional target weight in kg to track progress toward",
                        },
                    },
                    "required": ["name"],
                },
            },
            "lookbackDays": {
                "type": "integer",
                "description": f"How many days back to analyze for trends (default: {DEFAULT_LOOKBACK_DAYS})",
                "default": DEFAULT_LOOKBACK_DAYS,
                "minimum": 1,
                "maximum": MAX_LOOKBACK_DAYS,
            },
        },
        "required": ["exercises"],
    },
}

SEARCH_EXERCISE_TEMPLATES_SCHEMA = {
    "name": SEARCH_EXERCISE_TEMPLATES,
    "description": "Search the exercise template catalog by name (case-insensitive substring).",
    "parameters": {
        "type": "object",
        "properties": {
            "query": {
                "type": "string",
                "description": "Part of the exercise name (e.g., 'bench', 'row')",
            },
        },
        "required": ["query"],
    },
}

GET_EXERCISE_NAME_SCHEMA = {
    "name": GET_EXERCISE_NAME,
    "description": "Resolve an exercise template ID to its display name.",
    "parameters": {
        "type": "object",
        "properties": {
            "id": {
                "type": "string",
                "description": "Exercise template ID",
            },
        },
        "required": ["id"],
    },
}

GET_WORKOUTS_SCHEMA = {
    "name": GET_WORKOUTS,
    "description": "List workouts with optional date filtering and pagination. Returns title, ID, date and duration but NOT exercise details. Use get-workout for one workout in full, or get-workout-summary for recent workouts with details.",
    "parameters": {
        "type": "object",
        "properties": {
            "startDate": {
                "type": "string",
                "format": "date",
                "description": "Only workouts on or after this date (YYYY-MM-DD)",
            },
            "endDate": {
                "type": "string",
                "format": "date",
                "description": "Only workouts on or before this date (YYYY-MM-DD)",
            },
            "page": {
                "type": "integer",
                "description": f"Page number (default: {FIRST_PAGE})",
                "default": FIRST_PAGE,
                "minimum": FIRST_PAGE,
            },
            "pageSize": {
                "type": "integer",
                "description": f"Workouts per page (default and max: {WORKOUTS_PAGE_SIZE})",
                "default": WORKOUTS_PAGE_SIZE,
                "minimum": 1,
                "maximum": WORKOUTS_PAGE_SIZE,
            },
        },
    },
}

GET_WORKOUT_SCHEMA = {
    "name": GET_WORKOUT,
    "description": "Get one workout by ID with full details: exercise names, sets, weights, reps and notes. Exercise names are resolved automatically.",
    "parameters": {
        "type": "object",
        "properties": {
            "id": {
                "type": "string",
                "description": "Workout ID",
            },
        },
        "required": ["id"],
    },
}

GET_WORKOUT_COUNT_SCHEMA = {
    "name": GET_WORKOUT_COUNT,
    "description": "Get the total number of workouts on the account.",
    "parameters": {
        "type": "object",
        "properties": {},
    },
}

GET_WORKOUT_EVENTS_SCHEMA = {
    "name": GET_WORKOUT_EVENTS,
    "description": "Get workout update/delete events since a date. Useful for syncing or tracking changes.",
    "parameters": {
        "type": "object",
        "properties": {
            "sinceDate": {
                "type": "string",
                "format": "date",
                "description": "Earliest event date (YYYY-MM-DD)",
            },
        },
        "required": ["sinceDate"],
    },
}


# Registry of all available tools
TOOL_SCHEMAS = [
    GET_WORKOUT_SUMMARY_SCHEMA,
    GET_LIFT_PROGRESSION_SCHEMA,
    SEARCH_EXERCISE_TEMPLATES_SCHEMA,
    GET_EXERCISE_NAME_SCHEMA,
    GET_WORKOUTS_SCHEMA,
    GET_WORKOUT_SCHEMA,
    GET_WORKOUT_COUNT_SCHEMA,
    GET_WORKOUT_EVENTS_SCHEMA,
]


def get_tool_schema(tool_name: str) -> Optional[Dict[str, Any]]:
    """Get the schema for a specific tool by name."""
    for schema in TOOL_SCHEMAS:
        if schema["name"] == tool_name:
            return schema
    return None


def get_all_tool_schemas() -> List[Dict[str, Any]]:
    """Get all available tool schemas."""
    return TOOL_SCHEMAS
