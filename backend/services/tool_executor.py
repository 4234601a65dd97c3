"""
Tool Executor Service for the analytics tools.

Validates caller-supplied tool arguments and dispatches them to the
analytics services. Results are JSON-ready dicts using the camelCase
field names of the result structures.
"""

import logging
from typing import Any, Awaitable, Callable, Dict

from pydantic import BaseModel

from backend.core.exercise_catalog import ExerciseTemplateCache
from backend.core.progression_service import LiftProgressionService
from backend.core.workout_summary_service import WorkoutSummaryService
from backend.services.tool_params import (
    ExerciseNameParams,
    ExerciseSearchParams,
    LiftProgressionParams,
    WorkoutEventsParams,
    WorkoutIdParams,
    WorkoutListParams,
    WorkoutSummaryParams,
)
from backend.services.tool_schemas import (
    GET_EXERCISE_NAME,
    GET_LIFT_PROGRESSION,
    GET_WORKOUT,
    GET_WORKOUT_COUNT,
    GET_WORKOUT_EVENTS,
    GET_WORKOUT_SUMMARY,
    GET_WORKOUTS,
    SEARCH_EXERCISE_TEMPLATES,
)

logger = logging.getLogger(__name__)


class UnknownToolError(ValueError):
    """Raised when a tool name is not registered."""

    def __init__(self, tool_name: str):
        super().__init__(f"Unknown tool: {tool_name}")
        self.tool_name = tool_name


def _dump(model: BaseModel) -> Dict[str, Any]:
    return model.model_dump(mode="json", by_alias=True, exclude_none=True)


class ToolExecutor:
    """
    Executes analytics tools with validated parameters.

    One executor serves one client context: the services it wraps share a
    single exercise template cache.
    """

    def __init__(
        self,
        summary_service: WorkoutSummaryService,
        progression_service: LiftProgressionService,
        template_cache: ExerciseTemplateCache,
    ):
        """
        Initialize the tool executor.

        Args:
            summary_service: Service for workout summaries and lookups
            progression_service: Service for lift progression analysis
            template_cache: Template cache used for search and name lookup
        """
        self.summary_service = summary_service
        self.progression_service = progression_service
        self.template_cache = template_cache
        self._handlers: Dict[str, Callable[[Dict[str, Any]], Awaitable[Dict[str, Any]]]] = {
            GET_WORKOUT_SUMMARY: self._get_workout_summary,
            GET_LIFT_PROGRESSION: self._get_lift_progression,
            SEARCH_EXERCISE_TEMPLATES: self._search_exercise_templates,
            GET_EXERCISE_NAME: self._get_exercise_name,
            GET_WORKOUTS: self._get_workouts,
            GET_WORKOUT: self._get_workout,
            GET_WORKOUT_COUNT: self._get_workout_count,
            GET_WORKOUT_EVENTS: self._get_workout_events,
        }

    @property
    def tool_names(self) -> list:
        return list(self._handlers)

    async def execute_tool(
        self,
        tool_name: str,
        parameters: Dict[str, Any],
    ) -> Dict[str, Any]:
        """
        Execute a tool by name with the given parameters.

        Args:
            tool_name: Name of the tool to execute
            parameters: Raw tool arguments

        Returns:
            Tool execution result

        Raises:
            UnknownToolError: If tool_name is not recognized
            pydantic.ValidationError: If the parameters are invalid
                (a ValueError subclass)
            GatewayError: If the remote service fails
        """
        handler = self._handlers.get(tool_name)
        if handler is None:
            raise UnknownToolError(tool_name)

        logger.info(f"Executing tool {tool_name}")
        return await handler(parameters or {})

    async def _get_workout_summary(self, params: Dict[str, Any]) -> Dict[str, Any]:
        args = WorkoutSummaryParams.model_validate(params)
        summaries = await self.summary_service.summarize_recent_workouts(
            count=args.count,
            exercise_filter=args.exercise_filter,
        )
        return {
            "workouts": [_dump(s) for s in summaries],
            "count": len(summaries),
        }

    async def _get_lift_progression(self, params: Dict[str, Any]) -> Dict[str, Any]:
        args = LiftProgressionParams.model_validate(params)
        results = await self.progression_service.analyze_lift_progression(
            args.exercises,
            lookback_days=args.lookback_days,
        )
        return {
            "results": [_dump(r) for r in results],
            "lookbackDays": args.lookback_days,
        }

    async def _search_exercise_templates(self, params: Dict[str, Any]) -> Dict[str, Any]:
        args = ExerciseSearchParams.model_validate(params)
        templates = await self.template_cache.search(args.query)
        return {
            "templates": [t.model_dump(mode="json", exclude_none=True) for t in templates],
            "count": len(templates),
            "query": args.query,
        }

    async def _get_exercise_name(self, params: Dict[str, Any]) -> Dict[str, Any]:
        args = ExerciseNameParams.model_validate(params)
        name = await self.template_cache.resolve_exercise_name(args.id)
        return {"id": args.id, "name": name}

    async def _get_workouts(self, params: Dict[str, Any]) -> Dict[str, Any]:
        args = WorkoutListParams.model_validate(params)
        workouts = await self.summary_service.list_workouts(
            page=args.page,
            page_size=args.page_size,
            start_date=args.start_date,
            end_date=args.end_date,
        )
        return {
            "workouts": [_dump(w) for w in workouts],
            "count": len(workouts),
            "page": args.page,
        }

    async def _get_workout(self, params: Dict[str, Any]) -> Dict[str, Any]:
        args = WorkoutIdParams.model_validate(params)
        workout = await self.summary_service.get_workout(args.id)
        return {"workout": _dump(workout)}

    async def _get_workout_count(self, params: Dict[str, Any]) -> Dict[str, Any]:
        return {"workoutCount": await self.summary_service.get_workout_count()}

    async def _get_workout_events(self, params: Dict[str, Any]) -> Dict[str, Any]:
        args = WorkoutEventsParams.model_validate(params)
        events = await self.summary_service.get_workout_events(args.since_date)
        return {
            "events": events,
            "count": len(events),
            "sinceDate": args.since_date.isoformat(),
        }


# Factory function for creating executor (can be used with dependency injection)
def create_tool_executor(
    summary_service: WorkoutSummaryService,
    progression_service: LiftProgressionService,
    template_cache: ExerciseTemplateCache,
) -> ToolExecutor:
    """Create a ToolExecutor over the given services."""
    return ToolExecutor(
        summary_service=summary_service,
        progression_service=progression_service,
        template_cache=template_cache,
    )
