"""Tool layer for the Hevy Insights API."""

from backend.services.tool_executor import (
    ToolExecutor,
    UnknownToolError,
    create_tool_executor,
)
from backend.services.tool_schemas import (
    TOOL_SCHEMAS,
    get_tool_schema,
    get_all_tool_schemas,
)

__all__ = [
    "ToolExecutor",
    "UnknownToolError",
    "create_tool_executor",
    "TOOL_SCHEMAS",
    "get_tool_schema",
    "get_all_tool_schemas",
]
