"""
Tools router.

Exposes the analytics tools to tool-calling clients:
- GET /tools lists tool schemas
- POST /tools/{tool_name} executes a tool with a JSON object of arguments
"""

import logging
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Body, Depends, HTTPException
from pydantic import ValidationError

from api.deps import get_tool_executor
from api.errors import gateway_http_error
from application.exceptions import GatewayError
from backend.services.tool_executor import ToolExecutor, UnknownToolError
from backend.services.tool_schemas import get_all_tool_schemas

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/tools",
    tags=["Tools"],
)


@router.get("")
def list_tools() -> List[Dict[str, Any]]:
    """List the schemas of all available tools."""
    return get_all_tool_schemas()


@router.post("/{tool_name}")
async def execute_tool(
    tool_name: str,
    parameters: Optional[Dict[str, Any]] = Body(None),
    executor: ToolExecutor = Depends(get_tool_executor),
) -> Dict[str, Any]:
    """
    Execute a tool by name.

    Returns:
        The tool result as JSON

    Raises:
        HTTPException: 404 for unknown tools, 422 for invalid arguments,
            502/504 for remote failures
    """
    try:
        return await executor.execute_tool(tool_name, parameters or {})
    except UnknownToolError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except ValidationError as e:
        logger.info(f"Invalid arguments for tool {tool_name}: {e.error_count()} error(s)")
        raise HTTPException(
            status_code=422,
            detail=e.errors(include_url=False, include_context=False),
        )
    except GatewayError as e:
        raise gateway_http_error(e)
