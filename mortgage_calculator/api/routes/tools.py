"""Tool discovery and invocation routes."""

from typing import Any

from fastapi import APIRouter, Body, HTTPException

from mortgage_calculator.api.schemas import ToolResponse
from mortgage_calculator.engine.payment import InvalidLoanTermsError
from mortgage_calculator.tools import UnknownToolError, call_tool, list_tools

router = APIRouter(prefix="/api/v1/tools", tags=["tools"])


@router.get("")
def get_tools():
    """List the available loan tools and their parameters."""
    return list_tools()


@router.post("/{name}", response_model=ToolResponse)
def invoke_tool(name: str, arguments: dict[str, Any] = Body(...)):
    """Run a tool by name with a JSON arguments object."""
    try:
        result = call_tool(name, arguments)
    except UnknownToolError:
        raise HTTPException(status_code=404, detail=f"Unknown tool: {name}")
    except InvalidLoanTermsError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return ToolResponse(name=name, result=result)
