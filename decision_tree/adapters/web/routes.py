"""Decision tree execution API routes."""

import json
import sys
from typing import Any, Dict

from fastapi import APIRouter, Body, HTTPException
from pydantic import BaseModel

from decision_tree.config import CONFIG
from decision_tree.domain.executor import TreeExecutor
from decision_tree.domain.factory import ActionFactory
from decision_tree.domain.models import ExecutionContext
from decision_tree.ports.inbound import ActionNode

tree_router = APIRouter(tags=["Decision Tree"])

# Stateless, shared by all requests; each request gets its own context
executor = TreeExecutor()
factory = ActionFactory(executor)

INVALID_BODY_DETAIL = "Invalid request body. Expected an ActionNode with a 'type' property."
NO_ACTION_DETAIL = "Failed to create action from the provided decision tree."
TOO_DEEP_DETAIL = "Decision tree is nested too deeply."


def _log(msg: str):
    print(msg, file=sys.stderr)


class ExecuteResponse(BaseModel):
    success: bool
    message: str
    variables: Dict[str, Any] = {}


class HealthResponse(BaseModel):
    status: str


@tree_router.post("/execute", response_model=ExecuteResponse)
async def execute_tree(payload: Any = Body(None)):
    """Compile and run a decision tree, returning the final variables."""
    if CONFIG.get("log_requests", True):
        _log("\n=== NEW REQUEST RECEIVED ===")
        _log(f"Request body: {json.dumps(payload, ensure_ascii=False, default=str)}")

    if not isinstance(payload, dict) or not payload.get("type"):
        raise HTTPException(status_code=400, detail=INVALID_BODY_DETAIL)

    try:
        action = factory.create_action_tree(ActionNode.from_dict(payload))
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))
    except RecursionError:
        raise HTTPException(status_code=422, detail=TOO_DEEP_DETAIL)

    if action is None:
        raise HTTPException(status_code=400, detail=NO_ACTION_DETAIL)

    context = ExecutionContext()
    _log("Executing decision tree...")
    try:
        await executor.execute_action(action, context)
    except RecursionError:
        _log("Error executing decision tree: nesting too deep")
        raise HTTPException(status_code=422, detail=TOO_DEEP_DETAIL)
    except Exception as e:
        _log(f"Error executing decision tree: {e}")
        raise HTTPException(
            status_code=500,
            detail=f"An error occurred while executing the decision tree: {e}",
        )
    _log("=== EXECUTION COMPLETE ===")

    return ExecuteResponse(
        success=True,
        message="Decision tree executed successfully",
        variables=context.get_variables(),
    )


@tree_router.get("/health", response_model=HealthResponse)
async def health():
    return HealthResponse(status="ok")
