"""Outbound ports — interfaces the runtime depends on."""

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from decision_tree.domain.models import ExecutionContext


@runtime_checkable
class Action(Protocol):
    """Compiled, executable node of a decision tree."""

    async def execute(self, context: "ExecutionContext") -> None: ...


@runtime_checkable
class ActionExecutor(Protocol):
    """Driver used by composite actions to run their children."""

    async def execute_action(self, action: Action, context: "ExecutionContext") -> None: ...
