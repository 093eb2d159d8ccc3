"""Tree executor — the driver composite actions delegate to."""

from decision_tree.domain.models import ExecutionContext
from decision_tree.ports.outbound import Action


class TreeExecutor:
    """Runs actions against a context. Holds no state, safe to share."""

    async def execute_action(self, action: Action, context: ExecutionContext) -> None:
        await action.execute(context)

    async def execute_chain(self, action: Action, context: ExecutionContext) -> None:
        """Run a compiled chain from its head action."""
        await self.execute_action(action, context)
