"""Action variants — the compiled, executable form of a decision tree.

The set is closed: the factory maps each node type to exactly one of these.
Every action is immutable once built; composite actions run their children
through an injected ActionExecutor rather than calling them directly.
"""

from dataclasses import dataclass, field
from typing import Optional, Union

from decision_tree.domain.expression import evaluate_async
from decision_tree.domain.models import ExecutionContext
from decision_tree.domain.trail import log_event
from decision_tree.ports.outbound import Action, ActionExecutor


@dataclass(frozen=True)
class SendSmsAction:
    """Send an SMS to a phone number (logged, not dispatched)."""

    phone_number: str

    async def execute(self, context: ExecutionContext) -> None:
        log_event("SendSmsAction: Sending SMS", {"phoneNumber": self.phone_number})


@dataclass(frozen=True)
class SendEmailAction:
    """Send an email from sender to receiver (logged, not dispatched)."""

    sender: str
    receiver: str

    async def execute(self, context: ExecutionContext) -> None:
        log_event(
            "SendEmailAction: Sending Email",
            {"sender": self.sender, "receiver": self.receiver},
        )


@dataclass(frozen=True)
class ConditionAction:
    """Run true_action or false_action depending on an expression.

    A missing branch is a no-op. Expression errors count as false.
    """

    expression: str
    true_action: Optional[Action]
    false_action: Optional[Action]
    executor: ActionExecutor = field(repr=False, compare=False)

    async def execute(self, context: ExecutionContext) -> None:
        result = await evaluate_async(self.expression, context.variables)

        log_event(
            "ConditionAction: Evaluating expression",
            {"expression": self.expression, "result": result},
        )

        branch = self.true_action if result else self.false_action
        if branch is not None:
            await self.executor.execute_action(branch, context)


@dataclass(frozen=True)
class LoopAction:
    """Run a subtree count times against the same context."""

    count: int
    subtree: Optional[Action]
    executor: ActionExecutor = field(repr=False, compare=False)

    async def execute(self, context: ExecutionContext) -> None:
        log_event("LoopAction: Starting loop", {"count": self.count})

        if self.subtree is None:
            log_event("LoopAction: No subtree provided, skipping")
            return

        for i in range(self.count):
            log_event("LoopAction: Iteration", {"iteration": i + 1, "of": self.count})
            await self.executor.execute_action(self.subtree, context)

        log_event("LoopAction: Loop completed", {"totalIterations": self.count})


@dataclass(frozen=True)
class SequentialAction:
    """Run first to completion, then next. Built from ``next`` links.

    A chain of SequentialActions is stepped through in a loop; each
    ``first`` and the final ``next`` still go through the executor.
    """

    first: Action
    next: Action
    executor: ActionExecutor = field(repr=False, compare=False)

    async def execute(self, context: ExecutionContext) -> None:
        link = self
        while True:
            await link.executor.execute_action(link.first, context)
            if not isinstance(link.next, SequentialAction):
                await link.executor.execute_action(link.next, context)
                return
            link = link.next


ActionVariant = Union[SendSmsAction, SendEmailAction, ConditionAction, LoopAction, SequentialAction]
