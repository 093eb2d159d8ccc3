"""Port interfaces (Hexagonal Architecture)."""

from decision_tree.ports.inbound import ActionNode
from decision_tree.ports.outbound import Action, ActionExecutor

__all__ = [
    "ActionNode",
    "Action",
    "ActionExecutor",
]
