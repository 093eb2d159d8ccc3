"""Action factory — compiles ActionNode descriptions into Action trees.

Three outcomes per node:
- an Action
- None for an unknown or missing type (nothing to execute, not an error)
- ActionValidationError when a recognized type lacks a required parameter
"""

import math
import sys
from typing import Any, Callable, Dict, Mapping, Optional, Union

from decision_tree.domain.actions import (
    ConditionAction,
    LoopAction,
    SendEmailAction,
    SendSmsAction,
    SequentialAction,
)
from decision_tree.domain.errors import ActionValidationError, MissingNodeError
from decision_tree.domain.models import ACTION_TYPES
from decision_tree.ports.inbound import ActionNode
from decision_tree.ports.outbound import Action, ActionExecutor


def _log(msg: str):
    print(msg, file=sys.stderr)


def _is_non_negative_integer(value: Any) -> bool:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    if isinstance(value, float) and (not math.isfinite(value) or not value.is_integer()):
        return False
    return value >= 0


class ActionFactory:
    """Builds Action trees from untrusted node descriptions."""

    def __init__(self, executor: ActionExecutor):
        self.executor = executor
        self._builders: Dict[str, Callable[[ActionNode], Action]] = {
            "sms": self._create_send_sms_action,
            "email": self._create_send_email_action,
            "condition": self._create_condition_action,
            "loop": self._create_loop_action,
        }

    def create_action(self, node: Optional[ActionNode]) -> Optional[Action]:
        """Compile a single node, ignoring its ``next`` link.

        Raises MissingNodeError when node is None.
        """
        if node is None:
            raise MissingNodeError("Cannot create an action without a node")
        if not isinstance(node.type, str) or node.type not in ACTION_TYPES:
            _log(f"Unknown action type: {node.type!r}")
            return None
        return self._builders[node.type](node)

    def create_action_tree(
        self, node: Union[ActionNode, Mapping[str, Any], None]
    ) -> Optional[Action]:
        """Compile a node and everything chained after it via ``next``.

        Raises MissingNodeError when node is None. An unknown type ends
        the chain at that node.
        """
        if node is None:
            raise MissingNodeError("Cannot create an action tree without a node")
        if not isinstance(node, ActionNode):
            node = ActionNode.from_dict(node)

        actions = []
        while node is not None:
            action = self.create_action(node)
            if action is None:
                break
            actions.append(action)
            node = node.next

        if not actions:
            return None

        # Right-leaning: SequentialAction(a, SequentialAction(b, c))
        tree = actions.pop()
        while actions:
            tree = SequentialAction(actions.pop(), tree, self.executor)
        return tree

    def _create_nested(self, node: Optional[ActionNode]) -> Optional[Action]:
        # Absent branches and subtrees compile to "nothing to run"
        if node is None:
            return None
        return self.create_action_tree(node)

    def _create_send_sms_action(self, node: ActionNode) -> SendSmsAction:
        phone_number = node.params.get("phoneNumber")
        if not phone_number or not isinstance(phone_number, str):
            raise ActionValidationError("SendSmsAction requires 'phoneNumber' parameter")
        return SendSmsAction(phone_number)

    def _create_send_email_action(self, node: ActionNode) -> SendEmailAction:
        missing = [
            key
            for key in ("sender", "receiver")
            if not node.params.get(key) or not isinstance(node.params.get(key), str)
        ]
        if missing:
            names = " and ".join(f"'{key}'" for key in missing)
            plural = "parameters" if len(missing) > 1 else "parameter"
            raise ActionValidationError(f"SendEmailAction requires {names} {plural}")
        return SendEmailAction(node.params["sender"], node.params["receiver"])

    def _create_condition_action(self, node: ActionNode) -> ConditionAction:
        expression = node.params.get("expression")
        if not isinstance(expression, str) or not expression.strip():
            raise ActionValidationError("ConditionAction requires 'expression' parameter")

        return ConditionAction(
            expression,
            self._create_nested(node.true_action),
            self._create_nested(node.false_action),
            self.executor,
        )

    def _create_loop_action(self, node: ActionNode) -> LoopAction:
        count = node.params.get("count")
        if not _is_non_negative_integer(count):
            raise ActionValidationError(
                "LoopAction requires 'count' parameter as a non-negative integer"
            )

        return LoopAction(int(count), self._create_nested(node.subtree), self.executor)
