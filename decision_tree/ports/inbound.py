"""Inbound port — transport-agnostic decision tree description."""

from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional

# JSON key -> ActionNode attribute for nested node references
NESTED_KEYS = {
    "next": "next",
    "trueAction": "true_action",
    "falseAction": "false_action",
    "subtree": "subtree",
}


@dataclass
class ActionNode:
    """One node of a requested decision tree, as received from a caller.

    Untrusted: nothing here is validated beyond its shape. Parameter
    validation happens when the factory compiles the node.
    """

    type: Optional[str]  # "sms" | "email" | "condition" | "loop"
    params: Dict[str, Any] = field(default_factory=dict)
    next: Optional["ActionNode"] = None
    true_action: Optional["ActionNode"] = None
    false_action: Optional["ActionNode"] = None
    subtree: Optional["ActionNode"] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ActionNode":
        """Build a node (and its nested nodes) from a parsed JSON object.

        ``next`` links are followed in a loop, so chain length does not
        add call depth.
        """
        if not isinstance(data, Mapping):
            raise ValueError("ActionNode must be an object")

        head = node = cls._from_fields(data)
        raw = data.get("next")
        while raw is not None:
            if not isinstance(raw, Mapping):
                raise ValueError("'next' must be an object")
            node.next = cls._from_fields(raw)
            node, raw = node.next, raw.get("next")
        return head

    @classmethod
    def _from_fields(cls, data: Mapping[str, Any]) -> "ActionNode":
        # Everything but ``next``, which from_dict links up
        node_type = data.get("type")
        params = data.get("params")
        if params is None:
            params = {}
        elif not isinstance(params, Mapping):
            raise ValueError("'params' must be an object")

        nested: Dict[str, Optional[ActionNode]] = {}
        for key, attr in NESTED_KEYS.items():
            raw = data.get(key)
            if key == "next" or raw is None:
                nested[attr] = None
            elif isinstance(raw, Mapping):
                nested[attr] = cls.from_dict(raw)
            else:
                raise ValueError(f"'{key}' must be an object")

        return cls(
            type=node_type if isinstance(node_type, str) else None,
            params=dict(params),
            **nested,
        )
