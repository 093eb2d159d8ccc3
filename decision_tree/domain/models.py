"""Domain data models — pure Python, no framework dependencies."""

from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional

# Node types the factory knows how to compile
ACTION_TYPES = ("sms", "email", "condition", "loop")


class ExecutionContext:
    """Variable store shared by every action of one tree execution.

    One instance per execution, passed by reference through the whole tree,
    so mutations are observed in execution order.
    """

    def __init__(self, variables: Optional[Mapping[str, Any]] = None):
        self._variables: Dict[str, Any] = dict(variables or {})

    def set_variable(self, name: str, value: Any):
        self._variables[name] = value

    def get_variable(self, name: str, default: Any = None) -> Any:
        return self._variables.get(name, default)

    def has_variable(self, name: str) -> bool:
        return name in self._variables

    def get_variables(self) -> Dict[str, Any]:
        """Snapshot of all variables, in insertion order."""
        return dict(self._variables)

    @property
    def variables(self) -> Mapping[str, Any]:
        """Read-only live view of the variables."""
        return MappingProxyType(self._variables)

    def __len__(self) -> int:
        return len(self._variables)

    def __repr__(self) -> str:
        return f"ExecutionContext({self._variables!r})"
