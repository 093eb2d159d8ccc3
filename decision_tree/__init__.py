"""Decision Tree Runtime — compiles and executes JSON action trees."""

from decision_tree.config import CONFIG, AppConfig, __version__
from decision_tree.domain import (
    ActionFactory,
    ActionValidationError,
    ConditionAction,
    DecisionTreeError,
    ExecutionContext,
    LoopAction,
    MissingNodeError,
    SendEmailAction,
    SendSmsAction,
    SequentialAction,
    TreeExecutor,
    evaluate,
    evaluate_async,
)
from decision_tree.ports import Action, ActionExecutor, ActionNode

__all__ = [
    "__version__",
    "CONFIG",
    "AppConfig",
    "Action",
    "ActionExecutor",
    "ActionFactory",
    "ActionNode",
    "ActionValidationError",
    "ConditionAction",
    "DecisionTreeError",
    "ExecutionContext",
    "LoopAction",
    "MissingNodeError",
    "SendEmailAction",
    "SendSmsAction",
    "SequentialAction",
    "TreeExecutor",
    "evaluate",
    "evaluate_async",
]
