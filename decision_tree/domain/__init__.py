"""Domain layer — pure Python, no framework dependencies."""

from decision_tree.domain.actions import (
    ActionVariant,
    ConditionAction,
    LoopAction,
    SendEmailAction,
    SendSmsAction,
    SequentialAction,
)
from decision_tree.domain.errors import (
    ActionValidationError,
    DecisionTreeError,
    ExpressionError,
    ExpressionEvaluationError,
    ExpressionSyntaxError,
    MissingNodeError,
)
from decision_tree.domain.executor import TreeExecutor
from decision_tree.domain.expression import evaluate, evaluate_async, parse_expression, tokenize
from decision_tree.domain.factory import ActionFactory
from decision_tree.domain.models import ACTION_TYPES, ExecutionContext
from decision_tree.domain.trail import log_event

__all__ = [
    "ACTION_TYPES",
    "ActionFactory",
    "ActionValidationError",
    "ActionVariant",
    "ConditionAction",
    "DecisionTreeError",
    "ExecutionContext",
    "ExpressionError",
    "ExpressionEvaluationError",
    "ExpressionSyntaxError",
    "LoopAction",
    "MissingNodeError",
    "SendEmailAction",
    "SendSmsAction",
    "SequentialAction",
    "TreeExecutor",
    "evaluate",
    "evaluate_async",
    "log_event",
    "parse_expression",
    "tokenize",
]
