"""Decision tree exceptions."""


class DecisionTreeError(Exception):
    """Base class for decision tree errors"""
    pass


class MissingNodeError(DecisionTreeError, ValueError):
    """Raised when the factory is handed no node at all"""
    pass


class ActionValidationError(DecisionTreeError, ValueError):
    """Raised when a node is missing a required parameter"""
    pass


class ExpressionError(DecisionTreeError):
    """Raised while parsing or evaluating a condition expression"""
    pass


class ExpressionSyntaxError(ExpressionError):
    pass


class ExpressionEvaluationError(ExpressionError):
    pass
