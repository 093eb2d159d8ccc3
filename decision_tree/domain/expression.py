"""Condition expressions — a small, sandboxed boolean/comparison language.

Expressions never run host code: the text is tokenized, parsed into a tiny
tree and evaluated directly against the execution variables.

Supported:
- literals: true, false, numbers (42, -1.5), strings ("a", 'b')
- variable references, resolved against the context variables
- comparisons: == != < <= > >=
- logic: ! && || (short-circuit) and parentheses

Precedence, tightest first: !, comparisons, &&, ||.
"""

from __future__ import annotations

import operator
import re
from dataclasses import dataclass
from typing import Any, List, Mapping, Optional, Union

from decision_tree.domain.errors import (
    ExpressionError,
    ExpressionEvaluationError,
    ExpressionSyntaxError,
)
from decision_tree.domain.trail import log_event

_TOKEN_RE = re.compile(
    r"""
    (?P<number>-?\d+(?:\.\d+)?)
    |(?P<string>"(?:[^"\\]|\\.)*"|'(?:[^'\\]|\\.)*')
    |(?P<op>==|!=|<=|>=|&&|\|\||[<>!()])
    |(?P<name>[A-Za-z_][A-Za-z0-9_]*)
    """,
    re.VERBOSE,
)
_WHITESPACE_RE = re.compile(r"\s+")
# Backslash escapes the next character inside string literals
_ESCAPE_RE = re.compile(r"\\(.)", re.DOTALL)

KEYWORDS = {"true": True, "false": False}

_COMPARATORS = {
    "==": operator.eq,
    "!=": operator.ne,
    "<": operator.lt,
    "<=": operator.le,
    ">": operator.gt,
    ">=": operator.ge,
}


@dataclass(frozen=True)
class Token:
    kind: str  # "number" | "string" | "op" | "name"
    text: str
    pos: int


@dataclass(frozen=True)
class Literal:
    value: Any


@dataclass(frozen=True)
class Variable:
    name: str


@dataclass(frozen=True)
class Not:
    operand: "Expression"


@dataclass(frozen=True)
class Compare:
    op: str
    left: "Expression"
    right: "Expression"


@dataclass(frozen=True)
class Logical:
    op: str  # "&&" | "||"
    left: "Expression"
    right: "Expression"


Expression = Union[Literal, Variable, Not, Compare, Logical]


def tokenize(text: str) -> List[Token]:
    """Split expression text into tokens."""
    tokens: List[Token] = []
    pos = 0
    while pos < len(text):
        ws = _WHITESPACE_RE.match(text, pos)
        if ws:
            pos = ws.end()
            continue
        m = _TOKEN_RE.match(text, pos)
        if not m:
            raise ExpressionSyntaxError(f"Unexpected character {text[pos]!r} at position {pos}")
        tokens.append(Token(kind=m.lastgroup, text=m.group(), pos=pos))
        pos = m.end()
    return tokens


class _Parser:
    """Recursive-descent parser over the token list."""

    def __init__(self, text: str):
        self._tokens = tokenize(text)
        self._index = 0

    def parse(self) -> Expression:
        if not self._tokens:
            raise ExpressionSyntaxError("Empty expression")
        node = self._or()
        tok = self._peek()
        if tok is not None:
            raise ExpressionSyntaxError(f"Unexpected token {tok.text!r} at position {tok.pos}")
        return node

    def _peek(self) -> Optional[Token]:
        if self._index < len(self._tokens):
            return self._tokens[self._index]
        return None

    def _accept(self, *ops: str) -> Optional[Token]:
        tok = self._peek()
        if tok is not None and tok.kind == "op" and tok.text in ops:
            self._index += 1
            return tok
        return None

    def _or(self) -> Expression:
        node = self._and()
        while self._accept("||"):
            node = Logical("||", node, self._and())
        return node

    def _and(self) -> Expression:
        node = self._comparison()
        while self._accept("&&"):
            node = Logical("&&", node, self._comparison())
        return node

    def _comparison(self) -> Expression:
        node = self._unary()
        tok = self._accept(*_COMPARATORS)
        if tok:
            node = Compare(tok.text, node, self._unary())
            extra = self._accept(*_COMPARATORS)
            if extra:
                raise ExpressionSyntaxError(
                    f"Chained comparison {extra.text!r} at position {extra.pos}; use && instead"
                )
        return node

    def _unary(self) -> Expression:
        if self._accept("!"):
            return Not(self._unary())
        return self._primary()

    def _primary(self) -> Expression:
        tok = self._peek()
        if tok is None:
            raise ExpressionSyntaxError("Unexpected end of expression")
        self._index += 1

        if tok.kind == "number":
            try:
                return Literal(float(tok.text) if "." in tok.text else int(tok.text))
            except ValueError as e:
                # int() refuses overly long digit strings
                raise ExpressionSyntaxError(f"Invalid number at position {tok.pos}: {e}") from e
        if tok.kind == "string":
            return Literal(_ESCAPE_RE.sub(r"\1", tok.text[1:-1]))
        if tok.kind == "name":
            if tok.text in KEYWORDS:
                return Literal(KEYWORDS[tok.text])
            return Variable(tok.text)
        if tok.text == "(":
            node = self._or()
            if not self._accept(")"):
                raise ExpressionSyntaxError(f"Missing ')' for '(' at position {tok.pos}")
            return node
        raise ExpressionSyntaxError(f"Unexpected token {tok.text!r} at position {tok.pos}")


def parse_expression(text: str) -> Expression:
    """Parse expression text into an evaluation tree."""
    return _Parser(text).parse()


def _kind(value: Any) -> Optional[str]:
    # bool first: bool is an int subclass but never compares as a number here
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    return None


def _require_bool(value: Any, where: str) -> bool:
    if not isinstance(value, bool):
        raise ExpressionEvaluationError(
            f"{where} expects a boolean, got {_kind(value) or type(value).__name__}"
        )
    return value


def _compare(op: str, left: Any, right: Any) -> bool:
    left_kind, right_kind = _kind(left), _kind(right)
    if left_kind != right_kind:
        raise ExpressionEvaluationError(f"Cannot compare {left_kind} with {right_kind} using '{op}'")
    if left_kind == "boolean" and op not in ("==", "!="):
        raise ExpressionEvaluationError(f"Operator '{op}' does not apply to booleans")
    return _COMPARATORS[op](left, right)


def _evaluate(node: Expression, variables: Mapping[str, Any]) -> Any:
    if isinstance(node, Literal):
        return node.value

    if isinstance(node, Variable):
        if node.name not in variables:
            raise ExpressionEvaluationError(f"Unknown variable '{node.name}'")
        value = variables[node.name]
        if _kind(value) is None:
            raise ExpressionEvaluationError(
                f"Variable '{node.name}' has unsupported type {type(value).__name__}"
            )
        return value

    if isinstance(node, Not):
        return not _require_bool(_evaluate(node.operand, variables), "Operator '!'")

    if isinstance(node, Logical):
        where = f"Operator '{node.op}'"
        left = _require_bool(_evaluate(node.left, variables), where)
        if node.op == "&&" and not left:
            return False
        if node.op == "||" and left:
            return True
        return _require_bool(_evaluate(node.right, variables), where)

    if isinstance(node, Compare):
        return _compare(node.op, _evaluate(node.left, variables), _evaluate(node.right, variables))

    raise ExpressionEvaluationError(f"Unsupported expression node: {node!r}")


def evaluate(expression: str, variables: Mapping[str, Any]) -> bool:
    """Evaluate a condition against the variables; any failure yields False.

    Errors are logged to the trail and never propagate. The variables
    mapping is only read.
    """
    try:
        return _require_bool(_evaluate(parse_expression(expression), variables), "Condition")
    except (ExpressionError, RecursionError) as e:
        log_event(
            "ConditionAction: Error evaluating expression",
            {"expression": expression, "error": str(e)},
        )
        return False


async def evaluate_async(expression: str, variables: Mapping[str, Any]) -> bool:
    """Awaitable form of :func:`evaluate`, the suspension point actions await."""
    return evaluate(expression, variables)
