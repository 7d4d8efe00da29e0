# ============================================================================
# CONDITION OPERATORS
# ============================================================================
# EPOCH: 1 - DATABASE MONITORS
# STATUS: Core - Comparison operators for monitor conditions
# PURPOSE: String and number predicates addressed by operator id
# CREATED: 19 OCT 2026
# ============================================================================
"""
Condition Operators

Each operator compares a runtime value (left) with the value stored in the
condition (right). Runtime values arrive as strings.

String operators:
    equals, not_equals, contains, not_contains,
    starts_with, not_starts_with, ends_with, not_ends_with

Number operators (operands coerced to float):
    lt, gt, le, ge
"""

import operator
from typing import Any, Callable, Dict, List, Optional

from core.errors import ConditionError


class ConditionOperator:
    """A named binary predicate."""

    def __init__(self, id: str, caption: str, func: Callable[[Any, Any], bool]):
        self.id = id
        self.caption = caption
        self._func = func

    def test(self, left: Any, right: Any) -> bool:
        return bool(self._func(left, right))

    def __repr__(self) -> str:
        return f"ConditionOperator({self.id!r})"


def _as_str(value: Any) -> str:
    return "" if value is None else str(value)


def _as_number(value: Any) -> float:
    try:
        return float(value)
    except (TypeError, ValueError):
        raise ConditionError(f"Value is not a number: {value!r}")


def _string_op(func: Callable[[str, str], bool]) -> Callable[[Any, Any], bool]:
    return lambda a, b: func(_as_str(a), _as_str(b))


def _number_op(func: Callable[[float, float], bool]) -> Callable[[Any, Any], bool]:
    return lambda a, b: func(_as_number(a), _as_number(b))


# ============================================================================
# OPERATOR DEFINITIONS
# ============================================================================

OP_EQUALS = ConditionOperator("equals", "equals", _string_op(operator.eq))
OP_NOT_EQUALS = ConditionOperator("not_equals", "not equals", _string_op(operator.ne))
OP_CONTAINS = ConditionOperator("contains", "contains", _string_op(lambda a, b: b in a))
OP_NOT_CONTAINS = ConditionOperator("not_contains", "not contains", _string_op(lambda a, b: b not in a))
OP_STARTS_WITH = ConditionOperator("starts_with", "starts with", _string_op(lambda a, b: a.startswith(b)))
OP_NOT_STARTS_WITH = ConditionOperator(
    "not_starts_with", "not starts with", _string_op(lambda a, b: not a.startswith(b))
)
OP_ENDS_WITH = ConditionOperator("ends_with", "ends with", _string_op(lambda a, b: a.endswith(b)))
OP_NOT_ENDS_WITH = ConditionOperator(
    "not_ends_with", "not ends with", _string_op(lambda a, b: not a.endswith(b))
)

OP_LT = ConditionOperator("lt", "less than", _number_op(operator.lt))
OP_GT = ConditionOperator("gt", "greater than", _number_op(operator.gt))
OP_LE = ConditionOperator("le", "less than or equal to", _number_op(operator.le))
OP_GE = ConditionOperator("ge", "greater than or equal to", _number_op(operator.ge))

DEFAULT_STRING_OPERATORS: List[ConditionOperator] = [
    OP_EQUALS,
    OP_NOT_EQUALS,
    OP_CONTAINS,
    OP_NOT_CONTAINS,
    OP_STARTS_WITH,
    OP_NOT_STARTS_WITH,
    OP_ENDS_WITH,
    OP_NOT_ENDS_WITH,
]

DEFAULT_NUMBER_OPERATORS: List[ConditionOperator] = [
    OP_EQUALS,
    OP_NOT_EQUALS,
    OP_LT,
    OP_GT,
    OP_LE,
    OP_GE,
]

OPERATORS: Dict[str, ConditionOperator] = {
    op.id: op for op in DEFAULT_STRING_OPERATORS + DEFAULT_NUMBER_OPERATORS
}


def get_operator(operator_id: str) -> Optional[ConditionOperator]:
    """Look up an operator by id."""
    return OPERATORS.get(operator_id)


__all__ = [
    "ConditionOperator",
    "DEFAULT_STRING_OPERATORS",
    "DEFAULT_NUMBER_OPERATORS",
    "OPERATORS",
    "get_operator",
]
