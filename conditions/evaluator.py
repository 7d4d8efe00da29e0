# ============================================================================
# CONDITION EVALUATOR
# ============================================================================
# EPOCH: 1 - DATABASE MONITORS
# STATUS: Core - Condition tree evaluation
# PURPOSE: Evaluate expression trees against runtime variable bindings
# CREATED: 19 OCT 2026
# ============================================================================
"""
Condition Evaluator

Stateless: takes a tree and a context of variable bindings and returns a
boolean. Children are folded left to right; each child combines with the
accumulated result using its own `and_or`. An empty group is true.

Example:
    group = ConditionExpressionGroup.from_monitor(target)
    if evaluate_expression_group(group, {"result": "42"}):
        ...
"""

import logging
from typing import Any, Dict, Optional

from conditions.expression import (
    AND,
    ConditionExpression,
    ConditionExpressionGroup,
)
from conditions.operators import get_operator
from core.errors import ConditionError

logger = logging.getLogger(__name__)


def evaluate_expression(
    expression: ConditionExpression,
    context: Dict[str, Any],
) -> bool:
    """
    Evaluate a single expression.

    Raises:
        ConditionError: Variable not bound or operator unknown
    """
    if expression.variable not in context:
        raise ConditionError(f"Invalid condition variable: {expression.variable}")

    op = get_operator(expression.operator)
    if op is None:
        raise ConditionError(f"Invalid condition operator: {expression.operator}")

    left = context[expression.variable]
    result = op.test(left, expression.value)

    logger.debug(
        f"Condition {expression.variable} {op.id} {expression.value!r} "
        f"(actual {left!r}) -> {result}"
    )
    return result


def evaluate_expression_group(
    group: ConditionExpressionGroup,
    context: Dict[str, Any],
) -> bool:
    """
    Evaluate a group of expressions and nested groups.

    Args:
        group: Condition tree root or subgroup
        context: Variable name -> bound value

    Returns:
        True if the group is satisfied
    """
    result: Optional[bool] = None

    for child in group.children:
        if isinstance(child, ConditionExpressionGroup):
            child_result = evaluate_expression_group(child, context)
        else:
            child_result = evaluate_expression(child, context)

        if result is None:
            result = child_result
        elif child.and_or == AND:
            result = result and child_result
        else:
            result = result or child_result

    return True if result is None else result


__all__ = [
    "evaluate_expression",
    "evaluate_expression_group",
]
