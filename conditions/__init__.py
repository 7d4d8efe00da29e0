# ============================================================================
# CONDITIONS MODULE
# ============================================================================
# EPOCH: 1 - DATABASE MONITORS
# STATUS: Core - Monitor condition expressions
# PURPOSE: Declarative pass/fail rules evaluated against check results
# CREATED: 19 OCT 2026
# ============================================================================
"""
Conditions Module

Monitor types that support conditions declare ConditionVariables; the stored
condition list is built into a ConditionExpressionGroup and evaluated with
the values the check binds at runtime.

Usage:
    from conditions import ConditionExpressionGroup, evaluate_expression_group

    group = ConditionExpressionGroup.from_monitor(target)
    ok = evaluate_expression_group(group, {"result": "42"})
"""

from conditions.operators import (
    ConditionOperator,
    DEFAULT_STRING_OPERATORS,
    DEFAULT_NUMBER_OPERATORS,
    get_operator,
)
from conditions.variables import ConditionVariable
from conditions.expression import ConditionExpression, ConditionExpressionGroup
from conditions.evaluator import evaluate_expression, evaluate_expression_group

__all__ = [
    # Operators
    "ConditionOperator",
    "DEFAULT_STRING_OPERATORS",
    "DEFAULT_NUMBER_OPERATORS",
    "get_operator",
    # Variables
    "ConditionVariable",
    # Tree
    "ConditionExpression",
    "ConditionExpressionGroup",
    # Evaluation
    "evaluate_expression",
    "evaluate_expression_group",
]
