# ============================================================================
# CONDITION EXPRESSION TREE
# ============================================================================
# EPOCH: 1 - DATABASE MONITORS
# STATUS: Core - Condition tree construction
# PURPOSE: Build expression trees from stored monitor conditions
# CREATED: 19 OCT 2026
# ============================================================================
"""
Condition Expression Tree

Monitors store their conditions as a JSON list of nodes:

    [
        {"type": "expression", "andOr": "and",
         "variable": "result", "operator": "equals", "value": "42"},
        {"type": "group", "andOr": "or", "children": [ ... ]}
    ]

The top-level list becomes the children of a root ConditionExpressionGroup.
`andOr` says how a node combines with the result accumulated before it.
"""

import json
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Union

from core.errors import ConditionError

AND = "and"
OR = "or"


@dataclass
class ConditionExpression:
    """A single `variable operator value` predicate."""
    variable: str
    operator: str
    value: str = ""
    and_or: str = AND

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ConditionExpression":
        try:
            return cls(
                variable=data["variable"],
                operator=data["operator"],
                value="" if data.get("value") is None else str(data["value"]),
                and_or=_and_or(data.get("andOr", AND)),
            )
        except KeyError as e:
            raise ConditionError(f"Condition expression is missing field: {e.args[0]}")

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": "expression",
            "andOr": self.and_or,
            "variable": self.variable,
            "operator": self.operator,
            "value": self.value,
        }


@dataclass
class ConditionExpressionGroup:
    """An ordered group of expressions and nested groups."""
    children: List[Union[ConditionExpression, "ConditionExpressionGroup"]] = field(
        default_factory=list
    )
    and_or: str = AND

    @property
    def is_empty(self) -> bool:
        return len(self.children) == 0

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ConditionExpressionGroup":
        return cls(
            children=_build_children(data.get("children") or []),
            and_or=_and_or(data.get("andOr", AND)),
        )

    @classmethod
    def from_list(cls, nodes: List[Dict[str, Any]]) -> "ConditionExpressionGroup":
        return cls(children=_build_children(nodes))

    @classmethod
    def from_monitor(cls, monitor: Any) -> Optional["ConditionExpressionGroup"]:
        """
        Build the root group from a monitor's stored conditions.

        Args:
            monitor: Object or dict with a `conditions` attribute/key holding
                a JSON string or a decoded list

        Returns:
            Root group, or None when the monitor has no conditions

        Raises:
            ConditionError: Conditions are not valid JSON or not a list
        """
        if isinstance(monitor, dict):
            raw = monitor.get("conditions")
        else:
            raw = getattr(monitor, "conditions", None)

        if raw is None:
            return None

        if isinstance(raw, str):
            if not raw.strip():
                return None
            try:
                raw = json.loads(raw)
            except json.JSONDecodeError as e:
                raise ConditionError(f"Conditions are not valid JSON: {e}")

        if not isinstance(raw, list):
            raise ConditionError("Conditions must be a list")

        return cls.from_list(raw)

    def to_list(self) -> List[Dict[str, Any]]:
        return [child.to_dict() for child in self.children]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": "group",
            "andOr": self.and_or,
            "children": self.to_list(),
        }


def _and_or(value: Any) -> str:
    value = str(value or AND).lower()
    if value not in (AND, OR):
        raise ConditionError(f"Invalid andOr value: {value}")
    return value


def _build_children(
    nodes: List[Dict[str, Any]],
) -> List[Union[ConditionExpression, ConditionExpressionGroup]]:
    children = []
    for node in nodes:
        if not isinstance(node, dict):
            raise ConditionError(f"Invalid condition node: {node!r}")

        node_type = node.get("type", "expression")
        if node_type == "expression":
            children.append(ConditionExpression.from_dict(node))
        elif node_type == "group":
            children.append(ConditionExpressionGroup.from_dict(node))
        else:
            raise ConditionError(f"Unknown condition node type: {node_type}")
    return children


__all__ = [
    "AND",
    "OR",
    "ConditionExpression",
    "ConditionExpressionGroup",
]
