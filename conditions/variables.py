# ============================================================================
# CONDITION VARIABLES
# ============================================================================
# EPOCH: 1 - DATABASE MONITORS
# STATUS: Core - Variables a monitor type exposes to conditions
# PURPOSE: Named runtime values and the operators allowed on them
# CREATED: 19 OCT 2026
# ============================================================================

from typing import Dict, List, Any

from conditions.operators import ConditionOperator


class ConditionVariable:
    """A runtime value a monitor type binds during a check."""

    def __init__(self, id: str, operators: List[ConditionOperator]):
        self.id = id
        self.operators = list(operators)

    def supports(self, operator_id: str) -> bool:
        return any(op.id == operator_id for op in self.operators)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "operators": [{"id": op.id, "caption": op.caption} for op in self.operators],
        }

    def __repr__(self) -> str:
        return f"ConditionVariable({self.id!r})"


__all__ = ["ConditionVariable"]
