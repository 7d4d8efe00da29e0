# ============================================================================
# MONITOR TYPE REGISTRY
# ============================================================================
# EPOCH: 1 - DATABASE MONITORS
# STATUS: Monitors - Monitor type registration
# PURPOSE: Register and look up monitor types by name
# CREATED: 19 OCT 2026
# ============================================================================
"""
Monitor Type Registry

Manages registration and lookup of monitor type plugins.

Usage:
    # Decorator registration
    @register_monitor_type()
    class OracleMonitorType(MonitorType):
        name = "oracle"
        ...

    # Manual registration
    registry = get_registry()
    registry.register(OracleMonitorType())

    # Select by name
    monitor_type = registry.require("oracle")
"""

import logging
from typing import Dict, List, Optional, Type

from monitors.core import MonitorType

logger = logging.getLogger(__name__)


# ============================================================================
# EXCEPTIONS
# ============================================================================

class MonitorTypeNotFoundError(KeyError):
    """Raised when no monitor type is registered under a name."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Monitor type not found: {name}")

    def __str__(self) -> str:
        return self.args[0]


# ============================================================================
# REGISTRY
# ============================================================================

class MonitorTypeRegistry:
    """
    Registry for monitor type plugins.

    Holds one instance per monitor type name.
    """

    def __init__(self):
        self._types: Dict[str, MonitorType] = {}

    def register(self, monitor_type: MonitorType) -> None:
        """
        Register a monitor type instance.

        Args:
            monitor_type: Plugin instance to register
        """
        if monitor_type.name in self._types:
            logger.warning(f"Overwriting monitor type: {monitor_type.name}")

        self._types[monitor_type.name] = monitor_type
        logger.debug(
            f"Registered monitor type: {monitor_type.name} "
            f"(conditions={monitor_type.supports_conditions})"
        )

    def register_class(
        self,
        type_class: Type[MonitorType],
        **kwargs
    ) -> MonitorType:
        """
        Instantiate and register a monitor type class.

        Returns:
            The instantiated plugin
        """
        instance = type_class(**kwargs)
        self.register(instance)
        return instance

    def unregister(self, name: str) -> bool:
        """
        Remove a monitor type by name.

        Returns:
            True if the type was removed
        """
        if name in self._types:
            del self._types[name]
            return True
        return False

    def get(self, name: str) -> Optional[MonitorType]:
        """Get monitor type by name."""
        return self._types.get(name)

    def require(self, name: str) -> MonitorType:
        """Get monitor type by name or raise MonitorTypeNotFoundError."""
        monitor_type = self._types.get(name)
        if monitor_type is None:
            raise MonitorTypeNotFoundError(name)
        return monitor_type

    def get_all(self) -> List[MonitorType]:
        """Get all registered types."""
        return list(self._types.values())

    def names(self) -> List[str]:
        return sorted(self._types)

    def clear(self) -> None:
        """Remove all registered types."""
        self._types.clear()

    def __len__(self) -> int:
        return len(self._types)

    def __contains__(self, name: str) -> bool:
        return name in self._types


# ============================================================================
# GLOBAL REGISTRY & DECORATOR
# ============================================================================

_registry: Optional[MonitorTypeRegistry] = None


def get_registry() -> MonitorTypeRegistry:
    """Get the global monitor type registry."""
    global _registry
    if _registry is None:
        _registry = MonitorTypeRegistry()
    return _registry


def register_monitor_type(name: str = None):
    """
    Decorator to register a monitor type class.

    Args:
        name: Override the class `name` attribute

    Example:
        @register_monitor_type()
        class OracleMonitorType(MonitorType):
            name = "oracle"
    """
    def decorator(cls: Type[MonitorType]) -> Type[MonitorType]:
        if name is not None:
            cls.name = name

        get_registry().register_class(cls)
        return cls

    return decorator


# ============================================================================
# EXPORTS
# ============================================================================

__all__ = [
    "MonitorTypeNotFoundError",
    "MonitorTypeRegistry",
    "get_registry",
    "register_monitor_type",
]
