# implkit/runtime/default.py
"""
Default registry accessors.

Examples:
    >>> from implkit.runtime import associate, set_instance, resolve
    >>> associate(Clock, SystemClock)
    >>> set_instance(SystemClock, SystemClock())
    >>> resolve(Clock)
    <SystemClock ...>
"""

from __future__ import annotations

from typing import Any, Callable, Optional

from implkit.core.registry import Registry
from implkit.logging.logger import get_logger
from implkit.logging.tags import REGISTRY

logger = get_logger(__name__)

# Global singleton registry, created on first use
_default_registry: Optional[Registry] = None


def get_registry() -> Registry:
    """Get the default registry, creating it if needed."""
    global _default_registry
    if _default_registry is None:
        _default_registry = Registry()
    return _default_registry


def set_registry(registry: Registry) -> None:
    """Replace the default registry."""
    global _default_registry
    if not isinstance(registry, Registry):
        raise TypeError(f"Expected Registry, got {type(registry).__name__}")
    _default_registry = registry
    logger.debug(f"{REGISTRY} Default registry set to {registry.name!r}")


def reset_registry() -> None:
    """Drop the default registry (useful for testing)."""
    global _default_registry
    _default_registry = None


# =============================================================================
# Convenience Functions
# =============================================================================


def associate(contract: Any, type_: Any) -> None:
    """Registry.associate() on the default registry."""
    get_registry().associate(contract, type_)


def set_instance(type_: Any, instance: Any) -> None:
    """Registry.set_instance() on the default registry."""
    get_registry().set_instance(type_, instance)


def set_factory(type_: Any, factory: Callable[..., Any]) -> None:
    """Registry.set_factory() on the default registry."""
    get_registry().set_factory(type_, factory)


def resolve(target: Any, *args: Any, mode: Any = None, **kwargs: Any) -> Any:
    """Registry.resolve() on the default registry."""
    return get_registry().resolve(target, *args, mode=mode, **kwargs)


def resolve_optional(target: Any, *args: Any, **kwargs: Any) -> Any:
    """Registry.resolve_optional() on the default registry."""
    return get_registry().resolve_optional(target, *args, **kwargs)


def unassociate(obj: Any) -> None:
    """Registry.unassociate() on the default registry."""
    get_registry().unassociate(obj)
