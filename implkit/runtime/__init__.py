# implkit/runtime/__init__.py
"""
Process-wide default registry.

Application wiring that does not want to pass a Registry around can use the
module-level functions here; they all delegate to one shared instance.
Tests should call reset_registry() (or use their own Registry).
"""

from .default import (
    associate,
    get_registry,
    reset_registry,
    resolve,
    resolve_optional,
    set_factory,
    set_instance,
    set_registry,
    unassociate,
)

__all__ = [
    "get_registry",
    "set_registry",
    "reset_registry",
    "associate",
    "set_instance",
    "set_factory",
    "resolve",
    "resolve_optional",
    "unassociate",
]
