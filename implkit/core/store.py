# implkit/core/store.py
"""
Identity Store - hidden per-object metadata.

Every contract and type gets a Record, looked up by the object's identity
alone. Records live in a side table keyed by ``id(obj)``; the subject object
is never touched, so its attributes, ``__eq__``, ``__hash__`` and
``__getattr__`` stay exactly as its author wrote them.

Lifetime:
    - Weak-referenceable objects (classes, functions, most instances) are
      held through ``weakref.ref``; the record disappears with the object.
    - Objects that refuse weak references (plain dict, list, ``object()``)
      are pinned with a strong reference while their record exists, so their
      ``id`` cannot be recycled under us.
"""

from __future__ import annotations

import weakref
from contextlib import nullcontext
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional, Tuple

from implkit.core.exceptions import InvalidArgumentError

# Values that are never object-like, even though everything is an object in Python.
_PRIMITIVES = (str, bytes, bytearray, int, float, complex, bool)


def is_object_like(value: Any) -> bool:
    """True for anything that can carry an identity-bound record."""
    return value is not None and not isinstance(value, _PRIMITIVES)


def ensure_object(value: Any, what: str) -> None:
    """Raise InvalidArgumentError unless value is object-like."""
    if not is_object_like(value):
        raise InvalidArgumentError(f"{what} must be object")


# =============================================================================
# Record
# =============================================================================


@dataclass
class Record:
    """
    Metadata attached to one object.

    Contracts use ``associated_types``; types use ``instance``/``factory``.
    The shape is shared so an object can play either role.
    """

    associated_types: Optional[List[Any]] = None
    instance: Any = None
    has_instance: bool = False
    factory: Optional[Callable[..., Any]] = None

    @property
    def is_bound(self) -> bool:
        return self.has_instance or self.factory is not None

    @property
    def has_value(self) -> bool:
        """True if the bound instance is non-empty (not None)."""
        return self.has_instance and self.instance is not None

    def has_type(self, type_: Any) -> bool:
        """Identity membership test; never falls back to ``==``."""
        if not self.associated_types:
            return False
        return any(existing is type_ for existing in self.associated_types)

    def add_type(self, type_: Any) -> None:
        if self.associated_types is None:
            self.associated_types = []
        self.associated_types.append(type_)

    def bind_instance(self, instance: Any) -> None:
        self.instance = instance
        self.has_instance = True

    def bind_factory(self, factory: Callable[..., Any]) -> None:
        self.factory = factory

    def clear_binding(self) -> None:
        """Drop instance and factory; associated types are left alone."""
        self.instance = None
        self.has_instance = False
        self.factory = None


# =============================================================================
# IdentityStore
# =============================================================================


@dataclass
class IdentityStore:
    """
    Side table mapping object identity to its Record.

    Examples:
        >>> store = IdentityStore()
        >>> contract = {}
        >>> store.get(contract, "Contract") is None
        True
        >>> record = store.get_or_create(contract, "Contract")
        >>> store.get(contract, "Contract") is record
        True
    """

    # id(obj) -> (weakref or the object itself, record)
    _records: Dict[int, Tuple[Any, Record]] = field(default_factory=dict, repr=False)
    # Held while a collected object's record is dropped; the registry passes its RLock.
    lock: Any = field(default=None, repr=False)

    def get_or_create(self, obj: Any, what: str = "Argument") -> Record:
        """Return the record for obj, attaching an empty one if needed."""
        ensure_object(obj, what)
        record = self._lookup(obj)
        if record is None:
            record = Record()
            self._records[id(obj)] = (self._anchor(obj), record)
        return record

    def get(self, obj: Any, what: str = "Argument") -> Optional[Record]:
        """Return the record for obj, or None if none was ever created."""
        ensure_object(obj, what)
        return self._lookup(obj)

    def clear(self) -> None:
        self._records.clear()

    def __contains__(self, obj: Any) -> bool:
        return is_object_like(obj) and self._lookup(obj) is not None

    def __len__(self) -> int:
        return len(self._records)

    # -------------------------------------------------------------------------
    # Internals
    # -------------------------------------------------------------------------

    def _lookup(self, obj: Any) -> Optional[Record]:
        entry = self._records.get(id(obj))
        if entry is None:
            return None

        anchor, record = entry
        target = anchor() if isinstance(anchor, weakref.ref) else anchor
        # A dead or different referent means the id was recycled.
        if target is not obj:
            return None
        return record

    def _anchor(self, obj: Any) -> Any:
        records = self._records
        lock = self.lock
        key = id(obj)

        def _drop(ref: weakref.ref) -> None:
            with lock if lock is not None else nullcontext():
                entry = records.get(key)
                if entry is not None and entry[0] is ref:
                    del records[key]

        try:
            return weakref.ref(obj, _drop)
        except TypeError:
            # dict, list, object() and friends cannot be weakly referenced.
            return obj


__all__ = ["IdentityStore", "Record", "ensure_object", "is_object_like"]
