# implkit/core/registry.py
"""
Registry Engine - binds contracts to implementations.

Wiring code offers one or more *types* for a *contract*, then binds each
type to a fixed *instance* or a *factory*. resolve() later turns the
contract into exactly one validated implementation.

Philosophy:
    - One bound type per contract at resolution time, never a guess
    - Factories are lazy and re-run on every resolution
    - A resolved instance must structurally match its contract
    - Registries are explicit objects; the process-wide default lives in
      implkit.runtime and is only a convenience

Examples:
    >>> registry = Registry()
    >>> Greeter = Contract("Greeter", greet=("name",))
    >>> class English: pass
    >>> registry.associate(Greeter, English)
    >>> registry.set_factory(English, lambda: SimpleNamespace(greet=lambda name: f"Hello, {name}"))
    >>> registry.resolve(Greeter).greet("Ada")
    'Hello, Ada'
"""

from __future__ import annotations

import inspect
import threading
from collections.abc import Mapping
from contextlib import nullcontext
from pathlib import Path
from typing import Any, Callable, List, Tuple, Union

from implkit.core.config import RegistryConfig, coerce_config
from implkit.core.contract import Contract, validate
from implkit.core.exceptions import (
    AmbiguousResolutionError,
    BindingError,
    DuplicateAssociationError,
    InvalidArgumentError,
    NoCandidateError,
    NotAssociatedError,
    NoTypesError,
)
from implkit.core.mode import ResolveMode
from implkit.core.store import IdentityStore, Record, ensure_object, is_object_like
from implkit.logging.logger import get_logger
from implkit.logging.tags import REGISTRY, RESOLVE

logger = get_logger(__name__)


def _label(obj: Any) -> str:
    """Short human name for log lines; never touches the object's own attributes."""
    if isinstance(obj, Contract):
        return obj.name
    if isinstance(obj, type) or inspect.isroutine(obj):
        return obj.__qualname__
    return f"<{type(obj).__name__} at {id(obj):#x}>"


def _returns(instance: Any) -> Callable[..., Any]:
    def resolver(*args: Any, **kwargs: Any) -> Any:
        return instance

    return resolver


class Registry:
    """
    Contract/type/instance registry.

    Args:
        config: RegistryConfig, a mapping of its fields, or a YAML path.
            Defaults to RegistryConfig().

    Not thread-safe unless ``config.thread_safe`` is set, in which case every
    operation runs under one re-entrant lock.
    """

    def __init__(self, config: Union[RegistryConfig, Mapping, str, Path, None] = None):
        self.config = coerce_config(config)
        self._lock = threading.RLock() if self.config.thread_safe else None
        self._store = IdentityStore(lock=self._lock)

    @classmethod
    def from_config(cls, source: Any) -> "Registry":
        """Build a registry from a RegistryConfig, mapping or YAML path."""
        return cls(source)

    @property
    def name(self) -> str:
        return self.config.name

    # -------------------------------------------------------------------------
    # Association
    # -------------------------------------------------------------------------

    def associate(self, contract: Any, type_: Any) -> None:
        """
        Offer type_ as an implementation strategy for contract.

        Raises:
            InvalidArgumentError: contract or type_ is not object-like
            DuplicateAssociationError: the pair is already associated
        """
        ensure_object(type_, "Type")
        with self._guard():
            record = self._store.get_or_create(contract, "Contract")
            if record.has_type(type_):
                raise DuplicateAssociationError("This contract is already associated with this type")
            record.add_type(type_)

        logger.debug(f"{REGISTRY} [{self.name}] Associated {_label(contract)} -> {_label(type_)}")

    def set_instance(self, type_: Any, instance: Any) -> None:
        """
        Bind type_ to a fixed instance. Any value is accepted, None included,
        but a None instance is treated as empty by resolve().

        Raises:
            InvalidArgumentError: type_ is not object-like
            BindingError: type_ already has an instance or a factory
        """
        with self._guard():
            self._unbound_record(type_).bind_instance(instance)

        logger.debug(f"{REGISTRY} [{self.name}] Bound instance to {_label(type_)}")

    def set_factory(self, type_: Any, factory: Callable[..., Any]) -> None:
        """
        Bind type_ to a factory, invoked with resolve()'s extra arguments.

        Raises:
            InvalidArgumentError: factory is not callable, or type_ is not object-like
            BindingError: type_ already has an instance or a factory
        """
        if not callable(factory):
            raise InvalidArgumentError("Factory must be callable")
        with self._guard():
            self._unbound_record(type_).bind_factory(factory)

        logger.debug(f"{REGISTRY} [{self.name}] Bound factory to {_label(type_)}")

    def unassociate(self, obj: Any) -> None:
        """
        Clear the instance or factory bound to obj.

        The record itself stays in the store. Contract memberships are kept:
        obj stays in every contract it was associated with, it just no
        longer offers anything.

        Raises:
            InvalidArgumentError: obj is not object-like
            NotAssociatedError: obj was never registered
        """
        with self._guard():
            record = self._store.get(obj, "Argument")
            if record is None:
                raise NotAssociatedError("Given object was not associated")
            record.clear_binding()

        logger.debug(f"{REGISTRY} [{self.name}] Cleared binding of {_label(obj)}")

    def _unbound_record(self, type_: Any) -> Record:
        record = self._store.get_or_create(type_, "Type")
        if record.has_instance:
            raise BindingError("This type is already associated with an instance")
        if record.factory is not None:
            raise BindingError("This type is already associated with a factory")
        return record

    # -------------------------------------------------------------------------
    # Resolution
    # -------------------------------------------------------------------------

    def resolve(self, target: Any, *args: Any, mode: Any = None, **kwargs: Any) -> Any:
        """
        Resolve a contract (or a bare type) to one validated instance.

        Args:
            target: Contract, or a type resolved directly
            *args, **kwargs: Passed to the factory, ignored for instances
            mode: ResolveMode or its string value; defaults to
                ``config.default_mode``

        Returns:
            The instance, or None when resolving optionally and nothing is
            bound

        Raises:
            InvalidArgumentError: target is not object-like, or mode is unknown
            NoTypesError: no types associated (required mode only)
            NoCandidateError: no associated type is bound (required mode only)
            AmbiguousResolutionError: more than one associated type is bound
            ContractViolationError: the instance does not match the contract
        """
        mode = self.config.default_mode if mode is None else ResolveMode.coerce(mode)

        with self._guard():
            record = self._store.get(target, "Contract")

            # A directly bound non-None instance wins and skips validation.
            if record is not None and record.has_value:
                logger.debug(f"{RESOLVE} [{self.name}] {_label(target)}: direct instance")
                return record.instance

            if record is None or record.associated_types is None:
                if mode is ResolveMode.OPTIONAL:
                    return None
                raise NoTypesError("No types for contract")

            candidates = self._candidates(record.associated_types)

        if not candidates:
            if mode is ResolveMode.OPTIONAL:
                return None
            raise NoCandidateError("No instance or factory for contract")
        if len(candidates) > 1:
            raise AmbiguousResolutionError("More than one possible instance or factory for contract")

        instance = candidates[0](*args, **kwargs)
        validate(target, instance)

        logger.debug(f"{RESOLVE} [{self.name}] {_label(target)} -> {type(instance).__name__}")
        return instance

    def resolve_optional(self, target: Any, *args: Any, **kwargs: Any) -> Any:
        """resolve() in OPTIONAL mode."""
        return self.resolve(target, *args, mode=ResolveMode.OPTIONAL, **kwargs)

    def _candidates(self, types: List[Any]) -> List[Callable[..., Any]]:
        found: List[Callable[..., Any]] = []
        for type_ in types:
            record = self._store.get(type_, "Type")
            if record is None:
                continue
            if record.factory is not None:
                found.append(record.factory)
            elif record.has_value:
                found.append(_returns(record.instance))
        return found

    # -------------------------------------------------------------------------
    # Inspection
    # -------------------------------------------------------------------------

    def associated_types(self, contract: Any) -> Tuple[Any, ...]:
        """Types offered for contract, in association order."""
        with self._guard():
            record = self._store.get(contract, "Contract")
            if record is None or not record.associated_types:
                return ()
            return tuple(record.associated_types)

    def is_bound(self, type_: Any) -> bool:
        """True if type_ currently carries an instance or a factory."""
        with self._guard():
            record = self._store.get(type_, "Type")
            return record is not None and record.is_bound

    def reset(self) -> None:
        """Forget every record."""
        with self._guard():
            self._store.clear()
        logger.debug(f"{REGISTRY} [{self.name}] Reset")

    def __contains__(self, obj: Any) -> bool:
        return is_object_like(obj) and obj in self._store

    def __len__(self) -> int:
        return len(self._store)

    def __repr__(self) -> str:
        return f"Registry(name={self.name!r}, records={len(self._store)})"

    def _guard(self):
        return self._lock if self._lock is not None else nullcontext()


__all__ = ["Registry", "ResolveMode"]
