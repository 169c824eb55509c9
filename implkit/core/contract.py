# implkit/core/contract.py
"""
Contracts as signature bags.

A contract is any object whose public entries name required capabilities.
Each capability is only ever inspected for its parameter count; the
parameter names are kept for error messages.

Supported contract shapes:
    - Contract: explicit name -> Signature map (preferred)
    - Mapping: {"get": lambda key: None, "put": ("key", "value")}
    - Class: public functions defined in the class body (receiver dropped)
    - Any other object with a ``__dict__``: its public callable entries

Usage:
    >>> Storage = Contract("Storage", get=("key",), put=lambda key, value: None)
    >>> validate(Storage, MemoryStorage())  # raises ContractViolationError on mismatch
"""

from __future__ import annotations

import inspect
from collections.abc import Mapping
from typing import Any, Dict, Iterator, List, Optional

from implkit.core.exceptions import ContractViolationError, SignatureError
from implkit.core.signature import Signature, describe, is_descriptor
from implkit.logging.logger import get_logger
from implkit.logging.tags import CONTRACT

logger = get_logger(__name__)


# =============================================================================
# Contract
# =============================================================================


class Contract:
    """
    Explicit contract: a named, ordered map of capability signatures.

    Keyword values may be callables, sequences of parameter names, or
    Signature instances. Contracts compare and hash by identity, which is
    also how the registry keys them.

    Examples:
        >>> Clock = Contract("Clock", now=(), sleep=("seconds",))
        >>> Clock["sleep"].arity
        1
        >>> sorted(Clock)
        ['now', 'sleep']
    """

    def __init__(self, name: str = "Contract", **capabilities: Any):
        self.name = name
        self._signatures: Dict[str, Signature] = {
            key: Signature.of(value) for key, value in capabilities.items()
        }

    @property
    def signatures(self) -> Dict[str, Signature]:
        return dict(self._signatures)

    def __getitem__(self, key: str) -> Signature:
        return self._signatures[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._signatures)

    def __len__(self) -> int:
        return len(self._signatures)

    def __repr__(self) -> str:
        body = ", ".join(describe(k, v) for k, v in self._signatures.items())
        return f"Contract({self.name!r}: {body})"


# =============================================================================
# Capability extraction
# =============================================================================


def capabilities(contract: Any) -> Dict[str, Signature]:
    """
    Return the declared capabilities of a contract-role object.

    Objects that declare nothing (functions, ``object()``, empty dicts)
    return an empty dict and impose no structural requirement.
    """
    if isinstance(contract, Contract):
        return contract.signatures

    if isinstance(contract, Mapping):
        return {
            key: Signature.of(value)
            for key, value in contract.items()
            if isinstance(key, str) and is_descriptor(value)
        }

    if isinstance(contract, type):
        return _class_capabilities(contract)

    namespace = getattr(contract, "__dict__", None)
    if not isinstance(namespace, Mapping) or inspect.isroutine(contract):
        return {}

    return {
        key: Signature.of(value)
        for key, value in namespace.items()
        if not key.startswith("_") and (callable(value) or isinstance(value, Signature))
    }


def _class_capabilities(cls: type) -> Dict[str, Signature]:
    """Public functions defined directly in the class body."""
    found: Dict[str, Signature] = {}
    for key, value in vars(cls).items():
        if key.startswith("_"):
            continue
        if isinstance(value, staticmethod):
            found[key] = Signature.from_callable(value.__func__)
        elif isinstance(value, classmethod):
            found[key] = Signature.from_callable(value.__func__, drop_first=True)
        elif inspect.isfunction(value):
            found[key] = Signature.from_callable(value, drop_first=True)
    return found


# =============================================================================
# Structural validation
# =============================================================================


def _member(instance: Any, key: str) -> Any:
    # Stored items shadow the mapping's own methods ("get", "items", ...).
    if isinstance(instance, Mapping) and key in instance:
        return instance[key]
    return getattr(instance, key, None)


def conformance_errors(contract: Any, instance: Any) -> List[str]:
    """
    List every way instance fails to satisfy contract.

    Only presence and parameter count are checked; names are rendered for
    the message and never compared.
    """
    errors: List[str] = []

    for key, expected in capabilities(contract).items():
        member = _member(instance, key)
        if not member or not callable(member):
            errors.append(f"Instance does not implement {describe(key, expected)}")
            continue

        actual = _actual_signature(member, key)
        if actual is None:
            continue

        if actual.arity != expected.arity:
            errors.append(
                f"Instance implements {describe(key, actual)} "
                f"but contract defines {describe(key, expected)}"
            )

    return errors


def _actual_signature(member: Any, key: str) -> Optional[Signature]:
    try:
        return Signature.from_callable(member)
    except SignatureError as e:
        logger.debug(f"{CONTRACT} Skipping arity check for {key!r}: {e}")
        return None


def validate(contract: Any, instance: Any) -> Any:
    """
    Raise ContractViolationError unless instance satisfies contract.

    Returns:
        The instance, unchanged
    """
    errors = conformance_errors(contract, instance)
    if errors:
        raise ContractViolationError(errors[0])
    return instance


__all__ = ["Contract", "capabilities", "conformance_errors", "validate"]
