# implkit/core/signature.py
"""
Signature descriptors for contract capabilities.

A contract never calls its capabilities; it only cares how many parameters
each one declares, and keeps the names around for error messages. Signature
captures exactly that, independently of any callable.
"""

from __future__ import annotations

import inspect
from dataclasses import dataclass
from typing import Any, Optional, Tuple

from implkit.core.exceptions import InvalidArgumentError, SignatureError

_VARIADIC = (inspect.Parameter.VAR_POSITIONAL, inspect.Parameter.VAR_KEYWORD)


@dataclass(frozen=True)
class Signature:
    """
    Ordered parameter names of one capability.

    ``arity`` counts named parameters only; ``*args`` and ``**kwargs`` are
    rendered in messages but never counted.

    Examples:
        >>> sig = Signature.of(lambda bar, baz, *rest: None)
        >>> sig.arity
        2
        >>> sig.render()
        '(bar, baz, *rest)'
    """

    params: Tuple[str, ...] = ()
    var_positional: Optional[str] = None
    var_keyword: Optional[str] = None

    @property
    def arity(self) -> int:
        return len(self.params)

    def render(self) -> str:
        names = list(self.params)
        if self.var_positional:
            names.append(f"*{self.var_positional}")
        if self.var_keyword:
            names.append(f"**{self.var_keyword}")
        return f"({', '.join(names)})"

    @classmethod
    def of(cls, target: Any) -> "Signature":
        """
        Build a descriptor from a Signature, a sequence of names or a callable.

        Raises:
            InvalidArgumentError: target is none of the above
            SignatureError: target is callable but has no readable signature
        """
        if isinstance(target, Signature):
            return target

        if is_name_sequence(target):
            return cls(params=tuple(target))

        if not callable(target):
            raise InvalidArgumentError(
                f"Signature must be callable or a sequence of names, got {type(target).__name__}"
            )

        return cls.from_callable(target)

    @classmethod
    def from_callable(cls, fn: Any, drop_first: bool = False) -> "Signature":
        """
        Read the parameter list of fn.

        Args:
            fn: Any callable
            drop_first: Skip the leading receiver (``self``/``cls``) of an
                unbound function taken from a class body
        """
        try:
            parameters = list(inspect.signature(fn).parameters.values())
        except (TypeError, ValueError) as e:
            raise SignatureError(f"Cannot read signature of {fn!r}: {e}") from e

        if drop_first and parameters and parameters[0].kind not in _VARIADIC:
            parameters = parameters[1:]

        var_positional = None
        var_keyword = None
        names = []
        for param in parameters:
            if param.kind is inspect.Parameter.VAR_POSITIONAL:
                var_positional = param.name
            elif param.kind is inspect.Parameter.VAR_KEYWORD:
                var_keyword = param.name
            else:
                names.append(param.name)

        return cls(params=tuple(names), var_positional=var_positional, var_keyword=var_keyword)


def is_name_sequence(value: Any) -> bool:
    """True for a list/tuple made only of parameter-name strings."""
    return isinstance(value, (list, tuple)) and all(isinstance(v, str) for v in value)


def is_descriptor(value: Any) -> bool:
    """True if value can be read as a Signature."""
    return isinstance(value, Signature) or is_name_sequence(value) or callable(value)


def describe(name: str, signature: Signature) -> str:
    """Render ``name(a, b)`` for diagnostics."""
    return f"{name}{signature.render()}"


__all__ = ["Signature", "describe", "is_descriptor", "is_name_sequence"]
