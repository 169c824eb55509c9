# implkit/core/mode.py
"""Resolution modes accepted by Registry.resolve()."""

from __future__ import annotations

from enum import Enum
from typing import Any

from implkit.core.exceptions import InvalidArgumentError


class ResolveMode(str, Enum):
    """
    How resolve() treats "nothing available".

    REQUIRED: a contract without types or without a bound type raises.
    OPTIONAL: those two outcomes return None instead. Ambiguity and contract
        violations still raise.
    """

    REQUIRED = "required"
    OPTIONAL = "optional"

    @classmethod
    def coerce(cls, value: Any) -> "ResolveMode":
        """Accept a ResolveMode or its string value."""
        try:
            return cls(value)
        except ValueError as e:
            allowed = [m.value for m in cls]
            raise InvalidArgumentError(
                f"Unknown resolve mode: {value!r}. Available: {allowed}"
            ) from e


__all__ = ["ResolveMode"]
