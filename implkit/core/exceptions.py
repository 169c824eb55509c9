# implkit/core/exceptions.py
"""
All exceptions raised by implkit.

Hierarchy:
    RegistryError
    ├── InvalidArgumentError - Wrong value shape (also a TypeError)
    ├── SignatureError - Callable cannot be introspected (also a ValueError)
    └── AssociationError - Binding and resolution failures
        ├── DuplicateAssociationError - Same type offered twice for a contract
        ├── BindingError - Type already bound to an instance or factory
        ├── NotAssociatedError - Object never registered
        └── ResolutionError - resolve() could not produce an instance
            ├── NoTypesError - Contract has no associated types
            ├── NoCandidateError - No associated type is bound
            ├── AmbiguousResolutionError - More than one bound type
            └── ContractViolationError - Instance does not match the contract

Every failure is a configuration error in the calling code. Nothing here is
meant to be caught and retried; catch RegistryError at the wiring boundary if
you need a single handler.
"""

# =============================================================================
# Base
# =============================================================================


class RegistryError(Exception):
    """
    Base exception for all implkit errors.

    Examples:
        >>> try:
        ...     storage = registry.resolve(Storage)
        ... except RegistryError as e:
        ...     print(f"Wiring is broken: {e}")
    """

    pass


class InvalidArgumentError(RegistryError, TypeError):
    """
    An argument has the wrong shape.

    Raised for None or primitive values where an object is required, and for
    non-callable factories. Subclasses TypeError so plain ``except TypeError``
    handlers keep working.
    """

    pass


class SignatureError(RegistryError, ValueError):
    """A callable's parameter list could not be read."""

    pass


# =============================================================================
# Association Errors
# =============================================================================


class AssociationError(RegistryError):
    """
    A binding invariant was violated or a contract could not be resolved.
    """

    pass


class DuplicateAssociationError(AssociationError):
    """The contract is already associated with this type."""

    pass


class BindingError(AssociationError):
    """The type is already associated with an instance or a factory."""

    pass


class NotAssociatedError(AssociationError):
    """unassociate() was called on an object that was never registered."""

    pass


# =============================================================================
# Resolution Errors
# =============================================================================


class ResolutionError(AssociationError):
    """resolve() could not produce an instance."""

    pass


class NoTypesError(ResolutionError):
    """No types were ever associated with the contract."""

    pass


class NoCandidateError(ResolutionError):
    """Types exist for the contract but none carries an instance or factory."""

    pass


class AmbiguousResolutionError(ResolutionError):
    """
    More than one associated type carries an instance or factory.

    Raised in every resolve mode; optional resolution never hides ambiguity.
    """

    pass


class ContractViolationError(ResolutionError):
    """The resolved instance does not structurally satisfy the contract."""

    pass


__all__ = [
    "RegistryError",
    "InvalidArgumentError",
    "SignatureError",
    "AssociationError",
    "DuplicateAssociationError",
    "BindingError",
    "NotAssociatedError",
    "ResolutionError",
    "NoTypesError",
    "NoCandidateError",
    "AmbiguousResolutionError",
    "ContractViolationError",
]
