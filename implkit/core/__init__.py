# implkit/core/__init__.py
"""
implkit core - the registry engine and its building blocks.

Public API:
    - Registry: contract/type/instance registry
    - ResolveMode: required vs optional resolution
    - Contract, Signature: explicit contract descriptors
    - RegistryConfig: registry settings (pydantic)
    - Exceptions: RegistryError hierarchy
"""

from .config import (
    ConfigError,
    ConfigNotFoundError,
    ConfigParseError,
    ConfigValidationError,
    RegistryConfig,
    load_config,
)
from .contract import Contract, capabilities, conformance_errors, validate
from .exceptions import (
    AmbiguousResolutionError,
    AssociationError,
    BindingError,
    ContractViolationError,
    DuplicateAssociationError,
    InvalidArgumentError,
    NoCandidateError,
    NotAssociatedError,
    NoTypesError,
    RegistryError,
    ResolutionError,
    SignatureError,
)
from .mode import ResolveMode
from .registry import Registry
from .signature import Signature
from .store import IdentityStore, Record, is_object_like

__all__ = [
    # Engine
    "Registry",
    "ResolveMode",
    # Contracts
    "Contract",
    "Signature",
    "capabilities",
    "conformance_errors",
    "validate",
    # Identity store
    "IdentityStore",
    "Record",
    "is_object_like",
    # Config
    "RegistryConfig",
    "load_config",
    "ConfigError",
    "ConfigNotFoundError",
    "ConfigParseError",
    "ConfigValidationError",
    # Exceptions
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
