"""
implkit - bind contracts to implementations, resolve exactly one.

A minimal dependency-injection / service-locator registry. Wiring code
declares which *types* may implement a *contract* and binds each type to an
instance or a factory; consumers ask for "something satisfying contract C"
and get back one validated implementation.

Quick Start:
    >>> from implkit import Contract, Registry
    >>> Storage = Contract("Storage", get=("key",), put=("key", "value"))
    >>> class Memory: pass
    >>> registry = Registry()
    >>> registry.associate(Storage, Memory)
    >>> registry.set_factory(Memory, MemoryStorage)
    >>> storage = registry.resolve(Storage)

Public API:
    Engine:
        - Registry: associate, set_instance, set_factory, resolve, unassociate
        - ResolveMode: REQUIRED / OPTIONAL
    Contracts:
        - Contract: explicit capability map
        - Signature: parameter-name descriptor
    Config:
        - RegistryConfig, load_config
    Default registry:
        - implkit.runtime: module-level functions on a shared Registry

Architecture:
    implkit/
    ├── core/        # Identity store, contracts, registry engine, config
    ├── runtime/     # Process-wide default registry
    └── logging/     # get_logger, configure_logging, tags
"""

__version__ = "0.1.0"

from implkit.core import (
    AmbiguousResolutionError,
    AssociationError,
    BindingError,
    ConfigError,
    Contract,
    ContractViolationError,
    DuplicateAssociationError,
    InvalidArgumentError,
    NoCandidateError,
    NotAssociatedError,
    NoTypesError,
    Registry,
    RegistryConfig,
    RegistryError,
    ResolutionError,
    ResolveMode,
    Signature,
    SignatureError,
    load_config,
)
from implkit.logging import configure_logging, get_logger

__all__ = [
    "__version__",
    "Registry",
    "ResolveMode",
    "Contract",
    "Signature",
    "RegistryConfig",
    "load_config",
    "configure_logging",
    "get_logger",
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
    "ConfigError",
]
