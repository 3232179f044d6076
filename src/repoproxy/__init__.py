"""Versioned repository proxy synthesis."""

from repoproxy.catalog.types import (
    InterfaceDescriptor,
    MethodSignature,
    Parameter,
    ProxyMethodDescriptor,
    ProxyTypeDescriptor,
)
from repoproxy.dispatch import RepositoryProxy, as_versioned_repo
from repoproxy.registry import (
    ProxyRegistry,
    RegistryState,
    get_registry,
    initialize_registry,
    lookup_proxy,
)
from repoproxy.synthesis.driver import synthesize
from repoproxy.version import VersionPolicy

__all__ = [
    "InterfaceDescriptor",
    "MethodSignature",
    "Parameter",
    "ProxyMethodDescriptor",
    "ProxyRegistry",
    "ProxyTypeDescriptor",
    "RegistryState",
    "RepositoryProxy",
    "VersionPolicy",
    "as_versioned_repo",
    "get_registry",
    "initialize_registry",
    "lookup_proxy",
    "synthesize",
]
