"""Interface catalog package."""

from repoproxy.catalog.introspect import declarations_from_classes, discover_declarations
from repoproxy.catalog.loader import load_catalog, parse_catalog
from repoproxy.catalog.types import (
    InterfaceDescriptor,
    MethodSignature,
    Parameter,
    ProxyMethodDescriptor,
    ProxyTypeDescriptor,
)

__all__ = [
    "InterfaceDescriptor",
    "MethodSignature",
    "Parameter",
    "ProxyMethodDescriptor",
    "ProxyTypeDescriptor",
    "declarations_from_classes",
    "discover_declarations",
    "load_catalog",
    "parse_catalog",
]
