"""Interface declarations and the proxy descriptors synthesized from them."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

PROXY_NAME_SUFFIX = "_Proxy"

# Python types or type-name strings; carried and compared, never inspected.
TypeRef = Any


@dataclass(frozen=True, slots=True)
class Parameter:
    name: str
    type: TypeRef = object


@dataclass(frozen=True, slots=True)
class MethodSignature:
    name: str
    parameters: tuple[Parameter, ...] = ()
    return_type: TypeRef = None

    @property
    def parameter_names(self) -> tuple[str, ...]:
        return tuple(param.name for param in self.parameters)

    @property
    def parameter_types(self) -> tuple[TypeRef, ...]:
        return tuple(param.type for param in self.parameters)


@dataclass(frozen=True, slots=True)
class InterfaceDescriptor:
    """A type declaration as reported by a catalog provider."""

    name: str
    methods: tuple[MethodSignature, ...] = ()
    extends: frozenset[str] = field(default_factory=frozenset)
    is_interface: bool = True
    namespace: str = ""

    @property
    def qualified_name(self) -> str:
        return f"{self.namespace}.{self.name}" if self.namespace else self.name


@dataclass(frozen=True, slots=True)
class ProxyMethodDescriptor:
    signature: MethodSignature
    versioned_command_name: str

    @property
    def name(self) -> str:
        return self.signature.name


@dataclass(frozen=True, slots=True)
class ProxyTypeDescriptor:
    proxy_name: str
    source_interface: str
    methods: tuple[ProxyMethodDescriptor, ...] = ()
    interface_name: str = ""

    def methods_named(self, name: str) -> tuple[ProxyMethodDescriptor, ...]:
        return tuple(method for method in self.methods if method.name == name)


def proxy_name_for(interface_name: str) -> str:
    return f"{interface_name}{PROXY_NAME_SUFFIX}"


def type_label(value: TypeRef) -> str:
    """Render a type reference for reports and JSON output."""
    if isinstance(value, str):
        return value
    if value is None:
        return "None"
    if isinstance(value, type) and not getattr(value, "__args__", None):
        return value.__qualname__
    return repr(value).replace("typing.", "")
