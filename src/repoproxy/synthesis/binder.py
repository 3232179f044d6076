"""Bind method signatures to their versioned command names."""

from __future__ import annotations

from repoproxy.catalog.types import InterfaceDescriptor, MethodSignature, ProxyMethodDescriptor
from repoproxy.errors import ConfigurationError
from repoproxy.version import VersionPolicy


def bind_method(signature: MethodSignature, policy: VersionPolicy) -> ProxyMethodDescriptor:
    return ProxyMethodDescriptor(
        signature=signature,
        versioned_command_name=policy.command_name(signature.name),
    )


def bind_methods(
    interface: InterfaceDescriptor,
    policy: VersionPolicy,
) -> tuple[ProxyMethodDescriptor, ...]:
    """Bind every method declared directly on `interface`, in declaration order.

    Two methods with the same name and the same parameter types would route to
    the same command with no way to tell them apart, so they are rejected.
    """
    seen: set[tuple[str, tuple[str, ...]]] = set()
    bound: list[ProxyMethodDescriptor] = []
    for signature in interface.methods:
        key = (signature.name, tuple(repr(t) for t in signature.parameter_types))
        if key in seen:
            raise ConfigurationError(
                f"{interface.qualified_name}: method {signature.name!r} is declared twice "
                "with the same parameter list",
                interface_name=interface.name,
            )
        seen.add(key)
        bound.append(bind_method(signature, policy))
    return tuple(bound)
