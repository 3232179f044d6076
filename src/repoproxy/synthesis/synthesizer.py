"""Build one proxy type descriptor per repository interface."""

from __future__ import annotations

from repoproxy.catalog.types import InterfaceDescriptor, ProxyTypeDescriptor, proxy_name_for
from repoproxy.errors import ConfigurationError
from repoproxy.synthesis.binder import bind_methods
from repoproxy.synthesis.scanner import CatalogIndex, extends_closure
from repoproxy.version import VersionPolicy


def select_base_interface(
    interface: InterfaceDescriptor,
    index: CatalogIndex,
    marker: str,
) -> str:
    """Pick the interface the proxy structurally implements.

    With several candidates, the one whose name ends with the interface's own
    name wins (``IBeerRepository`` for ``BeerRepository``).
    """
    candidates = sorted(extends_closure(interface, index) - {marker, interface.name})
    if not candidates:
        return interface.name
    if len(candidates) == 1:
        return candidates[0]

    matches = [name for name in candidates if name.endswith(interface.name)]
    if len(matches) == 1:
        return matches[0]
    if not matches:
        raise ConfigurationError(
            f"{interface.qualified_name}: no base interface among {candidates} "
            f"ends with {interface.name!r}",
            interface_name=interface.name,
        )
    raise ConfigurationError(
        f"{interface.qualified_name}: ambiguous base interface, {matches} all end "
        f"with {interface.name!r}",
        interface_name=interface.name,
    )


def synthesize_proxy(
    interface: InterfaceDescriptor,
    index: CatalogIndex,
    policy: VersionPolicy,
    marker: str,
) -> ProxyTypeDescriptor:
    return ProxyTypeDescriptor(
        proxy_name=proxy_name_for(interface.name),
        source_interface=select_base_interface(interface, index, marker),
        methods=bind_methods(interface, policy),
        interface_name=interface.name,
    )
