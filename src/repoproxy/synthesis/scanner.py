"""Find the repository interfaces in a catalog of type declarations."""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Iterable

from repoproxy.catalog.types import InterfaceDescriptor

CatalogIndex = dict[str, list[InterfaceDescriptor]]


def build_index(declarations: Iterable[InterfaceDescriptor]) -> CatalogIndex:
    index: dict[str, list[InterfaceDescriptor]] = defaultdict(list)
    for declaration in declarations:
        index[declaration.name].append(declaration)
    return dict(index)


def extends_closure(declaration: InterfaceDescriptor, index: CatalogIndex) -> set[str]:
    """Names of every interface `declaration` extends, directly or transitively."""
    closure: set[str] = set()
    pending = sorted(declaration.extends)
    while pending:
        name = pending.pop()
        if name in closure:
            continue
        closure.add(name)
        for parent in index.get(name, []):
            pending.extend(sorted(parent.extends - closure))
    return closure


def scan_catalog(
    declarations: Iterable[InterfaceDescriptor],
    marker: str,
) -> list[InterfaceDescriptor]:
    items = list(declarations)
    index = build_index(items)
    found = [
        item
        for item in items
        if item.is_interface and item.name != marker and marker in extends_closure(item, index)
    ]
    found.sort(key=lambda item: (item.name, item.namespace))
    return found
