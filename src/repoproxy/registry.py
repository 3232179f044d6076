"""Proxy registry: write-once map from proxy name to proxy type descriptor."""

from __future__ import annotations

import hashlib
import json
import logging
import threading
from collections.abc import Iterable, Iterator, Mapping
from enum import Enum
from types import MappingProxyType
from typing import TYPE_CHECKING

from repoproxy.catalog.types import ProxyTypeDescriptor, type_label
from repoproxy.errors import (
    DuplicateNameError,
    NotInitializedError,
    RegistryStateError,
    RepoProxyError,
    SynthesisError,
    UnknownProxyError,
)

if TYPE_CHECKING:
    from repoproxy.catalog.types import InterfaceDescriptor

logger = logging.getLogger(__name__)


class RegistryState(str, Enum):
    UNINITIALIZED = "uninitialized"
    SYNTHESIZING = "synthesizing"
    READY = "ready"
    FAILED = "failed"


_EMPTY: Mapping[str, ProxyTypeDescriptor] = MappingProxyType({})


def find_duplicate_names(descriptors: Iterable[ProxyTypeDescriptor]) -> list[DuplicateNameError]:
    sources: dict[str, list[str]] = {}
    for descriptor in descriptors:
        sources.setdefault(descriptor.proxy_name, []).append(
            descriptor.interface_name or descriptor.source_interface
        )
    return [
        DuplicateNameError(name, tuple(owners))
        for name, owners in sources.items()
        if len(owners) > 1
    ]


class ProxyRegistry:
    """Lookup is lock-free: the mapping is swapped in once and never mutated."""

    def __init__(self) -> None:
        self._state = RegistryState.UNINITIALIZED
        self._entries: Mapping[str, ProxyTypeDescriptor] = _EMPTY
        self._errors: tuple[RepoProxyError, ...] = ()

    @property
    def state(self) -> RegistryState:
        return self._state

    @property
    def errors(self) -> tuple[RepoProxyError, ...]:
        return self._errors

    def begin(self) -> None:
        if self._state is not RegistryState.UNINITIALIZED:
            raise RegistryStateError(f"cannot start synthesis from state {self._state.value}")
        self._state = RegistryState.SYNTHESIZING

    def publish(self, descriptors: Iterable[ProxyTypeDescriptor]) -> None:
        if self._state is not RegistryState.SYNTHESIZING:
            raise RegistryStateError(f"cannot publish from state {self._state.value}")
        batch = list(descriptors)
        duplicates = find_duplicate_names(batch)
        if duplicates:
            self.fail(duplicates)
            raise duplicates[0]
        self._entries = MappingProxyType({item.proxy_name: item for item in batch})
        self._state = RegistryState.READY

    def fail(self, errors: Iterable[RepoProxyError]) -> None:
        if self._state is RegistryState.READY:
            raise RegistryStateError("cannot fail a published registry")
        self._errors = tuple(errors)
        self._entries = _EMPTY
        self._state = RegistryState.FAILED

    def lookup(self, proxy_name: str) -> ProxyTypeDescriptor | None:
        """Return the descriptor, or None (also before publication and after failure)."""
        return self._entries.get(proxy_name)

    def require(self, proxy_name: str) -> ProxyTypeDescriptor:
        if self._state is not RegistryState.READY:
            raise NotInitializedError(f"proxy registry is {self._state.value}")
        descriptor = self._entries.get(proxy_name)
        if descriptor is None:
            raise UnknownProxyError(f"unknown proxy: {proxy_name}")
        return descriptor

    def names(self) -> list[str]:
        return list(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[ProxyTypeDescriptor]:
        return iter(self._entries.values())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ProxyRegistry):
            return NotImplemented
        return self._state is other._state and dict(self._entries) == dict(other._entries)

    __hash__ = None  # type: ignore[assignment]

    def as_dict(self) -> dict[str, object]:
        return {
            "state": self._state.value,
            "proxies": [
                {
                    "proxy_name": item.proxy_name,
                    "interface": item.interface_name,
                    "source_interface": item.source_interface,
                    "methods": [
                        {
                            "name": method.name,
                            "command": method.versioned_command_name,
                            "parameters": [
                                {"name": param.name, "type": type_label(param.type)}
                                for param in method.signature.parameters
                            ],
                            "returns": type_label(method.signature.return_type),
                        }
                        for method in item.methods
                    ],
                }
                for item in self
            ],
            "errors": [str(err) for err in self._errors],
        }

    def digest(self) -> str:
        encoded = json.dumps(self.as_dict(), sort_keys=True)
        return hashlib.sha256(encoded.encode("utf-8")).hexdigest()


# Process-wide registry, committed once by initialize_registry().
_lock = threading.Lock()
_committed: ProxyRegistry | None = None
_failure: SynthesisError | None = None


def initialize_registry(
    catalog: Iterable[InterfaceDescriptor],
    version_suffix: str | None = None,
    marker: str | None = None,
) -> ProxyRegistry:
    """Run the synthesis pass once per process and publish its registry.

    Concurrent callers block until the first pass commits, then all observe
    the same registry, or the same SynthesisError if the pass failed.
    """
    global _committed, _failure
    from repoproxy.synthesis.driver import synthesize

    with _lock:
        if _committed is not None:
            return _committed
        if _failure is not None:
            raise _failure
        try:
            _committed = synthesize(catalog, version_suffix, marker=marker)
        except SynthesisError as exc:
            _failure = exc
            raise
        return _committed


def get_registry() -> ProxyRegistry:
    registry = _committed
    if registry is None:
        raise NotInitializedError("proxy registry has not been published")
    return registry


def lookup_proxy(proxy_name: str) -> ProxyTypeDescriptor | None:
    registry = _committed
    if registry is None:
        return None
    return registry.lookup(proxy_name)


def reset_registry() -> None:
    """Forget the committed outcome so the next initialize runs a fresh pass."""
    global _committed, _failure
    with _lock:
        _committed = None
        _failure = None
