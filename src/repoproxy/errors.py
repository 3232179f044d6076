"""repoproxy exception hierarchy.

All repoproxy-specific exceptions inherit from RepoProxyError,
enabling structured error handling and cleaner catch clauses.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from repoproxy.registry import ProxyRegistry


class RepoProxyError(Exception):
    """Base exception for all repoproxy errors."""

    def __init__(self, message: str = "", *, retryable: bool = False) -> None:
        super().__init__(message)
        self.retryable = retryable


class ConfigurationError(RepoProxyError):
    """A repository interface cannot be turned into a proxy descriptor."""

    def __init__(self, message: str = "", *, interface_name: str = "") -> None:
        super().__init__(message)
        self.interface_name = interface_name


class DuplicateNameError(RepoProxyError):
    """Two qualifying interfaces synthesize the same proxy name."""

    def __init__(self, proxy_name: str, sources: tuple[str, ...] = ()) -> None:
        detail = f" (from {', '.join(sources)})" if sources else ""
        super().__init__(f"duplicate proxy name: {proxy_name}{detail}")
        self.proxy_name = proxy_name
        self.sources = sources


class NotInitializedError(RepoProxyError):
    """The proxy registry has not been published yet."""


class UnknownProxyError(RepoProxyError, LookupError):
    """A published registry has no entry under the requested name."""


class RegistryStateError(RepoProxyError):
    """Illegal registry lifecycle transition."""


class CatalogError(RepoProxyError):
    """Interface catalog could not be read or is malformed."""


class SynthesisError(RepoProxyError):
    """A synthesis pass failed; carries every error collected during the pass."""

    def __init__(
        self,
        errors: list[RepoProxyError],
        registry: ProxyRegistry | None = None,
    ) -> None:
        lines = "; ".join(str(err) for err in errors)
        super().__init__(f"synthesis failed with {len(errors)} error(s): {lines}")
        self.errors = list(errors)
        self.registry = registry
