"""Version policy: the single suffix appended to every backend command name."""

from __future__ import annotations

from dataclasses import dataclass

from repoproxy.config import get_settings
from repoproxy.errors import ConfigurationError


def versioned_command_name(method_name: str, suffix: str) -> str:
    return f"{method_name}{suffix}"


@dataclass(frozen=True, slots=True)
class VersionPolicy:
    """Immutable suffix shared by every method of every proxy in a pass."""

    suffix: str

    def __post_init__(self) -> None:
        if not isinstance(self.suffix, str):
            raise ConfigurationError(f"version suffix must be a string, got {self.suffix!r}")

    def command_name(self, method_name: str) -> str:
        return versioned_command_name(method_name, self.suffix)

    @classmethod
    def from_settings(cls) -> VersionPolicy:
        return cls(suffix=get_settings().repo_version_suffix)
