"""Generic proxy objects that turn method calls into versioned command invocations."""

from __future__ import annotations

import functools
import logging
from typing import Any, Protocol

from repoproxy.catalog.types import ProxyMethodDescriptor, ProxyTypeDescriptor, proxy_name_for
from repoproxy.registry import ProxyRegistry, get_registry

logger = logging.getLogger(__name__)


class CommandExecutor(Protocol):
    def execute(
        self,
        command: str,
        parameters: dict[str, Any],
        return_type: Any,
    ) -> Any: ...


def bind_arguments(
    method: ProxyMethodDescriptor,
    args: tuple[Any, ...],
    kwargs: dict[str, Any],
) -> dict[str, Any]:
    """Map call arguments onto the method's parameter names."""
    names = method.signature.parameter_names
    if len(args) > len(names):
        raise TypeError(
            f"{method.name}() takes {len(names)} arguments but {len(args)} were given"
        )
    bound = dict(zip(names, args, strict=False))
    for key, value in kwargs.items():
        if key not in names:
            raise TypeError(f"{method.name}() got an unexpected keyword argument {key!r}")
        if key in bound:
            raise TypeError(f"{method.name}() got multiple values for argument {key!r}")
        bound[key] = value
    missing = [name for name in names if name not in bound]
    if missing:
        raise TypeError(f"{method.name}() missing arguments: {', '.join(missing)}")
    return {name: bound[name] for name in names}


def _accepts(method: ProxyMethodDescriptor, parameters: dict[str, Any]) -> bool:
    for param in method.signature.parameters:
        expected = param.type
        if isinstance(expected, type) and expected is not object:
            if not isinstance(parameters[param.name], expected):
                return False
    return True


class RepositoryProxy:
    """Callable stand-in for a repository interface, driven by its descriptor."""

    def __init__(self, descriptor: ProxyTypeDescriptor, executor: CommandExecutor) -> None:
        self._descriptor = descriptor
        self._executor = executor

    @property
    def descriptor(self) -> ProxyTypeDescriptor:
        return self._descriptor

    def invoke(self, method_name: str, *args: Any, **kwargs: Any) -> Any:
        """Execute the versioned command behind `method_name`.

        Among overloads whose parameter names bind the arguments, the first one
        whose declared Python types accept the values wins. Type names given as
        strings or generic aliases are not checked, so such overloads fall back
        to declaration order.
        """
        overloads = self._descriptor.methods_named(method_name)
        if not overloads:
            raise AttributeError(f"{self._descriptor.proxy_name} has no method {method_name!r}")
        candidates: list[tuple[ProxyMethodDescriptor, dict[str, Any]]] = []
        last_error: TypeError | None = None
        for method in overloads:
            try:
                candidates.append((method, bind_arguments(method, args, kwargs)))
            except TypeError as exc:
                last_error = exc
        if not candidates:
            assert last_error is not None
            raise last_error

        method, parameters = next(
            (item for item in candidates if _accepts(item[0], item[1])), candidates[0]
        )
        logger.debug(
            "Dispatching %s.%s as %s",
            self._descriptor.proxy_name,
            method_name,
            method.versioned_command_name,
        )
        return self._executor.execute(
            method.versioned_command_name,
            parameters,
            method.signature.return_type,
        )

    def __getattr__(self, name: str) -> Any:
        if name.startswith("_") or not self._descriptor.methods_named(name):
            raise AttributeError(name)
        return functools.partial(self.invoke, name)

    def __dir__(self) -> list[str]:
        return sorted({*super().__dir__(), *(m.name for m in self._descriptor.methods)})

    def __repr__(self) -> str:
        return f"<RepositoryProxy {self._descriptor.proxy_name}>"


def as_versioned_repo(
    executor: CommandExecutor,
    interface_name: str,
    registry: ProxyRegistry | None = None,
) -> RepositoryProxy:
    source = registry if registry is not None else get_registry()
    return RepositoryProxy(source.require(proxy_name_for(interface_name)), executor)
