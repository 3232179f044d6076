"""Read Python Protocol/ABC classes into interface declarations."""

from __future__ import annotations

import abc
import importlib
import inspect
import logging
import pkgutil
import typing
from collections.abc import Iterable
from types import ModuleType

from repoproxy.catalog.types import InterfaceDescriptor, MethodSignature, Parameter

logger = logging.getLogger(__name__)

_IGNORED_BASES = (object, typing.Protocol, typing.Generic, abc.ABC)


def _is_protocol(cls: type) -> bool:
    return bool(getattr(cls, "_is_protocol", False))


def _declared_methods(cls: type) -> list[tuple[str, object]]:
    methods: list[tuple[str, object]] = []
    for name, member in cls.__dict__.items():
        if name.startswith("_"):
            continue
        if isinstance(member, (staticmethod, classmethod)):
            member = member.__func__
        if inspect.isfunction(member):
            methods.append((name, member))
    return methods


def _is_interface(cls: type) -> bool:
    """Protocols, and ABCs whose every public method (inherited too) is abstract."""
    if _is_protocol(cls):
        return True
    if not isinstance(cls, abc.ABCMeta):
        return False
    names = {
        name
        for base in cls.__mro__
        if base not in _IGNORED_BASES
        for name, _ in _declared_methods(base)
    }
    abstract = getattr(cls, "__abstractmethods__", frozenset())
    return bool(names) and names <= abstract


def _annotations(func: object) -> dict[str, object]:
    try:
        return inspect.get_annotations(func, eval_str=True)  # type: ignore[arg-type]
    except (NameError, SyntaxError, TypeError):
        logger.debug("Keeping unresolved annotations for %r", func)
        return inspect.get_annotations(func)  # type: ignore[arg-type]


def signature_from_function(name: str, func: object) -> MethodSignature:
    annotations = _annotations(func)
    params: list[Parameter] = []
    signature = inspect.signature(func)  # type: ignore[arg-type]
    for index, param in enumerate(signature.parameters.values()):
        if index == 0 and param.name in ("self", "cls"):
            continue
        if param.kind in (param.VAR_POSITIONAL, param.VAR_KEYWORD):
            continue
        params.append(Parameter(name=param.name, type=annotations.get(param.name, object)))
    return MethodSignature(
        name=name,
        parameters=tuple(params),
        return_type=annotations.get("return"),
    )


def declaration_from_class(cls: type) -> InterfaceDescriptor:
    extends = frozenset(
        base.__name__ for base in cls.__bases__ if base not in _IGNORED_BASES
    )
    return InterfaceDescriptor(
        name=cls.__name__,
        methods=tuple(signature_from_function(name, func) for name, func in _declared_methods(cls)),
        extends=extends,
        is_interface=_is_interface(cls),
        namespace=cls.__module__,
    )


def declarations_from_classes(classes: Iterable[type]) -> list[InterfaceDescriptor]:
    seen: set[type] = set()
    out: list[InterfaceDescriptor] = []
    for cls in classes:
        if cls in seen:
            continue
        seen.add(cls)
        out.append(declaration_from_class(cls))
    return out


def _iter_modules(module: ModuleType) -> Iterable[ModuleType]:
    yield module
    path = getattr(module, "__path__", None)
    if path is None:
        return
    for _importer, modname, _ispkg in pkgutil.walk_packages(path, prefix=f"{module.__name__}."):
        yield importlib.import_module(modname)


def discover_declarations(modules: Iterable[ModuleType | str]) -> list[InterfaceDescriptor]:
    """Collect every class defined in the given modules (packages are walked)."""
    classes: list[type] = []
    for entry in modules:
        root = importlib.import_module(entry) if isinstance(entry, str) else entry
        for mod in _iter_modules(root):
            for attr_name in sorted(vars(mod)):
                attr = getattr(mod, attr_name)
                if isinstance(attr, type) and attr.__module__ == mod.__name__:
                    classes.append(attr)
    return declarations_from_classes(classes)
