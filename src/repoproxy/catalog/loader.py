"""JSON interface catalogs, validated with pydantic."""

from __future__ import annotations

import json
from pathlib import Path

from pydantic import BaseModel, Field, ValidationError

from repoproxy.catalog.types import InterfaceDescriptor, MethodSignature, Parameter
from repoproxy.errors import CatalogError


class ParameterInput(BaseModel):
    name: str = Field(min_length=1)
    type: str = "object"


class MethodInput(BaseModel):
    name: str = Field(min_length=1)
    parameters: list[ParameterInput] = Field(default_factory=list)
    returns: str = "None"


class InterfaceInput(BaseModel):
    name: str = Field(min_length=1)
    namespace: str = ""
    kind: str = "interface"
    extends: list[str] = Field(default_factory=list)
    methods: list[MethodInput] = Field(default_factory=list)


class CatalogInput(BaseModel):
    interfaces: list[InterfaceInput] = Field(default_factory=list)


def _to_descriptor(item: InterfaceInput) -> InterfaceDescriptor:
    return InterfaceDescriptor(
        name=item.name,
        namespace=item.namespace,
        is_interface=item.kind == "interface",
        extends=frozenset(item.extends),
        methods=tuple(
            MethodSignature(
                name=method.name,
                parameters=tuple(Parameter(name=p.name, type=p.type) for p in method.parameters),
                return_type=method.returns,
            )
            for method in item.methods
        ),
    )


def parse_catalog(payload: object) -> list[InterfaceDescriptor]:
    try:
        catalog = CatalogInput.model_validate(payload)
    except ValidationError as exc:
        raise CatalogError(f"invalid interface catalog: {exc}") from exc
    return [_to_descriptor(item) for item in catalog.interfaces]


def load_catalog(path: Path) -> list[InterfaceDescriptor]:
    if not path.exists():
        raise CatalogError(f"catalog not found: {path}")
    try:
        decoded = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise CatalogError(f"catalog is not valid JSON: {path}: {exc}") from exc
    return parse_catalog(decoded)
