"""Tests for the generic repository proxy dispatch object."""

from typing import Any

import pytest

from repoproxy.catalog.types import InterfaceDescriptor, MethodSignature, Parameter
from repoproxy.dispatch import RepositoryProxy, as_versioned_repo, bind_arguments
from repoproxy.errors import NotInitializedError, UnknownProxyError
from repoproxy.registry import initialize_registry
from repoproxy.synthesis.driver import synthesize


class RecordingExecutor:
    def __init__(self, result: Any = None) -> None:
        self.calls: list[tuple[str, dict[str, Any], Any]] = []
        self.result = result

    def execute(self, command: str, parameters: dict[str, Any], return_type: Any) -> Any:
        self.calls.append((command, parameters, return_type))
        return self.result


def _catalog() -> list[InterfaceDescriptor]:
    return [
        InterfaceDescriptor(name="Repository"),
        InterfaceDescriptor(
            name="BeerRepository",
            extends=frozenset({"Repository"}),
            methods=(
                MethodSignature(
                    name="FindBeers",
                    parameters=(Parameter("name", str),),
                    return_type="list[Beer]",
                ),
                MethodSignature(
                    name="FindBeer",
                    parameters=(Parameter("id", int),),
                    return_type="Beer",
                ),
                MethodSignature(
                    name="FindBeer",
                    parameters=(Parameter("name", str),),
                    return_type="Beer",
                ),
                MethodSignature(
                    name="FindBeer",
                    parameters=(Parameter("name", str), Parameter("brewery", str)),
                    return_type="Beer",
                ),
            ),
        ),
    ]


def test_call_is_dispatched_by_versioned_name() -> None:
    registry = synthesize(_catalog(), "_2")
    executor = RecordingExecutor(result=["HopDevil"])
    repo = as_versioned_repo(executor, "BeerRepository", registry=registry)

    assert repo.FindBeers("HopDevil") == ["HopDevil"]
    assert executor.calls == [("FindBeers_2", {"name": "HopDevil"}, "list[Beer]")]


def test_keyword_arguments_bind_by_name() -> None:
    registry = synthesize(_catalog(), "_2")
    executor = RecordingExecutor()
    repo = as_versioned_repo(executor, "BeerRepository", registry=registry)

    repo.invoke("FindBeer", brewery="Victory", name="HopDevil")
    command, parameters, _ = executor.calls[0]
    assert command == "FindBeer_2"
    assert list(parameters) == ["name", "brewery"]


def test_overload_is_chosen_by_binding() -> None:
    registry = synthesize(_catalog(), "_2")
    executor = RecordingExecutor()
    repo = as_versioned_repo(executor, "BeerRepository", registry=registry)

    repo.FindBeer(7)
    repo.FindBeer("HopDevil", "Victory")
    assert [call[1] for call in executor.calls] == [
        {"id": 7},
        {"name": "HopDevil", "brewery": "Victory"},
    ]


def test_bad_calls_raise() -> None:
    registry = synthesize(_catalog(), "_2")
    repo = as_versioned_repo(RecordingExecutor(), "BeerRepository", registry=registry)

    with pytest.raises(AttributeError):
        repo.DeleteBeer("x")
    with pytest.raises(TypeError):
        repo.FindBeers()
    with pytest.raises(TypeError):
        repo.FindBeers("a", "b")
    with pytest.raises(TypeError):
        repo.FindBeers(nme="HopDevil")


def test_bind_arguments_rejects_duplicate_values() -> None:
    registry = synthesize(_catalog(), "_2")
    method = registry.require("BeerRepository_Proxy").methods[0]
    with pytest.raises(TypeError, match="multiple values"):
        bind_arguments(method, ("HopDevil",), {"name": "HopDevil"})


def test_as_versioned_repo_uses_process_registry() -> None:
    with pytest.raises(NotInitializedError):
        as_versioned_repo(RecordingExecutor(), "BeerRepository")

    initialize_registry(_catalog(), "_2")
    repo = as_versioned_repo(RecordingExecutor(), "BeerRepository")
    assert isinstance(repo, RepositoryProxy)
    assert repo.descriptor.proxy_name == "BeerRepository_Proxy"
    assert "FindBeers" in dir(repo)
    with pytest.raises(UnknownProxyError):
        as_versioned_repo(RecordingExecutor(), "WineRepository")


def test_overload_is_chosen_by_declared_type() -> None:
    registry = synthesize(_catalog(), "_2")
    executor = RecordingExecutor()
    repo = as_versioned_repo(executor, "BeerRepository", registry=registry)

    repo.FindBeer("HopDevil")
    repo.FindBeer(7)
    assert [call[1] for call in executor.calls] == [{"name": "HopDevil"}, {"id": 7}]


def test_untyped_overloads_fall_back_to_declaration_order() -> None:
    catalog = [
        InterfaceDescriptor(name="Repository"),
        InterfaceDescriptor(
            name="GlassRepository",
            extends=frozenset({"Repository"}),
            methods=(
                MethodSignature(name="Find", parameters=(Parameter("id", "int"),)),
                MethodSignature(name="Find", parameters=(Parameter("name", "string"),)),
            ),
        ),
    ]
    executor = RecordingExecutor()
    repo = as_versioned_repo(executor, "GlassRepository", registry=synthesize(catalog, "_2"))

    repo.Find("pint")
    assert executor.calls[0][1] == {"id": "pint"}
