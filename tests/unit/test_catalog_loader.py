import json
from pathlib import Path

import pytest

from repoproxy.catalog.loader import load_catalog, parse_catalog
from repoproxy.errors import CatalogError

SAMPLE = {
    "interfaces": [
        {"name": "Repository"},
        {
            "name": "BeerRepository",
            "namespace": "cellar",
            "extends": ["Repository"],
            "methods": [
                {
                    "name": "FindBeers",
                    "parameters": [{"name": "name", "type": "string"}],
                    "returns": "IList<Beer>",
                }
            ],
        },
        {"name": "BeerRepositoryImpl", "kind": "class", "extends": ["BeerRepository"]},
    ]
}


def test_parse_catalog_builds_declarations() -> None:
    marker, beer, impl = parse_catalog(SAMPLE)
    assert marker.name == "Repository"
    assert marker.extends == frozenset()
    assert beer.qualified_name == "cellar.BeerRepository"
    assert beer.extends == frozenset({"Repository"})
    (method,) = beer.methods
    assert method.name == "FindBeers"
    assert [(p.name, p.type) for p in method.parameters] == [("name", "string")]
    assert method.return_type == "IList<Beer>"
    assert impl.is_interface is False


def test_parse_catalog_rejects_malformed_payload() -> None:
    with pytest.raises(CatalogError):
        parse_catalog({"interfaces": [{"methods": []}]})
    with pytest.raises(CatalogError):
        parse_catalog({"interfaces": [{"name": ""}]})


def test_load_catalog_reads_file(tmp_path: Path) -> None:
    path = tmp_path / "catalog.json"
    path.write_text(json.dumps(SAMPLE), encoding="utf-8")
    assert len(load_catalog(path)) == 3


def test_load_catalog_errors(tmp_path: Path) -> None:
    with pytest.raises(CatalogError, match="not found"):
        load_catalog(tmp_path / "missing.json")
    broken = tmp_path / "broken.json"
    broken.write_text("{not json", encoding="utf-8")
    with pytest.raises(CatalogError, match="not valid JSON"):
        load_catalog(broken)
