"""Tests for the option catalog."""
from pathlib import Path

import pytest

from src.engine import catalog as catalog_module
from src.engine.catalog import DEFAULT_CATALOG, DEFAULT_TRIPS, OptionCatalog, load_catalog


def test_default_catalog_has_sixteen_unique_trips():
    assert len(DEFAULT_CATALOG) == 16
    assert len(set(DEFAULT_TRIPS)) == 16
    assert "New Forest" in DEFAULT_CATALOG


def test_catalog_preserves_order():
    catalog = OptionCatalog.of(["Nice", "Algarve", "Lille"])
    assert list(catalog) == ["Nice", "Algarve", "Lille"]


def test_catalog_rejects_duplicates():
    with pytest.raises(ValueError, match="Duplicate"):
        OptionCatalog.of(["Nice", "Nice"])


@pytest.mark.parametrize("bad", ["", "   ", None, 5])
def test_catalog_rejects_blank_or_non_string(bad):
    with pytest.raises(ValueError):
        OptionCatalog.of(["Nice", bad])


def test_catalog_is_immutable():
    with pytest.raises(AttributeError):
        DEFAULT_CATALOG.names = ("Elsewhere",)


def test_load_catalog_defaults(monkeypatch):
    monkeypatch.setattr(catalog_module.settings, "catalog_path", None)
    monkeypatch.setattr(catalog_module.settings, "trip_options", None)
    assert load_catalog() == DEFAULT_CATALOG


def test_load_catalog_overrides_win(tmp_path: Path):
    path = tmp_path / "catalog.yaml"
    path.write_text("options:\n  - Lisbon\n", encoding="utf-8")
    assert list(load_catalog(path, overrides=["Nice", "Vienna"])) == ["Nice", "Vienna"]


def test_load_catalog_from_yaml_mapping(tmp_path: Path):
    path = tmp_path / "catalog.yaml"
    path.write_text("options:\n  - Lisbon\n  - Galway\n", encoding="utf-8")
    assert list(load_catalog(path)) == ["Lisbon", "Galway"]


def test_load_catalog_from_yaml_list(tmp_path: Path):
    path = tmp_path / "catalog.yaml"
    path.write_text("- Brighton\n- Bordeaux\n", encoding="utf-8")
    assert list(load_catalog(path)) == ["Brighton", "Bordeaux"]


def test_load_catalog_falls_back_to_settings(tmp_path: Path, monkeypatch):
    monkeypatch.setattr(catalog_module.settings, "catalog_path", None)
    monkeypatch.setattr(catalog_module.settings, "trip_options", ["Chamonix", "Birch"])
    assert list(load_catalog(tmp_path / "missing.yaml")) == ["Chamonix", "Birch"]


def test_load_catalog_empty_yaml_uses_default(tmp_path: Path, monkeypatch):
    monkeypatch.setattr(catalog_module.settings, "trip_options", None)
    path = tmp_path / "catalog.yaml"
    path.write_text("", encoding="utf-8")
    assert load_catalog(path) == DEFAULT_CATALOG


@pytest.mark.parametrize("entry", ["42", "true", "~", "3.5"])
def test_load_catalog_rejects_non_string_yaml_entries(tmp_path: Path, entry):
    path = tmp_path / "catalog.yaml"
    path.write_text(f"options:\n  - Lisbon\n  - {entry}\n", encoding="utf-8")
    with pytest.raises(ValueError, match="non-empty string"):
        load_catalog(path)


def test_load_catalog_keeps_quoted_numbers_as_names(tmp_path: Path):
    path = tmp_path / "catalog.yaml"
    path.write_text("options:\n  - Lisbon\n  - '1066 Country'\n", encoding="utf-8")
    assert list(load_catalog(path)) == ["Lisbon", "1066 Country"]
