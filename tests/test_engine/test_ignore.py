"""Tests for the ignore registry."""

import json

import pytest

from iconlint.engine.ignore import IgnoreRegistry


def test_sorted_serialisation():
    registry = IgnoreRegistry(
        {
            "negative-zeros": {"M2 2": "Beta", "M1 1": "Alpha"},
            "icon-centered": {"M9 9": "Zeta", "M3 3": "Alpha", "M0 0": "Alpha"},
        }
    )
    data = registry.to_dict()
    assert list(data) == ["icon-centered", "negative-zeros"]
    assert list(data["icon-centered"]) == ["M0 0", "M3 3", "M9 9"]
    assert list(data["negative-zeros"]) == ["M1 1", "M2 2"]


def test_dumps_format():
    text = IgnoreRegistry({"icon-size": {"M0 0": "Dot"}}).dumps()
    assert text == '{\n  "icon-size": {\n    "M0 0": "Dot"\n  }\n}\n'


def test_is_ignored():
    registry = IgnoreRegistry({"icon-size": {"M0 0": "Dot"}})
    assert registry.is_ignored("icon-size", "M0 0")
    assert not registry.is_ignored("icon-size", "M0 0 ")
    assert not registry.is_ignored("icon-centered", "M0 0")


def test_with_entries_returns_new_registry():
    base = IgnoreRegistry({"icon-size": {"M0 0": "Dot"}})
    merged = base.with_entries([("icon-size", "M1 1", "Other"), ("negative-zeros", "M-0 0", "Neg")])
    assert len(base) == 1
    assert len(merged) == 3
    assert merged.is_ignored("negative-zeros", "M-0 0")


def test_load_missing_file(tmp_path):
    assert len(IgnoreRegistry.load(tmp_path / "missing.json")) == 0


def test_save_and_load(tmp_path):
    target = tmp_path / "ignored.json"
    registry = IgnoreRegistry({"icon-size": {"M0 0": "Dot"}})
    registry.save(target)
    assert IgnoreRegistry.load(target) == registry
    assert target.read_text(encoding="utf-8").endswith("}\n")


def test_load_rejects_bad_structure(tmp_path):
    target = tmp_path / "ignored.json"
    target.write_text(json.dumps({"icon-size": ["M0 0"]}), encoding="utf-8")
    with pytest.raises(ValueError):
        IgnoreRegistry.load(target)
