"""Tests for the nearest package.json loader."""

from __future__ import annotations

import json

import pytest

from adapters.package_manifest import find_nearest_manifest, load_nearest_manifest
from conftest import write_json


class TestLoadNearestManifest:
    """Tests for load_nearest_manifest()."""

    def test_reads_type(self, tmp_path):
        write_json(tmp_path / "package.json", {"name": "esm-app", "type": "module"})

        manifest = load_nearest_manifest(tmp_path)

        assert manifest is not None
        assert manifest.type == "module"
        assert manifest.name == "esm-app"

    def test_nearest_wins(self, tmp_path):
        write_json(tmp_path / "package.json", {"type": "module"})
        inner = write_json(tmp_path / "packages" / "legacy" / "package.json", {"type": "commonjs"})
        src = inner.parent / "src"
        src.mkdir()

        assert find_nearest_manifest(src) == inner.resolve()
        assert load_nearest_manifest(src).type == "commonjs"

    def test_extra_fields_are_kept(self, tmp_path):
        write_json(tmp_path / "package.json", {"name": "x", "scripts": {"build": "swc src"}})

        manifest = load_nearest_manifest(tmp_path)

        assert manifest.type is None
        assert manifest.model_extra["scripts"] == {"build": "swc src"}

    def test_malformed_json_propagates(self, tmp_path):
        (tmp_path / "package.json").write_text("{,}", encoding="utf-8")

        with pytest.raises(json.JSONDecodeError):
            load_nearest_manifest(tmp_path)
