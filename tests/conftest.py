"""Shared pytest fixtures for the tsconfig-to-swc test suite."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest

from core.domain.models import PackageManifest


def write_json(path: Path, data: Any) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data, indent=2), encoding="utf-8")
    return path


class StubManifestLoader:
    """Manifest loader that returns a fixed manifest and records its calls."""

    def __init__(self, manifest: PackageManifest | None = None) -> None:
        self.manifest = manifest
        self.calls: list[Any] = []

    def __call__(self, cwd=None):
        self.calls.append(cwd)
        return self.manifest


@pytest.fixture
def no_manifest() -> StubManifestLoader:
    return StubManifestLoader(None)


@pytest.fixture
def esm_manifest() -> StubManifestLoader:
    return StubManifestLoader(PackageManifest(type="module"))


@pytest.fixture
def cjs_manifest() -> StubManifestLoader:
    return StubManifestLoader(PackageManifest(type="commonjs"))


@pytest.fixture
def project(tmp_path: Path) -> Path:
    """Empty project directory with a CommonJS package.json."""

    write_json(tmp_path / "package.json", {"name": "fixture", "version": "1.0.0"})
    return tmp_path
