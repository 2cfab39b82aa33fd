"""Lectura del `package.json` más cercano.

Solo se usa para decidir el tipo de módulo cuando el tsconfig no lo fija.
Un manifest con JSON inválido NO se ignora: el error se propaga al llamador.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from core.domain.models import PackageManifest

logger = logging.getLogger(__name__)

MANIFEST_FILENAME = "package.json"


def find_nearest_manifest(cwd: str | Path | None = None) -> Path | None:
    """Busca `package.json` en `cwd` y en sus directorios ancestros."""

    start = Path(cwd) if cwd is not None else Path.cwd()
    start = start.resolve()
    for directory in (start, *start.parents):
        candidate = directory / MANIFEST_FILENAME
        if candidate.is_file():
            return candidate
    return None


def read_manifest(path: Path) -> PackageManifest:
    raw = path.read_text(encoding="utf-8")
    data = json.loads(raw)
    return PackageManifest.model_validate(data)


def load_nearest_manifest(cwd: str | Path | None = None) -> PackageManifest | None:
    """Carga el manifest más cercano a `cwd`, o `None` si no existe ninguno."""

    path = find_nearest_manifest(cwd)
    if path is None:
        logger.debug("No %s found above %s", MANIFEST_FILENAME, cwd or Path.cwd())
        return None

    logger.debug("Reading package manifest %s", path)
    return read_manifest(path)
