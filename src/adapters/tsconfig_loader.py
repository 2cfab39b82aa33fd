"""Carga de tsconfig (JSONC + cadena `extends`).

Soporta:
- Comentarios y comas finales (tsconfig es JSONC), vía `json5`.
- `extends` como string o lista (TS >= 5.0; gana la última entrada).
- Rutas relativas (`./base`, `../tsconfig.base.json`) y presets en
  `node_modules` (`@tsconfig/node16`, `@tsconfig/node16/tsconfig.json`).

Errores:
- Un `extends` que no se puede resolver lanza `FileNotFoundError`.
- Una cadena circular lanza `ValueError`.
- Un `extends` que no es string ni lista de strings lanza `ValueError`.
- JSON inválido propaga el `ValueError` de `json5`.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any

import json5

from adapters.package_manifest import MANIFEST_FILENAME, read_manifest

logger = logging.getLogger(__name__)

DEFAULT_TSCONFIG = "tsconfig.json"

# Opciones cuyo valor es una ruta relativa al tsconfig que la declara.
PATH_OPTIONS = ("baseUrl", "outDir", "rootDir", "declarationDir")


def find_tsconfig(filename: str = DEFAULT_TSCONFIG, cwd: str | Path | None = None) -> Path | None:
    """Localiza el tsconfig.

    - Si `filename` es absoluto o incluye directorio, se comprueba esa ruta
      (relativa a `cwd`).
    - Si es un nombre simple, se busca desde `cwd` hacia arriba.
    """

    base = (Path(cwd) if cwd is not None else Path.cwd()).resolve()
    candidate = Path(filename)

    if candidate.is_absolute() or len(candidate.parts) > 1:
        path = candidate if candidate.is_absolute() else base / candidate
        return path.resolve() if path.is_file() else None

    for directory in (base, *base.parents):
        path = directory / candidate
        if path.is_file():
            return path
    return None


def parse_jsonc(path: Path) -> Any:
    raw = path.read_text(encoding="utf-8-sig")
    if not raw.strip():
        return {}
    return json5.loads(raw)


def read_tsconfig(path: str | Path) -> dict[str, Any]:
    """Lee un tsconfig y aplica toda su cadena `extends`.

    Devuelve el objeto de configuración efectivo, sin la clave `extends`.
    """

    return _read_with_extends(Path(path).resolve(), ())


def load_compiler_options(
    filename: str = DEFAULT_TSCONFIG,
    cwd: str | Path | None = None,
) -> dict[str, Any] | None:
    """Devuelve los `compilerOptions` efectivos, o `None` si no hay tsconfig."""

    path = find_tsconfig(filename, cwd)
    if path is None:
        logger.debug("No %s found from %s", filename, cwd or Path.cwd())
        return None

    logger.debug("Using tsconfig %s", path)
    config = read_tsconfig(path)
    options = config.get("compilerOptions")
    if options is None:
        return {}
    if not isinstance(options, dict):
        logger.warning("Ignoring non-object compilerOptions in %s", path)
        return {}
    return dict(options)


def resolve_extends(specifier: str, directory: Path) -> Path:
    """Resuelve un `extends` relativo a `directory` (el del tsconfig que extiende)."""

    if specifier.startswith(".") or Path(specifier).is_absolute():
        found = _resolve_file(directory / specifier)
    else:
        found = _resolve_package(specifier, directory)

    if found is None:
        raise FileNotFoundError(
            f"File '{specifier}' not found (extended from {directory})."
        )
    logger.debug("Resolved extends %r -> %s", specifier, found)
    return found.resolve()


def _resolve_file(path: Path) -> Path | None:
    if path.is_file():
        return path
    if path.suffix != ".json":
        with_suffix = path.with_name(path.name + ".json")
        if with_suffix.is_file():
            return with_suffix
    if path.is_dir():
        nested = path / DEFAULT_TSCONFIG
        if nested.is_file():
            return nested
    return None


def _resolve_package(specifier: str, directory: Path) -> Path | None:
    for parent in (directory, *directory.parents):
        node_modules = parent / "node_modules"
        if not node_modules.is_dir():
            continue

        target = node_modules / specifier
        if target.is_dir():
            manifest_path = target / MANIFEST_FILENAME
            if manifest_path.is_file():
                manifest = read_manifest(manifest_path)
                if manifest.tsconfig:
                    declared = target / manifest.tsconfig
                    if declared.is_file():
                        return declared

        found = _resolve_file(target)
        if found is not None:
            return found
    return None


def _read_with_extends(path: Path, chain: tuple[Path, ...]) -> dict[str, Any]:
    if path in chain:
        cycle = " -> ".join(str(p) for p in (*chain, path))
        raise ValueError(f"Circularity detected while resolving configuration: {cycle}")

    data = parse_jsonc(path)
    if not isinstance(data, dict):
        raise ValueError(f"{path} must contain a JSON object")

    extends = data.pop("extends", None)
    if not extends:
        return data

    specifiers = [extends] if isinstance(extends, str) else extends
    if not isinstance(specifiers, list) or not all(isinstance(s, str) for s in specifiers):
        raise ValueError(f"{path}: 'extends' must be a string or a list of strings")
    merged: dict[str, Any] = {}
    for specifier in specifiers:
        base_path = resolve_extends(specifier, path.parent)
        base_config = _read_with_extends(base_path, (*chain, path))
        _rebase_paths(base_config, base_path.parent, path.parent)
        merged = _merge_configs(merged, base_config)

    return _merge_configs(merged, data)


def _merge_configs(base: dict[str, Any], child: dict[str, Any]) -> dict[str, Any]:
    """`compilerOptions` se mezcla por clave; el resto de claves las reemplaza el hijo."""

    result = dict(base)
    for key, value in child.items():
        if key == "compilerOptions" and isinstance(value, dict):
            inherited = result.get("compilerOptions")
            inherited = inherited if isinstance(inherited, dict) else {}
            result[key] = {**inherited, **value}
        else:
            result[key] = value
    return result


def _rebase_paths(config: dict[str, Any], origin: Path, destination: Path) -> None:
    options = config.get("compilerOptions")
    if origin == destination or not isinstance(options, dict):
        return

    for key in PATH_OPTIONS:
        value = options.get(key)
        if not isinstance(value, str) or os.path.isabs(value):
            continue
        rebased = Path(os.path.relpath(origin / value, destination)).as_posix()
        if not rebased.startswith("."):
            rebased = f"./{rebased}"
        options[key] = rebased
