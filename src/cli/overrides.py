"""Parsing de `--set KEY=VALUE` para overrides de swc.

- KEY es una ruta con puntos (`jsc.minify.compress`).
- VALUE se interpreta como JSON (`true`, `3`, `{"a": 1}`); si no es JSON
  válido se usa el texto tal cual (`module.type=amd`).
"""

from __future__ import annotations

import json
from typing import Any, Iterable

import typer


def parse_assignment(raw: str) -> tuple[list[str], Any]:
    key, sep, value = raw.partition("=")
    key = key.strip()
    if not sep or not key:
        raise typer.BadParameter(f"Expected KEY=VALUE, got {raw!r}")

    path = key.split(".")
    if any(not part for part in path):
        raise typer.BadParameter(f"Invalid option path: {key!r}")

    try:
        parsed = json.loads(value)
    except json.JSONDecodeError:
        parsed = value
    return path, parsed


def build_overrides(assignments: Iterable[str] | None) -> dict[str, Any]:
    """Convierte una lista de `KEY=VALUE` en un objeto anidado.

    Las asignaciones posteriores ganan sobre las anteriores.
    """

    overrides: dict[str, Any] = {}
    for raw in assignments or ():
        path, value = parse_assignment(raw)
        node = overrides
        for part in path[:-1]:
            child = node.get(part)
            if not isinstance(child, dict):
                child = {}
                node[part] = child
            node = child
        node[path[-1]] = value
    return overrides
