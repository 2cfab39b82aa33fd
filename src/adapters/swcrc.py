"""Lectura/escritura de `.swcrc`.

Por qué JSON con formato estable:
- El archivo generado suele versionarse; indentación fija y salto de línea
  final evitan diffs espurios.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from adapters.tsconfig_loader import parse_jsonc


def load_swcrc(path: Path) -> dict[str, Any]:
    """Carga un `.swcrc` existente (JSONC) para usarlo como override."""

    data = parse_jsonc(path)
    if not isinstance(data, dict):
        raise ValueError(f"{path} must contain a JSON object")
    return data


def dump_swcrc(options: dict[str, Any], *, indent: int = 2) -> str:
    return json.dumps(options, ensure_ascii=False, indent=indent) + "\n"


def export_swcrc(*, options: dict[str, Any], output_path: Path, indent: int = 2) -> Path:
    """Exporta la configuración swc a JSON UTF-8."""

    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(dump_swcrc(options, indent=indent), encoding="utf-8")
    return output_path
