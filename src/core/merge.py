"""Deep merge de objetos de configuración.

Reglas:
- mapping + mapping: merge clave a clave (recursivo).
- lista + lista: concatenación (primero `base`, luego `override`).
- cualquier otra combinación: gana una copia de `override`.

Nunca muta las entradas.
"""

from __future__ import annotations

import copy
from collections.abc import Mapping
from typing import Any


def deep_merge(base: Mapping[str, Any], override: Mapping[str, Any] | None) -> dict[str, Any]:
    """Deep merge two mappings. Override values win for non-container values."""

    result = copy.deepcopy(dict(base))
    if not override:
        return result

    for key, value in override.items():
        current = result.get(key)
        if isinstance(current, Mapping) and isinstance(value, Mapping):
            result[key] = deep_merge(current, value)
        elif isinstance(current, list) and isinstance(value, list):
            result[key] = current + copy.deepcopy(value)
        else:
            result[key] = copy.deepcopy(value)
    return result


def prune_none(value: Any) -> Any:
    """Elimina recursivamente las claves cuyo valor es `None`."""

    if isinstance(value, Mapping):
        return {k: prune_none(v) for k, v in value.items() if v is not None}
    if isinstance(value, list):
        return [prune_none(v) for v in value]
    return value
