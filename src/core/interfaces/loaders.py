"""Contratos de los colaboradores de carga.

Por qué Protocol:
- El traductor solo necesita "algo que devuelva el manifest más cercano";
  los tests inyectan un stub sin tocar el disco.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Protocol, runtime_checkable

from core.domain.models import PackageManifest


@runtime_checkable
class ManifestLoader(Protocol):
    """Devuelve el `package.json` más cercano a `cwd`, o `None` si no hay ninguno."""

    def __call__(self, cwd: str | Path | None = None) -> PackageManifest | None:
        ...


@runtime_checkable
class CompilerOptionsLoader(Protocol):
    """Devuelve `compilerOptions` ya resueltos (cadena `extends` incluida)."""

    def __call__(
        self,
        filename: str = "tsconfig.json",
        cwd: str | Path | None = None,
    ) -> dict[str, Any] | None:
        ...
