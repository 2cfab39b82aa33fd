"""End-to-end conversion: tsconfig on disk -> swc options.

Composes the tsconfig loader with the translator so that CLI commands (and
any other entry-point) share the same flow. Loader errors are not caught
here; they reach the caller unchanged.
"""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Any

from adapters.package_manifest import load_nearest_manifest
from adapters.tsconfig_loader import DEFAULT_TSCONFIG, load_compiler_options
from core.domain.models import SwcOptions
from core.interfaces.loaders import CompilerOptionsLoader, ManifestLoader
from core.services.translator import translate


def convert(
    filename: str = DEFAULT_TSCONFIG,
    cwd: str | Path | None = None,
    swc_options: SwcOptions | Mapping[str, Any] | None = None,
    *,
    config_loader: CompilerOptionsLoader = load_compiler_options,
    manifest_loader: ManifestLoader = load_nearest_manifest,
) -> dict[str, Any]:
    """Load `filename` (searched upwards from `cwd`) and translate it.

    A missing tsconfig is treated as empty `compilerOptions`, which still
    yields a complete swc configuration built from defaults.
    """

    cwd = Path(cwd) if cwd is not None else Path.cwd()
    compiler_options = config_loader(filename, cwd) or {}
    return translate(compiler_options, swc_options, cwd, manifest_loader=manifest_loader)
