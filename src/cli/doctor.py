"""Doctor command for project diagnostics."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from adapters.package_manifest import find_nearest_manifest, read_manifest
from adapters.tsconfig_loader import find_tsconfig, parse_jsonc, read_tsconfig
from core.config import AppSettings

app = typer.Typer(no_args_is_help=True, help="Project diagnostics and configuration checks.")

_console = Console()


def _check_tsconfig(path: Path) -> tuple[bool, str]:
    try:
        raw = parse_jsonc(path)
        config = read_tsconfig(path)
    except (OSError, ValueError) as exc:
        return False, str(exc)

    extends = raw.get("extends") if isinstance(raw, dict) else None
    options = config.get("compilerOptions")
    if options is not None and not isinstance(options, dict):
        return False, "compilerOptions must be an object"
    detail = f"{len(options or {})} compilerOptions"
    if extends:
        detail += f", extends {extends}"
    return True, detail


def _check_manifest(path: Path) -> tuple[bool, str]:
    try:
        manifest = read_manifest(path)
    except (OSError, ValueError) as exc:
        return False, str(exc)
    return True, f"type={manifest.type or '(unset)'}"


@app.command()
def run(
    filename: Optional[str] = typer.Option(None, "--filename", "-f", help="tsconfig file name."),
    cwd: Optional[Path] = typer.Option(None, "--cwd", "-c", help="Directory to search from."),
) -> None:
    """Check which tsconfig and package.json the conversion would use."""

    settings = AppSettings()
    cwd = cwd or Path.cwd()
    filename = filename or settings.tsconfig_filename

    table = Table(title="tsconfig-to-swc Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    failed = False

    tsconfig_path = find_tsconfig(filename, cwd)
    if tsconfig_path is None:
        table.add_row("tsconfig", "MISSING", f"{filename} not found from {cwd} -> defaults only")
    else:
        ok, detail = _check_tsconfig(tsconfig_path)
        failed = failed or not ok
        table.add_row("tsconfig", "OK" if ok else "FAIL", f"{tsconfig_path}: {detail}")

    manifest_path = find_nearest_manifest(cwd)
    if manifest_path is None:
        table.add_row("package.json", "OPTIONAL", "Not found -> commonjs fallback")
    else:
        ok, detail = _check_manifest(manifest_path)
        failed = failed or not ok
        table.add_row("package.json", "OK" if ok else "FAIL", f"{manifest_path}: {detail}")

    _console.print(table)

    if failed:
        raise typer.Exit(code=1)


@app.command(name="settings")
def show_settings() -> None:
    """Print the effective settings (environment + .env)."""

    settings = AppSettings()

    table = Table(title="Settings")
    table.add_column("Setting", style="bright_green", no_wrap=True)
    table.add_column("Value", style="white")
    for key, value in settings.model_dump().items():
        table.add_row(key, str(value))
    _console.print(table)
