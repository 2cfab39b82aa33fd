"""CLI principal (Typer).

Comandos:
- `convert`: imprime (o escribe) el `.swcrc` equivalente al tsconfig.
- `show`: igual que `convert`, pero como tabla Rich.
- `doctor`: diagnósticos de qué archivos se van a usar.

La CLI es el único punto que captura errores de los loaders: los muestra en
rojo y sale con código 1.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, List, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler

from adapters.package_manifest import find_nearest_manifest
from adapters.swcrc import dump_swcrc, export_swcrc, load_swcrc
from adapters.tsconfig_loader import find_tsconfig
from cli import doctor
from cli.overrides import build_overrides
from cli.ui_components import build_options_table, build_source_panel, print_banner
from core.config import AppSettings
from core.merge import deep_merge
from core.services.conversion import convert as convert_tsconfig

app = typer.Typer(
    add_completion=False,
    no_args_is_help=True,
    help="Convert tsconfig.json compilerOptions into an swc configuration.",
)
app.add_typer(doctor.app, name="doctor")

_console = Console()
_err_console = Console(stderr=True)


def _configure_logging(level: int) -> None:
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=_err_console, show_path=False)],
        force=True,
    )


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log loader decisions."),
) -> None:
    settings = AppSettings()
    level = logging.DEBUG if verbose else getattr(logging, settings.log_level)
    _configure_logging(level)


def _collect_overrides(swcrc: Optional[Path], assignments: Optional[List[str]]) -> dict[str, Any]:
    base = load_swcrc(swcrc) if swcrc is not None else {}
    return deep_merge(base, build_overrides(assignments))


def _convert(
    filename: Optional[str],
    cwd: Optional[Path],
    swcrc: Optional[Path],
    assignments: Optional[List[str]],
    settings: AppSettings,
) -> dict[str, Any]:
    try:
        overrides = _collect_overrides(swcrc, assignments)
        return convert_tsconfig(filename or settings.tsconfig_filename, cwd, overrides)
    except (OSError, ValueError) as exc:
        _err_console.print(f"[red]Error:[/red] {exc}")
        raise typer.Exit(code=1) from exc


def _resolve_output(output: Path, settings: AppSettings) -> Path:
    if output.is_dir():
        return output / settings.swcrc_filename
    return output


_FILENAME_OPTION = typer.Option(None, "--filename", "-f", help="tsconfig file name or path.")
_CWD_OPTION = typer.Option(None, "--cwd", "-c", help="Directory to resolve the tsconfig from.")
_SWCRC_OPTION = typer.Option(
    None,
    "--swcrc",
    help="Existing swc config whose values override the translated ones.",
)
_SET_OPTION = typer.Option(
    None,
    "--set",
    "-s",
    help="Override an swc option, e.g. -s jsc.minify.compress=true (repeatable).",
)


@app.command()
def convert(
    filename: Optional[str] = _FILENAME_OPTION,
    cwd: Optional[Path] = _CWD_OPTION,
    output: Optional[Path] = typer.Option(
        None,
        "--output",
        "-o",
        help="Write the result to this file (or <dir>/.swcrc) instead of stdout.",
    ),
    swcrc: Optional[Path] = _SWCRC_OPTION,
    assignments: Optional[List[str]] = _SET_OPTION,
) -> None:
    """Translate the tsconfig and print the swc configuration as JSON."""

    settings = AppSettings()
    options = _convert(filename, cwd, swcrc, assignments, settings)

    if output is None:
        typer.echo(dump_swcrc(options, indent=settings.json_indent), nl=False)
        return

    path = export_swcrc(
        options=options,
        output_path=_resolve_output(output, settings),
        indent=settings.json_indent,
    )
    _err_console.print(f"[green]Saved swc config to:[/green] {path}")


@app.command()
def show(
    filename: Optional[str] = _FILENAME_OPTION,
    cwd: Optional[Path] = _CWD_OPTION,
    swcrc: Optional[Path] = _SWCRC_OPTION,
    assignments: Optional[List[str]] = _SET_OPTION,
) -> None:
    """Render the translated swc configuration as a table."""

    settings = AppSettings()
    options = _convert(filename, cwd, swcrc, assignments, settings)

    tsconfig_path = find_tsconfig(filename or settings.tsconfig_filename, cwd)
    manifest_path = find_nearest_manifest(cwd)

    print_banner(_console)
    _console.print(
        build_source_panel(
            tsconfig=str(tsconfig_path) if tsconfig_path else None,
            manifest=str(manifest_path) if manifest_path else None,
        )
    )
    _console.print(build_options_table(options))


def run() -> None:
    app()


if __name__ == "__main__":
    run()
