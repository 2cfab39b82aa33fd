"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar lógica de comandos con detalles visuales.
- `show` y `doctor` reutilizan las mismas tablas/paneles.
"""

from __future__ import annotations

import json
from typing import Any, Mapping

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text


def print_banner(console: Console) -> None:
    """Imprime el banner de bienvenida.

    Solo se usa en modos interactivos (`show`); `convert` emite JSON limpio.
    """

    title = Text("tsconfig-to-swc", style="bold cyan")
    subtitle = Text("TypeScript compilerOptions -> .swcrc", style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="cyan", padding=(1, 4)))


def flatten_options(options: Mapping[str, Any], prefix: str = "") -> list[tuple[str, Any]]:
    """Aplana un objeto anidado a pares (`jsc.parser.syntax`, valor)."""

    rows: list[tuple[str, Any]] = []
    for key, value in options.items():
        path = f"{prefix}.{key}" if prefix else key
        if isinstance(value, Mapping) and value:
            rows.extend(flatten_options(value, path))
        else:
            rows.append((path, value))
    return rows


def build_options_table(options: Mapping[str, Any], *, title: str = "swc options") -> Table:
    table = Table(title=title)
    table.add_column("Option", style="cyan", no_wrap=True)
    table.add_column("Value", style="white")
    for path, value in flatten_options(options):
        table.add_row(path, json.dumps(value, ensure_ascii=False))
    return table


def build_source_panel(*, tsconfig: str | None, manifest: str | None) -> Panel:
    """Panel con los archivos de los que sale la configuración."""

    body = Text()
    body.append("tsconfig: ", style="bold")
    body.append(tsconfig or "(not found, defaults only)")
    body.append("\n")
    body.append("package.json: ", style="bold")
    body.append(manifest or "(not found)", style="dim" if manifest is None else None)
    return Panel(body, title=Text("Sources", style="bold yellow"), border_style="yellow")
