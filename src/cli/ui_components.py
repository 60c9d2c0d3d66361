"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar lógica de comandos con detalles visuales.
- Permite reutilizar tablas/paneles entre `sw-append` y `sw-append-doctor`.
"""

from __future__ import annotations

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from core.errors import CompileError
from core.services.sw_pipeline import PipelineResult


def print_banner(console: Console) -> None:
    """Imprime el banner de bienvenida.

    Se omite con `--quiet` para no ensuciar logs de CI.
    """

    title = Text("sw-append", style="bold cyan")
    subtitle = Text("webpack • service worker", style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="cyan", padding=(1, 4)))


def build_result_table(result: PipelineResult) -> Table:
    """Tabla con el destino escrito y los stats del bundle."""

    outcome = result.outcome
    table = Table(title="Service Worker Output")
    table.add_column("Field", style="bright_green", no_wrap=True)
    table.add_column("Value", style="white")

    table.add_row("Entry", str(result.request.entry_file_path))
    table.add_row("Mode", result.request.mode.label())
    table.add_row("Destination", str(outcome.destination))
    table.add_row("Operation", outcome.operation.value)
    table.add_row("Size", f"{outcome.bytes_written} bytes")

    stats = result.bundle.stats
    if stats is None:
        table.add_row("Compilation", "skipped")
    else:
        if stats.version:
            table.add_row("webpack", stats.version)
        if stats.hash:
            table.add_row("Hash", stats.hash)
        if stats.time_ms is not None:
            table.add_row("Time", f"{stats.time_ms} ms")
    return table


def build_compile_error_panel(error: CompileError) -> Panel:
    """Panel con el informe completo de webpack."""

    body = Text(error.report.strip() or "webpack failed without output")
    return Panel(body, title=Text("Compilation failed", style="bold red"), border_style="red")
