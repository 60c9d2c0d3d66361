"""CLI principal (`sw-append`).

Compila un fichero con webpack y escribe o añade el resultado al service
worker según `--mode`:

- dev      -> public/<fichero>
- build    -> build/<fichero>
- replace  -> build/service-worker.js (sobrescribe)
- (otro)   -> build/service-worker.js (concatena al final)
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from adapters.webpack_bundler import WebpackBundler
from cli.ui_components import build_compile_error_panel, build_result_table, print_banner
from core.config import AppSettings
from core.domain.mode import OutputMode
from core.domain.models import InvocationRequest
from core.errors import BundlerError, CompileError
from core.services.sw_pipeline import PipelineHooks, run as run_pipeline

app = typer.Typer(
    add_completion=False,
    help="Compile a file with webpack and write or append it to the service worker.",
)

_console = Console()
_err_console = Console(stderr=True)


@app.command()
def main(
    file: Path = typer.Argument(..., help="Entry file to compile (or copy with --skip-compile)."),
    skip_compile: bool = typer.Option(False, "--skip-compile", "-s", help="Skip compilation."),
    env: Optional[Path] = typer.Option(
        None,
        "--env",
        "-e",
        help="Path to environment variables file [./.env].",
    ),
    tsconfig: Optional[Path] = typer.Option(
        None,
        "--tsconfig",
        "-t",
        help="Path to tsconfig file [./tsconfig.json].",
    ),
    mode: Optional[str] = typer.Option(
        None,
        "--mode",
        "-m",
        help="Output mode [dev|build|replace]. Anything else appends to build/service-worker.js.",
    ),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Only print errors."),
) -> None:
    """Compile FILE and route the bundle to the service worker."""

    settings = AppSettings()
    output_mode = OutputMode.from_option(mode)
    if mode and output_mode is OutputMode.APPEND:
        _err_console.print(
            f"[yellow]Unknown mode {mode!r}, appending to build/service-worker.js.[/yellow]"
        )

    request = InvocationRequest(
        entry_file_path=file,
        mode=output_mode,
        skip_compile=skip_compile,
        env_file_path=env or settings.env_file,
        tsconfig_path=tsconfig or settings.tsconfig,
    )

    if not quiet and settings.show_banner:
        print_banner(_console)

    hooks = PipelineHooks(
        step=None if quiet else (lambda msg: _console.print(f"[cyan]>[/cyan] {msg}")),
        warning=lambda msg: _err_console.print(f"[yellow]Warning:[/yellow] {msg}"),
    )
    bundler = None if request.skip_compile else WebpackBundler(settings)

    try:
        result = run_pipeline(request, bundler=bundler, hooks=hooks)
    except CompileError as exc:
        _err_console.print(build_compile_error_panel(exc))
        raise typer.Exit(code=1) from exc
    except BundlerError as exc:
        _err_console.print(f"[red]Bundler error:[/red] {exc}")
        raise typer.Exit(code=1) from exc
    except OSError as exc:
        _err_console.print(f"[red]I/O error:[/red] {exc}")
        raise typer.Exit(code=1) from exc

    if not quiet:
        _console.print(build_result_table(result))


def run() -> None:
    app()


if __name__ == "__main__":
    run()
