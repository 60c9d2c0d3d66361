"""Doctor command for environment diagnostics."""

from __future__ import annotations

import shutil
import subprocess
from pathlib import Path

import typer
from rich.console import Console
from rich.table import Table

from core.config import AppSettings, get_user_env_file
from core.services.output_router import BUILD_OUTPUT_DIR, BUILD_SW_FILE_PATH, DEV_OUTPUT_DIR

app = typer.Typer(add_completion=False, help="Environment diagnostics for sw-append.")

_console = Console()

_NODE_PACKAGES = (
    "webpack",
    "webpack-cli",
    "dotenv-webpack",
    "terser-webpack-plugin",
    "ts-loader",
    "babel-loader",
    "babel-preset-react-app",
    "@babel/plugin-transform-runtime",
)


def _check_bundler(settings: AppSettings) -> tuple[bool, str]:
    argv = settings.bundler_argv()
    if shutil.which(argv[0]) is None:
        return False, f"{argv[0]!r} not found in PATH"
    try:
        proc = subprocess.run(
            [*argv, "--version"],
            capture_output=True,
            encoding="utf-8",
            errors="replace",
            timeout=settings.bundler_timeout_seconds or 60,
            check=False,
        )
    except (OSError, subprocess.TimeoutExpired) as exc:
        return False, str(exc)
    output = (proc.stdout or proc.stderr or "").strip()
    if proc.returncode != 0:
        return False, output or f"exit status {proc.returncode}"
    return True, " ".join(output.split())


def check_node_package(root: Path, name: str) -> bool:
    return (root / "node_modules" / name / "package.json").is_file()


@app.command()
def run(
    root: Path = typer.Option(Path("."), "--root", help="Project root to inspect."),
    skip_bundler: bool = typer.Option(False, "--skip-bundler", help="Do not launch the bundler."),
) -> None:
    """Run baseline diagnostics and show recommended fixes."""

    settings = AppSettings()

    table = Table(title="sw-append Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    # Config
    table.add_row("Bundler command", "OK", settings.bundler_command)
    timeout = settings.bundler_timeout_seconds
    table.add_row("Bundler timeout", "OK", f"{timeout}s" if timeout else "none")
    user_env = get_user_env_file()
    table.add_row("User config", "OK" if user_env.exists() else "OPTIONAL", str(user_env))

    # Bundler
    if skip_bundler:
        table.add_row("Bundler", "SKIPPED", "--skip-bundler")
    else:
        ok, detail = _check_bundler(settings)
        table.add_row("Bundler", "OK" if ok else "FAIL", detail)

    missing = [name for name in _NODE_PACKAGES if not check_node_package(root, name)]
    if missing:
        table.add_row("Node packages", "FAIL", "missing: " + ", ".join(missing))
    else:
        table.add_row("Node packages", "OK", f"{len(_NODE_PACKAGES)} found")

    # Project files
    env_file = root / settings.env_file
    table.add_row(".env", "OK" if env_file.is_file() else "OPTIONAL", str(env_file))
    tsconfig = root / settings.tsconfig
    table.add_row("tsconfig", "OK" if tsconfig.is_file() else "OPTIONAL", str(tsconfig))
    for label, path in (("dev output", DEV_OUTPUT_DIR), ("build output", BUILD_OUTPUT_DIR)):
        full = root / path
        table.add_row(label, "OK" if full.is_dir() else "MISSING", str(full))
    sw_file = root / BUILD_SW_FILE_PATH
    table.add_row("Service worker", "OK" if sw_file.is_file() else "MISSING", str(sw_file))

    _console.print(table)

    if not sw_file.is_file():
        _console.print(
            "\n[yellow]Note:[/yellow] the default mode appends to build/service-worker.js; "
            "run your app build first or use `--mode replace`."
        )


def main() -> None:
    app()


if __name__ == "__main__":
    main()
