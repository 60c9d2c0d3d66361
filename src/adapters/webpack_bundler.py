"""Adaptador de webpack (vía webpack-cli).

Responsabilidad:
- Renderizar la configuración de webpack (Jinja2) para un único entry.
- Lanzar webpack en un subproceso con BABEL_ENV/NODE_ENV explícitos.
- Leer los stats JSON (stdout de `--json`) y el bundle desde un directorio
  temporal.

Por qué está en adapters:
- webpack, Node y subprocess son detalles de infraestructura. El Core solo
  conoce el contrato `core.interfaces.bundler.Bundler`.
"""

from __future__ import annotations

import errno
import json
import os
import shutil
import subprocess
import tempfile
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, StrictUndefined, select_autoescape

from core.config import AppSettings
from core.domain.models import BuildEnvironment, BundleResult, BundleStats
from core.errors import BundlerUnavailableError, CompileError
from core.interfaces.bundler import Bundler

BUNDLE_FILE_NAME = "bundle.js"
CONFIG_TEMPLATE = "webpack.config.js.j2"

_TEMPLATES_DIR = Path(__file__).resolve().parent / "templates"


def _get_env() -> Environment:
    return Environment(
        loader=FileSystemLoader(str(_TEMPLATES_DIR)),
        autoescape=select_autoescape(["html", "xml"]),
        undefined=StrictUndefined,
        keep_trailing_newline=True,
    )


def render_webpack_config(
    *,
    entry: Path,
    environment: BuildEnvironment,
    output_dir: Path,
    project_root: Path,
    env_file: Path,
    tsconfig: Path,
) -> str:
    """Renderiza `webpack.config.js` con rutas absolutas."""

    template = _get_env().get_template(CONFIG_TEMPLATE)
    return template.render(
        entry=str(entry),
        environment=environment,
        output_dir=str(output_dir),
        project_root=str(project_root),
        env_file=str(env_file),
        tsconfig=str(tsconfig),
        bundle_filename=BUNDLE_FILE_NAME,
    )


def parse_stats(text: str | None) -> BundleStats | None:
    """Obtiene los stats de la salida de `webpack --json`.

    `--json` sin ruta imprime en stdout con webpack-cli 3, 4 y 5. Se recorta
    al objeto JSON por si algún loader escribe texto antes o después.
    """

    raw = (text or "").strip()
    start = raw.find("{")
    end = raw.rfind("}")
    if start < 0 or end <= start:
        return None
    try:
        data = json.loads(raw[start : end + 1])
    except json.JSONDecodeError:
        return None
    if not isinstance(data, dict):
        return None
    return BundleStats.model_validate(data)


def _process_report(proc: subprocess.CompletedProcess[str]) -> str:
    parts = [f"webpack exited with status {proc.returncode}"]
    for stream in (proc.stdout, proc.stderr):
        if stream and stream.strip():
            parts.append(stream.strip())
    return "\n\n".join(parts)


class WebpackBundler(Bundler):
    """Compila un entry con webpack y devuelve el texto del bundle."""

    def __init__(self, settings: AppSettings | None = None, *, root: Path | None = None) -> None:
        self._settings = settings or AppSettings()
        self._root = (root if root is not None else Path.cwd()).resolve()

    def _absolute(self, path: Path) -> Path:
        return path if path.is_absolute() else self._root / path

    def _argv(self, config_path: Path) -> list[str]:
        argv = self._settings.bundler_argv()
        if shutil.which(argv[0]) is None:
            raise BundlerUnavailableError(
                f"Bundler executable not found: {argv[0]!r} (command: {self._settings.bundler_command!r})"
            )
        return [*argv, "--config", str(config_path), "--json"]

    def compile(
        self,
        entry_file_path: Path,
        environment: BuildEnvironment,
        *,
        env_file_path: Path,
        tsconfig_path: Path,
    ) -> BundleResult:
        entry = self._absolute(Path(entry_file_path))
        if not entry.is_file():
            raise FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), str(entry))

        with tempfile.TemporaryDirectory(prefix="sw-append-") as tmp:
            workdir = Path(tmp)
            output_dir = workdir / "dist"
            config_path = workdir / "webpack.config.js"

            config_path.write_text(
                render_webpack_config(
                    entry=entry,
                    environment=environment,
                    output_dir=output_dir,
                    project_root=self._root,
                    env_file=self._absolute(Path(env_file_path)),
                    tsconfig=self._absolute(Path(tsconfig_path)),
                ),
                encoding="utf-8",
            )

            argv = self._argv(config_path)
            try:
                proc = subprocess.run(
                    argv,
                    cwd=str(self._root),
                    env={**os.environ, **environment.as_env_vars()},
                    capture_output=True,
                    encoding="utf-8",
                    errors="replace",
                    timeout=self._settings.bundler_timeout_seconds,
                    check=False,
                )
            except subprocess.TimeoutExpired as exc:
                raise CompileError(
                    f"webpack did not finish within {exc.timeout} seconds"
                ) from exc

            stats = parse_stats(proc.stdout)
            if stats is not None and stats.has_problems:
                raise CompileError(stats.format_report(), stats=stats)
            if proc.returncode != 0:
                raise CompileError(_process_report(proc), stats=stats)
            if stats is None:
                raise CompileError("webpack did not produce JSON stats\n\n" + _process_report(proc))

            bundle_path = output_dir / BUNDLE_FILE_NAME
            if not bundle_path.is_file():
                raise CompileError(
                    f"webpack did not emit {BUNDLE_FILE_NAME}\n\n{stats.format_report()}",
                    stats=stats,
                )
            content = bundle_path.read_text(encoding="utf-8", errors="replace")

        return BundleResult(content=content, stats=stats)
