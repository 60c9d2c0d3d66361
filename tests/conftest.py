"""Fixtures compartidos.

Cada test trabaja en un proyecto temporal con `public/` y `build/`, y con la
configuración `SW_APPEND_*` del entorno limpia.
"""

from __future__ import annotations

import json
import os
import subprocess
from pathlib import Path

import pytest

SW_ORIGINAL = "self.addEventListener('install', () => {});\n"


@pytest.fixture(autouse=True)
def _clean_settings_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    for key in list(os.environ):
        if key.upper().startswith("SW_APPEND_"):
            monkeypatch.delenv(key, raising=False)
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg"))


@pytest.fixture
def project(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    root = tmp_path / "app"
    (root / "public").mkdir(parents=True)
    (root / "build").mkdir()
    (root / "src").mkdir()
    (root / "build" / "service-worker.js").write_text(SW_ORIGINAL, encoding="utf-8")
    (root / "src" / "custom-sw.js").write_text(
        "self.addEventListener('push', (e) => console.log(e));\n", encoding="utf-8"
    )
    monkeypatch.chdir(root)
    return root


class FakeWebpackRun:
    """Sustituye `subprocess.run` simulando webpack-cli.

    Devuelve los stats por stdout (como `--json`) y escribe `dist/bundle.js`
    junto al config generado (ruta tras `--config`).
    """

    def __init__(
        self,
        *,
        bundle: str | bytes | None = "!function(){console.log(1)}();",
        stats: dict | None = None,
        returncode: int = 0,
        stderr: str = "",
    ) -> None:
        self.bundle = bundle
        self.stats = stats if stats is not None else {
            "hash": "abc123",
            "version": "5.90.0",
            "time": 42,
            "errors": [],
            "warnings": [],
            "assets": [{"name": "bundle.js", "size": 30}],
        }
        self.returncode = returncode
        self.stderr = stderr
        self.calls: list[dict] = []

    def __call__(self, argv, **kwargs):
        self.calls.append({"argv": list(argv), **kwargs})
        config_path = Path(argv[argv.index("--config") + 1])
        if self.bundle is not None:
            dist = config_path.parent / "dist"
            dist.mkdir(exist_ok=True)
            if isinstance(self.bundle, bytes):
                (dist / "bundle.js").write_bytes(self.bundle)
            else:
                (dist / "bundle.js").write_text(self.bundle, encoding="utf-8")
        return subprocess.CompletedProcess(
            argv, self.returncode, stdout=json.dumps(self.stats), stderr=self.stderr
        )


@pytest.fixture
def fake_webpack(monkeypatch: pytest.MonkeyPatch):
    """Devuelve una fábrica que instala un `FakeWebpackRun`."""

    import adapters.webpack_bundler as webpack_bundler

    def install(**kwargs) -> FakeWebpackRun:
        fake = FakeWebpackRun(**kwargs)
        monkeypatch.setattr(webpack_bundler.shutil, "which", lambda name: f"/usr/bin/{name}")
        monkeypatch.setattr(webpack_bundler.subprocess, "run", fake)
        return fake

    return install


@pytest.fixture
def sw_original() -> str:
    return SW_ORIGINAL
