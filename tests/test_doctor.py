from __future__ import annotations

import subprocess
from pathlib import Path

from typer.testing import CliRunner

import cli.doctor as doctor
from core.config import AppSettings

runner = CliRunner()


def test_doctor_reports_project_layout(project: Path) -> None:
    result = runner.invoke(doctor.app, ["--skip-bundler"])

    assert result.exit_code == 0, result.output
    assert "sw-append Doctor" in result.output
    assert "SKIPPED" in result.output
    assert "Node packages" in result.output


def test_doctor_notes_missing_service_worker(project: Path) -> None:
    (project / "build" / "service-worker.js").unlink()

    result = runner.invoke(doctor.app, ["--skip-bundler"])

    assert result.exit_code == 0, result.output
    assert "Note:" in result.output


def test_check_bundler_missing_executable(monkeypatch) -> None:
    monkeypatch.setattr(doctor.shutil, "which", lambda name: None)

    ok, detail = doctor._check_bundler(AppSettings(bundler_command="webpack"))

    assert not ok
    assert "webpack" in detail


def test_check_bundler_version(monkeypatch) -> None:
    monkeypatch.setattr(doctor.shutil, "which", lambda name: "/usr/bin/npx")
    monkeypatch.setattr(
        doctor.subprocess,
        "run",
        lambda argv, **kw: subprocess.CompletedProcess(argv, 0, stdout="webpack: 5.90.0\nwebpack-cli: 5.1.4\n", stderr=""),
    )

    ok, detail = doctor._check_bundler(AppSettings())

    assert ok
    assert detail == "webpack: 5.90.0 webpack-cli: 5.1.4"


def test_check_node_package(tmp_path: Path) -> None:
    pkg = tmp_path / "node_modules" / "@babel" / "plugin-transform-runtime"
    pkg.mkdir(parents=True)
    (pkg / "package.json").write_text("{}", encoding="utf-8")

    assert doctor.check_node_package(tmp_path, "@babel/plugin-transform-runtime")
    assert not doctor.check_node_package(tmp_path, "webpack")
