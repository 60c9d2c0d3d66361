from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from core.config import AppSettings


def test_defaults(project: Path) -> None:
    settings = AppSettings()

    assert settings.bundler_argv() == ["npx", "--no-install", "webpack"]
    assert settings.bundler_timeout_seconds is None
    assert settings.env_file == Path(".env")
    assert settings.tsconfig == Path("tsconfig.json")


def test_env_prefix(project: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SW_APPEND_BUNDLER_COMMAND", "yarn webpack")
    monkeypatch.setenv("SW_APPEND_BUNDLER_TIMEOUT_SECONDS", "90")

    settings = AppSettings()

    assert settings.bundler_argv() == ["yarn", "webpack"]
    assert settings.bundler_timeout_seconds == 90.0


def test_project_env_file_is_shared_with_dotenv_webpack(project: Path) -> None:
    (project / ".env").write_text("API_URL=https://example.test\nSW_APPEND_SHOW_BANNER=false\n", encoding="utf-8")

    settings = AppSettings()

    assert settings.show_banner is False



def test_blank_command_rejected(project: Path) -> None:
    with pytest.raises(ValidationError):
        AppSettings(bundler_command="   ")
