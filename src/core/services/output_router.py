"""Output routing for the generated service-worker code.

Decides, from the output mode and the entry file name, which file receives
the content and whether it is overwritten or appended to. Exactly one file
is created or modified per call.
"""

from __future__ import annotations

from pathlib import Path
from typing import assert_never

from core.domain.mode import OutputMode
from core.domain.models import WriteOperation, WriteOutcome

BUILD_SW_FILE_PATH = Path("build") / "service-worker.js"
DEV_OUTPUT_DIR = Path("public")
BUILD_OUTPUT_DIR = Path("build")


def resolve_destination(
    entry_file_path: Path,
    mode: OutputMode,
    *,
    root: Path | None = None,
) -> tuple[Path, WriteOperation]:
    """Compute the destination and the write operation for `mode`.

    Pure function: it never touches the file system.
    """

    base = root if root is not None else Path.cwd()
    filename = Path(entry_file_path).name

    if mode is OutputMode.DEV:
        return base / DEV_OUTPUT_DIR / filename, WriteOperation.OVERWRITE
    if mode is OutputMode.BUILD:
        return base / BUILD_OUTPUT_DIR / filename, WriteOperation.OVERWRITE
    if mode is OutputMode.REPLACE:
        return base / BUILD_SW_FILE_PATH, WriteOperation.OVERWRITE
    if mode is OutputMode.APPEND:
        return base / BUILD_SW_FILE_PATH, WriteOperation.APPEND
    assert_never(mode)


def _write_text(path: Path, content: str) -> int:
    # newline="" keeps the content byte-for-byte (no \n -> \r\n on Windows).
    with path.open("w", encoding="utf-8", newline="") as fh:
        fh.write(content)
    return len(content.encode("utf-8"))


def route(
    content: str,
    entry_file_path: Path,
    mode: OutputMode,
    *,
    root: Path | None = None,
) -> WriteOutcome:
    """Write `content` to the destination selected by `mode`.

    Parent directories are not created. Any read or write failure raises
    `OSError` and nothing else is attempted; in append mode a failed read
    leaves the service worker untouched.
    """

    destination, operation = resolve_destination(entry_file_path, mode, root=root)

    if operation is WriteOperation.APPEND:
        with destination.open("r", encoding="utf-8", errors="replace", newline="") as fh:
            existing = fh.read()
        content = existing + content

    written = _write_text(destination, content)
    return WriteOutcome(destination=destination, operation=operation, bytes_written=written)
