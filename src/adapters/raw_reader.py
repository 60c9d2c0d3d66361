"""Lectura en crudo del fichero de entrada (modo `--skip-compile`)."""

from __future__ import annotations

from pathlib import Path


def read_entry(entry_file_path: Path) -> str:
    """Devuelve el contenido UTF-8 tal cual.

    Los bytes inválidos se sustituyen por U+FFFD, igual que al leer en
    'utf8' desde Node; nunca se lanza un error de decodificación.

    Cualquier error (fichero inexistente, permisos, directorio) se propaga
    como `OSError`.
    """

    with Path(entry_file_path).open("r", encoding="utf-8", errors="replace", newline="") as fh:
        return fh.read()
