"""Errores del Core.

Los fallos de ficheros (lectura del entry, lectura/escritura del destino)
se dejan como `OSError`; aquí solo viven los fallos propios del bundler.
"""

from __future__ import annotations


class SwAppendError(Exception):
    """Base de los errores de la herramienta."""


class BundlerError(SwAppendError):
    """Fallo al invocar o interpretar el bundler externo."""


class BundlerUnavailableError(BundlerError):
    """El ejecutable del bundler no está en el PATH."""


class CompileError(BundlerError):
    """webpack informó errores o warnings (los warnings también son fatales).

    `report` contiene el informe completo formateado, no un resumen.
    """

    def __init__(self, report: str, *, stats: object | None = None) -> None:
        super().__init__(report)
        self.report = report
        self.stats = stats
