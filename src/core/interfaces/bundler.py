"""Contrato del bundler.

Por qué Protocol:
- El Core no conoce webpack ni subprocess; solo necesita "algo que compile".
- Permite sustituir el adaptador real por un fake en tests.
"""

from __future__ import annotations

from pathlib import Path
from typing import Protocol, runtime_checkable

from core.domain.models import BuildEnvironment, BundleResult


@runtime_checkable
class Bundler(Protocol):
    """Contrato mínimo de un bundler.

    Reglas de diseño:
    - Sin estado entre invocaciones.
    - Falla con `core.errors.CompileError` si hay errores o warnings.
    """

    def compile(
        self,
        entry_file_path: Path,
        environment: BuildEnvironment,
        *,
        env_file_path: Path,
        tsconfig_path: Path,
    ) -> BundleResult:
        """Compila `entry_file_path` y devuelve el texto del bundle."""

        ...
