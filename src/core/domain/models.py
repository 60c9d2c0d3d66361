"""Modelos del dominio (Pydantic v2).

Por qué Pydantic en el dominio:
- Validación estricta y documentación autocontenida (Field) sin acoplar el
  Core a webpack, subprocess ni al sistema de ficheros.
- Los stats de webpack llegan como JSON heterogéneo (v4/v5); un modelo con
  `extra="ignore"` los normaliza en un solo sitio.

Nota:
- Estos modelos describen *qué* se compila y *dónde* se escribe, no *cómo*.
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, field_validator
from pydantic.config import ConfigDict

from core.domain.mode import OutputMode


class BuildEnvironment(BaseModel):
    """Entorno de build derivado del modo.

    Por qué existe:
    - Sustituye la mutación global de `process.env` por un valor explícito que
      el adaptador del bundler inyecta solo en el proceso hijo.
    """

    model_config = ConfigDict(frozen=True)

    babel_env: str = Field(..., description="Valor de BABEL_ENV para el bundler.")
    node_env: str = Field(..., description="Valor de NODE_ENV para el bundler.")
    webpack_mode: str = Field(..., description="`mode` de webpack (development/production).")

    @classmethod
    def for_mode(cls, mode: OutputMode) -> "BuildEnvironment":
        return cls(
            babel_env=mode.node_env,
            node_env=mode.node_env,
            webpack_mode=mode.webpack_mode,
        )

    def as_env_vars(self) -> dict[str, str]:
        return {"BABEL_ENV": self.babel_env, "NODE_ENV": self.node_env}


class InvocationRequest(BaseModel):
    """Petición de una ejecución, construida una sola vez desde la CLI."""

    model_config = ConfigDict(frozen=True)

    entry_file_path: Path = Field(..., description="Fichero de entrada a compilar o copiar.")
    mode: OutputMode = Field(default=OutputMode.APPEND, description="Modo de salida.")
    skip_compile: bool = Field(default=False, description="Omitir webpack y copiar el fichero tal cual.")
    env_file_path: Path = Field(default=Path(".env"), description="Fichero de variables para dotenv-webpack.")
    tsconfig_path: Path = Field(default=Path("tsconfig.json"), description="tsconfig para ts-loader.")

    @property
    def environment(self) -> BuildEnvironment:
        return BuildEnvironment.for_mode(self.mode)


class BundleAsset(BaseModel):
    model_config = ConfigDict(extra="ignore")

    name: str = Field(..., min_length=1)
    size: int = Field(default=0, ge=0)


class BundleStats(BaseModel):
    """Stats de webpack (`--json`), reducidos a lo que la CLI presenta.

    webpack 4 emite errores/warnings como strings; webpack 5 como objetos con
    `message`. Ambos se normalizan a texto.
    """

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    hash: str | None = Field(default=None, description="Hash de la compilación.")
    version: str | None = Field(default=None, description="Versión de webpack.")
    time_ms: int | None = Field(default=None, alias="time", description="Duración (ms).")
    errors: list[str] = Field(default_factory=list)
    warnings: list[str] = Field(default_factory=list)
    assets: list[BundleAsset] = Field(default_factory=list)

    @field_validator("errors", "warnings", mode="before")
    @classmethod
    def _normalize_messages(cls, value: Any) -> list[str]:
        if not value:
            return []
        out: list[str] = []
        for item in value:
            if isinstance(item, str):
                out.append(item)
            elif isinstance(item, dict):
                parts = [
                    str(item[key]).strip()
                    for key in ("moduleName", "loc", "message", "details")
                    if item.get(key)
                ]
                out.append("\n".join(parts) or str(item))
            else:
                out.append(str(item))
        return out

    @property
    def has_problems(self) -> bool:
        return bool(self.errors or self.warnings)

    def format_report(self) -> str:
        """Informe completo (errores y warnings), no un resumen."""

        lines: list[str] = []
        header = "webpack"
        if self.version:
            header += f" {self.version}"
        if self.hash:
            header += f" (hash {self.hash})"
        lines.append(header)
        if self.time_ms is not None:
            lines.append(f"Time: {self.time_ms}ms")
        for asset in self.assets:
            lines.append(f"  {asset.name}  {asset.size} bytes")
        for message in self.errors:
            lines.append("")
            lines.append(f"ERROR in {message}")
        for message in self.warnings:
            lines.append("")
            lines.append(f"WARNING in {message}")
        return "\n".join(lines)


class BundleResult(BaseModel):
    """Texto producido por webpack o leído en crudo."""

    content: str = Field(..., description="Texto del bundle (o del fichero original).")
    stats: BundleStats | None = Field(
        default=None,
        description="Stats de webpack; None cuando se omite la compilación.",
    )


class WriteOperation(str, Enum):
    OVERWRITE = "overwrite"
    APPEND = "append"


class WriteOutcome(BaseModel):
    """Resultado de la única escritura de una ejecución."""

    model_config = ConfigDict(frozen=True)

    destination: Path = Field(..., description="Fichero creado o modificado.")
    operation: WriteOperation = Field(..., description="Sobrescritura o concatenación.")
    bytes_written: int = Field(default=0, ge=0, description="Tamaño final del fichero (bytes UTF-8).")
