"""Configuración del Core.

Por qué aquí:
- Centraliza variables de entorno (pydantic-settings) sin contaminar la CLI.
- Permite que adaptadores (runner/herramientas) lean config de forma consistente.
"""

from __future__ import annotations

import json
import os
import sys
from pathlib import Path
from typing import Annotated, Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict


def get_user_config_dir() -> Path:
    """Directorio de configuración por usuario (cross-platform, sin dependencias).

    Objetivo: poder ajustar el hook en todas las copias de trabajo sin tocar cada repo.
    """

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / "pushguard"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / "pushguard"

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "pushguard"
    return Path.home() / ".config" / "pushguard"


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


class HookSettings(BaseSettings):
    """Configuración central del hook pre-push.

    Por qué pydantic-settings:
    - Tipado + validación en el borde (env vars) sin ensuciar el Core con lógica.
    - Un único contrato de configuración para CLI/adapters.
    """

    model_config = SettingsConfigDict(
        env_prefix="PUSHGUARD_",
        extra="ignore",
        case_sensitive=False,
        # Orden: proyecto primero, luego config global de usuario.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    style_tool: str = Field(
        default="astyle",
        min_length=1,
        description="Herramienta de estilo cuya presencia se comprueba (no se ejecuta).",
    )
    formatter_command: Annotated[list[str], NoDecode] = Field(
        default_factory=lambda: ["cargo", "fmt"],
        min_length=1,
        description="Comando del formateador; JSON o palabras separadas por espacios.",
    )
    formatter_version_flag: str = Field(
        default="--version",
        min_length=1,
        description="Subcomando/flag que consulta la versión del formateador.",
    )

    make_command: str = Field(
        default="make",
        min_length=1,
        description="Ejecutable del sistema de build.",
    )
    check_target: str = Field(
        default="format-check",
        min_length=1,
        description="Target que informa de problemas de formato sin modificar ficheros.",
    )
    fix_target: str = Field(
        default="format",
        min_length=1,
        description="Target sugerido al usuario para corregir el formato.",
    )

    project_dir: Path | None = Field(
        default=None,
        description="Directorio donde se ejecuta el target (por defecto el cwd que fija git).",
    )
    check_timeout_seconds: float | None = Field(
        default=None,
        gt=0,
        description="Timeout del target de comprobación (segundos). None = sin límite.",
    )

    log_level: str = Field(
        default="WARNING",
        description="Nivel de logging (se emite por stderr).",
    )

    @field_validator("formatter_command", mode="before")
    @classmethod
    def _split_formatter_command(cls, value: Any) -> Any:
        # `.env` escrito a mano suele traer `cargo fmt`; `doctor setup` escribe JSON.
        if isinstance(value, str):
            text = value.strip()
            if text.startswith("["):
                return json.loads(text)
            return text.split()
        return value

    def formatter_version_command(self) -> list[str]:
        return [*self.formatter_command, self.formatter_version_flag]

    def check_command(self) -> list[str]:
        return [self.make_command, self.check_target]

    def working_dir(self) -> Path:
        return self.project_dir or Path.cwd()


def _parse_env_lines(text: str) -> dict[str, str]:
    data: dict[str, str] = {}
    for raw_line in text.splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue
        if "=" not in line:
            continue
        key, value = line.split("=", 1)
        key = key.strip()
        value = value.strip().strip('"').strip("'")
        if key:
            data[key] = value
    return data


def write_user_env_vars(values: dict[str, str], *, env_path: Path | None = None) -> Path:
    """Escribe/actualiza variables en el .env global del usuario."""

    env_path = env_path or get_user_env_file()
    env_path.parent.mkdir(parents=True, exist_ok=True)

    existing: dict[str, str] = {}
    if env_path.exists():
        existing = _parse_env_lines(env_path.read_text(encoding="utf-8"))

    existing.update({k: v for k, v in values.items() if v is not None})

    lines = ["# pushguard user config (.env)"]
    for key in sorted(existing.keys()):
        lines.append(f"{key}={existing[key]}")
    env_path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return env_path


def load_settings(**overrides: Any) -> HookSettings:
    """Construye `HookSettings` resolviendo el .env de usuario en el momento de la llamada.

    `model_config` fija la ruta al importar el módulo; aquí se recalcula para
    respetar `XDG_CONFIG_HOME`/`APPDATA` del entorno actual.
    """

    return HookSettings(_env_file=(".env", str(get_user_env_file())), **overrides)
