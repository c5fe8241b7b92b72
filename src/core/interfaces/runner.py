"""Contrato para ejecutar herramientas externas.

Por qué Protocol:
- Define un contrato estructural (duck typing) sin herencia rígida.
- Permite sustituir `subprocess` por un runner falso en tests sin parchear
  módulos de la librería estándar.
"""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path
from typing import Protocol, runtime_checkable

from core.domain.models import CommandResult


@runtime_checkable
class CommandRunner(Protocol):
    """Contrato mínimo para localizar y ejecutar herramientas.

    Reglas de diseño:
    - `which` nunca lanza: devuelve la ruta o None.
    - `run` lanza `ToolNotFoundError` si el ejecutable no existe y
      `ToolExecutionError` ante OSError/timeout; un exit code != 0 no es error.
    """

    def which(self, executable: str) -> str | None:
        """Ruta absoluta del ejecutable o None si no está en el PATH."""

        ...

    def run(
        self,
        command: Sequence[str],
        *,
        cwd: Path | None = None,
        capture_stdout: bool = True,
        timeout: float | None = None,
    ) -> CommandResult:
        """Ejecuta `command` y devuelve su resultado normalizado."""

        ...
