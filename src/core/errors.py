"""Errores del Core.

Por qué una jerarquía propia:
- Los adaptadores traducen fallos de `subprocess`/filesystem a errores del dominio.
- El servicio decide qué es "blando" (aviso + permitir push) sin conocer `OSError`.
"""

from __future__ import annotations

from collections.abc import Sequence


class PushGuardError(Exception):
    """Base de todos los errores de pushguard."""


class ToolNotFoundError(PushGuardError):
    """El ejecutable de una herramienta externa no está en el PATH."""

    def __init__(self, executable: str) -> None:
        super().__init__(f"{executable} is not installed")
        self.executable = executable


class ToolExecutionError(PushGuardError):
    """La herramienta existe pero no pudo ejecutarse (OSError, timeout)."""

    def __init__(self, command: Sequence[str], reason: str) -> None:
        super().__init__(f"`{' '.join(command)}` could not run: {reason}")
        self.command = tuple(command)
        self.reason = reason


class HookInstallError(PushGuardError):
    """Fallo al instalar o desinstalar el shim de `.git/hooks/pre-push`."""
