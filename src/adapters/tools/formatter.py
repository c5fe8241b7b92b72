"""Formateador (p.ej. `cargo fmt`).

Se considera disponible si su consulta de versión termina con exit code 0.
"""

from __future__ import annotations

import logging

from core.config import HookSettings
from core.domain.models import ToolProbe
from core.errors import ToolExecutionError, ToolNotFoundError
from core.interfaces.runner import CommandRunner

logger = logging.getLogger(__name__)


class FormatterProbe:
    """Consulta la versión del formateador configurado."""

    def __init__(self, runner: CommandRunner, settings: HookSettings | None = None) -> None:
        self._runner = runner
        self._settings = settings or HookSettings()

    def probe(self) -> ToolProbe:
        command = self._settings.formatter_version_command()
        name = " ".join(self._settings.formatter_command)

        try:
            result = self._runner.run(command)
        except (ToolNotFoundError, ToolExecutionError) as exc:
            logger.info("formatter probe failed: %s", exc)
            return ToolProbe(name=name, command=tuple(command), available=False, detail=str(exc))

        if not result.ok:
            return ToolProbe(
                name=name,
                command=tuple(command),
                available=False,
                detail=f"exit code {result.returncode}",
            )

        version = result.stdout.strip().splitlines()[0] if result.stdout.strip() else "OK"
        return ToolProbe(name=name, command=tuple(command), available=True, detail=version)
