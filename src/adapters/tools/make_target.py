"""Target de make que comprueba el formato sin modificar ficheros.

La decisión depende de si el target escribe algo en stdout, no de su exit code.
"""

from __future__ import annotations

import logging

from core.config import HookSettings
from core.domain.models import FormatCheckResult
from core.interfaces.runner import CommandRunner

logger = logging.getLogger(__name__)


class FormatCheckTarget:
    """Ejecuta `make <check_target>` en el directorio del proyecto."""

    def __init__(self, runner: CommandRunner, settings: HookSettings | None = None) -> None:
        self._runner = runner
        self._settings = settings or HookSettings()

    def run(self) -> FormatCheckResult:
        """Lanza el target; `ToolNotFoundError`/`ToolExecutionError` se propagan."""

        result = self._runner.run(
            self._settings.check_command(),
            cwd=self._settings.working_dir(),
            timeout=self._settings.check_timeout_seconds,
        )
        if not result.ok:
            logger.debug("%s exited with %s", self._settings.check_target, result.returncode)
        return FormatCheckResult(
            target=self._settings.check_target,
            returncode=result.returncode,
            output=result.stdout,
        )
