"""Wrapper de subprocess.

Por qué un wrapper:
- Estandariza cwd, timeouts, captura de stdout y traducción de errores.
- Facilita testeo: se puede sustituir por un runner falso (ver `CommandRunner`).
"""

from __future__ import annotations

import logging
import shutil
import subprocess
from collections.abc import Sequence
from pathlib import Path

from core.domain.models import CommandResult
from core.errors import ToolExecutionError, ToolNotFoundError
from core.interfaces.runner import CommandRunner

logger = logging.getLogger(__name__)


class SubprocessRunner(CommandRunner):
    """Runner real basado en `subprocess.run` y `shutil.which`."""

    def __init__(self, *, path: str | None = None) -> None:
        # `path` permite acotar la búsqueda (tests/entornos aislados); None = $PATH.
        self._path = path

    def which(self, executable: str) -> str | None:
        found = shutil.which(executable, path=self._path)
        logger.debug("which %s -> %s", executable, found)
        return found

    def run(
        self,
        command: Sequence[str],
        *,
        cwd: Path | None = None,
        capture_stdout: bool = True,
        timeout: float | None = None,
    ) -> CommandResult:
        """Ejecuta el comando; stderr siempre pasa al terminal del usuario."""

        argv = list(command)
        if not argv:
            raise ValueError("command must not be empty")

        executable = self.which(argv[0])
        if executable is None:
            raise ToolNotFoundError(argv[0])

        logger.debug("running %s (cwd=%s)", argv, cwd)
        try:
            completed = subprocess.run(
                [executable, *argv[1:]],
                cwd=str(cwd) if cwd is not None else None,
                stdin=subprocess.DEVNULL,
                stdout=subprocess.PIPE if capture_stdout else None,
                encoding="utf-8",
                errors="replace",
                timeout=timeout,
                check=False,
            )
        except subprocess.TimeoutExpired as exc:
            raise ToolExecutionError(argv, f"timed out after {exc.timeout}s") from exc
        except OSError as exc:
            raise ToolExecutionError(argv, str(exc)) from exc

        logger.debug("%s exited with %s", argv[0], completed.returncode)
        return CommandResult(
            command=tuple(argv),
            returncode=completed.returncode,
            stdout=completed.stdout or "",
        )
