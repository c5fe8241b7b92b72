"""Herramienta de estilo (p.ej. astyle).

Solo se comprueba que esté en el PATH: el target de make es quien la usa.
"""

from __future__ import annotations

from core.config import HookSettings
from core.domain.models import ToolProbe
from core.interfaces.runner import CommandRunner


class StyleCheckerProbe:
    """Verifica la presencia del style checker configurado."""

    def __init__(self, runner: CommandRunner, settings: HookSettings | None = None) -> None:
        self._runner = runner
        self._settings = settings or HookSettings()

    def probe(self) -> ToolProbe:
        name = self._settings.style_tool
        location = self._runner.which(name)
        return ToolProbe(
            name=name,
            available=location is not None,
            detail=location or "not found in PATH",
        )
