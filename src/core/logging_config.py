"""Configuración de logging.

Por qué stderr + Rich:
- stdout es el contrato del hook (avisos y banner); los logs nunca lo ensucian.
- `RichHandler` mantiene el mismo aspecto que el resto de la CLI.
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

_HANDLER_NAME = "pushguard"


def configure_logging(level: str | int = "WARNING") -> None:
    """Instala (una sola vez) el handler Rich en el logger raíz."""

    root = logging.getLogger()
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.WARNING
    root.setLevel(level)

    if any(getattr(h, "name", None) == _HANDLER_NAME for h in root.handlers):
        return

    handler = RichHandler(
        console=Console(stderr=True),
        show_time=False,
        show_path=False,
        rich_tracebacks=True,
    )
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
    root.addHandler(handler)
