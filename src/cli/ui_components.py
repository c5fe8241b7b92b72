"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar lógica de comandos con detalles visuales.
- El texto que ve git (avisos, banner) se define en un único sitio.
"""

from __future__ import annotations

from rich.console import Console
from rich.table import Table
from rich.text import Text

from core.domain.models import ToolProbe

BANNER_RULE = "=" * 72
FAILURE_HEADLINE = "Format check failed: the following files do not follow the code style."


def print_warning(console: Console, message: str) -> None:
    console.print(Text(message, style="yellow"), soft_wrap=True)


def print_step(console: Console, label: str) -> None:
    console.print(Text(f"-> {label}", style="dim"), soft_wrap=True)


def failure_footer(fix_command: str) -> str:
    return f"Run `{fix_command}` to fix the formatting, then push again."


def print_failure_banner(console: Console, *, diagnostics: str, fix_command: str) -> None:
    """Imprime la salida del target enmarcada por el banner fijo.

    La salida va directa al fichero de la consola, sin pasar por Rich: tabs,
    retornos de carro y rutas llegan tal cual los emitió make.
    """

    console.print(Text(BANNER_RULE, style="red"), soft_wrap=True)
    console.print(Text(FAILURE_HEADLINE, style="bold red"), soft_wrap=True)
    console.print(Text(BANNER_RULE, style="red"), soft_wrap=True)
    console.file.write(diagnostics if diagnostics.endswith("\n") else diagnostics + "\n")
    console.file.flush()
    console.print(Text(BANNER_RULE, style="red"), soft_wrap=True)
    console.print(Text(failure_footer(fix_command), style="bold"), soft_wrap=True)
    console.print(Text(BANNER_RULE, style="red"), soft_wrap=True)


def build_probes_table(probes: list[ToolProbe]) -> Table:
    """Crea una tabla Rich con el estado de cada herramienta."""

    table = Table(title="pushguard doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")
    for probe in probes:
        table.add_row(probe.name, "OK" if probe.available else "MISSING", probe.detail)
    return table
