"""Herramientas externas que consulta el hook.

Por qué un paquete:
- Agrupa un módulo por colaborador externo (estilo, formateador, make).
- Cada módulo recibe un `core.interfaces.runner.CommandRunner`.
"""

from adapters.tools.formatter import FormatterProbe
from adapters.tools.make_target import FormatCheckTarget
from adapters.tools.style_checker import StyleCheckerProbe

__all__ = [
	"FormatCheckTarget",
	"FormatterProbe",
	"StyleCheckerProbe",
]
