"""Modelos del dominio (Pydantic v2).

Por qué Pydantic en el dominio:
- Nos da validación estricta y documentación autocontenida (Field) sin acoplar
  el Core a `subprocess` ni a la CLI.
- Facilita exportar el resultado del hook (JSON) sin serializadores a mano.

Nota:
- Estos modelos describen *qué* pasó en el hook, no *cómo* se ejecutaron las herramientas.
"""

from __future__ import annotations

from enum import IntEnum

from pydantic import BaseModel, Field


class Verdict(IntEnum):
    """Decisión final del hook; el valor es el exit code que ve git."""

    ALLOW = 0
    BLOCK = 1


class CommandResult(BaseModel):
    """Resultado crudo de ejecutar un comando externo."""

    command: tuple[str, ...] = Field(
        ...,
        description="argv ejecutado.",
    )
    returncode: int = Field(
        ...,
        description="Código de salida del proceso.",
    )
    stdout: str = Field(
        default="",
        description="Salida estándar capturada (stderr no se captura).",
    )

    @property
    def ok(self) -> bool:
        return self.returncode == 0


class HookInvocation(BaseModel):
    """Argumentos posicionales con los que git invoca el hook pre-push.

    Las líneas de refs que git envía por stdin no se leen.
    """

    remote_name: str = Field(
        default="",
        description="Nombre del remoto (p.ej. 'origin').",
    )
    remote_url: str = Field(
        default="",
        description="URL del remoto.",
    )


class ToolProbe(BaseModel):
    """Comprobación de presencia de una herramienta externa."""

    name: str = Field(
        ...,
        min_length=1,
        description="Nombre legible de la herramienta (p.ej. 'astyle', 'cargo fmt').",
    )
    command: tuple[str, ...] = Field(
        default_factory=tuple,
        description="argv usado para la comprobación (vacío si solo se busca en PATH).",
    )
    available: bool = Field(
        default=False,
        description="Si la herramienta está disponible.",
    )
    detail: str = Field(
        default="",
        description="Ruta encontrada, versión reportada o motivo del fallo.",
    )


class FormatCheckResult(BaseModel):
    """Salida del target de comprobación de formato."""

    target: str = Field(
        ...,
        min_length=1,
        description="Target ejecutado (p.ej. 'format-check').",
    )
    returncode: int = Field(
        default=0,
        description="Exit code de make; se registra pero no decide el veredicto.",
    )
    output: str = Field(
        default="",
        description="Diagnóstico emitido por el target en stdout.",
    )

    @property
    def has_issues(self) -> bool:
        return bool(self.output.strip())


class HookOutcome(BaseModel):
    """Agregado final: todo lo que la CLI necesita para informar y salir."""

    invocation: HookInvocation = Field(
        default_factory=HookInvocation,
        description="Argumentos recibidos de git.",
    )
    verdict: Verdict = Field(
        default=Verdict.ALLOW,
        description="Permitir o bloquear el push.",
    )
    warnings: list[str] = Field(
        default_factory=list,
        description="Avisos para el usuario (herramientas ausentes, fallos blandos).",
    )
    probes: list[ToolProbe] = Field(
        default_factory=list,
        description="Comprobaciones de herramientas realizadas, en orden.",
    )
    check: FormatCheckResult | None = Field(
        default=None,
        description="Resultado del target (None si no llegó a ejecutarse).",
    )

    @property
    def exit_code(self) -> int:
        return int(self.verdict)

    @property
    def diagnostics(self) -> str:
        if self.verdict is Verdict.BLOCK and self.check is not None:
            return self.check.output
        return ""
