"""Exportación JSON del resultado del hook.

Por qué JSON:
- Interoperabilidad con CI y otras herramientas (auditar por qué se bloqueó un push).
- Permite persistir el diagnóstico sin depender del render en terminal.
"""

from __future__ import annotations

import json
from pathlib import Path

from core.domain.models import HookOutcome


def export_outcome_json(*, outcome: HookOutcome, output_path: Path) -> Path:
    """Exporta `HookOutcome` a JSON UTF-8 con formato estable."""

    output_path.parent.mkdir(parents=True, exist_ok=True)
    payload = outcome.model_dump(mode="json")
    payload["exit_code"] = outcome.exit_code
    output_path.write_text(
        json.dumps(payload, ensure_ascii=False, indent=2, sort_keys=True) + "\n",
        encoding="utf-8",
    )
    return output_path
