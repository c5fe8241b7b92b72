"""Ejecuta pushguard desde una copia del repositorio, sin `pip install -e .`.

Uso típico mientras se desarrolla el propio hook:
- `python main.py hook origin <url>` (lo mismo que ejecuta el shim de `.git/hooks/pre-push`)
- `python main.py doctor run`

Añade `src/` al `sys.path` porque los paquetes `cli`, `core` y `adapters`
solo son importables tras instalar el proyecto.
"""

from __future__ import annotations

import sys
from pathlib import Path


def main() -> None:
    project_root = Path(__file__).resolve().parent
    src = project_root / "src"
    if str(src) not in sys.path:
        sys.path.insert(0, str(src))

    from cli.main import run  # noqa: PLC0415

    run()


if __name__ == "__main__":
    main()
