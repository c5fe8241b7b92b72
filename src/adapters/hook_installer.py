"""Instalación del shim `pre-push` en el repositorio git.

Por qué `git rev-parse --git-path hooks`:
- Respeta `core.hooksPath`, worktrees y `.git` como fichero (submódulos).
- Evita reimplementar la resolución del git dir a mano.
"""

from __future__ import annotations

import logging
import stat
from pathlib import Path

from core.errors import HookInstallError, ToolExecutionError, ToolNotFoundError
from core.interfaces.runner import CommandRunner

logger = logging.getLogger(__name__)

HOOK_NAME = "pre-push"
SHIM_MARKER = "# Installed by pushguard."


def render_shim(executable: str = "pushguard") -> str:
    """Contenido del shim: reenvía los argumentos de git a `pushguard hook`."""

    return "\n".join(
        [
            "#!/bin/sh",
            SHIM_MARKER + " Remove with `pushguard uninstall`.",
            f'exec {executable} hook "$@"',
            "",
        ]
    )


def resolve_hooks_dir(*, runner: CommandRunner, repo_dir: Path) -> Path:
    """Directorio de hooks efectivo del repositorio en `repo_dir`."""

    try:
        result = runner.run(["git", "rev-parse", "--git-path", "hooks"], cwd=repo_dir)
    except (ToolNotFoundError, ToolExecutionError) as exc:
        raise HookInstallError(str(exc)) from exc

    raw = result.stdout.strip()
    if not result.ok or not raw:
        raise HookInstallError(f"{repo_dir} is not inside a git repository")

    hooks_dir = Path(raw)
    if not hooks_dir.is_absolute():
        hooks_dir = repo_dir / hooks_dir
    return hooks_dir


def is_pushguard_hook(path: Path) -> bool:
    if not path.is_file():
        return False
    try:
        return SHIM_MARKER in path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError):
        return False


def make_executable(path: Path) -> None:
    mode = path.stat().st_mode
    path.chmod(mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)


def install_hook(
    *,
    runner: CommandRunner,
    repo_dir: Path,
    force: bool = False,
    executable: str = "pushguard",
) -> Path:
    """Escribe el shim en `<hooks>/pre-push` y lo marca como ejecutable.

    Reglas:
    - Un hook ajeno existente no se sobrescribe salvo `force=True`.
    - Reinstalar sobre nuestro propio shim siempre está permitido.
    """

    hooks_dir = resolve_hooks_dir(runner=runner, repo_dir=repo_dir)
    dest = hooks_dir / HOOK_NAME

    if dest.exists() and not is_pushguard_hook(dest) and not force:
        raise HookInstallError(f"{dest} already exists and was not installed by pushguard (use --force)")

    try:
        hooks_dir.mkdir(parents=True, exist_ok=True)
        dest.write_text(render_shim(executable), encoding="utf-8")
        make_executable(dest)
    except OSError as exc:
        raise HookInstallError(f"could not write {dest}: {exc}") from exc

    logger.info("installed %s", dest)
    return dest


def uninstall_hook(*, runner: CommandRunner, repo_dir: Path) -> Path | None:
    """Elimina el shim si es nuestro. Devuelve la ruta borrada o None si no había."""

    dest = resolve_hooks_dir(runner=runner, repo_dir=repo_dir) / HOOK_NAME
    if not dest.exists():
        return None
    if not is_pushguard_hook(dest):
        raise HookInstallError(f"{dest} was not installed by pushguard; leaving it in place")

    try:
        dest.unlink()
    except OSError as exc:
        raise HookInstallError(f"could not remove {dest}: {exc}") from exc

    logger.info("removed %s", dest)
    return dest
