"""Doctor command for environment diagnostics."""

from __future__ import annotations

import json

import typer
from pydantic import ValidationError
from pydantic_settings import SettingsError
from rich.console import Console

from adapters.subprocess_runner import SubprocessRunner
from cli.ui_components import build_probes_table
from core.config import HookSettings, get_user_env_file, load_settings, write_user_env_vars
from core.services.pre_push import probe_tools

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()


@app.command()
def run() -> None:
    """Probe every tool the hook needs and show the effective configuration."""

    try:
        settings = load_settings()
    except (SettingsError, ValidationError) as exc:
        _console.print(f"Invalid configuration: {exc}", style="red", markup=False, highlight=False)
        raise typer.Exit(code=2) from exc

    table = build_probes_table(probe_tools(runner=SubprocessRunner(), settings=settings))

    # Config
    table.add_row("Style tool", "CONFIG", settings.style_tool)
    table.add_row("Formatter probe", "CONFIG", " ".join(settings.formatter_version_command()))
    table.add_row("Check target", "CONFIG", " ".join(settings.check_command()))
    table.add_row("Fix target", "CONFIG", f"{settings.make_command} {settings.fix_target}")
    table.add_row("Project dir", "CONFIG", str(settings.working_dir()))
    table.add_row("User config", "CONFIG", str(get_user_env_file()))

    _console.print(table)
    _console.print(
        "\n[yellow]Note:[/yellow] Missing tools never block a push; the hook warns and lets it through."
    )


@app.command(name="setup")
def setup() -> None:
    """Interactive setup (stores config in the user config .env).

    Useful when every clone should use the same tools without a per-repo .env.
    """

    try:
        settings = load_settings()
    except (SettingsError, ValidationError):
        # Rewriting the config is how a broken one gets fixed.
        settings = HookSettings(_env_file=None)

    style_tool = typer.prompt("Style tool", default=settings.style_tool, show_default=True).strip()
    formatter = typer.prompt(
        "Formatter command",
        default=" ".join(settings.formatter_command),
        show_default=True,
    ).strip()
    check_target = typer.prompt("Format-check target", default=settings.check_target, show_default=True).strip()
    fix_target = typer.prompt("Format target", default=settings.fix_target, show_default=True).strip()

    if not style_tool or not formatter or not check_target:
        raise typer.BadParameter("style tool, formatter and check target are required")

    formatter_json = json.dumps(formatter.split())
    env_path = write_user_env_vars(
        {
            "PUSHGUARD_STYLE_TOOL": style_tool,
            "PUSHGUARD_FORMATTER_COMMAND": formatter_json,
            "PUSHGUARD_CHECK_TARGET": check_target,
            "PUSHGUARD_FIX_TARGET": fix_target or settings.fix_target,
        }
    )

    _console.print(f"[green]Saved pushguard config to:[/green] {env_path}")
