"""pushguard command line.

`pushguard hook` is what git runs as `.git/hooks/pre-push`; the other commands
install the shim and help diagnose the environment.
"""

from __future__ import annotations

from pathlib import Path

import typer
from pydantic import ValidationError
from pydantic_settings import SettingsError
from rich.console import Console

from adapters.hook_installer import install_hook, uninstall_hook
from adapters.json_exporter import export_outcome_json
from adapters.subprocess_runner import SubprocessRunner
from cli import doctor
from cli.ui_components import print_failure_banner, print_step, print_warning
from core.config import HookSettings, load_settings
from core.errors import HookInstallError
from core.interfaces.runner import CommandRunner
from core.logging_config import configure_logging
from core.services.pre_push import PrePushHooks, PrePushRequest, run_pre_push

app = typer.Typer(
    no_args_is_help=True,
    help="Git pre-push hook that blocks pushes with formatting issues.",
)
app.add_typer(doctor.app, name="doctor")

_console = Console(highlight=False)
_err_console = Console(stderr=True, highlight=False)


def build_runner() -> CommandRunner:
    return SubprocessRunner()


def invalid_config_warning(exc: Exception) -> str:
    reason = str(exc).splitlines()[0] if str(exc) else type(exc).__name__
    return f"Warning: invalid pushguard configuration ({reason}); skipping the format check before push."


@app.callback()
def main(
    ctx: typer.Context,
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log every step to stderr."),
) -> None:
    """Configure logging before any command runs."""

    ctx.obj = {"verbose": verbose}
    try:
        level = load_settings().log_level
    except (SettingsError, ValidationError):
        # The command that needs the settings reports the problem.
        level = "WARNING"
    configure_logging("DEBUG" if verbose else level)


@app.command()
def hook(
    ctx: typer.Context,
    remote_name: str = typer.Argument("", help="Remote name, as passed by git."),
    remote_url: str = typer.Argument("", help="Remote URL, as passed by git."),
    report: Path | None = typer.Option(None, "--report", help="Write the outcome as JSON to this path."),
) -> None:
    """Run the format check; exit 1 blocks the push."""

    try:
        settings: HookSettings = load_settings()
    except (SettingsError, ValidationError) as exc:
        print_warning(_console, invalid_config_warning(exc))
        raise typer.Exit(code=0) from exc

    verbose = bool(ctx.obj and ctx.obj.get("verbose"))
    hooks = PrePushHooks(
        warning=lambda message: print_warning(_console, message),
        step=(lambda label: print_step(_err_console, label)) if verbose else None,
    )
    outcome = run_pre_push(
        PrePushRequest(remote_name=remote_name, remote_url=remote_url),
        runner=build_runner(),
        settings=settings,
        hooks=hooks,
    )

    if outcome.diagnostics:
        print_failure_banner(
            _console,
            diagnostics=outcome.diagnostics,
            fix_command=f"{settings.make_command} {settings.fix_target}",
        )

    if report is not None:
        export_outcome_json(outcome=outcome, output_path=report)

    raise typer.Exit(code=outcome.exit_code)


@app.command()
def install(
    repo: Path = typer.Option(Path("."), "--repo", help="Any directory inside the target repository."),
    force: bool = typer.Option(False, "--force", help="Overwrite an existing pre-push hook."),
) -> None:
    """Install the pre-push shim into the repository's hooks directory."""

    try:
        dest = install_hook(runner=build_runner(), repo_dir=repo.resolve(), force=force)
    except HookInstallError as exc:
        _console.print(f"[red]Error:[/red] {exc}")
        raise typer.Exit(code=2) from exc

    _console.print(f"[green]Installed pre-push hook:[/green] {dest}")


@app.command()
def uninstall(
    repo: Path = typer.Option(Path("."), "--repo", help="Any directory inside the target repository."),
) -> None:
    """Remove the pre-push shim if pushguard installed it."""

    try:
        removed = uninstall_hook(runner=build_runner(), repo_dir=repo.resolve())
    except HookInstallError as exc:
        _console.print(f"[red]Error:[/red] {exc}")
        raise typer.Exit(code=2) from exc

    if removed is None:
        _console.print("[yellow]No pre-push hook installed.[/yellow]")
    else:
        _console.print(f"[green]Removed pre-push hook:[/green] {removed}")


def run() -> None:
    app(prog_name="pushguard")


if __name__ == "__main__":
    run()
