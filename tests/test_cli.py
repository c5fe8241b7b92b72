"""Tests for the pushguard command line."""

from __future__ import annotations

import io
import json
import os

import pytest
from rich.console import Console
from typer.testing import CliRunner

from cli import doctor
from cli import main as cli_main
from cli.ui_components import BANNER_RULE, FAILURE_HEADLINE, print_failure_banner
from fakes import FakeRunner, ok

DIAGNOSTICS = "Diff in src/exec/src/lib.rs at line 3:\n-extern crate  log;\n+extern crate log;\n"


@pytest.fixture
def cli_runner():
    return CliRunner()


@pytest.fixture
def use_runner(monkeypatch, tmp_path):
    """Swap the subprocess runner for a fake and isolate settings from .env files."""

    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg"))
    monkeypatch.setenv("APPDATA", str(tmp_path / "xdg"))
    for name in list(os.environ):
        if name.upper().startswith("PUSHGUARD_"):
            monkeypatch.delenv(name)

    def _use(fake: FakeRunner) -> FakeRunner:
        monkeypatch.setattr(cli_main, "build_runner", lambda: fake)
        return fake

    return _use


def _clean_tools() -> FakeRunner:
    results = {("cargo", "fmt", "--version"): ok(["cargo", "fmt", "--version"], "rustfmt 1.7.0\n")}
    return FakeRunner(installed=["astyle", "cargo", "make"], results=results)


class TestHookCommand:
    """The four observable behaviors of the pre-push hook."""

    def test_no_tools_exits_zero_with_warning(self, cli_runner, use_runner):
        use_runner(FakeRunner())

        result = cli_runner.invoke(cli_main.app, ["hook", "origin", "https://example.com/repo.git"])

        assert result.exit_code == 0
        assert "Warning: astyle is not installed" in result.stdout

    def test_formatter_missing_exits_zero_with_warning(self, cli_runner, use_runner):
        use_runner(FakeRunner(installed=["astyle", "make"]))

        result = cli_runner.invoke(cli_main.app, ["hook", "origin", "https://example.com/repo.git"])

        assert result.exit_code == 0
        assert "Warning: cargo fmt is not available" in result.stdout

    def test_clean_check_exits_zero_silently(self, cli_runner, use_runner):
        use_runner(_clean_tools())

        result = cli_runner.invoke(cli_main.app, ["hook", "origin", "https://example.com/repo.git"])

        assert result.exit_code == 0
        assert result.stdout == ""

    def test_issues_exit_one_with_banner(self, cli_runner, use_runner):
        fake = use_runner(
            FakeRunner(
                installed=["astyle", "cargo", "make"],
                results={("make", "format-check"): ok(["make", "format-check"], DIAGNOSTICS)},
            )
        )

        result = cli_runner.invoke(cli_main.app, ["hook", "origin", "https://example.com/repo.git"])

        assert result.exit_code == 1
        assert fake.ran("make", "format-check")
        lines = result.stdout.splitlines()
        assert lines[0] == BANNER_RULE
        assert lines[1] == FAILURE_HEADLINE
        assert "-extern crate  log;" in lines
        assert "+extern crate log;" in lines
        assert "Run `make format` to fix the formatting, then push again." in lines
        assert lines[-1] == BANNER_RULE

    def test_diagnostics_echoed_verbatim(self, cli_runner, use_runner):
        """Test that tabs in the make output survive the banner."""
        use_runner(
            FakeRunner(
                installed=["astyle", "cargo", "make"],
                results={("make", "format-check"): ok(["make", "format-check"], "a.c:\n\tint x;\n")},
            )
        )

        result = cli_runner.invoke(cli_main.app, ["hook", "origin", "https://example.com/repo.git"])

        assert result.exit_code == 1
        assert f"{BANNER_RULE}\na.c:\n\tint x;\n{BANNER_RULE}\n" in result.stdout

    def test_formatter_command_as_plain_words_in_env_file(self, cli_runner, use_runner, tmp_path):
        (tmp_path / ".env").write_text("PUSHGUARD_FORMATTER_COMMAND=rustfmt --edition 2021\n", encoding="utf-8")
        fake = use_runner(FakeRunner(installed=["astyle", "rustfmt", "make"]))

        result = cli_runner.invoke(cli_main.app, ["hook", "origin", "https://example.com/repo.git"])

        assert result.exit_code == 0
        assert fake.ran("rustfmt", "--edition", "2021", "--version")

    def test_invalid_config_allows_with_warning(self, cli_runner, use_runner, tmp_path):
        (tmp_path / ".env").write_text("PUSHGUARD_CHECK_TIMEOUT_SECONDS=-1\n", encoding="utf-8")
        fake = use_runner(_clean_tools())

        result = cli_runner.invoke(cli_main.app, ["hook", "origin", "https://example.com/repo.git"])

        assert result.exit_code == 0
        assert "Warning: invalid pushguard configuration" in result.stdout
        assert fake.calls == []

    def test_verbose_reports_each_step(self, cli_runner, use_runner):
        use_runner(_clean_tools())

        result = cli_runner.invoke(cli_main.app, ["-v", "hook", "origin", "https://example.com/repo.git"])

        assert result.exit_code == 0
        assert "-> checking for astyle" in result.output
        assert "-> running make format-check" in result.output

    def test_arguments_are_optional_for_manual_runs(self, cli_runner, use_runner):
        use_runner(_clean_tools())

        result = cli_runner.invoke(cli_main.app, ["hook"])

        assert result.exit_code == 0

    def test_report_written_as_json(self, cli_runner, use_runner, tmp_path):
        use_runner(
            FakeRunner(
                installed=["astyle", "cargo", "make"],
                results={("make", "format-check"): ok(["make", "format-check"], DIAGNOSTICS)},
            )
        )
        report = tmp_path / "out" / "pushguard.json"

        result = cli_runner.invoke(
            cli_main.app,
            ["hook", "origin", "https://example.com/repo.git", "--report", str(report)],
        )

        assert result.exit_code == 1
        payload = json.loads(report.read_text(encoding="utf-8"))
        assert payload["exit_code"] == 1
        assert payload["verdict"] == 1
        assert payload["invocation"]["remote_name"] == "origin"
        assert payload["check"]["output"] == DIAGNOSTICS


class TestInstallCommands:
    def _git_runner(self, hooks_dir) -> FakeRunner:
        argv = ("git", "rev-parse", "--git-path", "hooks")
        return FakeRunner(installed=["git"], results={argv: ok(argv, f"{hooks_dir}\n")})

    def test_install_then_uninstall(self, cli_runner, use_runner, tmp_path):
        hooks_dir = tmp_path / ".git" / "hooks"
        use_runner(self._git_runner(hooks_dir))

        installed = cli_runner.invoke(cli_main.app, ["install", "--repo", str(tmp_path)])
        assert installed.exit_code == 0
        assert (hooks_dir / "pre-push").is_file()

        removed = cli_runner.invoke(cli_main.app, ["uninstall", "--repo", str(tmp_path)])
        assert removed.exit_code == 0
        assert not (hooks_dir / "pre-push").exists()

    def test_install_refuses_foreign_hook(self, cli_runner, use_runner, tmp_path):
        hooks_dir = tmp_path / ".git" / "hooks"
        hooks_dir.mkdir(parents=True)
        (hooks_dir / "pre-push").write_text("#!/bin/sh\nexit 0\n", encoding="utf-8")
        use_runner(self._git_runner(hooks_dir))

        result = cli_runner.invoke(cli_main.app, ["install", "--repo", str(tmp_path)])

        assert result.exit_code == 2
        assert "--force" in result.stdout

    def test_uninstall_without_hook(self, cli_runner, use_runner, tmp_path):
        use_runner(self._git_runner(tmp_path / ".git" / "hooks"))

        result = cli_runner.invoke(cli_main.app, ["uninstall", "--repo", str(tmp_path)])

        assert result.exit_code == 0
        assert "No pre-push hook installed" in result.stdout


class TestDoctor:
    def test_run_lists_probes(self, cli_runner, use_runner, monkeypatch):
        monkeypatch.setattr(doctor, "SubprocessRunner", lambda: FakeRunner(installed=["make"]))

        result = cli_runner.invoke(cli_main.app, ["doctor", "run"])

        assert result.exit_code == 0
        assert "astyle" in result.stdout
        assert "MISSING" in result.stdout

    def test_setup_writes_user_config(self, cli_runner, use_runner, monkeypatch, tmp_path):
        monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg"))

        result = cli_runner.invoke(
            cli_main.app,
            ["doctor", "setup"],
            input="clang-format\nrustfmt --edition 2021\nfmt-check\nfmt\n",
        )

        assert result.exit_code == 0
        text = (tmp_path / "xdg" / "pushguard" / ".env").read_text(encoding="utf-8")
        assert "PUSHGUARD_STYLE_TOOL=clang-format" in text
        assert 'PUSHGUARD_FORMATTER_COMMAND=["rustfmt", "--edition", "2021"]' in text
        assert "PUSHGUARD_CHECK_TARGET=fmt-check" in text


class TestFailureBanner:
    def test_carriage_returns_and_tabs_untouched(self):
        buffer = io.StringIO()
        console = Console(file=buffer, highlight=False, color_system=None)

        print_failure_banner(console, diagnostics="a.c:\n\tint x;\r\n", fix_command="make format")

        assert "\na.c:\n\tint x;\r\n" + BANNER_RULE in buffer.getvalue()

    def test_missing_trailing_newline_added(self):
        buffer = io.StringIO()
        console = Console(file=buffer, highlight=False, color_system=None)

        print_failure_banner(console, diagnostics="bad.c", fix_command="make format")

        assert "\nbad.c\n" + BANNER_RULE in buffer.getvalue()
