"""Pre-push format check orchestration.

The hook is a linear flow: style tool present, formatter present, run the
format-check target, decide on its output. This module owns that flow and
returns a `HookOutcome`; printing and exit codes stay in the CLI layer so the
same logic can back `doctor`, the JSON report and the tests.

Every failure path except real formatting issues is soft: the outcome carries
a warning and an ALLOW verdict.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable

from adapters.tools import FormatCheckTarget, FormatterProbe, StyleCheckerProbe
from core.config import HookSettings
from core.domain.models import HookInvocation, HookOutcome, ToolProbe, Verdict
from core.errors import ToolExecutionError, ToolNotFoundError
from core.interfaces.runner import CommandRunner

logger = logging.getLogger(__name__)


@dataclass
class PrePushRequest:
    """Parameters git hands to the hook."""

    remote_name: str = ""
    remote_url: str = ""


@dataclass
class PrePushHooks:
    """Optional callbacks for UI layers (progress, warnings)."""

    warning: Callable[[str], None] | None = None
    step: Callable[[str], None] | None = None


@dataclass
class _Flow:
    outcome: HookOutcome
    hooks: PrePushHooks = field(default_factory=PrePushHooks)

    def step(self, label: str) -> None:
        logger.debug("step: %s", label)
        if self.hooks.step:
            self.hooks.step(label)

    def allow_with_warning(self, message: str) -> HookOutcome:
        logger.info("allowing push: %s", message)
        self.outcome.warnings.append(message)
        if self.hooks.warning:
            self.hooks.warning(message)
        self.outcome.verdict = Verdict.ALLOW
        return self.outcome


def missing_style_tool_warning(probe: ToolProbe) -> str:
    return f"Warning: {probe.name} is not installed; skipping the format check before push."


def missing_formatter_warning(probe: ToolProbe) -> str:
    return f"Warning: {probe.name} is not available ({probe.detail}); skipping the format check before push."


def check_failed_warning(settings: HookSettings, reason: str) -> str:
    return f"Warning: `{' '.join(settings.check_command())}` could not run ({reason}); skipping the format check before push."


def probe_tools(
    *,
    runner: CommandRunner,
    settings: HookSettings | None = None,
) -> list[ToolProbe]:
    """Probe every external tool without short-circuiting (used by `doctor`)."""

    settings = settings or HookSettings()
    probes = [
        StyleCheckerProbe(runner, settings).probe(),
        FormatterProbe(runner, settings).probe(),
    ]
    make_location = runner.which(settings.make_command)
    probes.append(
        ToolProbe(
            name=settings.make_command,
            available=make_location is not None,
            detail=make_location or "not found in PATH",
        )
    )
    return probes


def run_pre_push(
    request: PrePushRequest | None = None,
    *,
    runner: CommandRunner,
    settings: HookSettings | None = None,
    hooks: PrePushHooks | None = None,
) -> HookOutcome:
    """Run the check-and-report flow and return the verdict.

    Order matters: the formatter is only probed when the style tool is present,
    and the target only runs when both are.
    """

    request = request or PrePushRequest()
    settings = settings or HookSettings()
    flow = _Flow(
        outcome=HookOutcome(
            invocation=HookInvocation(remote_name=request.remote_name, remote_url=request.remote_url),
        ),
        hooks=hooks or PrePushHooks(),
    )
    outcome = flow.outcome
    logger.debug("pre-push for remote %r (%s)", request.remote_name, request.remote_url)

    flow.step(f"checking for {settings.style_tool}")
    style = StyleCheckerProbe(runner, settings).probe()
    outcome.probes.append(style)
    if not style.available:
        return flow.allow_with_warning(missing_style_tool_warning(style))

    flow.step(f"checking {' '.join(settings.formatter_version_command())}")
    formatter = FormatterProbe(runner, settings).probe()
    outcome.probes.append(formatter)
    if not formatter.available:
        return flow.allow_with_warning(missing_formatter_warning(formatter))

    flow.step(f"running {' '.join(settings.check_command())}")
    try:
        check = FormatCheckTarget(runner, settings).run()
    except ToolNotFoundError as exc:
        return flow.allow_with_warning(check_failed_warning(settings, str(exc)))
    except ToolExecutionError as exc:
        return flow.allow_with_warning(check_failed_warning(settings, exc.reason))

    outcome.check = check
    outcome.verdict = Verdict.BLOCK if check.has_issues else Verdict.ALLOW
    logger.info("format check verdict: %s", outcome.verdict.name)
    return outcome
