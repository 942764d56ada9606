"""Scenario results collection and reporting.

Provides Pydantic v2 models for scenario outcomes (individual expectation
failures, per-scenario results, whole-run summaries) and a Rich renderer
that prints them with file paths and patterns verbatim.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field, computed_field
from rich.markup import escape
from rich.table import Table

from ..utils import console, format_duration


class ScenarioStatus(str, Enum):
    PASSED = "passed"
    FAILED = "failed"
    ERROR = "error"
    SKIPPED = "skipped"


_STATUS_STYLES: dict[ScenarioStatus, str] = {
    ScenarioStatus.PASSED: "green",
    ScenarioStatus.FAILED: "red",
    ScenarioStatus.ERROR: "bold red",
    ScenarioStatus.SKIPPED: "yellow",
}


# ---------------------------------------------------------------------------
# Individual failure
# ---------------------------------------------------------------------------

class ExpectationFailure(BaseModel):
    """One expectation that did not hold."""

    kind: str = Field(..., description="'missing_file', 'content_mismatch' or 'unexpected_content'")
    path: str = Field(..., description="File the expectation refers to")
    pattern: str = Field(default="", description="Pattern rendered verbatim, if any")
    description: str = Field(default="")
    message: str = Field(..., description="Full assertion message")


# ---------------------------------------------------------------------------
# Per-scenario result
# ---------------------------------------------------------------------------

class ScenarioResult(BaseModel):
    """Outcome of running a single scenario."""

    name: str
    generator: str
    status: ScenarioStatus
    workspace: str = Field(default="", description="Workspace used for the run, if any")
    error: str = Field(default="", description="Invocation-layer error, for status 'error'")
    skip_reason: str = Field(default="")
    failures: list[ExpectationFailure] = Field(default_factory=list)
    checked: int = Field(default=0, ge=0, description="Expectations evaluated")
    duration_seconds: float = Field(default=0.0, ge=0.0)

    @computed_field  # type: ignore[misc]
    @property
    def passed(self) -> bool:
        """True for passed scenarios; skipped scenarios are not failures either."""
        return self.status in (ScenarioStatus.PASSED, ScenarioStatus.SKIPPED)

    def summary_line(self) -> str:
        """One-line explanation of a non-passing result."""
        if self.status is ScenarioStatus.ERROR:
            return self.error
        if self.status is ScenarioStatus.SKIPPED:
            return self.skip_reason
        if self.failures:
            return self.failures[0].message
        return ""


# ---------------------------------------------------------------------------
# Run summary
# ---------------------------------------------------------------------------

class RunSummary(BaseModel):
    """Aggregated outcomes of a registry run."""

    results: list[ScenarioResult] = Field(default_factory=list)

    def _count(self, status: ScenarioStatus) -> int:
        return sum(1 for r in self.results if r.status is status)

    @computed_field  # type: ignore[misc]
    @property
    def total(self) -> int:
        return len(self.results)

    @computed_field  # type: ignore[misc]
    @property
    def passed(self) -> int:
        return self._count(ScenarioStatus.PASSED)

    @computed_field  # type: ignore[misc]
    @property
    def failed(self) -> int:
        return self._count(ScenarioStatus.FAILED)

    @computed_field  # type: ignore[misc]
    @property
    def errors(self) -> int:
        return self._count(ScenarioStatus.ERROR)

    @computed_field  # type: ignore[misc]
    @property
    def skipped(self) -> int:
        return self._count(ScenarioStatus.SKIPPED)

    @computed_field  # type: ignore[misc]
    @property
    def all_passed(self) -> bool:
        """True when no scenario failed or errored."""
        return self.failed == 0 and self.errors == 0


# ---------------------------------------------------------------------------
# Rich output
# ---------------------------------------------------------------------------

def print_run_summary(summary: RunSummary, title: str = "Generator scenarios") -> None:
    """Print one row per scenario followed by every failure in full."""
    table = Table(title=title, show_header=True, header_style="bold cyan")
    table.add_column("Scenario")
    table.add_column("Status", no_wrap=True)
    table.add_column("Time", justify="right", no_wrap=True)
    table.add_column("Details", overflow="fold")

    for result in summary.results:
        style = _STATUS_STYLES[result.status]
        table.add_row(
            escape(result.name),
            f"[{style}]{result.status.value}[/{style}]",
            format_duration(result.duration_seconds),
            escape(result.summary_line()),
        )

    console.print(table)

    for result in summary.results:
        if not result.failures:
            continue
        console.print(f"[bold red]{escape(result.name)}[/bold red]")
        for failure in result.failures:
            console.print(f"  [red]-[/red] {escape(failure.message)}")

    console.print(
        f"[bold]{summary.total}[/bold] scenarios: "
        f"[green]{summary.passed} passed[/green], "
        f"[red]{summary.failed} failed[/red], "
        f"[bold red]{summary.errors} errors[/bold red], "
        f"[yellow]{summary.skipped} skipped[/yellow]"
    )
