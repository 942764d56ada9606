"""Tests for scenario result models and the Rich summary."""

from __future__ import annotations

from unittest.mock import patch

import pytest

from aspnet_gen.harness.results import (
    ExpectationFailure,
    RunSummary,
    ScenarioResult,
    ScenarioStatus,
    print_run_summary,
)


pytestmark = pytest.mark.unit


def _failure(message: str = "Check file content: README.md does not match '# x'") -> ExpectationFailure:
    return ExpectationFailure(
        kind="content_mismatch",
        path="README.md",
        pattern="'# x'",
        description="Check file content",
        message=message,
    )


def _result(name: str, status: ScenarioStatus, **kwargs) -> ScenarioResult:
    return ScenarioResult(name=name, generator="readme", status=status, **kwargs)


class TestScenarioResult:
    @pytest.mark.parametrize(
        ("status", "passed"),
        [
            (ScenarioStatus.PASSED, True),
            (ScenarioStatus.SKIPPED, True),
            (ScenarioStatus.FAILED, False),
            (ScenarioStatus.ERROR, False),
        ],
    )
    def test_passed(self, status, passed):
        assert _result("s", status).passed is passed

    def test_summary_line_failure(self):
        result = _result("s", ScenarioStatus.FAILED, failures=[_failure("first"), _failure("second")])
        assert result.summary_line() == "first"

    def test_summary_line_error(self):
        result = _result("s", ScenarioStatus.ERROR, error="Unknown generator: 'x'")
        assert result.summary_line() == "Unknown generator: 'x'"

    def test_summary_line_skipped(self):
        assert _result("s", ScenarioStatus.SKIPPED, skip_reason="later").summary_line() == "later"

    def test_serializes_computed_passed(self):
        data = _result("s", ScenarioStatus.PASSED).model_dump()
        assert data["passed"] is True
        assert data["status"] == ScenarioStatus.PASSED


class TestRunSummary:
    def test_counts(self):
        summary = RunSummary(
            results=[
                _result("a", ScenarioStatus.PASSED),
                _result("b", ScenarioStatus.PASSED),
                _result("c", ScenarioStatus.FAILED, failures=[_failure()]),
                _result("d", ScenarioStatus.ERROR, error="boom"),
                _result("e", ScenarioStatus.SKIPPED, skip_reason="later"),
            ]
        )
        assert summary.total == 5
        assert summary.passed == 2
        assert summary.failed == 1
        assert summary.errors == 1
        assert summary.skipped == 1
        assert summary.all_passed is False

    def test_skipped_does_not_fail_run(self):
        summary = RunSummary(
            results=[
                _result("a", ScenarioStatus.PASSED),
                _result("b", ScenarioStatus.SKIPPED, skip_reason="later"),
            ]
        )
        assert summary.all_passed is True

    def test_empty(self):
        assert RunSummary().all_passed is True


class TestPrintRunSummary:
    def test_prints_table_failures_and_totals(self):
        summary = RunSummary(
            results=[
                _result("aspnet:readme", ScenarioStatus.FAILED, failures=[_failure()]),
                _result("aspnet:program", ScenarioStatus.PASSED),
            ]
        )
        with patch("aspnet_gen.harness.results.console") as console:
            print_run_summary(summary, title="Run")
        calls = [c.args[0] for c in console.print.call_args_list]
        assert calls[0].title == "Run"
        assert calls[0].row_count == 2
        assert any("aspnet:readme" in str(c) for c in calls[1:])
        assert any("does not match" in str(c) for c in calls[1:])
        assert "2[/bold] scenarios" in calls[-1]

    def test_markup_in_messages_is_escaped(self):
        summary = RunSummary(
            results=[
                _result(
                    "aspnet:webapicontroller",
                    ScenarioStatus.FAILED,
                    failures=[_failure("Controller.cs does not match '[controller]'")],
                )
            ]
        )
        with patch("aspnet_gen.harness.results.console") as console:
            print_run_summary(summary)
        printed = [str(c.args[0]) for c in console.print.call_args_list]
        assert any("\\[controller]" in line for line in printed)
