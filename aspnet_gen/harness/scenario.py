"""Declarative generator scenarios and the runner that executes them.

A :class:`Scenario` names a generator, the arguments forwarded to it, an
optional application bootstrap, and the expectations checked against the
files it writes.  Every run gets its own workspace, so scenarios can run in
any order or in parallel.
"""

from __future__ import annotations

import time
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, Iterator, Mapping, Union

from ..config import GeneratorConfig
from ..errors import (
    ArtifactAssertionError,
    AspnetGenError,
    ContentMismatchError,
    MissingFileError,
    UnexpectedContentError,
    describe_pattern,
)
from .assertions import (
    Pattern,
    assert_content_excludes,
    assert_content_matches,
    assert_file_exists,
)
from .bootstrap import ApplicationBootstrapper
from .invoker import GeneratorInvoker
from .results import ExpectationFailure, RunSummary, ScenarioResult, ScenarioStatus
from .workspace import TempWorkspace


# ---------------------------------------------------------------------------
# Expectations
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class FileExists:
    path: str

    def check(self, root: Path) -> None:
        assert_file_exists(self.path, root=root)


@dataclass(frozen=True)
class ContentMatches:
    path: str
    pattern: Pattern
    description: str = "file content check"

    def check(self, root: Path) -> None:
        assert_content_matches(self.path, self.pattern, self.description, root=root)


@dataclass(frozen=True)
class ContentExcludes:
    path: str
    pattern: Pattern
    description: str = "file content check"

    def check(self, root: Path) -> None:
        assert_content_excludes(self.path, self.pattern, self.description, root=root)


Expectation = Union[FileExists, ContentMatches, ContentExcludes]


# ---------------------------------------------------------------------------
# Scenario
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class BootstrapStep:
    """Application skeleton seeded into the workspace before invocation."""

    kind: str
    name: str


@dataclass(frozen=True)
class Scenario:
    """One generator invocation plus the outcomes expected from it.

    The generator runs in the workspace itself, or in ``<workspace>/<name>``
    when a bootstrap step is present.  ``working_directory`` overrides that
    with a path relative to the workspace.  Relative expectation paths are
    resolved against the directory the generator ran in.
    """

    name: str
    generator: str
    args: tuple[str, ...] = ()
    expectations: tuple[Expectation, ...] = ()
    bootstrap: BootstrapStep | None = None
    working_directory: str | None = None
    answers: Mapping[str, str] = field(default_factory=dict, hash=False)
    skip_reason: str | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "args", tuple(self.args))
        object.__setattr__(self, "expectations", tuple(self.expectations))

    @property
    def pending(self) -> bool:
        return self.skip_reason is not None

    def generator_cwd(self, workspace: Path) -> Path:
        if self.working_directory is not None:
            return workspace / self.working_directory
        if self.bootstrap is not None:
            return workspace / self.bootstrap.name
        return workspace


# ---------------------------------------------------------------------------
# Registry
# ---------------------------------------------------------------------------

class ScenarioRegistry:
    """Ordered collection of uniquely named scenarios."""

    def __init__(self, scenarios: Iterable[Scenario] = ()) -> None:
        self._scenarios: dict[str, Scenario] = {}
        self.extend(scenarios)

    def register(self, scenario: Scenario) -> Scenario:
        if scenario.name in self._scenarios:
            raise ValueError(f"duplicate scenario name: {scenario.name!r}")
        self._scenarios[scenario.name] = scenario
        return scenario

    def extend(self, scenarios: Iterable[Scenario]) -> None:
        for scenario in scenarios:
            self.register(scenario)

    def scenario(self, name: str) -> Scenario:
        return self._scenarios[name]

    def names(self) -> list[str]:
        return list(self._scenarios)

    def active(self) -> list[Scenario]:
        return [s for s in self._scenarios.values() if not s.pending]

    def pending(self) -> list[Scenario]:
        return [s for s in self._scenarios.values() if s.pending]

    def __iter__(self) -> Iterator[Scenario]:
        return iter(list(self._scenarios.values()))

    def __len__(self) -> int:
        return len(self._scenarios)

    def __contains__(self, name: object) -> bool:
        return name in self._scenarios


# ---------------------------------------------------------------------------
# Runner
# ---------------------------------------------------------------------------

_FAILURE_KINDS: dict[type[ArtifactAssertionError], str] = {
    MissingFileError: "missing_file",
    ContentMismatchError: "content_mismatch",
    UnexpectedContentError: "unexpected_content",
}


def failure_from_error(exc: ArtifactAssertionError) -> ExpectationFailure:
    pattern = getattr(exc, "pattern", None)
    return ExpectationFailure(
        kind=_FAILURE_KINDS.get(type(exc), "assertion"),
        path=str(exc.path),
        pattern=describe_pattern(pattern) if pattern is not None else "",
        description=getattr(exc, "description", ""),
        message=str(exc),
    )


def run_scenario(
    scenario: Scenario,
    *,
    invoker: GeneratorInvoker,
    bootstrapper: ApplicationBootstrapper,
    workspaces: TempWorkspace,
) -> ScenarioResult:
    """Run *scenario* in a fresh workspace and report the outcome.

    Bootstrap or invocation errors end the scenario with status ``error``
    before any expectation is checked.  Otherwise every expectation is
    evaluated and each failure is recorded.  Any other exception is reported
    as status ``error`` too, so sibling scenarios keep running.
    """
    if scenario.pending:
        return ScenarioResult(
            name=scenario.name,
            generator=scenario.generator,
            status=ScenarioStatus.SKIPPED,
            skip_reason=scenario.skip_reason or "",
        )

    start = time.monotonic()
    try:
        workspace = workspaces.create(scenario.name)
    except AspnetGenError as exc:
        return ScenarioResult(
            name=scenario.name,
            generator=scenario.generator,
            status=ScenarioStatus.ERROR,
            error=str(exc),
            duration_seconds=time.monotonic() - start,
        )

    try:
        cwd = scenario.generator_cwd(workspace)
        try:
            if scenario.bootstrap is not None:
                bootstrapper.bootstrap_application(
                    scenario.bootstrap.kind, scenario.bootstrap.name, workspace
                )
            invoker.invoke(scenario.generator, scenario.args, cwd, scenario.answers)
        except AspnetGenError as exc:
            return ScenarioResult(
                name=scenario.name,
                generator=scenario.generator,
                status=ScenarioStatus.ERROR,
                workspace=str(workspace),
                error=str(exc),
                duration_seconds=time.monotonic() - start,
            )

        failures: list[ExpectationFailure] = []
        for expectation in scenario.expectations:
            try:
                expectation.check(cwd)
            except ArtifactAssertionError as exc:
                failures.append(failure_from_error(exc))

        return ScenarioResult(
            name=scenario.name,
            generator=scenario.generator,
            status=ScenarioStatus.FAILED if failures else ScenarioStatus.PASSED,
            workspace=str(workspace),
            failures=failures,
            checked=len(scenario.expectations),
            duration_seconds=time.monotonic() - start,
        )
    except Exception as exc:
        return ScenarioResult(
            name=scenario.name,
            generator=scenario.generator,
            status=ScenarioStatus.ERROR,
            workspace=str(workspace),
            error=f"{type(exc).__name__}: {exc}",
            duration_seconds=time.monotonic() - start,
        )
    finally:
        workspaces.cleanup(workspace)


def run_registry(
    registry: ScenarioRegistry | Iterable[Scenario],
    *,
    config: GeneratorConfig | None = None,
    parallel: bool = False,
    max_workers: int | None = None,
) -> RunSummary:
    """Run every scenario and collect the results in registry order.

    With ``parallel=True`` scenarios run on a thread pool; each one still owns
    a private workspace.
    """
    config = config or GeneratorConfig()
    invoker = GeneratorInvoker(config)
    bootstrapper = ApplicationBootstrapper(config, invoker.renderer)
    workspaces = TempWorkspace(config.workspace_root, keep=config.keep_workspaces)
    scenarios = list(registry)

    def _run(scenario: Scenario) -> ScenarioResult:
        return run_scenario(
            scenario, invoker=invoker, bootstrapper=bootstrapper, workspaces=workspaces
        )

    if parallel:
        with ThreadPoolExecutor(max_workers=max_workers) as pool:
            results = list(pool.map(_run, scenarios))
    else:
        results = [_run(scenario) for scenario in scenarios]

    return RunSummary(results=results)
