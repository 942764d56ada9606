"""Generator conformance harness.

Drives a named generator in an isolated workspace and asserts on the files it
writes, treating generated code as opaque text.

Quick usage::

    from aspnet_gen.harness import build_default_registry, run_registry

    summary = run_registry(build_default_registry(), parallel=True)
    assert summary.all_passed
"""

from aspnet_gen.harness.assertions import (
    assert_content_excludes,
    assert_content_matches,
    assert_file_exists,
)
from aspnet_gen.harness.bootstrap import ApplicationBootstrapper
from aspnet_gen.harness.catalog import build_default_registry
from aspnet_gen.harness.invoker import GeneratorInvoker
from aspnet_gen.harness.results import (
    ExpectationFailure,
    RunSummary,
    ScenarioResult,
    ScenarioStatus,
    print_run_summary,
)
from aspnet_gen.harness.scenario import (
    BootstrapStep,
    ContentExcludes,
    ContentMatches,
    FileExists,
    Scenario,
    ScenarioRegistry,
    run_registry,
    run_scenario,
)
from aspnet_gen.harness.workspace import TempWorkspace

__all__ = [
    "ApplicationBootstrapper",
    "BootstrapStep",
    "ContentExcludes",
    "ContentMatches",
    "ExpectationFailure",
    "FileExists",
    "GeneratorInvoker",
    "RunSummary",
    "Scenario",
    "ScenarioRegistry",
    "ScenarioResult",
    "ScenarioStatus",
    "TempWorkspace",
    "assert_content_excludes",
    "assert_content_matches",
    "assert_file_exists",
    "build_default_registry",
    "print_run_summary",
    "run_registry",
    "run_scenario",
]
