"""Exception hierarchy for generators and the conformance harness.

Invocation-layer errors (workspace, unknown generator, bootstrap,
preconditions) are fatal to a scenario.  Assertion-layer errors subclass
``AssertionError`` so test runners report them as ordinary failures, and are
collected per expectation by the scenario runner.
"""

from __future__ import annotations

import re
from pathlib import Path
from typing import Iterable


class AspnetGenError(Exception):
    """Base class for generator and harness usage errors."""


class WorkspaceError(AspnetGenError, OSError):
    """Raised when a temporary workspace cannot be allocated."""


class UnknownGeneratorError(AspnetGenError, LookupError):
    """Raised when a generator name is not registered."""

    def __init__(self, name: str, known: Iterable[str] = ()) -> None:
        self.name = name
        self.known = sorted(known)
        message = f"Unknown generator: {name!r}"
        if self.known:
            message += f" (known: {', '.join(self.known)})"
        super().__init__(message)


class GeneratorPreconditionError(AspnetGenError):
    """Raised when a generator's own preconditions are not met."""

    def __init__(self, generator: str, message: str) -> None:
        self.generator = generator
        super().__init__(f"{generator}: {message}")


class BootstrapError(AspnetGenError):
    """Raised when an application skeleton cannot be created."""

    def __init__(self, kind: str, message: str) -> None:
        self.kind = kind
        super().__init__(f"Cannot bootstrap {kind!r} application: {message}")


# ---------------------------------------------------------------------------
# Assertion failures
# ---------------------------------------------------------------------------


def describe_pattern(pattern: str | re.Pattern[str]) -> str:
    """Render a pattern verbatim: literals quoted, regexes as ``/source/``."""
    if isinstance(pattern, re.Pattern):
        return f"/{pattern.pattern}/"
    return repr(pattern)


class ArtifactAssertionError(AssertionError):
    """Base class for generated-artifact assertion failures."""

    def __init__(self, path: Path, message: str) -> None:
        self.path = Path(path)
        super().__init__(message)


class MissingFileError(ArtifactAssertionError):
    """An expected file does not exist."""

    def __init__(self, path: Path) -> None:
        super().__init__(path, f"Expected file is missing: {path}")


class ContentMismatchError(ArtifactAssertionError):
    """A file does not contain an expected pattern."""

    def __init__(self, path: Path, pattern: str | re.Pattern[str], description: str) -> None:
        self.pattern = pattern
        self.description = description
        super().__init__(
            path,
            f"{description}: {path} does not match {describe_pattern(pattern)}",
        )


class UnexpectedContentError(ArtifactAssertionError):
    """A file contains a pattern that must be absent."""

    def __init__(self, path: Path, pattern: str | re.Pattern[str], description: str) -> None:
        self.pattern = pattern
        self.description = description
        super().__init__(
            path,
            f"{description}: {path} unexpectedly matches {describe_pattern(pattern)}",
        )
