"""Project context detection.

Sub-generators read the directory they run in to decide which namespace to
use: a ``project.json`` (or ``*.csproj``) descriptor marks the directory as a
project whose name is the namespace.  Without a descriptor the configured
default namespace is used.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path

from ..errors import GeneratorPreconditionError
from ..utils import sanitize_namespace

PROJECT_DESCRIPTOR = "project.json"


@dataclass(frozen=True)
class ProjectContext:
    """What a generator knows about the directory it scaffolds into."""

    root: Path
    namespace: str
    descriptor: Path | None = None

    @property
    def has_project(self) -> bool:
        return self.descriptor is not None


def find_descriptor(cwd: Path) -> Path | None:
    """Return the project descriptor in *cwd*, preferring ``project.json``."""
    candidate = cwd / PROJECT_DESCRIPTOR
    if candidate.is_file():
        return candidate
    csproj = sorted(cwd.glob("*.csproj"))
    return csproj[0] if csproj else None


def detect_project(cwd: Path, default_namespace: str, generator: str = "context") -> ProjectContext:
    """Inspect *cwd* and build the :class:`ProjectContext` for a generator.

    Raises:
        GeneratorPreconditionError: If *cwd* is not a directory or its
            ``project.json`` is not a UTF-8 encoded JSON object.
    """
    root = Path(cwd)
    if not root.is_dir():
        raise GeneratorPreconditionError(generator, f"working directory does not exist: {root}")

    descriptor = find_descriptor(root)
    if descriptor is None:
        return ProjectContext(root=root.resolve(), namespace=default_namespace)

    if descriptor.name == PROJECT_DESCRIPTOR:
        try:
            data = json.loads(descriptor.read_text(encoding="utf-8"))
        except json.JSONDecodeError as exc:
            raise GeneratorPreconditionError(
                generator, f"{descriptor} is not valid JSON: {exc.msg}"
            ) from exc
        except UnicodeDecodeError as exc:
            raise GeneratorPreconditionError(
                generator, f"{descriptor} is not valid UTF-8: {exc.reason}"
            ) from exc
        if not isinstance(data, dict):
            raise GeneratorPreconditionError(generator, f"{descriptor} must contain a JSON object")
        project_name = root.resolve().name
    else:
        project_name = descriptor.stem

    namespace = sanitize_namespace(project_name) or default_namespace
    return ProjectContext(root=root.resolve(), namespace=namespace, descriptor=descriptor)
