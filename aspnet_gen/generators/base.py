"""Generator base classes.

A generator is a named template set.  :meth:`Generator.generate` parses the
forwarded arguments, detects the project context in the working directory,
builds the template context and writes the files, returning only once every
file is on disk.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, ClassVar, Mapping, Sequence

from ..config import GeneratorConfig
from ..errors import GeneratorPreconditionError
from .context import ProjectContext, detect_project
from .templates import TemplateRenderer


@dataclass(frozen=True)
class ParsedArgs:
    """Arguments split into recognised flags and positional tokens."""

    flags: frozenset[str] = frozenset()
    positionals: tuple[str, ...] = ()
    answers: Mapping[str, str] = field(default_factory=dict)

    def has(self, flag: str) -> bool:
        return flag in self.flags


class Generator:
    """Base class for every sub-generator.

    Subclasses set :attr:`name`, optionally declare the ``--flags`` they
    accept in :attr:`flags` and implement :meth:`write`.
    """

    name: ClassVar[str] = ""
    description: ClassVar[str] = ""
    flags: ClassVar[dict[str, str]] = {}
    max_positionals: ClassVar[int] = 0

    def __init__(self, renderer: TemplateRenderer, config: GeneratorConfig | None = None) -> None:
        self.renderer = renderer
        self.config = config or GeneratorConfig()

    # -- Public API --------------------------------------------------------

    async def generate(
        self,
        args: Sequence[str] = (),
        cwd: str | Path = ".",
        answers: Mapping[str, str] | None = None,
    ) -> list[Path]:
        """Run the generator into *cwd* and return the written paths."""
        parsed = self.parse_args(args, answers)
        project = detect_project(Path(cwd), self.config.default_namespace, self.name)
        context = self.build_context(project, parsed)
        try:
            return await self.write(project.root, context, parsed)
        except OSError as exc:
            raise GeneratorPreconditionError(
                self.name, f"cannot write to {project.root}: {exc}"
            ) from exc

    def parse_args(
        self, args: Sequence[str], answers: Mapping[str, str] | None = None
    ) -> ParsedArgs:
        """Split *args* into flags and positionals, rejecting unknown flags."""
        flags: set[str] = set()
        positionals: list[str] = []
        for token in args:
            if token.startswith("--"):
                if token not in self.flags:
                    raise GeneratorPreconditionError(self.name, f"unknown option {token!r}")
                flags.add(token)
            else:
                positionals.append(token)

        if len(positionals) > self.max_positionals:
            extra = " ".join(positionals[self.max_positionals:])
            raise GeneratorPreconditionError(self.name, f"unexpected arguments: {extra}")

        return ParsedArgs(
            flags=frozenset(flags),
            positionals=tuple(positionals),
            answers=dict(answers or {}),
        )

    def build_context(self, project: ProjectContext, parsed: ParsedArgs) -> dict[str, Any]:
        """Return the template context shared by all of this generator's files."""
        context: dict[str, Any] = {
            **self.config.template_context(),
            "root_namespace": project.namespace,
            "has_project": project.has_project,
            "app_type": "empty",
        }
        for flag, key in self.flags.items():
            context[key] = parsed.has(flag)
        return context

    async def write(
        self, root: Path, context: dict[str, Any], parsed: ParsedArgs
    ) -> list[Path]:
        raise NotImplementedError


class TemplateGenerator(Generator):
    """Generator that renders a fixed list of ``(template, output)`` pairs."""

    outputs: ClassVar[tuple[tuple[str, str], ...]] = ()

    def output_files(self, parsed: ParsedArgs) -> tuple[tuple[str, str], ...]:
        return self.outputs

    async def write(
        self, root: Path, context: dict[str, Any], parsed: ParsedArgs
    ) -> list[Path]:
        written: list[Path] = []
        for template_name, filename in self.output_files(parsed):
            path = await self.renderer.render_to_file(template_name, root / filename, context)
            written.append(path)
        return written
