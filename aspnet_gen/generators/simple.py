"""Sub-generators that take no name argument."""

from __future__ import annotations

from pathlib import Path
from typing import Any, ClassVar

from .base import Generator, ParsedArgs, TemplateGenerator
from .docker_gen import DockerGenerator


class ProgramGenerator(TemplateGenerator):
    name = "program"
    description = "Program.cs web host entry point"
    outputs = (("program/Program.cs.j2", "Program.cs"),)


class AppSettingsGenerator(TemplateGenerator):
    name = "appsettings"
    description = "appsettings.json configuration file"
    outputs = (("appsettings/appsettings.json.j2", "appsettings.json"),)


class StartupGenerator(TemplateGenerator):
    name = "startup"
    description = "Startup.cs request pipeline"
    outputs = (("startup/Startup.cs.j2", "Startup.cs"),)


class GitignoreGenerator(TemplateGenerator):
    name = "gitignore"
    description = ".gitignore for .NET projects"
    outputs = (("gitignore/dot_gitignore.j2", ".gitignore"),)


class NugetConfigGenerator(TemplateGenerator):
    name = "nugetconfig"
    description = "nuget.config package sources"
    outputs = (("nugetconfig/nuget.config.j2", "nuget.config"),)


class WebConfigGenerator(TemplateGenerator):
    name = "webconfig"
    description = "web.config for IIS hosting"
    outputs = (("webconfig/web.config.j2", "web.config"),)


class ReadmeGenerator(TemplateGenerator):
    """README titled with the project namespace; ``--txt`` writes README.txt."""

    name = "readme"
    description = "README.md (or README.txt with --txt)"
    flags: ClassVar[dict[str, str]] = {"--txt": "txt"}

    def output_files(self, parsed: ParsedArgs) -> tuple[tuple[str, str], ...]:
        filename = "README.txt" if parsed.has("--txt") else "README.md"
        return (("readme/README.j2", filename),)


class DockerfileGenerator(Generator):
    """Linux Dockerfile; ``--sqlite`` installs SQLite and runs EF migrations."""

    name = "dockerfile"
    description = "Dockerfile (--sqlite adds SQLite and EF migrations)"
    flags: ClassVar[dict[str, str]] = {"--sqlite": "sqlite"}

    async def write(
        self, root: Path, context: dict[str, Any], parsed: ParsedArgs
    ) -> list[Path]:
        docker_gen = DockerGenerator(self.renderer)
        return [await docker_gen.generate_dockerfile(root, context)]
