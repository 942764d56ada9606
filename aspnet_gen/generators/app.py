"""Application skeleton generation.

Takes an application family (``classlib``, ``web``, ...) and a project name
and renders a complete project directory.  Each family is a template tree
under ``app/<family>/`` plus a list of sub-generator templates it shares with
the stand-alone generators (Program.cs, Startup.cs, Dockerfiles, ...).
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

from ..config import GeneratorConfig
from ..utils import sanitize_namespace
from .docker_gen import DockerGenerator
from .templates import TemplateRenderer


@dataclass(frozen=True)
class ApplicationKind:
    """One application family."""

    name: str
    description: str
    app_type: str
    shared: tuple[tuple[str, str], ...] = ()
    docker: bool = False


_WEB_SHARED: tuple[tuple[str, str], ...] = (
    ("program/Program.cs.j2", "Program.cs"),
    ("startup/Startup.cs.j2", "Startup.cs"),
    ("appsettings/appsettings.json.j2", "appsettings.json"),
    ("gitignore/dot_gitignore.j2", ".gitignore"),
    ("readme/README.j2", "README.md"),
    ("webconfig/web.config.j2", "web.config"),
)

APPLICATION_KINDS: dict[str, ApplicationKind] = {
    "empty": ApplicationKind(
        name="empty",
        description="Empty web application",
        app_type="empty",
        shared=(
            ("program/Program.cs.j2", "Program.cs"),
            ("startup/Startup.cs.j2", "Startup.cs"),
            ("gitignore/dot_gitignore.j2", ".gitignore"),
            ("readme/README.j2", "README.md"),
            ("webconfig/web.config.j2", "web.config"),
        ),
        docker=True,
    ),
    "console": ApplicationKind(
        name="console",
        description="Console application",
        app_type="console",
        shared=(("gitignore/dot_gitignore.j2", ".gitignore"),),
    ),
    "classlib": ApplicationKind(
        name="classlib",
        description="Class library",
        app_type="classlib",
        shared=(("gitignore/dot_gitignore.j2", ".gitignore"),),
    ),
    "web": ApplicationKind(
        name="web",
        description="Web application (MVC)",
        app_type="mvc",
        shared=_WEB_SHARED,
        docker=True,
    ),
    "webapi": ApplicationKind(
        name="webapi",
        description="Web API application",
        app_type="webapi",
        shared=_WEB_SHARED,
        docker=True,
    ),
}

KIND_ALIASES: dict[str, str] = {"mvc": "web"}


def resolve_kind(kind: str) -> ApplicationKind | None:
    """Return the :class:`ApplicationKind` for *kind* (aliases included)."""
    key = kind.strip().lower()
    return APPLICATION_KINDS.get(KIND_ALIASES.get(key, key))


def application_kind_names() -> list[str]:
    """All accepted family names, aliases included."""
    return sorted([*APPLICATION_KINDS, *KIND_ALIASES])


class ApplicationGenerator:
    """Renders an application family into ``<output_dir>/<name>``."""

    def __init__(self, renderer: TemplateRenderer, config: GeneratorConfig | None = None) -> None:
        self.renderer = renderer
        self.config = config or GeneratorConfig()
        self.docker_gen = DockerGenerator(renderer)

    def build_context(self, kind: ApplicationKind, name: str) -> dict[str, Any]:
        return {
            **self.config.template_context(),
            "project_name": name,
            "root_namespace": sanitize_namespace(name) or self.config.default_namespace,
            "has_project": True,
            "app_type": kind.app_type,
            "sqlite": False,
        }

    async def generate(self, kind: ApplicationKind, name: str, output_dir: str | Path) -> Path:
        """Generate the application and return the project root.

        Args:
            kind: The application family to render.
            name: Project name; also the directory name and namespace.
            output_dir: Parent directory; ``<output_dir>/<name>`` is created.
        """
        project_root = Path(output_dir) / name
        context = self.build_context(kind, name)

        # 1. Family-specific tree (project.json, controllers, views, ...)
        await self.renderer.render_tree(f"app/{kind.name}", project_root, context)

        # 2. Templates shared with the stand-alone sub-generators
        for template_name, filename in kind.shared:
            await self.renderer.render_to_file(template_name, project_root / filename, context)

        # 3. Dockerfiles
        if kind.docker:
            await self.docker_gen.generate_all(project_root, context)

        return project_root
