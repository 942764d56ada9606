"""Application bootstrapping: seed a workspace with a project skeleton."""

from __future__ import annotations

import re
from pathlib import Path

from ..config import GeneratorConfig
from ..errors import BootstrapError
from ..generators.app import ApplicationGenerator, application_kind_names, resolve_kind
from ..generators.templates import TemplateRenderer
from .invoker import run_sync

_PROJECT_NAME = re.compile(r"^[A-Za-z0-9_][A-Za-z0-9_.-]*$")


class ApplicationBootstrapper:
    """Creates ``<cwd>/<name>`` from an application family.

    :meth:`bootstrap_application` returns only after every file is written,
    so a generator invoked afterwards in the same directory sees the
    complete project.
    """

    def __init__(
        self,
        config: GeneratorConfig | None = None,
        renderer: TemplateRenderer | None = None,
    ) -> None:
        self.config = config or GeneratorConfig()
        self.renderer = renderer or TemplateRenderer(self.config.template_dir)
        self.app_gen = ApplicationGenerator(self.renderer, self.config)

    async def abootstrap_application(self, kind: str, name: str, cwd: str | Path) -> Path:
        """Awaitable form of :meth:`bootstrap_application`."""
        app_kind = resolve_kind(kind)
        if app_kind is None:
            raise BootstrapError(
                kind, f"unknown application type (known: {', '.join(application_kind_names())})"
            )
        if not _PROJECT_NAME.match(name):
            raise BootstrapError(kind, f"invalid project name {name!r}")

        parent = Path(cwd)
        if not parent.is_dir():
            raise BootstrapError(kind, f"target directory does not exist: {parent}")

        try:
            return await self.app_gen.generate(app_kind, name, parent)
        except OSError as exc:
            raise BootstrapError(kind, f"cannot write to {parent / name}: {exc}") from exc

    def bootstrap_application(self, kind: str, name: str, cwd: str | Path) -> Path:
        """Render application family *kind* named *name* into *cwd*.

        Returns:
            The project directory ``<cwd>/<name>``.

        Raises:
            BootstrapError: Unknown family, invalid name, or unwritable target.
        """
        return run_sync(self.abootstrap_application(kind, name, cwd))
