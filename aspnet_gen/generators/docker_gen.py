"""Dockerfile generation for Linux and Nano Server images.

Uses the Jinja2 templates under ``dockerfile/`` to produce Dockerfiles whose
base image tag tracks the configured .NET SDK version, so a generated
``project.json`` and its Dockerfiles always agree on the runtime.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from .templates import TemplateRenderer


class DockerGenerator:
    """Generates ``Dockerfile`` and ``Dockerfile.nano``."""

    # Template name -> output file name
    _DOCKERFILES: dict[str, str] = {
        "dockerfile/Dockerfile.j2": "Dockerfile",
        "dockerfile/Dockerfile.nano.j2": "Dockerfile.nano",
    }

    def __init__(self, renderer: TemplateRenderer) -> None:
        self.renderer = renderer

    async def generate_dockerfile(
        self,
        output_dir: Path,
        context: dict[str, Any],
    ) -> Path:
        """Generate the Linux ``Dockerfile``.

        Args:
            output_dir: Project root directory where the Dockerfile goes.
            context: Template rendering context.  ``sqlite`` adds the SQLite
                packages and an ``ef database update`` step.

        Returns:
            Path to the written Dockerfile.
        """
        return await self.renderer.render_to_file(
            "dockerfile/Dockerfile.j2", output_dir / "Dockerfile", context
        )

    async def generate_all(
        self,
        output_dir: Path,
        context: dict[str, Any],
    ) -> dict[str, Path]:
        """Generate every Dockerfile variant to *output_dir*.

        Returns:
            Mapping of platform to written file path, e.g.
            ``{"linux": Path(".../Dockerfile"), "nanoserver": ...}``.
        """
        result: dict[str, Path] = {}

        label_map = {
            "dockerfile/Dockerfile.j2": "linux",
            "dockerfile/Dockerfile.nano.j2": "nanoserver",
        }

        for template_name, output_name in self._DOCKERFILES.items():
            path = await self.renderer.render_to_file(
                template_name, output_dir / output_name, context
            )
            result[label_map[template_name]] = path

        return result
