"""Shared pytest fixtures for the aspnet-gen test suite.

Provides reusable fixtures for:
- Configuration and the real Jinja2 renderer
- A mocked renderer that records render_to_file calls
- Invoker, bootstrapper and workspace allocator wired to the same config
- A bootstrapped class-library project
"""

from __future__ import annotations

from pathlib import Path
from unittest.mock import AsyncMock, MagicMock

import pytest

from aspnet_gen.config import GeneratorConfig
from aspnet_gen.generators.templates import TemplateRenderer
from aspnet_gen.harness.bootstrap import ApplicationBootstrapper
from aspnet_gen.harness.invoker import GeneratorInvoker
from aspnet_gen.harness.workspace import TempWorkspace


# ---------------------------------------------------------------------------
# Configuration & rendering
# ---------------------------------------------------------------------------

@pytest.fixture
def config() -> GeneratorConfig:
    """Default configuration (MyNamespace, SDK 1.1.0)."""
    return GeneratorConfig()


@pytest.fixture
def renderer() -> TemplateRenderer:
    """The real renderer over the bundled templates."""
    return TemplateRenderer()


@pytest.fixture
def mock_renderer() -> MagicMock:
    """A mock TemplateRenderer that tracks render_to_file calls."""
    renderer = MagicMock(spec=TemplateRenderer)

    async def mock_render_to_file(template_path: str, output_path, context):
        out = Path(output_path)
        out.parent.mkdir(parents=True, exist_ok=True)
        out.write_text(f"# Rendered from {template_path}\n", encoding="utf-8")
        return out

    renderer.render_to_file = AsyncMock(side_effect=mock_render_to_file)
    return renderer


@pytest.fixture
def base_context(config: GeneratorConfig) -> dict:
    """Template context as a sub-generator builds it outside any project."""
    return {
        **config.template_context(),
        "root_namespace": "MyNamespace",
        "has_project": False,
        "app_type": "empty",
    }


# ---------------------------------------------------------------------------
# Harness components
# ---------------------------------------------------------------------------

@pytest.fixture
def invoker(config: GeneratorConfig, renderer: TemplateRenderer) -> GeneratorInvoker:
    return GeneratorInvoker(config, renderer)


@pytest.fixture
def bootstrapper(config: GeneratorConfig, renderer: TemplateRenderer) -> ApplicationBootstrapper:
    return ApplicationBootstrapper(config, renderer)


@pytest.fixture
def workspaces(tmp_path: Path) -> TempWorkspace:
    """Workspace allocator rooted in pytest's tmp_path (auto-cleanup)."""
    return TempWorkspace(tmp_path / "workspaces")


@pytest.fixture
def workspace(workspaces: TempWorkspace) -> Path:
    """One fresh, empty workspace."""
    return workspaces.create()


@pytest.fixture
def classlib_project(bootstrapper: ApplicationBootstrapper, workspace: Path) -> Path:
    """A bootstrapped ``classlib`` project named ``emptyTest``."""
    return bootstrapper.bootstrap_application("classlib", "emptyTest", workspace)
