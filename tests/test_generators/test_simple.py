"""Tests for the no-argument sub-generators."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from aspnet_gen.config import GeneratorConfig
from aspnet_gen.errors import GeneratorPreconditionError
from aspnet_gen.generators.simple import (
    AppSettingsGenerator,
    DockerfileGenerator,
    GitignoreGenerator,
    NugetConfigGenerator,
    ProgramGenerator,
    ReadmeGenerator,
    StartupGenerator,
    WebConfigGenerator,
)


pytestmark = pytest.mark.unit


def _read(path: Path) -> str:
    return path.read_text(encoding="utf-8")


# ---------------------------------------------------------------------------
# Output files
# ---------------------------------------------------------------------------


class TestOutputs:
    @pytest.mark.parametrize(
        ("cls", "filename"),
        [
            (ProgramGenerator, "Program.cs"),
            (AppSettingsGenerator, "appsettings.json"),
            (StartupGenerator, "Startup.cs"),
            (GitignoreGenerator, ".gitignore"),
            (NugetConfigGenerator, "nuget.config"),
            (WebConfigGenerator, "web.config"),
            (ReadmeGenerator, "README.md"),
            (DockerfileGenerator, "Dockerfile"),
        ],
    )
    async def test_writes_single_file_into_cwd(self, cls, filename, renderer, config, tmp_path):
        written = await cls(renderer, config).generate([], cwd=tmp_path)
        assert written == [tmp_path.resolve() / filename]
        assert written[0].is_file()

    async def test_uses_mock_renderer(self, mock_renderer, config, tmp_path):
        await ProgramGenerator(mock_renderer, config).generate([], cwd=tmp_path)
        call = mock_renderer.render_to_file.call_args
        assert call.args[0] == "program/Program.cs.j2"
        assert call.args[2]["root_namespace"] == "MyNamespace"


class TestArguments:
    async def test_unknown_flag_rejected(self, renderer, config, tmp_path):
        with pytest.raises(GeneratorPreconditionError, match="unknown option '--bogus'"):
            await ProgramGenerator(renderer, config).generate(["--bogus"], cwd=tmp_path)

    async def test_positional_rejected(self, renderer, config, tmp_path):
        with pytest.raises(GeneratorPreconditionError, match="unexpected arguments: extra"):
            await StartupGenerator(renderer, config).generate(["extra"], cwd=tmp_path)

    async def test_missing_cwd(self, renderer, config, tmp_path):
        with pytest.raises(GeneratorPreconditionError):
            await ProgramGenerator(renderer, config).generate([], cwd=tmp_path / "missing")

    async def test_nothing_written_on_error(self, renderer, config, tmp_path):
        with pytest.raises(GeneratorPreconditionError):
            await ProgramGenerator(renderer, config).generate(["--bogus"], cwd=tmp_path)
        assert list(tmp_path.iterdir()) == []


# ---------------------------------------------------------------------------
# Content
# ---------------------------------------------------------------------------


class TestProgramAndStartup:
    async def test_program_namespace(self, renderer, config, tmp_path):
        [path] = await ProgramGenerator(renderer, config).generate([], cwd=tmp_path)
        assert "namespace MyNamespace" in _read(path)

    async def test_startup_default_pipeline(self, renderer, config, tmp_path):
        [path] = await StartupGenerator(renderer, config).generate([], cwd=tmp_path)
        text = _read(path)
        assert "namespace MyNamespace" in text
        assert "Hello World!" in text
        assert "services.AddMvc();" not in text

    async def test_startup_namespace_from_project(self, renderer, config, classlib_project):
        [path] = await StartupGenerator(renderer, config).generate([], cwd=classlib_project)
        assert path.parent == classlib_project.resolve()
        assert "namespace emptyTest" in _read(path)

    async def test_custom_default_namespace(self, renderer, tmp_path):
        config = GeneratorConfig(default_namespace="Contoso")
        [path] = await ProgramGenerator(renderer, config).generate([], cwd=tmp_path)
        assert "namespace Contoso" in _read(path)


class TestReadme:
    async def test_markdown_by_default(self, renderer, config, tmp_path):
        [path] = await ReadmeGenerator(renderer, config).generate([], cwd=tmp_path)
        assert path.name == "README.md"
        assert _read(path).splitlines()[0] == "# MyNamespace"

    async def test_txt_flag(self, renderer, config, tmp_path):
        [path] = await ReadmeGenerator(renderer, config).generate(["--txt"], cwd=tmp_path)
        assert path.name == "README.txt"
        assert not (tmp_path / "README.md").exists()
        assert _read(path).splitlines()[0] == "# MyNamespace"

    async def test_title_from_project(self, renderer, config, classlib_project):
        [path] = await ReadmeGenerator(renderer, config).generate(["--txt"], cwd=classlib_project)
        assert _read(path).splitlines()[0] == "# emptyTest"


class TestDockerfile:
    async def test_without_sqlite(self, renderer, config, tmp_path):
        [path] = await DockerfileGenerator(renderer, config).generate([], cwd=tmp_path)
        text = _read(path)
        assert "FROM microsoft/dotnet:1.1.0-sdk-projectjson" in text
        assert "sqlite3" not in text
        assert '"ef"' not in text

    async def test_with_sqlite(self, renderer, config, tmp_path):
        [path] = await DockerfileGenerator(renderer, config).generate(["--sqlite"], cwd=tmp_path)
        text = _read(path)
        assert "RUN apt-get update && apt-get install -y sqlite3 libsqlite3-dev" in text
        assert 'RUN ["dotnet", "ef", "database", "update"]' in text

    async def test_only_linux_dockerfile(self, renderer, config, tmp_path):
        await DockerfileGenerator(renderer, config).generate([], cwd=tmp_path)
        assert not (tmp_path / "Dockerfile.nano").exists()


class TestStaticFiles:
    async def test_appsettings_is_json(self, renderer, config, tmp_path):
        [path] = await AppSettingsGenerator(renderer, config).generate([], cwd=tmp_path)
        assert "Logging" in json.loads(_read(path))

    async def test_gitignore(self, renderer, config, tmp_path):
        [path] = await GitignoreGenerator(renderer, config).generate([], cwd=tmp_path)
        assert "[Bb]in/" in _read(path)

    async def test_nuget_config(self, renderer, config, tmp_path):
        [path] = await NugetConfigGenerator(renderer, config).generate([], cwd=tmp_path)
        assert "https://api.nuget.org/v3/index.json" in _read(path)

    async def test_web_config(self, renderer, config, tmp_path):
        [path] = await WebConfigGenerator(renderer, config).generate([], cwd=tmp_path)
        assert "AspNetCoreModule" in _read(path)

    async def test_regeneration_overwrites(self, renderer, config, tmp_path):
        (tmp_path / "web.config").write_text("stale", encoding="utf-8")
        await WebConfigGenerator(renderer, config).generate([], cwd=tmp_path)
        assert "stale" not in _read(tmp_path / "web.config")
