"""Tests for the Jinja2 TemplateRenderer.

Covers:
- Rendering bundled templates
- Strict undefined handling
- render_to_file / render_tree output paths
- dotfile name mapping
- Custom filters
"""

from __future__ import annotations

from pathlib import Path

import pytest
from jinja2 import TemplateNotFound, UndefinedError

from aspnet_gen.generators.templates import TemplateRenderer, output_name


pytestmark = pytest.mark.unit


@pytest.fixture
def custom_templates(tmp_path: Path) -> Path:
    root = tmp_path / "templates"
    (root / "tree" / "sub").mkdir(parents=True)
    (root / "tree" / "a.txt.j2").write_text("A={{ value }}\n", encoding="utf-8")
    (root / "tree" / "sub" / "b.txt.j2").write_text("B={{ value|upper }}\n", encoding="utf-8")
    (root / "tree" / "dot_hidden.j2").write_text("hidden\n", encoding="utf-8")
    (root / "tree" / "notes.md").write_text("not a template\n", encoding="utf-8")
    return root


def _filter(renderer: TemplateRenderer, name: str, value: str) -> str:
    return renderer.env.from_string(f"{{{{ v|{name} }}}}").render(v=value)


class TestRender:
    def test_renders_bundled_template(self, renderer, base_context):
        text = renderer.render("program/Program.cs.j2", base_context)
        assert "namespace MyNamespace" in text
        assert "public class Program" in text

    def test_keeps_trailing_newline(self, renderer, base_context):
        assert renderer.render("program/Program.cs.j2", base_context).endswith("}\n")

    def test_missing_variable_raises(self, renderer):
        with pytest.raises(UndefinedError):
            renderer.render("program/Program.cs.j2", {})

    def test_unknown_template_raises(self, renderer):
        with pytest.raises(TemplateNotFound):
            renderer.render("nope/Nothing.j2", {})

    def test_missing_namespace_is_not_a_jinja_global(self, renderer, base_context):
        context = {k: v for k, v in base_context.items() if k != "root_namespace"}
        with pytest.raises(UndefinedError):
            renderer.render("readme/README.j2", context)

    def test_custom_template_dir(self, custom_templates):
        renderer = TemplateRenderer(custom_templates)
        assert renderer.render("tree/a.txt.j2", {"value": 1}) == "A=1\n"


class TestFilters:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [("my-widget", "MyWidget"), ("my_widget", "MyWidget"), ("file", "File"), ("MyWidget", "MyWidget")],
    )
    def test_pascal_case(self, renderer, value, expected):
        assert _filter(renderer, "pascal_case", value) == expected

    def test_kebab_case(self, renderer):
        assert _filter(renderer, "kebab_case", "CartTagHelper") == "cart-tag-helper"


class TestOutputName:
    @pytest.mark.parametrize(
        ("template", "expected"),
        [
            ("Program.cs.j2", "Program.cs"),
            ("dot_gitignore.j2", ".gitignore"),
            ("Views/Home/Index.cshtml.j2", "Views/Home/Index.cshtml"),
            ("Views/dot_keep.j2", "Views/.keep"),
            ("plain.txt", "plain.txt"),
        ],
    )
    def test_output_name(self, template, expected):
        assert output_name(template) == expected


class TestRenderToFile:
    async def test_writes_and_creates_parents(self, renderer, base_context, tmp_path: Path):
        target = tmp_path / "deep" / "Program.cs"
        path = await renderer.render_to_file("program/Program.cs.j2", target, base_context)
        assert path == target
        assert "namespace MyNamespace" in target.read_text(encoding="utf-8")


class TestRenderTree:
    async def test_preserves_structure(self, custom_templates, tmp_path: Path):
        renderer = TemplateRenderer(custom_templates)
        out = tmp_path / "out"
        written = await renderer.render_tree("tree", out, {"value": "x"})
        assert sorted(p.relative_to(out).as_posix() for p in written) == [
            ".hidden",
            "a.txt",
            "sub/b.txt",
        ]
        assert (out / "sub" / "b.txt").read_text(encoding="utf-8") == "B=X\n"

    async def test_skips_non_templates(self, custom_templates, tmp_path: Path):
        renderer = TemplateRenderer(custom_templates)
        await renderer.render_tree("tree", tmp_path / "out", {"value": "x"})
        assert not (tmp_path / "out" / "notes.md").exists()

    async def test_missing_prefix_returns_empty(self, renderer, tmp_path: Path):
        assert await renderer.render_tree("does-not-exist", tmp_path, {}) == []


class TestListTemplates:
    def test_lists_generator_templates(self, renderer):
        templates = renderer.list_templates()
        assert "program/Program.cs.j2" in templates
        assert "gitignore/dot_gitignore.j2" in templates
        assert "app/web/Controllers/HomeController.cs.j2" in templates

    def test_prefix(self, renderer):
        assert renderer.list_templates("dockerfile") == [
            "dockerfile/Dockerfile.j2",
            "dockerfile/Dockerfile.nano.j2",
        ]

    def test_missing_prefix(self, renderer):
        assert renderer.list_templates("missing") == []
