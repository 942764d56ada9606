"""Sub-generators that require a name argument.

The name comes from the first positional argument, or from the ``name``
answer when no argument is given.  A trailing file extension matching the
generator's own is stripped, so ``MyClass`` and ``MyClass.cs`` both produce
``MyClass.cs`` declaring ``MyClass``.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, ClassVar

from ..errors import GeneratorPreconditionError
from ..utils import is_identifier, strip_extension
from .base import Generator, ParsedArgs
from .context import ProjectContext


class NamedGenerator(Generator):
    """Renders one template into ``<name><extension>``."""

    template: ClassVar[str] = ""
    extension: ClassVar[str] = ""
    requires_identifier: ClassVar[bool] = True
    max_positionals = 1

    def resolve_name(self, parsed: ParsedArgs) -> str:
        raw = parsed.positionals[0] if parsed.positionals else parsed.answers.get("name", "")
        name = strip_extension(raw.strip(), self.extension)
        if not name:
            raise GeneratorPreconditionError(
                self.name, "a name argument is required (e.g. MyClass)"
            )
        if "/" in name or "\\" in name:
            raise GeneratorPreconditionError(self.name, f"name must not contain a path: {raw!r}")
        if self.requires_identifier and not is_identifier(name):
            raise GeneratorPreconditionError(self.name, f"{name!r} is not a valid identifier")
        return name

    def build_context(self, project: ProjectContext, parsed: ParsedArgs) -> dict[str, Any]:
        context = super().build_context(project, parsed)
        context["class_name"] = self.resolve_name(parsed)
        return context

    async def write(
        self, root: Path, context: dict[str, Any], parsed: ParsedArgs
    ) -> list[Path]:
        target = root / f"{context['class_name']}{self.extension}"
        return [await self.renderer.render_to_file(self.template, target, context)]


class ClassGenerator(NamedGenerator):
    name = "class"
    description = "C# class"
    template = "class/Class.cs.j2"
    extension = ".cs"


class InterfaceGenerator(NamedGenerator):
    name = "interface"
    description = "C# interface"
    template = "interface/Interface.cs.j2"
    extension = ".cs"


class MiddlewareGenerator(NamedGenerator):
    name = "middleware"
    description = "ASP.NET middleware class with Use<Name> extension"
    template = "middleware/Middleware.cs.j2"
    extension = ".cs"


class JsonGenerator(NamedGenerator):
    name = "json"
    description = "empty JSON file"
    template = "json/file.json.j2"
    extension = ".json"
    requires_identifier = False


class JsxGenerator(NamedGenerator):
    name = "jsx"
    description = "React JSX component"
    template = "jsx/file.jsx.j2"
    extension = ".jsx"
    requires_identifier = False


class MvcControllerGenerator(NamedGenerator):
    name = "mvccontroller"
    description = "MVC controller"
    template = "mvccontroller/Controller.cs.j2"
    extension = ".cs"


class MvcViewGenerator(NamedGenerator):
    name = "mvcview"
    description = "Razor view"
    template = "mvcview/View.cshtml.j2"
    extension = ".cshtml"
    requires_identifier = False


class TagHelperGenerator(NamedGenerator):
    name = "taghelper"
    description = "Razor tag helper"
    template = "taghelper/TagHelper.cs.j2"
    extension = ".cs"


class WebApiControllerGenerator(NamedGenerator):
    name = "webapicontroller"
    description = "Web API controller"
    template = "webapicontroller/ApiController.cs.j2"
    extension = ".cs"
