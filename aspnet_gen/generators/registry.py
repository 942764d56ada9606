"""Name -> generator class lookup."""

from __future__ import annotations

from ..config import GeneratorConfig
from ..errors import UnknownGeneratorError
from .base import Generator
from .named import (
    ClassGenerator,
    InterfaceGenerator,
    JsonGenerator,
    JsxGenerator,
    MiddlewareGenerator,
    MvcControllerGenerator,
    MvcViewGenerator,
    TagHelperGenerator,
    WebApiControllerGenerator,
)
from .simple import (
    AppSettingsGenerator,
    DockerfileGenerator,
    GitignoreGenerator,
    NugetConfigGenerator,
    ProgramGenerator,
    ReadmeGenerator,
    StartupGenerator,
    WebConfigGenerator,
)
from .templates import TemplateRenderer

GENERATORS: dict[str, type[Generator]] = {
    cls.name: cls
    for cls in (
        ProgramGenerator,
        AppSettingsGenerator,
        StartupGenerator,
        GitignoreGenerator,
        DockerfileGenerator,
        NugetConfigGenerator,
        ReadmeGenerator,
        WebConfigGenerator,
        ClassGenerator,
        InterfaceGenerator,
        MiddlewareGenerator,
        JsonGenerator,
        JsxGenerator,
        MvcControllerGenerator,
        MvcViewGenerator,
        TagHelperGenerator,
        WebApiControllerGenerator,
    )
}


def generator_names() -> list[str]:
    return sorted(GENERATORS)


def create_generator(
    name: str,
    renderer: TemplateRenderer,
    config: GeneratorConfig | None = None,
) -> Generator:
    """Instantiate the generator registered as *name*.

    Raises:
        UnknownGeneratorError: If *name* is not registered.
    """
    try:
        cls = GENERATORS[name]
    except KeyError:
        raise UnknownGeneratorError(name, GENERATORS) from None
    return cls(renderer, config)
