"""ASP.NET sub-generators and application skeletons.

Quick usage::

    from aspnet_gen.generators import TemplateRenderer, create_generator

    generator = create_generator("dockerfile", TemplateRenderer())
    paths = await generator.generate(["--sqlite"], cwd="/tmp/project")
"""

from aspnet_gen.generators.app import (
    APPLICATION_KINDS,
    ApplicationGenerator,
    ApplicationKind,
    application_kind_names,
    resolve_kind,
)
from aspnet_gen.generators.base import Generator, ParsedArgs, TemplateGenerator
from aspnet_gen.generators.context import ProjectContext, detect_project
from aspnet_gen.generators.docker_gen import DockerGenerator
from aspnet_gen.generators.registry import GENERATORS, create_generator, generator_names
from aspnet_gen.generators.templates import TemplateRenderer

__all__ = [
    "APPLICATION_KINDS",
    "ApplicationGenerator",
    "ApplicationKind",
    "DockerGenerator",
    "GENERATORS",
    "Generator",
    "ParsedArgs",
    "ProjectContext",
    "TemplateGenerator",
    "TemplateRenderer",
    "application_kind_names",
    "create_generator",
    "detect_project",
    "generator_names",
    "resolve_kind",
]
