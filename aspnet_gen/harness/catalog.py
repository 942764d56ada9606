"""Built-in scenario catalog.

Declares the contract of every sub-generator as independent scenarios.
Variants that look alike (with and without extension, inside a bootstrapped
project) are separate contract checks and stay separate entries.

Scenarios asserting a namespace inferred from the working directory are
registered as pending: whether that inference or the expectation is at fault
is still open, so they document the intended behaviour without running.
"""

from __future__ import annotations

import re

from ..config import GeneratorConfig
from .scenario import (
    BootstrapStep,
    ContentExcludes,
    ContentMatches,
    FileExists,
    Scenario,
    ScenarioRegistry,
)

PROJECT_NAME_INFERENCE = (
    "project-name inference from the working directory is unreliable; "
    "kept to document the intended behaviour"
)

SQLITE_INSTALL = "RUN apt-get update && apt-get install -y sqlite3 libsqlite3-dev"
EF_MIGRATIONS = 'RUN ["dotnet", "ef", "database", "update"]'

_CLASSLIB = BootstrapStep("classlib", "emptyTest")
_MVC = BootstrapStep("mvc", "webTest")


def _line(text: str) -> re.Pattern[str]:
    """Pattern matching *text* as a whole line."""
    return re.compile(rf"^{re.escape(text)}$", re.MULTILINE)


def _without_arguments(config: GeneratorConfig) -> list[Scenario]:
    title = _line(f"# {config.default_namespace}")
    image = re.compile(rf"FROM {re.escape(config.docker_image)}:")
    sdk = re.escape(config.sdk_version)

    return [
        Scenario("aspnet:program", "program", expectations=[FileExists("Program.cs")]),
        Scenario(
            "aspnet:appsettings", "appsettings", expectations=[FileExists("appsettings.json")]
        ),
        Scenario("aspnet:startup", "startup", expectations=[FileExists("Startup.cs")]),
        Scenario(
            "aspnet:startup in cwd of project.json",
            "startup",
            bootstrap=_CLASSLIB,
            expectations=[
                FileExists("Startup.cs"),
                ContentMatches("Startup.cs", _line("namespace emptyTest")),
            ],
            skip_reason=PROJECT_NAME_INFERENCE,
        ),
        Scenario("aspnet:gitignore", "gitignore", expectations=[FileExists(".gitignore")]),
        Scenario(
            "aspnet:dockerfile has the same .NET version",
            "mvccontroller",
            args=["file"],
            bootstrap=_MVC,
            expectations=[
                ContentMatches(
                    "project.json",
                    re.compile(rf'"Microsoft.NETCore.App":\s*{{\s*"version": "{sdk}"'),
                ),
                ContentMatches(
                    "Dockerfile",
                    re.compile(rf"FROM {re.escape(config.docker_image)}:{sdk}-sdk-projectjson\b"),
                    "Check the content for dotnet latest image tag",
                ),
                ContentMatches(
                    "Dockerfile.nano",
                    re.compile(
                        rf"FROM {re.escape(config.docker_image)}:{sdk}-sdk-projectjson-nanoserver\b"
                    ),
                    "Check the content for dotnet nanoserver latest image tag",
                ),
            ],
        ),
        Scenario(
            "aspnet:dockerfile dotnet",
            "dockerfile",
            expectations=[
                FileExists("Dockerfile"),
                ContentMatches("Dockerfile", image, "Check the content for dotnet latest image tag"),
                ContentExcludes("Dockerfile", SQLITE_INSTALL, "Does not contain SQLite install"),
                ContentExcludes("Dockerfile", EF_MIGRATIONS, "Does not call database migrations"),
            ],
        ),
        Scenario(
            "aspnet:dockerfile dotnet with --sqlite",
            "dockerfile",
            args=["--sqlite"],
            expectations=[
                FileExists("Dockerfile"),
                ContentMatches("Dockerfile", image, "Check the content for dotnet latest image tag"),
                ContentMatches("Dockerfile", _line(SQLITE_INSTALL), "Contains SQLite install"),
                ContentMatches("Dockerfile", _line(EF_MIGRATIONS), "Calls database migrations"),
            ],
        ),
        Scenario("aspnet:nugetconfig", "nugetconfig", expectations=[FileExists("nuget.config")]),
        Scenario(
            "aspnet:readme creates README.md",
            "readme",
            expectations=[
                FileExists("README.md"),
                ContentMatches("README.md", title, "Check file content"),
            ],
        ),
        Scenario(
            "aspnet:readme with --txt option creates README.txt",
            "readme",
            args=["--txt"],
            expectations=[
                FileExists("README.txt"),
                ContentMatches("README.txt", title, "Check file content"),
            ],
        ),
        Scenario(
            "aspnet:readme in cwd of project.json should contain correct project name",
            "readme",
            bootstrap=_CLASSLIB,
            expectations=[
                FileExists("README.md"),
                ContentMatches("README.md", _line("# emptyTest")),
            ],
            skip_reason=PROJECT_NAME_INFERENCE,
        ),
        Scenario(
            "aspnet:readme with --txt option in cwd of project.json should contain correct project name",
            "readme",
            args=["--txt"],
            bootstrap=_CLASSLIB,
            expectations=[
                FileExists("README.txt"),
                ContentMatches("README.txt", _line("# emptyTest")),
            ],
            skip_reason=PROJECT_NAME_INFERENCE,
        ),
        Scenario("aspnet:webconfig", "webconfig", expectations=[FileExists("web.config")]),
    ]


def _named(
    generator: str,
    arg: str,
    filename: str,
    checks: list[re.Pattern[str]] | None = None,
    *,
    label: str,
    bootstrap: BootstrapStep | None = None,
    namespace: str | None = None,
) -> Scenario:
    expectations: list = [FileExists(filename)]
    expectations.extend(ContentMatches(filename, c, "Check file content") for c in checks or [])
    if namespace is not None:
        expectations.append(ContentMatches(filename, f"namespace {namespace}", "Check file content"))
    return Scenario(
        f"aspnet:{generator} {label}",
        generator,
        args=[arg],
        bootstrap=bootstrap,
        expectations=expectations,
        skip_reason=PROJECT_NAME_INFERENCE if namespace is not None else None,
    )


def _with_named_arguments() -> list[Scenario]:
    my_class = [re.compile(r"[ ]*public[ ]*class[ ]*MyClass")]
    contact = [re.compile(r"[ ]*interface[ ]*IContact")]
    middleware = [
        re.compile(r"[ ]*public[ ]*class[ ]*MyMiddleware"),
        re.compile(r"[ ]*public[ ]*static[ ]*class[ ]*MyMiddlewareExtensions"),
        re.compile(r"[ ]*IApplicationBuilder[ ]*UseMyMiddleware"),
    ]
    tag_helper = [re.compile(r"[ ]*public[ ]*class[ ]*CartTagHelper")]

    return [
        _named("class", "MyClass", "MyClass.cs", my_class, label="without extension"),
        _named("class", "MyClass.cs", "MyClass.cs", my_class, label="with extension"),
        _named(
            "class", "MyClass", "MyClass.cs", my_class,
            label="in cwd of project.json", bootstrap=_CLASSLIB, namespace="emptyTest",
        ),
        _named("interface", "IContact", "IContact.cs", contact, label="without extension"),
        _named("interface", "IContact.cs", "IContact.cs", contact, label="with extension"),
        _named(
            "interface", "IContact", "IContact.cs", contact,
            label="in cwd of project.json", bootstrap=_CLASSLIB, namespace="emptyTest",
        ),
        _named("middleware", "MyMiddleware", "MyMiddleware.cs", middleware, label="without extension"),
        _named("middleware", "MyMiddleware.cs", "MyMiddleware.cs", middleware, label="with extension"),
        _named(
            "middleware", "MyMiddleware", "MyMiddleware.cs", middleware[:1],
            label="in cwd of project.json", bootstrap=_CLASSLIB, namespace="emptyTest",
        ),
        _named("json", "file", "file.json", label="without extension"),
        _named("json", "file.json", "file.json", label="with extension"),
        _named("jsx", "file", "file.jsx", label="without extension"),
        _named("jsx", "file.jsx", "file.jsx", label="with extension"),
        _named("mvccontroller", "file", "file.cs", label="without extension"),
        _named("mvccontroller", "file.cs", "file.cs", label="with extension"),
        _named("mvccontroller", "file", "file.cs", label="in cwd of project.json", bootstrap=_MVC),
        _named("mvcview", "file", "file.cshtml", label="without extension"),
        _named("mvcview", "file.cshtml", "file.cshtml", label="with extension"),
        _named("mvcview", "file", "file.cshtml", label="in cwd of project.json", bootstrap=_MVC),
        _named("taghelper", "CartTagHelper", "CartTagHelper.cs", tag_helper, label="without extension"),
        _named("taghelper", "CartTagHelper.cs", "CartTagHelper.cs", tag_helper, label="with extension"),
        _named("webapicontroller", "file", "file.cs", label="without extension"),
        _named("webapicontroller", "file.cs", "file.cs", label="with extension"),
        _named(
            "webapicontroller", "file", "file.cs", label="in cwd of project.json", bootstrap=_MVC
        ),
    ]


def build_default_registry(config: GeneratorConfig | None = None) -> ScenarioRegistry:
    """Return a registry holding every built-in scenario.

    Expectations that depend on configuration (default namespace, SDK
    version, Docker image) are derived from *config*.
    """
    config = config or GeneratorConfig()
    registry = ScenarioRegistry()
    registry.extend(_without_arguments(config))
    registry.extend(_with_named_arguments())
    return registry
