"""aspnet-gen configuration.

Typed configuration shared by the generators, the conformance harness and the
CLI. Settings use Pydantic v2 models so they are validated at construction
time and can be serialised to/from JSON or environment variables.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, field_validator

_TRUTHY = {"1", "true", "yes", "on"}


class GeneratorConfig(BaseModel):
    """Global generator and harness configuration.

    ``answers`` holds default answers for values a generator would otherwise
    prompt for (e.g. ``{"name": "MyClass"}``).  Every invocation receives its
    own merged copy; nothing is shared between invocations.
    """

    default_namespace: str = Field(
        default="MyNamespace",
        description="Namespace used when no project descriptor is found",
    )
    sdk_version: str = Field(default="1.1.0", description=".NET Core runtime/SDK version")
    docker_image: str = Field(default="microsoft/dotnet", description="Base Docker image")
    template_dir: Path | None = Field(
        default=None, description="Override for the bundled Jinja2 template directory"
    )
    answers: dict[str, str] = Field(default_factory=dict)
    workspace_root: Path | None = Field(
        default=None, description="Parent directory for temporary workspaces"
    )
    keep_workspaces: bool = Field(
        default=False, description="Retain scenario workspaces after a run"
    )

    @field_validator("default_namespace")
    @classmethod
    def _namespace_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("default_namespace must not be blank")
        return value.strip()

    @field_validator("sdk_version")
    @classmethod
    def _version_format(cls, value: str) -> str:
        parts = value.split(".")
        if not all(part.isdigit() for part in parts) or len(parts) < 2:
            raise ValueError(f"invalid sdk_version: {value!r}")
        return value

    # ------------------------------------------------------------------
    # Derived values
    # ------------------------------------------------------------------

    @property
    def sdk_image_tag(self) -> str:
        """Docker tag for the project.json SDK image, e.g. ``1.1.0-sdk-projectjson``."""
        return f"{self.sdk_version}-sdk-projectjson"

    def template_context(self) -> dict[str, Any]:
        """Return the config-derived values every template can see."""
        return {
            "sdk_version": self.sdk_version,
            "docker_image": self.docker_image,
            "sdk_image_tag": self.sdk_image_tag,
        }

    # ------------------------------------------------------------------
    # Serialisation helpers
    # ------------------------------------------------------------------

    def save(self, path: Path) -> Path:
        """Persist the configuration to a JSON file and return its path."""
        target = Path(path)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(self.model_dump_json(indent=2), encoding="utf-8")
        return target

    @classmethod
    def load(cls, path: Path) -> "GeneratorConfig":
        """Load a previously-saved configuration from JSON."""
        raw = Path(path).read_text(encoding="utf-8")
        return cls.model_validate_json(raw)

    @classmethod
    def from_env(cls) -> "GeneratorConfig":
        """Build a ``GeneratorConfig`` from environment variables.

        Recognised variables (all optional):
            ASPNET_GEN_NAMESPACE, ASPNET_GEN_SDK_VERSION,
            ASPNET_GEN_DOCKER_IMAGE, ASPNET_GEN_TEMPLATE_DIR,
            ASPNET_GEN_WORKSPACE_ROOT, ASPNET_GEN_KEEP_WORKSPACES.
        """
        kwargs: dict[str, Any] = {}
        if os.environ.get("ASPNET_GEN_NAMESPACE"):
            kwargs["default_namespace"] = os.environ["ASPNET_GEN_NAMESPACE"]
        if os.environ.get("ASPNET_GEN_SDK_VERSION"):
            kwargs["sdk_version"] = os.environ["ASPNET_GEN_SDK_VERSION"]
        if os.environ.get("ASPNET_GEN_DOCKER_IMAGE"):
            kwargs["docker_image"] = os.environ["ASPNET_GEN_DOCKER_IMAGE"]
        if os.environ.get("ASPNET_GEN_TEMPLATE_DIR"):
            kwargs["template_dir"] = Path(os.environ["ASPNET_GEN_TEMPLATE_DIR"])
        if os.environ.get("ASPNET_GEN_WORKSPACE_ROOT"):
            kwargs["workspace_root"] = Path(os.environ["ASPNET_GEN_WORKSPACE_ROOT"])

        keep = os.environ.get("ASPNET_GEN_KEEP_WORKSPACES", "")
        kwargs["keep_workspaces"] = keep.strip().lower() in _TRUTHY

        return cls(**kwargs)
