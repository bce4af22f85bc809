"""Configuration for the generated preamble.

The defaults reproduce the standard preamble. A YAML file can override
any field:

    document_class: beamer
    class_options: [aspectratio=169]
    indent: "    "
    packages:
      - name: microtype
"""

from __future__ import annotations

import logging
from pathlib import Path

import yaml
from pydantic import BaseModel, Field, ValidationError

from beamerdsl.exceptions import ConfigError

log = logging.getLogger(__name__)


class PackageConfig(BaseModel):
    """A ``\\usepackage`` line of the base preamble."""

    name: str
    options: list[str] = Field(default_factory=list)
    comment: str | None = None


def _default_packages() -> list[PackageConfig]:
    return [
        PackageConfig(
            name="nag",
            options=["l2tabu", "orthodox"],
            comment="complain about obsolete LaTeX usage",
        ),
        PackageConfig(
            name="microtype", comment="enable post-pdfTeX typographic improvements"
        ),
    ]


class BeamerConfig(BaseModel):
    """Settings for the preamble and the renderer"""

    model_config = {"extra": "forbid"}

    document_class: str = Field(default="beamer", description="LaTeX class")
    class_options: list[str] = Field(
        default_factory=list, description="Options of \\documentclass"
    )
    indent: str = Field(default="  ", description="One indentation step")
    packages: list[PackageConfig] = Field(
        default_factory=_default_packages, description="Base preamble packages"
    )
    code_package_comment: str | None = Field(
        default="to include source code",
        description="Comment on the minted line added when the slides hold code",
    )

    @classmethod
    def load(cls, path: Path) -> "BeamerConfig":
        """Load config from yaml file, falling back to defaults"""
        if not path.exists():
            log.debug("No config at %s, using defaults", path)
            return cls()

        try:
            with open(path) as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigError(path, str(e)) from e

        if not isinstance(data, dict):
            raise ConfigError(path, "top level must be a mapping")

        try:
            config = cls.model_validate(data)
        except ValidationError as e:
            raise ConfigError(path, str(e)) from e

        log.info("Loaded config from %s", path)
        return config
