"""Configuration models."""

import logging
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator

from nydus_build.models.options import BuilderOption, CompactOption


class BuilderSettings(BaseModel):
    """Settings for the nydus-image executable."""
    binary_path: str = Field(default="nydus-image")
    log_level: str = Field(default="INFO")

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        """Accept any logging level name, case-insensitively."""
        name = v.upper()
        # getLevelName maps unknown names to "Level <name>" rather than an int
        if not isinstance(logging.getLevelName(name), int):
            raise ValueError(f"Invalid log level: {v}")
        return name


class NydusBuildConfig(BaseModel):
    """Build pipeline configuration: executable settings plus optional steps."""
    builder: BuilderSettings = Field(default_factory=BuilderSettings)
    create: Optional[BuilderOption] = None
    compact: Optional[CompactOption] = None

    model_config = ConfigDict(extra="ignore")
