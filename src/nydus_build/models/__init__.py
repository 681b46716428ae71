"""Pydantic models for options and configuration."""

from nydus_build.models.config import NydusBuildConfig, BuilderSettings
from nydus_build.models.options import BuilderOption, CompactOption

__all__ = [
    "NydusBuildConfig",
    "BuilderSettings",
    "BuilderOption",
    "CompactOption",
]
