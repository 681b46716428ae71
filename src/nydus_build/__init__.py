"""
Nydus Build - drive nydus-image from Python.

Assembles nydus-image command lines for building RAFS layers and compacting
bootstraps, then runs them with the caller's standard streams.
"""

__version__ = "1.0.0"
__author__ = "Nydus Build Development Team"

# Re-export key components for easier access
from nydus_build.build import Builder
from nydus_build.models.config import NydusBuildConfig
from nydus_build.models.options import BuilderOption, CompactOption

__all__ = [
    "Builder",
    "BuilderOption",
    "CompactOption",
    "NydusBuildConfig",
]
