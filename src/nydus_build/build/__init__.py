"""Invocation of the nydus-image build tool."""

from nydus_build.build.builder import Builder

__all__ = [
    "Builder",
]
