"""Option models for nydus-image invocations."""

from typing import Optional
from pydantic import BaseModel, ConfigDict, Field


class BuilderOption(BaseModel):
    """Options for building a RAFS layer with `nydus-image create`."""
    parent_bootstrap_path: Optional[str] = Field(None, description="Bootstrap of the parent layer")
    chunk_dict: Optional[str] = Field(None, description="Chunk dictionary used for deduplication")
    bootstrap_path: str = Field(..., description="Bootstrap output path")
    rootfs_path: str = Field(..., description="Source rootfs directory")
    backend_type: str = Field(..., description="Storage backend type")
    backend_config: str = Field(..., description="Storage backend configuration")
    whiteout_spec: str = Field(..., description="Whiteout convention, e.g. oci or overlayfs")
    output_json_path: str = Field(..., description="Build output JSON path")
    prefetch_patterns: Optional[str] = Field(None, description="Newline separated prefetch patterns")
    # A regular file or fifo into which nydus-image dumps blob contents.
    blob_path: str = Field(..., description="Blob output path")
    aligned_chunk: bool = Field(default=False)

    model_config = ConfigDict(extra="forbid")


class CompactOption(BaseModel):
    """Options for compacting a bootstrap with `nydus-image compact`."""
    chunk_dict: Optional[str] = Field(None, description="Chunk dictionary used for deduplication")
    bootstrap_path: str = Field(..., description="Bootstrap to compact")
    output_bootstrap_path: Optional[str] = Field(
        None, description="Compacted bootstrap path, defaults to overwriting the input"
    )
    backend_type: str = Field(..., description="Storage backend type")
    backend_config_path: str = Field(..., description="Storage backend configuration file")
    output_json_path: str = Field(..., description="Compaction output JSON path")
    compact_config_path: str = Field(..., description="Compaction policy file")

    model_config = ConfigDict(extra="forbid")
