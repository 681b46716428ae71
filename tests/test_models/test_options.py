"""Tests for option models."""

import pytest
from pydantic import ValidationError

from nydus_build.models.options import BuilderOption, CompactOption


class TestBuilderOption:
    """Test BuilderOption model."""

    def test_minimal_builder_option(self):
        """Test creating build options with required fields only."""
        option = BuilderOption(
            bootstrap_path="/b",
            rootfs_path="/rootfs",
            backend_type="localfs",
            backend_config="{}",
            whiteout_spec="oci",
            output_json_path="/o.json",
            blob_path="/blob",
        )

        assert option.parent_bootstrap_path is None
        assert option.chunk_dict is None
        assert option.prefetch_patterns is None
        assert option.aligned_chunk is False

    def test_missing_required_field(self):
        """Test that a missing blob path is rejected."""
        with pytest.raises(ValidationError) as exc_info:
            BuilderOption(
                bootstrap_path="/b",
                rootfs_path="/rootfs",
                backend_type="localfs",
                backend_config="{}",
                whiteout_spec="oci",
                output_json_path="/o.json",
            )

        assert "blob_path" in str(exc_info.value)

    def test_unknown_field_rejected(self):
        """Test that typos in option names are not silently ignored."""
        with pytest.raises(ValidationError) as exc_info:
            BuilderOption(
                bootstrap_path="/b",
                rootfs_path="/rootfs",
                backend_type="localfs",
                backend_config="{}",
                whiteout_spec="oci",
                output_json_path="/o.json",
                blob_path="/blob",
                chunk_dictionary="/dict",
            )

        assert "chunk_dictionary" in str(exc_info.value)


class TestCompactOption:
    """Test CompactOption model."""

    def test_output_bootstrap_defaults_to_in_place(self):
        """Test that output bootstrap is unset by default."""
        option = CompactOption(
            bootstrap_path="/b",
            backend_type="oss",
            backend_config_path="/backend.json",
            output_json_path="/o.json",
            compact_config_path="/compact.json",
        )

        assert option.output_bootstrap_path is None
        assert option.chunk_dict is None

    def test_missing_compact_config(self):
        """Test that the compaction config path is required."""
        with pytest.raises(ValidationError) as exc_info:
            CompactOption(
                bootstrap_path="/b",
                backend_type="oss",
                backend_config_path="/backend.json",
                output_json_path="/o.json",
            )

        assert "compact_config_path" in str(exc_info.value)
