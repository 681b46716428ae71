"""Tests for CLI command implementations."""

from unittest.mock import MagicMock, patch

from nydus_build.cli.commands import apply_config, compact_bootstrap, read_prefetch_patterns
from nydus_build.models.config import NydusBuildConfig
from nydus_build.models.options import CompactOption


class TestCommands:
    """Tests for command helpers."""

    def test_read_prefetch_patterns_none(self):
        """Test that no source means no patterns."""
        assert read_prefetch_patterns(None) is None
        assert read_prefetch_patterns("") is None

    @patch("nydus_build.cli.commands.console")
    def test_compact_reports_in_place_target(self, mock_console):
        """Test that in-place compaction reports the input bootstrap."""
        builder = MagicMock()
        option = CompactOption(
            bootstrap_path="/b",
            backend_type="localfs",
            backend_config_path="/backend.json",
            output_json_path="/o.json",
            compact_config_path="/compact.json",
        )

        compact_bootstrap(builder, option)

        builder.compact.assert_called_once_with(option)
        assert "/b" in mock_console.print.call_args[0][0]

    @patch("nydus_build.cli.commands.console")
    def test_apply_empty_config(self, mock_console):
        """Test that a config without steps runs nothing."""
        builder = MagicMock()

        apply_config(builder, NydusBuildConfig())

        builder.run_create.assert_not_called()
        builder.compact.assert_not_called()
        mock_console.print.assert_called_once()
