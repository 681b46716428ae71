"""Builder wrapping the nydus-image executable."""

import logging
import subprocess
import sys
from typing import List, Optional, TextIO

from nydus_build.models.options import BuilderOption, CompactOption
from nydus_build.utils.process import run_command


logger = logging.getLogger(__name__)


class Builder:
    """Runs nydus-image to build and compact RAFS bootstraps."""

    def __init__(
        self,
        binary_path: str,
        stdout: Optional[TextIO] = None,
        stderr: Optional[TextIO] = None,
        log: Optional[logging.Logger] = None,
    ):
        """Initialize builder."""
        self.binary_path = binary_path
        self.stdout = stdout if stdout is not None else sys.stdout
        self.stderr = stderr if stderr is not None else sys.stderr
        self.logger = log if log is not None else logger

    def run(self, args: List[str], stdin: str = "") -> None:
        """Execute nydus-image with `args`, feeding `stdin` to it.

        Execution errors are logged and re-raised unchanged.
        """
        self.logger.debug(f"\tCommand: {self.binary_path} {' '.join(args)}")

        cmd = [self.binary_path, *args]
        try:
            run_command(cmd, input=stdin, stdout=self.stdout, stderr=self.stderr)
        except (OSError, subprocess.CalledProcessError) as e:
            self.logger.error(f"fail to run {self.binary_path} {args}: {e}")
            raise

    def compact_args(self, option: CompactOption) -> List[str]:
        """Build the argument vector for `nydus-image compact`."""
        args = [
            "compact",
            "--bootstrap", option.bootstrap_path,
            "--config", option.compact_config_path,
            "--backend-type", option.backend_type,
            "--backend-config-file", option.backend_config_path,
            "--log-level", "info",
            "--output-json", option.output_json_path,
        ]
        if option.output_bootstrap_path:
            args.extend(["--output-bootstrap", option.output_bootstrap_path])
        if option.chunk_dict:
            args.extend(["--chunk-dict", option.chunk_dict])
        return args

    def compact(self, option: CompactOption) -> None:
        """Compact a bootstrap, in place unless an output bootstrap is set."""
        self.run(self.compact_args(option))

    def create_args(self, option: BuilderOption) -> List[str]:
        """Build the argument vector for `nydus-image create`."""
        args = ["create"]
        # With a parent the new layer is built on top of it
        if option.parent_bootstrap_path:
            args.extend(["--parent-bootstrap", option.parent_bootstrap_path])
        if option.aligned_chunk:
            args.append("--aligned-chunk")
        if option.chunk_dict:
            args.extend(["--chunk-dict", option.chunk_dict])

        args.extend([
            "--bootstrap", option.bootstrap_path,
            "--log-level", "warn",
            "--whiteout-spec", option.whiteout_spec,
            "--output-json", option.output_json_path,
            "--blob", option.blob_path,
            option.rootfs_path,
        ])

        # Must stay after the rootfs positional
        if option.prefetch_patterns:
            args.extend(["--prefetch-policy", "fs"])
        return args

    def run_create(self, option: BuilderOption) -> None:
        """Build a layer, piping prefetch patterns to nydus-image on stdin."""
        self.run(self.create_args(option), option.prefetch_patterns or "")
