"""Subprocess helpers."""

import io
import subprocess
from dataclasses import dataclass
from typing import List, Optional, TextIO, Union


@dataclass
class CommandResult:
    """Result from running a command."""
    returncode: int
    stdout: str = ""
    stderr: str = ""


def _stream_target(writer: Optional[TextIO]) -> Union[TextIO, int]:
    """Pick what to hand the child for one output stream.

    Writers backed by a file descriptor are inherited directly. Anything
    else is captured through a pipe and copied over once the child exits.
    """
    if writer is None:
        return subprocess.PIPE
    try:
        writer.fileno()
    except (AttributeError, OSError, io.UnsupportedOperation):
        return subprocess.PIPE
    writer.flush()
    return writer


def run_command(
    cmd: List[str],
    input: str = "",
    stdout: Optional[TextIO] = None,
    stderr: Optional[TextIO] = None,
    check: bool = True,
    **kwargs
) -> CommandResult:
    """Run a command to completion, feeding `input` on stdin."""
    stdout_target = _stream_target(stdout)
    stderr_target = _stream_target(stderr)

    process = subprocess.run(
        cmd,
        input=input,
        stdout=stdout_target,
        stderr=stderr_target,
        text=True,
        encoding="utf-8",
        errors="replace",
        **kwargs
    )

    result = CommandResult(
        returncode=process.returncode,
        stdout=process.stdout or "",
        stderr=process.stderr or "",
    )

    # Forward captured output to writers that could not be inherited
    if stdout is not None and stdout_target is subprocess.PIPE and result.stdout:
        stdout.write(result.stdout)
    if stderr is not None and stderr_target is subprocess.PIPE and result.stderr:
        stderr.write(result.stderr)

    if check and process.returncode != 0:
        raise subprocess.CalledProcessError(
            process.returncode, cmd, output=result.stdout, stderr=result.stderr
        )

    return result
