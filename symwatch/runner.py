import logging
import subprocess
from dataclasses import dataclass
from typing import Optional

from .utils import split_output_lines

DEFAULT_SHELL = "sh"


@dataclass(frozen=True)
class CommandResult:
    command: str
    output: bytes
    returncode: Optional[int] = None
    error: Optional[str] = None

    @property
    def success(self) -> bool:
        return self.error is None and self.returncode == 0


def run_command(
    command: str, shell: str = DEFAULT_SHELL, timeout: Optional[float] = None
) -> CommandResult:
    """Run ``command`` through ``<shell> -c`` and capture combined output.

    Never raises for a failing command: non-zero exit, spawn failure and
    timeout are all reported through the returned CommandResult.
    """
    try:
        proc = subprocess.run(
            [shell, "-c", command],
            stdout=subprocess.PIPE,
            stderr=subprocess.STDOUT,
            timeout=timeout,
            check=False,
        )
    except subprocess.TimeoutExpired as e:
        return CommandResult(
            command, e.output or b"", error=f"timed out after {timeout}s"
        )
    except OSError as e:
        return CommandResult(command, b"", error=str(e))

    error = None
    if proc.returncode != 0:
        error = f"exit status {proc.returncode}"
    return CommandResult(command, proc.stdout or b"", proc.returncode, error)


def log_command_output(result: CommandResult) -> None:
    if not result.success:
        logging.error(f"Error running command `{result.command}`: {result.error}")
    for line in split_output_lines(result.output):
        logging.info(f"[CMD] {line}")
    logging.info("End of command output")
