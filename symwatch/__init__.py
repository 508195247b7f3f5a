"""Symwatch package: watch a symlink and run a shell command when its target changes.

Exports:
- app, main: Typer CLI entrypoints (from symwatch.cli)
- resolve_target, is_symlink and the resolution errors (from symwatch.resolver)
- WatchTarget, WatchState, establish_baseline, wait_for_change, watch_and_run (from symwatch.watcher)
- CommandResult, run_command, log_command_output (from symwatch.runner)
"""

from .cli import app, main  # noqa: F401
from .resolver import (  # noqa: F401
    NotASymlinkError,
    ReadError,
    SymlinkError,
    is_symlink,
    resolve_target,
)
from .runner import CommandResult, log_command_output, run_command  # noqa: F401
from .watcher import (  # noqa: F401
    LinkUnavailableError,
    WatchState,
    WatchTarget,
    establish_baseline,
    wait_for_change,
    watch_and_run,
)

__all__ = [
    "app",
    "main",
    "NotASymlinkError",
    "ReadError",
    "SymlinkError",
    "is_symlink",
    "resolve_target",
    "CommandResult",
    "log_command_output",
    "run_command",
    "LinkUnavailableError",
    "WatchState",
    "WatchTarget",
    "establish_baseline",
    "wait_for_change",
    "watch_and_run",
]
