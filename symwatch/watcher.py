import time
import logging
from dataclasses import dataclass
from typing import Callable, Optional

from .resolver import SymlinkError, resolve_target
from .runner import DEFAULT_SHELL, log_command_output, run_command
from .utils import DEFAULT_SLEEP_MILLIS

DEFAULT_FAILURE_THRESHOLD = 5


class LinkUnavailableError(SymlinkError):
    """The symlink could not be resolved for too many consecutive polls."""

    def __init__(self, path: str, attempts: int, last_error: Exception) -> None:
        super().__init__(
            f"[{path}] unavailable after {attempts} consecutive failed reads: {last_error}"
        )
        self.path = path
        self.attempts = attempts
        self.last_error = last_error


@dataclass(frozen=True)
class WatchTarget:
    path: str
    interval: float = DEFAULT_SLEEP_MILLIS / 1000.0
    threshold: int = DEFAULT_FAILURE_THRESHOLD
    absolute: bool = True


@dataclass
class WatchState:
    target: str
    failures: int = 0
    changes: int = 0


def establish_baseline(watch: WatchTarget) -> WatchState:
    """Resolve the initial target; resolver errors propagate to the caller."""
    return WatchState(target=resolve_target(watch.path, absolute=watch.absolute))


def wait_for_change(
    watch: WatchTarget,
    state: WatchState,
    sleep: Callable[[float], None] = time.sleep,
) -> str:
    """Poll until the target differs from ``state.target`` and return it.

    Every failed resolution counts against ``watch.threshold``; once that many
    consecutive polls have failed, LinkUnavailableError is raised. Any
    successful read resets the count.
    """
    while True:
        try:
            new_target = resolve_target(watch.path, absolute=watch.absolute)
        except SymlinkError as e:
            state.failures += 1
            if state.failures >= watch.threshold:
                raise LinkUnavailableError(watch.path, state.failures, e) from e
            logging.warning(
                f"{e} (attempt {state.failures} of {watch.threshold})"
            )
            sleep(watch.interval)
            continue

        state.failures = 0
        if new_target == state.target:
            sleep(watch.interval)
            continue

        logging.info(
            f"Target of [{watch.path}] changed from [{state.target}] to [{new_target}]"
        )
        state.target = new_target
        state.changes += 1
        return new_target


def watch_and_run(
    watch: WatchTarget,
    command: str,
    state: WatchState,
    shell: str = DEFAULT_SHELL,
    timeout: Optional[float] = None,
    sleep: Callable[[float], None] = time.sleep,
) -> None:
    """Run ``command`` once for every target change, until the link is lost.

    Only returns by raising LinkUnavailableError (or an interrupt). Polling is
    paused while the command runs, so several swaps during a long command are
    seen as a single change to the latest target.
    """
    while True:
        wait_for_change(watch, state, sleep=sleep)
        logging.info(f"Running command: {command}")
        result = run_command(command, shell=shell, timeout=timeout)
        log_command_output(result)
