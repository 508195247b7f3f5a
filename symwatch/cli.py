import logging
from typing import Optional

import typer

from .resolver import SymlinkError
from .runner import DEFAULT_SHELL
from .utils import DEFAULT_SLEEP_MILLIS, parse_sleep_millis
from .watcher import (
    DEFAULT_FAILURE_THRESHOLD,
    LinkUnavailableError,
    WatchTarget,
    establish_baseline,
    watch_and_run,
)

EXIT_NO_SYMLINK = 1
# Also the status of every other usage error reported by the argument parser
EXIT_NO_COMMAND = 2
EXIT_INVALID_SYMLINK = 3
EXIT_LINK_UNAVAILABLE = 4

EPILOG = "Example: symwatch /var/www/current 'service apache2 graceful' --sleep 1000"


app = typer.Typer(add_completion=False, no_args_is_help=True)


@app.command(epilog=EPILOG)
def main(
    symlink: str = typer.Argument("", help="Path of the symlink to watch"),
    command: str = typer.Argument(
        "", help="Shell command to run each time the symlink target changes"
    ),
    sleep: str = typer.Option(
        str(DEFAULT_SLEEP_MILLIS),
        "--sleep",
        help="Time in milliseconds to sleep between checks of the symlink target",
        envvar="SYMWATCH_SLEEP",
    ),
    threshold: int = typer.Option(
        DEFAULT_FAILURE_THRESHOLD,
        "--threshold",
        help="Consecutive failed reads before the symlink is considered gone",
        envvar="SYMWATCH_THRESHOLD",
    ),
    raw: bool = typer.Option(
        False,
        "--raw/--absolute",
        help="Compare the raw stored target instead of the absolute resolved path",
        envvar="SYMWATCH_RAW",
    ),
    shell: str = typer.Option(
        DEFAULT_SHELL,
        "--shell",
        help="Shell used to run the command as '<shell> -c <command>'",
        envvar="SYMWATCH_SHELL",
    ),
    timeout: Optional[float] = typer.Option(
        None,
        "--timeout",
        help="Seconds after which a running command is abandoned (default: no limit)",
        envvar="SYMWATCH_TIMEOUT",
    ),
    loglevel: str = typer.Option(
        "INFO",
        "--loglevel",
        help="Logging level: DEBUG, INFO, WARNING, ERROR",
        envvar="SYMWATCH_LOGLEVEL",
    ),
):
    """Watch a symlink and run a shell command whenever its target changes.

    - The symlink is polled every --sleep milliseconds.
    - A missing or unreadable symlink is retried; after --threshold consecutive failures the watcher exits.
    - Command failures are logged and watching continues.
    """
    # Logging
    logging.basicConfig(
        level=getattr(logging, loglevel.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(message)s",
    )

    if not symlink:
        typer.echo("No symlink path specified.", err=True)
        raise typer.Exit(code=EXIT_NO_SYMLINK)
    if not command:
        typer.echo("No command specified.", err=True)
        raise typer.Exit(code=EXIT_NO_COMMAND)

    if threshold < 1:
        logging.warning(f"Invalid --threshold {threshold}, using 1")
        threshold = 1

    if timeout is not None and timeout <= 0:
        logging.warning(
            f"Non-positive --timeout {timeout}, running commands without a limit"
        )
        timeout = None

    watch = WatchTarget(
        path=symlink,
        interval=parse_sleep_millis(sleep),
        threshold=threshold,
        absolute=not raw,
    )

    logging.info("Process start")

    try:
        state = establish_baseline(watch)
    except SymlinkError as e:
        logging.error(f"Cannot watch [{symlink}]: {e}")
        raise typer.Exit(code=EXIT_INVALID_SYMLINK)
    logging.info(f"Watching [{symlink}]; initial target is [{state.target}]")

    try:
        watch_and_run(watch, command, state, shell=shell, timeout=timeout)
    except LinkUnavailableError as e:
        logging.error(f"Exiting: {e}")
        raise typer.Exit(code=EXIT_LINK_UNAVAILABLE)
    except KeyboardInterrupt:
        logging.info("Stopping watcher...")


if __name__ == "__main__":
    app()
