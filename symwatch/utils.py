import logging
from typing import List, Optional, Union

DEFAULT_SLEEP_MILLIS = 500


def parse_sleep_millis(
    value: Optional[Union[str, int]], default: int = DEFAULT_SLEEP_MILLIS
) -> float:
    """Convert a --sleep value in milliseconds to seconds.

    Missing, unparsable or non-positive values fall back to ``default``.
    """
    if value is None or str(value).strip() == "":
        return default / 1000.0
    try:
        millis = int(str(value).strip())
    except ValueError:
        logging.warning(f"Invalid --sleep value '{value}', using {default}ms")
        return default / 1000.0
    if millis <= 0:
        logging.warning(f"Non-positive --sleep value {millis}, using {default}ms")
        return default / 1000.0
    return millis / 1000.0


def split_output_lines(output: bytes) -> List[str]:
    """Split combined command output into loggable lines.

    Surrounding whitespace is stripped first; empty output yields no lines.
    """
    text = output.decode("utf-8", errors="replace").strip()
    if not text:
        return []
    return text.split("\n")
