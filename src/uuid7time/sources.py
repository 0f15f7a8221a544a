"""Input sources for batch runs."""

import logging
from collections.abc import Iterable, Iterator
from typing import TextIO

logger = logging.getLogger(__name__)


def read_lines(stream: TextIO) -> Iterator[str]:
    """Yield non-blank lines from a stream, trimmed.

    A read error ends the input instead of propagating, so items already
    read are still processed.
    """
    try:
        for line in stream:
            candidate = line.strip()
            if candidate:
                yield candidate
    except (OSError, UnicodeDecodeError) as e:
        logger.debug(f"Stopped reading input: {e}")


def collect_candidates(arguments: Iterable[str], stream: TextIO) -> Iterator[str]:
    """Return candidates from positional arguments, or from stream if there are none.

    Args:
        arguments: Positional UUID arguments
        stream: Line-delimited input used when no arguments are given

    Returns:
        Iterator over candidate UUID strings, in input order
    """
    arguments = list(arguments)
    if arguments:
        logger.debug(f"Reading {len(arguments)} UUID(s) from arguments")
        return iter(arguments)

    logger.debug("No UUID arguments, reading from stdin")
    return read_lines(stream)
