"""
Input Sources
=============

Helpers that assemble the complete source buffer handed to the scanner.
The scanner needs the whole text up front, with a newline between
logical lines; these functions supply it from a file or from an
interactive line stream.

Interactive Input
-----------------
The interactive reader collects lines until a sentinel line (``SCAN`` by
default) and appends a newline after every collected line:

    int x;       ->  "int x;\\nx = 5;\\n"
    x = 5;
    SCAN

Copyright (c) 2026 lexscan Developers & Contributors
"""

import logging
from pathlib import Path
from typing import Iterable, Union

from lexscan.errors import SourceReadError

logger = logging.getLogger(__name__)

DEFAULT_SENTINEL = "SCAN"


def read_source_file(path: Union[str, Path], encoding: str = "utf-8") -> str:
    """
    Read a source file as text.

    Args:
        path: File to read
        encoding: Text encoding of the file

    Returns:
        The file contents

    Raises:
        SourceReadError: If the file cannot be opened or decoded
    """
    path = Path(path)
    try:
        text = path.read_text(encoding=encoding)
    except UnicodeDecodeError as e:
        raise SourceReadError(path, f"not valid {encoding} text ({e.reason})") from e
    except OSError as e:
        raise SourceReadError(path, e.strerror or str(e)) from e

    logger.debug("Read %d characters from %s", len(text), path)
    return text


def read_until_sentinel(
    lines: Iterable[str],
    sentinel: str = DEFAULT_SENTINEL,
) -> str:
    """
    Collect lines until one equals the sentinel.

    Line terminators on the incoming lines are stripped, and each kept
    line is re-terminated with a single newline. Running out of lines
    before the sentinel simply ends the input.

    Args:
        lines: Line stream, e.g. an open text file or stdin
        sentinel: Line that marks the end of input (not included)

    Returns:
        The joined source buffer
    """
    collected = []
    for raw in lines:
        line = raw.rstrip("\r\n")
        if line == sentinel:
            break
        collected.append(line + "\n")
    else:
        logger.warning("Input ended before %r line; scanning what was read", sentinel)

    logger.debug("Collected %d line(s) of input", len(collected))
    return "".join(collected)
