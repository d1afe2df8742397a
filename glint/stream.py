from __future__ import annotations

import logging
from typing import Iterable, TextIO

from glint.highlight.highlighter import LineHighlighter

log = logging.getLogger(__name__)


def _strip_newline(line: str) -> str:
    if line.endswith("\n"):
        line = line[:-1]
        if line.endswith("\r"):
            line = line[:-1]
    return line


def highlight_stream(
    highlighter: LineHighlighter, source: Iterable[str], sink: TextIO
) -> int:
    """Render every line of *source* into *sink*, one line at a time.

    Output is flushed after each line so the tool stays usable at the end
    of a live pipeline such as ``tail -f``.
    """
    count = 0
    for line in source:
        sink.write(highlighter.produce(_strip_newline(line)))
        sink.write("\n")
        sink.flush()
        count += 1
    log.debug("Processed %d lines", count)
    return count
