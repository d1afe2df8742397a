from __future__ import annotations

import logging

from glint.styles.table import lookup

log = logging.getLogger(__name__)


def compile_style(expression: str) -> str:
    """Turn a style expression like ``"red bold"`` into one escape string.

    Tokens are resolved in order and concatenated.  Unknown tokens are
    skipped, so the result may be empty.
    """
    codes: list[str] = []
    for token in expression.split():
        code = lookup(token)
        if code is None:
            log.debug("Ignoring unknown style %r", token)
            continue
        codes.append(code)
    return "".join(codes)
