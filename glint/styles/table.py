from __future__ import annotations

import re
from types import MappingProxyType
from typing import Mapping

RESET = "\x1b[0m"

STYLE_TABLE: Mapping[str, str] = MappingProxyType(
    {
        "black": "\x1b[30m",
        "red": "\x1b[31m",
        "green": "\x1b[32m",
        "yellow": "\x1b[33m",
        "blue": "\x1b[34m",
        "magenta": "\x1b[35m",
        "cyan": "\x1b[36m",
        "white": "\x1b[37m",
        "bold": "\x1b[1m",
        "underline": "\x1b[4m",
        "blink": "\x1b[5m",
        "reverse": "\x1b[7m",
        "concealed": "\x1b[8m",
        "default": RESET,
    }
)

_CODES_RE = re.compile("|".join(re.escape(code) for code in set(STYLE_TABLE.values())))


def lookup(name: str) -> str | None:
    return STYLE_TABLE.get(name)


def strip_styles(text: str) -> str:
    """Remove every escape code from the style table out of *text*."""
    return _CODES_RE.sub("", text)
