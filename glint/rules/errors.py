from __future__ import annotations

import regex


class ConfigError(Exception):
    """The rule configuration cannot be turned into a rule set."""


class PatternError(ConfigError):
    def __init__(self, pattern: str, error: regex.error) -> None:
        super().__init__(f"invalid pattern {pattern!r}: {error}")
        self.pattern = pattern
        self.error = error
