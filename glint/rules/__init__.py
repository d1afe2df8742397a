from __future__ import annotations

from .errors import ConfigError, PatternError
from .models import RawRule, Rule, RuleSet, Span
from .builder import build, normalize_patterns, to_raw_rule

__all__ = [
    "ConfigError",
    "PatternError",
    "RawRule",
    "Rule",
    "RuleSet",
    "Span",
    "build",
    "normalize_patterns",
    "to_raw_rule",
]
