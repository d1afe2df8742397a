from __future__ import annotations

from .defaults import DEFAULT_RULES_PATH
from .loader import load_rules, parse_rules

__all__ = ["DEFAULT_RULES_PATH", "load_rules", "parse_rules"]
