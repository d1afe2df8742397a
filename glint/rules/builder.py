from __future__ import annotations

import logging
import regex
from typing import Iterable, Mapping

from glint.rules.errors import ConfigError, PatternError
from glint.rules.models import RawRule, Rule, RuleSet
from glint.styles.compiler import compile_style

log = logging.getLogger(__name__)


def normalize_patterns(value: object) -> tuple[str, ...]:
    """Accept ``regexp`` as either a single string or a list of strings."""
    if isinstance(value, str):
        return (value,)
    if isinstance(value, list) and all(isinstance(item, str) for item in value):
        return tuple(value)
    raise ConfigError("'regexp' must be a string or a list of strings")


def to_raw_rule(raw: RawRule | Mapping[str, object], position: int) -> RawRule:
    if isinstance(raw, RawRule):
        return raw
    if not isinstance(raw, Mapping):
        raise ConfigError(f"rule #{position} must be a table")
    if "regexp" not in raw:
        raise ConfigError(f"rule #{position} is missing 'regexp'")
    if "color" not in raw:
        raise ConfigError(f"rule #{position} is missing 'color'")
    style = raw["color"]
    if not isinstance(style, str):
        raise ConfigError(f"rule #{position}: 'color' must be a string")
    try:
        patterns = normalize_patterns(raw["regexp"])
    except ConfigError as exc:
        raise ConfigError(f"rule #{position}: {exc}") from None
    return RawRule(patterns=patterns, style=style)


def build(raw_rules: Iterable[RawRule | Mapping[str, object]]) -> RuleSet:
    """Compile configured rules into an immutable :class:`RuleSet`.

    Each entry contributes one :class:`Rule` per pattern, all sharing the
    entry's compiled style.  Declaration order is preserved.  The first
    pattern that fails to compile aborts the whole build with
    :class:`PatternError`.
    """
    rules: list[Rule] = []
    for position, raw in enumerate(raw_rules, start=1):
        entry = to_raw_rule(raw, position)
        style_code = compile_style(entry.style)
        for pattern in entry.patterns:
            try:
                compiled = regex.compile(pattern)
            except regex.error as exc:
                raise PatternError(pattern, exc) from exc
            rules.append(Rule(pattern=compiled, style_code=style_code))
    log.debug("Compiled %d rules", len(rules))
    return RuleSet(rules=tuple(rules))
