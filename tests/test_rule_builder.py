from __future__ import annotations

import regex

import pytest

from glint.rules.builder import build, normalize_patterns
from glint.rules.errors import ConfigError, PatternError
from glint.rules.models import RawRule, RuleSet

GREEN = "\x1b[32m"
YELLOW = "\x1b[33m"


# ── Pattern field normalization ───────────────────────────────────


def test_normalize_single_string() -> None:
    assert normalize_patterns("ERROR") == ("ERROR",)


def test_normalize_list_of_strings() -> None:
    assert normalize_patterns(["a", "b"]) == ("a", "b")


def test_normalize_rejects_other_types() -> None:
    with pytest.raises(ConfigError):
        normalize_patterns(42)
    with pytest.raises(ConfigError):
        normalize_patterns(["ok", 1])
    with pytest.raises(ConfigError):
        normalize_patterns({"regexp": "x"})


# ── Construction ──────────────────────────────────────────────────


def test_build_from_mappings() -> None:
    rule_set = build([{"regexp": "foo", "color": "green"}])
    assert isinstance(rule_set, RuleSet)
    assert len(rule_set) == 1
    rule = rule_set.rules[0]
    assert rule.pattern.pattern == "foo"
    assert rule.style_code == GREEN


def test_build_from_raw_rules() -> None:
    rule_set = build([RawRule(patterns=("x",), style="yellow")])
    assert [r.style_code for r in rule_set] == [YELLOW]


def test_pattern_list_expands_to_one_rule_per_pattern() -> None:
    rule_set = build([{"regexp": ["foo", "bar", "baz"], "color": "green"}])
    assert [r.pattern.pattern for r in rule_set] == ["foo", "bar", "baz"]
    codes = [r.style_code for r in rule_set]
    assert codes == [GREEN, GREEN, GREEN]
    # Compiled once per entry, shared by every expanded rule.
    assert codes[0] is codes[1] is codes[2]


def test_declaration_order_is_preserved() -> None:
    rule_set = build(
        [
            {"regexp": ["b1", "b2"], "color": "green"},
            {"regexp": "a", "color": "yellow"},
        ]
    )
    assert [r.pattern.pattern for r in rule_set] == ["b1", "b2", "a"]


def test_unknown_style_gives_empty_code() -> None:
    rule_set = build([{"regexp": "x", "color": "nonexistent"}])
    assert rule_set.rules[0].style_code == ""


def test_empty_input_builds_empty_rule_set() -> None:
    assert len(build([])) == 0


def test_rules_are_immutable() -> None:
    rule_set = build([{"regexp": "x", "color": "red"}])
    with pytest.raises(AttributeError):
        rule_set.rules[0].style_code = ""  # type: ignore[misc]


# ── Failures ──────────────────────────────────────────────────────


def test_invalid_pattern_raises_pattern_error() -> None:
    with pytest.raises(PatternError) as excinfo:
        build(
            [
                {"regexp": "fine", "color": "red"},
                {"regexp": ["also fine", "(unclosed"], "color": "blue"},
            ]
        )
    exc = excinfo.value
    assert exc.pattern == "(unclosed"
    assert isinstance(exc.error, regex.error)
    assert isinstance(exc, ConfigError)
    assert "(unclosed" in str(exc)


def test_missing_regexp_is_config_error() -> None:
    with pytest.raises(ConfigError, match="rule #1 is missing 'regexp'"):
        build([{"color": "red"}])


def test_missing_color_is_config_error() -> None:
    with pytest.raises(ConfigError, match="rule #2 is missing 'color'"):
        build([{"regexp": "a", "color": "red"}, {"regexp": "b"}])


def test_non_string_color_is_config_error() -> None:
    with pytest.raises(ConfigError, match="'color' must be a string"):
        build([{"regexp": "a", "color": ["red"]}])


def test_non_table_entry_is_config_error() -> None:
    with pytest.raises(ConfigError, match="must be a table"):
        build(["just a string"])  # type: ignore[list-item]
