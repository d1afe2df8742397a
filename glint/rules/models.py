from __future__ import annotations

import regex
from dataclasses import dataclass
from typing import Iterator


@dataclass(frozen=True, slots=True)
class RawRule:
    """One ``[[rules]]`` entry before compilation."""

    patterns: tuple[str, ...]
    style: str


@dataclass(frozen=True, slots=True)
class Rule:
    pattern: regex.Pattern
    style_code: str


@dataclass(frozen=True, slots=True)
class Span:
    start: int
    end: int
    style_code: str


@dataclass(frozen=True, slots=True)
class RuleSet:
    rules: tuple[Rule, ...] = ()

    def __iter__(self) -> Iterator[Rule]:
        return iter(self.rules)

    def __len__(self) -> int:
        return len(self.rules)
