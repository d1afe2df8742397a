from __future__ import annotations

from glint.rules.models import RuleSet, Span
from glint.styles.table import RESET


def collect_spans(rule_set: RuleSet, line: str) -> list[Span]:
    """Every non-empty match of every rule, ordered by start offset.

    Each rule is matched against the untouched line.  ``list.sort`` is
    stable, so spans starting at the same offset keep rule order.
    """
    spans: list[Span] = []
    for rule in rule_set:
        for m in rule.pattern.finditer(line):
            start, end = m.span()
            if start < end:
                spans.append(Span(start, end, rule.style_code))
    spans.sort(key=lambda span: span.start)
    return spans


def render(rule_set: RuleSet, line: str) -> str:
    """Return *line* with matched regions wrapped in their style codes.

    Overlaps are resolved greedily: a span that starts inside text already
    styled is dropped whole.  Styles never nest or combine.
    """
    out: list[str] = []
    last_index = 0
    for span in collect_spans(rule_set, line):
        if span.start < last_index:
            continue
        out.append(line[last_index:span.start])
        out.append(span.style_code)
        out.append(line[span.start:span.end])
        out.append(RESET)
        last_index = span.end
    out.append(line[last_index:])
    return "".join(out)


class LineHighlighter:
    """Binds a :class:`RuleSet` so callers can just hand over lines."""

    def __init__(self, rule_set: RuleSet) -> None:
        self._rule_set = rule_set

    @property
    def rule_set(self) -> RuleSet:
        return self._rule_set

    def produce(self, line: str) -> str:
        return render(self._rule_set, line)
