from __future__ import annotations

from .highlighter import LineHighlighter, collect_spans, render

__all__ = ["LineHighlighter", "collect_spans", "render"]
