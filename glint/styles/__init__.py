from __future__ import annotations

from .table import RESET, STYLE_TABLE, lookup, strip_styles
from .compiler import compile_style

__all__ = ["RESET", "STYLE_TABLE", "compile_style", "lookup", "strip_styles"]
