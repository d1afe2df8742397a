from __future__ import annotations

DEFAULT_RULES_PATH = "/etc/glint/rules.toml"
