from __future__ import annotations

import logging
import tomllib
from pathlib import Path

from glint.rules.builder import to_raw_rule
from glint.rules.errors import ConfigError
from glint.rules.models import RawRule

log = logging.getLogger(__name__)


def parse_rules(data: dict, source: str = "<config>") -> list[RawRule]:
    """Pull ``[[rules]]`` entries out of an already-decoded TOML document."""
    if "rules" not in data:
        raise ConfigError(f"{source}: missing 'rules' array")
    entries = data["rules"]
    if not isinstance(entries, list):
        raise ConfigError(f"{source}: 'rules' must be an array of tables")

    raw_rules: list[RawRule] = []
    for position, entry in enumerate(entries, start=1):
        try:
            raw_rules.append(to_raw_rule(entry, position))
        except ConfigError as exc:
            raise ConfigError(f"{source}: {exc}") from None
    return raw_rules


def load_rules(path: str | Path) -> list[RawRule]:
    config_path = Path(path).expanduser()
    if not config_path.exists():
        raise ConfigError(f"Config file not found: {config_path}")
    try:
        with open(config_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(f"{config_path}: {exc}") from exc
    except OSError as exc:
        raise ConfigError(f"{config_path}: {exc.strerror or exc}") from exc

    raw_rules = parse_rules(data, source=str(config_path))
    log.debug("Loaded %d rule entries from %s", len(raw_rules), config_path)
    return raw_rules
