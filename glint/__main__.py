from __future__ import annotations

import argparse
import io
import logging
import os
import sys

from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.text import Text

from glint.config.defaults import DEFAULT_RULES_PATH
from glint.config.loader import load_rules
from glint.highlight.highlighter import LineHighlighter
from glint.rules.builder import build
from glint.rules.errors import ConfigError
from glint.rules.models import RuleSet
from glint.stream import highlight_stream
from glint.styles.table import RESET
from glint.utils.logger import setup_logging

log = logging.getLogger(__name__)


def _configure_streams() -> None:
    # Undecodable bytes are carried through rather than rejected.
    for stream in (sys.stdin, sys.stdout):
        if isinstance(stream, io.TextIOWrapper):
            stream.reconfigure(errors="surrogateescape")


def _print_rules(rule_set: RuleSet, console: Console) -> None:
    table = Table(title=f"{len(rule_set)} rules")
    table.add_column("#", justify="right", style="dim")
    table.add_column("Pattern")
    table.add_column("Sample")
    for index, rule in enumerate(rule_set, start=1):
        sample = Text.from_ansi(f"{rule.style_code}{rule.pattern.pattern}{RESET}")
        table.add_row(str(index), escape(rule.pattern.pattern), sample)
    console.print(table)


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        prog="glint",
        description="Highlight regex matches in a text stream",
    )
    parser.add_argument(
        "config",
        nargs="?",
        default=DEFAULT_RULES_PATH,
        help=f"Path to the rules file (default: {DEFAULT_RULES_PATH})",
    )
    parser.add_argument("--check", action="store_true", help="Show compiled rules and exit")
    parser.add_argument("--log-file", default="", help="Also write diagnostics to this file")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    args = parser.parse_args(argv)

    setup_logging(log_file=args.log_file, log_level="DEBUG" if args.verbose else "WARNING")
    errors = Console(stderr=True)

    try:
        rule_set = build(load_rules(args.config))
    except ConfigError as exc:
        errors.print(f"[red]Config error:[/red] {escape(str(exc))}")
        raise SystemExit(1)

    if args.check:
        _print_rules(rule_set, Console())
        return

    _configure_streams()
    try:
        highlight_stream(LineHighlighter(rule_set), sys.stdin, sys.stdout)
    except KeyboardInterrupt:
        log.debug("Interrupted")
    except BrokenPipeError:
        # Keep the interpreter from complaining again when it flushes stdout at exit.
        devnull = os.open(os.devnull, os.O_WRONLY)
        os.dup2(devnull, sys.stdout.fileno())


if __name__ == "__main__":
    main()
