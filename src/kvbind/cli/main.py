#!/usr/bin/env python3
"""
KVBIND CLI - Inspection Tool
----------------------------
Loads one `key=value` file and shows, queries or lints it.

    kvbind show app.conf -d port=80 --format yaml
    kvbind get app.conf port --type int
    kvbind lint app.conf

Author: KvBind Team
Date: 2026-10-18
"""

import sys
import argparse
import logging
from pathlib import Path
from typing import List, Optional

from kvbind.cli.formatter import KvFormatter
from kvbind.core.errors import ConfigError
from kvbind.core.models import MALFORMED
from kvbind.core.store import LineStore
from kvbind.export.exporter import StoreExporter

logger = logging.getLogger("kvbind.cli")

EXIT_OK = 0
EXIT_CONFIG_ERROR = 1
EXIT_IO_ERROR = 2


class KvBindCLI:
    """
    CLI wrapper that translates commands into LineStore calls and
    renders the results through KvFormatter.
    """

    def __init__(self, formatter: Optional[KvFormatter] = None):
        self.formatter = formatter or KvFormatter()
        self.exporter = StoreExporter()
        self.parser = argparse.ArgumentParser(
            prog="kvbind",
            description="kvbind - inspect flat key=value configuration files",
        )
        self._setup_args()

    def _setup_args(self):
        """Configures the command-line flags and subcommands."""
        self.parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
        self.parser.add_argument("--separator", default="=", help="Name/value separator (default: '=')")
        subparsers = self.parser.add_subparsers(dest="command", metavar="Command")

        show_parser = subparsers.add_parser("show", help="Show every resolved value")
        show_parser.add_argument("path", help="Path to a key=value file")
        show_parser.add_argument("-d", "--default", action="append", default=[], metavar="NAME=VALUE",
                                 help="Register a default (repeatable)")
        show_parser.add_argument("--format", choices=["table", "yaml", "kv"], default="table")

        get_parser = subparsers.add_parser("get", help="Print one value")
        get_parser.add_argument("path", help="Path to a key=value file")
        get_parser.add_argument("name", help="Config name to look up")
        get_parser.add_argument("--type", choices=["str", "int", "bool"], default="str", dest="value_type")
        get_parser.add_argument("-d", "--default", action="append", default=[], metavar="NAME=VALUE",
                                help="Register a default (repeatable)")

        lint_parser = subparsers.add_parser("lint", help="List lines the parser ignores as malformed")
        lint_parser.add_argument("path", help="Path to a key=value file")

    def _apply_defaults(self, store: LineStore, pairs: List[str]):
        for pair in pairs:
            name, sep, value = pair.partition(store.separator)
            if not sep or not name.strip():
                raise ConfigError(f"invalid default '{pair}', expected NAME{store.separator}VALUE")
            store.set_default(name, value)

    def _cmd_show(self, args: argparse.Namespace, store: LineStore):
        self._apply_defaults(store, args.default)
        store.load_file(args.path)
        if args.format == "yaml":
            self.formatter.show_yaml(self.exporter.to_yaml(store), args.path)
        elif args.format == "kv":
            self.formatter.show_plain(self.exporter.to_lines(store))
        else:
            self.formatter.show_table(store, args.path)

    def _cmd_get(self, args: argparse.Namespace, store: LineStore):
        self._apply_defaults(store, args.default)
        store.load_file(args.path)
        getter = {"str": store.get_str, "int": store.get_int, "bool": store.get_bool}[args.value_type]
        value = getter(args.name)
        if isinstance(value, bool):
            value = str(value).lower()
        self.formatter.show_plain(f"{value}\n")

    def _cmd_lint(self, args: argparse.Namespace, store: LineStore) -> int:
        text = Path(args.path).read_text(encoding="utf-8-sig")
        malformed = [line for line in store.lexer.tokenize(text) if line.status == MALFORMED]
        self.formatter.show_lint(malformed, args.path)
        return EXIT_CONFIG_ERROR if malformed else EXIT_OK

    def run(self, argv: Optional[List[str]] = None) -> int:
        """Primary routing entry point. Returns the process exit code."""
        args = self.parser.parse_args(argv)
        if not args.command:
            self.parser.print_help()
            return EXIT_OK

        logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

        try:
            store = LineStore(separator=args.separator)
            if args.command == "show":
                self._cmd_show(args, store)
            elif args.command == "get":
                self._cmd_get(args, store)
            elif args.command == "lint":
                return self._cmd_lint(args, store)
        except OSError as e:
            logger.debug(f"I/O failure for {args.path}", exc_info=True)
            self.formatter.show_error(f"cannot read '{args.path}': {e.strerror or e}")
            return EXIT_IO_ERROR
        except (ConfigError, ValueError) as e:
            self.formatter.show_error(str(e))
            return EXIT_CONFIG_ERROR
        return EXIT_OK


def main(argv: Optional[List[str]] = None) -> int:
    """Application entry point with interrupt handling."""
    try:
        return KvBindCLI().run(argv)
    except KeyboardInterrupt:
        KvFormatter().show_error("terminated by user.")
        return EXIT_CONFIG_ERROR


if __name__ == "__main__":
    sys.exit(main())
