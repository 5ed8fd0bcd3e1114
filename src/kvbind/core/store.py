#!/usr/bin/env python3
"""
KVBIND LINE STORE
-----------------
The flat name -> value table built from `key=value` text, with an
independent overlay of explicit defaults.

Lookups always prefer loaded values over defaults. A name missing from
both is reported with NotFoundError, never answered with a silent zero.

Author: KvBind Team
Date: 2026-10-18
"""

import io
import re
import logging
from pathlib import Path
from typing import Dict, Any, Union

from kvbind.core.errors import NotFoundError, MalformedValueError
from kvbind.core.models import MALFORMED
from kvbind.parsing.lexer import LineLexer, DEFAULT_SEPARATOR
from kvbind.binding.binder import FieldBinder

logger = logging.getLogger("kvbind.store")

# Base-10 signed integers: optional sign, ASCII digits only
INT_PATTERN = re.compile(r"[+-]?[0-9]+")

TRUE_LITERALS = frozenset({"1", "t", "true"})
FALSE_LITERALS = frozenset({"0", "f", "false"})

SOURCE_VALUE = "value"
SOURCE_DEFAULT = "default"


class LineStore:
    """
    Accumulates raw configuration values from files, strings or any
    object with a readline() method.

    The store is single-owner: concurrent loads on one instance are not
    synchronised.
    """

    def __init__(self, separator: str = DEFAULT_SEPARATOR):
        self.lexer = LineLexer(separator=separator)
        self.values: Dict[str, str] = {}
        self.defaults: Dict[str, str] = {}

    @property
    def separator(self) -> str:
        return self.lexer.separator

    # --- LOADING ---

    def load_file(self, path: Union[str, Path]):
        """
        Streams a file into the store. The handle is closed on every exit path.
        Raises OSError when the file cannot be opened or read.
        """
        # utf-8-sig drops a leading BOM; newline="\n" keeps "\r" out of the delimiter set
        with open(path, "r", encoding="utf-8-sig", newline="\n") as fh:
            self.load_reader(fh)
        logger.info(f"Loaded config file: {path}")

    def load_string(self, text: str):
        """Parses an in-memory string with the same rules as load_file."""
        self.load_reader(io.StringIO(text, newline="\n"))

    def load_reader(self, source: Any):
        """
        The common engine: pulls lines from `source.readline()` until it
        returns an empty value. The last fragment is parsed even without a
        trailing newline. Read errors propagate; lines parsed before the
        failure stay in the store.
        """
        line_no = 0
        while True:
            line = source.readline()
            if not line:
                return
            if isinstance(line, bytes):
                line = line.decode("utf-8")
            line_no += 1
            self._set_line(line, line_no)

    def _set_line(self, line: str, line_no: int = 0):
        parsed = self.lexer.classify(line, line_no)
        if parsed.is_entry:
            self.values[parsed.name] = parsed.value
        elif parsed.status == MALFORMED:
            logger.debug(f"Ignoring malformed line {line_no}: {parsed.raw_line!r}")

    def set_default(self, name: str, value: str):
        """Registers a fallback value. Parsing never touches defaults."""
        self.defaults[name.strip()] = value.strip()

    # --- LOOKUPS ---

    def get_str(self, name: str) -> str:
        if name in self.values:
            return self.values[name]
        if name in self.defaults:
            return self.defaults[name]
        raise NotFoundError(name)

    def get_int(self, name: str) -> int:
        """Reads a base-10 signed integer such as "28", "-3" or "+7"."""
        raw = self.get_str(name)
        if not INT_PATTERN.fullmatch(raw):
            raise MalformedValueError(name, raw, "integer")
        try:
            return int(raw)
        except ValueError as e:
            # Digit strings past the interpreter conversion limit
            raise MalformedValueError(name, raw, "integer", detail=str(e)) from e

    def get_bool(self, name: str) -> bool:
        """Accepts 1/t/true and 0/f/false in any letter case."""
        raw = self.get_str(name)
        literal = raw.lower()
        if literal in TRUE_LITERALS:
            return True
        if literal in FALSE_LITERALS:
            return False
        raise MalformedValueError(name, raw, "boolean")

    def bind(self, record: Any) -> Any:
        """Populates a dataclass instance from this store. See kvbind.binding.binder."""
        return FieldBinder(self).bind(record)

    # --- VIEWS ---

    def __contains__(self, name: object) -> bool:
        return name in self.values or name in self.defaults

    def source_of(self, name: str) -> str:
        """Tells whether a lookup for `name` is answered by a value or a default."""
        if name in self.values:
            return SOURCE_VALUE
        if name in self.defaults:
            return SOURCE_DEFAULT
        raise NotFoundError(name)

    def resolved(self) -> Dict[str, str]:
        """
        Merged view: loaded values in load order, then defaults that no
        value overrides.
        """
        merged = dict(self.values)
        for name, value in self.defaults.items():
            merged.setdefault(name, value)
        return merged
