#!/usr/bin/env python3
"""
KVBIND LEXER - Line Classifier
------------------------------
Decomposes raw configuration text into ConfigLine models.

Grammar, per physical line after trimming surrounding whitespace:
    ""              -> blank
    "#..."          -> comment
    "name=value"    -> entry (split on the first separator)
    anything else   -> malformed (no separator, or an empty name)

Author: KvBind Team
Date: 2026-10-18
"""

from typing import List
from kvbind.core.models import ConfigLine, ENTRY, BLANK, COMMENT, MALFORMED

DEFAULT_SEPARATOR = "="
DEFAULT_COMMENT_PREFIX = "#"


class LineLexer:
    """
    Turns single lines into ConfigLine models.
    Stateless apart from its separator and comment prefix.
    """

    def __init__(self, separator: str = DEFAULT_SEPARATOR,
                 comment_prefix: str = DEFAULT_COMMENT_PREFIX):
        if not separator:
            raise ValueError("separator must be a non-empty string")
        if not comment_prefix:
            raise ValueError("comment_prefix must be a non-empty string")
        self.separator = separator
        self.comment_prefix = comment_prefix

    def _strip_delimiter(self, line: str) -> str:
        """Drops the trailing newline kept by readline()."""
        if line.endswith("\n"):
            line = line[:-1]
        return line

    def classify(self, line: str, line_no: int = 0) -> ConfigLine:
        """
        Classifies one line and, for entries, extracts the name and value.
        Example: "  port = 8080 " -> ConfigLine(status=ENTRY, name="port", value="8080")
        """
        raw_line = self._strip_delimiter(line)
        trimmed = raw_line.strip()

        if not trimmed:
            return ConfigLine(line_no=line_no, status=BLANK, raw_line=raw_line)
        if trimmed.startswith(self.comment_prefix):
            return ConfigLine(line_no=line_no, status=COMMENT, raw_line=raw_line)

        # A separator at index 0 means an empty name
        if trimmed.find(self.separator) <= 0:
            return ConfigLine(line_no=line_no, status=MALFORMED, raw_line=raw_line)

        name, _, value = trimmed.partition(self.separator)
        return ConfigLine(
            line_no=line_no,
            status=ENTRY,
            name=name.strip(),
            value=value.strip(),
            raw_line=raw_line
        )

    def tokenize(self, text: str) -> List[ConfigLine]:
        """
        Classifies every line of a text, numbering from 1.
        Only "\\n" delimits lines; a stray "\\r" is trimmed as whitespace.
        """
        if not text:
            return []
        lines = text.split("\n")
        # A trailing newline does not open another line
        if lines[-1] == "":
            lines.pop()
        return [self.classify(line, i) for i, line in enumerate(lines, 1)]
