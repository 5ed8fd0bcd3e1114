#!/usr/bin/env python3
"""
KVBIND CORE MODELS
------------------
Defines the small data structures passed between the lexer, the store
and the binder.

Author: KvBind Team
Date: 2026-10-18
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Any

# Line classifications produced by the lexer
ENTRY = "entry"
BLANK = "blank"
COMMENT = "comment"
MALFORMED = "malformed"


@dataclass
class ConfigLine:
    """
    The atomic unit of a configuration text.

    One ConfigLine is produced for every physical line. Only lines with
    status ENTRY carry a name and a value.
    """
    line_no: int            # 1-based line number, 0 when parsed in isolation
    status: str             # ENTRY, BLANK, COMMENT or MALFORMED
    name: str = ""          # Trimmed text left of the first separator
    value: str = ""         # Trimmed text right of the first separator
    raw_line: str = ""      # The original line, delimiter stripped

    @property
    def is_entry(self) -> bool:
        return self.status == ENTRY


class FieldKind(Enum):
    """Coercion category of a record field."""
    SIGNED = "signed-integer"
    UNSIGNED = "unsigned-integer"
    TEXT = "text"
    BOOLEAN = "boolean"
    UNSUPPORTED = "unsupported"


@dataclass
class FieldSpec:
    """
    Binding descriptor for one dataclass field, computed on demand.

    An empty `name` means the field does not take part in binding.
    """
    attr: str                   # Python attribute name
    name: str                   # Logical config key, "" when skipped
    kind: FieldKind
    bits: Optional[int] = None  # Width for sized integer annotations
    hint: Any = None            # The resolved annotation, kept for error messages

    @property
    def skipped(self) -> bool:
        return self.name == ""
