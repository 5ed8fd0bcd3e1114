#!/usr/bin/env python3
"""
KVBIND EXPORTER - Resolved Table Rendering
------------------------------------------
Renders the merged view of a LineStore either back to `key=value` text or
to a YAML mapping for inspection. Values are always emitted as strings,
exactly as the store holds them.

Author: KvBind Team
Date: 2026-10-18
"""

import io
import logging
from ruamel.yaml import YAML
from ruamel.yaml.comments import CommentedMap

from kvbind.core.store import LineStore, SOURCE_DEFAULT

logger = logging.getLogger("kvbind.exporter")


class StoreExporter:
    """
    Converts a LineStore into text. Entries answered only by a default are
    marked so a reader can tell them apart from loaded values.
    """

    def __init__(self):
        self.yaml = YAML(typ='rt')
        self.yaml.default_flow_style = False
        self.yaml.width = 4096

    def _writable(self, store: LineStore, name: str, value: str) -> bool:
        """Whether the pair reads back unchanged once written as a line."""
        return (bool(name)
                and "\n" not in name and "\n" not in value
                and store.separator not in name
                and not name.startswith(store.lexer.comment_prefix))

    def to_lines(self, store: LineStore) -> str:
        """
        One `name<sep>value` line per resolved name, newline terminated.
        Pairs that cannot survive a reload can only come from set_default
        (an empty name, a name holding the separator or starting with the
        comment prefix, a newline anywhere); they are left out.
        """
        sep = store.separator
        lines = []
        for name, value in store.resolved().items():
            if not self._writable(store, name, value):
                logger.warning(f"Skipping name {name!r}: not representable as a {sep!r} line")
                continue
            lines.append(f"{name}{sep}{value}")
        return "".join(f"{line}\n" for line in lines)

    def _build_map(self, store: LineStore) -> CommentedMap:
        doc = CommentedMap()
        for name, value in store.resolved().items():
            doc[name] = value
            if store.source_of(name) == SOURCE_DEFAULT:
                doc.yaml_add_eol_comment("default", name)
        return doc

    def to_yaml(self, store: LineStore) -> str:
        doc = self._build_map(store)
        if not doc:
            return ""
        stream = io.StringIO()
        self.yaml.dump(doc, stream)
        logger.debug(f"Exported {len(doc)} entries as YAML")
        return stream.getvalue()
