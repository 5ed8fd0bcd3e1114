#!/usr/bin/env python3
"""
KVBIND FIELD DESCRIPTORS
------------------------
Derives the binding table of a dataclass: for every field, its logical
config name and its coercion kind.

Naming rules:
    setting("db_host")      -> binds to "db_host"
    setting("port,opt")     -> binds to "port" (text after the comma is ignored)
    setting("-")            -> never bound
    embedded(Inner)         -> never bound; Inner's own fields are not promoted
    no tag                  -> binds to the attribute name
"""

import dataclasses
import types
from typing import Annotated, Any, List, Optional, Tuple, Union, get_args, get_origin, get_type_hints

from kvbind.binding.kinds import IntRange
from kvbind.core.errors import UnsupportedTypeError
from kvbind.core.models import FieldKind, FieldSpec

TAG_KEY = "config"
EMBEDDED_KEY = "embedded"
SKIP_TAG = "-"


def setting(tag: str, **kwargs) -> Any:
    """dataclasses.field() carrying a config naming tag."""
    metadata = dict(kwargs.pop("metadata", None) or {})
    metadata[TAG_KEY] = tag
    return dataclasses.field(metadata=metadata, **kwargs)


def embedded(factory: Any, **kwargs) -> Any:
    """dataclasses.field() for a nested record that binding must skip."""
    metadata = dict(kwargs.pop("metadata", None) or {})
    metadata[EMBEDDED_KEY] = True
    return dataclasses.field(default_factory=factory, metadata=metadata, **kwargs)


def field_name(f: dataclasses.Field) -> str:
    """Logical name of a field; "" when the field opts out of binding."""
    if f.metadata.get(EMBEDDED_KEY):
        return ""
    tag = f.metadata.get(TAG_KEY, "")
    if tag:
        if tag == SKIP_TAG:
            return ""
        return tag.split(",")[0].strip()
    return f.name


def _unwrap(hint: Any) -> Tuple[Any, Optional[IntRange]]:
    """Peels Annotated and Optional layers, keeping the first IntRange marker."""
    marker = None
    while True:
        origin = get_origin(hint)
        if origin is Annotated:
            base, *extras = get_args(hint)
            if marker is None:
                marker = next((m for m in extras if isinstance(m, IntRange)), None)
            hint = base
        elif origin is Union or origin is types.UnionType:
            members = [a for a in get_args(hint) if a is not type(None)]
            if len(members) != 1:
                return hint, marker
            hint = members[0]
        else:
            return hint, marker


def resolve_kind(hint: Any) -> Tuple[FieldKind, Optional[IntRange]]:
    base, marker = _unwrap(hint)
    # bool before int: bool is an int subclass
    if base is bool:
        return FieldKind.BOOLEAN, None
    if base is int:
        if marker is None:
            marker = IntRange(signed=True)
        return (FieldKind.SIGNED if marker.signed else FieldKind.UNSIGNED), marker
    if base is str:
        return FieldKind.TEXT, None
    return FieldKind.UNSUPPORTED, None


def describe(record_type: type) -> List[FieldSpec]:
    """Builds the FieldSpec table of a dataclass type, in declaration order."""
    try:
        hints = get_type_hints(record_type, include_extras=True)
    except NameError as e:
        raise UnsupportedTypeError(
            f"cannot resolve annotations of {record_type.__name__}: {e}"
        ) from e

    specs = []
    for f in dataclasses.fields(record_type):
        hint = hints.get(f.name, f.type)
        kind, marker = resolve_kind(hint)
        specs.append(FieldSpec(
            attr=f.name,
            name=field_name(f),
            kind=kind,
            bits=marker.bits if marker else None,
            hint=hint
        ))
    return specs
