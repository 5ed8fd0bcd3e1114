#!/usr/bin/env python3
"""
KVBIND FIELD BINDER
-------------------
Projects a LineStore onto a dataclass instance by matching field names.

For every field, in declaration order:
  1. resolve the logical name; skip the field when it is empty,
  2. dispatch on the field kind and fetch a typed value from the store,
  3. write the value back onto the instance.

NotFoundError is the only per-field error that is tolerated: the field
keeps its current value. Any other error aborts the call; fields bound
before it stay bound.

Author: KvBind Team
Date: 2026-10-18
"""

import dataclasses
import logging
from typing import Any

from kvbind.binding.fields import describe
from kvbind.binding.kinds import IntRange
from kvbind.core.errors import NotFoundError, MalformedValueError, UnsupportedTypeError
from kvbind.core.models import FieldKind, FieldSpec

logger = logging.getLogger("kvbind.binder")


class FieldBinder:
    """
    Binds dataclass instances from one store. The store only needs the
    get_str / get_int / get_bool lookups of LineStore.
    """

    def __init__(self, store: Any):
        self.store = store

    def _check_target(self, record: Any):
        if record is None:
            raise UnsupportedTypeError("cannot bind into None")
        if isinstance(record, type) or not dataclasses.is_dataclass(record):
            raise UnsupportedTypeError(
                f"bind target must be a dataclass instance, got {type(record).__name__}"
            )
        params = getattr(type(record), "__dataclass_params__", None)
        if params is not None and params.frozen:
            raise UnsupportedTypeError(
                f"cannot bind into frozen dataclass {type(record).__name__}"
            )

    def _fetch_int(self, spec: FieldSpec) -> int:
        value = self.store.get_int(spec.name)
        limits = IntRange(signed=spec.kind is FieldKind.SIGNED, bits=spec.bits)
        if not limits.contains(value):
            low, high = limits.bounds()
            allowed = f"{low}..{high}" if high is not None else f">= {low}"
            raise MalformedValueError(
                spec.name, str(value), spec.kind.value, detail=f"allowed {allowed}"
            )
        return value

    def _fetch(self, spec: FieldSpec) -> Any:
        if spec.kind in (FieldKind.SIGNED, FieldKind.UNSIGNED):
            return self._fetch_int(spec)
        if spec.kind is FieldKind.TEXT:
            return self.store.get_str(spec.name)
        if spec.kind is FieldKind.BOOLEAN:
            return self.store.get_bool(spec.name)
        raise UnsupportedTypeError(
            f"field '{spec.attr}' has unsupported type {spec.hint!r}"
        )

    def bind(self, record: Any) -> Any:
        """Populates `record` in place and returns it."""
        self._check_target(record)

        for spec in describe(type(record)):
            if spec.skipped:
                logger.debug(f"Skipping field '{spec.attr}'")
                continue
            try:
                value = self._fetch(spec)
            except NotFoundError:
                logger.debug(f"No value for '{spec.name}', keeping {spec.attr}={getattr(record, spec.attr, None)!r}")
                continue
            setattr(record, spec.attr, value)

        return record


def bind(store: Any, record: Any) -> Any:
    """Functional form of FieldBinder(store).bind(record)."""
    return FieldBinder(store).bind(record)
