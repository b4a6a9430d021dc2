"""Conversion between local JSON values and Bedrock document values.

botocore serialises a document (tool input schemas, ``toolUse.input``) from
plain ``None``/``bool``/``int``/``float``/``str``/``list``/``dict`` values.
``to_wire_value`` normalises arbitrary JSON-ish input into exactly those
shapes so the serialised document is stable.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, TypeAlias

WireValue: TypeAlias = None | bool | int | float | str | list["WireValue"] | dict[str, "WireValue"]

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1
UINT64_MAX = 2**64 - 1


def _number_to_wire(value: Any) -> int | float | None:
    try:
        as_int = int(value)
    except (TypeError, ValueError, OverflowError):
        as_int = None

    if as_int is not None and as_int == value:
        if INT64_MIN <= as_int <= INT64_MAX:
            return as_int
        if 0 <= as_int <= UINT64_MAX:
            return as_int

    try:
        return float(value)
    except (TypeError, ValueError, OverflowError):
        return None


def to_wire_value(value: Any) -> WireValue:
    # bool first: it is an int subclass
    if value is None or isinstance(value, (bool, str)):
        return value
    if isinstance(value, (list, tuple)):
        return [to_wire_value(v) for v in value]
    if isinstance(value, Mapping):
        return {k: to_wire_value(v) for k, v in value.items()}
    if isinstance(value, complex):
        return None
    return _number_to_wire(value)


def from_wire_value(value: Any) -> Any:
    if isinstance(value, list):
        return [from_wire_value(v) for v in value]
    if isinstance(value, Mapping):
        return {k: from_wire_value(v) for k, v in value.items()}
    return value


def extract_string_field(doc: Any, field_name: str) -> str | None:
    if not isinstance(doc, Mapping):
        return None
    value = doc.get(field_name)
    if isinstance(value, str):
        return value
    return None
