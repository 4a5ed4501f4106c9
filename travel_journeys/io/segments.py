"""Flat travel segment records.

The persisted form of a journey direction: an array of camelCase
objects (``fromLocation``, ``departureTime`` ...). Encoders emit only
model fields and leave out ``None`` values; decoders tolerate missing
keys and ``null`` values and only reject payloads that are not JSON
objects or arrays at all.
"""

from __future__ import annotations

from dataclasses import MISSING, fields, is_dataclass
from enum import Enum
from typing import Any, Iterable, Mapping, Optional

from ..domain.errors import SegmentFormatError
from ..domain.models import FlatSegment
from ..journey.ids import generate_segment_id


def to_camel(name: str) -> str:
    head, *rest = name.rstrip("_").split("_")
    return head + "".join(part.title() for part in rest)


def require_mapping(data: Any, what: str) -> Mapping[str, Any]:
    if not isinstance(data, Mapping):
        raise SegmentFormatError(
            f"Expected a JSON object for {what}",
            payload_type=type(data).__name__,
        )
    return data


def require_list(data: Any, what: str) -> list[Any]:
    if data is None:
        return []
    if not isinstance(data, (list, tuple)):
        raise SegmentFormatError(
            f"Expected a JSON array for {what}",
            payload_type=type(data).__name__,
        )
    return list(data)


def text_value(value: Any) -> str:
    if value is None:
        return ""
    return str(value)


def optional_text(value: Any) -> Optional[str]:
    if value is None:
        return None
    return str(value)


def int_value(value: Any, default: int) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        return default


def read_text_fields(cls: type, data: Mapping[str, Any], skip: Iterable[str]) -> dict[str, Any]:
    """Plain string fields of ``cls``; optional ones stay None when absent."""
    skipped = set(skip)
    values: dict[str, Any] = {}
    for f in fields(cls):
        if f.name in skipped:
            continue
        raw = data.get(to_camel(f.name))
        if f.default is None:
            values[f.name] = optional_text(raw)
        elif f.default is not MISSING or raw is not None:
            values[f.name] = text_value(raw)
    return values


def encode_fields(obj: Any) -> dict[str, Any]:
    out: dict[str, Any] = {}
    for f in fields(obj):
        value = getattr(obj, f.name)
        if value is None:
            continue
        if isinstance(value, Enum):
            value = value.value
        elif is_dataclass(value):
            value = encode_fields(value)
        elif isinstance(value, tuple):
            value = [encode_fields(item) for item in value]
        out[to_camel(f.name)] = value
    return out


def segment_from_dict(data: Any) -> FlatSegment:
    record = require_mapping(data, "travel segment")
    values = read_text_fields(FlatSegment, record, skip=("id", "type"))
    return FlatSegment(
        id=text_value(record.get("id")) or generate_segment_id(),
        type=text_value(record.get("type")),
        **values,
    )


def segment_to_dict(segment: FlatSegment) -> dict[str, Any]:
    return encode_fields(segment)


def segments_from_list(data: Any) -> tuple[FlatSegment, ...]:
    return tuple(segment_from_dict(item) for item in require_list(data, "travel segments"))


def segments_to_list(segments: Iterable[FlatSegment]) -> list[dict[str, Any]]:
    return [segment_to_dict(segment) for segment in segments]

