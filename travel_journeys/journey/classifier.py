"""Split a flat segment list into main transport and transfers.

The flat format carries no structure beyond array order, so the split
is a best-effort policy rather than a validated contract:

1. Main candidates are the segments explicitly marked ``role="main"``
   when any segment carries that hint; otherwise every segment of a
   main type (flight, train, bus, ferry, other).
2. The first candidate's type wins. Candidates of another type are
   dropped, a direction has exactly one main transport type.
3. Transfers are taxis, trains not picked as main transport, and
   anything marked ``role="transfer"``. Their side is decided purely by
   position: before the first main segment goes "to", after the last
   one goes "from". Without main transport every transfer goes "to".
"""

from __future__ import annotations

import logging
from typing import Optional, Sequence

from ..domain.models import (
    FlatSegment,
    MainTransportType,
    SegmentClassification,
    SegmentRole,
    SegmentType,
)

logger = logging.getLogger(__name__)

MAIN_TYPES = frozenset(t.value for t in MainTransportType)


def _is_main_type(segment_type: str) -> bool:
    return segment_type in MAIN_TYPES and segment_type != SegmentType.TAXI.value


def select_main_candidates(
    segments: Sequence[FlatSegment],
) -> tuple[tuple[int, FlatSegment], ...]:
    """Positions and segments that may become main-transport legs."""
    explicit = tuple(
        (index, segment)
        for index, segment in enumerate(segments)
        if segment.role == SegmentRole.MAIN.value and _is_main_type(segment.type)
    )
    if explicit:
        return explicit

    return tuple(
        (index, segment)
        for index, segment in enumerate(segments)
        if segment.role != SegmentRole.TRANSFER.value and _is_main_type(segment.type)
    )


def select_dominant_main_type(candidates: Sequence[FlatSegment]) -> Optional[str]:
    """First occurrence wins; None when there is no candidate."""
    if not candidates:
        return None
    return candidates[0].type


def is_transfer_segment(segment: FlatSegment, is_main: bool) -> bool:
    """Whether a segment that was not used as a leg is a transfer."""
    if is_main:
        return False
    if segment.role == SegmentRole.TRANSFER.value:
        return True
    if segment.role == SegmentRole.MAIN.value:
        return False
    return segment.type in (SegmentType.TAXI.value, SegmentType.TRAIN.value)


def classify_segments(segments: Sequence[FlatSegment]) -> SegmentClassification:
    """Partition one direction's flat segments.

    Args:
        segments: Flat segments in persisted order.

    Returns:
        SegmentClassification with the main type, the legs' segments,
        both transfer groups and whatever was dropped.
    """
    candidates = select_main_candidates(segments)
    main_type = select_dominant_main_type([segment for _, segment in candidates])
    main = tuple(
        (index, segment) for index, segment in candidates if segment.type == main_type
    )
    main_positions = {index for index, _ in main}
    first_main = min(main_positions) if main_positions else None
    last_main = max(main_positions) if main_positions else None

    transfers_to: list[FlatSegment] = []
    transfers_from: list[FlatSegment] = []
    dropped: list[FlatSegment] = []

    for index, segment in enumerate(segments):
        if index in main_positions:
            continue
        if not is_transfer_segment(segment, is_main=False):
            dropped.append(segment)
        elif first_main is None or index < first_main:
            transfers_to.append(segment)
        elif last_main is not None and index > last_main:
            transfers_from.append(segment)
        else:
            # between two legs of the main transport
            dropped.append(segment)

    if dropped:
        logger.debug(
            "Segments dropped during classification",
            extra={
                "dropped_ids": [segment.id for segment in dropped],
                "main_type": main_type,
            },
        )

    return SegmentClassification(
        main_type=main_type,
        main_segments=tuple(segment for _, segment in main),
        transfers_to=tuple(transfers_to),
        transfers_from=tuple(transfers_from),
        dropped=tuple(dropped),
    )
