"""Journey engine - flat segments <-> structured journeys.

Pure functions only: classification, building, flattening, edits,
layovers, labels and legacy additional-travel normalization. The legacy
outbound/return converters live in ``journey.legacy`` and are not
re-exported here because they depend on the segment codec in
``io.segments``.
"""

from .additional import (
    legacy_to_additional_travel,
    select_primary_location_field,
    sort_additional_travel,
)
from .builder import segments_to_journey
from .classifier import classify_segments, select_dominant_main_type
from .factories import (
    create_empty_additional_travel,
    create_empty_journey,
    create_empty_leg,
    create_empty_main_transport,
    create_empty_transfer,
)
from .flattener import journey_to_segments
from .ids import generate_id, generate_segment_id
from .layover import calculate_layover, describe_layover, leg_layovers

__all__ = [
    "generate_id",
    "generate_segment_id",
    "calculate_layover",
    "describe_layover",
    "leg_layovers",
    "create_empty_leg",
    "create_empty_main_transport",
    "create_empty_transfer",
    "create_empty_journey",
    "create_empty_additional_travel",
    "classify_segments",
    "select_dominant_main_type",
    "segments_to_journey",
    "journey_to_segments",
    "legacy_to_additional_travel",
    "select_primary_location_field",
    "sort_additional_travel",
]
