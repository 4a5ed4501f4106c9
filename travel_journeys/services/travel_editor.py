"""Travel editor service - Journey editing orchestrator.

This service ties the pure journey engine to a travel store: it loads
the flat segments of an itinerary, hands out structured journeys for
editing and writes the flattened result back.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from typing import Optional

from ..config import AppConfig, get_config
from ..domain.errors import ItineraryNotFoundError
from ..domain.models import (
    AdditionalTravelSegment,
    Direction,
    ItineraryTravel,
    JourneyTravel,
    MainTransportType,
    TransferDirection,
    TransferType,
)
from ..journey.additional import sort_additional_travel
from ..journey.builder import segments_to_journey
from ..journey.editing import add_transfer, update_journey_transfers
from ..journey.factories import create_empty_journey
from ..journey.flattener import journey_to_segments
from ..journey.labels import (
    get_transfer_label,
    get_transfer_section_label,
    get_transport_label,
)
from ..journey.layover import describe_layover
from ..ports.store import TravelStorePort


@dataclass(frozen=True, slots=True)
class TravelSession:
    """Structured travel of one itinerary while it is being edited."""

    outbound: JourneyTravel
    return_: JourneyTravel
    additional: tuple[AdditionalTravelSegment, ...] = ()

    def journey(self, direction: Direction) -> JourneyTravel:
        if Direction(direction) == Direction.OUTBOUND:
            return self.outbound
        return self.return_

    def with_journey(self, direction: Direction, journey: JourneyTravel) -> TravelSession:
        if Direction(direction) == Direction.OUTBOUND:
            return replace(self, outbound=journey)
        return replace(self, return_=journey)

    def with_additional(
        self, additional: tuple[AdditionalTravelSegment, ...]
    ) -> TravelSession:
        return replace(self, additional=tuple(additional))


@dataclass
class TravelEditorService:
    """Main service for editing the travel of an itinerary.

    Attributes:
        store: Where flat travel data is loaded from and saved to
        config: Application configuration
    """

    store: TravelStorePort
    config: AppConfig = field(default_factory=get_config)

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    @property
    def default_main_type(self) -> MainTransportType:
        return MainTransportType(self.config.journey.default_main_type)

    def _build(self, travel: ItineraryTravel, direction: Direction) -> JourneyTravel:
        segments = travel.segments(direction)
        if not segments:
            return create_empty_journey(self.default_main_type)
        return segments_to_journey(segments, self.default_main_type)

    def session_from_travel(self, travel: ItineraryTravel) -> TravelSession:
        """Structure already loaded travel data without touching the store."""
        return TravelSession(
            outbound=self._build(travel, Direction.OUTBOUND),
            return_=self._build(travel, Direction.RETURN),
            additional=tuple(travel.additional),
        )

    def open_session(self, itinerary_id: str) -> TravelSession:
        """Load an itinerary and build both journeys.

        An itinerary without stored travel opens with empty default
        journeys. Additional travel keeps its stored order; only the
        summary sorts it by date.

        Args:
            itinerary_id: Identifier of the itinerary.

        Returns:
            TravelSession ready for editing.

        Raises:
            StoreError: If the stored data cannot be read.
        """
        try:
            travel = self.store.load(itinerary_id)
        except ItineraryNotFoundError:
            self._logger.info(
                "No stored travel, starting empty",
                extra={"itinerary_id": itinerary_id},
            )
            travel = ItineraryTravel()

        session = self.session_from_travel(travel)
        self._logger.info(
            "Travel session opened",
            extra={
                "itinerary_id": itinerary_id,
                "outbound_segments": len(travel.outbound),
                "return_segments": len(travel.return_),
                "additional": len(session.additional),
            },
        )
        return session

    def add_transfer(
        self,
        session: TravelSession,
        direction: Direction,
        side: TransferDirection,
        transfer_type: Optional[TransferType] = None,
    ) -> TravelSession:
        """Append an empty transfer, of the configured default type unless given."""
        kind = TransferType(transfer_type or self.config.journey.default_transfer_type)
        journey = session.journey(direction)
        transfers = add_transfer(journey.transfers(side), kind)
        return session.with_journey(
            direction, update_journey_transfers(journey, side, transfers)
        )

    def flatten(self, session: TravelSession) -> ItineraryTravel:
        return ItineraryTravel(
            outbound=journey_to_segments(session.outbound),
            return_=journey_to_segments(session.return_),
            additional=tuple(session.additional),
        )

    def sync(self, itinerary_id: str, session: TravelSession) -> ItineraryTravel:
        """Flatten both journeys and persist them with the additional travel.

        Returns:
            The ItineraryTravel that was saved.

        Raises:
            StoreError: If the store rejects the write.
        """
        travel = self.flatten(session)
        self.store.save(itinerary_id, travel)
        self._logger.info(
            "Travel session synced",
            extra={
                "itinerary_id": itinerary_id,
                "outbound_segments": len(travel.outbound),
                "return_segments": len(travel.return_),
                "additional": len(travel.additional),
            },
        )
        return travel

    def summarize(self, session: TravelSession) -> str:
        """Plain-text overview of a session, one line per item.

        Additional travel is listed chronologically.
        """
        lines: list[str] = []
        for direction, title in ((Direction.OUTBOUND, "Outbound"), (Direction.RETURN, "Return")):
            lines.append(f"{title} journey")
            lines.extend(_journey_lines(session.journey(direction)))
        if session.additional:
            lines.append("Additional travel")
            ordered = sort_additional_travel(
                session.additional, self.config.journey.additional_date_order
            )
            for segment in ordered:
                route = f"{segment.from_location or '?'} -> {segment.to_location or '?'}"
                date = f" on {segment.date}" if segment.date else ""
                lines.append(f"  {get_transport_label(segment.type)}: {route}{date}")
        return "\n".join(lines)


def _journey_lines(journey: JourneyTravel) -> list[str]:
    main = journey.main_transport
    main_type = main.type if main is not None else MainTransportType.FLIGHT
    lines: list[str] = []

    def transfer_lines(side: TransferDirection) -> None:
        transfers = journey.transfers(side)
        if not transfers:
            return
        lines.append(f"  {get_transfer_section_label(main_type, side)}")
        for transfer in sorted(transfers, key=lambda t: t.order):
            route = f"{transfer.pickup_location or '?'} -> {transfer.dropoff_location or '?'}"
            lines.append(f"    {get_transfer_label(transfer.type)}: {route}")

    transfer_lines(TransferDirection.TO)
    if main is not None:
        date = f" on {main.date}" if main.date else ""
        lines.append(f"  {get_transport_label(main.type)}{date}")
        for index, leg in enumerate(main.legs):
            if index:
                previous = main.legs[index - 1]
                lines.append(f"      {describe_layover(previous.arrival_time, leg.departure_time)}")
            route = f"{leg.departure_point(main.type) or '?'} -> {leg.arrival_point(main.type) or '?'}"
            times = f" {leg.departure_time}-{leg.arrival_time}" if leg.departure_time else ""
            lines.append(f"    Leg {leg.leg_number}: {route}{times}")
    transfer_lines(TransferDirection.FROM)
    return lines
