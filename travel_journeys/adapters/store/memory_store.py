"""Thread-safe in-memory travel store.

Used as the default store binding and in tests. Values are immutable
ItineraryTravel instances, so handing them out needs no copying.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, field
from typing import Any, Dict

from ...domain.errors import ItineraryNotFoundError
from ...domain.models import ItineraryTravel


@dataclass
class InMemoryTravelStore:
    """Travel store keeping itineraries in a dict.

    This store implements the TravelStorePort protocol.

    Attributes:
        name: Store name for logging

    Example:
        store = InMemoryTravelStore(name="wizard")
        store.save("trip-1", travel)
        travel = store.load("trip-1")
    """

    name: str = "memory"

    _store: Dict[str, ItineraryTravel] = field(default_factory=dict, repr=False)
    _lock: threading.RLock = field(default_factory=threading.RLock, repr=False)
    _logger: logging.Logger = field(init=False, repr=False)

    # Statistics
    _loads: int = field(default=0, repr=False)
    _saves: int = field(default=0, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(f"store.{self.name}")

    def load(self, itinerary_id: str) -> ItineraryTravel:
        """Load the travel data of one itinerary.

        Raises:
            ItineraryNotFoundError: If nothing was saved for the itinerary.
        """
        with self._lock:
            travel = self._store.get(itinerary_id)
            if travel is None:
                raise ItineraryNotFoundError(
                    f"No travel data for itinerary {itinerary_id!r}",
                    itinerary_id=itinerary_id,
                )
            self._loads += 1
            return travel

    def save(self, itinerary_id: str, travel: ItineraryTravel) -> None:
        with self._lock:
            self._store[itinerary_id] = travel
            self._saves += 1
            self._logger.debug(
                "Travel saved",
                extra={
                    "itinerary_id": itinerary_id,
                    "outbound": len(travel.outbound),
                    "return": len(travel.return_),
                    "additional": len(travel.additional),
                },
            )

    def exists(self, itinerary_id: str) -> bool:
        with self._lock:
            return itinerary_id in self._store

    def delete(self, itinerary_id: str) -> bool:
        """Remove an itinerary.

        Returns:
            True if the itinerary existed and was removed.
        """
        with self._lock:
            if itinerary_id in self._store:
                del self._store[itinerary_id]
                self._logger.debug("Travel deleted", extra={"itinerary_id": itinerary_id})
                return True
            return False

    def clear(self) -> int:
        """Remove every itinerary.

        Returns:
            Number of itineraries that were removed.
        """
        with self._lock:
            count = len(self._store)
            self._store.clear()
            self._loads = 0
            self._saves = 0
            self._logger.info("Store cleared", extra={"entries_cleared": count})
            return count

    def stats(self) -> Dict[str, Any]:
        """Return store statistics."""
        with self._lock:
            return {
                "size": len(self._store),
                "loads": self._loads,
                "saves": self._saves,
            }
