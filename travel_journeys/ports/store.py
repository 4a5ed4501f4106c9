"""Travel store port - Abstraction over the persistence collaborator.

The journey engine never talks to a database directly. The store hands
out and accepts flat segment arrays per direction plus the additional
travel list, exactly the boundary representation the engine flattens to.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from ..domain.models import ItineraryTravel


class TravelStorePort(Protocol):
    """Port for loading and saving an itinerary's travel data.

    Implementations:
    - adapters/store/memory_store.py (InMemoryTravelStore)
    - adapters/store/json_store.py (JsonFileTravelStore)
    """

    def load(self, itinerary_id: str) -> ItineraryTravel:
        """Load the travel data of one itinerary.

        Args:
            itinerary_id: The itinerary identifier.

        Returns:
            The stored travel data.

        Raises:
            ItineraryNotFoundError: If nothing is stored for the itinerary.
            StoreError: If the backing storage cannot be read.
        """
        ...

    def save(self, itinerary_id: str, travel: ItineraryTravel) -> None:
        """Replace the travel data of one itinerary.

        Args:
            itinerary_id: The itinerary identifier.
            travel: Flattened travel data to persist.

        Raises:
            StoreError: If the backing storage cannot be written.
        """
        ...

    def exists(self, itinerary_id: str) -> bool:
        """Check whether travel data is stored for the itinerary."""
        ...
