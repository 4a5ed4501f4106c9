"""Store adapters - Implementations of the TravelStorePort.

Available implementations:
- InMemoryTravelStore: Thread-safe in-memory store
- JsonFileTravelStore: One JSON document per itinerary
"""

from .json_store import JsonFileTravelStore
from .memory_store import InMemoryTravelStore

__all__ = ["InMemoryTravelStore", "JsonFileTravelStore"]
