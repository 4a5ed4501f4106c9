"""Services layer - Application orchestration.

This module contains the application services that connect the
journey engine to the travel store.

Available services:
- TravelEditorService: Opens, edits and syncs itinerary travel
"""

from .travel_editor import TravelEditorService, TravelSession

__all__ = ["TravelEditorService", "TravelSession"]
