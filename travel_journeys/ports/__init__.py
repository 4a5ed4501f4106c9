"""Ports layer - Abstract interfaces (Protocols) for the application.

Ports define the contracts between the journey engine and external
adapters. They enable dependency injection and make the system testable.
"""

from .store import TravelStorePort

__all__ = ["TravelStorePort"]
