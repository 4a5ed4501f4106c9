"""Top-level package for the travel journeys engine.

The package turns the flat, ordered travel segments stored for an
itinerary into structured journeys (transfers to the hub, a main
transport of one or more legs, transfers from the hub) and back, and
normalizes additional travel from both the unified and the legacy
per-type record shapes.
"""
