"""Input/output for the journey engine.

``segments`` encodes and decodes flat travel segments; ``wire`` builds
on it for structured journeys, additional travel and whole itinerary
documents exchanged with the persistence layer.
"""
