"""Adapters layer - Concrete implementations of ports.

This module contains implementations of the port interfaces,
connecting the journey engine to external systems:
- Travel storage (in-memory, JSON files)
"""
