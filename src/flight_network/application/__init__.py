"""
Application layer for the Flight Network.

This layer provides the public API for the flight network engine. It
acts as a facade, handling dependency initialization and providing a
simple interface for consumers.
"""

from src.flight_network.application.flight_network import FlightNetwork

__all__ = ["FlightNetwork"]
