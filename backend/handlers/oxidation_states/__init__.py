"""
Oxidation state handlers for Materials Project API.

This module provides the relay handler for the oxidation states endpoint.
"""

from .relay_handler import OxidationStateHandler, RelayResponse

__all__ = [
    "OxidationStateHandler",
    "RelayResponse",
]
