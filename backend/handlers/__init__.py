"""
Materials Project API endpoint handlers.

This package contains handlers for the upstream endpoints the app relays:
- oxidation_states/: Oxidation state search by formula
- constants/: Endpoint, query parameter and header constants
"""

from .oxidation_states import OxidationStateHandler, RelayResponse

__all__ = [
    "OxidationStateHandler",
    "RelayResponse",
]
