"""
Centralized constants for the handler modules.

Organization:
    - api.py: Materials Project endpoint, query parameter and header constants

Usage:
    from backend.handlers.constants import OXIDATION_STATES_URL
"""

from .api import (
    MP_API_BASE_URL,
    OXIDATION_STATES_PATH,
    OXIDATION_STATES_URL,
    DEFAULT_QUERY_PARAMS,
    FORMULA_PARAM,
    API_KEY_HEADER,
    ACCEPT_JSON,
)
