"""
Relay handler for the Materials Project oxidation states endpoint.

Forwards a formula search to the upstream API with the server-held key and
reshapes the outcome into a (status code, JSON body) pair for the web layer.
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional

import requests

from ..constants.api import (
    OXIDATION_STATES_URL,
    DEFAULT_QUERY_PARAMS,
    FORMULA_PARAM,
    API_KEY_HEADER,
    ACCEPT_JSON,
)

_log = logging.getLogger(__name__)

INVALID_INPUT_MESSAGE = "Missing or invalid 'input' parameter."
MISSING_API_KEY_MESSAGE = "API Key is missing from environment variables."
INTERNAL_ERROR_MESSAGE = "Internal Server Error"

# Every upstream failure status is reported to the caller as this one code
UPSTREAM_ERROR_STATUS = 404


def _reject_constant(name: str):
    # NaN and Infinity are not JSON and cannot be serialized back to the caller
    raise ValueError(f"Invalid JSON constant: {name}")


@dataclass
class RelayResponse:
    """Status code and JSON-serializable body returned to the caller."""
    status_code: int
    body: Any


class OxidationStateHandler:
    """Handler for the oxidation-state search relay."""

    def __init__(self, api_key: Optional[str], url: str = OXIDATION_STATES_URL):
        """
        Initialize the handler.

        Args:
            api_key: Materials Project API key (None or empty if not configured)
            url: Upstream oxidation states endpoint
        """
        self.api_key = api_key
        self.url = url

    def build_request(self, query: str) -> Dict[str, Any]:
        """Return the keyword arguments for the outbound ``requests.get`` call."""
        params = {FORMULA_PARAM: query}
        params.update(DEFAULT_QUERY_PARAMS)
        return {
            "params": params,
            "headers": {
                API_KEY_HEADER: self.api_key,
                "Accept": ACCEPT_JSON,
            },
        }

    def handle_oxidation_state_search(self, params: Mapping[str, Any]) -> RelayResponse:
        """Handle materials/oxidation_states search by formula."""
        query = params.get("query")
        _log.info(f"GET materials/oxidation_states with query: {query!r}")

        if not isinstance(query, str) or not query.strip():
            return RelayResponse(400, {"error": INVALID_INPUT_MESSAGE})

        if not self.api_key:
            _log.error("Materials Project API key is not configured")
            return RelayResponse(500, {"error": MISSING_API_KEY_MESSAGE})

        try:
            response = requests.get(self.url, **self.build_request(query))

            if not response.ok:
                error_body = response.json(parse_constant=_reject_constant)
                _log.warning(
                    f"Materials Project returned {response.status_code} for query {query!r}"
                )
                return RelayResponse(UPSTREAM_ERROR_STATUS, {"error": error_body})

            return RelayResponse(200, response.json(parse_constant=_reject_constant))
        except Exception as e:
            _log.error(f"Error fetching data from Materials Project API: {e}", exc_info=True)
            return RelayResponse(500, {"error": INTERNAL_ERROR_MESSAGE})
