"""
View state for the oxidation state search page.

Holds the query text, the current result list, the loading flag and the error
message, and performs the call to the relay. Rendering lives in
``streamlit_app`` so that this module stays importable without Streamlit.
"""

import logging
import os
from typing import Any, Dict, List, Optional

import requests

_log = logging.getLogger(__name__)

DEFAULT_RELAY_URL = "http://localhost:8000/api/oxidation-state"
RELAY_URL_ENV = "RELAY_URL"

EMPTY_QUERY_MESSAGE = "Please enter a search term."
FETCH_FAILED_MESSAGE = "Failed to fetch data."


class SearchView:
    """Form-and-results state for one search surface."""

    def __init__(self, relay_url: Optional[str] = None):
        self.relay_url = relay_url or os.getenv(RELAY_URL_ENV, DEFAULT_RELAY_URL)
        self.query: str = ""
        self.results: List[Dict[str, Any]] = []
        self.loading: bool = False
        self.error: str = ""
        # Incremented per submit; only the newest call may write state
        self._generation = 0

    def submit(self) -> None:
        """Run one search for the current query text."""
        if not self.query.strip():
            self.error = EMPTY_QUERY_MESSAGE
            return

        self._generation += 1
        generation = self._generation
        self.loading = True
        self.error = ""

        try:
            results = self._fetch(self.query)
            if generation == self._generation:
                self.results = results
        except Exception as e:
            if generation == self._generation:
                self.error = str(e)
        finally:
            if generation == self._generation:
                self.loading = False

    def _fetch(self, query: str) -> List[Dict[str, Any]]:
        res = requests.get(self.relay_url, params={"query": query})
        data = res.json()
        _log.debug(f"Relay response: {data}")
        if not res.ok:
            error = data.get("error") if isinstance(data, dict) else data
            _log.warning(f"Relay returned {res.status_code}: {error}")
            raise RuntimeError(FETCH_FAILED_MESSAGE)
        return data["data"]


def format_symmetry(item: Dict[str, Any]) -> str:
    symmetry = item.get("symmetry") or {}
    return f"{symmetry.get('crystal_system')} ({symmetry.get('symbol')})"


def format_card_lines(item: Dict[str, Any]) -> List[str]:
    """Markdown lines describing one material record, below its formula heading."""
    return [
        f"**Material ID:** {item.get('material_id')}",
        f"**Density:** {item.get('density')} g/cm³",
        f"**Volume:** {item.get('volume')} Å³",
        f"**Symmetry:** {format_symmetry(item)}",
    ]


def format_oxidation_states(item: Dict[str, Any]) -> List[str]:
    states = item.get("average_oxidation_states") or {}
    return [f"**{element}:** {value}" for element, value in states.items()]
