"""
API-specific constants: endpoint, query parameters and headers.

Defines the fixed request shape used when querying the Materials Project
oxidation states endpoint.

DO NOT change these without understanding API behavior.
"""

# ============================================================================
# Endpoint
# ============================================================================

MP_API_BASE_URL = "https://api.materialsproject.org"
OXIDATION_STATES_PATH = "/materials/oxidation_states/"
OXIDATION_STATES_URL = f"{MP_API_BASE_URL}{OXIDATION_STATES_PATH}"

# ============================================================================
# Query Parameters
# ============================================================================

# Single page of up to 100 documents, all fields, BY-C licensed data only
PER_PAGE = 100
SKIP = 0
LIMIT = 100
LICENSE = "BY-C"

DEFAULT_QUERY_PARAMS = {
    "_per_page": PER_PAGE,
    "_skip": SKIP,
    "_limit": LIMIT,
    "_all_fields": "true",
    "license": LICENSE,
}

# Key the search term is sent under
FORMULA_PARAM = "formula"

# ============================================================================
# Headers
# ============================================================================

API_KEY_HEADER = "X-API-KEY"
ACCEPT_JSON = "application/json"
