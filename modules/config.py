"""
Runtime configuration — read from the environment (``.env`` is loaded by app.py).
"""

from __future__ import annotations

import os

# ---------------------------------------------------------------------------
# Upstream endpoints
# ---------------------------------------------------------------------------

OVERPASS_URL = os.getenv("OVERPASS_URL", "https://overpass-api.de/api/interpreter")
NOMINATIM_SEARCH_URL = os.getenv(
    "NOMINATIM_SEARCH_URL", "https://nominatim.openstreetmap.org/search"
)

# Both OSM services reject anonymous clients.
HTTP_USER_AGENT = os.getenv(
    "HTTP_USER_AGENT", "Urbanscope/0.1.0 (https://example.com)"
)

# ---------------------------------------------------------------------------
# Timeouts / limits
# ---------------------------------------------------------------------------

HTTP_TIMEOUT_S = float(os.getenv("HTTP_TIMEOUT_S", "60"))
OVERPASS_TIMEOUT_S = int(os.getenv("OVERPASS_TIMEOUT_S", "30"))  # advisory, server-side
GEOSEARCH_LIMIT = int(os.getenv("GEOSEARCH_LIMIT", "5"))
