# ═══════════════════════════════════════════════════════════════════════════════
# Smart Rem Solutions — Browser Location Probe
# © 2026 Smart Rem Solutions. All rights reserved.
#
# Provides:
#   • A hidden browser geolocation probe (HTTPS only; requires user consent)
#   • Parsing of the geo_lat / geo_lon query params the probe writes back
#
# The position only biases Google Maps grounding for the analysis request.
# It is optional: denial, timeout or an unsupported browser leave it unset
# and the analysis runs without it.
#
# GDPR NOTE: coordinates live in st.session_state for the session only and
# are never written to the audit log or relayed by email.
# ═══════════════════════════════════════════════════════════════════════════════

from __future__ import annotations

import logging
from typing import Any, Mapping, Optional

import streamlit as st
import streamlit.components.v1 as components

logger = logging.getLogger(__name__)

GEO_LAT_PARAM = "geo_lat"
GEO_LON_PARAM = "geo_lon"

# ─────────────────────────────────────────────────────────────────────────────
# BROWSER GEOLOCATION PROBE
#
# Calls navigator.geolocation.getCurrentPosition() once on load. On success
# it appends ?geo_lat=X&geo_lon=Y to the parent page URL, causing Streamlit
# to re-run with those query params available via st.query_params. Failures
# are silent.
# ─────────────────────────────────────────────────────────────────────────────
_GEO_HTML = """\
<script>
(function () {
  if (!navigator.geolocation) { return; }
  navigator.geolocation.getCurrentPosition(
    function (pos) {
      try {
        var url = new URL(window.parent.location.href);
        if (url.searchParams.get('geo_lat')) { return; }
        url.searchParams.set('geo_lat', pos.coords.latitude.toFixed(4));
        url.searchParams.set('geo_lon', pos.coords.longitude.toFixed(4));
        window.parent.history.replaceState(null, '', url.toString());
        window.parent.location.reload();
      } catch (_ignored) {}
    },
    function (_err) {},
    { timeout: 15000, maximumAge: 600000 }
  );
})();
</script>
"""


def parse_geo_params(params: Mapping[str, Any]) -> Optional[dict[str, float]]:
    """
    Turn ``geo_lat`` / ``geo_lon`` query params into a location dict.

    Returns ``{"latitude": float, "longitude": float}`` or None when either
    value is missing, not numeric or outside the valid WGS84 range.
    """
    raw_lat = params.get(GEO_LAT_PARAM)
    raw_lon = params.get(GEO_LON_PARAM)
    if raw_lat is None or raw_lon is None:
        return None
    # st.query_params may hand back lists for repeated keys
    if isinstance(raw_lat, (list, tuple)):
        raw_lat = raw_lat[0] if raw_lat else None
    if isinstance(raw_lon, (list, tuple)):
        raw_lon = raw_lon[0] if raw_lon else None
    try:
        lat = float(raw_lat)
        lon = float(raw_lon)
    except (TypeError, ValueError):
        return None
    if not (-90.0 <= lat <= 90.0 and -180.0 <= lon <= 180.0):
        return None
    return {"latitude": lat, "longitude": lon}


def render_geo_probe() -> None:
    """Embed the invisible probe. Safe to call on every rerun; renders once."""
    if st.session_state.get("geo_requested"):
        return
    st.session_state.geo_requested = True
    components.html(_GEO_HTML, height=0)


def capture_user_location() -> Optional[dict[str, float]]:
    """
    Resolve the session's location, probing the browser on first call.

    Returns the cached location, the one just read from the query params,
    or None. Never raises.
    """
    if st.session_state.get("user_location"):
        return st.session_state.user_location

    location = parse_geo_params(st.query_params)
    if location is not None:
        st.session_state.user_location = location
        logger.info("Browser location captured for Maps grounding")
        return location

    render_geo_probe()
    return None
