import os
import sys

import pytest
import streamlit.components.v1 as components

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from services import location


class _State(dict):
    """Attribute-style dict standing in for st.session_state outside a script run."""

    def __getattr__(self, name):
        try:
            return self[name]
        except KeyError as exc:
            raise AttributeError(name) from exc

    def __setattr__(self, name, value):
        self[name] = value


@pytest.fixture
def session(monkeypatch):
    state = _State(user_location=None, geo_requested=False)
    monkeypatch.setattr(location.st, "session_state", state)
    monkeypatch.setattr(location.st, "query_params", {})
    return state


class TestParseGeoParams:
    def test_valid_coordinates(self):
        assert location.parse_geo_params({"geo_lat": "40.4531", "geo_lon": "-3.6883"}) == {
            "latitude": 40.4531,
            "longitude": -3.6883,
        }

    def test_list_values_use_first_entry(self):
        assert location.parse_geo_params({"geo_lat": ["1.5"], "geo_lon": ["2.5"]}) == {
            "latitude": 1.5,
            "longitude": 2.5,
        }

    @pytest.mark.parametrize("params", [
        {},
        {"geo_lat": "40.4"},
        {"geo_lat": "abc", "geo_lon": "1"},
        {"geo_lat": "91", "geo_lon": "0"},
        {"geo_lat": "0", "geo_lon": "-181"},
        {"geo_lat": [], "geo_lon": []},
    ])
    def test_invalid_params_give_none(self, params):
        assert location.parse_geo_params(params) is None


class TestCaptureUserLocation:
    def test_reads_query_params_into_session(self, session, monkeypatch):
        monkeypatch.setattr(location.st, "query_params", {"geo_lat": "41.38", "geo_lon": "2.17"})
        monkeypatch.setattr(components, "html", lambda *a, **k: pytest.fail("probe rendered"))
        loc = location.capture_user_location()
        assert loc == {"latitude": 41.38, "longitude": 2.17}
        assert session.user_location == loc

    def test_probe_rendered_once_when_unknown(self, session, monkeypatch):
        rendered = []
        monkeypatch.setattr(components, "html", lambda html, height=None: rendered.append(html))
        assert location.capture_user_location() is None
        assert location.capture_user_location() is None
        assert len(rendered) == 1
        assert "getCurrentPosition" in rendered[0]
        assert "geo_lat" in rendered[0]
        assert session.geo_requested is True

    def test_cached_location_short_circuits(self, session, monkeypatch):
        session.user_location = {"latitude": 1.0, "longitude": 2.0}
        monkeypatch.setattr(components, "html", lambda *a, **k: pytest.fail("probe rendered"))
        assert location.capture_user_location() == {"latitude": 1.0, "longitude": 2.0}
