"""Tests for the gateway pass-through routes."""

import pytest
import requests
from fastapi.testclient import TestClient

from conftest import FakeProviderClient

from data_fetch.errors import UpstreamUnavailableError
from gateway.app import create_app


@pytest.fixture
def upstream():
    return FakeProviderClient(
        systems={"systemList": [{"PWS": "CA1910009", "SystemName": "Beverly Hills MWD"}]},
        contaminants={"CA1910009": {"information": {"exceedsList": [], "othersList": []}}},
        facility={"CA1910009": [{"population_served_count": 34109}]},
    )


@pytest.fixture
def client(upstream):
    return TestClient(create_app(upstream))


class TestMissingParameters:
    def test_systems_requires_zip(self, client, upstream):
        response = client.get("/get-systems")
        assert response.status_code == 400
        assert response.json() == {"error": "Zip code is required"}
        assert upstream.calls == []

    @pytest.mark.parametrize("route", ["/get-contaminants", "/get-epa-data"])
    def test_pwsid_routes_require_pwsid(self, client, route):
        response = client.get(route, params={"pwsid": ""})
        assert response.status_code == 400
        assert response.json() == {"error": "PWSID is required"}


class TestPassThrough:
    def test_systems_returned_verbatim(self, client, upstream):
        response = client.get("/get-systems", params={"zip": "90210"})
        assert response.status_code == 200
        assert response.json() == upstream.systems
        assert upstream.calls == [("systems", "90210")]

    def test_contaminants_returned_verbatim(self, client):
        response = client.get("/get-contaminants", params={"pwsid": "CA1910009"})
        assert response.status_code == 200
        assert response.json() == {"information": {"exceedsList": [], "othersList": []}}

    def test_facility_returned_verbatim(self, client):
        response = client.get("/get-epa-data", params={"pwsid": "CA1910009"})
        assert response.status_code == 200
        assert response.json() == [{"population_served_count": 34109}]

    def test_health(self, client):
        assert client.get("/health").json() == {"status": "ok"}


class TestUpstreamFailures:
    def test_facility_status_passed_through(self, upstream, client):
        upstream.facility["CA1910009"] = UpstreamUnavailableError("Not Found", status_code=404)
        response = client.get("/get-epa-data", params={"pwsid": "CA1910009"})
        assert response.status_code == 404
        assert response.json() == {"error": "Failed to fetch EPA data: Not Found"}

    def test_systems_status_becomes_500(self, upstream, client):
        upstream.systems = UpstreamUnavailableError("Bad Gateway", status_code=502)
        response = client.get("/get-systems", params={"zip": "90210"})
        assert response.status_code == 500
        assert response.json() == {"error": "Failed to fetch systems data"}

    def test_contaminants_transport_error(self, upstream, client):
        upstream.contaminants["CA1910009"] = requests.ConnectionError("refused")
        response = client.get("/get-contaminants", params={"pwsid": "CA1910009"})
        assert response.status_code == 500
        assert response.json() == {"error": "Failed to fetch contaminants data"}

    def test_facility_transport_error(self, upstream, client):
        upstream.facility["CA1910009"] = requests.Timeout("slow")
        response = client.get("/get-epa-data", params={"pwsid": "CA1910009"})
        assert response.status_code == 500
        assert response.json() == {"error": "Failed to fetch EPA Envirofacts data"}

    def test_undecodable_body(self, upstream, client):
        upstream.systems = ValueError("Expecting value")
        response = client.get("/get-systems", params={"zip": "90210"})
        assert response.status_code == 500
