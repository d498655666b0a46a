"""Integration tests for the HTTP API."""

from __future__ import annotations

import random

import pytest

pytest.importorskip("fastapi")
pytest.importorskip("httpx")

from fastapi.testclient import TestClient  # noqa: E402

from randseq.api import create_app  # noqa: E402
from randseq.config import ServiceConfig  # noqa: E402
from randseq.service import SequenceService  # noqa: E402
from randseq.sources import StdlibSource  # noqa: E402

SEQUENCE_URL = "/api/v1/random/sequence"


@pytest.fixture
def client():
    return TestClient(create_app(SequenceService(ServiceConfig())))


class TestSequenceEndpoint:
    """Tests for GET /api/v1/random/sequence."""

    def test_defaults(self, client):
        response = client.get(SEQUENCE_URL)
        assert response.status_code == 200
        data = response.json()
        assert data["type"] == "general"
        assert data["distribution"] == "uniform"
        assert data["count"] == 10
        assert len(data["sequence"]) == 10

    def test_with_parameters(self, client):
        response = client.get(
            SEQUENCE_URL,
            params={
                "count": 25,
                "type": "SECURE",
                "distribution": "Weibull",
                "param1": 2.0,
                "param2": 3.0,
            },
        )
        assert response.status_code == 200
        data = response.json()
        assert data["type"] == "SECURE"
        assert data["distribution"] == "Weibull"
        assert len(data["sequence"]) == 25
        assert all(v >= 0.0 for v in data["sequence"])

    @pytest.mark.parametrize(
        "params,fragment",
        [
            ({"count": 0}, "Count must be positive."),
            ({"count": 2_000_001}, "2,000,000"),
            ({"type": "fast"}, "Invalid type"),
            ({"distribution": "poisson"}, "poisson"),
            ({"distribution": "binomial", "param1": 1.5}, "trials"),
            ({"count": "many"}, "count"),
            ({"type": " general "}, "Invalid type"),
            ({"param1": -1e308, "param2": 1e308}, "finite distance"),
        ],
    )
    def test_client_errors_are_400(self, client, params, fragment):
        response = client.get(SEQUENCE_URL, params=params)
        assert response.status_code == 400
        data = response.json()
        assert data["classification"] == "client-error"
        assert fragment in data["message"]
        assert data["details"] == f"uri={SEQUENCE_URL}"

    def test_non_finite_samples_spelled_out(self, client):
        response = client.get(
            SEQUENCE_URL,
            params={"count": 3, "distribution": "lognormal", "param1": 1000.0},
        )
        assert response.status_code == 200
        assert response.json()["sequence"] == ["Infinity"] * 3

    def test_server_errors_are_500_without_details(self):
        def broken_base(kind):
            class Broken(StdlibSource):
                def uniform(self):
                    raise ArithmeticError("internal state corrupted")

            return Broken(random.Random(0))

        app = create_app(SequenceService(base_provider=broken_base))
        client = TestClient(app, raise_server_exceptions=False)
        response = client.get(SEQUENCE_URL)
        assert response.status_code == 500
        data = response.json()
        assert data["classification"] == "server-error"
        assert "corrupted" not in data["message"]

    def test_configured_defaults(self):
        config = ServiceConfig(default_count=3, default_distribution="gamma")
        client = TestClient(create_app(SequenceService(config)))
        data = client.get(SEQUENCE_URL).json()
        assert data["count"] == 3
        assert data["distribution"] == "gamma"


class TestOtherEndpoints:
    """Tests for catalog and docs endpoints."""

    def test_distributions(self, client):
        response = client.get("/api/v1/random/distributions")
        assert response.status_code == 200
        names = [d["name"] for d in response.json()]
        assert "t-student" in names
        assert len(names) == 10

    def test_swagger_redirects_to_docs(self, client):
        response = client.get("/swagger", follow_redirects=False)
        assert response.status_code in (302, 307)
        assert response.headers["location"] == "/docs"
