"""Tests for API endpoints."""

from __future__ import annotations

import math

import pytest
from fastapi.testclient import TestClient

from polymorph import __version__
from polymorph.main import app
from tests.conftest import L_SOURCE, VERTICAL_TARGET, ZIGZAG


client = TestClient(app)


def test_health():
    response = client.get("/api/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ok"
    assert data["version"] == __version__


def test_morph_l_to_vertical():
    response = client.post("/api/morph", json={"source": L_SOURCE, "target": VERTICAL_TARGET})
    assert response.status_code == 200
    data = response.json()
    assert data["breakpoints"] == [0.0, 0.5, 1.0]
    assert data["source_length"] == 2.0
    assert data["target_length"] == 1.0
    pairs = [
        ((s["source"]["x"], s["source"]["y"]), (s["target"]["x"], s["target"]["y"]))
        for s in data["segments"]
    ]
    assert pairs == [
        ((0.0, 0.0), (0.0, 5.0)),
        ((1.0, 0.0), (0.0, 5.5)),
        ((1.0, 1.0), (0.0, 6.0)),
    ]
    assert data["max_segment_length"] == pytest.approx(math.sqrt(31.25))


def test_morph_exact_kernel():
    response = client.post(
        "/api/morph",
        json={"source": L_SOURCE, "target": VERTICAL_TARGET, "kernel": "exact"},
    )
    assert response.status_code == 200
    assert response.json()["segments"][1]["target"]["y"] == 5.5


def test_morph_empty_source():
    response = client.post("/api/morph", json={"source": [], "target": VERTICAL_TARGET})
    assert response.status_code == 422
    data = response.json()
    assert data["error"] == "InvalidInputError"


def test_morph_unknown_kernel():
    response = client.post(
        "/api/morph",
        json={"source": L_SOURCE, "target": VERTICAL_TARGET, "kernel": "quantum"},
    )
    assert response.status_code == 422


def test_interpolate():
    response = client.post("/api/interpolate", json={"points": ZIGZAG, "abscissa": 6.0})
    assert response.status_code == 200
    data = response.json()
    assert data["segment_index"] == 2
    assert data["length"] == 12.5
    assert data["point"]["x"] == pytest.approx(3.6)
    assert data["point"]["y"] == pytest.approx(0.8)


def test_interpolate_out_of_range():
    response = client.post("/api/interpolate", json={"points": L_SOURCE, "abscissa": 3.0})
    assert response.status_code == 422
    data = response.json()
    assert data["error"] == "OutOfRangeError"
    assert "outside" in data["detail"]
