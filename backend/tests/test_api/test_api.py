"""Tests for API endpoints."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from sigilforge.main import app
from tests.conftest import TRIANGLE_SIGIL_SVG


client = TestClient(app)


def test_health():
    response = client.get("/api/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ok"
    assert data["patterns_registered"] == 28


def test_categories():
    data = client.get("/api/categories").json()
    assert data["categories"] == ["general", "love", "prosperity", "protection", "wisdom"]
    assert data["complexities"] == ["low", "medium", "high"]
    assert data["styles"] == ["sigil", "tarot"]


def test_generate():
    response = client.post("/api/sigils/generate", json={"intention": "I am love", "category": "love"})
    assert response.status_code == 200
    data = response.json()
    assert data["intention"] == "I am love"
    assert data["category"] == "love"
    assert data["method"] == "sacred-geometry"
    assert data["hasInitials"] is True
    assert data["complexity"]["paths"] == len(data["paths"])
    assert "totalLength" in data["complexity"]


def test_generate_is_deterministic():
    body = {"intention": "find my purpose", "category": "wisdom"}
    first = client.post("/api/sigils/generate", json=body).json()
    second = client.post("/api/sigils/generate", json=body).json()
    assert first["paths"] == second["paths"]


@pytest.mark.parametrize("intention", ["", "x" * 301])
def test_generate_rejects_bad_length(intention):
    response = client.post("/api/sigils/generate", json={"intention": intention})
    assert response.status_code == 422


def test_variations():
    response = client.post(
        "/api/sigils/variations",
        json={"intention": "find my purpose", "category": "wisdom", "count": 3},
    )
    assert response.status_code == 200
    data = response.json()
    assert len(data) == 3
    assert {v["intention"] for v in data} == {"find my purpose"}
    assert data[0]["paths"] != data[1]["paths"]


def test_variations_count_bounded():
    response = client.post("/api/sigils/variations", json={"intention": "clarity", "count": 11})
    assert response.status_code == 422


def test_export_and_analyze_round_trip():
    sigil = client.post("/api/sigils/generate", json={"intention": "protect my home"}).json()

    response = client.post("/api/sigils/export", json={"sigil": sigil, "canvas_size": 300})
    assert response.status_code == 200
    assert response.headers["content-type"].startswith("image/svg+xml")
    assert response.text.count("<path ") == len(sigil["paths"])

    analysis = client.post("/api/sigils/analyze", json={"svg": response.text}).json()
    assert analysis["valid"] is True
    assert analysis["caption"] == "protect my home"
    assert analysis["complexity"]["paths"] == len(sigil["paths"])


def test_export_rejects_invalid_sigil():
    response = client.post("/api/sigils/export", json={"sigil": {"intention": "x", "paths": []}})
    assert response.status_code == 422
    assert response.json()["detail"]


def test_analyze_paths():
    paths = [[{"x": 0.2, "y": 0.5}, {"x": 0.8, "y": 0.5}]]
    data = client.post("/api/sigils/analyze", json={"paths": paths}).json()
    assert data["valid"] is True
    assert data["symmetry"]["horizontalPct"] == 100
    assert data["bounding_box"]["width"] == pytest.approx(0.6)


def test_analyze_svg_fixture():
    data = client.post("/api/sigils/analyze", json={"svg": TRIANGLE_SIGIL_SVG}).json()
    assert data["complexity"]["paths"] == 2
    assert data["caption"] == "love & light"


def test_analyze_requires_input():
    assert client.post("/api/sigils/analyze", json={}).status_code == 422


def test_metadata():
    data = client.post("/api/sigils/metadata", json={"intention": "find my purpose"}).json()
    assert data["processedText"] == "fndmyprs"
    assert data["initialsCount"] == 3


def test_tarot_card_default_center():
    response = client.post("/api/tarot/card", json={"card": {"type": "major", "number": 0}})
    assert response.status_code == 200
    data = response.json()
    assert data["variant"] == "rider-waite"
    assert data["center_sigil"] is None
    assert len(data["center_paths"]) == 1
    assert len(data["corners"]) == 4
    assert data["colors"]["primary"] == "#8B4513"


def test_tarot_card_with_intention():
    body = {
        "card": {"type": "minor", "number": "Queen", "suit": "cups"},
        "intention": "open my heart",
        "variant": "thoth",
    }
    data = client.post("/api/tarot/card", json=body).json()
    assert data["center_sigil"]["method"] == "tarot-sigil"
    assert data["center_sigil"]["category"] == "love"
    assert data["style"] == "occult-artistic"
    assert len(data["symbols"]) == 2


def test_tarot_variants():
    data = client.get("/api/tarot/variants").json()
    assert [v["id"] for v in data] == ["rider-waite", "marseilles", "thoth", "visconti"]


def test_tarot_spreads():
    assert len(client.get("/api/tarot/spreads/celtic-cross").json()["positions"]) == 10
    assert client.get("/api/tarot/spreads/unknown").json()["id"] == "three-card"


def test_export_rejects_non_colour_values():
    sigil = client.post("/api/sigils/generate", json={"intention": "I am love", "category": "love"}).json()
    body = {"sigil": sigil, "background": '#000"/><script>alert(1)</script><rect fill="'}
    assert client.post("/api/sigils/export", json=body).status_code == 422
    ok = client.post("/api/sigils/export", json={"sigil": sigil, "background": "navy", "stroke": "#abc"})
    assert ok.status_code == 200


def test_analyze_bad_viewbox():
    svg = TRIANGLE_SIGIL_SVG.replace('viewBox="0 0 100 100"', 'viewBox="0 0 0 0"')
    response = client.post("/api/sigils/analyze", json={"svg": svg})
    assert response.status_code == 200
    assert response.json()["bounding_box"]["width"] == pytest.approx(0.8)
