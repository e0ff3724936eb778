"""Tests for API endpoints."""

from __future__ import annotations

import base64
import io

from fastapi.testclient import TestClient
from PIL import Image

from lvlmaker.main import app

client = TestClient(app)


def _png_b64(pixels) -> str:
    buf = io.BytesIO()
    Image.fromarray(pixels).save(buf, format="PNG")
    return base64.b64encode(buf.getvalue()).decode("ascii")


def test_health():
    response = client.get("/api/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ok"
    assert data["stages_registered"] >= 6


def test_convert_room(make_grid, room_map):
    response = client.post("/api/convert", json={"image_base64": _png_b64(make_grid(room_map))})
    assert response.status_code == 200
    data = response.json()
    level = data["level"]
    assert (level["width"], level["height"]) == (7, 6)
    assert level["start"] == {"x": 1, "y": 1}
    assert level["checkpoints"] == [{"x": 5, "y": 3}]
    assert level["walls"][0] == {"start": {"x": 0, "y": 0}, "end": {"x": 6, "y": 0}}
    assert data["stages_completed"] == 6


def test_convert_unsupported_color(make_grid):
    response = client.post("/api/convert", json={"image_base64": _png_b64(make_grid("#?"))})
    assert response.status_code == 422
    assert "Unsupported color" in response.json()["detail"]


def test_convert_strict_markers(make_grid):
    payload = {"image_base64": _png_b64(make_grid("SS#E")), "strict_markers": True}
    response = client.post("/api/convert", json=payload)
    assert response.status_code == 422


def test_convert_not_an_image():
    payload = {"image_base64": base64.b64encode(b"not an image").decode("ascii")}
    response = client.post("/api/convert", json=payload)
    assert response.status_code == 422


def test_convert_bad_base64():
    response = client.post("/api/convert", json={"image_base64": "@@@"})
    assert response.status_code == 422
