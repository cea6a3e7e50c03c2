"""Tests for API endpoints."""

from __future__ import annotations

from fastapi.testclient import TestClient

from pathviewer.main import app
from tests.conftest import BROKEN_PATH, RELATIVE_PATH, SQUARE_PATH


client = TestClient(app)


def test_health():
    response = client.get("/api/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ok"
    assert data["kinds_registered"] == 10


def test_parse_square():
    response = client.post("/api/parse", json={"data": SQUARE_PATH})
    assert response.status_code == 200
    data = response.json()
    assert data["error"] is None
    assert len(data["commands"]) == 5
    first = data["commands"][0]
    assert first["kind"] == "Move"
    assert first["designator"] == "M"
    assert first["text"] == "M0,0"
    assert first["flags"] == [True, False, False]
    assert data["bounds"]["width"] == 100
    assert data["margin"] == 20


def test_parse_reports_error():
    response = client.post("/api/parse", json={"data": BROKEN_PATH})
    assert response.status_code == 200
    data = response.json()
    assert len(data["commands"]) == 1
    assert "Unrecognized command" in data["error"]
    assert data["bounds"] is None


def test_parse_requires_data():
    response = client.post("/api/parse", json={})
    assert response.status_code == 422


def test_segments():
    response = client.post("/api/segments", json={"data": RELATIVE_PATH})
    assert response.status_code == 200
    segments = response.json()["segments"]
    assert len(segments) == 5
    assert segments[2]["text"] == "l0,20"
    assert segments[2]["segment_data"] == "M30,10 l0,20"
    assert segments[1]["path_up_to"] == "m10,10 l20,0"


def test_scale():
    response = client.post("/api/transform/scale", json={"data": SQUARE_PATH, "sx": 2, "sy": 2})
    assert response.status_code == 200
    data = response.json()
    assert data["data"] == "M0,0 L200,0 L200,200 L0,200 Z"
    assert data["bounds"]["max_x"] == 200


def test_move():
    response = client.post("/api/transform/move", json={"data": SQUARE_PATH, "dx": 5, "dy": -5})
    assert response.status_code == 200
    bounds = response.json()["bounds"]
    assert (bounds["min_x"], bounds["min_y"]) == (5, -5)


def test_fit():
    response = client.post(
        "/api/transform/fit",
        json={"data": SQUARE_PATH, "width": 50, "height": 20},
    )
    assert response.status_code == 200
    bounds = response.json()["bounds"]
    assert (bounds["width"], bounds["height"]) == (50, 20)


def test_fit_keep_aspect():
    response = client.post(
        "/api/transform/fit",
        json={"data": SQUARE_PATH, "width": 50, "height": 20, "keep_aspect": True},
    )
    assert response.status_code == 200
    bounds = response.json()["bounds"]
    assert (bounds["width"], bounds["height"]) == (50, 50)


def test_fit_rejects_zero_size():
    response = client.post(
        "/api/transform/fit",
        json={"data": SQUARE_PATH, "width": 0, "height": 20},
    )
    assert response.status_code == 422
    assert "greater than zero" in response.json()["detail"]


def test_editor_kinds():
    response = client.get("/api/editor/kinds")
    assert response.status_code == 200
    kinds = response.json()
    assert [k["letter"] for k in kinds] == list("MLHVCQSTAZ")


def test_editor_describe_arc():
    response = client.get("/api/editor/describe/EllipticalArc")
    assert response.status_code == 200
    data = response.json()
    assert data["value_labels"][:3] == ["Size X", "Size Y", "Rotation Angle"]
    assert data["flag_labels"] == ["Absolute Position", "Large Arc", "Positive Sweep Direction"]
    assert data["value_count"] == 5


def test_editor_describe_unknown_kind():
    response = client.get("/api/editor/describe/Spline")
    assert response.status_code == 422


def test_editor_build():
    response = client.post(
        "/api/editor/build",
        json={"kind": "Line", "values": [10, 20], "flags": [True]},
    )
    assert response.status_code == 200
    data = response.json()
    assert data["text"] == "L10,20"
    assert data["values"] == [10, 20, 0, 0, 0, 0]


def test_editor_build_too_many_slots():
    response = client.post(
        "/api/editor/build",
        json={"kind": "Line", "values": [1, 2, 3, 4, 5, 6, 7]},
    )
    assert response.status_code == 422


def test_editor_decompose():
    response = client.post("/api/editor/decompose", json={"command": "a10,20,0,1,0,50,60"})
    assert response.status_code == 200
    data = response.json()
    assert data["kind"] == "EllipticalArc"
    assert data["designator"] == "a"
    assert data["values"] == [10, 20, 0, 50, 60, 0]
    assert data["flags"] == [False, True, False]


def test_editor_decompose_rejects_bad_command():
    response = client.post("/api/editor/decompose", json={"command": "L10"})
    assert response.status_code == 422
    assert "Invalid argument count" in response.json()["detail"]


def test_openapi_describes_service():
    info = client.get("/openapi.json").json()["info"]
    assert info["title"] == "PathViewer"
    assert "slot layout" in info["description"]
