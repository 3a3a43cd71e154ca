"""Tests for the demo HTTP endpoints."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from kandinsky.main import app
from tests.conftest import direct_groups, find_all, parse, style_of

client = TestClient(app)


def test_health():
    response = client.get("/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ok"
    assert data["shapes_supported"] == 9


def test_viz_int():
    response = client.get("/viz", params={"type": "int", "v": "5"})
    assert response.status_code == 200
    assert response.headers["content-type"].startswith("image/svg+xml")
    root = parse(response.content)
    assert root.get("width") == "96"
    rects = find_all(root, "rect")
    assert len(rects) == 2
    assert all(style_of(r)["fill"] == "black" for r in rects)


def test_viz_negative_int():
    response = client.get("/viz", params={"type": "int", "v": "-5"})
    assert response.status_code == 200
    assert all(style_of(r)["fill"] == "red" for r in find_all(parse(response.content), "rect"))


def test_viz_float():
    response = client.get("/viz", params={"type": "float", "v": "-0.5"})
    assert response.status_code == 200
    (circle,) = find_all(parse(response.content), "circle")
    assert float(circle.get("r")) == pytest.approx(24)


@pytest.mark.parametrize("literal,fill", [("true", "black"), ("T", "black"), ("0", "red"), ("False", "red")])
def test_viz_bool(literal, fill):
    response = client.get("/viz", params={"type": "bool", "v": literal})
    assert response.status_code == 200
    (poly,) = find_all(parse(response.content), "polygon")
    assert style_of(poly)["fill"] == fill


def test_viz_byte():
    response = client.get("/viz", params={"type": "byte", "v": "5"})
    assert response.status_code == 200
    assert len(find_all(parse(response.content), "rect")) == 2


def test_viz_str():
    response = client.get("/viz", params={"type": "str", "v": "hey"})
    assert response.status_code == 200
    assert len(direct_groups(parse(response.content))) == 3


@pytest.mark.parametrize(
    "params",
    [
        {},
        {"type": "complex", "v": "1"},
        {"type": "int", "v": "abc"},
        {"type": "int", "v": "1.5"},
        {"type": "float", "v": "x"},
        {"type": "bool", "v": "yes"},
        {"type": "byte", "v": "256"},
        {"type": "byte", "v": "-1"},
        {"type": "int", "v": "٣"},
        {"type": "byte", "v": "١٢"},
        {"type": "int", "v": "5", "format": "gif"},
    ],
)
def test_viz_bad_request(params):
    response = client.get("/viz", params=params)
    assert response.status_code == 400


def test_struct():
    response = client.get("/struct")
    assert response.status_code == 200
    assert response.headers["content-type"].startswith("image/svg+xml")
    assert len(direct_groups(parse(response.content))) == 3


def test_slice():
    response = client.get("/slice")
    assert response.status_code == 200
    root = parse(response.content)
    assert root.get("width") == "900"
    assert len(direct_groups(root)) == 16


def test_png_format(monkeypatch):
    monkeypatch.setattr("kandinsky.svg.raster.svg_to_png", lambda svg, output_size=None: b"\x89PNG")
    response = client.get("/struct", params={"format": "png"})
    assert response.status_code == 200
    assert response.headers["content-type"] == "image/png"
    assert response.content == b"\x89PNG"


def test_marshal_failure_is_500(monkeypatch):
    from kandinsky.api import demo

    monkeypatch.setattr(demo, "struct_demo", lambda: [1, print])
    response = client.get("/struct")
    assert response.status_code == 500
    assert "unsupported type" in response.json()["detail"]
