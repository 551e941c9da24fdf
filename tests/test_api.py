import os

import pytest
from fastapi.testclient import TestClient

from bricklayer.api import app


@pytest.fixture
def client(tmp_path, monkeypatch):
    monkeypatch.setenv("BRICKLAYER_OUTPUT_DIR", str(tmp_path))
    return TestClient(app)


def test_wall_endpoint_defaults(client):
    resp = client.post("/wall", json={})
    assert resp.status_code == 200
    body = resp.json()
    assert body["counts"] == {"bricks": 352, "courses": 32}
    assert body["bricks"][0]["id"] == "brick-0-0"
    assert body["bricks"][0]["type"] == "full"


def test_wall_endpoint_custom_wall(client):
    resp = client.post("/wall", json={"wall": {"width": 420, "height": 112.5}})
    assert resp.status_code == 200
    assert resp.json()["counts"]["courses"] == 2


def test_plan_endpoint_naive(client, tmp_path):
    resp = client.post("/plan", json={"strategy": "naive"})
    assert resp.status_code == 200
    body = resp.json()
    assert body["complete"] is True
    assert body["counts"] == {"bricks": 352, "placed": 352, "unplaced": 0, "strides": 96}
    assert len(body["order"]) == 352
    assert body["outputs"]["build_order_csv"].startswith(str(tmp_path))
    assert os.path.isfile(body["outputs"]["build_order_csv"])
    assert os.path.isfile(body["outputs"]["report_json"])


def test_plan_endpoint_optimized_beats_naive(client):
    naive = client.post("/plan", json={"strategy": "naive", "write_outputs": False}).json()
    optimized = client.post("/plan", json={"strategy": "optimized", "write_outputs": False}).json()
    assert optimized["complete"] is True
    assert optimized["counts"]["strides"] <= naive["counts"]["strides"]
    assert optimized["outputs"] == {"build_order_csv": None, "report_json": None}


def test_plan_endpoint_rejects_bad_input(client):
    assert client.post("/plan", json={"strategy": "random"}).status_code == 422
    assert client.post("/plan", json={"robot": {"envelope_width": -5}}).status_code == 422
