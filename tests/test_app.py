"""Tests for the FastAPI app."""

import pytest
from fastapi.testclient import TestClient

from ir_site.errors import CMSFetchError
from ir_site.main import app, get_preparer

from .helpers import FailingPreparer, StaticPreparer

COMPANY = {"id": "acme", "name": "Acme Corp", "tickerSymbol": "ACME", "primaryColor": "#123456"}


@pytest.fixture
def client():
    app.dependency_overrides[get_preparer] = lambda: StaticPreparer()
    yield TestClient(app)
    app.dependency_overrides.clear()


def test_health(client):
    resp = client.get("/health")
    assert resp.status_code == 200
    assert resp.json()["status"] == "ok"


def test_list_layouts(client):
    assert client.get("/api/layouts").json() == {"layouts": ["institutional-pillar"]}


def test_render_page(client):
    resp = client.post("/api/render/institutional-pillar", json={"company": COMPANY})
    assert resp.status_code == 200
    assert resp.headers["content-type"].startswith("text/html")
    assert resp.text.startswith("<!DOCTYPE html>")
    assert "<title>Acme Corp - Investor Relations</title>" in resp.text
    assert "--primary-color: #123456;" in resp.text


def test_render_unknown_layout(client):
    resp = client.post("/api/render/bold-disruptor", json={"company": COMPANY})
    assert resp.status_code == 404
    assert "bold-disruptor" in resp.json()["detail"]


def test_render_requires_company(client):
    resp = client.post("/api/render/institutional-pillar", json={"theme": None})
    assert resp.status_code == 422


def test_render_cms_failure_is_bad_gateway():
    app.dependency_overrides[get_preparer] = lambda: FailingPreparer(CMSFetchError("CMS returned 500", status_code=500))
    try:
        resp = TestClient(app).post("/api/render/institutional-pillar", json={"company": COMPANY})
    finally:
        app.dependency_overrides.clear()
    assert resp.status_code == 502
    assert resp.json() == {"detail": "CMS returned 500"}


def test_component_data(client):
    resp = client.post("/api/component-data", json={"company": COMPANY})
    body = resp.json()
    assert body["companyName"] == "Acme Corp"
    assert [k["label"] for k in body["kpis"]] == ["Revenue", "EBITDA", "Free Cash Flow", "EPS"]
    assert body["kpis"][0]["gaapValue"] == "$31.6B"
    assert len(body["pillars"]) == 3


def test_theme_resolve(client):
    resp = client.post("/api/theme/resolve", json={
        "company": COMPANY,
        "theme": {"colors": {"accent": "#FF0000"}},
    })
    body = resp.json()
    assert body["theme"]["primary_color"] == "#123456"
    assert body["cssVariables"]["--accent-color"] == "#FF0000"


def test_render_accepts_malformed_theme_and_untitled_press_release(client):
    company = {**COMPANY, "pressReleases": [{"url": "https://acme.test/pr/1"}]}
    resp = client.post("/api/render/institutional-pillar", json={
        "company": company,
        "theme": {"colors": "dark", "typography": {"primaryFont": 12}},
    })
    assert resp.status_code == 200
    assert "--primary-color: #123456;" in resp.text
    assert "--primary-font: 12;" in resp.text
