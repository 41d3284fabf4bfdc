"""Tests for headers and access logging applied to every response."""

import re

import pytest

from main import CORS_HEADERS

ALL_ROUTES = ["/health", "/display", "/api/info", "/", "/nonexistent"]


@pytest.mark.parametrize("path", ALL_ROUTES)
def test_cors_headers_on_every_response(client, path):
    response = client.get(path)
    for header, value in CORS_HEADERS.items():
        assert response.headers[header] == value


def test_cors_headers_without_origin(client):
    response = client.get("/health")
    assert response.headers["access-control-allow-origin"] == "*"


def test_preflight(client):
    response = client.options(
        "/health",
        headers={"Origin": "http://example.com", "Access-Control-Request-Method": "GET"},
    )
    assert response.status_code == 200
    assert response.headers["access-control-allow-origin"] == "*"
    assert response.headers["access-control-allow-methods"] == "GET, POST, PUT, DELETE, OPTIONS"


def test_access_log_line(client, capsys):
    client.get("/health")
    out = capsys.readouterr().out
    assert re.search(r"^\[\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2}\] GET /health - Status: 200$", out, re.M)


def test_access_log_records_404(client, capsys):
    client.get("/nonexistent")
    assert "GET /nonexistent - Status: 404" in capsys.readouterr().out


def test_one_log_line_per_request(client, capsys):
    client.get("/api/info")
    client.get("/display")
    lines = [line for line in capsys.readouterr().out.splitlines() if "Status:" in line]
    assert len(lines) == 2
