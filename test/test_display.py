"""Tests for the greeting page, root redirect and 404 page."""

import re

import pytest

from models import ThemeConfig


class TestDisplay:
    def test_defaults(self, client):
        response = client.get("/display")
        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/html")
        assert "Hello World!" in response.text
        assert "#f5f5f5" in response.text
        assert 'href="/display?theme=dark"' in response.text

    def test_name_and_dark_theme(self, client):
        response = client.get("/display", params={"name": "Ada", "theme": "dark"})
        assert response.status_code == 200
        assert "Ada" in response.text
        assert "#1a1a1a" in response.text
        assert "#f5f5f5" not in response.text
        assert 'href="/display?theme=light"' in response.text

    def test_empty_name_falls_back_to_default(self, client):
        assert "Hello World!" in client.get("/display?name=").text

    @pytest.mark.parametrize("theme", ["", "Dark", "blue", "light"])
    def test_unknown_theme_is_light(self, client, theme):
        response = client.get("/display", params={"theme": theme})
        assert response.status_code == 200
        assert "#f5f5f5" in response.text

    def test_name_is_escaped(self, client):
        response = client.get("/display", params={"name": "<script>alert(1)</script>"})
        assert response.status_code == 200
        assert "<script>" not in response.text
        assert "&lt;script&gt;" in response.text

    def test_server_time_format(self, client):
        text = client.get("/display").text
        assert re.search(r"Current server time: \d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2} \S+", text)

    def test_links(self, client):
        text = client.get("/display").text
        assert 'href="/health"' in text
        assert 'href="/api/info"' in text


class TestThemeConfig:
    def test_dark(self):
        theme = ThemeConfig.for_theme("dark")
        assert (theme.background, theme.text, theme.accent) == ("#1a1a1a", "#ffffff", "#4a9eff")
        assert theme.toggle == "light"

    @pytest.mark.parametrize("value", [None, "", "light", "DARK"])
    def test_light(self, value):
        theme = ThemeConfig.for_theme(value)
        assert (theme.background, theme.text, theme.accent) == ("#f5f5f5", "#333333", "#007bff")
        assert theme.toggle == "dark"


class TestRedirectAndNotFound:
    def test_root_redirects_to_display(self, client):
        response = client.get("/")
        assert 300 <= response.status_code < 400
        assert response.headers["location"] == "/display"

    def test_root_redirect_drops_query(self, client):
        response = client.get("/?name=Ada")
        assert response.headers["location"] == "/display"

    def test_unknown_path_is_404_page(self, client):
        response = client.get("/nonexistent")
        assert response.status_code == 404
        assert response.headers["content-type"].startswith("text/html")
        assert "404 - Page Not Found" in response.text
        assert 'href="/display"' in response.text

    def test_wrong_method_is_404_page(self, client):
        response = client.post("/health")
        assert response.status_code == 404
        assert 'href="/display"' in response.text

    @pytest.mark.parametrize("path", ["/docs", "/redoc", "/openapi.json"])
    def test_no_generated_docs(self, client, path):
        assert client.get(path).status_code == 404
