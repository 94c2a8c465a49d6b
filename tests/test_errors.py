"""Tests for the not-found, method-not-allowed and panic fallbacks."""

import pytest


class TestNotFound:
    """Paths that match no route."""

    @pytest.mark.parametrize(
        "path",
        ["/unknown", "/unknown/sub", "/fo", "/foobar", "/docs", "/openapi.json"],
    )
    def test_unknown_path(self, client, path):
        response = client.get(path)

        assert response.status_code == 404
        assert response.text == "404 page not found"
        assert response.headers["cache-control"] == "no-cache"
        assert response.headers["content-type"].startswith("text/plain")

    def test_unknown_path_any_method(self, client):
        response = client.post("/unknown")

        assert response.status_code == 404
        assert response.text == "404 page not found"


class TestMethodNotAllowed:
    """Registered paths requested with a method other than GET."""

    @pytest.mark.parametrize("path", ["/", "/foo", "/foo/sub"])
    def test_post(self, client, path):
        response = client.post(path)

        assert response.status_code == 405
        assert response.text == "405 method not allowed"
        assert response.headers["cache-control"] == "no-cache"
        assert response.headers["allow"] == "GET"

    def test_delete(self, client):
        response = client.delete("/foo")

        assert response.status_code == 405
        assert response.text == "405 method not allowed"

    def test_head(self, client):
        response = client.head("/foo")

        assert response.status_code == 405
        assert response.headers["cache-control"] == "no-cache"


class TestPanic:
    """Unhandled exceptions inside a handler."""

    @pytest.fixture
    def faulty_app(self, app):
        async def boom():
            raise RuntimeError("handler fault")

        app.add_api_route("/boom", boom, methods=["GET"])
        return app

    def test_fault_returns_500(self, faulty_app, client):
        response = client.get("/boom")

        assert response.status_code == 500
        assert response.text == "500 internal server error"
        assert response.headers["cache-control"] == "no-cache"
        assert "handler fault" not in response.text

    def test_fault_is_logged(self, faulty_app, client, caplog):
        with caplog.at_level("ERROR", logger="app.api.errors"):
            client.get("/boom")

        assert any("handler fault" in record.getMessage() for record in caplog.records)

    def test_later_requests_still_served(self, faulty_app, client):
        client.get("/boom")

        response = client.get("/foo")

        assert response.status_code == 200
        assert 'content="go.example.com/foo git https://github.com/example/foo">' in response.text
        assert client.get("/boom").status_code == 500
