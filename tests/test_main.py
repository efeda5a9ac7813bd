from app.core.exceptions import Forbidden, NotFound


class TestServiceEndpoints:

    def test_root(self, client):
        body = client.get("/").json()
        assert body["version"] == "1.0.0"
        assert body["docs"] == "/docs"

    def test_health(self, client):
        assert client.get("/health").json() == {"status": "healthy"}

    def test_unknown_route_uses_error_envelope(self, client):
        response = client.get("/api/does-not-exist")
        assert response.status_code == 404
        assert response.json()["success"] is False


class TestErrorMessages:

    def test_default_message(self):
        error = NotFound()
        assert error.message == "Resource not found"
        assert error.status_code == 404

    def test_explicit_message(self):
        assert Forbidden("Not authorized to upload to this channel").message == "Not authorized to upload to this channel"
