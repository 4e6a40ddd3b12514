"""
Tests for credential verification and response headers.
"""
from muro.core.security import hash_credential, is_bcrypt_hash, verify_credential


class TestCredentials:
    """Tests for plaintext and hashed credential checks."""

    def test_plaintext_match(self):
        assert verify_credential("secreta", "secreta")

    def test_plaintext_is_exact(self):
        assert not verify_credential("Secreta", "secreta")
        assert not verify_credential("secreta ", "secreta")

    def test_hashed_match(self):
        hashed = hash_credential("secreta")

        assert is_bcrypt_hash(hashed)
        assert hashed != "secreta"
        assert verify_credential("secreta", hashed)
        assert not verify_credential("otra", hashed)

    def test_long_credential(self):
        secret = "x" * 100
        hashed = hash_credential(secret)

        assert verify_credential(secret, hashed)
        assert not verify_credential("x" * 99, hashed)

    def test_missing_stored_credential(self):
        assert not verify_credential("secreta", None)
        assert not verify_credential("secreta", "")


class TestResponseHeaders:
    """Tests for middleware-added headers."""

    def test_security_headers(self, client):
        response = client.get("/")

        assert response.headers["X-Content-Type-Options"] == "nosniff"
        assert response.headers["X-Frame-Options"] == "DENY"

    def test_cors_preflight(self, client):
        response = client.options(
            "/likes",
            headers={
                "Origin": "http://localhost:5173",
                "Access-Control-Request-Method": "POST",
            },
        )

        assert response.status_code == 200
        assert "access-control-allow-origin" in response.headers
