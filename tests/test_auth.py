"""
Tests for authentication endpoints (signup and login).

These tests verify:
  - Successful signup creates a user and returns a JWT
  - Duplicate email signup is rejected, in any letter case (400)
  - Passwords are stored hashed, never in plaintext
  - Successful login returns a valid JWT
  - Wrong password and unknown email get the identical 401 (anti-enumeration)
  - Short passwords, short names, and bad emails are rejected (400)
"""

from app.security import decode_access_token


SIGNUP = {
    "name": "Jane Doe",
    "email": "jane@example.com",
    "password": "StrongPass99",
}


# ---------------------------------------------------------------------------
# Signup Tests
# ---------------------------------------------------------------------------

class TestSignup:
    """Tests for POST /api/auth/signup."""

    async def test_signup_success(self, client):
        """A valid signup should return 201 with message, token, and user."""
        response = await client.post("/api/auth/signup", json=SIGNUP)
        assert response.status_code == 201
        data = response.json()
        assert data["message"]
        assert data["user"]["name"] == "Jane Doe"
        assert data["user"]["email"] == "jane@example.com"
        assert data["user"]["id"]
        assert "token" in data
        assert "password" not in data["user"]

    async def test_signup_token_carries_identity(self, client):
        """The issued token names the new user and their email."""
        response = await client.post("/api/auth/signup", json=SIGNUP)
        data = response.json()
        claims = decode_access_token(data["token"])
        assert claims["sub"] == data["user"]["id"]
        assert claims["email"] == "jane@example.com"

    async def test_signup_normalizes_email(self, client):
        """Emails are stored trimmed and lowercased."""
        response = await client.post(
            "/api/auth/signup",
            json={**SIGNUP, "email": "Jane.Doe@Example.COM"},
        )
        assert response.status_code == 201
        assert response.json()["user"]["email"] == "jane.doe@example.com"

    async def test_signup_stores_hash_not_plaintext(self, client, user_store):
        """The users collection never contains the plaintext password."""
        await client.post("/api/auth/signup", json=SIGNUP)
        users = await user_store.load()
        assert len(users) == 1
        assert users[0].password_hash != SIGNUP["password"]
        assert users[0].password_hash.startswith("$argon2")

    async def test_signup_duplicate_email(self, client, user_store):
        """Signing up with an already-registered email should return 400."""
        response1 = await client.post("/api/auth/signup", json=SIGNUP)
        assert response1.status_code == 201

        response2 = await client.post("/api/auth/signup", json=SIGNUP)
        assert response2.status_code == 400
        assert response2.json()["error_type"] == "duplicate_email"
        assert len(await user_store.load()) == 1

    async def test_signup_duplicate_email_different_case(self, client, user_store):
        """Email uniqueness ignores letter case."""
        await client.post("/api/auth/signup", json=SIGNUP)
        response = await client.post(
            "/api/auth/signup",
            json={**SIGNUP, "email": "JANE@EXAMPLE.COM"},
        )
        assert response.status_code == 400
        assert len(await user_store.load()) == 1

    async def test_signup_short_password(self, client):
        """Passwords shorter than 6 characters should be rejected."""
        response = await client.post(
            "/api/auth/signup",
            json={**SIGNUP, "password": "short"},
        )
        assert response.status_code == 400
        assert response.json()["error_type"] == "validation_error"

    async def test_signup_short_name(self, client):
        """Names need at least 2 characters after trimming."""
        response = await client.post(
            "/api/auth/signup",
            json={**SIGNUP, "name": "  J  "},
        )
        assert response.status_code == 400

    async def test_signup_invalid_email(self, client):
        """Invalid email format should be rejected."""
        response = await client.post(
            "/api/auth/signup",
            json={**SIGNUP, "email": "not-an-email"},
        )
        assert response.status_code == 400

    async def test_signup_reports_every_invalid_field(self, client):
        """Validation errors are collected, not reported one at a time."""
        response = await client.post(
            "/api/auth/signup",
            json={"name": "J", "email": "nope", "password": "123"},
        )
        assert response.status_code == 400
        errors = response.json()["errors"]
        assert len(errors) == 3
        assert any(err.startswith("name") for err in errors)
        assert any(err.startswith("email") for err in errors)
        assert any(err.startswith("password") for err in errors)


# ---------------------------------------------------------------------------
# Login Tests
# ---------------------------------------------------------------------------

class TestLogin:
    """Tests for POST /api/auth/login."""

    async def test_login_success(self, client):
        """Login with correct credentials should return a token and the user."""
        await client.post("/api/auth/signup", json=SIGNUP)

        response = await client.post(
            "/api/auth/login",
            json={"email": SIGNUP["email"], "password": SIGNUP["password"]},
        )
        assert response.status_code == 200
        data = response.json()
        assert "token" in data
        assert data["user"]["email"] == SIGNUP["email"]

    async def test_login_email_is_case_insensitive(self, client):
        """Login finds the user regardless of the email's letter case."""
        await client.post("/api/auth/signup", json=SIGNUP)

        response = await client.post(
            "/api/auth/login",
            json={"email": "JANE@example.com", "password": SIGNUP["password"]},
        )
        assert response.status_code == 200

    async def test_login_wrong_password_and_unknown_email_look_identical(self, client):
        """
        Wrong password and unregistered email must be indistinguishable,
        so the response cannot be used to enumerate accounts.
        """
        await client.post("/api/auth/signup", json=SIGNUP)

        wrong_password = await client.post(
            "/api/auth/login",
            json={"email": SIGNUP["email"], "password": "WrongPassword"},
        )
        unknown_email = await client.post(
            "/api/auth/login",
            json={"email": "nobody@example.com", "password": SIGNUP["password"]},
        )

        assert wrong_password.status_code == 401
        assert unknown_email.status_code == 401
        assert wrong_password.json() == unknown_email.json()
        assert wrong_password.json()["message"] == "Invalid email or password"

    async def test_login_token_works_for_protected_endpoint(self, client):
        """The token from login should grant access to protected endpoints."""
        await client.post("/api/auth/signup", json=SIGNUP)

        login_response = await client.post(
            "/api/auth/login",
            json={"email": SIGNUP["email"], "password": SIGNUP["password"]},
        )
        token = login_response.json()["token"]

        response = await client.get(
            "/api/developers",
            headers={"Authorization": f"Bearer {token}"},
        )
        assert response.status_code == 200

    async def test_login_missing_password(self, client):
        """A missing password is a validation error, not a credentials error."""
        response = await client.post(
            "/api/auth/login",
            json={"email": SIGNUP["email"]},
        )
        assert response.status_code == 400
