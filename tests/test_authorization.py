"""
Tests for the bearer-token gate on /api/developers.

These tests verify that every protected endpoint:
  - returns 401 ("missing") when no bearer credential is presented
  - returns 403 ("invalid") when a credential is present but fails
    verification: forged, signed with another key, expired, or missing
    its identity claims
  - accepts a valid token without consulting the users collection
"""

from datetime import datetime, timedelta, timezone

import pytest
from jose import jwt

from app.security import create_access_token


PROTECTED_ENDPOINTS = [
    ("GET", "/api/developers"),
    ("GET", "/api/developers/some-id"),
    ("POST", "/api/developers"),
    ("PUT", "/api/developers/some-id"),
    ("DELETE", "/api/developers/some-id"),
]

VALID_BODY = {"name": "Ann", "role": "Backend", "techStack": "Go", "experience": 3}


class TestMissingToken:
    """No credential at all → 401."""

    @pytest.mark.parametrize("method,path", PROTECTED_ENDPOINTS)
    async def test_no_header_returns_401(self, client, method, path):
        response = await client.request(method, path, json=VALID_BODY)
        assert response.status_code == 401
        assert response.json()["error_type"] == "missing_token"

    async def test_non_bearer_scheme_returns_401(self, client):
        """A malformed Authorization header counts as missing."""
        response = await client.get(
            "/api/developers",
            headers={"Authorization": "Basic dXNlcjpwYXNz"},
        )
        assert response.status_code == 401

    async def test_empty_bearer_returns_401(self, client):
        response = await client.get(
            "/api/developers",
            headers={"Authorization": "Bearer "},
        )
        assert response.status_code == 401


class TestInvalidToken:
    """A credential that fails verification → 403, distinct from missing."""

    @pytest.mark.parametrize("method,path", PROTECTED_ENDPOINTS)
    async def test_forged_token_returns_403(self, client, method, path):
        response = await client.request(
            method,
            path,
            json=VALID_BODY,
            headers={"Authorization": "Bearer totally.fake.token"},
        )
        assert response.status_code == 403
        assert response.json()["error_type"] == "invalid_token"

    async def test_token_signed_with_other_key_returns_403(self, client):
        token = jwt.encode({"sub": "u1", "email": "a@b.com"}, "another-secret", algorithm="HS256")
        response = await client.get(
            "/api/developers",
            headers={"Authorization": f"Bearer {token}"},
        )
        assert response.status_code == 403

    async def test_expired_token_returns_403(self, client):
        token = create_access_token(
            {"sub": "u1", "email": "a@b.com"},
            expires_delta=timedelta(seconds=-1),
        )
        response = await client.get(
            "/api/developers",
            headers={"Authorization": f"Bearer {token}"},
        )
        assert response.status_code == 403

    async def test_token_without_email_claim_returns_403(self, client):
        token = create_access_token({"sub": "u1"})
        response = await client.get(
            "/api/developers",
            headers={"Authorization": f"Bearer {token}"},
        )
        assert response.status_code == 403


class TestValidToken:
    """A correctly signed, unexpired token is enough on its own."""

    async def test_token_for_unknown_user_is_accepted(self, client):
        """Tokens are self-contained: no users-collection lookup happens."""
        token = create_access_token({"sub": "ghost", "email": "ghost@example.com"})
        response = await client.get(
            "/api/developers",
            headers={"Authorization": f"Bearer {token}"},
        )
        assert response.status_code == 200

    async def test_default_lifetime_is_seven_days(self):
        token = create_access_token({"sub": "u1", "email": "a@b.com"})
        claims = jwt.get_unverified_claims(token)
        remaining = claims["exp"] - datetime.now(timezone.utc).timestamp()
        assert timedelta(days=7) - timedelta(minutes=1) < timedelta(seconds=remaining) <= timedelta(days=7)
