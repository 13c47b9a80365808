"""
User model — the authentication identity.

Each User represents a login credential (email + hashed password) plus a
display name. Users are created at signup and are never updated or deleted.

The email is stored trimmed and lowercased so that uniqueness and login
lookups are case-insensitive.

The password is stored as an Argon2id hash — never in plaintext.

Identity is the claim carried by a bearer token: it is derived from a
User at signup/login, decoded by the auth dependency, and passed
explicitly into the services that need to know who is acting.
"""

from pydantic import BaseModel, ConfigDict

from app.models.base import CamelModel, UtcDatetime


class User(CamelModel):
    """A registered user as persisted in the users collection."""

    id: str
    name: str
    email: str
    password_hash: str
    created_at: UtcDatetime


class Identity(BaseModel):
    """The authenticated caller, as asserted by a verified token."""

    model_config = ConfigDict(frozen=True)

    user_id: str
    email: str
