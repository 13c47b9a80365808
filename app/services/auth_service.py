"""
Authentication service — signup and login business logic.

This module contains the core auth logic, separated from HTTP concerns.
The router calls these functions and translates the results into HTTP
responses. This separation means the business logic can be tested
without spinning up a web server.

Signup flow:
  1. Normalize the email (trim + lowercase)
  2. Reject it if any stored user already has it
  3. Hash the password with Argon2id
  4. Append the User and save the users collection
  5. Return a JWT token so the user is immediately logged in

Login flow:
  1. Look up user by normalized email
  2. Verify password against stored hash
  3. Return a fresh JWT token

Security notes:
  - Passwords are hashed before storage (never stored in plaintext)
  - Login returns the same error for "wrong password" and "email not found"
    to prevent user enumeration attacks
  - JWT tokens are stateless — no server-side session storage needed
  - Neither passwords nor tokens are ever logged
"""

import logging
import uuid
from datetime import datetime, timezone

from app.exceptions import DuplicateEmailError, InvalidCredentialsError
from app.models.user import User
from app.security import hash_password, verify_password, create_access_token
from app.storage import RecordStore


logger = logging.getLogger(__name__)


def normalize_email(email: str) -> str:
    """Canonical form used for storage and lookups."""
    return email.strip().lower()


def _issue_token(user: User) -> str:
    # "sub" (subject) is the standard claim for user identity
    return create_access_token(data={"sub": user.id, "email": user.email})


async def signup(
    store: RecordStore[User],
    name: str,
    email: str,
    password: str,
) -> tuple[User, str]:
    """
    Register a new user.

    Args:
        store: The users collection.
        name: Display name (already trimmed and length-checked).
        email: User's email (must be unique, compared case-insensitively).
        password: Plaintext password (will be hashed before storage).

    Returns:
        Tuple of (User instance, JWT token string).

    Raises:
        DuplicateEmailError: If the email is already registered.
    """
    email = normalize_email(email)
    users = await store.load()

    if any(existing.email == email for existing in users):
        logger.info("Signup rejected: email already registered")
        raise DuplicateEmailError(email)

    user = User(
        id=str(uuid.uuid4()),
        name=name,
        email=email,
        password_hash=hash_password(password),
        created_at=datetime.now(timezone.utc),
    )
    users.append(user)
    await store.save(users)
    logger.info("Registered user %s", user.id)

    return user, _issue_token(user)


async def login(
    store: RecordStore[User],
    email: str,
    password: str,
) -> tuple[User, str]:
    """
    Authenticate a user and return a JWT token.

    Security: Returns the same error for both "wrong password" and
    "email not found" to prevent attackers from enumerating valid emails.

    Args:
        store: The users collection.
        email: User's email (any case).
        password: Plaintext password to verify.

    Returns:
        Tuple of (User instance, JWT token string).

    Raises:
        InvalidCredentialsError: If email doesn't exist or password is wrong.
    """
    email = normalize_email(email)
    users = await store.load()
    user = next((candidate for candidate in users if candidate.email == email), None)

    # Same error for both cases — prevents user enumeration
    if user is None:
        raise InvalidCredentialsError()

    if not verify_password(password, user.password_hash):
        raise InvalidCredentialsError()

    logger.info("User %s logged in", user.id)
    return user, _issue_token(user)
