"""
FastAPI dependencies for authentication.

Every protected endpoint declares `identity: Identity = Depends(get_current_identity)`.
FastAPI calls the dependency first, and if it fails the request is rejected
before the route handler runs:

  - No "Authorization: Bearer <token>" header (or a non-bearer scheme)
        -> MissingTokenError   (401)
  - A bearer token that is expired, tampered with, or lacks its claims
        -> InvalidTokenError   (403)

On success the decoded claim {user id, email} is returned as an Identity,
which handlers pass explicitly to the services that need it. The users
collection is not consulted: tokens are self-contained and there is no
server-side session or revocation list.
"""

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import JWTError

from app.exceptions import InvalidTokenError, MissingTokenError
from app.models.user import Identity
from app.security import decode_access_token


# auto_error=False lets us raise our own MissingTokenError instead of
# FastAPI's default 403 for a missing header.
bearer_scheme = HTTPBearer(auto_error=False)


async def get_current_identity(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> Identity:
    """
    Extract and validate the bearer token, then return the caller's Identity.

    Args:
        credentials: Parsed Authorization header (injected by HTTPBearer),
                     or None when it is absent or not a bearer credential.

    Returns:
        The Identity asserted by the token.

    Raises:
        MissingTokenError: If no bearer token was presented.
        InvalidTokenError: If the token fails verification.
    """
    if credentials is None or not credentials.credentials:
        raise MissingTokenError()

    try:
        payload = decode_access_token(credentials.credentials)
    except JWTError:
        raise InvalidTokenError()

    user_id = payload.get("sub")
    email = payload.get("email")
    if not isinstance(user_id, str) or not isinstance(email, str):
        raise InvalidTokenError()

    return Identity(user_id=user_id, email=email)
