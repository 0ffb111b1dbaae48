"""Explicit user session and the auth service that creates and ends it.

A ``UserSession`` is built from a verified access token for every request and
handed to the routers and feature functions that need the current user. There
is no global "current user": whoever needs it receives the session object.
"""
from dataclasses import dataclass
from typing import Any, Dict, Optional

import jwt

from jobportal.core.backend import BackendClient
from jobportal.core.config import Settings
from jobportal.core.exceptions import AuthError
from jobportal.core.logging import setup_logging

logger = setup_logging('session')

ALGORITHM = "HS256"


@dataclass(frozen=True)
class UserSession:
    """The signed-in user and the token that proves it."""
    user_id: str
    email: Optional[str]
    access_token: str

    @classmethod
    def from_claims(cls, claims: Dict[str, Any], access_token: str) -> "UserSession":
        return cls(
            user_id=str(claims["sub"]),
            email=claims.get("email"),
            access_token=access_token
        )


def verify_access_token(token: str, settings: Settings) -> Dict[str, Any]:
    """Verify a user access token and return its claims.

    Args:
        token: Encoded JWT from the ``Authorization`` header
        settings: Settings holding the signing secret and audience

    Returns:
        Decoded claims; always contains ``sub``

    Raises:
        AuthError: If the token is expired, forged or lacks a subject
    """
    try:
        claims = jwt.decode(
            token,
            settings.jwt_secret,
            algorithms=[ALGORITHM],
            audience=settings.jwt_audience
        )
    except jwt.PyJWTError as e:
        raise AuthError(f"Invalid access token: {str(e)}", status_code=401) from e

    if not claims.get("sub"):
        raise AuthError("Access token has no subject", status_code=401)
    return claims


class AuthService:
    """Signs users in and out against the hosted auth service."""

    def __init__(self, backend: BackendClient, settings: Settings):
        self.backend = backend
        self.settings = settings

    def sign_in(self, email: str, password: str) -> Dict[str, Any]:
        """Sign in with email and password.

        Returns:
            The token payload: ``access_token``, ``refresh_token``,
            ``expires_in`` and ``user``
        """
        payload = self.backend.sign_in(email, password)
        if not payload or not payload.get("access_token"):
            raise AuthError("Sign-in response did not include an access token")
        logger.info(f"User {email} signed in")
        return payload

    def sign_up(self, email: str, password: str) -> Dict[str, Any]:
        """Register a user; returns the created user record."""
        payload = self.backend.sign_up(email, password) or {}
        logger.info(f"User {email} signed up")
        return payload.get("user", payload)

    def sign_out(self, session: UserSession) -> None:
        """End the session remotely. The token must not be reused afterwards."""
        self.backend.sign_out(session.access_token)
        logger.info(f"User {session.user_id} signed out")

    def session_for(self, token: str) -> UserSession:
        """Build a session from a raw access token."""
        claims = verify_access_token(token, self.settings)
        return UserSession.from_claims(claims, token)
