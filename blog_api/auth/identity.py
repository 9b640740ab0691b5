"""
Identity Gate.

Resolves the ``Authorization: Bearer <token>`` header of a request to an
``Identity`` by delegating verification to the external identity
provider (Firebase ID tokens checked with google-auth). Without a header
the gate either rejects the request or, when authentication is not
required, falls back to a fixed development identity.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from logging import getLogger
from typing import Annotated, Any, Protocol, runtime_checkable

from fastapi import Depends, Header, Request
from fastapi.concurrency import run_in_threadpool
from google.auth.exceptions import GoogleAuthError, TransportError
from google.auth.transport import requests as google_requests
from google.oauth2 import id_token

from blog_api.configs import DEV_IDENTITY_NAME, DEV_IDENTITY_UID, file_logger
from blog_api.errors.auth import IdentityProviderUnavailableError, UnauthenticatedError
from blog_api.errors.base import ConfigurationError
from blog_api.monitoring import bind_user_id

logger = file_logger(getLogger(__name__))


@dataclass(frozen=True)
class AuthorSnapshot:
    """``{uid, email}`` copied from an identity at event time."""

    uid: str
    email: str | None


@dataclass(frozen=True)
class Identity:
    """Authenticated caller resolved from a verified token."""

    uid: str
    email: str | None = None
    name: str | None = None
    claims: Mapping[str, Any] = field(default_factory=dict)

    @classmethod
    def from_claims(cls, claims: Mapping[str, Any]) -> "Identity":
        uid = claims.get("uid") or claims.get("user_id") or claims.get("sub")
        if not uid:
            raise UnauthenticatedError("Token has no subject")
        email = claims.get("email")
        return cls(
            uid=str(uid),
            email=email.lower() if email else None,
            name=claims.get("name"),
            claims=dict(claims),
        )

    @property
    def snapshot(self) -> AuthorSnapshot:
        return AuthorSnapshot(uid=self.uid, email=self.email)


DEV_IDENTITY = Identity(uid=DEV_IDENTITY_UID, name=DEV_IDENTITY_NAME)


@runtime_checkable
class TokenVerifier(Protocol):
    """Verifies a bearer token and returns its claims, or raises ``ValueError``."""

    async def verify(self, token: str) -> Mapping[str, Any]: ...


class FirebaseTokenVerifier:
    """
    Verify Firebase ID tokens with google-auth.

    ``verify_firebase_token`` is blocking (it may fetch Google's signing
    certificates), so it runs in the thread pool.
    """

    def __init__(self, project_id: str | None) -> None:
        self.project_id = project_id
        self._request = google_requests.Request()

    async def verify(self, token: str) -> Mapping[str, Any]:
        if not self.project_id:
            raise ConfigurationError("FIREBASE_PROJECT_ID is not configured")
        try:
            claims = await run_in_threadpool(
                id_token.verify_firebase_token,
                token,
                self._request,
                self.project_id,
            )
        except TransportError as e:
            raise IdentityProviderUnavailableError(error=str(e)) from e
        if not claims:
            msg = "Token verification returned no claims"
            raise ValueError(msg)
        return claims


class IdentityGate:
    """
    Request-scoped credential check.

    One verification attempt per request; results are never cached.

    Args:
        verifier: Token verification capability
        require_auth: Reject requests without a credential when True
    """

    def __init__(self, verifier: TokenVerifier, *, require_auth: bool) -> None:
        self.verifier = verifier
        self.require_auth = require_auth

    async def authenticate(self, authorization: str | None) -> Identity:
        """
        Resolve an ``Authorization`` header value to an identity.

        Raises:
            UnauthenticatedError: Missing (when required), malformed or rejected credential
            IdentityProviderUnavailableError: The provider could not be reached
        """
        if not authorization:
            if self.require_auth:
                raise UnauthenticatedError("No token provided")
            logger.warning("No token provided, using development identity")
            return DEV_IDENTITY

        scheme, _, token = authorization.partition(" ")
        token = token.strip()
        if scheme.lower() != "bearer" or not token:
            raise UnauthenticatedError("Malformed authorization header")

        try:
            claims = await self.verifier.verify(token)
        except (ValueError, GoogleAuthError) as e:
            logger.warning(f"Token verification failed: {e}")
            raise UnauthenticatedError() from e

        return Identity.from_claims(claims)


def get_identity_gate(request: Request) -> IdentityGate:
    return request.app.state.identity_gate


async def get_current_identity(
    request: Request,
    gate: Annotated[IdentityGate, Depends(get_identity_gate)],
    authorization: Annotated[str | None, Header()] = None,
) -> Identity:
    """
    Dependency resolving the caller's identity.

    The identity is also stored on ``request.state.identity`` and its uid
    is bound to the log context.
    """
    identity = await gate.authenticate(authorization)
    request.state.identity = identity
    bind_user_id(identity.uid)
    return identity


IdentityDep = Annotated[Identity, Depends(get_current_identity)]
