# tests/auth/test_identity_gate.py
"""Tests for blog_api/auth/identity.py and blog_api/auth/roles.py."""

from unittest.mock import patch

import pytest
from google.auth.exceptions import TransportError
from sqlalchemy.ext.asyncio import AsyncSession

from blog_api.auth import DEV_IDENTITY, FirebaseTokenVerifier, Identity, IdentityGate, RoleResolver
from blog_api.auth.identity import TokenVerifier
from blog_api.configs import Settings
from blog_api.errors import (
    ConfigurationError,
    IdentityProviderUnavailableError,
    UnauthenticatedError,
)
from blog_api.models import Role, UserDB
from blog_api.repositories import UserRepository
from helpers import AUTHOR_TOKEN, NO_EMAIL_TOKEN, FakeTokenVerifier


class TestIdentityFromClaims:
    """Tests for building an identity from verified claims."""

    def test_uid_claim(self) -> None:
        identity = Identity.from_claims({"uid": "u1", "email": "e1@example.com", "name": "N"})

        assert identity.uid == "u1"
        assert identity.email == "e1@example.com"
        assert identity.name == "N"
        assert identity.snapshot.uid == "u1"

    def test_falls_back_to_user_id_then_sub(self) -> None:
        assert Identity.from_claims({"user_id": "a"}).uid == "a"
        assert Identity.from_claims({"sub": "b"}).uid == "b"

    def test_missing_subject_rejected(self) -> None:
        with pytest.raises(UnauthenticatedError):
            Identity.from_claims({"email": "x@example.com"})

    def test_email_is_lowercased(self) -> None:
        identity = Identity.from_claims({"uid": "u1", "email": "E1@Example.COM"})

        assert identity.email == "e1@example.com"
        assert identity.snapshot.email == "e1@example.com"


class TestIdentityGate:
    """Tests for credential resolution."""

    def test_fake_verifier_satisfies_protocol(self) -> None:
        assert isinstance(FakeTokenVerifier(), TokenVerifier)

    @pytest.mark.asyncio
    async def test_missing_header_required(self) -> None:
        gate = IdentityGate(FakeTokenVerifier(), require_auth=True)

        with pytest.raises(UnauthenticatedError) as exc_info:
            await gate.authenticate(None)

        assert exc_info.value.detail == "No token provided"
        assert exc_info.value.status_code == 401

    @pytest.mark.asyncio
    async def test_missing_header_not_required_uses_dev_identity(self) -> None:
        """Without a credential the development placeholder is used."""
        verifier = FakeTokenVerifier()
        gate = IdentityGate(verifier, require_auth=False)

        identity = await gate.authenticate(None)

        assert identity == DEV_IDENTITY
        assert identity.uid == "devUser"
        assert identity.name == "Development User"
        assert identity.email is None
        assert verifier.calls == []

    @pytest.mark.asyncio
    async def test_valid_token(self) -> None:
        gate = IdentityGate(FakeTokenVerifier(), require_auth=True)

        identity = await gate.authenticate(f"Bearer {AUTHOR_TOKEN}")

        assert identity.uid == "u1"
        assert identity.email == "e1@example.com"

    @pytest.mark.asyncio
    async def test_token_without_email(self) -> None:
        gate = IdentityGate(FakeTokenVerifier(), require_auth=True)

        identity = await gate.authenticate(f"Bearer {NO_EMAIL_TOKEN}")

        assert identity.uid == "u3"
        assert identity.email is None

    @pytest.mark.asyncio
    @pytest.mark.parametrize("header", ["Token abc", "Bearer", "Bearer   ", "abc"])
    async def test_malformed_header(self, header: str) -> None:
        """A header that is not ``Bearer <token>`` is rejected even in dev mode."""
        gate = IdentityGate(FakeTokenVerifier(), require_auth=False)

        with pytest.raises(UnauthenticatedError) as exc_info:
            await gate.authenticate(header)

        assert exc_info.value.detail == "Malformed authorization header"

    @pytest.mark.asyncio
    async def test_rejected_token(self) -> None:
        gate = IdentityGate(FakeTokenVerifier(), require_auth=True)

        with pytest.raises(UnauthenticatedError) as exc_info:
            await gate.authenticate("Bearer forged")

        assert exc_info.value.detail == "Invalid or expired token"


class TestFirebaseTokenVerifier:
    """Tests for the google-auth backed verifier."""

    @pytest.mark.asyncio
    async def test_requires_project_id(self) -> None:
        with pytest.raises(ConfigurationError):
            await FirebaseTokenVerifier(None).verify("token")

    @pytest.mark.asyncio
    async def test_returns_claims(self) -> None:
        claims = {"user_id": "u1", "email": "e1@example.com"}
        with patch(
            "blog_api.auth.identity.id_token.verify_firebase_token",
            return_value=claims,
        ) as verify:
            result = await FirebaseTokenVerifier("demo-project").verify("token")

        assert result == claims
        assert verify.call_args.args[0] == "token"
        assert verify.call_args.args[2] == "demo-project"

    @pytest.mark.asyncio
    async def test_transport_error_is_unavailable(self) -> None:
        """A provider outage is a server error, not a rejected credential."""
        with patch(
            "blog_api.auth.identity.id_token.verify_firebase_token",
            side_effect=TransportError("certs unreachable"),
        ):
            with pytest.raises(IdentityProviderUnavailableError) as exc_info:
                await FirebaseTokenVerifier("demo-project").verify("token")

        assert exc_info.value.status_code == 500
        assert "certs unreachable" in (exc_info.value.error or "")

    @pytest.mark.asyncio
    async def test_invalid_signature_through_gate(self) -> None:
        with patch(
            "blog_api.auth.identity.id_token.verify_firebase_token",
            side_effect=ValueError("Token expired"),
        ):
            gate = IdentityGate(FirebaseTokenVerifier("demo-project"), require_auth=True)
            with pytest.raises(UnauthenticatedError):
                await gate.authenticate("Bearer expired")


class TestRoleResolver:
    """Tests for role lookup by e-mail."""

    @pytest.mark.asyncio
    async def test_unknown_email_is_user_and_not_created(self, session: AsyncSession) -> None:
        repo = UserRepository(session)

        role = await RoleResolver(repo).resolve("ghost@example.com")

        assert role == Role.USER
        assert await repo.count() == 0

    @pytest.mark.asyncio
    async def test_missing_email_is_user(self, session: AsyncSession) -> None:
        assert await RoleResolver(UserRepository(session)).resolve(None) == Role.USER

    @pytest.mark.asyncio
    async def test_stored_admin(self, session: AsyncSession) -> None:
        session.add(UserDB(email="boss@example.com", role="admin"))
        await session.flush()
        resolver = RoleResolver(UserRepository(session))

        assert await resolver.resolve("boss@example.com") == Role.ADMIN
        assert await resolver.is_admin(Identity(uid="b", email="boss@example.com")) is True
        assert await resolver.is_admin(Identity(uid="b", email=None)) is False

    @pytest.mark.asyncio
    async def test_unrecognised_stored_role_is_user(self, session: AsyncSession) -> None:
        """A role value outside the known set falls back to the default role."""
        session.add(UserDB(email="odd@example.com", role="superuser"))
        await session.flush()

        assert await RoleResolver(UserRepository(session)).resolve("odd@example.com") == Role.USER

    @pytest.mark.asyncio
    async def test_lookup_ignores_email_case(self, session: AsyncSession) -> None:
        session.add(UserDB(email="boss@example.com", role="admin"))
        await session.flush()

        assert await RoleResolver(UserRepository(session)).resolve("Boss@Example.COM") == Role.ADMIN


class TestAuthRequiredSetting:
    """Tests for deriving the credential requirement from the environment."""

    @pytest.fixture(autouse=True)
    def _no_env_override(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("REQUIRE_AUTH", raising=False)

    def test_production_requires_auth(self) -> None:
        assert Settings(_env_file=None, ENVIRONMENT="production").auth_required is True

    @pytest.mark.parametrize("environment", ["development", "staging", "test"])
    def test_other_environments_allow_dev_identity(self, environment: str) -> None:
        assert Settings(_env_file=None, ENVIRONMENT=environment).auth_required is False

    def test_explicit_false_overrides_production(self) -> None:
        settings = Settings(_env_file=None, ENVIRONMENT="production", REQUIRE_AUTH=False)

        assert settings.auth_required is False

    def test_explicit_true_overrides_development(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("REQUIRE_AUTH", "true")

        assert Settings(_env_file=None, ENVIRONMENT="development").auth_required is True
