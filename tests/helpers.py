"""Identities and token helpers shared by the test suite."""

from collections.abc import Mapping
from typing import Any

AUTHOR_TOKEN = "author-token"
OTHER_TOKEN = "other-token"
ADMIN_TOKEN = "admin-token"
NO_EMAIL_TOKEN = "no-email-token"

AUTHOR_EMAIL = "e1@example.com"
OTHER_EMAIL = "e2@example.com"
ADMIN_EMAIL = "admin@example.com"

TOKEN_CLAIMS: dict[str, dict[str, Any]] = {
    AUTHOR_TOKEN: {"uid": "u1", "email": AUTHOR_EMAIL, "name": "Author"},
    OTHER_TOKEN: {"uid": "u2", "email": OTHER_EMAIL, "name": "Other"},
    ADMIN_TOKEN: {"user_id": "a1", "email": ADMIN_EMAIL, "name": "Admin"},
    NO_EMAIL_TOKEN: {"sub": "u3"},
}


class FakeTokenVerifier:
    """Accepts the tokens in ``TOKEN_CLAIMS`` and rejects everything else."""

    def __init__(self, claims: Mapping[str, Mapping[str, Any]] = TOKEN_CLAIMS) -> None:
        self.claims = claims
        self.calls: list[str] = []

    async def verify(self, token: str) -> Mapping[str, Any]:
        self.calls.append(token)
        if token not in self.claims:
            msg = "Token signature invalid"
            raise ValueError(msg)
        return self.claims[token]


def bearer(token: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {token}"}
