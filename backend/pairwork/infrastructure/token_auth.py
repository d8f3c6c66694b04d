"""Bearer Token Auth — resolves an authenticated Principal from the Authorization header.

Invariants:
    - require_token raises AuthenticationError (401) before the handler body runs
    - A token is valid only if it decodes with the configured secret/algorithm
      and carries a non-empty "sub" claim; "sub" becomes Principal.id
    - resolve_update_principal never rejects a PATCH unless update_requires_token
      is enabled; without it any token that fails to verify resolves to None

Design Decisions:
    - TokenVerifier protocol: the verification mechanism is an external
      collaborator; JwtTokenVerifier is the default, tests may swap it through
      app.dependency_overrides[get_token_verifier]
    - HTTPBearer(auto_error=False): missing credentials become our own 401
      envelope instead of FastAPI's default 403
"""

import logging
from datetime import datetime, timedelta, timezone
from typing import Protocol

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import JWTError, jwt

from pairwork.config import Settings, get_settings
from pairwork.core.domain_types import Principal, PrincipalId
from pairwork.core.errors import AuthenticationError

logger = logging.getLogger(__name__)

bearer_scheme = HTTPBearer(auto_error=False)


class TokenVerifier(Protocol):
    """Contract for bearer credential verification."""
    def verify(self, token: str) -> Principal: ...


class JwtTokenVerifier:
    """Verifies HS256 (or configured algorithm) JWTs signed with a shared secret."""

    def __init__(self, secret_key: str, algorithm: str = "HS256"):
        self._secret_key = secret_key
        self._algorithm = algorithm

    def verify(self, token: str) -> Principal:
        try:
            payload = jwt.decode(
                token, self._secret_key, algorithms=[self._algorithm],
            )
        except JWTError as e:
            logger.info(f"Rejected bearer token: {e}")
            raise AuthenticationError("Invalid or expired bearer token")
        subject = payload.get("sub")
        if not subject:
            raise AuthenticationError("Bearer token has no subject")
        return Principal(id=PrincipalId(str(subject)))


def issue_token(
    principal_id: str,
    settings: Settings | None = None,
    expires_delta: timedelta | None = None,
) -> str:
    """Mint a signed token for principal_id (development and tests)."""
    settings = settings or get_settings()
    expire = datetime.now(timezone.utc) + (
        expires_delta or timedelta(minutes=settings.token_expire_minutes)
    )
    return jwt.encode(
        {"sub": principal_id, "exp": expire},
        settings.token_secret_key,
        algorithm=settings.token_algorithm,
    )


def get_token_verifier(
    settings: Settings = Depends(get_settings),
) -> TokenVerifier:
    """FastAPI dependency providing the configured verifier."""
    return JwtTokenVerifier(settings.token_secret_key, settings.token_algorithm)


async def require_token(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
    verifier: TokenVerifier = Depends(get_token_verifier),
) -> Principal:
    """Resolve the requester or reject with 401."""
    if credentials is None:
        raise AuthenticationError()
    return verifier.verify(credentials.credentials)


async def resolve_update_principal(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
    verifier: TokenVerifier = Depends(get_token_verifier),
    settings: Settings = Depends(get_settings),
) -> Principal | None:
    """Principal for PATCH routes; token optional unless update_requires_token."""
    if credentials is None:
        if settings.update_requires_token:
            raise AuthenticationError()
        return None
    try:
        return verifier.verify(credentials.credentials)
    except AuthenticationError as e:
        if settings.update_requires_token:
            raise
        logger.info(f"Ignoring unusable bearer token on update: {e.message}")
        return None
