"""
Store Admin Backend — Request Context & Identity
=================================================

What:  Builds the explicit per-request context handed to every service call.
How:   A FastAPI dependency reads the optional bearer token, verifies it with
       PyJWT against the identity provider's key, and takes the `sub` claim
       as the subject identifier. Services never look at the request itself.
Who:   Injected into route handlers with Depends(get_request_context).

Subject resolution:
    - No Authorization header          → subject_id = None
    - Token fails verification/expired → subject_id = None (logged at DEBUG)
    - Valid token without `sub`        → subject_id = None
    - Valid token                      → subject_id = payload["sub"]

    Whether a missing subject is an error is decided by the service
    (mutations require one, public listings do not).

Usage:
    @router.post("/api/stores")
    async def create_store(
        ctx: RequestContext = Depends(get_request_context),
    ):
        ...
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional

import jwt
from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jwt import InvalidTokenError

from app.config import settings
from app.middleware.request_id import request_id_var

logger = logging.getLogger(__name__)

# auto_error=False: anonymous requests reach the handler with credentials=None
bearer_scheme = HTTPBearer(auto_error=False)


@dataclass(frozen=True)
class RequestContext:
    """
    Immutable identity and correlation data for one request.

    Attributes:
        subject_id: Authenticated subject (JWT `sub` claim) or None
        request_id: Correlation id from RequestIDMiddleware ("" outside HTTP)
    """

    subject_id: Optional[str] = None
    request_id: str = ""

    @property
    def is_authenticated(self) -> bool:
        return bool(self.subject_id)


def decode_subject(token: str) -> Optional[str]:
    """
    Verify a bearer token and return its subject, or None if it is unusable.

    Verification covers signature, expiry and, when configured, issuer and
    audience. With no AUTH_JWT_KEY configured every token is rejected.
    """
    if not settings.auth_jwt_key:
        logger.debug("Bearer token ignored: AUTH_JWT_KEY is not configured")
        return None

    options: Dict[str, Any] = {"verify_aud": settings.auth_jwt_audience is not None}
    try:
        payload = jwt.decode(
            token,
            settings.auth_jwt_key,
            algorithms=[settings.auth_jwt_algorithm],
            audience=settings.auth_jwt_audience,
            issuer=settings.auth_jwt_issuer,
            options=options,
        )
    except InvalidTokenError as e:
        logger.debug("Bearer token rejected: %s", str(e))
        return None

    subject = payload.get("sub")
    if not subject:
        return None
    return str(subject)


async def get_request_context(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> RequestContext:
    """FastAPI dependency producing the RequestContext for the current request."""
    subject_id = decode_subject(credentials.credentials) if credentials else None
    return RequestContext(subject_id=subject_id, request_id=request_id_var.get(""))
