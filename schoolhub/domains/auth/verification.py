# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Account verification token utilities.

Newly enrolled students receive a link carrying a signed JWT that proves
ownership of their email address. Tokens are created and validated with
python-jose.

Example:
    >>> from schoolhub.core.config import get_settings
    >>> manager = VerificationTokenManager(get_settings().verification)
    >>> token = manager.create_token(user_id=42, email="student@school.com")
    >>> manager.decode_token(token).email
    'student@school.com'
"""

import logging
import secrets
from datetime import datetime, timedelta, timezone
from typing import Any, Literal

from jose import ExpiredSignatureError, jwt
from pydantic import BaseModel

from schoolhub.core.config.settings import VerificationSettings

logger = logging.getLogger(__name__)

TOKEN_TYPE = "account_verification"


class VerificationClaims(BaseModel):
    """Verification token payload structure.

    Attributes:
        sub: Subject (user ID).
        email: Address being verified.
        type: Token type marker.
        exp: Expiration timestamp.
        iat: Issued at timestamp.
        jti: Token ID.
    """

    sub: str
    email: str
    type: Literal["account_verification"]
    exp: int
    iat: int
    jti: str


class VerificationTokenError(Exception):
    """Base exception for verification token operations."""

    pass


class TokenExpiredError(VerificationTokenError):
    """Raised when a verification token has expired."""

    pass


class InvalidTokenError(VerificationTokenError):
    """Raised when a verification token is invalid."""

    pass


class VerificationTokenManager:
    """Creates and validates account verification tokens.

    Attributes:
        _settings: Verification token settings.
    """

    def __init__(self, settings: VerificationSettings) -> None:
        self._settings = settings

    def create_token(self, user_id: Any, email: str) -> str:
        """Create a signed verification token.

        Args:
            user_id: Identifier of the user to verify.
            email: Address the link is sent to.

        Returns:
            JWT string.
        """
        now = datetime.now(timezone.utc)
        exp = now + timedelta(hours=self._settings.token_expire_hours)

        payload = {
            "sub": str(user_id),
            "email": email,
            "type": TOKEN_TYPE,
            "exp": int(exp.timestamp()),
            "iat": int(now.timestamp()),
            "jti": secrets.token_urlsafe(16),
        }

        return jwt.encode(
            payload,
            self._settings.secret_key.get_secret_value(),
            algorithm=self._settings.algorithm,
        )

    def decode_token(self, token: str) -> VerificationClaims:
        """Decode and validate a verification token.

        Raises:
            TokenExpiredError: If the token has expired.
            InvalidTokenError: If the token is malformed, tampered with
                or not a verification token.
        """
        try:
            payload = jwt.decode(
                token,
                self._settings.secret_key.get_secret_value(),
                algorithms=[self._settings.algorithm],
            )
        except ExpiredSignatureError:
            raise TokenExpiredError("Verification token has expired")
        except Exception as e:
            logger.warning("Verification token decode failed: %s", str(e))
            raise InvalidTokenError(f"Invalid verification token: {str(e)}")

        if payload.get("type") != TOKEN_TYPE:
            raise InvalidTokenError(
                f"Expected {TOKEN_TYPE} token, got {payload.get('type')}"
            )

        return VerificationClaims(**payload)
