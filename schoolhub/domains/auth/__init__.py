# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Auth domain package.

This package provides account verification token handling.
"""

from schoolhub.domains.auth.verification import (
    InvalidTokenError,
    TokenExpiredError,
    VerificationClaims,
    VerificationTokenError,
    VerificationTokenManager,
)

__all__ = [
    "VerificationTokenManager",
    "VerificationClaims",
    "VerificationTokenError",
    "TokenExpiredError",
    "InvalidTokenError",
]
