# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Outgoing notifications.

- base: AccountVerificationMailer contract and EmailDeliveryError
- email: SMTP implementation using aiosmtplib
"""

from schoolhub.infrastructure.notifications.base import (
    AccountVerificationMailer,
    EmailDeliveryError,
)
from schoolhub.infrastructure.notifications.email import SMTPAccountVerificationMailer

__all__ = [
    "AccountVerificationMailer",
    "EmailDeliveryError",
    "SMTPAccountVerificationMailer",
]
