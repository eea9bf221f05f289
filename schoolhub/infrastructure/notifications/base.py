# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Base classes for outgoing account notifications."""

from abc import ABC, abstractmethod
from typing import Any


class EmailDeliveryError(Exception):
    """Raised when an email could not be handed to the mail server.

    Attributes:
        message: Error description.
        recipient: Address the email was meant for.
        original_error: Original exception if any.
    """

    def __init__(
        self,
        message: str,
        recipient: str | None = None,
        original_error: Exception | None = None,
    ) -> None:
        self.message = message
        self.recipient = recipient
        self.original_error = original_error
        super().__init__(self.message)


class AccountVerificationMailer(ABC):
    """Sends the account verification email to a newly created user.

    Implementations raise on any delivery failure; callers decide
    whether that failure matters.
    """

    @abstractmethod
    async def send_account_verification_email(
        self,
        user_id: Any,
        user_email: str | None,
    ) -> None:
        """Send a verification link to the user.

        Args:
            user_id: Identifier of the user being verified.
            user_email: Destination address.

        Raises:
            EmailDeliveryError: If the email cannot be sent.
        """
