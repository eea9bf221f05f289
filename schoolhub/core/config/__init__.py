# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Configuration package for SchoolHub.

Example:
    >>> from schoolhub.core.config import get_settings
    >>> settings = get_settings()
    >>> print(settings.environment)
    'development'
"""

from schoolhub.core.config.settings import (
    CORSSettings,
    SMTPSettings,
    Settings,
    VerificationSettings,
    clear_settings_cache,
    get_settings,
)

__all__ = [
    # Settings
    "Settings",
    "get_settings",
    "clear_settings_cache",
    # Subsettings
    "SMTPSettings",
    "VerificationSettings",
    "CORSSettings",
]
