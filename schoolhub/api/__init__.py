# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""HTTP API package.

Example:
    >>> from schoolhub.api import create_app
    >>> app = create_app(student_repository=repo, user_repository=users)
"""

from schoolhub.api.app import create_app

__all__ = ["create_app"]
