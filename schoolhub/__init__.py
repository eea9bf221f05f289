"""SchoolHub Backend.

Student records management for the school-management web application:
payload normalization, class/section validation, persistence delegation
and account verification email on enrollment.

Copyright (C) 2025 Global Digital Labs (gdlabs.io)
SPDX-License-Identifier: LGPL-3.0-or-later
"""

__version__ = "1.0.0"
