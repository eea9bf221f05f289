# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Domain packages.

- student: Student records orchestration
- auth: Account verification tokens
"""
