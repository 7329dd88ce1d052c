"""
Utilities Package

Contents:
=========
- security: Password hashing and JWT management

Usage:
======
    from snipshare.shared.utils.security import SecurityUtils
"""

from snipshare.shared.utils.security import SecurityUtils

__all__ = [
    "SecurityUtils",
]
