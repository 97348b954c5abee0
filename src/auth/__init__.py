"""
Authentication package.

Mutating routes are protected by a single shared admin key sent as a
bearer token.
"""

from .dependencies import require_admin  # noqa

__all__ = ["require_admin"]
