"""Data models."""

from .login_set import LoginSet

__all__ = [
    "LoginSet",
]
