"""Utility functions for fitplan."""

from .passwords import hash_password, is_password_hash, verify_password

__all__ = ["hash_password", "is_password_hash", "verify_password"]
