"""
Core module - token signing and verification.
"""
from bookvibe.core.security import create_access_token, decode_token

__all__ = [
    "create_access_token",
    "decode_token",
]
