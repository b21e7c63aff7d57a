"""
Security module for handling authentication and password hashing.
"""
from .jwt import create_access_token, decode_token
from .passwords import hash_password, verify_password

__all__ = [
    "create_access_token",
    "decode_token",
    "hash_password",
    "verify_password"
]
