# grossapp_api/services/passwords.py

"""
Credential hashing boundary.

Login passwords are never stored in clear text: the logins service hashes
them here before they reach the repository.
"""

from __future__ import annotations

from passlib.context import CryptContext

pwd_context = CryptContext(schemes=["pbkdf2_sha256"], deprecated="auto")


def hash_password(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(password: str, password_hash: str) -> bool:
    return pwd_context.verify(password, password_hash)


__all__ = ["hash_password", "verify_password", "pwd_context"]
