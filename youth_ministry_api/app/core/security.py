"""
Password hashing and bearer‑token authentication.

Tokens are compact JWTs signed with HMAC‑SHA256 using
``settings.secret_key``; they carry the user's e‑mail as ``sub`` and an
``exp`` timestamp.  Passwords are stored as PBKDF2‑HMAC‑SHA256 digests
with a per‑password random salt.

Routes declare their access rules with ``Depends(get_current_user)`` or
``Depends(require_roles("admin", "leader"))``.
"""

import base64
import hashlib
import hmac
import json
import os
import time
from typing import Any, Callable, Dict, Optional

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from .config import settings
from .store import DataStore, get_store

PBKDF2_ITERATIONS = 100_000


def _b64_url_encode(data: bytes) -> str:
    return base64.urlsafe_b64encode(data).rstrip(b"=").decode("utf-8")


def _b64_url_decode(data: str) -> bytes:
    padding = "=" * (-len(data) % 4)
    return base64.urlsafe_b64decode(data + padding)


def _sign(message: bytes, secret: str) -> bytes:
    return hmac.new(secret.encode("utf-8"), message, hashlib.sha256).digest()


def create_access_token(claims: Dict[str, Any], expires_in: Optional[int] = None) -> str:
    """Create a signed token embedding ``claims``.

    Parameters
    ----------
    claims : dict
        Claims to embed, typically ``{"sub": email}``.
    expires_in : Optional[int]
        Lifetime in seconds.  Defaults to
        ``settings.access_token_expire_minutes * 60``.

    Returns
    -------
    str
        ``header.payload.signature``, each part base64url encoded.
    """
    payload = dict(claims)
    lifetime = expires_in or settings.access_token_expire_minutes * 60
    payload["exp"] = int(time.time()) + lifetime
    header = {"alg": "HS256", "typ": "JWT"}
    header_b64 = _b64_url_encode(json.dumps(header, separators=(",", ":")).encode("utf-8"))
    payload_b64 = _b64_url_encode(json.dumps(payload, separators=(",", ":")).encode("utf-8"))
    signature = _sign(f"{header_b64}.{payload_b64}".encode("utf-8"), settings.secret_key)
    return f"{header_b64}.{payload_b64}.{_b64_url_encode(signature)}"


def decode_access_token(token: str) -> Optional[Dict[str, Any]]:
    """Verify a token's signature and expiry.

    Returns the payload, or ``None`` for any malformed, forged or
    expired token.
    """
    parts = token.split(".")
    if len(parts) != 3:
        return None
    header_b64, payload_b64, signature_b64 = parts
    try:
        actual_sig = _b64_url_decode(signature_b64)
        expected_sig = _sign(f"{header_b64}.{payload_b64}".encode("utf-8"), settings.secret_key)
        if not hmac.compare_digest(expected_sig, actual_sig):
            return None
        data = json.loads(_b64_url_decode(payload_b64).decode("utf-8"))
    except (ValueError, UnicodeDecodeError):
        return None
    if not isinstance(data, dict):
        return None
    exp = data.get("exp")
    if not isinstance(exp, int) or exp < int(time.time()):
        return None
    return data


security = HTTPBearer(auto_error=False)


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    store: DataStore = Depends(get_store),
) -> Dict[str, Any]:
    """Dependency that resolves the bearer token to a user context.

    The returned dict holds the token claims plus ``user_id``, ``name``
    and ``role`` looked up from the user store, so a role change takes
    effect without re-issuing tokens.  Raises HTTP 401 when the header
    is missing, the token is invalid or the user no longer exists.
    """
    if credentials is None:
        raise _unauthorized("Not authenticated")
    payload = decode_access_token(credentials.credentials)
    if not payload:
        raise _unauthorized("Invalid or expired token")
    user = store.users.get_by_email(str(payload.get("sub", "")))
    if user is None:
        raise _unauthorized("User no longer exists")
    payload["user_id"] = user.id
    payload["name"] = user.name
    payload["role"] = user.role
    return payload


def require_roles(*roles: str) -> Callable[..., Dict[str, Any]]:
    """Dependency factory allowing only users whose role is in ``roles``.

    Use as ``Depends(require_roles("admin", "leader"))``.  Raises HTTP 403
    for authenticated users with any other role.
    """

    def _role_dependency(current_user: Dict[str, Any] = Depends(get_current_user)) -> Dict[str, Any]:
        if current_user.get("role") not in roles:
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail="Insufficient permissions",
            )
        return current_user

    return _role_dependency


def hash_password(password: str) -> str:
    """Hash a password as ``<salt hex>$<digest hex>``."""
    salt = os.urandom(16)
    dk = hashlib.pbkdf2_hmac("sha256", password.encode("utf-8"), salt, PBKDF2_ITERATIONS)
    return f"{salt.hex()}${dk.hex()}"


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Check ``plain_password`` against a string from ``hash_password``."""
    try:
        salt_hex, hash_hex = hashed_password.split("$", 1)
        salt = bytes.fromhex(salt_hex)
        stored_hash = bytes.fromhex(hash_hex)
    except ValueError:
        return False
    dk = hashlib.pbkdf2_hmac("sha256", plain_password.encode("utf-8"), salt, PBKDF2_ITERATIONS)
    return hmac.compare_digest(dk, stored_hash)
