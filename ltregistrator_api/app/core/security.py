"""
Security helpers for bearer-token authentication.

This module implements a lightweight JSON Web Token (JWT) mechanism
using HMAC-SHA256 signatures and base64url encoding.  Tokens carry the
employee id in ``sub``, the employee's role in ``role`` and an
expiration timestamp in ``exp``.  The signing key comes from the
settings stored on the running application, so tests can issue tokens
against their own key.

Two FastAPI dependencies are exported:

* ``get_current_user`` - every ``/api`` route requires a valid token;
* ``require_access_allowed`` - the "AccessAllowed" policy: the caller
  must be the employee named in the path, or a manager/administrator.
"""

import base64
import hashlib
import hmac
import json
import time
from typing import Any, Dict, Optional

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from ..models import Role
from .config import settings

# Roles that may read any employee's information.
PRIVILEGED_ROLES = {Role.MANAGER.value, Role.ADMINISTRATOR.value}


def _b64_url_encode(data: bytes) -> str:
    """Base64-url encode bytes without padding."""
    return base64.urlsafe_b64encode(data).rstrip(b"=").decode("utf-8")


def _b64_url_decode(data: str) -> bytes:
    """Decode base64-url encoded string, adding padding if necessary."""
    padding = "=" * (-len(data) % 4)
    return base64.urlsafe_b64decode(data + padding)


def _sign(message: bytes, secret: str) -> bytes:
    return hmac.new(secret.encode("utf-8"), message, hashlib.sha256).digest()


def create_access_token(
    data: Dict[str, Any],
    expires_delta: Optional[int] = None,
    secret_key: Optional[str] = None,
) -> str:
    """Create a signed JWT with the given claims.

    Parameters
    ----------
    data : dict
        Claims to embed, e.g. ``{"sub": "7", "role": "Employee"}``.
    expires_delta : Optional[int]
        Lifetime of the token in seconds.  Defaults to
        ``settings.access_token_expire_minutes * 60``.
    secret_key : Optional[str]
        Signing key.  Defaults to ``settings.secret_key``.

    Returns
    -------
    str
        ``header.payload.signature``, each part base64url encoded.
    """
    to_encode = data.copy()
    exp_seconds = expires_delta or settings.access_token_expire_minutes * 60
    to_encode["exp"] = int(time.time()) + exp_seconds
    header = {"alg": "HS256", "typ": "JWT"}
    header_b64 = _b64_url_encode(json.dumps(header, separators=(",", ":")).encode("utf-8"))
    payload_b64 = _b64_url_encode(json.dumps(to_encode, separators=(",", ":")).encode("utf-8"))
    signing_input = f"{header_b64}.{payload_b64}".encode("utf-8")
    signature = _sign(signing_input, secret_key or settings.secret_key)
    return f"{header_b64}.{payload_b64}.{_b64_url_encode(signature)}"


def decode_access_token(token: str, secret_key: Optional[str] = None) -> Optional[Dict[str, Any]]:
    """Verify and decode a JWT.

    Returns the payload when the signature matches and ``exp`` lies in
    the future, otherwise ``None``.
    """
    parts = token.split(".")
    if len(parts) != 3:
        return None
    header_b64, payload_b64, signature_b64 = parts
    signing_input = f"{header_b64}.{payload_b64}".encode("utf-8")
    expected_sig = _sign(signing_input, secret_key or settings.secret_key)
    try:
        actual_sig = _b64_url_decode(signature_b64)
        if not hmac.compare_digest(expected_sig, actual_sig):
            return None
        data = json.loads(_b64_url_decode(payload_b64).decode("utf-8"))
        if not isinstance(data, dict) or data.get("exp") is None:
            return None
        expires_at = int(data["exp"])
    except (TypeError, ValueError, OverflowError, UnicodeDecodeError):
        return None
    if expires_at < int(time.time()):
        return None
    return data


security = HTTPBearer(auto_error=False)


def get_current_user(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
) -> Dict[str, Any]:
    """Dependency that returns the authenticated caller.

    Raises HTTP 401 when the ``Authorization`` header is missing or the
    token is invalid or expired.  On success returns a dict with
    ``employee_id`` (int) and ``role`` (str).
    """
    if credentials is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
            headers={"WWW-Authenticate": "Bearer"},
        )
    payload = decode_access_token(credentials.credentials, request.app.state.settings.secret_key)
    if not payload or not str(payload.get("sub", "")).isdigit():
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or expired token",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return {
        "employee_id": int(payload["sub"]),
        "role": payload.get("role", Role.EMPLOYEE.value),
    }


def require_access_allowed(
    employee_id: int,
    current_user: Dict[str, Any] = Depends(get_current_user),
) -> Dict[str, Any]:
    """Enforce the "AccessAllowed" policy for ``/{employee_id}/...`` routes."""
    if current_user["employee_id"] != employee_id and current_user["role"] not in PRIVILEGED_ROLES:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Access denied")
    return current_user
