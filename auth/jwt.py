"""
JWT token creation and verification.

Tokens are compact HS256 JWS strings (``header.payload.signature``, each
part base64url-encoded without padding) carrying ``sub``, ``iat`` and
``exp`` claims. The secret and lifetime come from ``Settings``.
"""

from __future__ import annotations

import hashlib
import hmac
import json
import time
from base64 import urlsafe_b64decode, urlsafe_b64encode
from typing import Any, Dict, Optional

from api.exceptions import UnauthorizedError

_HEADER = {"alg": "HS256", "typ": "JWT"}


def _b64encode(raw: bytes) -> str:
    return urlsafe_b64encode(raw).rstrip(b"=").decode()


def _b64decode(segment: str) -> bytes:
    return urlsafe_b64decode(segment + "=" * (-len(segment) % 4))


def _sign(signing_input: bytes, secret: str) -> str:
    return _b64encode(hmac.new(secret.encode(), signing_input, hashlib.sha256).digest())


def create_token(
    user_id: str,
    secret: str,
    expiry_seconds: int = 3600,
    now: Optional[int] = None,
) -> str:
    """Create a signed token with ``sub=user_id`` expiring *expiry_seconds* from now."""
    issued_at = int(time.time()) if now is None else now
    payload = {
        "sub": user_id,
        "iat": issued_at,
        "exp": issued_at + expiry_seconds,
    }
    header_seg = _b64encode(json.dumps(_HEADER, separators=(",", ":")).encode())
    payload_seg = _b64encode(json.dumps(payload, separators=(",", ":")).encode())
    signing_input = f"{header_seg}.{payload_seg}".encode()
    return f"{header_seg}.{payload_seg}.{_sign(signing_input, secret)}"


def decode_token(token: str, secret: str) -> Dict[str, Any]:
    """
    Verify *token* and return its payload.

    Raises ``UnauthorizedError`` on a malformed, tampered or expired token.
    """
    try:
        header_seg, payload_seg, sig = token.split(".")
        expected_sig = _sign(f"{header_seg}.{payload_seg}".encode(), secret)
        if not hmac.compare_digest(sig, expected_sig):
            raise ValueError("bad signature")
        header = json.loads(_b64decode(header_seg))
        if header.get("alg") != _HEADER["alg"]:
            raise ValueError("unsupported algorithm")
        payload = json.loads(_b64decode(payload_seg))
        if not isinstance(payload.get("sub"), str):
            raise ValueError("missing subject")
        if payload.get("exp", 0) <= time.time():
            raise ValueError("token expired")
    except (ValueError, TypeError, AttributeError) as exc:
        raise UnauthorizedError("Invalid or expired token") from exc
    return payload


def verify_token(token: str, secret: str) -> str:
    """Verify token and return the ``sub`` (user id)."""
    return decode_token(token, secret)["sub"]
