"""
Security helpers for password hashing, bearer tokens and ownership.

Tokens are JSON Web Tokens signed with HMAC‑SHA256 and base64url
encoded.  They embed the caller's ``id`` and ``username`` plus an
expiration timestamp (``exp``).  ``TokenCodec`` holds the secret and
lifetime; one instance is created per application and injected into
handlers through ``get_token_codec``.

Passwords are hashed with PBKDF2‑HMAC (SHA‑256) and stored as
``salthex$hashhex``.

``can_mutate`` is the ownership rule for blogs: only the account that
created a blog may update or delete it.
"""

import base64
import hashlib
import hmac
import json
import os
import time
from typing import Any, Dict, Optional

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from .db import Database, get_db
from ..schemas.user import UserInDB


PBKDF2_ITERATIONS = 100_000


class TokenInvalidError(Exception):
    pass


class TokenExpiredError(Exception):
    pass


def _b64_url_encode(data: bytes) -> str:
    """Base64‑url encode bytes without padding."""
    return base64.urlsafe_b64encode(data).rstrip(b"=").decode("utf-8")


def _b64_url_decode(data: str) -> bytes:
    """Decode base64‑url encoded string, adding padding if necessary."""
    padding = '=' * (-len(data) % 4)
    return base64.urlsafe_b64decode(data + padding)


class TokenCodec:
    """Issue and verify signed bearer tokens.

    Parameters
    ----------
    secret_key : str
        Secret used for the HMAC signature.
    expire_minutes : int
        Default token lifetime.
    """

    def __init__(self, secret_key: str, expire_minutes: int = 60) -> None:
        self.secret_key = secret_key
        self.expire_minutes = expire_minutes

    def _sign(self, message: bytes) -> bytes:
        return hmac.new(self.secret_key.encode("utf-8"), message, hashlib.sha256).digest()

    def encode(self, claims: Dict[str, Any], expires_delta: Optional[int] = None) -> str:
        """Create a signed token for ``claims``.

        The payload is extended with an ``exp`` field holding the
        expiration time as a UNIX timestamp.  ``expires_delta`` is the
        lifetime in seconds and defaults to ``expire_minutes * 60``.
        """
        to_encode = dict(claims)
        exp_seconds = expires_delta if expires_delta is not None else self.expire_minutes * 60
        to_encode["exp"] = int(time.time()) + exp_seconds
        header = {"alg": "HS256", "typ": "JWT"}
        header_b64 = _b64_url_encode(json.dumps(header, separators=(',', ':')).encode("utf-8"))
        payload_b64 = _b64_url_encode(json.dumps(to_encode, separators=(',', ':')).encode("utf-8"))
        signing_input = f"{header_b64}.{payload_b64}".encode("utf-8")
        signature_b64 = _b64_url_encode(self._sign(signing_input))
        return f"{header_b64}.{payload_b64}.{signature_b64}"

    def decode(self, token: str) -> Dict[str, Any]:
        """Verify ``token`` and return its claims.

        Raises
        ------
        TokenInvalidError
            If the token is malformed or the signature does not match.
        TokenExpiredError
            If the signature is valid but ``exp`` lies in the past.
        """
        parts = token.split('.')
        if len(parts) != 3:
            raise TokenInvalidError("token must have three segments")
        header_b64, payload_b64, signature_b64 = parts
        signing_input = f"{header_b64}.{payload_b64}".encode("utf-8")
        try:
            actual_sig = _b64_url_decode(signature_b64)
            if not hmac.compare_digest(self._sign(signing_input), actual_sig):
                raise TokenInvalidError("signature mismatch")
            data = json.loads(_b64_url_decode(payload_b64).decode("utf-8"))
        except (ValueError, UnicodeDecodeError) as e:
            raise TokenInvalidError(str(e)) from e
        if not isinstance(data, dict) or data.get("exp") is None:
            raise TokenInvalidError("missing exp claim")
        if int(data["exp"]) < int(time.time()):
            raise TokenExpiredError("token expired")
        return data


def get_token_codec(request: Request) -> TokenCodec:
    """FastAPI dependency returning the application's ``TokenCodec``."""
    return request.app.state.token_codec


security = HTTPBearer(auto_error=False)


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    codec: TokenCodec = Depends(get_token_codec),
    db: Database = Depends(get_db),
) -> UserInDB:
    """Dependency that resolves the bearer token to a stored account.

    Raises HTTP 401 when the header is missing, the token is invalid
    or expired, the token carries no ``id`` claim, or the account it
    names no longer exists.
    """
    if credentials is None:
        raise _unauthorized("token missing")
    try:
        payload = codec.decode(credentials.credentials)
    except TokenExpiredError:
        raise _unauthorized("token expired")
    except TokenInvalidError:
        raise _unauthorized("token invalid")
    if not payload.get("id"):
        raise _unauthorized("token invalid")

    from ..services.user_service import UserService

    try:
        user_id = int(payload["id"])
    except (TypeError, ValueError):
        raise _unauthorized("token invalid")
    user = UserService(db).get_user_by_id(user_id)
    if user is None:
        raise _unauthorized("user no longer exists")
    return user


# ---------------------------------------------------------------------------
# Ownership
# ---------------------------------------------------------------------------

def can_mutate(acting_user_id: Any, blog: Any) -> bool:
    """Return True iff ``acting_user_id`` owns ``blog``.

    Identities are compared by their string form, so ``7`` and ``"7"``
    name the same account.  An absent identity never owns anything.
    ``blog`` is any object with a ``user`` attribute holding the owner
    id (``BlogRead``, for instance).
    """
    if acting_user_id is None:
        return False
    owner_id = getattr(blog, "user", None)
    if owner_id is None:
        return False
    return str(acting_user_id) == str(owner_id)


# ---------------------------------------------------------------------------
# Passwords
# ---------------------------------------------------------------------------

def hash_password(password: str) -> str:
    """Hash a password using PBKDF2‑HMAC with SHA‑256.

    A 16‑byte random salt is generated for each password.  The result
    holds the salt and hash in hex separated by ``$``.
    """
    salt = os.urandom(16)
    dk = hashlib.pbkdf2_hmac('sha256', password.encode('utf-8'), salt, PBKDF2_ITERATIONS)
    return f"{salt.hex()}${dk.hex()}"


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a plain password against a stored ``salthex$hashhex`` string."""
    try:
        salt_hex, hash_hex = hashed_password.split('$', 1)
        salt = bytes.fromhex(salt_hex)
        stored_hash = bytes.fromhex(hash_hex)
    except ValueError:
        return False
    dk = hashlib.pbkdf2_hmac('sha256', plain_password.encode('utf-8'), salt, PBKDF2_ITERATIONS)
    return hmac.compare_digest(dk, stored_hash)
