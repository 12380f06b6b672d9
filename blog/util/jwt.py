"""JWT token utilities."""

import base64
import secrets
from datetime import datetime, timedelta, timezone
from uuid import UUID, uuid4

import jwt
from pydantic import BaseModel

from blog.config import JWTSettings
from blog.util.error import ConfigurationError

ALGORITHM = "HS256"

REFRESH_SECRET_BYTES = 64


class AccessTokenClaims(BaseModel):
    """Claims carried inside a signed access token."""

    user_id: UUID
    username: str
    role: str
    correlation_id: str
    expires_at: datetime


class JWTError(Exception):
    """JWT-related error."""

    pass


def _require_secret(settings: JWTSettings) -> str:
    if not settings.secret_key:
        raise ConfigurationError("JWT secret key not configured")
    return settings.secret_key


def create_token(
    user_id: UUID,
    username: str,
    role: str,
    settings: JWTSettings,
    now: datetime | None = None,
) -> str:
    """Create a signed access token.

    Args:
        user_id: User ID (becomes the ``sub`` claim)
        username: Username
        role: User role
        settings: JWT settings
        now: Issuance time, defaults to the current UTC time

    Returns:
        Encoded JWT token

    Raises:
        ConfigurationError: If the secret key is not configured
    """
    secret = _require_secret(settings)
    issued_at = now or datetime.now(timezone.utc)

    payload = {
        "sub": str(user_id),
        "name": username,
        "role": role,
        "correlation_id": str(uuid4()),
        "iat": issued_at,
        "exp": issued_at + timedelta(minutes=settings.expiration_minutes),
    }
    if settings.issuer:
        payload["iss"] = settings.issuer
    if settings.audience:
        payload["aud"] = settings.audience

    return jwt.encode(payload, secret, algorithm=ALGORITHM)


def verify_token(
    token: str, settings: JWTSettings, ignore_expiry: bool = False
) -> AccessTokenClaims:
    """Verify and decode a JWT token.

    Args:
        token: JWT token to verify
        settings: JWT settings
        ignore_expiry: Accept tokens whose ``exp`` is in the past

    Returns:
        Token claims if valid

    Raises:
        ConfigurationError: If the secret key is not configured
        JWTError: If token is malformed, forged, uses another algorithm or is expired
    """
    secret = _require_secret(settings)

    try:
        header = jwt.get_unverified_header(token)
    except jwt.InvalidTokenError:
        raise JWTError("Malformed token")

    # Exact match only; blocks "none" and algorithm substitution
    if header.get("alg") != ALGORITHM:
        raise JWTError(f"Unexpected token algorithm: {header.get('alg')}")

    try:
        payload = jwt.decode(
            token,
            secret,
            algorithms=[ALGORITHM],
            issuer=settings.issuer,
            audience=settings.audience,
            options={
                "verify_exp": not ignore_expiry,
                "verify_aud": settings.audience is not None,
                "require": ["sub", "exp"],
            },
        )
        return AccessTokenClaims(
            user_id=UUID(payload["sub"]),
            username=payload["name"],
            role=payload["role"],
            correlation_id=payload["correlation_id"],
            expires_at=datetime.fromtimestamp(payload["exp"], tz=timezone.utc),
        )
    except jwt.ExpiredSignatureError:
        raise JWTError("Token has expired")
    except jwt.InvalidTokenError:
        raise JWTError("Invalid token")
    except (KeyError, ValueError):
        raise JWTError("Token is missing required claims")


def create_refresh_secret() -> str:
    """Generate an opaque refresh secret.

    Returns:
        Base64 text of 64 cryptographically random bytes (88 characters)
    """
    return base64.b64encode(secrets.token_bytes(REFRESH_SECRET_BYTES)).decode("ascii")
