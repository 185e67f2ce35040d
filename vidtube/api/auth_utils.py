import os
from datetime import UTC, datetime, timedelta
from typing import Any, cast

from jose import jwt
from passlib.context import CryptContext

ACCESS_TOKEN_SECRET = os.environ.get("VIDTUBE_ACCESS_TOKEN_SECRET", "dev-access-secret-unsafe")
REFRESH_TOKEN_SECRET = os.environ.get("VIDTUBE_REFRESH_TOKEN_SECRET", "dev-refresh-secret-unsafe")
ALGORITHM = "HS256"
ACCESS_TOKEN_EXPIRE_MINUTES = 60 * 24  # 1 day
REFRESH_TOKEN_EXPIRE_DAYS = 15

pwd_context = CryptContext(schemes=["argon2"], deprecated="auto")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    result: bool = pwd_context.verify(plain_password, hashed_password)
    return result


def get_password_hash(password: str) -> str:
    result: str = pwd_context.hash(password)
    return result


def _encode(
    data: dict[str, Any],
    secret: str,
    expires_delta: timedelta,
    now_utc: datetime | None = None,
) -> str:
    to_encode = data.copy()
    current_time = now_utc if now_utc is not None else datetime.now(UTC)
    to_encode.update({"exp": current_time + expires_delta, "iat": current_time})
    encoded_jwt: str = jwt.encode(to_encode, secret, algorithm=ALGORITHM)
    return encoded_jwt


def _decode(token: str, secret: str) -> dict[str, Any] | None:
    try:
        payload = jwt.decode(token, secret, algorithms=[ALGORITHM])
        return cast(dict[str, Any], payload)
    except jwt.JWTError:
        return None


def create_access_token(
    data: dict[str, Any],
    expires_delta: timedelta | None = None,
    now_utc: datetime | None = None,
) -> str:
    """
    Create a signed access token.

    Args:
        data: Claims to encode in the token (``sub`` is the user id)
        expires_delta: Optional custom expiration delta
        now_utc: Current UTC time (for testing/determinism). Defaults to datetime.now(UTC).
    """
    delta = expires_delta or timedelta(minutes=ACCESS_TOKEN_EXPIRE_MINUTES)
    return _encode(data, ACCESS_TOKEN_SECRET, delta, now_utc)


def create_refresh_token(
    data: dict[str, Any],
    expires_delta: timedelta | None = None,
    now_utc: datetime | None = None,
) -> str:
    delta = expires_delta or timedelta(days=REFRESH_TOKEN_EXPIRE_DAYS)
    return _encode(data, REFRESH_TOKEN_SECRET, delta, now_utc)


def decode_access_token(token: str) -> dict[str, Any] | None:
    return _decode(token, ACCESS_TOKEN_SECRET)


def decode_refresh_token(token: str) -> dict[str, Any] | None:
    return _decode(token, REFRESH_TOKEN_SECRET)
