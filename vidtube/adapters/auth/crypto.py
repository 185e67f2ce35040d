import secrets
from datetime import timedelta

from vidtube.api.auth_utils import (
    create_access_token,
    create_refresh_token,
    decode_refresh_token,
    get_password_hash,
    verify_password,
)
from vidtube.domain.entities import User


class JWTAuthAdapter:
    """Auth adapter that signs JWT access/refresh tokens and hashes passwords with passlib."""

    def __init__(self, access_ttl_minutes: int = 60 * 24, refresh_ttl_days: int = 15):
        self.access_ttl = timedelta(minutes=access_ttl_minutes)
        self.refresh_ttl = timedelta(days=refresh_ttl_days)

    def hash_password(self, password: str) -> str:
        return get_password_hash(password)

    def verify_password(self, plain: str, hashed: str) -> bool:
        return verify_password(plain, hashed)

    def create_access_token(self, user: User) -> str:
        return create_access_token(
            {
                "sub": str(user.id),
                "email": user.email,
                "userName": user.user_name,
                "fullName": user.full_name,
            },
            self.access_ttl,
        )

    def create_refresh_token(self, user: User) -> str:
        # jti keeps two refreshes issued within the same second distinct
        return create_refresh_token(
            {"sub": str(user.id), "jti": secrets.token_hex(8)}, self.refresh_ttl
        )

    def validate_refresh_token(self, token: str) -> str | None:
        payload = decode_refresh_token(token)
        sub = payload.get("sub") if payload else None
        return sub if isinstance(sub, str) else None
