from datetime import datetime
from typing import Protocol
from uuid import UUID

from vidtube.domain.entities import User
from vidtube.domain.views import ChannelProfile


class DuplicateUserError(Exception):
    """Raised by a user repository when user_name or email is already taken."""


class UserRepoPort(Protocol):
    def save(self, user: User) -> User:
        """Insert or update; raises DuplicateUserError on a user_name or email clash."""
        ...

    def get_by_id(self, user_id: UUID) -> User | None: ...
    def get_by_email(self, email: str) -> User | None: ...
    def find_by_login(self, user_name: str | None, email: str | None) -> User | None: ...
    def set_refresh_token(self, user_id: UUID, token: str | None) -> None: ...
    def get_channel_profile(
        self, user_name: str, viewer_id: UUID | None
    ) -> ChannelProfile | None: ...


class AuthAdapterPort(Protocol):
    def hash_password(self, password: str) -> str: ...
    def verify_password(self, plain: str, hashed: str) -> bool: ...
    def create_access_token(self, user: User) -> str: ...
    def create_refresh_token(self, user: User) -> str: ...
    def validate_refresh_token(self, token: str) -> str | None: ...


class PasswordRulesPort(Protocol):
    """Satisfied by the ``auth.password`` section of the rules file."""

    pattern: str
    message: str


class TimePort(Protocol):
    """Port for time operations - enables deterministic testing."""

    def now_utc(self) -> datetime:
        """Get current UTC time."""
        ...
