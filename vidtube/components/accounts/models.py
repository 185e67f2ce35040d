from dataclasses import dataclass
from typing import Literal

from vidtube.components.media import UploadedFile
from vidtube.domain.entities import ErrorCode, User
from vidtube.domain.views import ChannelProfile

ProfileImage = Literal["avatar", "cover_image"]


@dataclass(frozen=True)
class RegisterInput:
    user_name: str
    full_name: str
    email: str
    password: str
    avatar: UploadedFile | None = None
    cover_image: UploadedFile | None = None


@dataclass(frozen=True)
class LoginInput:
    password: str
    user_name: str | None = None
    email: str | None = None


@dataclass(frozen=True)
class LogoutInput:
    user: User


@dataclass(frozen=True)
class RefreshInput:
    refresh_token: str | None


@dataclass(frozen=True)
class ChangePasswordInput:
    user: User
    old_password: str | None
    new_password: str | None


@dataclass(frozen=True)
class UpdateAccountInput:
    user: User
    full_name: str | None
    email: str | None


@dataclass(frozen=True)
class UpdateImageInput:
    user: User
    image: ProfileImage
    file: UploadedFile | None


@dataclass(frozen=True)
class ChannelProfileInput:
    user_name: str
    viewer: User | None = None


@dataclass
class UserOutput:
    user: User | None = None
    success: bool = False
    error: str | None = None
    error_code: ErrorCode | None = None


@dataclass
class AuthOutput:
    user: User | None = None
    access_token: str | None = None
    refresh_token: str | None = None
    success: bool = False
    error: str | None = None
    error_code: ErrorCode | None = None


@dataclass
class ChannelProfileOutput:
    profile: ChannelProfile | None = None
    success: bool = False
    error: str | None = None
    error_code: ErrorCode | None = None
