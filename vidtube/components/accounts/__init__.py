"""
Accounts component - registration, login/refresh/logout, password and profile updates,
channel profiles.
"""

from .component import (
    run_change_password,
    run_channel_profile,
    run_login,
    run_logout,
    run_refresh,
    run_register,
    run_update_account,
    run_update_image,
)
from .models import (
    AuthOutput,
    ChangePasswordInput,
    ChannelProfileInput,
    ChannelProfileOutput,
    LoginInput,
    LogoutInput,
    ProfileImage,
    RefreshInput,
    RegisterInput,
    UpdateAccountInput,
    UpdateImageInput,
    UserOutput,
)
from .ports import (
    AuthAdapterPort,
    DuplicateUserError,
    PasswordRulesPort,
    TimePort,
    UserRepoPort,
)

__all__ = [
    # Entry points
    "run_register",
    "run_login",
    "run_logout",
    "run_refresh",
    "run_change_password",
    "run_update_account",
    "run_update_image",
    "run_channel_profile",
    # Input models
    "RegisterInput",
    "LoginInput",
    "LogoutInput",
    "RefreshInput",
    "ChangePasswordInput",
    "UpdateAccountInput",
    "UpdateImageInput",
    "ChannelProfileInput",
    "ProfileImage",
    # Output models
    "UserOutput",
    "AuthOutput",
    "ChannelProfileOutput",
    # Ports
    "UserRepoPort",
    "AuthAdapterPort",
    "PasswordRulesPort",
    "TimePort",
    # Errors
    "DuplicateUserError",
]
