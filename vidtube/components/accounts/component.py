"""
Accounts component - registration, sessions and profile maintenance.

Invariants:
- user_name is stored trimmed and lower-cased; user_name and email are unique
- Only the most recently issued refresh token is accepted (rotation on refresh,
  invalidation on logout)
- A replaced avatar/cover image is deleted only after the new one is stored
"""

from __future__ import annotations

from vidtube.components.media import (
    MediaStorePort,
    StoreMediaInput,
    UploadRulesPort,
    discard,
    run_store,
)
from vidtube.domain.entities import User
from vidtube.domain.validation import (
    is_blank,
    is_strong_password,
    is_valid_email,
    normalize_user_name,
    parse_id,
)

from .models import (
    AuthOutput,
    ChangePasswordInput,
    ChannelProfileInput,
    ChannelProfileOutput,
    LoginInput,
    LogoutInput,
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

IMAGE_LABELS = {"avatar": "Avatar", "cover_image": "Cover image"}


def _issue_tokens(
    user: User, user_repo: UserRepoPort, auth_adapter: AuthAdapterPort
) -> AuthOutput:
    access_token = auth_adapter.create_access_token(user)
    refresh_token = auth_adapter.create_refresh_token(user)
    user_repo.set_refresh_token(user.id, refresh_token)
    return AuthOutput(
        user=user.model_copy(update={"refresh_token": refresh_token}),
        access_token=access_token,
        refresh_token=refresh_token,
        success=True,
    )


def run_register(
    inp: RegisterInput,
    user_repo: UserRepoPort,
    auth_adapter: AuthAdapterPort,
    media_store: MediaStorePort,
    upload_rules: UploadRulesPort,
    password_rules: PasswordRulesPort,
    time: TimePort,
) -> UserOutput:
    if any(is_blank(v) for v in (inp.user_name, inp.full_name, inp.email, inp.password)):
        return UserOutput(error="All fields are required", error_code="invalid")

    user_name = normalize_user_name(inp.user_name)
    email = inp.email.strip()

    if not is_valid_email(email):
        return UserOutput(error="Email is invalid", error_code="invalid")

    if not is_strong_password(inp.password, password_rules.pattern):
        return UserOutput(error=password_rules.message, error_code="invalid")

    if user_repo.find_by_login(user_name, email):
        return UserOutput(error="User already exists", error_code="conflict")

    if inp.avatar is None:
        return UserOutput(error="Avatar is required", error_code="invalid")

    avatar = run_store(
        StoreMediaInput(file=inp.avatar, kind="images", folder="avatars"),
        store=media_store,
        rules=upload_rules,
    )
    if not avatar.success or avatar.media is None:
        return UserOutput(error=avatar.error, error_code=avatar.error_code)

    cover_url = ""
    if inp.cover_image is not None:
        cover = run_store(
            StoreMediaInput(file=inp.cover_image, kind="images", folder="covers"),
            store=media_store,
            rules=upload_rules,
        )
        if not cover.success or cover.media is None:
            discard(media_store, avatar.media.url)
            return UserOutput(error=cover.error, error_code=cover.error_code)
        cover_url = cover.media.url

    now = time.now_utc()
    user = User(
        user_name=user_name,
        email=email,
        full_name=inp.full_name.strip(),
        password_hash=auth_adapter.hash_password(inp.password),
        avatar=avatar.media.url,
        cover_image=cover_url,
        created_at=now,
        updated_at=now,
    )
    try:
        user_repo.save(user)
    except DuplicateUserError:
        # Lost a race with a concurrent registration for the same name or email.
        discard(media_store, avatar.media.url)
        discard(media_store, cover_url)
        return UserOutput(error="User already exists", error_code="conflict")
    return UserOutput(user=user, success=True)


def run_login(
    inp: LoginInput, user_repo: UserRepoPort, auth_adapter: AuthAdapterPort
) -> AuthOutput:
    if is_blank(inp.user_name) and is_blank(inp.email):
        return AuthOutput(error="username or email required", error_code="invalid")

    user = user_repo.find_by_login(
        normalize_user_name(inp.user_name) if inp.user_name else None,
        inp.email.strip() if inp.email else None,
    )
    if not user:
        return AuthOutput(error="User does not exist", error_code="not_found")

    if not inp.password or not auth_adapter.verify_password(inp.password, user.password_hash):
        return AuthOutput(error="Invalid user credentials", error_code="unauthorized")

    return _issue_tokens(user, user_repo, auth_adapter)


def run_logout(inp: LogoutInput, user_repo: UserRepoPort) -> UserOutput:
    user_repo.set_refresh_token(inp.user.id, None)
    return UserOutput(user=inp.user.model_copy(update={"refresh_token": None}), success=True)


def run_refresh(
    inp: RefreshInput, user_repo: UserRepoPort, auth_adapter: AuthAdapterPort
) -> AuthOutput:
    if is_blank(inp.refresh_token):
        return AuthOutput(error="Unauthorized request", error_code="unauthorized")
    token = str(inp.refresh_token)

    user_id = parse_id(auth_adapter.validate_refresh_token(token))
    if user_id is None:
        return AuthOutput(error="Invalid refresh token", error_code="unauthorized")

    user = user_repo.get_by_id(user_id)
    if not user:
        return AuthOutput(error="Invalid refresh token", error_code="unauthorized")

    if user.refresh_token != token:
        return AuthOutput(error="Refresh token is expired or used", error_code="unauthorized")

    return _issue_tokens(user, user_repo, auth_adapter)


def run_change_password(
    inp: ChangePasswordInput,
    user_repo: UserRepoPort,
    auth_adapter: AuthAdapterPort,
    password_rules: PasswordRulesPort,
    time: TimePort,
) -> UserOutput:
    if not inp.old_password or not inp.new_password:
        return UserOutput(
            error="Old password and new password are required", error_code="invalid"
        )

    if not is_strong_password(inp.new_password, password_rules.pattern):
        return UserOutput(error=password_rules.message, error_code="invalid")

    user = user_repo.get_by_id(inp.user.id)
    if not user:
        return UserOutput(error="User not found", error_code="not_found")

    if not auth_adapter.verify_password(inp.old_password, user.password_hash):
        return UserOutput(error="Old password is incorrect", error_code="invalid")

    user.password_hash = auth_adapter.hash_password(inp.new_password)
    user.updated_at = time.now_utc()
    user_repo.save(user)
    return UserOutput(user=user, success=True)


def run_update_account(
    inp: UpdateAccountInput, user_repo: UserRepoPort, time: TimePort
) -> UserOutput:
    if is_blank(inp.full_name) or is_blank(inp.email):
        return UserOutput(error="Full name and email are required", error_code="invalid")

    email = str(inp.email).strip()
    if not is_valid_email(email):
        return UserOutput(error="Email is invalid", error_code="invalid")

    existing = user_repo.get_by_email(email)
    if existing and existing.id != inp.user.id:
        return UserOutput(error="Email already exists", error_code="invalid")

    user = user_repo.get_by_id(inp.user.id)
    if not user:
        return UserOutput(error="User not found", error_code="not_found")

    user.full_name = str(inp.full_name).strip()
    user.email = email
    user.updated_at = time.now_utc()
    try:
        user_repo.save(user)
    except DuplicateUserError:
        return UserOutput(error="Email already exists", error_code="invalid")
    return UserOutput(user=user, success=True)


def run_update_image(
    inp: UpdateImageInput,
    user_repo: UserRepoPort,
    media_store: MediaStorePort,
    upload_rules: UploadRulesPort,
    time: TimePort,
) -> UserOutput:
    label = IMAGE_LABELS[inp.image]
    if inp.file is None:
        return UserOutput(error=f"{label} is missing", error_code="invalid")

    user = user_repo.get_by_id(inp.user.id)
    if not user:
        return UserOutput(error="User not found", error_code="not_found")

    folder = "avatars" if inp.image == "avatar" else "covers"
    stored = run_store(
        StoreMediaInput(file=inp.file, kind="images", folder=folder),
        store=media_store,
        rules=upload_rules,
    )
    if not stored.success or stored.media is None:
        return UserOutput(error=stored.error, error_code=stored.error_code)

    previous = getattr(user, inp.image)
    setattr(user, inp.image, stored.media.url)
    user.updated_at = time.now_utc()
    user_repo.save(user)
    discard(media_store, previous)
    return UserOutput(user=user, success=True)


def run_channel_profile(
    inp: ChannelProfileInput, user_repo: UserRepoPort
) -> ChannelProfileOutput:
    if is_blank(inp.user_name):
        return ChannelProfileOutput(error="User name is required", error_code="invalid")

    profile = user_repo.get_channel_profile(
        normalize_user_name(inp.user_name), inp.viewer.id if inp.viewer else None
    )
    if not profile:
        return ChannelProfileOutput(error="Channel does not exist", error_code="not_found")

    return ChannelProfileOutput(profile=profile, success=True)
