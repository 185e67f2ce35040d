"""
User routes: registration, sessions, profile maintenance and watch history.
"""

from typing import Any

from fastapi import APIRouter, Depends, File, Form, Request, Response, UploadFile, status

from vidtube.api.deps import (
    Settings,
    get_auth_adapter,
    get_clock,
    get_current_user,
    get_history_repo,
    get_media_store,
    get_rules,
    get_settings,
    get_upload_rules,
    get_user_repo,
    read_upload,
)
from vidtube.api.errors import raise_for_result
from vidtube.api.schemas import (
    ApiResponse,
    AuthResponse,
    ChangePasswordRequest,
    ChannelProfileResponse,
    HistoryItemResponse,
    LoginRequest,
    RefreshRequest,
    TokenPairResponse,
    UpdateAccountRequest,
    UserResponse,
)
from vidtube.components.accounts import (
    AuthOutput,
    ChangePasswordInput,
    ChannelProfileInput,
    LoginInput,
    LogoutInput,
    ProfileImage,
    RefreshInput,
    RegisterInput,
    UpdateAccountInput,
    UpdateImageInput,
    run_change_password,
    run_channel_profile,
    run_login,
    run_logout,
    run_refresh,
    run_register,
    run_update_account,
    run_update_image,
)
from vidtube.components.history import (
    ClearHistoryInput,
    ListHistoryInput,
    RemoveFromHistoryInput,
    run_clear_history,
    run_list_history,
    run_remove_from_history,
)
from vidtube.domain.entities import User
from vidtube.rules.models import Rules

router = APIRouter()

ACCESS_COOKIE = "accessToken"
REFRESH_COOKIE = "refreshToken"


def _set_session_cookies(
    response: Response, result: AuthOutput, rules: Rules, settings: Settings
) -> None:
    cookie = rules.auth.cookie
    lifetimes = {
        ACCESS_COOKIE: (result.access_token, rules.auth.access_token_ttl_minutes * 60),
        REFRESH_COOKIE: (result.refresh_token, rules.auth.refresh_token_ttl_days * 24 * 60 * 60),
    }
    for key, (value, max_age) in lifetimes.items():
        response.set_cookie(
            key=key,
            value=value or "",
            httponly=cookie.http_only,
            max_age=max_age,
            samesite=cookie.same_site,
            secure=settings.cookie_secure,
        )


def _clear_session_cookies(response: Response, rules: Rules, settings: Settings) -> None:
    for key in (ACCESS_COOKIE, REFRESH_COOKIE):
        response.delete_cookie(
            key=key,
            httponly=rules.auth.cookie.http_only,
            samesite=rules.auth.cookie.same_site,
            secure=settings.cookie_secure,
        )


@router.post("/register", status_code=status.HTTP_201_CREATED)
def register(
    user_name: str = Form("", alias="userName"),
    full_name: str = Form("", alias="fullName"),
    email: str = Form(""),
    password: str = Form(""),
    avatar: UploadFile | None = File(None),
    cover_image: UploadFile | None = File(None, alias="coverImage"),
    user_repo: Any = Depends(get_user_repo),
    auth_adapter: Any = Depends(get_auth_adapter),
    media_store: Any = Depends(get_media_store),
    upload_rules: Any = Depends(get_upload_rules),
    rules: Rules = Depends(get_rules),
    clock: Any = Depends(get_clock),
) -> ApiResponse[UserResponse]:
    """Create an account. Avatar is mandatory, cover image optional."""
    result = run_register(
        RegisterInput(
            user_name=user_name,
            full_name=full_name,
            email=email,
            password=password,
            avatar=read_upload(avatar),
            cover_image=read_upload(cover_image),
        ),
        user_repo=user_repo,
        auth_adapter=auth_adapter,
        media_store=media_store,
        upload_rules=upload_rules,
        password_rules=rules.auth.password,
        time=clock,
    )
    raise_for_result(result)
    return ApiResponse[UserResponse](
        status_code=201, data=result.user, message="User registered successfully"
    )


@router.post("/login")
def login(
    body: LoginRequest,
    response: Response,
    user_repo: Any = Depends(get_user_repo),
    auth_adapter: Any = Depends(get_auth_adapter),
    rules: Rules = Depends(get_rules),
    settings: Settings = Depends(get_settings),
) -> ApiResponse[AuthResponse]:
    result = run_login(
        LoginInput(password=body.password or "", user_name=body.user_name, email=body.email),
        user_repo=user_repo,
        auth_adapter=auth_adapter,
    )
    raise_for_result(result)
    _set_session_cookies(response, result, rules, settings)
    return ApiResponse[AuthResponse](
        data=AuthResponse(
            user=UserResponse.model_validate(result.user),
            access_token=result.access_token or "",
            refresh_token=result.refresh_token or "",
        ),
        message="User logged in successfully",
    )


@router.post("/logout")
def logout(
    response: Response,
    current_user: User = Depends(get_current_user),
    user_repo: Any = Depends(get_user_repo),
    rules: Rules = Depends(get_rules),
    settings: Settings = Depends(get_settings),
) -> ApiResponse[dict[str, Any]]:
    run_logout(LogoutInput(user=current_user), user_repo=user_repo)
    _clear_session_cookies(response, rules, settings)
    return ApiResponse[dict[str, Any]](data={}, message="User logged out successfully")


@router.post("/refresh-token")
def refresh_token(
    request: Request,
    response: Response,
    body: RefreshRequest | None = None,
    user_repo: Any = Depends(get_user_repo),
    auth_adapter: Any = Depends(get_auth_adapter),
    rules: Rules = Depends(get_rules),
    settings: Settings = Depends(get_settings),
) -> ApiResponse[TokenPairResponse]:
    """Rotate the session. The cookie wins over a token sent in the body."""
    token = request.cookies.get(REFRESH_COOKIE) or (body.refresh_token if body else None)
    result = run_refresh(RefreshInput(refresh_token=token), user_repo=user_repo, auth_adapter=auth_adapter)
    raise_for_result(result)
    _set_session_cookies(response, result, rules, settings)
    return ApiResponse[TokenPairResponse](
        data=TokenPairResponse(
            access_token=result.access_token or "",
            refresh_token=result.refresh_token or "",
        ),
        message="Access token refreshed",
    )


@router.post("/change-password")
def change_password(
    body: ChangePasswordRequest,
    current_user: User = Depends(get_current_user),
    user_repo: Any = Depends(get_user_repo),
    auth_adapter: Any = Depends(get_auth_adapter),
    rules: Rules = Depends(get_rules),
    clock: Any = Depends(get_clock),
) -> ApiResponse[dict[str, Any]]:
    result = run_change_password(
        ChangePasswordInput(
            user=current_user, old_password=body.old_password, new_password=body.new_password
        ),
        user_repo=user_repo,
        auth_adapter=auth_adapter,
        password_rules=rules.auth.password,
        time=clock,
    )
    raise_for_result(result)
    return ApiResponse[dict[str, Any]](data={}, message="Password changed successfully")


@router.get("/current-user")
def current_user(current_user: User = Depends(get_current_user)) -> ApiResponse[UserResponse]:
    return ApiResponse[UserResponse](data=current_user, message="Current user fetched successfully")


@router.patch("/update-account")
def update_account(
    body: UpdateAccountRequest,
    current_user: User = Depends(get_current_user),
    user_repo: Any = Depends(get_user_repo),
    clock: Any = Depends(get_clock),
) -> ApiResponse[UserResponse]:
    result = run_update_account(
        UpdateAccountInput(user=current_user, full_name=body.full_name, email=body.email),
        user_repo=user_repo,
        time=clock,
    )
    raise_for_result(result)
    return ApiResponse[UserResponse](data=result.user, message="Account details updated successfully")


def _update_image(
    image: ProfileImage,
    file: UploadFile | None,
    current_user: User,
    user_repo: Any,
    media_store: Any,
    upload_rules: Any,
    clock: Any,
) -> User | None:
    result = run_update_image(
        UpdateImageInput(user=current_user, image=image, file=read_upload(file)),
        user_repo=user_repo,
        media_store=media_store,
        upload_rules=upload_rules,
        time=clock,
    )
    raise_for_result(result)
    return result.user


@router.patch("/update-avatar")
def update_avatar(
    avatar: UploadFile | None = File(None),
    current_user: User = Depends(get_current_user),
    user_repo: Any = Depends(get_user_repo),
    media_store: Any = Depends(get_media_store),
    upload_rules: Any = Depends(get_upload_rules),
    clock: Any = Depends(get_clock),
) -> ApiResponse[UserResponse]:
    user = _update_image(
        "avatar", avatar, current_user, user_repo, media_store, upload_rules, clock
    )
    return ApiResponse[UserResponse](data=user, message="Avatar updated successfully")


@router.patch("/update-cover-image")
def update_cover_image(
    cover_image: UploadFile | None = File(None, alias="coverImage"),
    current_user: User = Depends(get_current_user),
    user_repo: Any = Depends(get_user_repo),
    media_store: Any = Depends(get_media_store),
    upload_rules: Any = Depends(get_upload_rules),
    clock: Any = Depends(get_clock),
) -> ApiResponse[UserResponse]:
    user = _update_image(
        "cover_image", cover_image, current_user, user_repo, media_store, upload_rules, clock
    )
    return ApiResponse[UserResponse](data=user, message="Cover image updated successfully")


@router.get("/c/{username}")
def channel_profile(
    username: str,
    current_user: User = Depends(get_current_user),
    user_repo: Any = Depends(get_user_repo),
) -> ApiResponse[ChannelProfileResponse]:
    result = run_channel_profile(
        ChannelProfileInput(user_name=username, viewer=current_user), user_repo=user_repo
    )
    raise_for_result(result)
    return ApiResponse[ChannelProfileResponse](
        data=result.profile, message="User channel fetched successfully"
    )


# --- Watch history ---
@router.get("/watch-history")
def watch_history(
    current_user: User = Depends(get_current_user),
    history_repo: Any = Depends(get_history_repo),
    rules: Rules = Depends(get_rules),
    clock: Any = Depends(get_clock),
) -> ApiResponse[list[HistoryItemResponse]]:
    """Viewer's history, newest first. Entries past the retention window are dropped first."""
    result = run_list_history(
        ListHistoryInput(user=current_user, retention_days=rules.history.retention_days),
        repo=history_repo,
        time=clock,
    )
    raise_for_result(result)
    return ApiResponse[list[HistoryItemResponse]](
        data=result.items, message="Watch history fetched successfully"
    )


@router.patch("/watch-history")
def clear_watch_history(
    current_user: User = Depends(get_current_user),
    history_repo: Any = Depends(get_history_repo),
) -> ApiResponse[list[HistoryItemResponse]]:
    result = run_clear_history(ClearHistoryInput(user=current_user), repo=history_repo)
    raise_for_result(result)
    return ApiResponse[list[HistoryItemResponse]](data=[], message="Watch history cleared")


@router.patch("/watch-history/{video_id}")
def remove_from_watch_history(
    video_id: str,
    current_user: User = Depends(get_current_user),
    history_repo: Any = Depends(get_history_repo),
) -> ApiResponse[dict[str, Any]]:
    result = run_remove_from_history(
        RemoveFromHistoryInput(user=current_user, video_id=video_id), repo=history_repo
    )
    raise_for_result(result)
    return ApiResponse[dict[str, Any]](
        data={"removed": result.removed}, message="Video removed from watch history"
    )
