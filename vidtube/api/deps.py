import os
from functools import lru_cache
from pathlib import Path
from typing import Annotated

from fastapi import Depends, HTTPException, Request, UploadFile, status
from fastapi.security import OAuth2PasswordBearer

from vidtube.adapters.auth.crypto import JWTAuthAdapter
from vidtube.adapters.clock import SystemClock
from vidtube.adapters.media.filestore import FileSystemMediaStore
from vidtube.adapters.sqlite.repos import (
    SQLiteCommentRepo,
    SQLiteLikeRepo,
    SQLitePlaylistRepo,
    SQLiteSubscriptionRepo,
    SQLiteTweetRepo,
    SQLiteUserRepo,
    SQLiteVideoRepo,
    SQLiteWatchHistoryRepo,
)
from vidtube.api.auth_utils import decode_access_token
from vidtube.components.media import UploadedFile
from vidtube.components.videos import ListingPolicy
from vidtube.domain.entities import User
from vidtube.domain.validation import parse_id
from vidtube.rules.loader import load_rules
from vidtube.rules.models import MediaRules, Rules

PROJECT_ROOT = Path(__file__).resolve().parents[2]


def _env_flag(name: str, default: bool) -> bool:
    raw = os.environ.get(name)
    if raw is None:
        return default
    return raw.strip().lower() not in ("0", "false", "no", "off", "")


# --- Settings ---
class Settings:
    def __init__(self) -> None:
        self.base_dir = PROJECT_ROOT
        self.data_dir = Path(os.environ.get("VIDTUBE_DATA_DIR", "./data"))
        self.db_path = str(self.data_dir / "vidtube.db")
        self.media_dir = self.data_dir / "media"
        self.media_base_url = os.environ.get("VIDTUBE_MEDIA_BASE_URL", "/media")
        self.rules_path = Path(
            os.environ.get("VIDTUBE_RULES_PATH", str(PROJECT_ROOT / "rules.yaml"))
        )
        self.cors_origins = [
            origin.strip()
            for origin in os.environ.get("VIDTUBE_CORS_ORIGIN", "http://localhost:3000").split(",")
            if origin.strip()
        ]
        self.cookie_secure = _env_flag("VIDTUBE_COOKIE_SECURE", True)


@lru_cache
def get_settings() -> Settings:
    return Settings()


# --- Rules ---
@lru_cache
def get_rules(settings: Settings = Depends(get_settings)) -> Rules:
    return load_rules(settings.rules_path)


# --- Repos ---
def get_user_repo(settings: Settings = Depends(get_settings)) -> SQLiteUserRepo:
    return SQLiteUserRepo(settings.db_path)


def get_video_repo(settings: Settings = Depends(get_settings)) -> SQLiteVideoRepo:
    return SQLiteVideoRepo(settings.db_path)


def get_history_repo(settings: Settings = Depends(get_settings)) -> SQLiteWatchHistoryRepo:
    return SQLiteWatchHistoryRepo(settings.db_path)


def get_comment_repo(settings: Settings = Depends(get_settings)) -> SQLiteCommentRepo:
    return SQLiteCommentRepo(settings.db_path)


def get_tweet_repo(settings: Settings = Depends(get_settings)) -> SQLiteTweetRepo:
    return SQLiteTweetRepo(settings.db_path)


def get_like_repo(settings: Settings = Depends(get_settings)) -> SQLiteLikeRepo:
    return SQLiteLikeRepo(settings.db_path)


def get_playlist_repo(settings: Settings = Depends(get_settings)) -> SQLitePlaylistRepo:
    return SQLitePlaylistRepo(settings.db_path)


def get_subscription_repo(settings: Settings = Depends(get_settings)) -> SQLiteSubscriptionRepo:
    return SQLiteSubscriptionRepo(settings.db_path)


# --- Adapters ---
def get_media_store(settings: Settings = Depends(get_settings)) -> FileSystemMediaStore:
    return FileSystemMediaStore(base_path=str(settings.media_dir), base_url=settings.media_base_url)


def get_auth_adapter(rules: Rules = Depends(get_rules)) -> JWTAuthAdapter:
    return JWTAuthAdapter(
        access_ttl_minutes=rules.auth.access_token_ttl_minutes,
        refresh_ttl_days=rules.auth.refresh_token_ttl_days,
    )


# Time adapter for deterministic time operations
_clock_instance: SystemClock | None = None


def get_clock() -> SystemClock:
    """Get clock singleton."""
    global _clock_instance
    if _clock_instance is None:
        _clock_instance = SystemClock()
    return _clock_instance


class UploadRulesAdapter:
    """Maps the ``uploads`` section of the rules file onto the media component's rules port."""

    def __init__(self, rules: Rules):
        self._rules = rules.uploads

    def _section(self, kind: str) -> MediaRules:
        return self._rules.videos if kind == "videos" else self._rules.images

    def get_max_upload_bytes(self, kind: str) -> int:
        return self._section(kind).max_bytes

    def get_allowed_extensions(self, kind: str) -> list[str]:
        return self._section(kind).allowlist_extensions

    def get_allowed_mime_types(self, kind: str) -> list[str]:
        return self._section(kind).allowlist_mime_types


def get_upload_rules(rules: Rules = Depends(get_rules)) -> UploadRulesAdapter:
    return UploadRulesAdapter(rules)


def get_listing_policy(rules: Rules = Depends(get_rules)) -> ListingPolicy:
    return ListingPolicy(
        default_limit=rules.pagination.default_limit,
        max_limit=rules.pagination.max_limit,
        sortable_fields=tuple(rules.videos.sortable_fields),
        default_sort_by=rules.videos.default_sort_by,
        default_sort_type=rules.videos.default_sort_type,
    )


def read_upload(file: UploadFile | None) -> UploadedFile | None:
    """Buffer a multipart file part. Parts without a filename count as absent."""
    if file is None or not file.filename:
        return None
    return UploadedFile(
        data=file.file.read(),
        filename=file.filename,
        content_type=file.content_type or "application/octet-stream",
    )


# --- Auth ---
oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/api/v1/users/login", auto_error=False)


def get_current_user(
    request: Request,
    token: Annotated[str | None, Depends(oauth2_scheme)],
    user_repo: SQLiteUserRepo = Depends(get_user_repo),
) -> User:
    # Cookie wins over the Authorization header
    token = request.cookies.get("accessToken") or token

    if not token:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Unauthorized request",
            headers={"WWW-Authenticate": "Bearer"},
        )

    payload = decode_access_token(token)
    if not payload:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid access token",
            headers={"WWW-Authenticate": "Bearer"},
        )

    user_id = parse_id(payload.get("sub"))
    if user_id is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid access token",
        )

    user = user_repo.get_by_id(user_id)
    if not user:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid access token",
        )

    return user
