from typing import Literal

from pydantic import BaseModel, Field


class ProjectRules(BaseModel):
    slug: str
    rules_version: str


class PasswordRules(BaseModel):
    min_length: int = 8
    pattern: str
    message: str = "Password is too weak"


class CookieRules(BaseModel):
    http_only: bool = True
    same_site: Literal["lax", "strict", "none"] = "none"


class AuthRules(BaseModel):
    access_token_ttl_minutes: int = Field(default=1440, gt=0)
    refresh_token_ttl_days: int = Field(default=15, gt=0)
    password: PasswordRules
    cookie: CookieRules = Field(default_factory=CookieRules)


class MediaRules(BaseModel):
    max_bytes: int = Field(gt=0)
    allowlist_extensions: list[str]
    allowlist_mime_types: list[str]


class UploadsRules(BaseModel):
    images: MediaRules
    videos: MediaRules


class HistoryRules(BaseModel):
    retention_days: int = Field(default=3, ge=0)


class PaginationRules(BaseModel):
    default_limit: int = Field(default=12, gt=0)
    max_limit: int = Field(default=100, gt=0)


class VideoRules(BaseModel):
    sortable_fields: list[str]
    default_sort_by: str = "createdAt"
    default_sort_type: Literal["asc", "desc"] = "desc"


class Rules(BaseModel):
    project: ProjectRules
    auth: AuthRules
    uploads: UploadsRules
    history: HistoryRules = Field(default_factory=HistoryRules)
    pagination: PaginationRules = Field(default_factory=PaginationRules)
    videos: VideoRules
