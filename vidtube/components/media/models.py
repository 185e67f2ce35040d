"""
Media component input/output models.

Uploaded files arrive already buffered by the HTTP layer; the component only
validates them against the upload rules and hands them to the media store.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal

from vidtube.domain.entities import ErrorCode, StoredMedia

MediaKind = Literal["images", "videos"]


@dataclass(frozen=True)
class UploadedFile:
    data: bytes
    filename: str
    content_type: str


@dataclass(frozen=True)
class MediaValidationError:
    code: str
    message: str


@dataclass(frozen=True)
class StoreMediaInput:
    file: UploadedFile
    kind: MediaKind
    folder: str


@dataclass(frozen=True)
class MediaOutput:
    media: StoredMedia | None = None
    errors: list[MediaValidationError] = field(default_factory=list)
    success: bool = True
    error_code: ErrorCode | None = None

    @property
    def error(self) -> str | None:
        return self.errors[0].message if self.errors else None
