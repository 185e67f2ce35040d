from __future__ import annotations

from dataclasses import dataclass, field

from vidtube.domain.entities import ErrorCode, User
from vidtube.domain.views import CommentView


@dataclass(frozen=True)
class ListCommentsInput:
    viewer: User
    video_id: str


@dataclass(frozen=True)
class AddCommentInput:
    user: User
    video_id: str
    content: str | None


@dataclass(frozen=True)
class UpdateCommentInput:
    user: User
    comment_id: str
    content: str | None


@dataclass(frozen=True)
class DeleteCommentInput:
    user: User
    comment_id: str


@dataclass
class CommentListOutput:
    comments: list[CommentView] = field(default_factory=list)
    success: bool = False
    error: str | None = None
    error_code: ErrorCode | None = None


@dataclass
class CommentOutput:
    comment: CommentView | None = None
    success: bool = False
    error: str | None = None
    error_code: ErrorCode | None = None
