"""
Comments component - viewer comments on videos.

Invariants:
- Comments can only be added to an existing video the caller may view
- Content is stored trimmed and must not be blank
- Only the author may edit or delete a comment
- Listing puts the viewer's own comments first, each group keeping oldest-first order
"""

from __future__ import annotations

from vidtube.domain.entities import Comment, User
from vidtube.domain.policy import can_view_video, is_owner
from vidtube.domain.validation import is_blank, parse_id
from vidtube.domain.views import CommentView

from .models import (
    AddCommentInput,
    CommentListOutput,
    CommentOutput,
    DeleteCommentInput,
    ListCommentsInput,
    UpdateCommentInput,
)
from .ports import CommentRepoPort, TimePort, VideoLookupPort


def viewer_first(comments: list[CommentView], viewer: User) -> list[CommentView]:
    """Stable partition: the viewer's comments, then everybody else's."""
    own = [c for c in comments if c.owner_id == viewer.id]
    others = [c for c in comments if c.owner_id != viewer.id]
    return own + others


def _load_owned(
    raw_id: str, user: User, repo: CommentRepoPort, action: str
) -> Comment | CommentOutput:
    comment_id = parse_id(raw_id)
    if comment_id is None:
        return CommentOutput(error="Invalid comment id", error_code="invalid")

    comment = repo.get_by_id(comment_id)
    if not comment:
        return CommentOutput(error="Comment not found", error_code="not_found")

    if not is_owner(user, comment):
        return CommentOutput(
            error=f"You are not allowed to {action} this comment", error_code="forbidden"
        )
    return comment


def run_list(
    inp: ListCommentsInput, repo: CommentRepoPort, videos: VideoLookupPort
) -> CommentListOutput:
    video_id = parse_id(inp.video_id)
    if video_id is None:
        return CommentListOutput(error="Invalid video id", error_code="invalid")

    video = videos.get_by_id(video_id)
    if not video:
        return CommentListOutput(error="Video not found", error_code="not_found")
    if not can_view_video(inp.viewer, video):
        return CommentListOutput(error="Video is not published", error_code="forbidden")

    comments = repo.list_for_video(video_id)
    return CommentListOutput(comments=viewer_first(comments, inp.viewer), success=True)


def run_add(
    inp: AddCommentInput, repo: CommentRepoPort, videos: VideoLookupPort, time: TimePort
) -> CommentOutput:
    video_id = parse_id(inp.video_id)
    if video_id is None:
        return CommentOutput(error="Invalid video id", error_code="invalid")

    if is_blank(inp.content):
        return CommentOutput(error="Content is required", error_code="invalid")

    video = videos.get_by_id(video_id)
    if not video:
        return CommentOutput(error="Video not found", error_code="not_found")
    if not can_view_video(inp.user, video):
        return CommentOutput(error="Video is not published", error_code="forbidden")

    now = time.now_utc()
    comment = Comment(
        video_id=video_id,
        owner_id=inp.user.id,
        content=str(inp.content).strip(),
        created_at=now,
        updated_at=now,
    )
    repo.save(comment)
    return CommentOutput(comment=repo.get_view(comment.id), success=True)


def run_update(
    inp: UpdateCommentInput, repo: CommentRepoPort, time: TimePort
) -> CommentOutput:
    if is_blank(inp.content):
        return CommentOutput(error="Content is required", error_code="invalid")

    comment = _load_owned(inp.comment_id, inp.user, repo, "edit")
    if isinstance(comment, CommentOutput):
        return comment

    comment.content = str(inp.content).strip()
    comment.updated_at = time.now_utc()
    repo.save(comment)
    return CommentOutput(comment=repo.get_view(comment.id), success=True)


def run_delete(inp: DeleteCommentInput, repo: CommentRepoPort) -> CommentOutput:
    comment = _load_owned(inp.comment_id, inp.user, repo, "delete")
    if isinstance(comment, CommentOutput):
        return comment

    view = repo.get_view(comment.id)
    # Likes on the comment go with it (ON DELETE CASCADE).
    repo.delete(comment.id)
    return CommentOutput(comment=view, success=True)
