"""
Likes component - likes on videos, comments and tweets.

A user holds at most one like per target; toggling creates or removes it.
"""

from __future__ import annotations

from collections.abc import Mapping
from uuid import UUID

from vidtube.domain.entities import ErrorCode, Like, LikeTarget, User, Video
from vidtube.domain.policy import can_view_video
from vidtube.domain.validation import parse_id
from vidtube.domain.views import LikeInfo

from .models import (
    LikedVideosInput,
    LikedVideosOutput,
    LikeInfoInput,
    LikeInfoOutput,
    ToggleLikeInput,
    ToggleLikeOutput,
)
from .ports import LikeRepoPort, TargetLookupPort, TimePort

TARGET_LABELS: dict[LikeTarget, str] = {
    "video": "Video",
    "comment": "Comment",
    "tweet": "Tweet",
}


def _resolve_target(
    user: User,
    target_type: LikeTarget,
    raw_id: str,
    targets: Mapping[LikeTarget, TargetLookupPort],
) -> tuple[UUID | None, str | None, ErrorCode | None]:
    """Parse the id and check the target exists and is visible. Returns (id, error, error_code)."""
    label = TARGET_LABELS[target_type]
    target_id = parse_id(raw_id)
    if target_id is None:
        return None, f"Invalid {label.lower()} id", "invalid"
    target = targets[target_type].get_by_id(target_id)
    if not target:
        return None, f"{label} not found", "not_found"
    if isinstance(target, Video) and not can_view_video(user, target):
        return None, "Video is not published", "forbidden"
    return target_id, None, None


def run_toggle(
    inp: ToggleLikeInput,
    repo: LikeRepoPort,
    targets: Mapping[LikeTarget, TargetLookupPort],
    time: TimePort,
) -> ToggleLikeOutput:
    target_id, error, code = _resolve_target(inp.user, inp.target_type, inp.target_id, targets)
    if target_id is None:
        return ToggleLikeOutput(error=error, error_code=code)

    existing = repo.get(inp.user.id, inp.target_type, target_id)
    if existing:
        repo.delete(existing.id)
        return ToggleLikeOutput(is_liked=False, success=True)

    repo.save(
        Like(
            liked_by=inp.user.id,
            target_type=inp.target_type,
            target_id=target_id,
            created_at=time.now_utc(),
        )
    )
    return ToggleLikeOutput(is_liked=True, success=True)


def run_info(
    inp: LikeInfoInput,
    repo: LikeRepoPort,
    targets: Mapping[LikeTarget, TargetLookupPort],
) -> LikeInfoOutput:
    target_id, error, code = _resolve_target(inp.viewer, inp.target_type, inp.target_id, targets)
    if target_id is None:
        return LikeInfoOutput(error=error, error_code=code)

    info = LikeInfo(
        total_likes=repo.count(inp.target_type, target_id),
        is_liked=repo.get(inp.viewer.id, inp.target_type, target_id) is not None,
    )
    return LikeInfoOutput(info=info, success=True)


def run_liked_videos(inp: LikedVideosInput, repo: LikeRepoPort) -> LikedVideosOutput:
    return LikedVideosOutput(videos=repo.list_liked_videos(inp.user.id), success=True)
