"""
Videos component - listing, publishing and maintaining videos.

Invariants:
- Public listings only ever contain published videos
- Unpublished videos are visible to their owner only
- Fetching a video counts a view and records it in the viewer's watch history
- Only the owner may update, delete or (un)publish a video
- Media stored for a write that fails to save is removed again
"""

from __future__ import annotations

import logging
from uuid import UUID

from vidtube.components.history import RecordViewInput, WatchHistoryRepoPort, run_record_view
from vidtube.components.media import (
    MediaStorePort,
    StoreMediaInput,
    UploadRulesPort,
    discard,
    run_store,
)
from vidtube.domain.entities import User, Video
from vidtube.domain.policy import can_view_video, is_owner
from vidtube.domain.validation import is_blank, parse_id

from .models import (
    DeleteVideoInput,
    GetVideoInput,
    ListingPolicy,
    ListVideosInput,
    PublishVideoInput,
    TogglePublishInput,
    UpdateVideoInput,
    VideoDetailOutput,
    VideoOutput,
    VideoPageOutput,
)
from .ports import TimePort, VideoRepoPort

logger = logging.getLogger(__name__)

# SQLite binds integers as signed 64-bit values.
MAX_OFFSET = 2**63 - 1


def _load_owned(raw_id: str, user: User, repo: VideoRepoPort, action: str) -> Video | VideoOutput:
    video_id = parse_id(raw_id)
    if video_id is None:
        return VideoOutput(error="Invalid video id", error_code="invalid")

    video = repo.get_by_id(video_id)
    if not video:
        return VideoOutput(error="Video not found", error_code="not_found")

    if not is_owner(user, video):
        return VideoOutput(
            error=f"You are not allowed to {action} this video", error_code="forbidden"
        )
    return video


def run_list(
    inp: ListVideosInput, repo: VideoRepoPort, policy: ListingPolicy | None = None
) -> VideoPageOutput:
    policy = policy or ListingPolicy()

    if inp.page < 1:
        return VideoPageOutput(error="Page must be 1 or greater", error_code="invalid")

    limit = policy.default_limit if inp.limit is None else inp.limit
    if limit < 1:
        return VideoPageOutput(error="Limit must be 1 or greater", error_code="invalid")
    limit = min(limit, policy.max_limit)

    offset = (inp.page - 1) * limit
    if offset > MAX_OFFSET:
        return VideoPageOutput(error="Page is out of range", error_code="invalid")

    sort_by = inp.sort_by or policy.default_sort_by
    if sort_by not in policy.sortable_fields:
        return VideoPageOutput(error=f"Cannot sort by '{sort_by}'", error_code="invalid")

    sort_type = (inp.sort_type or policy.default_sort_type).lower()
    if sort_type not in ("asc", "desc"):
        return VideoPageOutput(error="sortType must be 'asc' or 'desc'", error_code="invalid")

    owner_id: UUID | None = None
    if inp.user_id:
        owner_id = parse_id(inp.user_id)
        if owner_id is None:
            return VideoPageOutput(error="Invalid user id", error_code="invalid")

    videos, count = repo.list_published(
        query=inp.query.strip() if inp.query else None,
        owner_id=owner_id,
        sort_by=sort_by,
        sort_type=sort_type,
        limit=limit,
        offset=offset,
    )
    return VideoPageOutput(videos=videos, count=count, page=inp.page, limit=limit, success=True)


def run_publish(
    inp: PublishVideoInput,
    repo: VideoRepoPort,
    media_store: MediaStorePort,
    upload_rules: UploadRulesPort,
    time: TimePort,
) -> VideoOutput:
    if is_blank(inp.title):
        return VideoOutput(error="Title is required", error_code="invalid")
    if inp.thumbnail is None:
        return VideoOutput(error="Thumbnail is required", error_code="invalid")
    if inp.video_file is None:
        return VideoOutput(error="Video is required", error_code="invalid")
    if inp.duration < 0:
        return VideoOutput(error="Duration cannot be negative", error_code="invalid")

    thumbnail = run_store(
        StoreMediaInput(file=inp.thumbnail, kind="images", folder="thumbnails"),
        store=media_store,
        rules=upload_rules,
    )
    if not thumbnail.success or thumbnail.media is None:
        return VideoOutput(error=thumbnail.error, error_code=thumbnail.error_code)

    video_file = run_store(
        StoreMediaInput(file=inp.video_file, kind="videos", folder="videos"),
        store=media_store,
        rules=upload_rules,
    )
    if not video_file.success or video_file.media is None:
        discard(media_store, thumbnail.media.url)
        return VideoOutput(error=video_file.error, error_code=video_file.error_code)

    now = time.now_utc()
    video = Video(
        owner_id=inp.owner.id,
        title=str(inp.title).strip(),
        description=inp.description or "",
        video_file=video_file.media.url,
        thumbnail=thumbnail.media.url,
        duration=inp.duration,
        is_published=inp.is_published,
        created_at=now,
        updated_at=now,
    )
    try:
        repo.save(video)
    except Exception:
        discard(media_store, thumbnail.media.url)
        discard(media_store, video_file.media.url)
        raise
    logger.info("User %s uploaded video %s", inp.owner.id, video.id)
    return VideoOutput(video=video, success=True)


def run_get(
    inp: GetVideoInput,
    repo: VideoRepoPort,
    history_repo: WatchHistoryRepoPort,
    time: TimePort,
) -> VideoDetailOutput:
    video_id = parse_id(inp.video_id)
    if video_id is None:
        return VideoDetailOutput(error="Invalid video id", error_code="invalid")

    video = repo.get_by_id(video_id)
    if not video:
        return VideoDetailOutput(error="Video not found", error_code="not_found")

    if not can_view_video(inp.viewer, video):
        return VideoDetailOutput(error="Video is not published", error_code="forbidden")

    repo.increment_views(video_id)
    run_record_view(
        RecordViewInput(user_id=inp.viewer.id, video_id=video_id),
        repo=history_repo,
        time=time,
    )

    detail = repo.get_detail(video_id)
    if not detail:
        return VideoDetailOutput(error="Video not found", error_code="not_found")
    return VideoDetailOutput(video=detail, success=True)


def run_update(
    inp: UpdateVideoInput,
    repo: VideoRepoPort,
    media_store: MediaStorePort,
    upload_rules: UploadRulesPort,
    time: TimePort,
) -> VideoOutput:
    video = _load_owned(inp.video_id, inp.user, repo, "update")
    if isinstance(video, VideoOutput):
        return video

    if not is_blank(inp.title):
        video.title = str(inp.title).strip()
    if inp.description is not None:
        video.description = inp.description
    if inp.is_published is not None:
        video.is_published = inp.is_published

    old_thumbnail: str | None = None
    new_thumbnail: str | None = None
    if inp.thumbnail is not None:
        stored = run_store(
            StoreMediaInput(file=inp.thumbnail, kind="images", folder="thumbnails"),
            store=media_store,
            rules=upload_rules,
        )
        if not stored.success or stored.media is None:
            return VideoOutput(error=stored.error, error_code=stored.error_code)
        old_thumbnail = video.thumbnail
        new_thumbnail = video.thumbnail = stored.media.url

    video.updated_at = time.now_utc()
    try:
        repo.save(video)
    except Exception:
        discard(media_store, new_thumbnail)
        raise
    discard(media_store, old_thumbnail)
    return VideoOutput(video=video, success=True)


def run_delete(
    inp: DeleteVideoInput, repo: VideoRepoPort, media_store: MediaStorePort
) -> VideoOutput:
    video = _load_owned(inp.video_id, inp.user, repo, "delete")
    if isinstance(video, VideoOutput):
        return video

    repo.delete(video.id)
    discard(media_store, video.thumbnail)
    discard(media_store, video.video_file)
    logger.info("User %s deleted video %s", inp.user.id, video.id)
    return VideoOutput(video=video, success=True)


def run_toggle_publish(
    inp: TogglePublishInput, repo: VideoRepoPort, time: TimePort
) -> VideoOutput:
    video = _load_owned(inp.video_id, inp.user, repo, "publish")
    if isinstance(video, VideoOutput):
        return video

    if inp.is_published is None:
        video.is_published = not video.is_published
    else:
        video.is_published = inp.is_published
    video.updated_at = time.now_utc()
    repo.save(video)
    return VideoOutput(video=video, success=True)
