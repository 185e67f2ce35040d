"""
Likes component unit tests.
"""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Any
from uuid import UUID, uuid4

import pytest

from vidtube.adapters.clock import FixedClock
from vidtube.components.likes import (
    LikedVideosInput,
    LikeInfoInput,
    ToggleLikeInput,
    run_info,
    run_liked_videos,
    run_toggle,
)
from vidtube.domain.entities import Like, LikeTarget, User, Video
from vidtube.domain.views import VideoCard


class MockLikeRepo:
    def __init__(self) -> None:
        self.likes: dict[UUID, Like] = {}

    def get(self, liked_by: UUID, target_type: LikeTarget, target_id: UUID) -> Like | None:
        for like in self.likes.values():
            if (like.liked_by, like.target_type, like.target_id) == (liked_by, target_type, target_id):
                return like
        return None

    def save(self, like: Like) -> Like:
        self.likes[like.id] = like
        return like

    def delete(self, like_id: UUID) -> None:
        self.likes.pop(like_id, None)

    def count(self, target_type: LikeTarget, target_id: UUID) -> int:
        return sum(
            1 for like in self.likes.values()
            if like.target_type == target_type and like.target_id == target_id
        )

    def list_liked_videos(self, user_id: UUID) -> list[VideoCard]:
        return [
            VideoCard(
                id=like.target_id,
                owner_id=uuid4(),
                title="liked",
                video_file="/media/v.mp4",
                thumbnail="/media/t.png",
            )
            for like in self.likes.values()
            if like.liked_by == user_id and like.target_type == "video"
        ]


class ExistingIds:
    def __init__(self, *ids: UUID) -> None:
        self.ids = set(ids)

    def get_by_id(self, target_id: UUID) -> Any | None:
        return object() if target_id in self.ids else None


def make_user(name: str) -> User:
    return User(
        user_name=name,
        email=f"{name}@example.com",
        full_name=name.title(),
        password_hash="x",
        avatar="/media/a.png",
    )


VIDEO_ID, COMMENT_ID, TWEET_ID = uuid4(), uuid4(), uuid4()


@pytest.fixture
def targets() -> dict[LikeTarget, ExistingIds]:
    return {
        "video": ExistingIds(VIDEO_ID),
        "comment": ExistingIds(COMMENT_ID),
        "tweet": ExistingIds(TWEET_ID),
    }


@pytest.fixture
def repo() -> MockLikeRepo:
    return MockLikeRepo()


@pytest.fixture
def clock() -> FixedClock:
    return FixedClock(datetime(2025, 6, 1, tzinfo=UTC))


@pytest.mark.parametrize(
    "target_type,target_id",
    [("video", VIDEO_ID), ("comment", COMMENT_ID), ("tweet", TWEET_ID)],
)
def test_toggle_likes_then_unlikes(repo, targets, clock, target_type, target_id) -> None:
    user = make_user("fan")
    inp = ToggleLikeInput(user=user, target_type=target_type, target_id=str(target_id))

    first = run_toggle(inp, repo, targets, clock)
    assert first.success is True
    assert first.is_liked is True
    assert repo.count(target_type, target_id) == 1

    second = run_toggle(inp, repo, targets, clock)
    assert second.is_liked is False
    assert repo.count(target_type, target_id) == 0


def test_toggle_missing_target(repo, targets, clock) -> None:
    inp = ToggleLikeInput(user=make_user("fan"), target_type="tweet", target_id=str(uuid4()))
    result = run_toggle(inp, repo, targets, clock)

    assert result.error == "Tweet not found"
    assert result.error_code == "not_found"


def test_toggle_invalid_id(repo, targets, clock) -> None:
    inp = ToggleLikeInput(user=make_user("fan"), target_type="comment", target_id="123")
    assert run_toggle(inp, repo, targets, clock).error == "Invalid comment id"


def test_like_info(repo, targets, clock) -> None:
    fan, other = make_user("fan"), make_user("other")
    run_toggle(ToggleLikeInput(user=fan, target_type="video", target_id=str(VIDEO_ID)), repo, targets, clock)
    run_toggle(ToggleLikeInput(user=other, target_type="video", target_id=str(VIDEO_ID)), repo, targets, clock)

    result = run_info(LikeInfoInput(viewer=fan, target_type="video", target_id=str(VIDEO_ID)), repo, targets)
    assert result.info is not None
    assert result.info.total_likes == 2
    assert result.info.is_liked is True

    lurker = make_user("lurker")
    result = run_info(LikeInfoInput(viewer=lurker, target_type="video", target_id=str(VIDEO_ID)), repo, targets)
    assert result.info.is_liked is False


def test_liked_videos_only_videos(repo, targets, clock) -> None:
    fan = make_user("fan")
    run_toggle(ToggleLikeInput(user=fan, target_type="video", target_id=str(VIDEO_ID)), repo, targets, clock)
    run_toggle(ToggleLikeInput(user=fan, target_type="tweet", target_id=str(TWEET_ID)), repo, targets, clock)

    result = run_liked_videos(LikedVideosInput(user=fan), repo)
    assert [v.id for v in result.videos] == [VIDEO_ID]


class VideoLookup:
    def __init__(self, *videos: Video) -> None:
        self.videos = {v.id: v for v in videos}

    def get_by_id(self, target_id: UUID) -> Video | None:
        return self.videos.get(target_id)


def test_draft_video_cannot_be_liked_by_others(repo, targets, clock) -> None:
    owner, fan = make_user("owner"), make_user("fan")
    draft = Video(owner_id=owner.id, title="wip", video_file="/media/w.mp4", thumbnail="/media/t.png")
    targets["video"] = VideoLookup(draft)

    toggled = run_toggle(ToggleLikeInput(user=fan, target_type="video", target_id=str(draft.id)), repo, targets, clock)
    info = run_info(LikeInfoInput(viewer=fan, target_type="video", target_id=str(draft.id)), repo, targets)

    assert toggled.error == "Video is not published"
    assert toggled.error_code == "forbidden"
    assert info.error_code == "forbidden"
    assert repo.likes == {}

    own = run_toggle(ToggleLikeInput(user=owner, target_type="video", target_id=str(draft.id)), repo, targets, clock)
    assert own.is_liked is True
