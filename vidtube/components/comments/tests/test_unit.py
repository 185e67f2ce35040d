"""
Comments component unit tests.
"""

from __future__ import annotations

from datetime import UTC, datetime, timedelta
from uuid import UUID, uuid4

import pytest

from vidtube.adapters.clock import FixedClock
from vidtube.components.comments import (
    AddCommentInput,
    DeleteCommentInput,
    ListCommentsInput,
    UpdateCommentInput,
    run_add,
    run_delete,
    run_list,
    run_update,
)
from vidtube.domain.entities import Comment, User, Video
from vidtube.domain.views import CommentView


class MockCommentRepo:
    def __init__(self) -> None:
        self.comments: dict[UUID, Comment] = {}

    def save(self, comment: Comment) -> Comment:
        self.comments[comment.id] = comment.model_copy()
        return comment

    def get_by_id(self, comment_id: UUID) -> Comment | None:
        comment = self.comments.get(comment_id)
        return comment.model_copy() if comment else None

    def get_view(self, comment_id: UUID) -> CommentView | None:
        comment = self.comments.get(comment_id)
        return CommentView(**comment.model_dump()) if comment else None

    def list_for_video(self, video_id: UUID) -> list[CommentView]:
        rows = [c for c in self.comments.values() if c.video_id == video_id]
        rows.sort(key=lambda c: c.created_at)
        return [CommentView(**c.model_dump()) for c in rows]

    def delete(self, comment_id: UUID) -> None:
        self.comments.pop(comment_id, None)


class MockVideoLookup:
    def __init__(self, *videos: Video) -> None:
        self.videos = {v.id: v for v in videos}

    def get_by_id(self, video_id: UUID) -> Video | None:
        return self.videos.get(video_id)


def make_user(name: str) -> User:
    return User(
        user_name=name,
        email=f"{name}@example.com",
        full_name=name.title(),
        password_hash="x",
        avatar="/media/a.png",
    )


@pytest.fixture
def alice() -> User:
    return make_user("alice")


@pytest.fixture
def bob() -> User:
    return make_user("bob")


@pytest.fixture
def video(alice: User) -> Video:
    return Video(
        owner_id=alice.id,
        title="v",
        video_file="/media/v.mp4",
        thumbnail="/media/t.png",
        is_published=True,
    )


@pytest.fixture
def videos(video: Video) -> MockVideoLookup:
    return MockVideoLookup(video)


@pytest.fixture
def repo() -> MockCommentRepo:
    return MockCommentRepo()


@pytest.fixture
def clock() -> FixedClock:
    return FixedClock(datetime(2025, 4, 1, tzinfo=UTC))


def comment(repo, videos, clock, user: User, video: Video, content: str) -> CommentView:
    clock.advance(timedelta(seconds=1))
    result = run_add(AddCommentInput(user=user, video_id=str(video.id), content=content), repo, videos, clock)
    assert result.comment is not None
    return result.comment


def test_add_trims_content(repo, videos, clock, alice, video) -> None:
    created = comment(repo, videos, clock, alice, video, "  nice one  ")

    assert created.content == "nice one"
    assert created.owner_id == alice.id


def test_add_requires_content(repo, videos, clock, alice, video) -> None:
    result = run_add(AddCommentInput(user=alice, video_id=str(video.id), content=" "), repo, videos, clock)
    assert result.error == "Content is required"


def test_add_to_missing_video(repo, videos, clock, alice) -> None:
    result = run_add(AddCommentInput(user=alice, video_id=str(uuid4()), content="hi"), repo, videos, clock)
    assert result.error_code == "not_found"


def test_viewer_comments_come_first(repo, videos, clock, alice, bob, video) -> None:
    a1 = comment(repo, videos, clock, alice, video, "a1")
    b1 = comment(repo, videos, clock, bob, video, "b1")
    a2 = comment(repo, videos, clock, alice, video, "a2")
    b2 = comment(repo, videos, clock, bob, video, "b2")

    as_bob = run_list(ListCommentsInput(viewer=bob, video_id=str(video.id)), repo, videos)
    as_alice = run_list(ListCommentsInput(viewer=alice, video_id=str(video.id)), repo, videos)

    assert [c.id for c in as_bob.comments] == [b1.id, b2.id, a1.id, a2.id]
    assert [c.id for c in as_alice.comments] == [a1.id, a2.id, b1.id, b2.id]


def test_list_missing_video(repo, videos, alice) -> None:
    result = run_list(ListCommentsInput(viewer=alice, video_id=str(uuid4())), repo, videos)
    assert result.error_code == "not_found"


def test_update_own_comment(repo, videos, clock, alice, video) -> None:
    created = comment(repo, videos, clock, alice, video, "tpyo")
    result = run_update(UpdateCommentInput(user=alice, comment_id=str(created.id), content="typo"), repo, clock)

    assert result.success is True
    assert repo.comments[created.id].content == "typo"


def test_update_someone_elses_comment(repo, videos, clock, alice, bob, video) -> None:
    created = comment(repo, videos, clock, alice, video, "mine")
    result = run_update(UpdateCommentInput(user=bob, comment_id=str(created.id), content="hijack"), repo, clock)

    assert result.error_code == "forbidden"
    assert repo.comments[created.id].content == "mine"


def test_delete_comment(repo, videos, clock, alice, bob, video) -> None:
    created = comment(repo, videos, clock, alice, video, "bye")

    assert run_delete(DeleteCommentInput(user=bob, comment_id=str(created.id)), repo).error_code == "forbidden"
    assert run_delete(DeleteCommentInput(user=alice, comment_id=str(created.id)), repo).success is True
    assert run_delete(DeleteCommentInput(user=alice, comment_id=str(created.id)), repo).error_code == "not_found"


def test_draft_video_is_closed_to_other_users(repo, clock, alice, bob) -> None:
    draft = Video(owner_id=alice.id, title="wip", video_file="/media/w.mp4", thumbnail="/media/t.png")
    videos = MockVideoLookup(draft)

    added = run_add(AddCommentInput(user=bob, video_id=str(draft.id), content="first"), repo, videos, clock)
    listed = run_list(ListCommentsInput(viewer=bob, video_id=str(draft.id)), repo, videos)

    assert added.error == "Video is not published"
    assert added.error_code == "forbidden"
    assert listed.error_code == "forbidden"
    assert repo.comments == {}


def test_owner_can_comment_on_own_draft(repo, clock, alice) -> None:
    draft = Video(owner_id=alice.id, title="wip", video_file="/media/w.mp4", thumbnail="/media/t.png")
    videos = MockVideoLookup(draft)

    created = comment(repo, videos, clock, alice, draft, "note to self")
    listed = run_list(ListCommentsInput(viewer=alice, video_id=str(draft.id)), repo, videos)

    assert [c.id for c in listed.comments] == [created.id]
