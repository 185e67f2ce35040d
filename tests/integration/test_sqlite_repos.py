"""
SQLite adapter tests against a migrated temporary database.
"""

import sqlite3
from datetime import UTC, datetime, timedelta
from uuid import uuid4

import pytest

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
from vidtube.components.accounts import DuplicateUserError
from vidtube.domain.entities import (
    Comment,
    Like,
    Playlist,
    Subscription,
    Tweet,
    User,
    Video,
    WatchEntry,
)

T0 = datetime(2025, 1, 1, 12, 0, tzinfo=UTC)


@pytest.fixture
def users(db_path):
    return SQLiteUserRepo(db_path)


@pytest.fixture
def videos(db_path):
    return SQLiteVideoRepo(db_path)


@pytest.fixture
def make_user(users):
    def _make(name: str) -> User:
        return users.save(
            User(
                user_name=name,
                email=f"{name}@example.com",
                full_name=name.title(),
                password_hash="hash",
                avatar=f"/media/avatars/{name}.png",
            )
        )

    return _make


@pytest.fixture
def make_video(videos):
    def _make(owner: User, title: str, minutes: int = 0, **fields) -> Video:
        created = T0 + timedelta(minutes=minutes)
        return videos.save(
            Video(
                owner_id=owner.id,
                title=title,
                video_file="/media/videos/v.mp4",
                thumbnail="/media/thumbnails/t.png",
                is_published=fields.pop("is_published", True),
                created_at=created,
                updated_at=created,
                **fields,
            )
        )

    return _make


# --- Users ---


def test_user_round_trip(users, make_user):
    alice = make_user("alice")

    assert users.get_by_id(alice.id) == alice
    assert users.get_by_user_name("alice").id == alice.id
    assert users.get_by_email("ALICE@example.com").id == alice.id
    assert users.find_by_login(None, "alice@example.com").id == alice.id
    assert users.find_by_login("nobody", None) is None


def test_duplicate_user_name_or_email(users, make_user):
    make_user("alice")

    clash = User(
        user_name="alice",
        email="other@example.com",
        full_name="Other",
        password_hash="hash",
        avatar="/media/avatars/o.png",
    )
    with pytest.raises(DuplicateUserError):
        users.save(clash)
    with pytest.raises(DuplicateUserError):
        users.save(clash.model_copy(update={"user_name": "other", "email": "alice@example.com"}))

    assert users.get_by_id(clash.id) is None


def test_refresh_token_update(users, make_user):
    alice = make_user("alice")
    users.set_refresh_token(alice.id, "tok")
    assert users.get_by_id(alice.id).refresh_token == "tok"

    users.set_refresh_token(alice.id, None)
    assert users.get_by_id(alice.id).refresh_token is None


def test_channel_profile_counts(db_path, users, make_user):
    alice, bob, carol = make_user("alice"), make_user("bob"), make_user("carol")
    subs = SQLiteSubscriptionRepo(db_path)
    subs.save(Subscription(subscriber_id=bob.id, channel_id=alice.id))
    subs.save(Subscription(subscriber_id=carol.id, channel_id=alice.id))
    subs.save(Subscription(subscriber_id=alice.id, channel_id=bob.id))

    as_bob = users.get_channel_profile("alice", bob.id)
    assert as_bob.subscriber_count == 2
    assert as_bob.subscribed_to_count == 1
    assert as_bob.is_subscribed is True

    anonymous = users.get_channel_profile("alice", None)
    assert anonymous.is_subscribed is False
    assert users.get_channel_profile("ghost", None) is None


def test_channel_stats(db_path, users, videos, make_user, make_video):
    alice, bob = make_user("alice"), make_user("bob")
    published = make_video(alice, "one", views=10)
    make_video(alice, "draft", views=5, is_published=False)
    SQLiteLikeRepo(db_path).save(
        Like(liked_by=bob.id, target_type="video", target_id=published.id)
    )
    SQLiteSubscriptionRepo(db_path).save(Subscription(subscriber_id=bob.id, channel_id=alice.id))
    SQLiteTweetRepo(db_path).save(Tweet(owner_id=alice.id, content="hi"))
    SQLitePlaylistRepo(db_path).save(Playlist(owner_id=alice.id, name="mix"))

    stats = users.get_channel_stats(alice.id)

    assert stats.videos_count == 2
    assert stats.total_views == 15
    assert stats.total_likes == 1
    assert stats.subscribers_count == 1
    assert stats.tweets_count == 1
    assert stats.playlists_count == 1
    assert users.get_channel_stats(uuid4()) is None


# --- Videos ---


def test_list_published_filters_and_counts(videos, make_user, make_video):
    alice, bob = make_user("alice"), make_user("bob")
    make_video(alice, "Cooking pasta", minutes=1)
    make_video(alice, "Cooking rice", minutes=2)
    make_video(bob, "Cooking secret", minutes=3, is_published=False)
    make_video(bob, "Gardening", minutes=4)

    cards, total = videos.list_published()
    assert total == 3
    assert [c.title for c in cards] == ["Gardening", "Cooking rice", "Cooking pasta"]
    assert cards[0].owner.user_name == "bob"

    cards, total = videos.list_published(query="cook")
    assert total == 2

    cards, total = videos.list_published(owner_id=bob.id)
    assert [c.title for c in cards] == ["Gardening"]

    cards, total = videos.list_published(sort_by="title", sort_type="asc", limit=1, offset=1)
    assert total == 3
    assert [c.title for c in cards] == ["Cooking rice"]


def test_list_published_escapes_wildcards(videos, make_user, make_video):
    alice = make_user("alice")
    make_video(alice, "100% real")
    make_video(alice, "1000 reasons")

    cards, total = videos.list_published(query="100%")
    assert total == 1
    assert cards[0].title == "100% real"


def test_video_detail_and_views(db_path, videos, make_user, make_video):
    alice, bob = make_user("alice"), make_user("bob")
    video = make_video(alice, "clip")
    SQLiteSubscriptionRepo(db_path).save(Subscription(subscriber_id=bob.id, channel_id=alice.id))
    SQLiteLikeRepo(db_path).save(Like(liked_by=bob.id, target_type="video", target_id=video.id))

    videos.increment_views(video.id)
    videos.increment_views(video.id)
    detail = videos.get_detail(video.id)

    assert detail.views == 2
    assert detail.likes == 1
    assert detail.owner.subscribers == 1
    assert videos.get_detail(uuid4()) is None


def test_delete_video_cascades(db_path, videos, make_user, make_video):
    alice, bob = make_user("alice"), make_user("bob")
    video = make_video(alice, "doomed")
    comments = SQLiteCommentRepo(db_path)
    likes = SQLiteLikeRepo(db_path)
    playlists = SQLitePlaylistRepo(db_path)
    history = SQLiteWatchHistoryRepo(db_path)

    comment = comments.save(Comment(video_id=video.id, owner_id=bob.id, content="nice"))
    likes.save(Like(liked_by=bob.id, target_type="video", target_id=video.id))
    likes.save(Like(liked_by=alice.id, target_type="comment", target_id=comment.id))
    playlist = playlists.save(Playlist(owner_id=bob.id, name="faves", video_ids=[video.id]))
    history.record(WatchEntry(user_id=bob.id, video_id=video.id, watched_at=T0))

    videos.delete(video.id)

    assert videos.get_by_id(video.id) is None
    assert comments.get_by_id(comment.id) is None
    assert likes.count("video", video.id) == 0
    assert likes.count("comment", comment.id) == 0
    assert playlists.get_by_id(playlist.id).video_ids == []
    assert history.list_for_user(bob.id) == []


def test_channel_videos_include_drafts(db_path, videos, make_user, make_video):
    alice, bob = make_user("alice"), make_user("bob")
    old = make_video(alice, "old", minutes=1)
    draft = make_video(alice, "draft", minutes=2, is_published=False)
    SQLiteCommentRepo(db_path).save(Comment(video_id=old.id, owner_id=bob.id, content="first"))

    rows = videos.list_channel_videos(alice.id)

    assert [r.id for r in rows] == [draft.id, old.id]
    assert rows[1].comments_count == 1
    assert rows[0].is_published is False


# --- Watch history ---


def test_history_upsert_order_and_prune(db_path, make_user, make_video):
    alice = make_user("alice")
    first, second = make_video(alice, "first"), make_video(alice, "second")
    history = SQLiteWatchHistoryRepo(db_path)

    history.record(WatchEntry(user_id=alice.id, video_id=first.id, watched_at=T0))
    history.record(WatchEntry(user_id=alice.id, video_id=second.id, watched_at=T0 + timedelta(hours=1)))
    history.record(WatchEntry(user_id=alice.id, video_id=first.id, watched_at=T0 + timedelta(hours=2)))

    items = history.list_for_user(alice.id)
    assert [i.video.id for i in items] == [first.id, second.id]
    assert items[0].watched_at == T0 + timedelta(hours=2)

    assert history.prune_older_than(alice.id, T0 + timedelta(minutes=90)) == 1
    assert [i.video.id for i in history.list_for_user(alice.id)] == [first.id]

    assert history.remove(alice.id, first.id) == 1
    assert history.clear(alice.id) == 0


def test_history_hides_other_users_drafts(db_path, make_user, make_video):
    alice, bob = make_user("alice"), make_user("bob")
    video = make_video(alice, "clip")
    draft = make_video(alice, "draft", is_published=False)
    history = SQLiteWatchHistoryRepo(db_path)
    for who in (alice, bob):
        history.record(WatchEntry(user_id=who.id, video_id=video.id, watched_at=T0))
        history.record(WatchEntry(user_id=who.id, video_id=draft.id, watched_at=T0))

    assert {i.video.id for i in history.list_for_user(alice.id)} == {video.id, draft.id}
    assert [i.video.id for i in history.list_for_user(bob.id)] == [video.id]


# --- Comments, tweets, likes ---


def test_comments_oldest_first_with_owner(db_path, make_user, make_video):
    alice, bob = make_user("alice"), make_user("bob")
    video = make_video(alice, "clip")
    comments = SQLiteCommentRepo(db_path)
    later = comments.save(
        Comment(video_id=video.id, owner_id=alice.id, content="later", created_at=T0 + timedelta(minutes=5))
    )
    earlier = comments.save(
        Comment(video_id=video.id, owner_id=bob.id, content="earlier", created_at=T0)
    )

    rows = comments.list_for_video(video.id)

    assert [c.id for c in rows] == [earlier.id, later.id]
    assert rows[0].owner.user_name == "bob"
    assert comments.get_view(later.id).owner.user_name == "alice"


def test_tweets_newest_first_with_likes(db_path, make_user):
    alice, bob = make_user("alice"), make_user("bob")
    tweets = SQLiteTweetRepo(db_path)
    old = tweets.save(Tweet(owner_id=alice.id, content="old", created_at=T0))
    new = tweets.save(Tweet(owner_id=alice.id, content="new", created_at=T0 + timedelta(days=1)))
    tweets.save(Tweet(owner_id=bob.id, content="bob", created_at=T0 + timedelta(days=2)))
    SQLiteLikeRepo(db_path).save(Like(liked_by=bob.id, target_type="tweet", target_id=old.id))

    mine = tweets.list_by_owner(alice.id)

    assert [t.id for t in mine] == [new.id, old.id]
    assert mine[1].likes_count == 1
    assert len(tweets.list_all()) == 3


def test_likes_are_unique_per_target(db_path, make_user, make_video):
    alice = make_user("alice")
    video = make_video(alice, "clip")
    likes = SQLiteLikeRepo(db_path)
    like = likes.save(Like(liked_by=alice.id, target_type="video", target_id=video.id))

    assert likes.get(alice.id, "video", video.id).id == like.id
    assert likes.get(alice.id, "tweet", video.id) is None
    assert [v.id for v in likes.list_liked_videos(alice.id)] == [video.id]

    with pytest.raises(sqlite3.IntegrityError):
        likes.save(Like(liked_by=alice.id, target_type="video", target_id=video.id))


def test_liked_videos_skip_other_users_drafts(db_path, make_user, make_video):
    alice, bob = make_user("alice"), make_user("bob")
    video = make_video(alice, "clip", minutes=1)
    draft = make_video(alice, "draft", minutes=2, is_published=False)
    likes = SQLiteLikeRepo(db_path)
    for who in (alice, bob):
        likes.save(Like(liked_by=who.id, target_type="video", target_id=video.id, created_at=T0))
        likes.save(
            Like(liked_by=who.id, target_type="video", target_id=draft.id, created_at=T0 + timedelta(minutes=1))
        )

    assert [v.id for v in likes.list_liked_videos(alice.id)] == [draft.id, video.id]
    assert [v.id for v in likes.list_liked_videos(bob.id)] == [video.id]


# --- Playlists & subscriptions ---


def test_playlist_keeps_video_order(db_path, make_user, make_video):
    alice = make_user("alice")
    a, b, c = make_video(alice, "a"), make_video(alice, "b"), make_video(alice, "c")
    playlists = SQLitePlaylistRepo(db_path)
    playlist = playlists.save(Playlist(owner_id=alice.id, name="mix", video_ids=[c.id, a.id, b.id]))

    assert playlists.get_by_id(playlist.id).video_ids == [c.id, a.id, b.id]

    detail = playlists.get_detail(playlist.id)
    assert [v.title for v in detail.videos] == ["c", "a", "b"]
    assert detail.total_videos == 3
    assert detail.owner.user_name == "alice"

    summaries = playlists.list_by_owner(alice.id)
    assert summaries[0].total_videos == 3

    playlists.delete(playlist.id)
    assert playlists.get_detail(playlist.id) is None


def test_playlist_detail_filters_drafts_by_viewer(db_path, make_user, make_video):
    alice, bob = make_user("alice"), make_user("bob")
    video = make_video(alice, "public")
    draft = make_video(alice, "draft", is_published=False)
    playlists = SQLitePlaylistRepo(db_path)
    playlist = playlists.save(Playlist(owner_id=bob.id, name="mix", video_ids=[draft.id, video.id]))

    as_alice = playlists.get_detail(playlist.id, alice.id)
    as_bob = playlists.get_detail(playlist.id, bob.id)
    anonymous = playlists.get_detail(playlist.id)

    assert [v.id for v in as_alice.videos] == [draft.id, video.id]
    assert [v.id for v in as_bob.videos] == [video.id]
    assert as_bob.total_videos == 1
    assert [v.id for v in anonymous.videos] == [video.id]


def test_subscription_cards(db_path, make_user):
    alice, bob, carol = make_user("alice"), make_user("bob"), make_user("carol")
    subs = SQLiteSubscriptionRepo(db_path)
    subs.save(Subscription(subscriber_id=bob.id, channel_id=alice.id, created_at=T0))
    subs.save(Subscription(subscriber_id=carol.id, channel_id=alice.id, created_at=T0 + timedelta(hours=1)))

    subscribers = subs.list_subscribers(alice.id)
    assert [c.user_name for c in subscribers] == ["carol", "bob"]

    channels = subs.list_subscribed_channels(bob.id)
    assert [c.user_name for c in channels] == ["alice"]
    assert channels[0].subscribers_count == 2

    subs.delete(subs.get(bob.id, alice.id).id)
    assert subs.get(bob.id, alice.id) is None
