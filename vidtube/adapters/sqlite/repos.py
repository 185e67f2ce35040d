import sqlite3
from datetime import UTC, datetime
from typing import Any
from uuid import UUID

from vidtube.components.accounts.ports import DuplicateUserError
from vidtube.domain.entities import (
    Comment,
    Like,
    LikeTarget,
    Playlist,
    Subscription,
    Tweet,
    User,
    Video,
    WatchEntry,
)
from vidtube.domain.views import (
    ChannelCard,
    ChannelProfile,
    ChannelStats,
    ChannelVideo,
    CommentView,
    HistoryItem,
    OwnerSummary,
    PlaylistDetail,
    PlaylistSummary,
    TweetView,
    VideoCard,
    VideoDetail,
    VideoOwner,
)

# Whitelisted ORDER BY columns for video listings, keyed by the public field name.
VIDEO_SORT_COLUMNS = {
    "createdAt": "v.created_at",
    "views": "v.views",
    "duration": "v.duration",
    "title": "v.title",
}

LIKE_COLUMNS: dict[str, str] = {
    "video": "video_id",
    "comment": "comment_id",
    "tweet": "tweet_id",
}

# Owner columns joined onto any owned row (videos, comments, tweets, playlists).
OWNER_COLUMNS = """
    u.user_name AS owner_user_name,
    u.full_name AS owner_full_name,
    u.avatar AS owner_avatar
"""


# Helper to convert sqlite rows to dicts
def dict_factory(cursor: sqlite3.Cursor, row: Any) -> dict[str, Any]:
    d = {}
    for idx, col in enumerate(cursor.description):
        d[col[0]] = row[idx]
    return d


def to_db_time(dt: datetime) -> str:
    """Normalise to a fixed-width UTC ISO string so text comparison orders correctly."""
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=UTC)
    return dt.astimezone(UTC).isoformat(timespec="microseconds")


def owner_from_row(row: dict[str, Any]) -> OwnerSummary | None:
    if row.get("owner_user_name") is None:
        return None
    return OwnerSummary(
        id=row["owner_id"],
        user_name=row["owner_user_name"],
        full_name=row["owner_full_name"],
        avatar=row["owner_avatar"],
    )


def video_card_from_row(row: dict[str, Any]) -> VideoCard:
    return VideoCard.model_validate({**row, "owner": owner_from_row(row)})


def escape_like(term: str) -> str:
    return term.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


class SQLiteRepo:
    def __init__(self, db_path: str):
        self.db_path = db_path

    def _get_conn(self) -> sqlite3.Connection:
        conn = sqlite3.connect(self.db_path)
        conn.row_factory = dict_factory
        conn.execute("PRAGMA foreign_keys = ON;")
        return conn

    def _execute(self, sql: str, params: tuple[Any, ...] = ()) -> int:
        """Run a single write statement and return the affected row count."""
        conn = self._get_conn()
        try:
            cursor = conn.execute(sql, params)
            conn.commit()
            return cursor.rowcount
        except Exception:
            conn.rollback()
            raise
        finally:
            conn.close()

    def _fetch_one(self, sql: str, params: tuple[Any, ...] = ()) -> dict[str, Any] | None:
        conn = self._get_conn()
        try:
            row: dict[str, Any] | None = conn.execute(sql, params).fetchone()
            return row
        finally:
            conn.close()

    def _fetch_all(self, sql: str, params: tuple[Any, ...] = ()) -> list[dict[str, Any]]:
        conn = self._get_conn()
        try:
            rows: list[dict[str, Any]] = conn.execute(sql, params).fetchall()
            return rows
        finally:
            conn.close()


class SQLiteUserRepo(SQLiteRepo):
    def save(self, user: User) -> User:
        try:
            self._upsert(user)
        except sqlite3.IntegrityError as e:
            # Unique user_name or email taken by another row.
            raise DuplicateUserError(str(e)) from e
        return user

    def _upsert(self, user: User) -> None:
        self._execute(
            """
            INSERT INTO users (
                id, user_name, email, full_name, password_hash,
                avatar, cover_image, refresh_token, created_at, updated_at
            ) VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?)
            ON CONFLICT(id) DO UPDATE SET
                user_name=excluded.user_name,
                email=excluded.email,
                full_name=excluded.full_name,
                password_hash=excluded.password_hash,
                avatar=excluded.avatar,
                cover_image=excluded.cover_image,
                refresh_token=excluded.refresh_token,
                updated_at=excluded.updated_at
            """,
            (
                str(user.id),
                user.user_name,
                user.email,
                user.full_name,
                user.password_hash,
                user.avatar,
                user.cover_image,
                user.refresh_token,
                to_db_time(user.created_at),
                to_db_time(user.updated_at),
            ),
        )

    def get_by_id(self, user_id: UUID) -> User | None:
        row = self._fetch_one("SELECT * FROM users WHERE id = ?", (str(user_id),))
        return User.model_validate(row) if row else None

    def get_by_user_name(self, user_name: str) -> User | None:
        row = self._fetch_one("SELECT * FROM users WHERE user_name = ?", (user_name,))
        return User.model_validate(row) if row else None

    def get_by_email(self, email: str) -> User | None:
        row = self._fetch_one(
            "SELECT * FROM users WHERE email = ? COLLATE NOCASE", (email,)
        )
        return User.model_validate(row) if row else None

    def find_by_login(self, user_name: str | None, email: str | None) -> User | None:
        """First user matching either the user name or the email."""
        row = self._fetch_one(
            """
            SELECT * FROM users
            WHERE (? IS NOT NULL AND user_name = ?)
               OR (? IS NOT NULL AND email = ? COLLATE NOCASE)
            LIMIT 1
            """,
            (user_name, user_name, email, email),
        )
        return User.model_validate(row) if row else None

    def set_refresh_token(self, user_id: UUID, token: str | None) -> None:
        self._execute(
            "UPDATE users SET refresh_token = ?, updated_at = ? WHERE id = ?",
            (token, to_db_time(datetime.now(UTC)), str(user_id)),
        )

    def get_channel_profile(self, user_name: str, viewer_id: UUID | None) -> ChannelProfile | None:
        row = self._fetch_one(
            """
            SELECT
                u.*,
                (SELECT COUNT(*) FROM subscriptions s WHERE s.channel_id = u.id)
                    AS subscriber_count,
                (SELECT COUNT(*) FROM subscriptions s WHERE s.subscriber_id = u.id)
                    AS subscribed_to_count,
                EXISTS(
                    SELECT 1 FROM subscriptions s
                    WHERE s.channel_id = u.id AND s.subscriber_id = ?
                ) AS is_subscribed
            FROM users u
            WHERE u.user_name = ?
            """,
            (str(viewer_id) if viewer_id else None, user_name),
        )
        return ChannelProfile.model_validate(row) if row else None

    def get_channel_stats(self, user_id: UUID) -> ChannelStats | None:
        row = self._fetch_one(
            """
            SELECT
                u.*,
                (SELECT COUNT(*) FROM subscriptions s WHERE s.channel_id = u.id)
                    AS subscribers_count,
                (SELECT COUNT(*) FROM videos v WHERE v.owner_id = u.id) AS videos_count,
                (SELECT COALESCE(SUM(v.views), 0) FROM videos v WHERE v.owner_id = u.id)
                    AS total_views,
                (SELECT COUNT(*) FROM likes l JOIN videos v ON v.id = l.video_id
                    WHERE v.owner_id = u.id) AS total_likes,
                (SELECT COUNT(*) FROM tweets t WHERE t.owner_id = u.id) AS tweets_count,
                (SELECT COUNT(*) FROM playlists p WHERE p.owner_id = u.id) AS playlists_count
            FROM users u
            WHERE u.id = ?
            """,
            (str(user_id),),
        )
        return ChannelStats.model_validate(row) if row else None


class SQLiteVideoRepo(SQLiteRepo):
    def save(self, video: Video) -> Video:
        self._execute(
            """
            INSERT INTO videos (
                id, owner_id, title, description, video_file, thumbnail,
                duration, views, is_published, created_at, updated_at
            ) VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?)
            ON CONFLICT(id) DO UPDATE SET
                title=excluded.title,
                description=excluded.description,
                video_file=excluded.video_file,
                thumbnail=excluded.thumbnail,
                duration=excluded.duration,
                views=excluded.views,
                is_published=excluded.is_published,
                updated_at=excluded.updated_at
            """,
            (
                str(video.id),
                str(video.owner_id),
                video.title,
                video.description,
                video.video_file,
                video.thumbnail,
                video.duration,
                video.views,
                int(video.is_published),
                to_db_time(video.created_at),
                to_db_time(video.updated_at),
            ),
        )
        return video

    def get_by_id(self, video_id: UUID) -> Video | None:
        row = self._fetch_one("SELECT * FROM videos WHERE id = ?", (str(video_id),))
        return Video.model_validate(row) if row else None

    def get_detail(self, video_id: UUID) -> VideoDetail | None:
        row = self._fetch_one(
            f"""
            SELECT
                v.*,
                {OWNER_COLUMNS},
                (SELECT COUNT(*) FROM subscriptions s WHERE s.channel_id = v.owner_id)
                    AS owner_subscribers,
                (SELECT COUNT(*) FROM likes l WHERE l.video_id = v.id) AS likes
            FROM videos v
            LEFT JOIN users u ON u.id = v.owner_id
            WHERE v.id = ?
            """,
            (str(video_id),),
        )
        if not row:
            return None
        owner = owner_from_row(row)
        return VideoDetail.model_validate(
            {
                **row,
                "owner": VideoOwner(
                    **owner.model_dump(), subscribers=row["owner_subscribers"]
                ) if owner else None,
            }
        )

    def list_published(
        self,
        query: str | None = None,
        owner_id: UUID | None = None,
        sort_by: str = "createdAt",
        sort_type: str = "desc",
        limit: int = 12,
        offset: int = 0,
    ) -> tuple[list[VideoCard], int]:
        where = ["v.is_published = 1"]
        params: list[Any] = []
        if query:
            where.append("v.title LIKE ? ESCAPE '\\'")
            params.append(f"%{escape_like(query)}%")
        if owner_id:
            where.append("v.owner_id = ?")
            params.append(str(owner_id))

        column = VIDEO_SORT_COLUMNS.get(sort_by, VIDEO_SORT_COLUMNS["createdAt"])
        direction = "ASC" if sort_type == "asc" else "DESC"
        where_sql = " AND ".join(where)

        conn = self._get_conn()
        try:
            count_row = conn.execute(
                f"SELECT COUNT(*) AS c FROM videos v WHERE {where_sql}", tuple(params)
            ).fetchone()
            rows = conn.execute(
                f"""
                SELECT v.*, {OWNER_COLUMNS}
                FROM videos v
                LEFT JOIN users u ON u.id = v.owner_id
                WHERE {where_sql}
                ORDER BY {column} {direction}, v.rowid {direction}
                LIMIT ? OFFSET ?
                """,
                (*params, limit, offset),
            ).fetchall()
        finally:
            conn.close()

        return [video_card_from_row(r) for r in rows], count_row["c"]

    def increment_views(self, video_id: UUID) -> None:
        self._execute("UPDATE videos SET views = views + 1 WHERE id = ?", (str(video_id),))

    def delete(self, video_id: UUID) -> None:
        # Comments, likes, playlist entries and history rows cascade.
        self._execute("DELETE FROM videos WHERE id = ?", (str(video_id),))

    def list_channel_videos(self, owner_id: UUID) -> list[ChannelVideo]:
        rows = self._fetch_all(
            """
            SELECT
                v.*,
                (SELECT COUNT(*) FROM likes l WHERE l.video_id = v.id) AS likes_count,
                (SELECT COUNT(*) FROM comments c WHERE c.video_id = v.id) AS comments_count
            FROM videos v
            WHERE v.owner_id = ?
            ORDER BY v.created_at DESC, v.rowid DESC
            """,
            (str(owner_id),),
        )
        return [ChannelVideo.model_validate(r) for r in rows]


class SQLiteWatchHistoryRepo(SQLiteRepo):
    def record(self, entry: WatchEntry) -> WatchEntry:
        """Insert or move an entry; one row per (user, video) keeps re-watches de-duplicated."""
        self._execute(
            """
            INSERT INTO watch_history (user_id, video_id, watched_at) VALUES (?, ?, ?)
            ON CONFLICT(user_id, video_id) DO UPDATE SET watched_at=excluded.watched_at
            """,
            (str(entry.user_id), str(entry.video_id), to_db_time(entry.watched_at)),
        )
        return entry

    def prune_older_than(self, user_id: UUID, cutoff: datetime) -> int:
        return self._execute(
            "DELETE FROM watch_history WHERE user_id = ? AND watched_at < ?",
            (str(user_id), to_db_time(cutoff)),
        )

    def list_for_user(self, user_id: UUID) -> list[HistoryItem]:
        rows = self._fetch_all(
            f"""
            SELECT h.watched_at AS history_watched_at, v.*, {OWNER_COLUMNS}
            FROM watch_history h
            JOIN videos v ON v.id = h.video_id
            LEFT JOIN users u ON u.id = v.owner_id
            WHERE h.user_id = ?
                AND (v.is_published = 1 OR v.owner_id = h.user_id)
            ORDER BY h.watched_at DESC
            """,
            (str(user_id),),
        )
        return [
            HistoryItem(video=video_card_from_row(r), watched_at=r["history_watched_at"])
            for r in rows
        ]

    def clear(self, user_id: UUID) -> int:
        return self._execute("DELETE FROM watch_history WHERE user_id = ?", (str(user_id),))

    def remove(self, user_id: UUID, video_id: UUID) -> int:
        return self._execute(
            "DELETE FROM watch_history WHERE user_id = ? AND video_id = ?",
            (str(user_id), str(video_id)),
        )


class SQLiteCommentRepo(SQLiteRepo):
    def save(self, comment: Comment) -> Comment:
        self._execute(
            """
            INSERT INTO comments (id, video_id, owner_id, content, created_at, updated_at)
            VALUES (?, ?, ?, ?, ?, ?)
            ON CONFLICT(id) DO UPDATE SET
                content=excluded.content,
                updated_at=excluded.updated_at
            """,
            (
                str(comment.id),
                str(comment.video_id),
                str(comment.owner_id),
                comment.content,
                to_db_time(comment.created_at),
                to_db_time(comment.updated_at),
            ),
        )
        return comment

    def get_by_id(self, comment_id: UUID) -> Comment | None:
        row = self._fetch_one("SELECT * FROM comments WHERE id = ?", (str(comment_id),))
        return Comment.model_validate(row) if row else None

    def get_view(self, comment_id: UUID) -> CommentView | None:
        row = self._fetch_one(
            f"""
            SELECT c.*, {OWNER_COLUMNS}
            FROM comments c
            LEFT JOIN users u ON u.id = c.owner_id
            WHERE c.id = ?
            """,
            (str(comment_id),),
        )
        if not row:
            return None
        return CommentView.model_validate({**row, "owner": owner_from_row(row)})

    def list_for_video(self, video_id: UUID) -> list[CommentView]:
        rows = self._fetch_all(
            f"""
            SELECT c.*, {OWNER_COLUMNS}
            FROM comments c
            LEFT JOIN users u ON u.id = c.owner_id
            WHERE c.video_id = ?
            ORDER BY c.created_at ASC, c.rowid ASC
            """,
            (str(video_id),),
        )
        return [CommentView.model_validate({**r, "owner": owner_from_row(r)}) for r in rows]

    def delete(self, comment_id: UUID) -> None:
        self._execute("DELETE FROM comments WHERE id = ?", (str(comment_id),))


class SQLiteTweetRepo(SQLiteRepo):
    _VIEW_SQL = f"""
        SELECT t.*, {OWNER_COLUMNS},
            (SELECT COUNT(*) FROM likes l WHERE l.tweet_id = t.id) AS likes_count
        FROM tweets t
        LEFT JOIN users u ON u.id = t.owner_id
    """

    def save(self, tweet: Tweet) -> Tweet:
        self._execute(
            """
            INSERT INTO tweets (id, owner_id, content, created_at, updated_at)
            VALUES (?, ?, ?, ?, ?)
            ON CONFLICT(id) DO UPDATE SET
                content=excluded.content,
                updated_at=excluded.updated_at
            """,
            (
                str(tweet.id),
                str(tweet.owner_id),
                tweet.content,
                to_db_time(tweet.created_at),
                to_db_time(tweet.updated_at),
            ),
        )
        return tweet

    def get_by_id(self, tweet_id: UUID) -> Tweet | None:
        row = self._fetch_one("SELECT * FROM tweets WHERE id = ?", (str(tweet_id),))
        return Tweet.model_validate(row) if row else None

    def _views(self, rows: list[dict[str, Any]]) -> list[TweetView]:
        return [TweetView.model_validate({**r, "owner": owner_from_row(r)}) for r in rows]

    def list_all(self) -> list[TweetView]:
        rows = self._fetch_all(self._VIEW_SQL + " ORDER BY t.created_at DESC, t.rowid DESC")
        return self._views(rows)

    def list_by_owner(self, owner_id: UUID) -> list[TweetView]:
        rows = self._fetch_all(
            self._VIEW_SQL + " WHERE t.owner_id = ? ORDER BY t.created_at DESC, t.rowid DESC",
            (str(owner_id),),
        )
        return self._views(rows)

    def delete(self, tweet_id: UUID) -> None:
        self._execute("DELETE FROM tweets WHERE id = ?", (str(tweet_id),))


class SQLiteLikeRepo(SQLiteRepo):
    def get(self, liked_by: UUID, target_type: LikeTarget, target_id: UUID) -> Like | None:
        column = LIKE_COLUMNS[target_type]
        row = self._fetch_one(
            f"SELECT * FROM likes WHERE liked_by = ? AND {column} = ?",
            (str(liked_by), str(target_id)),
        )
        if not row:
            return None
        return Like(
            id=row["id"],
            liked_by=row["liked_by"],
            target_type=target_type,
            target_id=row[column],
            created_at=row["created_at"],
        )

    def save(self, like: Like) -> Like:
        ids = {column: None for column in LIKE_COLUMNS.values()}
        ids[LIKE_COLUMNS[like.target_type]] = str(like.target_id)
        self._execute(
            """
            INSERT INTO likes (id, liked_by, video_id, comment_id, tweet_id, created_at)
            VALUES (?, ?, ?, ?, ?, ?)
            """,
            (
                str(like.id),
                str(like.liked_by),
                ids["video_id"],
                ids["comment_id"],
                ids["tweet_id"],
                to_db_time(like.created_at),
            ),
        )
        return like

    def delete(self, like_id: UUID) -> None:
        self._execute("DELETE FROM likes WHERE id = ?", (str(like_id),))

    def count(self, target_type: LikeTarget, target_id: UUID) -> int:
        column = LIKE_COLUMNS[target_type]
        row = self._fetch_one(
            f"SELECT COUNT(*) AS c FROM likes WHERE {column} = ?", (str(target_id),)
        )
        return int(row["c"]) if row else 0

    def list_liked_videos(self, user_id: UUID) -> list[VideoCard]:
        rows = self._fetch_all(
            f"""
            SELECT v.*, {OWNER_COLUMNS}
            FROM likes l
            JOIN videos v ON v.id = l.video_id
            LEFT JOIN users u ON u.id = v.owner_id
            WHERE l.liked_by = ? AND l.video_id IS NOT NULL
                AND (v.is_published = 1 OR v.owner_id = l.liked_by)
            ORDER BY l.created_at DESC, l.rowid DESC
            """,
            (str(user_id),),
        )
        return [video_card_from_row(r) for r in rows]


class SQLitePlaylistRepo(SQLiteRepo):
    _SUMMARY_SQL = """
        SELECT p.*,
            (SELECT COUNT(*) FROM playlist_videos pv WHERE pv.playlist_id = p.id)
                AS total_videos
        FROM playlists p
    """

    def save(self, playlist: Playlist) -> Playlist:
        conn = self._get_conn()
        try:
            conn.execute(
                """
                INSERT INTO playlists (id, owner_id, name, description, created_at, updated_at)
                VALUES (?, ?, ?, ?, ?, ?)
                ON CONFLICT(id) DO UPDATE SET
                    name=excluded.name,
                    description=excluded.description,
                    updated_at=excluded.updated_at
                """,
                (
                    str(playlist.id),
                    str(playlist.owner_id),
                    playlist.name,
                    playlist.description,
                    to_db_time(playlist.created_at),
                    to_db_time(playlist.updated_at),
                ),
            )
            conn.execute(
                "DELETE FROM playlist_videos WHERE playlist_id = ?", (str(playlist.id),)
            )
            for position, video_id in enumerate(playlist.video_ids):
                conn.execute(
                    "INSERT INTO playlist_videos (playlist_id, video_id, position) VALUES (?, ?, ?)",
                    (str(playlist.id), str(video_id), position),
                )
            conn.commit()
            return playlist
        except Exception:
            conn.rollback()
            raise
        finally:
            conn.close()

    def get_by_id(self, playlist_id: UUID) -> Playlist | None:
        conn = self._get_conn()
        try:
            row = conn.execute(
                "SELECT * FROM playlists WHERE id = ?", (str(playlist_id),)
            ).fetchone()
            if not row:
                return None
            video_rows = conn.execute(
                "SELECT video_id FROM playlist_videos WHERE playlist_id = ? ORDER BY position ASC",
                (str(playlist_id),),
            ).fetchall()
        finally:
            conn.close()
        return Playlist.model_validate(
            {**row, "video_ids": [r["video_id"] for r in video_rows]}
        )

    def get_detail(
        self, playlist_id: UUID, viewer_id: UUID | None = None
    ) -> PlaylistDetail | None:
        conn = self._get_conn()
        try:
            row = conn.execute(
                f"""
                SELECT p.*, {OWNER_COLUMNS}
                FROM playlists p
                LEFT JOIN users u ON u.id = p.owner_id
                WHERE p.id = ?
                """,
                (str(playlist_id),),
            ).fetchone()
            if not row:
                return None
            video_rows = conn.execute(
                f"""
                SELECT v.*, {OWNER_COLUMNS}
                FROM playlist_videos pv
                JOIN videos v ON v.id = pv.video_id
                LEFT JOIN users u ON u.id = v.owner_id
                WHERE pv.playlist_id = ?
                    AND (v.is_published = 1 OR v.owner_id = ?)
                ORDER BY pv.position ASC
                """,
                (str(playlist_id), str(viewer_id) if viewer_id else None),
            ).fetchall()
        finally:
            conn.close()

        videos = [video_card_from_row(r) for r in video_rows]
        return PlaylistDetail.model_validate(
            {
                **row,
                "owner": owner_from_row(row),
                "videos": videos,
                "total_videos": len(videos),
            }
        )

    def list_by_owner(self, owner_id: UUID) -> list[PlaylistSummary]:
        rows = self._fetch_all(
            self._SUMMARY_SQL + " WHERE p.owner_id = ? ORDER BY p.created_at DESC, p.rowid DESC",
            (str(owner_id),),
        )
        return [PlaylistSummary.model_validate(r) for r in rows]

    def delete(self, playlist_id: UUID) -> None:
        self._execute("DELETE FROM playlists WHERE id = ?", (str(playlist_id),))


class SQLiteSubscriptionRepo(SQLiteRepo):
    def get(self, subscriber_id: UUID, channel_id: UUID) -> Subscription | None:
        row = self._fetch_one(
            "SELECT * FROM subscriptions WHERE subscriber_id = ? AND channel_id = ?",
            (str(subscriber_id), str(channel_id)),
        )
        return Subscription.model_validate(row) if row else None

    def save(self, subscription: Subscription) -> Subscription:
        self._execute(
            """
            INSERT INTO subscriptions (id, subscriber_id, channel_id, created_at)
            VALUES (?, ?, ?, ?)
            """,
            (
                str(subscription.id),
                str(subscription.subscriber_id),
                str(subscription.channel_id),
                to_db_time(subscription.created_at),
            ),
        )
        return subscription

    def delete(self, subscription_id: UUID) -> None:
        self._execute("DELETE FROM subscriptions WHERE id = ?", (str(subscription_id),))

    def _cards(self, join_column: str, filter_column: str, user_id: UUID) -> list[ChannelCard]:
        rows = self._fetch_all(
            f"""
            SELECT
                u.id, u.user_name, u.full_name, u.avatar,
                (SELECT COUNT(*) FROM subscriptions s2 WHERE s2.channel_id = u.id)
                    AS subscribers_count
            FROM subscriptions s
            JOIN users u ON u.id = s.{join_column}
            WHERE s.{filter_column} = ?
            ORDER BY s.created_at DESC, s.rowid DESC
            """,
            (str(user_id),),
        )
        return [ChannelCard.model_validate(r) for r in rows]

    def list_subscribers(self, channel_id: UUID) -> list[ChannelCard]:
        return self._cards("subscriber_id", "channel_id", channel_id)

    def list_subscribed_channels(self, subscriber_id: UUID) -> list[ChannelCard]:
        return self._cards("channel_id", "subscriber_id", subscriber_id)
