from datetime import datetime
from typing import Protocol
from uuid import UUID

from vidtube.domain.entities import Playlist, User, Video
from vidtube.domain.views import PlaylistDetail, PlaylistSummary


class PlaylistRepoPort(Protocol):
    def save(self, playlist: Playlist) -> Playlist:
        """Upsert the playlist and replace its ordered video list."""
        ...

    def get_by_id(self, playlist_id: UUID) -> Playlist | None: ...

    def get_detail(self, playlist_id: UUID, viewer_id: UUID | None = None) -> PlaylistDetail | None:
        """Playlist with its videos, leaving out drafts the viewer does not own."""
        ...

    def list_by_owner(self, owner_id: UUID) -> list[PlaylistSummary]: ...

    def delete(self, playlist_id: UUID) -> None: ...


class VideoLookupPort(Protocol):
    def get_by_id(self, video_id: UUID) -> Video | None: ...


class UserLookupPort(Protocol):
    def get_by_user_name(self, user_name: str) -> User | None: ...


class TimePort(Protocol):
    def now_utc(self) -> datetime: ...
