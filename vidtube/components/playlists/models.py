from __future__ import annotations

from dataclasses import dataclass, field

from vidtube.domain.entities import ErrorCode, Playlist, User
from vidtube.domain.views import PlaylistDetail, PlaylistSummary


@dataclass(frozen=True)
class CreatePlaylistInput:
    user: User
    name: str | None
    description: str | None = None


@dataclass(frozen=True)
class GetPlaylistInput:
    playlist_id: str
    viewer: User | None = None


@dataclass(frozen=True)
class UpdatePlaylistInput:
    user: User
    playlist_id: str
    name: str | None = None
    description: str | None = None


@dataclass(frozen=True)
class DeletePlaylistInput:
    user: User
    playlist_id: str


@dataclass(frozen=True)
class PlaylistVideoInput:
    """Adds or removes a single video; used by both membership operations."""

    user: User
    playlist_id: str
    video_id: str


@dataclass(frozen=True)
class UserPlaylistsInput:
    user_id: str


@dataclass(frozen=True)
class ChannelPlaylistsInput:
    user_name: str


@dataclass
class PlaylistOutput:
    playlist: Playlist | None = None
    success: bool = False
    error: str | None = None
    error_code: ErrorCode | None = None


@dataclass
class PlaylistDetailOutput:
    playlist: PlaylistDetail | None = None
    success: bool = False
    error: str | None = None
    error_code: ErrorCode | None = None


@dataclass
class PlaylistListOutput:
    playlists: list[PlaylistSummary] = field(default_factory=list)
    success: bool = False
    error: str | None = None
    error_code: ErrorCode | None = None
