"""
Playlists component - ordered, user-owned collections of videos.

Invariants:
- A playlist holds each video at most once, in insertion order
- Only the owner may rename, delete or change the videos of a playlist
"""

from __future__ import annotations

from vidtube.domain.entities import Playlist, User
from vidtube.domain.policy import can_view_video, is_owner
from vidtube.domain.validation import is_blank, normalize_user_name, parse_id

from .models import (
    ChannelPlaylistsInput,
    CreatePlaylistInput,
    DeletePlaylistInput,
    GetPlaylistInput,
    PlaylistDetailOutput,
    PlaylistListOutput,
    PlaylistOutput,
    PlaylistVideoInput,
    UpdatePlaylistInput,
    UserPlaylistsInput,
)
from .ports import PlaylistRepoPort, TimePort, UserLookupPort, VideoLookupPort


def _load_owned(
    raw_id: str, user: User, repo: PlaylistRepoPort, action: str
) -> Playlist | PlaylistOutput:
    playlist_id = parse_id(raw_id)
    if playlist_id is None:
        return PlaylistOutput(error="Invalid playlist id", error_code="invalid")

    playlist = repo.get_by_id(playlist_id)
    if not playlist:
        return PlaylistOutput(error="Playlist not found", error_code="not_found")

    if not is_owner(user, playlist):
        return PlaylistOutput(
            error=f"You are not allowed to {action} this playlist", error_code="forbidden"
        )
    return playlist


def run_create(inp: CreatePlaylistInput, repo: PlaylistRepoPort, time: TimePort) -> PlaylistOutput:
    if is_blank(inp.name):
        return PlaylistOutput(error="Playlist name is required", error_code="invalid")

    now = time.now_utc()
    playlist = Playlist(
        owner_id=inp.user.id,
        name=str(inp.name).strip(),
        description=(inp.description or "").strip(),
        created_at=now,
        updated_at=now,
    )
    repo.save(playlist)
    return PlaylistOutput(playlist=playlist, success=True)


def run_get(inp: GetPlaylistInput, repo: PlaylistRepoPort) -> PlaylistDetailOutput:
    playlist_id = parse_id(inp.playlist_id)
    if playlist_id is None:
        return PlaylistDetailOutput(error="Invalid playlist id", error_code="invalid")

    detail = repo.get_detail(playlist_id, inp.viewer.id if inp.viewer else None)
    if not detail:
        return PlaylistDetailOutput(error="Playlist not found", error_code="not_found")
    return PlaylistDetailOutput(playlist=detail, success=True)


def run_update(inp: UpdatePlaylistInput, repo: PlaylistRepoPort, time: TimePort) -> PlaylistOutput:
    playlist = _load_owned(inp.playlist_id, inp.user, repo, "update")
    if isinstance(playlist, PlaylistOutput):
        return playlist

    if not is_blank(inp.name):
        playlist.name = str(inp.name).strip()
    if inp.description is not None:
        playlist.description = inp.description.strip()
    playlist.updated_at = time.now_utc()
    repo.save(playlist)
    return PlaylistOutput(playlist=playlist, success=True)


def run_delete(inp: DeletePlaylistInput, repo: PlaylistRepoPort) -> PlaylistOutput:
    playlist = _load_owned(inp.playlist_id, inp.user, repo, "delete")
    if isinstance(playlist, PlaylistOutput):
        return playlist

    repo.delete(playlist.id)
    return PlaylistOutput(playlist=playlist, success=True)


def run_add_video(
    inp: PlaylistVideoInput,
    repo: PlaylistRepoPort,
    videos: VideoLookupPort,
    time: TimePort,
) -> PlaylistOutput:
    video_id = parse_id(inp.video_id)
    if video_id is None:
        return PlaylistOutput(error="Invalid video id", error_code="invalid")

    playlist = _load_owned(inp.playlist_id, inp.user, repo, "modify")
    if isinstance(playlist, PlaylistOutput):
        return playlist

    video = videos.get_by_id(video_id)
    if not video:
        return PlaylistOutput(error="Video not found", error_code="not_found")
    if not can_view_video(inp.user, video):
        return PlaylistOutput(error="Video is not published", error_code="forbidden")

    if video_id not in playlist.video_ids:
        playlist.video_ids.append(video_id)
        playlist.updated_at = time.now_utc()
        repo.save(playlist)
    return PlaylistOutput(playlist=playlist, success=True)


def run_remove_video(
    inp: PlaylistVideoInput, repo: PlaylistRepoPort, time: TimePort
) -> PlaylistOutput:
    video_id = parse_id(inp.video_id)
    if video_id is None:
        return PlaylistOutput(error="Invalid video id", error_code="invalid")

    playlist = _load_owned(inp.playlist_id, inp.user, repo, "modify")
    if isinstance(playlist, PlaylistOutput):
        return playlist

    if video_id in playlist.video_ids:
        playlist.video_ids = [v for v in playlist.video_ids if v != video_id]
        playlist.updated_at = time.now_utc()
        repo.save(playlist)
    return PlaylistOutput(playlist=playlist, success=True)


def run_user_playlists(inp: UserPlaylistsInput, repo: PlaylistRepoPort) -> PlaylistListOutput:
    user_id = parse_id(inp.user_id)
    if user_id is None:
        return PlaylistListOutput(error="Invalid user id", error_code="invalid")
    return PlaylistListOutput(playlists=repo.list_by_owner(user_id), success=True)


def run_channel_playlists(
    inp: ChannelPlaylistsInput, repo: PlaylistRepoPort, users: UserLookupPort
) -> PlaylistListOutput:
    if is_blank(inp.user_name):
        return PlaylistListOutput(error="User name is required", error_code="invalid")

    user = users.get_by_user_name(normalize_user_name(inp.user_name))
    if not user:
        return PlaylistListOutput(error="Channel does not exist", error_code="not_found")
    return PlaylistListOutput(playlists=repo.list_by_owner(user.id), success=True)
