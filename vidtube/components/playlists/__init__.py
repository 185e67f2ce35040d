"""
Playlists component - ordered, user-owned collections of videos.
"""

from .component import (
    run_add_video,
    run_channel_playlists,
    run_create,
    run_delete,
    run_get,
    run_remove_video,
    run_update,
    run_user_playlists,
)
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

__all__ = [
    "run_create",
    "run_get",
    "run_update",
    "run_delete",
    "run_add_video",
    "run_remove_video",
    "run_user_playlists",
    "run_channel_playlists",
    "CreatePlaylistInput",
    "GetPlaylistInput",
    "UpdatePlaylistInput",
    "DeletePlaylistInput",
    "PlaylistVideoInput",
    "UserPlaylistsInput",
    "ChannelPlaylistsInput",
    "PlaylistOutput",
    "PlaylistDetailOutput",
    "PlaylistListOutput",
    "PlaylistRepoPort",
    "VideoLookupPort",
    "UserLookupPort",
    "TimePort",
]
