from typing import Any

from fastapi import APIRouter, Depends, status

from vidtube.api.deps import (
    get_clock,
    get_current_user,
    get_playlist_repo,
    get_user_repo,
    get_video_repo,
)
from vidtube.api.errors import raise_for_result
from vidtube.api.schemas import (
    ApiResponse,
    PlaylistCreateRequest,
    PlaylistDetailResponse,
    PlaylistResponse,
    PlaylistSummaryResponse,
    PlaylistUpdateRequest,
)
from vidtube.components.playlists import (
    ChannelPlaylistsInput,
    CreatePlaylistInput,
    DeletePlaylistInput,
    GetPlaylistInput,
    PlaylistVideoInput,
    UpdatePlaylistInput,
    UserPlaylistsInput,
    run_add_video,
    run_channel_playlists,
    run_create,
    run_delete,
    run_get,
    run_remove_video,
    run_update,
    run_user_playlists,
)
from vidtube.domain.entities import User

router = APIRouter()


@router.post("", status_code=status.HTTP_201_CREATED)
def create_playlist(
    body: PlaylistCreateRequest,
    current_user: User = Depends(get_current_user),
    playlist_repo: Any = Depends(get_playlist_repo),
    clock: Any = Depends(get_clock),
) -> ApiResponse[PlaylistResponse]:
    result = run_create(
        CreatePlaylistInput(user=current_user, name=body.name, description=body.description),
        repo=playlist_repo,
        time=clock,
    )
    raise_for_result(result)
    return ApiResponse[PlaylistResponse](
        status_code=201, data=result.playlist, message="Playlist created successfully"
    )


@router.get("/user/{user_id}")
def user_playlists(
    user_id: str,
    current_user: User = Depends(get_current_user),
    playlist_repo: Any = Depends(get_playlist_repo),
) -> ApiResponse[list[PlaylistSummaryResponse]]:
    result = run_user_playlists(UserPlaylistsInput(user_id=user_id), repo=playlist_repo)
    raise_for_result(result)
    return ApiResponse[list[PlaylistSummaryResponse]](
        data=result.playlists, message="User playlists fetched successfully"
    )


@router.get("/channel/{user_name}")
def channel_playlists(
    user_name: str,
    current_user: User = Depends(get_current_user),
    playlist_repo: Any = Depends(get_playlist_repo),
    user_repo: Any = Depends(get_user_repo),
) -> ApiResponse[list[PlaylistSummaryResponse]]:
    result = run_channel_playlists(
        ChannelPlaylistsInput(user_name=user_name), repo=playlist_repo, users=user_repo
    )
    raise_for_result(result)
    return ApiResponse[list[PlaylistSummaryResponse]](
        data=result.playlists, message="Channel playlists fetched successfully"
    )


@router.patch("/add/{video_id}/{playlist_id}")
def add_video(
    video_id: str,
    playlist_id: str,
    current_user: User = Depends(get_current_user),
    playlist_repo: Any = Depends(get_playlist_repo),
    video_repo: Any = Depends(get_video_repo),
    clock: Any = Depends(get_clock),
) -> ApiResponse[PlaylistResponse]:
    result = run_add_video(
        PlaylistVideoInput(user=current_user, playlist_id=playlist_id, video_id=video_id),
        repo=playlist_repo,
        videos=video_repo,
        time=clock,
    )
    raise_for_result(result)
    return ApiResponse[PlaylistResponse](
        data=result.playlist, message="Video added to playlist successfully"
    )


@router.patch("/remove/{video_id}/{playlist_id}")
def remove_video(
    video_id: str,
    playlist_id: str,
    current_user: User = Depends(get_current_user),
    playlist_repo: Any = Depends(get_playlist_repo),
    clock: Any = Depends(get_clock),
) -> ApiResponse[PlaylistResponse]:
    result = run_remove_video(
        PlaylistVideoInput(user=current_user, playlist_id=playlist_id, video_id=video_id),
        repo=playlist_repo,
        time=clock,
    )
    raise_for_result(result)
    return ApiResponse[PlaylistResponse](
        data=result.playlist, message="Video removed from playlist successfully"
    )


@router.get("/{playlist_id}")
def get_playlist(
    playlist_id: str,
    current_user: User = Depends(get_current_user),
    playlist_repo: Any = Depends(get_playlist_repo),
) -> ApiResponse[PlaylistDetailResponse]:
    result = run_get(
        GetPlaylistInput(playlist_id=playlist_id, viewer=current_user), repo=playlist_repo
    )
    raise_for_result(result)
    return ApiResponse[PlaylistDetailResponse](
        data=result.playlist, message="Playlist fetched successfully"
    )


@router.patch("/{playlist_id}")
def update_playlist(
    playlist_id: str,
    body: PlaylistUpdateRequest,
    current_user: User = Depends(get_current_user),
    playlist_repo: Any = Depends(get_playlist_repo),
    clock: Any = Depends(get_clock),
) -> ApiResponse[PlaylistResponse]:
    result = run_update(
        UpdatePlaylistInput(
            user=current_user,
            playlist_id=playlist_id,
            name=body.name,
            description=body.description,
        ),
        repo=playlist_repo,
        time=clock,
    )
    raise_for_result(result)
    return ApiResponse[PlaylistResponse](
        data=result.playlist, message="Playlist updated successfully"
    )


@router.delete("/{playlist_id}")
def delete_playlist(
    playlist_id: str,
    current_user: User = Depends(get_current_user),
    playlist_repo: Any = Depends(get_playlist_repo),
) -> ApiResponse[PlaylistResponse]:
    result = run_delete(
        DeletePlaylistInput(user=current_user, playlist_id=playlist_id), repo=playlist_repo
    )
    raise_for_result(result)
    return ApiResponse[PlaylistResponse](
        data=result.playlist, message="Playlist deleted successfully"
    )
