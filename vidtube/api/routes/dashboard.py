from typing import Any

from fastapi import APIRouter, Depends

from vidtube.api.deps import get_current_user, get_user_repo, get_video_repo
from vidtube.api.errors import raise_for_result
from vidtube.api.schemas import ApiResponse, ChannelStatsResponse, ChannelVideoResponse
from vidtube.components.dashboard import (
    ChannelStatsInput,
    ChannelVideosInput,
    run_channel_videos,
    run_stats,
)
from vidtube.domain.entities import User

router = APIRouter()


@router.get("/stats")
def channel_stats(
    current_user: User = Depends(get_current_user),
    user_repo: Any = Depends(get_user_repo),
) -> ApiResponse[ChannelStatsResponse]:
    result = run_stats(ChannelStatsInput(user=current_user), repo=user_repo)
    raise_for_result(result)
    return ApiResponse[ChannelStatsResponse](
        data=result.stats, message="Channel stats fetched successfully"
    )


@router.get("/videos")
def channel_videos(
    current_user: User = Depends(get_current_user),
    video_repo: Any = Depends(get_video_repo),
) -> ApiResponse[list[ChannelVideoResponse]]:
    """Every video on the viewer's channel, drafts included."""
    result = run_channel_videos(ChannelVideosInput(user=current_user), repo=video_repo)
    raise_for_result(result)
    return ApiResponse[list[ChannelVideoResponse]](
        data=result.videos, message="Channel videos fetched successfully"
    )
