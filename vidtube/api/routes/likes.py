from typing import Any, Literal

from fastapi import APIRouter, Depends

from vidtube.api.deps import (
    get_clock,
    get_comment_repo,
    get_current_user,
    get_like_repo,
    get_tweet_repo,
    get_video_repo,
)
from vidtube.api.errors import raise_for_result
from vidtube.api.schemas import (
    ApiResponse,
    LikeInfoResponse,
    LikeToggleResponse,
    VideoSummaryResponse,
)
from vidtube.components.likes import (
    TARGET_LABELS,
    LikedVideosInput,
    LikeInfoInput,
    ToggleLikeInput,
    run_info,
    run_liked_videos,
    run_toggle,
)
from vidtube.domain.entities import LikeTarget, User

router = APIRouter()

TargetPath = Literal["v", "c", "t"]
TARGET_TYPES: dict[str, LikeTarget] = {"v": "video", "c": "comment", "t": "tweet"}


def get_like_targets(
    video_repo: Any = Depends(get_video_repo),
    comment_repo: Any = Depends(get_comment_repo),
    tweet_repo: Any = Depends(get_tweet_repo),
) -> dict[LikeTarget, Any]:
    return {"video": video_repo, "comment": comment_repo, "tweet": tweet_repo}


@router.post("/toggle/{kind}/{target_id}")
def toggle_like(
    kind: TargetPath,
    target_id: str,
    current_user: User = Depends(get_current_user),
    like_repo: Any = Depends(get_like_repo),
    targets: dict[LikeTarget, Any] = Depends(get_like_targets),
    clock: Any = Depends(get_clock),
) -> ApiResponse[LikeToggleResponse]:
    target_type = TARGET_TYPES[kind]
    result = run_toggle(
        ToggleLikeInput(user=current_user, target_type=target_type, target_id=target_id),
        repo=like_repo,
        targets=targets,
        time=clock,
    )
    raise_for_result(result)
    label = TARGET_LABELS[target_type]
    return ApiResponse[LikeToggleResponse](
        data=LikeToggleResponse(is_liked=result.is_liked),
        message=f"{label} liked successfully" if result.is_liked else f"{label} unliked successfully",
    )


@router.get("/videos")
def liked_videos(
    current_user: User = Depends(get_current_user),
    like_repo: Any = Depends(get_like_repo),
) -> ApiResponse[list[VideoSummaryResponse]]:
    result = run_liked_videos(LikedVideosInput(user=current_user), repo=like_repo)
    raise_for_result(result)
    return ApiResponse[list[VideoSummaryResponse]](
        data=result.videos, message="Liked videos fetched successfully"
    )


@router.get("/{kind}/{target_id}")
def like_info(
    kind: TargetPath,
    target_id: str,
    current_user: User = Depends(get_current_user),
    like_repo: Any = Depends(get_like_repo),
    targets: dict[LikeTarget, Any] = Depends(get_like_targets),
) -> ApiResponse[LikeInfoResponse]:
    result = run_info(
        LikeInfoInput(viewer=current_user, target_type=TARGET_TYPES[kind], target_id=target_id),
        repo=like_repo,
        targets=targets,
    )
    raise_for_result(result)
    return ApiResponse[LikeInfoResponse](data=result.info, message="Like info fetched successfully")
