"""
Video routes: listing, publishing, watching and maintaining videos.
"""

from typing import Any

from fastapi import APIRouter, Depends, File, Form, Query, UploadFile, status

from vidtube.api.deps import (
    get_clock,
    get_current_user,
    get_history_repo,
    get_listing_policy,
    get_media_store,
    get_upload_rules,
    get_video_repo,
    read_upload,
)
from vidtube.api.errors import raise_for_result
from vidtube.api.schemas import (
    ApiResponse,
    TogglePublishRequest,
    VideoDetailResponse,
    VideoPageResponse,
    VideoResponse,
)
from vidtube.components.videos import (
    DeleteVideoInput,
    GetVideoInput,
    ListingPolicy,
    ListVideosInput,
    PublishVideoInput,
    TogglePublishInput,
    UpdateVideoInput,
    run_delete,
    run_get,
    run_list,
    run_publish,
    run_toggle_publish,
    run_update,
)
from vidtube.domain.entities import User

router = APIRouter()


@router.get("")
def list_videos(
    page: int = Query(1),
    limit: int | None = Query(None),
    query: str | None = Query(None),
    sort_by: str | None = Query(None, alias="sortBy"),
    sort_type: str | None = Query(None, alias="sortType"),
    user_id: str | None = Query(None, alias="userId"),
    current_user: User = Depends(get_current_user),
    video_repo: Any = Depends(get_video_repo),
    policy: ListingPolicy = Depends(get_listing_policy),
) -> ApiResponse[VideoPageResponse]:
    """Published videos, optionally filtered by title substring and owner."""
    result = run_list(
        ListVideosInput(
            page=page,
            limit=limit,
            query=query,
            sort_by=sort_by,
            sort_type=sort_type,
            user_id=user_id,
        ),
        repo=video_repo,
        policy=policy,
    )
    raise_for_result(result)
    return ApiResponse[VideoPageResponse](
        data=VideoPageResponse(
            count=result.count, page=result.page, limit=result.limit, videos=result.videos
        ),
        message="Videos fetched successfully",
    )


@router.post("", status_code=status.HTTP_201_CREATED)
def publish_video(
    title: str | None = Form(None),
    description: str = Form(""),
    is_published: bool = Form(False, alias="isPublished"),
    duration: float = Form(0.0),
    thumbnail: UploadFile | None = File(None),
    video_file: UploadFile | None = File(None, alias="videoFile"),
    current_user: User = Depends(get_current_user),
    video_repo: Any = Depends(get_video_repo),
    media_store: Any = Depends(get_media_store),
    upload_rules: Any = Depends(get_upload_rules),
    clock: Any = Depends(get_clock),
) -> ApiResponse[VideoResponse]:
    result = run_publish(
        PublishVideoInput(
            owner=current_user,
            title=title,
            description=description,
            is_published=is_published,
            duration=duration,
            video_file=read_upload(video_file),
            thumbnail=read_upload(thumbnail),
        ),
        repo=video_repo,
        media_store=media_store,
        upload_rules=upload_rules,
        time=clock,
    )
    raise_for_result(result)
    return ApiResponse[VideoResponse](
        status_code=201, data=result.video, message="Video uploaded successfully"
    )


@router.get("/{video_id}")
def get_video(
    video_id: str,
    current_user: User = Depends(get_current_user),
    video_repo: Any = Depends(get_video_repo),
    history_repo: Any = Depends(get_history_repo),
    clock: Any = Depends(get_clock),
) -> ApiResponse[VideoDetailResponse]:
    """Fetch a video. Counts a view and records it in the viewer's history."""
    result = run_get(
        GetVideoInput(viewer=current_user, video_id=video_id),
        repo=video_repo,
        history_repo=history_repo,
        time=clock,
    )
    raise_for_result(result)
    return ApiResponse[VideoDetailResponse](data=result.video, message="Video fetched successfully")


@router.patch("/{video_id}")
def update_video(
    video_id: str,
    title: str | None = Form(None),
    description: str | None = Form(None),
    is_published: bool | None = Form(None, alias="isPublished"),
    thumbnail: UploadFile | None = File(None),
    current_user: User = Depends(get_current_user),
    video_repo: Any = Depends(get_video_repo),
    media_store: Any = Depends(get_media_store),
    upload_rules: Any = Depends(get_upload_rules),
    clock: Any = Depends(get_clock),
) -> ApiResponse[VideoResponse]:
    result = run_update(
        UpdateVideoInput(
            user=current_user,
            video_id=video_id,
            title=title,
            description=description,
            is_published=is_published,
            thumbnail=read_upload(thumbnail),
        ),
        repo=video_repo,
        media_store=media_store,
        upload_rules=upload_rules,
        time=clock,
    )
    raise_for_result(result)
    return ApiResponse[VideoResponse](data=result.video, message="Video updated successfully")


@router.delete("/{video_id}")
def delete_video(
    video_id: str,
    current_user: User = Depends(get_current_user),
    video_repo: Any = Depends(get_video_repo),
    media_store: Any = Depends(get_media_store),
) -> ApiResponse[VideoResponse]:
    result = run_delete(
        DeleteVideoInput(user=current_user, video_id=video_id),
        repo=video_repo,
        media_store=media_store,
    )
    raise_for_result(result)
    return ApiResponse[VideoResponse](data=result.video, message="Video deleted successfully")


@router.patch("/toggle/publish/{video_id}")
def toggle_publish(
    video_id: str,
    body: TogglePublishRequest | None = None,
    current_user: User = Depends(get_current_user),
    video_repo: Any = Depends(get_video_repo),
    clock: Any = Depends(get_clock),
) -> ApiResponse[VideoResponse]:
    """Set ``isPublished`` explicitly, or flip it when the body is empty."""
    result = run_toggle_publish(
        TogglePublishInput(
            user=current_user,
            video_id=video_id,
            is_published=body.is_published if body else None,
        ),
        repo=video_repo,
        time=clock,
    )
    raise_for_result(result)
    return ApiResponse[VideoResponse](
        data=result.video, message="Video publish status toggled successfully"
    )
