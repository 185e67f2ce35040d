from typing import Any

from fastapi import APIRouter, Depends, status

from vidtube.api.deps import get_clock, get_comment_repo, get_current_user, get_video_repo
from vidtube.api.errors import raise_for_result
from vidtube.api.schemas import ApiResponse, CommentResponse, ContentRequest
from vidtube.components.comments import (
    AddCommentInput,
    DeleteCommentInput,
    ListCommentsInput,
    UpdateCommentInput,
    run_add,
    run_delete,
    run_list,
    run_update,
)
from vidtube.domain.entities import User

router = APIRouter()


@router.get("/{video_id}")
def list_comments(
    video_id: str,
    current_user: User = Depends(get_current_user),
    comment_repo: Any = Depends(get_comment_repo),
    video_repo: Any = Depends(get_video_repo),
) -> ApiResponse[list[CommentResponse]]:
    """Comments on a video, the viewer's own first."""
    result = run_list(
        ListCommentsInput(viewer=current_user, video_id=video_id),
        repo=comment_repo,
        videos=video_repo,
    )
    raise_for_result(result)
    return ApiResponse[list[CommentResponse]](
        data=result.comments, message="Comments fetched successfully"
    )


@router.post("/{video_id}", status_code=status.HTTP_201_CREATED)
def add_comment(
    video_id: str,
    body: ContentRequest,
    current_user: User = Depends(get_current_user),
    comment_repo: Any = Depends(get_comment_repo),
    video_repo: Any = Depends(get_video_repo),
    clock: Any = Depends(get_clock),
) -> ApiResponse[CommentResponse]:
    result = run_add(
        AddCommentInput(user=current_user, video_id=video_id, content=body.content),
        repo=comment_repo,
        videos=video_repo,
        time=clock,
    )
    raise_for_result(result)
    return ApiResponse[CommentResponse](
        status_code=201, data=result.comment, message="Comment added successfully"
    )


@router.patch("/c/{comment_id}")
def update_comment(
    comment_id: str,
    body: ContentRequest,
    current_user: User = Depends(get_current_user),
    comment_repo: Any = Depends(get_comment_repo),
    clock: Any = Depends(get_clock),
) -> ApiResponse[CommentResponse]:
    result = run_update(
        UpdateCommentInput(user=current_user, comment_id=comment_id, content=body.content),
        repo=comment_repo,
        time=clock,
    )
    raise_for_result(result)
    return ApiResponse[CommentResponse](data=result.comment, message="Comment updated successfully")


@router.delete("/c/{comment_id}")
def delete_comment(
    comment_id: str,
    current_user: User = Depends(get_current_user),
    comment_repo: Any = Depends(get_comment_repo),
) -> ApiResponse[CommentResponse]:
    result = run_delete(
        DeleteCommentInput(user=current_user, comment_id=comment_id), repo=comment_repo
    )
    raise_for_result(result)
    return ApiResponse[CommentResponse](data=result.comment, message="Comment deleted successfully")
