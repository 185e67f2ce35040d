"""
Comments component - comments on videos.
"""

from .component import run_add, run_delete, run_list, run_update, viewer_first
from .models import (
    AddCommentInput,
    CommentListOutput,
    CommentOutput,
    DeleteCommentInput,
    ListCommentsInput,
    UpdateCommentInput,
)
from .ports import CommentRepoPort, TimePort, VideoLookupPort

__all__ = [
    "run_list",
    "run_add",
    "run_update",
    "run_delete",
    "viewer_first",
    "ListCommentsInput",
    "AddCommentInput",
    "UpdateCommentInput",
    "DeleteCommentInput",
    "CommentListOutput",
    "CommentOutput",
    "CommentRepoPort",
    "VideoLookupPort",
    "TimePort",
]
