"""
Videos component - listing, publishing, viewing and maintaining videos.
"""

from .component import (
    run_delete,
    run_get,
    run_list,
    run_publish,
    run_toggle_publish,
    run_update,
)
from .models import (
    DeleteVideoInput,
    GetVideoInput,
    ListingPolicy,
    ListVideosInput,
    PublishVideoInput,
    TogglePublishInput,
    UpdateVideoInput,
    VideoDetailOutput,
    VideoOutput,
    VideoPageOutput,
)
from .ports import TimePort, VideoRepoPort

__all__ = [
    "run_list",
    "run_publish",
    "run_get",
    "run_update",
    "run_delete",
    "run_toggle_publish",
    "ListingPolicy",
    "ListVideosInput",
    "PublishVideoInput",
    "GetVideoInput",
    "UpdateVideoInput",
    "DeleteVideoInput",
    "TogglePublishInput",
    "VideoPageOutput",
    "VideoOutput",
    "VideoDetailOutput",
    "VideoRepoPort",
    "TimePort",
]
