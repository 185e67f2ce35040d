"""
Likes component - toggling and counting likes on videos, comments and tweets.
"""

from .component import TARGET_LABELS, run_info, run_liked_videos, run_toggle
from .models import (
    LikedVideosInput,
    LikedVideosOutput,
    LikeInfoInput,
    LikeInfoOutput,
    ToggleLikeInput,
    ToggleLikeOutput,
)
from .ports import LikeRepoPort, TargetLookupPort, TimePort

__all__ = [
    "run_toggle",
    "run_info",
    "run_liked_videos",
    "TARGET_LABELS",
    "ToggleLikeInput",
    "LikeInfoInput",
    "LikedVideosInput",
    "ToggleLikeOutput",
    "LikeInfoOutput",
    "LikedVideosOutput",
    "LikeRepoPort",
    "TargetLookupPort",
    "TimePort",
]
