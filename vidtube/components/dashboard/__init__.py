"""
Dashboard component - channel statistics and the owner's video list.
"""

from .component import run_channel_videos, run_stats
from .models import ChannelStatsInput, ChannelStatsOutput, ChannelVideosInput, ChannelVideosOutput
from .ports import ChannelStatsPort, ChannelVideosPort

__all__ = [
    "run_stats",
    "run_channel_videos",
    "ChannelStatsInput",
    "ChannelVideosInput",
    "ChannelStatsOutput",
    "ChannelVideosOutput",
    "ChannelStatsPort",
    "ChannelVideosPort",
]
