"""
Dashboard component - aggregated numbers for the signed-in user's channel.
"""

from __future__ import annotations

from .models import ChannelStatsInput, ChannelStatsOutput, ChannelVideosInput, ChannelVideosOutput
from .ports import ChannelStatsPort, ChannelVideosPort


def run_stats(inp: ChannelStatsInput, repo: ChannelStatsPort) -> ChannelStatsOutput:
    stats = repo.get_channel_stats(inp.user.id)
    if not stats:
        return ChannelStatsOutput(error="Channel not found", error_code="not_found")
    return ChannelStatsOutput(stats=stats, success=True)


def run_channel_videos(inp: ChannelVideosInput, repo: ChannelVideosPort) -> ChannelVideosOutput:
    return ChannelVideosOutput(videos=repo.list_channel_videos(inp.user.id), success=True)
