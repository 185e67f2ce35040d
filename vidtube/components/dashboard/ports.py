from typing import Protocol
from uuid import UUID

from vidtube.domain.views import ChannelStats, ChannelVideo


class ChannelStatsPort(Protocol):
    def get_channel_stats(self, user_id: UUID) -> ChannelStats | None:
        """Profile fields plus subscriber, video, view, like, tweet and playlist totals."""
        ...


class ChannelVideosPort(Protocol):
    def list_channel_videos(self, owner_id: UUID) -> list[ChannelVideo]:
        """Every video the owner has, published or not, newest first."""
        ...
