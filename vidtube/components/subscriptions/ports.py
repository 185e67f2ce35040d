from datetime import datetime
from typing import Protocol
from uuid import UUID

from vidtube.domain.entities import Subscription, User
from vidtube.domain.views import ChannelCard


class SubscriptionRepoPort(Protocol):
    def get(self, subscriber_id: UUID, channel_id: UUID) -> Subscription | None: ...
    def save(self, subscription: Subscription) -> Subscription: ...
    def delete(self, subscription_id: UUID) -> None: ...
    def list_subscribers(self, channel_id: UUID) -> list[ChannelCard]: ...
    def list_subscribed_channels(self, subscriber_id: UUID) -> list[ChannelCard]: ...


class UserLookupPort(Protocol):
    def get_by_id(self, user_id: UUID) -> User | None: ...


class TimePort(Protocol):
    def now_utc(self) -> datetime: ...
