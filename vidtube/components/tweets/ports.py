from datetime import datetime
from typing import Protocol
from uuid import UUID

from vidtube.domain.entities import Tweet
from vidtube.domain.views import TweetView


class TweetRepoPort(Protocol):
    def save(self, tweet: Tweet) -> Tweet: ...
    def get_by_id(self, tweet_id: UUID) -> Tweet | None: ...
    def list_all(self) -> list[TweetView]: ...
    def list_by_owner(self, owner_id: UUID) -> list[TweetView]: ...
    def delete(self, tweet_id: UUID) -> None: ...


class TimePort(Protocol):
    def now_utc(self) -> datetime: ...
