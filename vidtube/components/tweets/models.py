from __future__ import annotations

from dataclasses import dataclass, field

from vidtube.domain.entities import ErrorCode, Tweet, User
from vidtube.domain.views import TweetView


@dataclass(frozen=True)
class CreateTweetInput:
    user: User
    content: str | None


@dataclass(frozen=True)
class UserTweetsInput:
    user_id: str


@dataclass(frozen=True)
class UpdateTweetInput:
    user: User
    tweet_id: str
    content: str | None


@dataclass(frozen=True)
class DeleteTweetInput:
    user: User
    tweet_id: str


@dataclass
class TweetListOutput:
    tweets: list[TweetView] = field(default_factory=list)
    success: bool = False
    error: str | None = None
    error_code: ErrorCode | None = None


@dataclass
class TweetOutput:
    tweet: Tweet | None = None
    success: bool = False
    error: str | None = None
    error_code: ErrorCode | None = None
