"""
Tweets component.
"""

from __future__ import annotations

from vidtube.domain.entities import Tweet, User
from vidtube.domain.policy import is_owner
from vidtube.domain.validation import is_blank, parse_id

from .models import (
    CreateTweetInput,
    DeleteTweetInput,
    TweetListOutput,
    TweetOutput,
    UpdateTweetInput,
    UserTweetsInput,
)
from .ports import TimePort, TweetRepoPort


def _load_owned(raw_id: str, user: User, repo: TweetRepoPort, action: str) -> Tweet | TweetOutput:
    tweet_id = parse_id(raw_id)
    if tweet_id is None:
        return TweetOutput(error="Invalid tweet id", error_code="invalid")

    tweet = repo.get_by_id(tweet_id)
    if not tweet:
        return TweetOutput(error="Tweet not found", error_code="not_found")

    if not is_owner(user, tweet):
        return TweetOutput(
            error=f"You are not allowed to {action} this tweet", error_code="forbidden"
        )
    return tweet


def run_list_all(repo: TweetRepoPort) -> TweetListOutput:
    return TweetListOutput(tweets=repo.list_all(), success=True)


def run_create(inp: CreateTweetInput, repo: TweetRepoPort, time: TimePort) -> TweetOutput:
    if is_blank(inp.content):
        return TweetOutput(error="Content is required", error_code="invalid")

    now = time.now_utc()
    tweet = Tweet(
        owner_id=inp.user.id,
        content=str(inp.content).strip(),
        created_at=now,
        updated_at=now,
    )
    repo.save(tweet)
    return TweetOutput(tweet=tweet, success=True)


def run_user_tweets(inp: UserTweetsInput, repo: TweetRepoPort) -> TweetListOutput:
    user_id = parse_id(inp.user_id)
    if user_id is None:
        return TweetListOutput(error="Invalid user id", error_code="invalid")
    return TweetListOutput(tweets=repo.list_by_owner(user_id), success=True)


def run_update(inp: UpdateTweetInput, repo: TweetRepoPort, time: TimePort) -> TweetOutput:
    if is_blank(inp.content):
        return TweetOutput(error="Content is required", error_code="invalid")

    tweet = _load_owned(inp.tweet_id, inp.user, repo, "edit")
    if isinstance(tweet, TweetOutput):
        return tweet

    tweet.content = str(inp.content).strip()
    tweet.updated_at = time.now_utc()
    repo.save(tweet)
    return TweetOutput(tweet=tweet, success=True)


def run_delete(inp: DeleteTweetInput, repo: TweetRepoPort) -> TweetOutput:
    tweet = _load_owned(inp.tweet_id, inp.user, repo, "delete")
    if isinstance(tweet, TweetOutput):
        return tweet

    repo.delete(tweet.id)
    return TweetOutput(tweet=tweet, success=True)
