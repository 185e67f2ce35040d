"""
Tweets component - short text posts on a channel.
"""

from .component import run_create, run_delete, run_list_all, run_update, run_user_tweets
from .models import (
    CreateTweetInput,
    DeleteTweetInput,
    TweetListOutput,
    TweetOutput,
    UpdateTweetInput,
    UserTweetsInput,
)
from .ports import TimePort, TweetRepoPort

__all__ = [
    "run_list_all",
    "run_create",
    "run_user_tweets",
    "run_update",
    "run_delete",
    "CreateTweetInput",
    "UserTweetsInput",
    "UpdateTweetInput",
    "DeleteTweetInput",
    "TweetListOutput",
    "TweetOutput",
    "TweetRepoPort",
    "TimePort",
]
