from typing import Any

from fastapi import APIRouter, Depends, status

from vidtube.api.deps import get_clock, get_current_user, get_tweet_repo
from vidtube.api.errors import raise_for_result
from vidtube.api.schemas import ApiResponse, ContentRequest, TweetResponse, TweetViewResponse
from vidtube.components.tweets import (
    CreateTweetInput,
    DeleteTweetInput,
    UpdateTweetInput,
    UserTweetsInput,
    run_create,
    run_delete,
    run_list_all,
    run_update,
    run_user_tweets,
)
from vidtube.domain.entities import User

router = APIRouter()


@router.get("")
def list_tweets(
    current_user: User = Depends(get_current_user),
    tweet_repo: Any = Depends(get_tweet_repo),
) -> ApiResponse[list[TweetViewResponse]]:
    result = run_list_all(tweet_repo)
    raise_for_result(result)
    return ApiResponse[list[TweetViewResponse]](
        data=result.tweets, message="Tweets fetched successfully"
    )


@router.post("", status_code=status.HTTP_201_CREATED)
def create_tweet(
    body: ContentRequest,
    current_user: User = Depends(get_current_user),
    tweet_repo: Any = Depends(get_tweet_repo),
    clock: Any = Depends(get_clock),
) -> ApiResponse[TweetResponse]:
    result = run_create(
        CreateTweetInput(user=current_user, content=body.content), repo=tweet_repo, time=clock
    )
    raise_for_result(result)
    return ApiResponse[TweetResponse](
        status_code=201, data=result.tweet, message="Tweet created successfully"
    )


@router.get("/u/{user_id}")
def user_tweets(
    user_id: str,
    current_user: User = Depends(get_current_user),
    tweet_repo: Any = Depends(get_tweet_repo),
) -> ApiResponse[list[TweetViewResponse]]:
    result = run_user_tweets(UserTweetsInput(user_id=user_id), repo=tweet_repo)
    raise_for_result(result)
    return ApiResponse[list[TweetViewResponse]](
        data=result.tweets, message="User tweets fetched successfully"
    )


@router.patch("/{tweet_id}")
def update_tweet(
    tweet_id: str,
    body: ContentRequest,
    current_user: User = Depends(get_current_user),
    tweet_repo: Any = Depends(get_tweet_repo),
    clock: Any = Depends(get_clock),
) -> ApiResponse[TweetResponse]:
    result = run_update(
        UpdateTweetInput(user=current_user, tweet_id=tweet_id, content=body.content),
        repo=tweet_repo,
        time=clock,
    )
    raise_for_result(result)
    return ApiResponse[TweetResponse](data=result.tweet, message="Tweet updated successfully")


@router.delete("/{tweet_id}")
def delete_tweet(
    tweet_id: str,
    current_user: User = Depends(get_current_user),
    tweet_repo: Any = Depends(get_tweet_repo),
) -> ApiResponse[TweetResponse]:
    result = run_delete(DeleteTweetInput(user=current_user, tweet_id=tweet_id), repo=tweet_repo)
    raise_for_result(result)
    return ApiResponse[TweetResponse](data=result.tweet, message="Tweet deleted successfully")
