from typing import Any

from fastapi import APIRouter, Depends

from vidtube.api.deps import get_clock, get_current_user, get_subscription_repo, get_user_repo
from vidtube.api.errors import raise_for_result
from vidtube.api.schemas import ApiResponse, ChannelCardResponse, SubscriptionStatusResponse
from vidtube.components.subscriptions import (
    ChannelSubscribersInput,
    SubscribedChannelsInput,
    SubscriptionStatusInput,
    ToggleSubscriptionInput,
    run_channel_subscribers,
    run_status,
    run_subscribed_channels,
    run_toggle,
)
from vidtube.domain.entities import User

router = APIRouter()


@router.post("/c/{channel_id}")
def toggle_subscription(
    channel_id: str,
    current_user: User = Depends(get_current_user),
    subscription_repo: Any = Depends(get_subscription_repo),
    user_repo: Any = Depends(get_user_repo),
    clock: Any = Depends(get_clock),
) -> ApiResponse[SubscriptionStatusResponse]:
    result = run_toggle(
        ToggleSubscriptionInput(user=current_user, channel_id=channel_id),
        repo=subscription_repo,
        users=user_repo,
        time=clock,
    )
    raise_for_result(result)
    return ApiResponse[SubscriptionStatusResponse](
        data=SubscriptionStatusResponse(is_subscribed=result.is_subscribed),
        message="Subscribed successfully" if result.is_subscribed else "Unsubscribed successfully",
    )


@router.get("/c/{channel_id}")
def channel_subscribers(
    channel_id: str,
    current_user: User = Depends(get_current_user),
    subscription_repo: Any = Depends(get_subscription_repo),
) -> ApiResponse[list[ChannelCardResponse]]:
    result = run_channel_subscribers(
        ChannelSubscribersInput(channel_id=channel_id), repo=subscription_repo
    )
    raise_for_result(result)
    return ApiResponse[list[ChannelCardResponse]](
        data=result.channels, message="Subscribers fetched successfully"
    )


@router.get("/u/{subscriber_id}")
def subscribed_channels(
    subscriber_id: str,
    current_user: User = Depends(get_current_user),
    subscription_repo: Any = Depends(get_subscription_repo),
) -> ApiResponse[list[ChannelCardResponse]]:
    result = run_subscribed_channels(
        SubscribedChannelsInput(subscriber_id=subscriber_id), repo=subscription_repo
    )
    raise_for_result(result)
    return ApiResponse[list[ChannelCardResponse]](
        data=result.channels, message="Subscribed channels fetched successfully"
    )


@router.get("/status/{channel_id}")
def subscription_status(
    channel_id: str,
    current_user: User = Depends(get_current_user),
    subscription_repo: Any = Depends(get_subscription_repo),
) -> ApiResponse[SubscriptionStatusResponse]:
    result = run_status(
        SubscriptionStatusInput(user=current_user, channel_id=channel_id), repo=subscription_repo
    )
    raise_for_result(result)
    return ApiResponse[SubscriptionStatusResponse](
        data=SubscriptionStatusResponse(is_subscribed=result.is_subscribed),
        message="Subscription status fetched successfully",
    )
