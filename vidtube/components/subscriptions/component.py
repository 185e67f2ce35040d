"""
Subscriptions component - users following channels.

Invariants:
- A (subscriber, channel) pair exists at most once
- Nobody subscribes to their own channel
"""

from __future__ import annotations

from uuid import UUID

from vidtube.domain.entities import Subscription
from vidtube.domain.validation import parse_id

from .models import (
    ChannelListOutput,
    ChannelSubscribersInput,
    SubscribedChannelsInput,
    SubscriptionStatusInput,
    SubscriptionStatusOutput,
    ToggleSubscriptionInput,
)
from .ports import SubscriptionRepoPort, TimePort, UserLookupPort


def _other_channel(raw_id: str, user_id: UUID) -> UUID | SubscriptionStatusOutput:
    channel_id = parse_id(raw_id)
    if channel_id is None:
        return SubscriptionStatusOutput(error="Invalid channel id", error_code="invalid")
    if channel_id == user_id:
        return SubscriptionStatusOutput(
            error="You cannot subscribe to your own channel", error_code="invalid"
        )
    return channel_id


def run_toggle(
    inp: ToggleSubscriptionInput,
    repo: SubscriptionRepoPort,
    users: UserLookupPort,
    time: TimePort,
) -> SubscriptionStatusOutput:
    channel_id = _other_channel(inp.channel_id, inp.user.id)
    if isinstance(channel_id, SubscriptionStatusOutput):
        return channel_id

    if not users.get_by_id(channel_id):
        return SubscriptionStatusOutput(error="Channel not found", error_code="not_found")

    existing = repo.get(inp.user.id, channel_id)
    if existing:
        repo.delete(existing.id)
        return SubscriptionStatusOutput(is_subscribed=False, success=True)

    repo.save(
        Subscription(
            subscriber_id=inp.user.id,
            channel_id=channel_id,
            created_at=time.now_utc(),
        )
    )
    return SubscriptionStatusOutput(is_subscribed=True, success=True)


def run_status(inp: SubscriptionStatusInput, repo: SubscriptionRepoPort) -> SubscriptionStatusOutput:
    channel_id = _other_channel(inp.channel_id, inp.user.id)
    if isinstance(channel_id, SubscriptionStatusOutput):
        return channel_id

    return SubscriptionStatusOutput(
        is_subscribed=repo.get(inp.user.id, channel_id) is not None, success=True
    )


def run_channel_subscribers(
    inp: ChannelSubscribersInput, repo: SubscriptionRepoPort
) -> ChannelListOutput:
    channel_id = parse_id(inp.channel_id)
    if channel_id is None:
        return ChannelListOutput(error="Invalid channel id", error_code="invalid")
    return ChannelListOutput(channels=repo.list_subscribers(channel_id), success=True)


def run_subscribed_channels(
    inp: SubscribedChannelsInput, repo: SubscriptionRepoPort
) -> ChannelListOutput:
    subscriber_id = parse_id(inp.subscriber_id)
    if subscriber_id is None:
        return ChannelListOutput(error="Invalid subscriber id", error_code="invalid")
    return ChannelListOutput(channels=repo.list_subscribed_channels(subscriber_id), success=True)
