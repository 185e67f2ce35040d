"""
Subscriptions component - users following channels.
"""

from .component import (
    run_channel_subscribers,
    run_status,
    run_subscribed_channels,
    run_toggle,
)
from .models import (
    ChannelListOutput,
    ChannelSubscribersInput,
    SubscribedChannelsInput,
    SubscriptionStatusInput,
    SubscriptionStatusOutput,
    ToggleSubscriptionInput,
)
from .ports import SubscriptionRepoPort, TimePort, UserLookupPort

__all__ = [
    "run_toggle",
    "run_status",
    "run_channel_subscribers",
    "run_subscribed_channels",
    "ToggleSubscriptionInput",
    "SubscriptionStatusInput",
    "ChannelSubscribersInput",
    "SubscribedChannelsInput",
    "SubscriptionStatusOutput",
    "ChannelListOutput",
    "SubscriptionRepoPort",
    "UserLookupPort",
    "TimePort",
]
