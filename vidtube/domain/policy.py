from typing import Any
from uuid import UUID

from vidtube.domain.entities import User, Video


def owner_of(resource: Any) -> UUID | None:
    return getattr(resource, "owner_id", None)


def is_owner(user: User | None, resource: Any) -> bool:
    """True when the resource carries an owner_id equal to the user's id."""
    if user is None or resource is None:
        return False
    return owner_of(resource) == user.id


def can_view_video(user: User | None, video: Video) -> bool:
    """Published videos are visible to everyone, drafts only to their owner."""
    if video.is_published:
        return True
    return is_owner(user, video)
