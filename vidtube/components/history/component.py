"""
Watch history component.

Maintains each viewer's personal watch history:
- Re-watching a video moves its single entry to the newest position
- Entries older than the retention window are expired whenever the history is read
- Listings are newest first and carry the joined video card
"""

from __future__ import annotations

import logging
from datetime import datetime, timedelta

from vidtube.domain.entities import WatchEntry
from vidtube.domain.validation import parse_id

from .models import (
    ClearHistoryInput,
    HistoryChangeOutput,
    HistoryListOutput,
    ListHistoryInput,
    RecordViewInput,
    RecordViewOutput,
    RemoveFromHistoryInput,
)
from .ports import TimePort, WatchHistoryRepoPort

logger = logging.getLogger(__name__)


def expiry_cutoff(now: datetime, retention_days: int) -> datetime:
    """Entries watched before this instant are expired."""
    return now - timedelta(days=retention_days)


def run_record_view(
    inp: RecordViewInput, repo: WatchHistoryRepoPort, time: TimePort
) -> RecordViewOutput:
    entry = WatchEntry(user_id=inp.user_id, video_id=inp.video_id, watched_at=time.now_utc())
    repo.record(entry)
    return RecordViewOutput(entry=entry, success=True)


def run_list_history(
    inp: ListHistoryInput, repo: WatchHistoryRepoPort, time: TimePort
) -> HistoryListOutput:
    cutoff = expiry_cutoff(time.now_utc(), inp.retention_days)
    expired = repo.prune_older_than(inp.user.id, cutoff)
    if expired:
        logger.debug("Expired %d history entries for user %s", expired, inp.user.id)

    items = repo.list_for_user(inp.user.id)
    return HistoryListOutput(items=items, expired=expired, success=True)


def run_clear_history(inp: ClearHistoryInput, repo: WatchHistoryRepoPort) -> HistoryChangeOutput:
    removed = repo.clear(inp.user.id)
    return HistoryChangeOutput(removed=removed, success=True)


def run_remove_from_history(
    inp: RemoveFromHistoryInput, repo: WatchHistoryRepoPort
) -> HistoryChangeOutput:
    video_id = parse_id(inp.video_id)
    if video_id is None:
        return HistoryChangeOutput(error="Invalid video id", error_code="invalid")

    removed = repo.remove(inp.user.id, video_id)
    return HistoryChangeOutput(removed=removed, success=True)
