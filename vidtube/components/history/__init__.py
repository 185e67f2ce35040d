"""
Watch history component - per-viewer history with expiry and re-watch de-duplication.
"""

from .component import (
    expiry_cutoff,
    run_clear_history,
    run_list_history,
    run_record_view,
    run_remove_from_history,
)
from .models import (
    DEFAULT_RETENTION_DAYS,
    ClearHistoryInput,
    HistoryChangeOutput,
    HistoryListOutput,
    ListHistoryInput,
    RecordViewInput,
    RecordViewOutput,
    RemoveFromHistoryInput,
)
from .ports import TimePort, WatchHistoryRepoPort

__all__ = [
    "run_record_view",
    "run_list_history",
    "run_clear_history",
    "run_remove_from_history",
    "expiry_cutoff",
    "DEFAULT_RETENTION_DAYS",
    "RecordViewInput",
    "ListHistoryInput",
    "ClearHistoryInput",
    "RemoveFromHistoryInput",
    "RecordViewOutput",
    "HistoryListOutput",
    "HistoryChangeOutput",
    "WatchHistoryRepoPort",
    "TimePort",
]
