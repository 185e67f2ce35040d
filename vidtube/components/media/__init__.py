"""
Media component - upload validation and storage.
"""

from .component import discard, run_store, validate_upload
from .models import (
    MediaKind,
    MediaOutput,
    MediaValidationError,
    StoreMediaInput,
    UploadedFile,
)
from .ports import MediaStorePort, UploadRulesPort

__all__ = [
    "run_store",
    "validate_upload",
    "discard",
    "MediaKind",
    "MediaOutput",
    "MediaValidationError",
    "StoreMediaInput",
    "UploadedFile",
    "MediaStorePort",
    "UploadRulesPort",
]
