"""
Media component - validates uploads and stores them.

Invariants:
- Empty files are rejected before reaching the store
- Extension and declared MIME type must both be allowlisted for the media kind
- Storage failures surface as error_code "storage", never as exceptions
"""

from __future__ import annotations

import logging
from pathlib import PurePosixPath

from .models import MediaKind, MediaOutput, MediaValidationError, StoreMediaInput, UploadedFile
from .ports import MediaStorePort, UploadRulesPort

logger = logging.getLogger(__name__)


def validate_upload(
    file: UploadedFile, kind: MediaKind, rules: UploadRulesPort
) -> list[MediaValidationError]:
    """Check an uploaded file against the rules for its kind."""
    errors: list[MediaValidationError] = []

    if not file.data:
        errors.append(MediaValidationError(code="empty", message="Uploaded file is empty"))
        return errors

    max_bytes = rules.get_max_upload_bytes(kind)
    if len(file.data) > max_bytes:
        errors.append(
            MediaValidationError(
                code="too_large",
                message=f"File exceeds the {max_bytes} byte limit",
            )
        )

    ext = PurePosixPath(file.filename).suffix.lower()
    if ext not in rules.get_allowed_extensions(kind):
        errors.append(
            MediaValidationError(code="extension", message=f"File type '{ext}' is not allowed")
        )

    mime = file.content_type.split(";")[0].strip().lower()
    if mime not in rules.get_allowed_mime_types(kind):
        errors.append(
            MediaValidationError(code="mime_type", message=f"Content type '{mime}' is not allowed")
        )

    return errors


def run_store(
    inp: StoreMediaInput, store: MediaStorePort, rules: UploadRulesPort
) -> MediaOutput:
    errors = validate_upload(inp.file, inp.kind, rules)
    if errors:
        return MediaOutput(errors=errors, success=False, error_code="invalid")

    try:
        media = store.save(inp.file.data, inp.file.filename, inp.file.content_type, inp.folder)
    except OSError:
        logger.exception("Failed to store %s upload %s", inp.kind, inp.file.filename)
        return MediaOutput(
            errors=[MediaValidationError(code="storage", message="Failed to store upload")],
            success=False,
            error_code="storage",
        )

    return MediaOutput(media=media)


def discard(store: MediaStorePort, url: str | None) -> bool:
    """Best-effort removal of a replaced media object."""
    if not url:
        return False
    try:
        return store.delete(url)
    except (OSError, ValueError):
        logger.warning("Could not delete media %s", url, exc_info=True)
        return False
