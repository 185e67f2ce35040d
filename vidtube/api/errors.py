"""
Translation of component failures into HTTP errors.

Components report expected failures as ``success=False`` with an
``error_code``; routes hand those results to ``raise_for_result``.
"""

import logging
from typing import Any

from fastapi import HTTPException, status

logger = logging.getLogger(__name__)

ERROR_STATUS: dict[str, int] = {
    "invalid": status.HTTP_400_BAD_REQUEST,
    "unauthorized": status.HTTP_401_UNAUTHORIZED,
    "forbidden": status.HTTP_403_FORBIDDEN,
    "not_found": status.HTTP_404_NOT_FOUND,
    "conflict": status.HTTP_409_CONFLICT,
    "storage": status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def raise_for_result(result: Any) -> None:
    """Raise HTTPException for an unsuccessful component output; no-op otherwise."""
    if result.success:
        return

    code = result.error_code or "invalid"
    status_code = ERROR_STATUS.get(code, status.HTTP_400_BAD_REQUEST)
    if status_code >= 500:
        logger.error("Component failure (%s): %s", code, result.error)
    raise HTTPException(status_code=status_code, detail=result.error or "Request failed")
