"""
Public media route: serves objects from the media store.
"""

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import Response

from vidtube.adapters.media.filestore import FileSystemMediaStore
from vidtube.api.deps import get_media_store

router = APIRouter()


@router.get("/{key:path}")
def get_media(key: str, store: FileSystemMediaStore = Depends(get_media_store)) -> Response:
    try:
        data = store.get(key)
    except (FileNotFoundError, ValueError) as e:
        raise HTTPException(status_code=404, detail="Media not found") from e

    return Response(
        content=data,
        media_type=store.content_type_for(key),
        headers={"Cache-Control": "public, max-age=86400"},
    )
