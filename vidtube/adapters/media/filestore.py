import logging
import mimetypes
import os
import secrets
from pathlib import Path, PurePosixPath

from vidtube.domain.entities import StoredMedia

logger = logging.getLogger(__name__)


class FileSystemMediaStore:
    """
    Media store backed by a local directory.

    Objects are saved under a random key that keeps the original extension
    and are addressed publicly as ``<base_url>/<key>``.
    """

    def __init__(self, base_path: str, base_url: str = "/media"):
        self.base_path = Path(base_path).resolve()
        self.base_url = base_url.rstrip("/")
        if not self.base_path.exists():
            os.makedirs(self.base_path, exist_ok=True)

    def _safe_path(self, key: str) -> Path:
        target = (self.base_path / key).resolve()
        if not target.is_relative_to(self.base_path):
            raise ValueError(f"Path traversal attempt detected: {key}")
        return target

    def _new_key(self, filename: str, folder: str) -> str:
        suffix = PurePosixPath(filename).suffix.lower()
        return f"{folder}/{secrets.token_hex(16)}{suffix}"

    def url_for(self, key: str) -> str:
        return f"{self.base_url}/{key}"

    def key_from_url(self, url: str) -> str | None:
        prefix = f"{self.base_url}/"
        if not url or not url.startswith(prefix):
            return None
        return url[len(prefix):]

    def save(self, data: bytes, filename: str, content_type: str, folder: str = "misc") -> StoredMedia:
        key = self._new_key(filename, folder)
        target = self._safe_path(key)
        target.parent.mkdir(parents=True, exist_ok=True)
        with open(target, "wb") as f:
            f.write(data)
        logger.info("Stored media %s (%d bytes)", key, len(data))
        return StoredMedia(
            key=key,
            url=self.url_for(key),
            content_type=content_type,
            size_bytes=len(data),
        )

    def get(self, key: str) -> bytes:
        """Retrieve bytes by key. Raises FileNotFoundError."""
        target = self._safe_path(key)
        if not target.is_file():
            raise FileNotFoundError(f"Media not found: {key}")
        with open(target, "rb") as f:
            return f.read()

    def content_type_for(self, key: str) -> str:
        guessed, _ = mimetypes.guess_type(key)
        return guessed or "application/octet-stream"

    def delete(self, url: str) -> bool:
        """Delete the object behind a public URL. Returns False if nothing was removed."""
        key = self.key_from_url(url)
        if key is None:
            return False
        target = self._safe_path(key)
        if not target.exists():
            return False
        os.remove(target)
        logger.info("Deleted media %s", key)
        return True
