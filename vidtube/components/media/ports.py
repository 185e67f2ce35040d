from typing import Protocol

from vidtube.domain.entities import StoredMedia


class MediaStorePort(Protocol):
    def save(
        self, data: bytes, filename: str, content_type: str, folder: str = "misc"
    ) -> StoredMedia: ...

    def delete(self, url: str) -> bool: ...


class UploadRulesPort(Protocol):
    def get_max_upload_bytes(self, kind: str) -> int: ...

    def get_allowed_extensions(self, kind: str) -> list[str]: ...

    def get_allowed_mime_types(self, kind: str) -> list[str]: ...
