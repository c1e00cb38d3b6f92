from __future__ import annotations

import asyncio
from pathlib import Path
from urllib.parse import quote

from capstone_catalog.backend.app.domain.files import StoredBlob


def _write_file(path: Path, content: bytes) -> int:
    path.parent.mkdir(parents=True, exist_ok=True)
    # overwrites an existing blob with the same key
    path.write_bytes(content)
    return path.stat().st_size


class FilesystemBlobStorage:
    """
    Blob store on the local disk. Files are served back by the API's static mount,
    so `public_base_url` must point at that mount.

    All disk access runs in a worker thread.
    """

    def __init__(self, base_dir: Path, public_base_url: str) -> None:
        self._base_dir = base_dir.resolve()
        self._public_base_url = public_base_url.rstrip("/")

    def _path_for(self, key: str) -> Path:
        full_path = (self._base_dir / key).resolve()
        if full_path.parent != self._base_dir:
            raise ValueError(f"Invalid storage key: {key!r}")
        return full_path

    def url_for(self, key: str) -> str:
        return f"{self._public_base_url}/{quote(key)}"

    async def upload(
        self,
        *,
        key: str,
        content: bytes,
        content_type: str,
    ) -> StoredBlob:
        full_path = self._path_for(key)
        size = await asyncio.to_thread(_write_file, full_path, content)

        return StoredBlob(
            key=key,
            download_url=self.url_for(key),
            size_bytes=size,
            content_type=content_type,
        )

    async def delete(self, *, key: str) -> None:
        full_path = self._path_for(key)
        await asyncio.to_thread(full_path.unlink, missing_ok=True)

    def exists(self, key: str) -> bool:
        return self._path_for(key).exists()

    async def aclose(self) -> None:
        return None
