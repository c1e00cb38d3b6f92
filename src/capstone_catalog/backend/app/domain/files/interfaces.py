from typing import Protocol, runtime_checkable

from capstone_catalog.backend.app.domain.files.entities import StoredBlob


@runtime_checkable
class BlobStorage(Protocol):
    async def upload(
        self,
        *,
        key: str,
        content: bytes,
        content_type: str,
    ) -> StoredBlob:
        """
        Store `content` under `key`, overwriting any existing blob with that key.
        Returns the public retrieval locator.
        """
        ...

    async def delete(self, *, key: str) -> None:
        """Deleting a key that does not exist is not an error."""
        ...

    async def aclose(self) -> None:
        ...
