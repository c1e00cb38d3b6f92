from __future__ import annotations

import logging
from urllib.parse import quote

import httpx

from capstone_catalog.backend.app.domain.files import StoredBlob

logger = logging.getLogger(__name__)


class SupabaseBlobStorage:
    """
    Blob store backed by a Supabase Storage bucket, spoken to over its REST API.

      POST   /storage/v1/object/{bucket}/{key}        upload (x-upsert: true)
      DELETE /storage/v1/object/{bucket}              {"prefixes": [key]}
      GET    /storage/v1/object/public/{bucket}/{key} public download URL
    """

    def __init__(self, client: httpx.AsyncClient, *, base_url: str, bucket: str) -> None:
        self._client = client
        self._base_url = base_url.rstrip("/")
        self._bucket = bucket

    @classmethod
    def from_credentials(
            cls,
            *,
            base_url: str,
            service_key: str,
            bucket: str,
            timeout: float = 60.0,
    ) -> "SupabaseBlobStorage":
        client = httpx.AsyncClient(
            base_url=base_url.rstrip("/"),
            headers={
                "Authorization": f"Bearer {service_key}",
                "apikey": service_key,
            },
            timeout=timeout,
        )
        return cls(client, base_url=base_url, bucket=bucket)

    def public_url(self, key: str) -> str:
        return f"{self._base_url}/storage/v1/object/public/{self._bucket}/{quote(key)}"

    async def upload(
        self,
        *,
        key: str,
        content: bytes,
        content_type: str,
    ) -> StoredBlob:
        resp = await self._client.post(
            f"/storage/v1/object/{self._bucket}/{quote(key)}",
            content=content,
            headers={
                "Content-Type": content_type,
                "cache-control": "max-age=3600",
                "x-upsert": "true",
            },
        )
        resp.raise_for_status()
        return StoredBlob(
            key=key,
            download_url=self.public_url(key),
            size_bytes=len(content),
            content_type=content_type,
        )

    async def delete(self, *, key: str) -> None:
        resp = await self._client.request(
            "DELETE",
            f"/storage/v1/object/{self._bucket}",
            json={"prefixes": [key]},
        )
        resp.raise_for_status()
        if resp.content and resp.json() == []:
            logger.debug("Stored file %s was already absent from bucket %s", key, self._bucket)

    async def aclose(self) -> None:
        await self._client.aclose()
