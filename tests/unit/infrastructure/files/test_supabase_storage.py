import json

import httpx
import pytest

from capstone_catalog.backend.app.infrastructure.files.supabase_storage import SupabaseBlobStorage

pytestmark = pytest.mark.asyncio

BASE_URL = "https://demo.supabase.co"


def _storage(handler) -> SupabaseBlobStorage:
    client = httpx.AsyncClient(base_url=BASE_URL, transport=httpx.MockTransport(handler))
    return SupabaseBlobStorage(client, base_url=BASE_URL, bucket="project-files")


async def test_upload_posts_with_upsert_and_returns_public_url():
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json={"Key": "project-files/1_ab_report.pdf"})

    storage = _storage(handler)
    blob = await storage.upload(key="1_ab_report.pdf", content=b"pdf", content_type="application/pdf")
    await storage.aclose()

    req = seen[0]
    assert req.method == "POST"
    assert req.url.path == "/storage/v1/object/project-files/1_ab_report.pdf"
    assert req.headers["x-upsert"] == "true"
    assert req.headers["content-type"] == "application/pdf"
    assert req.content == b"pdf"
    assert blob.download_url == f"{BASE_URL}/storage/v1/object/public/project-files/1_ab_report.pdf"
    assert blob.size_bytes == 3


async def test_upload_error_status_raises():
    storage = _storage(lambda request: httpx.Response(500, json={"error": "boom"}))

    with pytest.raises(httpx.HTTPStatusError):
        await storage.upload(key="k.pdf", content=b"x", content_type="application/pdf")


async def test_delete_sends_prefixes():
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json=[])

    await _storage(handler).delete(key="k.pdf")

    assert seen[0].method == "DELETE"
    assert seen[0].url.path == "/storage/v1/object/project-files"
    assert json.loads(seen[0].content) == {"prefixes": ["k.pdf"]}


async def test_delete_error_status_raises():
    storage = _storage(lambda request: httpx.Response(403, json={"error": "denied"}))

    with pytest.raises(httpx.HTTPStatusError):
        await storage.delete(key="k.pdf")
