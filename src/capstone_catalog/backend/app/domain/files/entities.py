from dataclasses import dataclass


@dataclass(frozen=True)
class StoredBlob:
    key: str
    download_url: str
    size_bytes: int
    content_type: str
