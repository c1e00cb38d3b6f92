from __future__ import annotations

import re
from datetime import datetime
from pathlib import PurePosixPath, PureWindowsPath
from typing import Optional
from uuid import uuid4

from capstone_catalog.backend.app.domain.common import utcnow

_UNSAFE_CHARS = re.compile(r"[^A-Za-z0-9._-]+")

# keeps `<13 digit millis>_<8 hex>_<name>` well under common 255-byte filename limits
MAX_KEY_NAME_CHARS = 150
MAX_EXTENSION_CHARS = 16


def shorten_filename(filename: str, limit: int) -> str:
    """Cut the stem so the name fits in `limit` characters; a short extension is kept."""
    if len(filename) <= limit:
        return filename
    stem, dot, ext = filename.rpartition(".")
    if not dot or not stem or len(ext) > MAX_EXTENSION_CHARS:
        return filename[:limit]
    return stem[: limit - len(ext) - 1] + "." + ext


def safe_filename(filename: str) -> str:
    # drop any client-side directory part, then anything outside a conservative charset
    base = PurePosixPath(PureWindowsPath(filename).name).name
    cleaned = _UNSAFE_CHARS.sub("_", base).strip("._")
    return shorten_filename(cleaned, MAX_KEY_NAME_CHARS) or "file"


def generate_storage_key(filename: str, *, now: Optional[datetime] = None) -> str:
    """
    `<epoch millis>_<random token>_<sanitized filename>`.

    The token keeps two uploads of the same file within one millisecond apart.
    """
    at = now or utcnow()
    millis = int(at.timestamp() * 1000)
    return f"{millis}_{uuid4().hex[:8]}_{safe_filename(filename)}"
