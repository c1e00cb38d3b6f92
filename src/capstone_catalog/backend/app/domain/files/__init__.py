from .entities import StoredBlob
from .keys import generate_storage_key, shorten_filename

__all__ = ["StoredBlob", "generate_storage_key", "shorten_filename"]
