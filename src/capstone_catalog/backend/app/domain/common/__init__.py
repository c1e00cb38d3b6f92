from .time import utcnow, ensure_utc

__all__ = ["utcnow", "ensure_utc"]
