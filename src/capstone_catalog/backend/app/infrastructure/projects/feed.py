from __future__ import annotations

import asyncio
import itertools
import logging
from typing import Awaitable, Callable, Generic, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")

SnapshotLoader = Callable[[], Awaitable[list[T]]]
Listener = Callable[[list[T]], Awaitable[None]]


class FeedSubscription:
    def __init__(self, feed: "ProjectChangeFeed", token: int) -> None:
        self._feed = feed
        self._token = token

    @property
    def active(self) -> bool:
        return self._feed.has_listener(self._token)

    def close(self) -> None:
        # idempotent
        self._feed.unsubscribe(self._token)


class ProjectChangeFeed(Generic[T]):
    """
    In-process change feed over the record store.

    Every listener gets the full ordered list on subscribe and again after each
    `publish()`. Nothing is cached between pushes; each push re-reads the store.
    A listener that raises is dropped.
    """

    def __init__(self, load_snapshot: SnapshotLoader) -> None:
        self._load_snapshot = load_snapshot
        self._listeners: dict[int, Listener] = {}
        self._tokens = itertools.count(1)
        # snapshots are delivered in the order the writes were published
        self._lock = asyncio.Lock()

    @property
    def listener_count(self) -> int:
        return len(self._listeners)

    def has_listener(self, token: int) -> bool:
        return token in self._listeners

    async def subscribe(self, listener: Listener) -> FeedSubscription:
        token = next(self._tokens)
        async with self._lock:
            snapshot = await self._load_snapshot()
            self._listeners[token] = listener
            await self._deliver(token, listener, snapshot)
        logger.debug("Feed listener %d subscribed (%d active)", token, self.listener_count)
        return FeedSubscription(self, token)

    def unsubscribe(self, token: int) -> None:
        if self._listeners.pop(token, None) is not None:
            logger.debug("Feed listener %d unsubscribed (%d active)", token, self.listener_count)

    async def publish(self) -> None:
        if not self._listeners:
            return
        async with self._lock:
            try:
                snapshot = await self._load_snapshot()
            except Exception:
                # the write itself already succeeded; listeners catch up on the next change
                logger.exception("Failed to load project snapshot for feed")
                return
            for token, listener in list(self._listeners.items()):
                await self._deliver(token, listener, snapshot)

    async def _deliver(self, token: int, listener: Listener, snapshot: list[T]) -> None:
        try:
            await listener(list(snapshot))
        except Exception as e:
            logger.warning("Dropping feed listener %d: %s", token, e)
            self.unsubscribe(token)
