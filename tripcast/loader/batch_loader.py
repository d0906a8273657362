"""Keyed batch loader: coalesces, deduplicates and memoizes async lookups.

Keys queued before the loader is flushed are drained together into one call
of the batch function. Each distinct key is fetched at most once per loader
instance; callers asking for an equal key wait on the same underlying future,
so they see the identical value or the identical error. Each caller gets a
shielded view of that future: cancelling one waiter never cancels the fetch
or the other waiters.

A loader belongs to one request and to the event loop that first uses it.
It holds no lock: all mutation happens on that loop's thread.
"""

import asyncio
import logging
from collections.abc import Awaitable, Callable, Hashable, Iterable, Sequence
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from tripcast.errors import BatchLoadError

logger = logging.getLogger(__name__)

K = TypeVar("K")
V = TypeVar("V")


@dataclass
class _Pending:
    cache_key: Hashable
    key: Any
    future: asyncio.Future


class KeyedBatchLoader(Generic[K, V]):
    def __init__(
        self,
        batch_fn: Callable[[list[K]], Awaitable[Sequence[V | BaseException]]],
        *,
        name: str = "loader",
        auto_dispatch: bool = True,
        max_batch_size: int | None = None,
        cache_key_fn: Callable[[K], Hashable] | None = None,
    ):
        """
        Args:
            batch_fn: Receives the ordered distinct pending keys and must return
                one result per key, in the same order. An exception instance
                in the results fails only that key.
            name: Label used in log lines.
            auto_dispatch: Schedule a flush at the end of the current
                scheduling pass when the first key is queued. When False the
                caller drains the queue with ``await loader.flush()``.
            max_batch_size: Split a drained queue into batches of at most
                this many keys.
            cache_key_fn: Maps a key to its hashable cache identity.
        """
        if max_batch_size is not None and max_batch_size < 1:
            raise ValueError("max_batch_size must be a positive integer")
        self.name = name
        self.auto_dispatch = auto_dispatch
        self.max_batch_size = max_batch_size
        self.batches_dispatched = 0
        self._batch_fn = batch_fn
        self._cache_key_fn = cache_key_fn or (lambda key: key)
        self._cache: dict[Hashable, asyncio.Future] = {}
        self._queue: list[_Pending] = []
        self._flush_scheduled = False
        self._loop: asyncio.AbstractEventLoop | None = None
        self._tasks: set[asyncio.Task] = set()

    def load(self, key: K) -> asyncio.Future:
        """Return a future for ``key``, queueing a fetch if none is cached."""
        loop = self._bind_loop()
        cache_key = self._cache_key_fn(key)
        cached = self._cache.get(cache_key)
        if cached is not None and not cached.cancelled():
            return asyncio.shield(cached)

        future = loop.create_future()
        self._cache[cache_key] = future
        self._queue.append(_Pending(cache_key, key, future))
        if self.auto_dispatch and not self._flush_scheduled:
            self._flush_scheduled = True
            loop.call_soon(self._start_flush)
        return asyncio.shield(future)

    def load_many(self, keys: Iterable[K]) -> asyncio.Future:
        """Return a future for the list of results, in the order of ``keys``."""
        futures = [self.load(key) for key in keys]
        if not futures:
            empty = self._bind_loop().create_future()
            empty.set_result([])
            return empty
        return asyncio.gather(*futures)

    def prime(self, key: K, value: V) -> None:
        """Seed the cache for ``key`` unless it is already cached or in flight."""
        cache_key = self._cache_key_fn(key)
        cached = self._cache.get(cache_key)
        if cached is not None and not cached.cancelled():
            return
        future = self._bind_loop().create_future()
        future.set_result(value)
        self._cache[cache_key] = future

    def clear(self, key: K) -> None:
        self._cache.pop(self._cache_key_fn(key), None)

    def clear_all(self) -> None:
        self._cache.clear()

    @property
    def pending_count(self) -> int:
        return len(self._queue)

    async def flush(self) -> None:
        """Drain the pending queue, dispatching it to the batch function."""
        self._flush_scheduled = False
        if not self._queue:
            return
        pending, self._queue = self._queue, []
        pending = [item for item in pending if not item.future.done()]
        if not pending:
            return
        size = self.max_batch_size or len(pending)
        batches = [pending[i:i + size] for i in range(0, len(pending), size)]
        await asyncio.gather(*(self._dispatch(batch) for batch in batches))

    def _bind_loop(self) -> asyncio.AbstractEventLoop:
        loop = asyncio.get_running_loop()
        if self._loop is None:
            self._loop = loop
        elif self._loop is not loop:
            raise RuntimeError(
                f"{self.name} loader is bound to a different event loop"
            )
        return loop

    def _start_flush(self) -> None:
        task = asyncio.get_running_loop().create_task(self.flush())
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)

    async def _dispatch(self, batch: list[_Pending]) -> None:
        keys = [item.key for item in batch]
        self.batches_dispatched += 1
        logger.debug("%s: dispatching batch of %d keys", self.name, len(keys))

        try:
            results = list(await self._batch_fn(keys))
        except asyncio.CancelledError:
            self._fail(batch, BatchLoadError(f"{self.name} batch was cancelled"))
            raise
        except Exception as e:
            logger.debug("%s: batch of %d keys failed: %s", self.name, len(keys), e)
            self._fail(batch, e)
            return

        if len(results) != len(batch):
            self._fail(
                batch,
                BatchLoadError(
                    f"{self.name} batch function returned {len(results)} "
                    f"results for {len(batch)} keys"
                ),
            )
            return

        for item, result in zip(batch, results):
            if isinstance(result, BaseException):
                self._evict(item)
                if not item.future.done():
                    item.future.set_exception(result)
            elif not item.future.done():
                item.future.set_result(result)

    def _fail(self, batch: list[_Pending], error: BaseException) -> None:
        for item in batch:
            self._evict(item)
            if not item.future.done():
                item.future.set_exception(error)

    def _evict(self, item: _Pending) -> None:
        # Failures are never cached; a later load re-enters batching.
        if self._cache.get(item.cache_key) is item.future:
            del self._cache[item.cache_key]
