"""Memoizer: cache the results of a pure single-argument function.

The cache belongs to the wrapper returned by ``memoize``; there is no module
level state. It grows with every distinct key and is never evicted, so only
memoize functions whose key space is bounded.

Example:
    ```python
    @memoize
    def fib(n: int) -> int:
        return n if n < 2 else fib(n - 1) + fib(n - 2)

    fib(80)  # the recursive calls resolve to the memoized wrapper
    ```
"""

from __future__ import annotations

import threading
from collections.abc import Awaitable, Callable
from typing import Any, overload

import msgspec
import wrapt
from async_lru import alru_cache

from funclib._config import get_config
from funclib._logging import get_logger, is_logging_configured

__all__ = ['CacheInfo', 'Memoizer', 'memoize', 'memoize_async']

_MISSING = object()

logger = get_logger(__name__)


class CacheInfo(msgspec.Struct, frozen=True, gc=False):
    """Counters describing a Memoizer's cache."""

    hits: int
    misses: int
    size: int


class _KeyLock:
    """A per-key lock and the number of callers holding or waiting on it."""

    __slots__ = ('lock', 'users')

    def __init__(self) -> None:
        self.lock = threading.RLock()
        self.users = 0


class Memoizer[K, V](wrapt.ObjectProxy):
    """A single-argument function wrapped with a result cache.

    The first call with a key runs the function and stores its result; later
    calls with an equal key return the stored result without running the
    function again. Keys must be hashable.

    With locking enabled (the default) the first computation of each key is
    serialised by a per-key lock, so concurrent callers run the function at
    most once per key and never observe a half-built entry. Calls for
    different keys do not wait on each other.

    Attributes:
        _self_cache: Results by key. Entries are written once.
        _self_locks: Per-key locks, present only while a caller holds or
            waits on one.
    """

    def __init__(self, fn: Callable[[K], V], *, locking: bool | None = None) -> None:
        """Wrap ``fn``.

        Args:
            fn: A pure function of one hashable argument.
            locking: Serialise first computations per key. Defaults to
                ``get_config().memo_locking``.
        """
        super().__init__(fn)
        self._self_cache: dict[K, V] = {}
        self._self_locks: dict[K, _KeyLock] = {}
        self._self_guard = threading.Lock()
        self._self_locking = get_config().memo_locking if locking is None else locking
        self._self_hits = 0
        self._self_misses = 0

    def __call__(self, key: K) -> V:
        value = self._self_cache.get(key, _MISSING)
        if value is not _MISSING:
            self._self_count(hit=True)
            return value  # type: ignore[return-value]
        if not self._self_locking:
            return self._self_compute(key)

        lock = self._self_acquire(key)
        try:
            with lock:
                value = self._self_cache.get(key, _MISSING)
                if value is not _MISSING:
                    self._self_count(hit=True)
                    return value  # type: ignore[return-value]
                return self._self_compute(key)
        finally:
            self._self_release(key)

    def _self_acquire(self, key: K) -> threading.RLock:
        with self._self_guard:
            entry = self._self_locks.get(key)
            if entry is None:
                entry = self._self_locks[key] = _KeyLock()
            entry.users += 1
            return entry.lock

    def _self_release(self, key: K) -> None:
        # The last caller out drops the lock, whether or not a value was stored.
        with self._self_guard:
            entry = self._self_locks[key]
            entry.users -= 1
            if not entry.users:
                del self._self_locks[key]

    def _self_count(self, *, hit: bool) -> None:
        with self._self_guard:
            if hit:
                self._self_hits += 1
            else:
                self._self_misses += 1

    def _self_compute(self, key: K) -> V:
        value = self.__wrapped__(key)
        # Published only once fully computed; without locking the first writer wins.
        value = self._self_cache.setdefault(key, value)
        self._self_count(hit=False)
        if is_logging_configured():
            logger.debug('memo_miss', function=self._self_name(), key=repr(key), size=len(self._self_cache))
        return value

    def _self_name(self) -> str:
        return getattr(self.__wrapped__, '__qualname__', repr(self.__wrapped__))

    def cache_info(self) -> CacheInfo:
        """Return hit/miss counters and the number of cached keys."""
        with self._self_guard:
            return CacheInfo(hits=self._self_hits, misses=self._self_misses, size=len(self._self_cache))

    def __repr__(self) -> str:
        return f'<memoized {self._self_name()} with {len(self._self_cache)} entries>'


@overload
def memoize[K, V](fn: Callable[[K], V], /) -> Memoizer[K, V]: ...


@overload
def memoize[K, V](*, locking: bool | None = None) -> Callable[[Callable[[K], V]], Memoizer[K, V]]: ...


def memoize[K, V](
    fn: Callable[[K], V] | None = None,
    /,
    *,
    locking: bool | None = None,
) -> Memoizer[K, V] | Callable[[Callable[[K], V]], Memoizer[K, V]]:
    """Return a memoized version of a pure single-argument function.

    Can be used as a plain call or a decorator, with or without arguments:
        fast = memoize(slow)

        @memoize
        def f(n): ...

        @memoize(locking=False)
        def g(n): ...

    The function must be pure: it may run only once per distinct key, so
    callers cannot rely on its side effects happening on every call.

    Args:
        fn: The function to wrap.
        locking: Serialise first computations per key (see ``Memoizer``).

    Returns:
        A ``Memoizer`` wrapping ``fn``.
    """

    def decorator(func: Callable[[K], V]) -> Memoizer[K, V]:
        memoized = Memoizer(func, locking=locking)
        if is_logging_configured():
            logger.debug('memoize', function=memoized._self_name(), locking=memoized._self_locking)
        return memoized

    if fn is not None:
        return decorator(fn)
    return decorator


def memoize_async[K, V](fn: Callable[[K], Awaitable[V]]) -> Callable[[K], Awaitable[V]]:
    """Memoize a pure single-argument async function.

    Built on async-lru with an unbounded cache. Concurrent awaits of the same
    new key share one in-flight call, so the function runs once per key.

    Example:
        ```python
        @memoize_async
        async def load_schema(name: str) -> dict:
            return await fetch_schema(name)
        ```
    """
    return alru_cache(maxsize=None)(fn)
