"""Cached signature reader adapter.

Decorator pattern: wraps SignatureReaderPort with per-(target, selector) caching.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from dataclasses import dataclass, field

from kwbuilder.domain.model.configuration import ConstructorSelector
from kwbuilder.domain.model.parameter import ParameterDescriptor
from kwbuilder.domain.ports.signature_reader import SignatureReaderPort

logger = logging.getLogger(__name__)

_CacheKey = tuple[object, ConstructorSelector]


def _cache_key(target: object, selector: ConstructorSelector) -> _CacheKey | None:
    """Return (target, selector), or None if the pair is unhashable."""
    key = (target, selector)
    try:
        hash(key)
    except TypeError:
        return None
    return key


@dataclass
class CachedSignatureReader(SignatureReaderPort):
    """Reader with in-memory caching of parameter descriptors.

    Decorator pattern: wraps another SignatureReaderPort.
    Signatures are assumed stable for the lifetime of the process.

    Reads are lock-free; writes are serialized by _lock.

    Entries hold strong references to their targets and selectors, so a
    cached target is never garbage-collected until invalidate() or clear().
    Unhashable (target, selector) pairs bypass the cache.

    Attributes:
        _inner: Wrapped reader implementation
        _cache: (target, selector) → descriptors mapping
    """

    _inner: SignatureReaderPort
    _cache: dict[_CacheKey, tuple[ParameterDescriptor, ...]] = field(default_factory=dict)
    _lock: threading.Lock = field(default_factory=threading.Lock, repr=False)

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self._inner is None:
            raise TypeError("_inner reader must not be None")

    def resolve(self, target: object, selector: ConstructorSelector) -> Callable[..., object]:
        """Resolve constructor (delegates to inner reader, not cached)."""
        return self._inner.resolve(target, selector)

    def read(self, target: object, selector: ConstructorSelector) -> tuple[ParameterDescriptor, ...]:
        """Read with cache lookup.

        Cache hit: return cached descriptors.
        Cache miss: read with inner reader, cache result.
        Failed reads and unhashable keys are not cached.

        Args:
            target: Target type (or callable)
            selector: Constructor selector

        Returns:
            Parameter descriptors (cached or fresh)
        """
        key = _cache_key(target, selector)
        if key is None:
            logger.debug("unhashable signature cache key for %r, not cached", target)
            return self._inner.read(target, selector)

        cached = self._cache.get(key)
        if cached is not None:
            logger.debug("signature cache hit for %r", target)
            return cached

        logger.debug("signature cache miss for %r", target)
        descriptors = self._inner.read(target, selector)
        with self._lock:
            self._cache.setdefault(key, descriptors)
        return descriptors

    def invalidate(self, target: object, selector: ConstructorSelector = None) -> None:
        """Explicitly invalidate cache entry.

        Args:
            target: Target to invalidate
            selector: Selector the entry was read with
        """
        key = _cache_key(target, selector)
        if key is None:
            return
        with self._lock:
            self._cache.pop(key, None)

    def clear(self) -> None:
        """Clear entire cache."""
        with self._lock:
            self._cache.clear()

    @property
    def cache_size(self) -> int:
        """Number of cached signatures."""
        return len(self._cache)
