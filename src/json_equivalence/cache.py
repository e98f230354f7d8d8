"""DocumentCache: LRU cache of parsed JSON documents.

Test suites tend to assert many actual documents against the same handful of
expected fixtures. ``DocumentCache`` keeps the parsed trees of recently seen
documents in memory so each distinct text is parsed once. Parsed trees are
immutable, so a cached tree can be shared by any number of comparisons.

Malformed text is never cached: the parse error propagates on every call.

Example::

    from json_equivalence.cache import DocumentCache

    cache = DocumentCache(max_size=64)
    root = cache.parse('{"id": 1}')          # parsed
    same = cache.parse('{"id": 1}')          # served from memory
    assert root is same
"""

from __future__ import annotations

import logging
import threading

from cachetools import LRUCache

from json_equivalence.tree.nodes import JsonNode
from json_equivalence.tree.parser import parse_document

__all__ = ["DocumentCache"]

logger = logging.getLogger(__name__)


class DocumentCache:
    """LRU-backed cache mapping document text to its parsed root node.

    Each instance maintains its own ``LRUCache`` — there is no class-level
    shared state. Lookups and insertions are guarded by a per-instance lock,
    so one cache may serve several threads; parsing runs outside the lock.
    Eviction is silent: the least-recently-used document is
    dropped when ``max_size`` is exceeded.

    Args:
        max_size: Maximum number of parsed documents to hold. Defaults to 128.

    Raises:
        ValueError: If ``max_size`` is smaller than 1.
    """

    def __init__(self, max_size: int = 128) -> None:
        if max_size < 1:
            msg = f"max_size must be >= 1, got {max_size}"
            raise ValueError(msg)
        self._cache: LRUCache[str | bytes, JsonNode] = LRUCache(maxsize=max_size)
        self._lock = threading.Lock()

    @property
    def max_size(self) -> int:
        """The maximum number of documents this cache can hold."""
        return int(self._cache.maxsize)

    @property
    def curr_size(self) -> int:
        """The current number of documents stored in the cache."""
        return int(self._cache.currsize)

    def parse(self, text: str | bytes | bytearray) -> JsonNode:
        """Return the parsed root node for ``text``, parsing only on a miss.

        Raises:
            json.JSONDecodeError: If the text is not a valid JSON document.
        """
        key = bytes(text) if isinstance(text, bytearray) else text
        with self._lock:
            root = self._cache.get(key)
        if root is not None:
            logger.debug("Document cache hit (%d cached)", self.curr_size)
            return root

        root = parse_document(key)
        with self._lock:
            # another thread may have parsed the same text meanwhile
            return self._cache.setdefault(key, root)

    def clear(self) -> None:
        """Drop every cached document."""
        with self._lock:
            self._cache.clear()
