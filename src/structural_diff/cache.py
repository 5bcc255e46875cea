"""ParseCache: LRU-backed caching proxy for any DocumentFormat.

Wraps a DocumentFormat and memoises ``parse()`` results by source text.
Re-parsing happens on every edit of either side, and the unchanged side hits
the cache.  LRU eviction occurs silently when ``max_size`` is exceeded.

Each ``ParseCache`` instance maintains its own ``LRUCache``; two instances
never share state.

Example::

    from structural_diff.cache import ParseCache
    from structural_diff.formats import JsonFormat

    cache = ParseCache(JsonFormat(), max_size=64)
    cache.parse('{"a": 1}')   # parsed by JsonFormat
    cache.parse('{"a": 1}')   # served from memory
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TYPE_CHECKING

from cachetools import LRUCache

from structural_diff.result import ParseResult

if TYPE_CHECKING:
    from structural_diff.protocols import DocumentFormat

__all__ = ["ParseCache"]

logger = logging.getLogger(__name__)


class ParseCache:
    """LRU-backed caching proxy around a DocumentFormat.

    Satisfies the ``DocumentFormat`` Protocol structurally.  Only ``parse()``
    is cached; ``format()`` and the descriptive attributes delegate straight
    to the wrapped format.

    Args:
        fmt:      Any object satisfying the ``DocumentFormat`` Protocol.
        max_size: Maximum number of texts to hold.  Defaults to 64.
    """

    def __init__(self, fmt: DocumentFormat, max_size: int = 64) -> None:
        self._format = fmt
        self._cache: LRUCache[str, ParseResult] = LRUCache(maxsize=max_size)
        self.hits = 0
        self.misses = 0

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    @property
    def wrapped(self) -> DocumentFormat:
        return self._format

    @property
    def max_size(self) -> int:
        return int(self._cache.maxsize)

    @property
    def curr_size(self) -> int:
        return int(self._cache.currsize)

    @property
    def name(self) -> str:
        return self._format.name

    @property
    def placeholder(self) -> str:
        return self._format.placeholder

    @property
    def empty_message(self) -> str:
        return self._format.empty_message

    @property
    def error_message(self) -> str:
        return self._format.error_message

    # ------------------------------------------------------------------
    # DocumentFormat Protocol surface
    # ------------------------------------------------------------------

    def parse(self, text: str) -> ParseResult:
        cached = self._cache.get(text)
        if cached is not None:
            self.hits += 1
            return cached
        self.misses += 1
        result = self._format.parse(text)
        if self.curr_size >= self.max_size:
            logger.debug("parse cache full (%d entries), evicting LRU text", self.curr_size)
        self._cache[text] = result
        return result

    def format(
        self,
        text: str,
        on_success: Callable[[str], None],
        on_error: Callable[[str], None],
    ) -> None:
        self._format.format(text, on_success, on_error)

    def clear(self) -> None:
        self._cache.clear()
