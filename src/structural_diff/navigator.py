"""Minimap geometry: diff markers, viewport band and click-to-scroll mapping.

All positions are percentages of the minimap height.  Markers are placed by
row index (``top = index / n``) while clicks are mapped proportionally onto
the scrollable pixel range of the viewport.  The two mappings are only
approximately aligned when rows render with non-uniform heights.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

import numpy as np

from structural_diff.algorithm.differ import DiffType
from structural_diff.algorithm.flatten import FlatRow

__all__ = [
    "Band",
    "MinimapMarker",
    "ScrollMetrics",
    "click_ratio",
    "marker_bands",
    "scroll_target",
    "viewport_band",
]


@dataclass(frozen=True, slots=True)
class ScrollMetrics:
    """Pixel geometry of the scrollable diff viewport."""

    scroll_top: float = 0.0
    scroll_height: float = 1.0
    client_height: float = 1.0


@dataclass(frozen=True, slots=True)
class Band:
    """A vertical band on the minimap, in percent."""

    top: float
    height: float


@dataclass(frozen=True, slots=True)
class MinimapMarker:
    """Marker for one differing row.

    Attributes:
        path:      Path of the row's diff node.
        diff_type: Classification of the row (never UNCHANGED).
        row_index: Index of the row in the flattened row list.
        top:       Top edge in percent of the minimap height.
        height:    Band height in percent of the minimap height.
    """

    path: str
    diff_type: DiffType
    row_index: int
    top: float
    height: float


def marker_bands(rows: Sequence[FlatRow], min_height: float = 2.0) -> list[MinimapMarker]:
    """Place one marker per differing row.

    Each row that is not UNCHANGED gets ``top = index / n * 100`` and
    ``height = max(100 / n, min_height)``, where ``n`` counts all rows
    (unchanged ones included).  The height floor keeps markers visible on
    very long documents.

    Args:
        rows:       Flattened rows in display order.
        min_height: Minimum marker height in percent.

    Returns:
        Markers in row order; empty when there are no rows.
    """
    n = len(rows)
    if n == 0:
        return []

    differing = np.fromiter(
        (row.diff_type != DiffType.UNCHANGED for row in rows), dtype=bool, count=n
    )
    indices = np.flatnonzero(differing)
    tops = indices / n * 100.0
    height = float(np.maximum(100.0 / n, min_height))

    return [
        MinimapMarker(
            path=rows[idx].path,
            diff_type=rows[idx].diff_type,
            row_index=idx,
            top=float(top),
            height=height,
        )
        for idx, top in zip(indices.tolist(), tops.tolist(), strict=True)
    ]


def viewport_band(metrics: ScrollMetrics, min_height: float = 5.0) -> Band:
    """Return the band showing which part of the content is on screen.

    ``top = scroll_top / scroll_height`` and
    ``height = max(client_height / scroll_height * 100, min_height)``.
    A viewport without scrollable content covers the whole minimap.
    """
    if metrics.scroll_height <= 0:
        return Band(top=0.0, height=100.0)
    top = metrics.scroll_top / metrics.scroll_height * 100.0
    ratio = metrics.client_height / metrics.scroll_height * 100.0
    return Band(top=top, height=max(ratio, min_height))


def click_ratio(click_y: float, minimap_height: float) -> float:
    """Convert a click offset inside the minimap to a ratio in [0, 1]."""
    if minimap_height <= 0:
        return 0.0
    return float(np.clip(click_y / minimap_height, 0.0, 1.0))


def scroll_target(ratio: float, metrics: ScrollMetrics) -> float:
    """Return the scroll offset for a minimap click at ``ratio``.

    Proportional pixel mapping: ``ratio * (scroll_height - client_height)``.
    ``ratio`` is clipped to [0, 1] and the scrollable range to >= 0.
    """
    scrollable = max(metrics.scroll_height - metrics.client_height, 0.0)
    return float(np.clip(ratio, 0.0, 1.0)) * scrollable
