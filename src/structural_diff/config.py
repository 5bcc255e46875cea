"""SessionConfig: presentation and caching parameters for a DiffSession.

SessionConfig is a frozen (immutable) dataclass.  It governs labels, the
parse cache and minimap geometry only; the diff algorithm itself takes no
parameters.
"""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["SessionConfig"]


@dataclass(frozen=True, slots=True)
class SessionConfig:
    """Immutable configuration for a DiffSession.

    Attributes:
        left_label:          Column heading of the left document.
        right_label:         Column heading of the right document.
        parse_cache_size:    Maximum number of parsed texts kept per session
                             (>= 1).  Least-recently-used entries are evicted.
        marker_min_height:   Minimum minimap marker height, percent [0, 100].
        viewport_min_height: Minimum viewport band height, percent [0, 100].
    """

    left_label: str = "Original"
    right_label: str = "Modified"
    parse_cache_size: int = 64
    marker_min_height: float = 2.0
    viewport_min_height: float = 5.0

    def __post_init__(self) -> None:
        if self.parse_cache_size < 1:
            msg = f"parse_cache_size must be >= 1, got {self.parse_cache_size}"
            raise ValueError(msg)
        if not 0.0 <= self.marker_min_height <= 100.0:
            msg = f"marker_min_height must be in [0, 100], got {self.marker_min_height}"
            raise ValueError(msg)
        if not 0.0 <= self.viewport_min_height <= 100.0:
            msg = (
                "viewport_min_height must be in [0, 100], "
                f"got {self.viewport_min_height}"
            )
            raise ValueError(msg)
