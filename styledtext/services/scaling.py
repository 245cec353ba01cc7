# scaling.py
"""Dynamic-type scaling strategies.

A strategy answers one question: what size does ``base_size`` become for a
scaling text style when the user prefers a given content-size category?

Two variants exist. :class:`PreciseMetrics` follows the per-style platform
curves, :class:`ApproximateTable` multiplies by a coarse per-category factor
and is kept for runtimes without the precise metrics. The variant is picked
once with :func:`select_scaling_strategy` and injected wherever fonts are
resolved.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Dict, Optional, Protocol, Tuple

from PySide6.QtCore import qVersion

from styledtext.models.content_size import ContentSizeCategory, ScalingTextStyle

logger = logging.getLogger(__name__)

C = ContentSizeCategory
S = ScalingTextStyle

_CATEGORY_ORDER = tuple(ContentSizeCategory)

# Point size of each text style at each category, EXTRA_SMALL → AX5.
_CURVES: Dict[ScalingTextStyle, Tuple[float, ...]] = {
    S.LARGE_TITLE: (31, 32, 33, 34, 36, 38, 40, 44, 48, 52, 56, 60),
    S.TITLE1:      (25, 26, 27, 28, 30, 32, 34, 38, 43, 48, 53, 58),
    S.TITLE2:      (19, 20, 21, 22, 24, 26, 28, 34, 39, 44, 50, 56),
    S.TITLE3:      (17, 18, 19, 20, 22, 24, 26, 31, 37, 43, 49, 55),
    S.HEADLINE:    (14, 15, 16, 17, 19, 21, 23, 28, 33, 40, 47, 53),
    S.BODY:        (14, 15, 16, 17, 19, 21, 23, 28, 33, 40, 47, 53),
    S.CALLOUT:     (13, 14, 15, 16, 18, 20, 22, 26, 32, 38, 44, 51),
    S.SUBHEADLINE: (12, 13, 14, 15, 17, 19, 21, 25, 30, 36, 42, 49),
    S.FOOTNOTE:    (12, 12, 12, 13, 15, 17, 19, 23, 27, 33, 38, 44),
    S.CAPTION1:    (11, 11, 11, 12, 14, 16, 18, 22, 26, 32, 37, 43),
    S.CAPTION2:    (11, 11, 11, 11, 13, 15, 17, 20, 24, 29, 34, 40),
}

_APPROXIMATE_FACTORS: Dict[ContentSizeCategory, float] = {
    C.EXTRA_SMALL: 0.82,
    C.SMALL: 0.88,
    C.MEDIUM: 0.94,
    C.LARGE: 1.0,
    C.EXTRA_LARGE: 1.12,
    C.EXTRA_EXTRA_LARGE: 1.24,
    C.EXTRA_EXTRA_EXTRA_LARGE: 1.35,
    C.ACCESSIBILITY_MEDIUM: 1.65,
    C.ACCESSIBILITY_LARGE: 1.94,
    C.ACCESSIBILITY_EXTRA_LARGE: 2.35,
    C.ACCESSIBILITY_EXTRA_EXTRA_LARGE: 2.76,
    C.ACCESSIBILITY_EXTRA_EXTRA_EXTRA_LARGE: 3.12,
}

# Only these styles keep growing in the accessibility categories; the rest stop
# at EXTRA_EXTRA_EXTRA_LARGE.
_ACCESSIBILITY_STYLES = frozenset({S.BODY, S.HEADLINE, S.CALLOUT, S.SUBHEADLINE})


class ScalingStrategy(Protocol):
    def scale(
        self,
        base_size: float,
        text_style: ScalingTextStyle,
        category: ContentSizeCategory,
    ) -> float: ...


class PreciseMetrics:
    """Scale along the platform curve of ``text_style``, relative to LARGE."""

    def scale(self, base_size: float, text_style: ScalingTextStyle, category: ContentSizeCategory) -> float:
        curve = _CURVES[text_style]
        reference = curve[_CATEGORY_ORDER.index(ContentSizeCategory.LARGE)]
        return float(base_size) * curve[_CATEGORY_ORDER.index(category)] / reference

    def __repr__(self) -> str:
        return "PreciseMetrics()"


class ApproximateTable:
    """
    Multiply by an approximate factor per (category, text style) pair.
    ``factors`` overrides the per-category multipliers.
    """

    def __init__(self, factors: Optional[Dict[ContentSizeCategory, float]] = None) -> None:
        self._factors = dict(_APPROXIMATE_FACTORS)
        if factors:
            self._factors.update(factors)

    def factor(self, category: ContentSizeCategory, text_style: ScalingTextStyle) -> float:
        if category.is_accessibility and text_style not in _ACCESSIBILITY_STYLES:
            category = ContentSizeCategory.EXTRA_EXTRA_EXTRA_LARGE
        return self._factors[category]

    def scale(self, base_size: float, text_style: ScalingTextStyle, category: ContentSizeCategory) -> float:
        return float(base_size) * self.factor(category, text_style)

    def __repr__(self) -> str:
        return "ApproximateTable()"


def precise_metrics_available() -> bool:
    """Precise curves need a Qt 6 runtime."""
    try:
        major = int(qVersion().split(".")[0])
    except (ValueError, IndexError):
        return False
    return major >= 6


def select_scaling_strategy(precise: Optional[bool] = None) -> ScalingStrategy:
    """
    Pick the scaling strategy for this process.
    ``precise=None`` asks the runtime; True/False forces a variant.
    """
    if precise is None:
        precise = precise_metrics_available()
    strategy = PreciseMetrics() if precise else ApproximateTable()
    logger.debug("Selected scaling strategy %r", strategy)
    return strategy


@lru_cache(maxsize=None)
def default_scaling_strategy() -> ScalingStrategy:
    """Process-wide strategy, selected on first use."""
    return select_scaling_strategy()
