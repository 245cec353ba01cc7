"""Font cache keyed by text style.

Resolving a style is cheap but not free: every call rebuilds a QFont. Views
that lay out many runs with the same few styles resolve through this cache
instead. Keys are ``(TextStyle, ContentSizeCategory)`` pairs, so identical
style definitions collapse to one entry. TextStyle hashes on attribute count
only; equality still tells same-count styles apart.
"""

from __future__ import annotations

from typing import Dict, Optional, Tuple

from PySide6.QtGui import QFont

from styledtext.models.content_size import ContentSizeCategory
from styledtext.models.text_style import TextStyle
from styledtext.services.font_factory import FontFactory
from styledtext.services.scaling import ScalingStrategy


class StyleFontCache:
    """Memoize resolved fonts per (style, category)."""

    def __init__(
        self,
        strategy: Optional[ScalingStrategy] = None,
        factory: Optional[FontFactory] = None,
    ) -> None:
        self._strategy = strategy
        self._factory = factory
        self._fonts: Dict[Tuple[TextStyle, ContentSizeCategory], QFont] = {}

    # ------------------------------------------------------------------
    # cache management helpers
    # ------------------------------------------------------------------
    def bind(self, strategy: Optional[ScalingStrategy] = None, factory: Optional[FontFactory] = None) -> None:
        """Swap collaborators; cached fonts from the old ones are dropped."""

        self._strategy = strategy
        self._factory = factory
        self.clear()

    def clear(self) -> None:
        self._fonts.clear()

    def __len__(self) -> int:
        return len(self._fonts)

    # ------------------------------------------------------------------
    # cache accessors
    # ------------------------------------------------------------------
    def font(self, style: TextStyle, category) -> QFont:
        key = (style, ContentSizeCategory.from_string(category))
        cached = self._fonts.get(key)
        if cached is not None:
            return QFont(cached)
        resolved = style.resolve_font(key[1], strategy=self._strategy, factory=self._factory)
        self._fonts[key] = resolved
        return QFont(resolved)
