import logging

from PySide6.QtCore import QObject, Signal, Property
from PySide6.QtGui import QFont

from styledtext.config import DEFAULT_CONTENT_SIZE_CATEGORY
from styledtext.models.content_size import ContentSizeCategory
from styledtext.models.text_style import TextStyle
from styledtext.services.font_cache import StyleFontCache
from styledtext.services.font_factory import QtFontFactory
from styledtext.services.scaling import select_scaling_strategy

logger = logging.getLogger(__name__)


class TypeSettings(QObject):
    """
    Application-wide text scaling state: the preferred content-size category
    and the scaling strategy/font factory used to resolve every TextStyle.
    """
    content_size_category_changed = Signal(str)

    def __init__(self, content_size_category=DEFAULT_CONTENT_SIZE_CATEGORY, *,
                 precise_metrics=None, factory=None, parent=None):
        super().__init__(parent)
        self._category = ContentSizeCategory.from_string(content_size_category)
        self._strategy = select_scaling_strategy(precise_metrics)
        self._factory = factory or QtFontFactory()
        self._cache = StyleFontCache(self._strategy, self._factory)

    @Property(str)
    def content_size_category(self):
        return self._category.value

    @content_size_category.setter
    def content_size_category(self, value):
        new = ContentSizeCategory.from_string(value)
        if new == self._category:
            return
        self._category = new
        self._cache.clear()
        logger.debug("Content size category changed to %s", new.value)
        self.content_size_category_changed.emit(new.value)

    @property
    def category(self) -> ContentSizeCategory:
        return self._category

    @property
    def strategy(self):
        return self._strategy

    @property
    def factory(self):
        return self._factory

    def font_for(self, style: TextStyle) -> QFont:
        return self._cache.font(style, self._category)

    def resolved_size(self, style: TextStyle) -> float:
        return style.resolved_size(self._category, self._strategy)
