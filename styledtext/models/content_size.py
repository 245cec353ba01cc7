# content_size.py
from __future__ import annotations
from enum import Enum

from styledtext.exceptions import ConfigurationError


def _lookup(enum_cls, value):
    if isinstance(value, enum_cls):
        return value
    key = str(value).strip()
    for member in enum_cls:
        if key == member.value or key.casefold() == member.name.casefold():
            return member
    raise ConfigurationError(
        f"Unknown {enum_cls.__name__} {value!r}",
        detail=", ".join(m.value for m in enum_cls),
    )


class ContentSizeCategory(Enum):
    """User preference for app-wide text size, smallest to largest."""
    EXTRA_SMALL = "extra-small"
    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"
    EXTRA_LARGE = "extra-large"
    EXTRA_EXTRA_LARGE = "extra-extra-large"
    EXTRA_EXTRA_EXTRA_LARGE = "extra-extra-extra-large"
    ACCESSIBILITY_MEDIUM = "accessibility-medium"
    ACCESSIBILITY_LARGE = "accessibility-large"
    ACCESSIBILITY_EXTRA_LARGE = "accessibility-extra-large"
    ACCESSIBILITY_EXTRA_EXTRA_LARGE = "accessibility-extra-extra-large"
    ACCESSIBILITY_EXTRA_EXTRA_EXTRA_LARGE = "accessibility-extra-extra-extra-large"

    @property
    def is_accessibility(self) -> bool:
        return self.name.startswith("ACCESSIBILITY_")

    @classmethod
    def from_string(cls, value) -> "ContentSizeCategory":
        return _lookup(cls, value)


class ScalingTextStyle(Enum):
    """Named curve describing how a base size grows across categories."""
    LARGE_TITLE = "large-title"
    TITLE1 = "title1"
    TITLE2 = "title2"
    TITLE3 = "title3"
    HEADLINE = "headline"
    BODY = "body"
    CALLOUT = "callout"
    SUBHEADLINE = "subheadline"
    FOOTNOTE = "footnote"
    CAPTION1 = "caption1"
    CAPTION2 = "caption2"

    @classmethod
    def from_string(cls, value) -> "ScalingTextStyle":
        return _lookup(cls, value)
