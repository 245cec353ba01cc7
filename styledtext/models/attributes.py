# attributes.py
from enum import Enum


class AttributeKey(Enum):
    """Well-known rendering attribute keys. Any hashable key may be used."""
    FONT = "font"
    FOREGROUND_COLOR = "foreground-color"
    BACKGROUND_COLOR = "background-color"
    KERN = "kern"
    UNDERLINE = "underline"
    STRIKETHROUGH = "strikethrough"
    LETTER_SPACING = "letter-spacing"


# Keys whose values are QColor.
COLOR_KEYS = {AttributeKey.FOREGROUND_COLOR, AttributeKey.BACKGROUND_COLOR}
