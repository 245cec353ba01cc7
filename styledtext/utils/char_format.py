# char_format.py
from __future__ import annotations

from typing import Any, Mapping

from PySide6.QtGui import QBrush, QFont, QTextCharFormat

from styledtext.models.attributes import AttributeKey


def char_format(attributes: Mapping[Any, Any]) -> QTextCharFormat:
    """
    Translate rendering attributes into a QTextCharFormat.
    - KERN is an absolute spacing in points, LETTER_SPACING a percentage.
    - Keys Qt has no character property for are skipped.
    """
    fmt = QTextCharFormat()
    # setFont resets spacing and decoration, so it goes first.
    if AttributeKey.FONT in attributes:
        fmt.setFont(attributes[AttributeKey.FONT])
    for key, value in attributes.items():
        if key is AttributeKey.FOREGROUND_COLOR:
            fmt.setForeground(QBrush(value))
        elif key is AttributeKey.BACKGROUND_COLOR:
            fmt.setBackground(QBrush(value))
        elif key is AttributeKey.KERN:
            fmt.setFontLetterSpacingType(QFont.AbsoluteSpacing)
            fmt.setFontLetterSpacing(float(value))
        elif key is AttributeKey.LETTER_SPACING:
            fmt.setFontLetterSpacingType(QFont.PercentageSpacing)
            fmt.setFontLetterSpacing(float(value))
        elif key is AttributeKey.UNDERLINE:
            fmt.setFontUnderline(bool(value))
        elif key is AttributeKey.STRIKETHROUGH:
            fmt.setFontStrikeOut(bool(value))
    return fmt
