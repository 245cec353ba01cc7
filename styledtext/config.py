# styledtext/config.py
import sys

from PySide6.QtGui import QFont

# UIKit's systemFontSize; styles built without an explicit size start here.
SYSTEM_FONT_SIZE = 14.0

GREATEST_FINITE_MAGNITUDE = sys.float_info.max

DEFAULT_CONTENT_SIZE_CATEGORY = "large"
DEFAULT_SCALING_TEXT_STYLE = "body"

# Normalized system weights in [-1.0, 1.0].
WEIGHT_ULTRA_LIGHT = -0.8
WEIGHT_THIN = -0.6
WEIGHT_LIGHT = -0.4
WEIGHT_REGULAR = 0.0
WEIGHT_MEDIUM = 0.23
WEIGHT_SEMIBOLD = 0.3
WEIGHT_BOLD = 0.4
WEIGHT_HEAVY = 0.56
WEIGHT_BLACK = 0.62

WEIGHT_MAP = {
    WEIGHT_ULTRA_LIGHT: QFont.Thin,
    WEIGHT_THIN:        QFont.ExtraLight,
    WEIGHT_LIGHT:       QFont.Light,
    WEIGHT_REGULAR:     QFont.Normal,
    WEIGHT_MEDIUM:      QFont.Medium,
    WEIGHT_SEMIBOLD:    QFont.DemiBold,
    WEIGHT_BOLD:        QFont.Bold,
    WEIGHT_HEAVY:       QFont.ExtraBold,
    WEIGHT_BLACK:       QFont.Black,
}

# Tabular figures; applied to monospaced-digit system fonts.
TABULAR_DIGITS_FEATURE = "tnum"
