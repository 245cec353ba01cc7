import pytest
from PySide6.QtGui import QColor, QFont

from styledtext.exceptions import ConfigurationError
from styledtext.models.attributes import AttributeKey
from styledtext.models.content_size import ContentSizeCategory as C
from styledtext.models.text_style import TextStyle
from styledtext.services.scaling import PreciseMetrics
from styledtext.utils.char_format import char_format
from styledtext.utils.style_serialization import load_attributes, save_attributes


def test_colors_and_decorations(qapp):
    fmt = char_format({
        AttributeKey.FOREGROUND_COLOR: QColor("red"),
        AttributeKey.BACKGROUND_COLOR: QColor("yellow"),
        AttributeKey.UNDERLINE: True,
        AttributeKey.STRIKETHROUGH: True,
    })
    assert fmt.foreground().color() == QColor("red")
    assert fmt.background().color() == QColor("yellow")
    assert fmt.fontUnderline()
    assert fmt.fontStrikeOut()


def test_kern_survives_font(qapp):
    style = TextStyle(size=12, attributes={AttributeKey.KERN: 1.5})
    fmt = char_format(style.render_attributes(C.LARGE, strategy=PreciseMetrics()))
    assert fmt.font().pointSizeF() == 12
    assert fmt.fontLetterSpacingType() == QFont.AbsoluteSpacing
    assert fmt.fontLetterSpacing() == 1.5


def test_letter_spacing_is_percentage(qapp):
    fmt = char_format({AttributeKey.LETTER_SPACING: 120})
    assert fmt.fontLetterSpacingType() == QFont.PercentageSpacing
    assert fmt.fontLetterSpacing() == 120


def test_unknown_keys_are_skipped(qapp):
    fmt = char_format({"shadow": 3})
    assert not fmt.fontUnderline()


def test_attribute_serialization(qapp):
    data = save_attributes({AttributeKey.BACKGROUND_COLOR: QColor(9, 8, 7), AttributeKey.KERN: 2.0})
    assert data == {"background-color": [9, 8, 7, 255], "kern": 2.0}
    assert load_attributes(data) == {AttributeKey.BACKGROUND_COLOR: QColor(9, 8, 7), AttributeKey.KERN: 2.0}


def test_attribute_serialization_rejects_bad_input(qapp):
    with pytest.raises(ConfigurationError):
        save_attributes({42: "answer"})
    with pytest.raises(ConfigurationError):
        load_attributes({"foreground-color": [1, 2]})


def test_font_attribute_serializes_as_description(qapp):
    font = QFont("Courier")
    font.setPointSizeF(11)
    data = save_attributes({AttributeKey.FONT: font, "tracking": [1, 2]})
    assert data == {"font": font.toString(), "tracking": [1, 2]}
    loaded = load_attributes(data)
    assert loaded[AttributeKey.FONT].pointSizeF() == 11
    assert loaded["tracking"] == [1, 2]


@pytest.mark.parametrize("attributes", [
    {"tint": QColor("red")},
    {AttributeKey.KERN: QFont()},
    {"shadow": {"blur": 3}},
])
def test_non_plain_values_are_rejected(qapp, attributes):
    with pytest.raises(ConfigurationError):
        save_attributes(attributes)
