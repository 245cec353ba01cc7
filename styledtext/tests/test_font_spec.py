import pytest
from PySide6.QtGui import QFont

from styledtext.exceptions import ConfigurationError
from styledtext.models.content_size import ContentSizeCategory, ScalingTextStyle
from styledtext.models.font_spec import (
    Bold, Default, Descriptor, Italic, Monospaced, Named, System, Weighted,
    font_spec_from_dict, font_spec_to_dict,
)


def test_variants_compare_structurally():
    assert Named("Avenir") == Named("Avenir")
    assert Named("Avenir") != Named("Futura")
    assert System(Weighted(0.3)) == System(Weighted(0.3))
    assert System(Weighted(0.3)) != System(Monospaced(0.3))
    assert System(Bold()) != System(Italic())
    assert System() == System(Default())
    assert len({Named("A"), Named("A"), System(Bold()), System(Bold())}) == 2


def test_descriptor_equality_ignores_point_size():
    small = QFont("Courier")
    small.setPointSizeF(8)
    large = QFont("Courier")
    large.setPointSizeF(40)
    assert Descriptor(small) == Descriptor(large)
    assert hash(Descriptor(small)) == hash(Descriptor(large))


def test_descriptor_equality_sees_traits():
    plain = QFont("Courier")
    italic = QFont("Courier")
    italic.setItalic(True)
    assert Descriptor(plain) != Descriptor(italic)


@pytest.mark.parametrize("spec,expected", [
    (Named("Avenir"), {"type": "named", "name": "Avenir"}),
    (System(Default()), {"type": "system", "kind": "default"}),
    (System(Bold()), {"type": "system", "kind": "bold"}),
    (System(Monospaced(0.4)), {"type": "system", "kind": "monospaced", "weight": 0.4}),
])
def test_to_dict(spec, expected):
    assert font_spec_to_dict(spec) == expected
    assert font_spec_from_dict(expected) == spec


def test_descriptor_dict_io():
    qf = QFont("Courier")
    qf.setItalic(True)
    data = font_spec_to_dict(Descriptor(qf))
    assert data["type"] == "descriptor"
    assert font_spec_from_dict(data) == Descriptor(qf)


@pytest.mark.parametrize("blob", [
    {"type": "glyphs"},
    {"type": "system", "kind": "condensed"},
    {},
])
def test_from_dict_rejects_unknown(blob):
    with pytest.raises(ConfigurationError):
        font_spec_from_dict(blob)


def test_to_dict_rejects_foreign_objects():
    with pytest.raises(TypeError):
        font_spec_to_dict("Avenir")


def test_content_size_lookup():
    assert ContentSizeCategory.from_string("extra-large") is ContentSizeCategory.EXTRA_LARGE
    assert ContentSizeCategory.from_string("accessibility_medium") is ContentSizeCategory.ACCESSIBILITY_MEDIUM
    assert ContentSizeCategory.ACCESSIBILITY_MEDIUM.is_accessibility
    assert not ContentSizeCategory.EXTRA_EXTRA_EXTRA_LARGE.is_accessibility
    assert ScalingTextStyle.from_string(ScalingTextStyle.TITLE2) is ScalingTextStyle.TITLE2
    with pytest.raises(ConfigurationError):
        ContentSizeCategory.from_string("huge")
