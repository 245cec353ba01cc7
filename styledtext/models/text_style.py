# text_style.py
from __future__ import annotations
from dataclasses import dataclass, field
from math import isfinite, isnan
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Union

from PySide6.QtGui import QFont

from styledtext.config import GREATEST_FINITE_MAGNITUDE, SYSTEM_FONT_SIZE
from styledtext.exceptions import ConfigurationError
from styledtext.models.attributes import AttributeKey
from styledtext.models.content_size import ContentSizeCategory, ScalingTextStyle
from styledtext.models.font_spec import (
    Default, FontSpec, System, font_spec_from_dict, font_spec_to_dict,
)
from styledtext.services.font_factory import FontFactory, QtFontFactory
from styledtext.services.scaling import ScalingStrategy, default_scaling_strategy
from styledtext.utils.style_serialization import load_attributes, save_attributes

Category = Union[ContentSizeCategory, str]


@dataclass(frozen=True)
class TextStyle:
    """
    A font at a base size that scales with the user's content-size category.

    Constructing a style does no validation; ``min_size > max_size`` or
    negative sizes pass straight through to :meth:`resolved_size`. Use
    :meth:`validated` to fail fast instead.

    The hash is computed once and covers the attribute *count* only, so two
    styles differing only in attribute values share a hash but are unequal.
    """
    font: FontSpec = System(Default())
    size: float = SYSTEM_FONT_SIZE
    attributes: Mapping[Any, Any] = field(default_factory=dict)
    min_size: float = 0.0
    max_size: float = GREATEST_FINITE_MAGNITUDE
    scaling_text_style: ScalingTextStyle = ScalingTextStyle.BODY
    _hash: int = field(init=False, repr=False, compare=False)

    def __init__(
        self,
        font: FontSpec = System(Default()),
        size: float = SYSTEM_FONT_SIZE,
        attributes: Optional[Mapping[Any, Any]] = None,
        min_size: float = 0.0,
        max_size: float = GREATEST_FINITE_MAGNITUDE,
        scaling_text_style: Union[ScalingTextStyle, str] = ScalingTextStyle.BODY,
    ):
        object.__setattr__(self, "font", font)
        object.__setattr__(self, "size", float(size))
        object.__setattr__(self, "attributes", MappingProxyType(dict(attributes or {})))
        object.__setattr__(self, "min_size", float(min_size))
        object.__setattr__(self, "max_size", float(max_size))
        object.__setattr__(self, "scaling_text_style", ScalingTextStyle.from_string(scaling_text_style))
        object.__setattr__(self, "_hash", hash((
            self.font,
            self.size,
            len(self.attributes),
            self.min_size,
            self.max_size,
            self.scaling_text_style,
        )))

    @classmethod
    def validated(cls, **kw) -> "TextStyle":
        """Construct a style, raising ConfigurationError for unusable sizes."""
        style = cls(**kw)
        for name in ("size", "min_size"):
            value = getattr(style, name)
            if not isfinite(value) or value < 0:
                raise ConfigurationError(f"{name} must be a finite, non-negative number", detail=repr(value))
        if isnan(style.max_size) or style.max_size < 0:
            raise ConfigurationError("max_size must be non-negative", detail=repr(style.max_size))
        if style.min_size > style.max_size:
            raise ConfigurationError(
                "min_size is larger than max_size",
                detail=f"min_size={style.min_size!r}, max_size={style.max_size!r}",
            )
        return style

    # ---------- Resolution ----------
    def resolved_size(self, content_size_category: Category, strategy: Optional[ScalingStrategy] = None) -> float:
        category = ContentSizeCategory.from_string(content_size_category)
        strategy = strategy or default_scaling_strategy()
        scaled = strategy.scale(self.size, self.scaling_text_style, category)
        return min(max(scaled, self.min_size), self.max_size)

    def resolve_font(
        self,
        content_size_category: Category,
        *,
        strategy: Optional[ScalingStrategy] = None,
        factory: Optional[FontFactory] = None,
    ) -> QFont:
        """Scale, clamp and build the concrete font. Nothing is cached."""
        size = self.resolved_size(content_size_category, strategy)
        factory = factory or QtFontFactory()
        return factory.make_font(self.font, size)

    def render_attributes(
        self,
        content_size_category: Category,
        *,
        strategy: Optional[ScalingStrategy] = None,
        factory: Optional[FontFactory] = None,
    ) -> Dict[Any, Any]:
        """The style's attributes with AttributeKey.FONT bound to the resolved font."""
        out = dict(self.attributes)
        out[AttributeKey.FONT] = self.resolve_font(content_size_category, strategy=strategy, factory=factory)
        return out

    # ---------- Utilities ----------
    def with_overrides(self, **kw) -> "TextStyle":
        """
        Return a new TextStyle based on this instance with selected fields overridden.
        """
        fields = {
            "font": self.font,
            "size": self.size,
            "attributes": self.attributes,
            "min_size": self.min_size,
            "max_size": self.max_size,
            "scaling_text_style": self.scaling_text_style,
        }
        unknown = set(kw) - set(fields)
        if unknown:
            raise TypeError(f"Unknown TextStyle fields: {sorted(unknown)}")
        fields.update(kw)
        return TextStyle(**fields)

    # ---------- Dict I/O ----------
    def to_dict(self) -> dict:
        return {
            "font": font_spec_to_dict(self.font),
            "size": self.size,
            "attributes": save_attributes(self.attributes),
            "min_size": self.min_size,
            "max_size": self.max_size,
            "scaling_text_style": self.scaling_text_style.value,
        }

    @classmethod
    def from_dict(cls, blob: dict) -> "TextStyle":
        if not isinstance(blob, dict):
            raise ConfigurationError("TextStyle data must be a dict", detail=type(blob).__name__)
        try:
            return cls(
                font=font_spec_from_dict(blob["font"]) if "font" in blob else System(Default()),
                size=float(blob.get("size", SYSTEM_FONT_SIZE)),
                attributes=load_attributes(blob.get("attributes") or {}),
                min_size=float(blob.get("min_size", 0.0)),
                max_size=float(blob.get("max_size", GREATEST_FINITE_MAGNITUDE)),
                scaling_text_style=blob.get("scaling_text_style", ScalingTextStyle.BODY),
            )
        except (TypeError, ValueError) as exc:
            raise ConfigurationError("Malformed TextStyle data", detail=str(exc)) from exc

    # ---------- Equality & debug ----------
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TextStyle):
            return NotImplemented
        return (
            self.size == other.size
            and self.min_size == other.min_size
            and self.max_size == other.max_size
            and self.font == other.font
            and self.scaling_text_style == other.scaling_text_style
            and dict(self.attributes) == dict(other.attributes)
        )

    def __hash__(self) -> int:
        return self._hash

    def __repr__(self) -> str:
        return (f"TextStyle(font={self.font!r}, size={self.size:g}, "
                f"attributes={dict(self.attributes)!r}, min_size={self.min_size:g}, "
                f"max_size={self.max_size:g}, scaling_text_style={self.scaling_text_style.value!r})")
