# font_factory.py
from __future__ import annotations

import logging
from typing import Optional, Protocol

from PySide6.QtGui import QFont, QFontDatabase

from styledtext.config import TABULAR_DIGITS_FEATURE, WEIGHT_MAP
from styledtext.models.font_spec import (
    Bold, Default, Descriptor, FontSpec, Italic, Monospaced, Named, System, Weighted,
)

logger = logging.getLogger(__name__)

# QFont rejects non-positive point sizes.
MIN_POINT_SIZE = 0.01


class DiagnosticSink(Protocol):
    def warn(self, message: str) -> None: ...


class LoggingSink:
    """Forward diagnostics to a logger at WARNING level."""

    def __init__(self, log: Optional[logging.Logger] = None) -> None:
        self._log = log or logger

    def warn(self, message: str) -> None:
        self._log.warning(message)


class FontFactory(Protocol):
    def make_font(self, spec: FontSpec, size: float) -> QFont: ...


def qt_weight(weight: float) -> QFont.Weight:
    """Nearest QFont weight for a normalized [-1, 1] system weight."""
    nearest = min(WEIGHT_MAP, key=lambda w: abs(w - float(weight)))
    return QFont.Weight(WEIGHT_MAP[nearest])


class QtFontFactory:
    """
    Build QFonts for every FontSpec variant.
    Unknown family names fall back to the general system font and are
    reported once per call through ``sink``.
    """

    def __init__(self, sink: Optional[DiagnosticSink] = None) -> None:
        self.sink = sink or LoggingSink()

    # ---------- System fonts ----------
    @staticmethod
    def system_font(size: float, *, weight: Optional[float] = None) -> QFont:
        qf = QFont(QFontDatabase.systemFont(QFontDatabase.GeneralFont))
        qf.setPointSizeF(max(float(size), MIN_POINT_SIZE))
        if weight is not None:
            qf.setWeight(qt_weight(weight))
        return qf

    @classmethod
    def monospaced_digit_font(cls, size: float, weight: float) -> QFont:
        qf = cls.system_font(size, weight=weight)
        try:
            qf.setFeature(QFont.Tag(TABULAR_DIGITS_FEATURE), 1)  # Qt 6.7+
        except (AttributeError, TypeError):
            qf = QFont(QFontDatabase.systemFont(QFontDatabase.FixedFont))
            qf.setPointSizeF(max(float(size), MIN_POINT_SIZE))
            qf.setWeight(qt_weight(weight))
        return qf

    # ---------- Dispatch ----------
    def make_font(self, spec: FontSpec, size: float) -> QFont:
        if isinstance(spec, Named):
            return self._named(spec.name, size)
        if isinstance(spec, Descriptor):
            qf = QFont(spec.descriptor)
            qf.setPointSizeF(max(float(size), MIN_POINT_SIZE))
            return qf
        if isinstance(spec, System):
            return self._system(spec.kind, size)
        raise TypeError(f"Unsupported font spec: {type(spec)}")

    def _named(self, name: str, size: float) -> QFont:
        if not QFontDatabase.hasFamily(name):
            self.sink.warn(f'Font with name "{name}" not found. Falling back to system font.')
            return self.system_font(size)
        qf = QFont(name)
        qf.setPointSizeF(max(float(size), MIN_POINT_SIZE))
        return qf

    def _system(self, kind, size: float) -> QFont:
        if isinstance(kind, Default):
            return self.system_font(size)
        if isinstance(kind, Bold):
            qf = self.system_font(size)
            qf.setBold(True)
            return qf
        if isinstance(kind, Italic):
            qf = self.system_font(size)
            qf.setItalic(True)
            return qf
        if isinstance(kind, Weighted):
            return self.system_font(size, weight=kind.weight)
        if isinstance(kind, Monospaced):
            return self.monospaced_digit_font(size, kind.weight)
        raise TypeError(f"Unsupported system font kind: {type(kind)}")
