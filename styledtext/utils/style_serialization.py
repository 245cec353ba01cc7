# style_serialization.py
from typing import Any, Dict, List, Mapping

from PySide6.QtGui import QColor, QFont

from styledtext.exceptions import ConfigurationError
from styledtext.models.attributes import AttributeKey, COLOR_KEYS

_KEYS_BY_VALUE = {k.value: k for k in AttributeKey}

_PLAIN_TYPES = (str, int, float, bool, type(None))


def qcolor_to_rgba(color: QColor) -> List[int]:
    return [color.red(), color.green(), color.blue(), color.alpha()]


def rgba_to_qcolor(data: List[int]) -> QColor:
    if len(data) == 4:
        return QColor(data[0], data[1], data[2], data[3])
    raise ConfigurationError("Invalid color data: must be a list of 4 integers (RGBA).", detail=repr(data))


def _save_value(key, name: str, value):
    if key in COLOR_KEYS and isinstance(value, QColor):
        return qcolor_to_rgba(value)
    if key is AttributeKey.FONT and isinstance(value, QFont):
        return value.toString()
    if isinstance(value, _PLAIN_TYPES):
        return value
    if isinstance(value, (list, tuple)) and all(isinstance(v, _PLAIN_TYPES) for v in value):
        return list(value)
    raise ConfigurationError(
        f"Attribute {name!r} cannot be serialized",
        detail=type(value).__name__,
    )


def save_attributes(attributes: Mapping) -> Dict[str, Any]:
    result = {}
    for key, value in attributes.items():
        if isinstance(key, AttributeKey):
            name = key.value
        elif isinstance(key, str):
            name = key
        else:
            raise ConfigurationError(f"Attribute key {key!r} cannot be serialized")
        result[name] = _save_value(key, name, value)
    return result


def load_attributes(data: Mapping[str, Any]) -> Dict[Any, Any]:
    if not isinstance(data, Mapping):
        raise ConfigurationError("Attribute data must be a dict", detail=type(data).__name__)
    result = {}
    for name, value in data.items():
        key = _KEYS_BY_VALUE.get(name, name)
        if key in COLOR_KEYS and isinstance(value, (list, tuple)):
            result[key] = rgba_to_qcolor(list(value))
        elif key is AttributeKey.FONT and isinstance(value, str):
            qf = QFont()
            if not qf.fromString(value):
                raise ConfigurationError("Malformed font attribute", detail=value)
            result[key] = qf
        else:
            result[key] = value
    return result
