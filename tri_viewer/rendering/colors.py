from __future__ import annotations

import re

from PyQt5 import QtGui

from tri_viewer.errors import InvalidConfigurationError

_RGB_FUNC = re.compile(
    r"^rgba?\(\s*(\d+)\s*,\s*(\d+)\s*,\s*(\d+)\s*(?:,\s*([0-9]*\.?[0-9]+)\s*)?\)$",
    re.IGNORECASE,
)


def parse_color(value: str | QtGui.QColor | None) -> QtGui.QColor | None:
    """Return a ``QColor`` for ``value`` or ``None`` when it disables drawing.

    Accepts anything ``QColor`` understands (``#rrggbb``, SVG names) plus CSS
    style ``rgb(r, g, b)`` and ``rgba(r, g, b, a)`` with ``a`` in ``[0, 1]``.
    ``None``, an empty string and ``"none"`` mean no colour.
    """

    if value is None:
        return None
    if isinstance(value, QtGui.QColor):
        return QtGui.QColor(value)
    text = value.strip()
    if not text or text.lower() == "none":
        return None
    match = _RGB_FUNC.match(text)
    if match:
        r, g, b = (int(match.group(n)) for n in (1, 2, 3))
        alpha = float(match.group(4)) if match.group(4) is not None else 1.0
        if max(r, g, b) > 255 or alpha > 1.0:
            raise InvalidConfigurationError(f"Colour component out of range: {value!r}.")
        color = QtGui.QColor(r, g, b)
        color.setAlphaF(alpha)
        return color
    color = QtGui.QColor(text)
    if not color.isValid():
        raise InvalidConfigurationError(f"Unrecognised colour: {value!r}.")
    return color
