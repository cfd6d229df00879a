"""Debug rendering helpers."""

from __future__ import annotations

import math
import sys
from decimal import Decimal
from typing import Any, Optional, Sequence, TextIO

from .shape import get_dimension

CELL_WIDTH = 6
NEGATIVE_RGB = "0, 255, 255"
POSITIVE_RGB = "255, 150, 0"


def display(name: str, m: Sequence[Sequence[Any]], file: Optional[TextIO] = None) -> None:
    """Print ``m`` as a bordered table labelled ``name``.

    Each cell is rendered with ``str`` and cut to six characters.
    """

    out = file if file is not None else sys.stdout
    rows, cols = get_dimension(m)
    cap = " " + "-" * CELL_WIDTH
    cap = cap * cols

    out.write(name + "\n")
    out.write(cap + "\n")
    for row in range(rows):
        line = "".join(" " + str(m[row][col])[:CELL_WIDTH] for col in range(cols))
        out.write(line + "\n")
    out.write(cap + "\n\n")


def _alpha_text(ratio: float) -> str:
    """Render ``ratio`` the way a browser's ``Number.toString`` does, cut to 4 characters."""

    if math.isnan(ratio):
        return "NaN"
    if ratio.is_integer():
        return str(int(ratio))

    text = repr(ratio)
    if "e" in text:
        if ratio >= 1e-6:
            # fixed-point down to 1e-6; repr switches to exponents below 1e-4
            text = format(Decimal(text), "f")
        else:
            mantissa, exponent = text.split("e")
            text = f"{mantissa}e{int(exponent)}"
    return text[:4]


def weight_to_color(weight: float) -> str:
    """Map a weight to an ``rgba(...)`` string for visualisation.

    Opacity grows with ``|weight|`` and saturates at 4; the hue tells the sign.
    A NaN weight keeps the positive hue with a ``NaN`` alpha.
    """

    if isinstance(weight, float) and math.isnan(weight):
        ratio = math.nan
    else:
        ratio = min(100, abs(weight * 25)) / 100
    alpha = _alpha_text(ratio)
    if weight < 0:
        return f"rgba({NEGATIVE_RGB}, {alpha})"
    return f"rgba({POSITIVE_RGB}, {alpha})"


__all__ = ["display", "weight_to_color"]
