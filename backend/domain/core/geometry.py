"""
Plane geometry helpers for floor polygons
"""

import math
from typing import Sequence, Tuple

import numpy as np


def polygon_area(vertices: Sequence[Tuple[float, float]]) -> float:
    """Area of a simple polygon using the shoelace formula"""
    if len(vertices) < 3:
        return 0.0

    points = np.asarray(vertices, dtype=float)
    x = points[:, 0]
    y = points[:, 1]
    # x_i * y_{i+1} - x_{i+1} * y_i, wrapping back to the first vertex
    cross = x * np.roll(y, -1) - np.roll(x, -1) * y
    return float(abs(cross.sum()) / 2.0)


def round_half_up(value: float) -> int:
    """Round to the nearest integer with halves rounded up"""
    return int(math.floor(value + 0.5))
