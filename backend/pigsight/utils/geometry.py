"""Leaf-node bounding-box helpers. No engine imports."""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np

from pigsight.models.detection import BoundingBox


def union_box(boxes: Sequence[BoundingBox]) -> BoundingBox | None:
    """Smallest box covering every box's (x, y) .. (x + w, y + h) span."""
    if not boxes:
        return None
    arr = np.array([(b.x, b.y, b.x + b.width, b.y + b.height) for b in boxes], dtype=np.float64)
    xmin = float(np.min(arr[:, 0]))
    ymin = float(np.min(arr[:, 1]))
    xmax = float(np.max(arr[:, 2]))
    ymax = float(np.max(arr[:, 3]))
    return BoundingBox(x=xmin, y=ymin, width=xmax - xmin, height=ymax - ymin)


def mean_height(boxes: Sequence[BoundingBox]) -> float:
    if not boxes:
        return 0.0
    return float(np.mean([b.height for b in boxes]))


def safe_ratio(numerator: float, denominator: float) -> float | None:
    """numerator / denominator, or None when the denominator is degenerate."""
    if not np.isfinite(denominator) or denominator <= 0:
        return None
    ratio = numerator / denominator
    if not np.isfinite(ratio):
        return None
    return float(ratio)
