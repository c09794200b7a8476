# alphabet_coach/sign_engine/processing/predicates.py
"""
Reusable geometric tests over the normalized hand frame.

Every distance threshold is a fraction of the hand's bounding box, so the same
numbers hold whether the hand is near the camera or far from it.
"""
import numpy as np
from ..common.config import DEFAULT_TOUCH_DISTANCE
from ..common.hand_topology import INDEX_MCP, PINKY_MCP, THUMB_TIP, WRIST
from ..common.models import FingerMetric, NormalizedHandFrame

def euclidean(p1, p2) -> float:
    return float(np.linalg.norm(np.asarray(p1, dtype=float) - np.asarray(p2, dtype=float)))

def touching(p1, p2, threshold: float = DEFAULT_TOUCH_DISTANCE) -> bool:
    return euclidean(p1, p2) < threshold

def adjacent(tip_a, tip_b, threshold: float = DEFAULT_TOUCH_DISTANCE) -> bool:
    """Two fingertips held side by side (horizontal gap below the threshold)."""
    return abs(float(tip_a[0]) - float(tip_b[0])) < threshold

def spread(tip_a, tip_b, threshold: float = DEFAULT_TOUCH_DISTANCE) -> bool:
    """Two fingertips held apart (horizontal gap above twice the threshold)."""
    return abs(float(tip_a[0]) - float(tip_b[0])) > 2 * threshold

def crossed(tip_a, tip_b, base_a, base_b) -> bool:
    """Two fingers whose tips sit in the opposite left-right order to their knuckles."""
    return (float(tip_a[0]) - float(tip_b[0])) * (float(base_a[0]) - float(base_b[0])) < 0

def palm_direction(nf: NormalizedHandFrame) -> np.ndarray:
    knuckles = (nf.point(INDEX_MCP) + nf.point(PINKY_MCP)) / 2.0
    return knuckles - nf.point(WRIST)

def is_hand_vertical(nf: NormalizedHandFrame) -> bool:
    direction = palm_direction(nf)
    return abs(direction[1]) > abs(direction[0])

def thumb_across_palm(nf: NormalizedHandFrame) -> bool:
    return nf.point(THUMB_TIP)[0] < nf.point(INDEX_MCP)[0]

def points_down(metric: FingerMetric) -> bool:
    # image y grows downward
    return metric.direction[1] > 0
