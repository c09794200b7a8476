# alphabet_coach/sign_engine/processing/landmark_normalizer.py
from collections.abc import Mapping
import numpy as np
from ..common.errors import MalformedInputError
from ..common.hand_topology import LANDMARK_COUNT
from ..common.models import NormalizedHandFrame

def _coords(point) -> tuple:
    if hasattr(point, 'x') and hasattr(point, 'y'):
        return float(point.x), float(point.y), float(getattr(point, 'z', 0.0))
    if isinstance(point, Mapping):
        return float(point['x']), float(point['y']), float(point.get('z', 0.0))
    values = tuple(point)
    if len(values) == 2:
        return float(values[0]), float(values[1]), 0.0
    if len(values) == 3:
        return float(values[0]), float(values[1]), float(values[2])
    raise MalformedInputError(f"Landmark must have 2 or 3 coordinates, got {len(values)}")

def as_landmark_array(raw) -> np.ndarray:
    """
    Coerces one hand's landmarks into a (21, 3) float array.
    Accepts LandmarkPoints, MediaPipe-style objects, x/y/z mappings, tuples or an array.
    """
    if raw is None:
        raise MalformedInputError("No hand in frame")

    if isinstance(raw, np.ndarray):
        if raw.ndim != 2 or raw.shape[0] != LANDMARK_COUNT or raw.shape[1] not in (2, 3):
            raise MalformedInputError(f"Expected ({LANDMARK_COUNT}, 2|3) landmarks, got {raw.shape}")
        data = np.zeros((LANDMARK_COUNT, 3), dtype=np.float64)
        data[:, :raw.shape[1]] = raw
    else:
        points = list(raw)
        if len(points) != LANDMARK_COUNT:
            raise MalformedInputError(f"Expected {LANDMARK_COUNT} landmarks, got {len(points)}")
        try:
            data = np.array([_coords(p) for p in points], dtype=np.float64)
        except (TypeError, KeyError, ValueError) as e:
            raise MalformedInputError(f"Unreadable landmark: {e}") from e

    if not np.all(np.isfinite(data)):
        raise MalformedInputError("Landmarks contain non-finite coordinates")
    return data

def normalize(frame) -> NormalizedHandFrame:
    """
    Centres the hand's bounding box on (0.5, 0.5) and divides x/y by its larger side.
    Depth is left as the detector reported it.
    """
    data = as_landmark_array(frame)

    mins = data[:, :2].min(axis=0)
    maxs = data[:, :2].max(axis=0)
    size = float(np.max(maxs - mins))
    if size <= 0.0:
        raise MalformedInputError("Hand bounding box has zero size")

    center = (mins + maxs) / 2.0
    points = data.copy()
    points[:, :2] = (data[:, :2] - center) / size + 0.5
    points.flags.writeable = False
    return NormalizedHandFrame(points=points)
