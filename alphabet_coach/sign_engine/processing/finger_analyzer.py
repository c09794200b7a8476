# alphabet_coach/sign_engine/processing/finger_analyzer.py
import logging
import math
from typing import Dict, Optional
import numpy as np
from ..common.config import ClassifierThresholds
from ..common.enums import Finger
from ..common.errors import MalformedInputError
from ..common.hand_topology import FINGER_JOINTS
from ..common.models import FingerMetric, NormalizedHandFrame

logger = logging.getLogger(__name__)

class FingerGeometryAnalyzer:
    """
    Measures how far each finger is bent from the normalized landmarks.

    The bend angle is taken at the middle joint between the segment back to the
    knuckle and the segment out to the tip, so a straight finger reads close to pi
    no matter which way the hand is turned.
    """

    def __init__(self, thresholds: Optional[ClassifierThresholds] = None):
        self.thresholds = thresholds or ClassifierThresholds()

    def analyze(self, nf: NormalizedHandFrame) -> Dict[Finger, FingerMetric]:
        return {finger: self._measure(finger, nf) for finger in Finger}

    def metric(self, angle: float, direction) -> FingerMetric:
        """Builds a FingerMetric, deriving the posture flags from the angle."""
        t = self.thresholds
        return FingerMetric(
            angle=angle,
            direction=tuple(float(c) for c in direction),
            extended=angle > t.extended_angle,
            curved=t.curved_min_angle < angle < t.curved_max_angle,
            curled=angle <= t.curled_max_angle,
        )

    def _measure(self, finger: Finger, nf: NormalizedHandFrame) -> FingerMetric:
        base_idx, joint_idx, tip_idx = FINGER_JOINTS[finger]
        base, joint, tip = nf.point(base_idx), nf.point(joint_idx), nf.point(tip_idx)

        v1 = joint - base
        v2 = tip - joint
        n1 = float(np.linalg.norm(v1))
        n2 = float(np.linalg.norm(v2))
        if n1 < self.thresholds.min_segment_length or n2 < self.thresholds.min_segment_length:
            raise MalformedInputError(f"Degenerate {finger.value} joints")

        cosine = float(np.dot(v1, v2)) / (n1 * n2)
        deviation = math.acos(max(-1.0, min(1.0, cosine)))
        angle = math.pi - deviation

        logger.debug("%s bend angle %.3f rad", finger.value, angle)
        return self.metric(angle, tip - base)
