# alphabet_coach/sign_engine/tracking/hand_tracker.py
import logging
from typing import Optional
import cv2
import mediapipe as mp
import numpy as np
from ..common.models import HandFrame, LandmarkPoint

logger = logging.getLogger(__name__)

class HandTracker:
    """Runs MediaPipe Hands on camera frames and hands back one hand's 21 landmarks."""

    def __init__(self, config: dict):
        self.config = config
        self.mp_hands = mp.solutions.hands
        self.hands = self.mp_hands.Hands(
            static_image_mode=False,
            max_num_hands=1,
            model_complexity=config.get('model_complexity', 1),
            min_detection_confidence=config.get('min_detection_confidence', 0.5),
            min_tracking_confidence=config.get('min_tracking_confidence', 0.5)
        )
        self.hand_visible = False

    def detect(self, frame: np.ndarray) -> Optional[HandFrame]:
        """Returns the first detected hand as landmarks, or None when no hand is visible."""
        frame_rgb = cv2.cvtColor(frame, cv2.COLOR_BGR2RGB)
        frame_rgb.flags.writeable = False # Performance optimization

        results = self.hands.process(frame_rgb)

        if not results.multi_hand_landmarks:
            if self.hand_visible:
                logger.debug("Hand lost")
            self.hand_visible = False
            return None

        if not self.hand_visible:
            logger.debug("Hand found")
        self.hand_visible = True
        return [LandmarkPoint(x=lm.x, y=lm.y, z=lm.z) for lm in results.multi_hand_landmarks[0].landmark]

    def close(self):
        self.hands.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
