# alphabet_coach/sign_engine/visualization/visualizer.py
import cv2
import numpy as np
from typing import Optional
from ..common.enums import ClassificationResult
from ..common.hand_topology import HAND_CONNECTIONS
from ..common.models import FeedbackEvent, HandFrame

FEEDBACK_COLORS = {
    ClassificationResult.CORRECT: (60, 200, 60),
    ClassificationResult.INCORRECT: (40, 40, 230),
    ClassificationResult.WAITING: (170, 170, 170),
}

class Visualizer:
    """Draws the tracked hand, the target letter and the practice feedback over the camera frame."""

    def __init__(self, config: dict):
        self.config = config
        self.font = cv2.FONT_HERSHEY_SIMPLEX

    def render(self, frame: np.ndarray, event: FeedbackEvent, feedback: Optional[ClassificationResult] = None,
               hand: Optional[HandFrame] = None, current_fps: float = 0.0) -> np.ndarray:
        """
        Returns an annotated copy of the frame. `feedback` is the (possibly debounced)
        verdict to show; it defaults to the event's own result.
        """
        output_frame = frame.copy()
        feedback = feedback or event.result

        if hand and self.config.get('draw_landmarks', True):
            self._draw_hand(output_frame, hand)

        self._draw_prompt(output_frame, event, feedback)

        if self.config.get('draw_hud', True):
            self._draw_hud(output_frame, event, current_fps)

        return output_frame

    def _draw_hand(self, frame: np.ndarray, hand: HandFrame):
        h, w = frame.shape[:2]
        pts = [(int(round(lm.x * w)), int(round(lm.y * h))) for lm in hand]
        for a, b in HAND_CONNECTIONS:
            if a < len(pts) and b < len(pts):
                cv2.line(frame, pts[a], pts[b], (200, 200, 200), 2, cv2.LINE_AA)
        for pt in pts:
            cv2.circle(frame, pt, 4, (0, 0, 255), -1, lineType=cv2.LINE_AA)

    def _draw_prompt(self, frame: np.ndarray, event: FeedbackEvent, feedback: ClassificationResult):
        h, w = frame.shape[:2]
        cv2.putText(frame, f"Letter {event.target_letter}", (w - 170, 40), self.font, 1.0, (240, 240, 240), 2, cv2.LINE_AA)
        message = feedback.message
        if not event.hand_detected:
            # a stale debounced verdict must not outlive the hand
            feedback, message = ClassificationResult.WAITING, "No hand detected"
        cv2.putText(frame, message, (10, h - 15), self.font, 0.9, FEEDBACK_COLORS[feedback], 2, cv2.LINE_AA)

    def _draw_hud(self, frame: np.ndarray, event: FeedbackEvent, fps: float):
        hud_elements = [
            f"FPS: {fps:.1f}",
            f"Classify: {event.processing_time_ms:.2f} ms",
            "[ / ] prev / next, letter key to jump, Esc to quit",
        ]
        for i, text in enumerate(hud_elements):
            cv2.putText(frame, text, (10, 30 + i * 25), self.font, 0.55, (240, 240, 240), 1, cv2.LINE_AA)
