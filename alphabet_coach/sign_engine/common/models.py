# alphabet_coach/sign_engine/common/models.py
import numpy as np
from pydantic import BaseModel
from typing import List, Optional, Tuple
from .enums import ClassificationResult

class LandmarkPoint(BaseModel):
    """One tracked hand joint. x/y are image-relative, z is relative depth."""
    x: float
    y: float
    z: float = 0.0

    class Config:
        frozen = True

HandFrame = List[LandmarkPoint]

class NormalizedHandFrame(BaseModel):
    """21 landmarks centred on (0.5, 0.5) and scaled by the hand's bounding box."""
    points: np.ndarray

    class Config:
        arbitrary_types_allowed = True
        frozen = True

    def point(self, idx: int) -> np.ndarray:
        return self.points[idx]

class FingerMetric(BaseModel):
    """Bend state of one finger for one frame."""
    angle: float
    direction: Tuple[float, float, float]
    extended: bool
    curved: bool
    curled: bool

    class Config:
        frozen = True

class FrameMetadata(BaseModel):
    """Metadata associated with a single camera frame."""
    frame_id: int
    timestamp: float
    source_resolution: Tuple[int, int]

class FeedbackEvent(BaseModel):
    """Encapsulates the outcome of classifying a single frame against the target letter."""
    target_letter: str
    result: ClassificationResult
    timestamp: float
    processing_time_ms: float
    frame_id: Optional[int] = None

    @property
    def message(self) -> str:
        return self.result.message

    @property
    def hand_detected(self) -> bool:
        return self.result is not ClassificationResult.WAITING

class SessionSnapshot(BaseModel):
    current_letter: str
    last_result: ClassificationResult

    class Config:
        frozen = True
