# alphabet_coach/sign_engine/processing/frame_pipeline.py
import logging
import time
from typing import Optional
from ..common.config import ClassifierThresholds
from ..common.enums import ClassificationResult
from ..common.errors import MalformedInputError, UnsupportedLetterError
from ..common.hand_topology import is_letter
from ..common.models import FeedbackEvent, FrameMetadata
from ..session.session_state import SessionState
from .finger_analyzer import FingerGeometryAnalyzer
from .landmark_normalizer import normalize
from .letter_classifier import LetterClassifier

logger = logging.getLogger(__name__)

class FramePipeline:
    """Orchestrates normalization, finger analysis and letter classification for one hand frame."""

    def __init__(self, thresholds: Optional[ClassifierThresholds] = None):
        self.thresholds = thresholds or ClassifierThresholds()
        self.analyzer = FingerGeometryAnalyzer(self.thresholds)
        self.classifier = LetterClassifier(self.thresholds)

    def process_frame(self, raw, target: str) -> ClassificationResult:
        """
        Classifies one frame against the target letter. Keeps no state between calls.
        Any frame that cannot be measured yields WAITING; a bad target raises.
        """
        if not is_letter(target):
            raise UnsupportedLetterError(target)

        if raw is None:
            return ClassificationResult.WAITING

        try:
            nf = normalize(raw)
            metrics = self.analyzer.analyze(nf)
        except MalformedInputError as e:
            logger.debug("Frame skipped: %s", e)
            return ClassificationResult.WAITING

        return self.classifier.classify(target, metrics, nf)

    def process(self, raw, session: SessionState,
                metadata: Optional[FrameMetadata] = None) -> FeedbackEvent:
        """Runs one frame for the session's current letter and records the verdict on the session."""
        start_time = time.perf_counter()

        target = session.current_letter
        result = self.process_frame(raw, target)
        session.record_result(result)

        processing_time_ms = (time.perf_counter() - start_time) * 1000
        return FeedbackEvent(
            target_letter=target,
            result=result,
            timestamp=metadata.timestamp if metadata else time.perf_counter(),
            processing_time_ms=processing_time_ms,
            frame_id=metadata.frame_id if metadata else None,
        )

_default_pipeline = FramePipeline()

def process_frame(raw, target: str) -> ClassificationResult:
    """process_frame with the default thresholds."""
    return _default_pipeline.process_frame(raw, target)
