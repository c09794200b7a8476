# alphabet_coach/sign_engine/camera/camera_manager.py
import cv2
import logging
import time
import threading
import numpy as np
from collections import deque
from typing import Tuple, Optional
from ..common.models import FrameMetadata

logger = logging.getLogger(__name__)

class CameraManager:
    """
    Grabs webcam frames on a background thread into a small bounded buffer.

    The buffer is the hand-off point between the capture thread and the practice
    loop: the loop only ever reads the newest frame, so classification never
    overlaps and stale frames are dropped rather than queued.
    """

    def __init__(self, config: dict):
        self.config = config
        self._source = config.get('source', 0)
        width, height = config.get('resolution', (640, 480))
        self._target_fps = config.get('target_fps', 30)

        self._cap = cv2.VideoCapture(self._source)
        if not self._cap.isOpened():
            raise IOError(f"Cannot open camera source: {self._source}")
        for prop, value in ((cv2.CAP_PROP_FRAME_WIDTH, width),
                            (cv2.CAP_PROP_FRAME_HEIGHT, height),
                            (cv2.CAP_PROP_FPS, self._target_fps)):
            self._cap.set(prop, value)

        # newest last; each entry is (frame, metadata)
        self._latest = deque(maxlen=config.get('buffer_size', 5))
        self._lock = threading.Lock()
        self._stop = threading.Event()
        self._stop.set()
        self._worker = threading.Thread(target=self._capture_loop, name="camera-capture", daemon=True)
        self._captured = 0
        self._failed_reads = 0
        self._started_at = None

    def _capture_loop(self):
        while not self._stop.is_set():
            ok, frame = self._cap.read()
            if not ok or frame is None:
                self._failed_reads += 1
                self._stop.wait(0.01)
                continue
            self._captured += 1
            metadata = FrameMetadata(
                frame_id=self._captured,
                timestamp=time.perf_counter(),
                source_resolution=(frame.shape[1], frame.shape[0]),
            )
            with self._lock:
                self._latest.append((frame, metadata))

    def get_frame(self) -> Tuple[Optional[np.ndarray], Optional[FrameMetadata]]:
        """Returns a copy of the newest frame and its metadata, or (None, None) before the first frame."""
        with self._lock:
            if not self._latest:
                return None, None
            frame, metadata = self._latest[-1]
        return frame.copy(), metadata

    def get_stats(self) -> dict:
        elapsed = time.perf_counter() - self._started_at if self._started_at else 0.0
        return {
            "is_running": self.is_running(),
            "buffer_size": len(self._latest),
            "frames_captured": self._captured,
            "failed_reads": self._failed_reads,
            "capture_fps": self._captured / elapsed if elapsed > 0 else 0.0,
            "target_fps": self._target_fps,
        }

    def is_running(self) -> bool:
        return not self._stop.is_set()

    def __enter__(self):
        self._stop.clear()
        self._started_at = time.perf_counter()
        self._worker.start()
        logger.info("Camera %s opened", self._source)
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self._stop.set()
        self._worker.join(timeout=1.0)
        self._cap.release()
        logger.info("Camera %s released after %d frames (%d failed reads)",
                    self._source, self._captured, self._failed_reads)
