# alphabet_coach/main.py
import cv2
import logging
import os
import time
import yaml
import numpy as np
from collections import deque
from pydantic import ValidationError

from sign_engine.camera.camera_manager import CameraManager
from sign_engine.common.config import load_config, thresholds_from_config
from sign_engine.common.enums import LogLevel
from sign_engine.processing.feedback_debouncer import FeedbackDebouncer
from sign_engine.processing.frame_pipeline import FramePipeline
from sign_engine.session.session_state import SessionState
from sign_engine.tracking.hand_tracker import HandTracker
from sign_engine.visualization.visualizer import Visualizer

logger = logging.getLogger("alphabet_coach")

ESC = 27
NO_KEY = 0xFF

def handle_key(key: int, session: SessionState) -> bool:
    """Applies one keypress to the session. Returns False when the user asked to quit."""
    if key == ESC:
        return False
    if key == ord(']'):
        session.next_letter()
    elif key == ord('['):
        session.previous_letter()
    elif key != NO_KEY:
        session.set_letter(chr(key))
    return True

def main():
    """
    The practice loop: camera -> hand tracker -> frame pipeline -> overlay.
    Initializes, runs, and gracefully shuts down the components.
    """
    config_path = os.path.join(os.path.dirname(os.path.abspath(__file__)), 'config.yaml')
    try:
        config = load_config(config_path)
        level = LogLevel(str(config['logging'].get('level', 'INFO')).upper())
        thresholds = thresholds_from_config(config)
    except (IOError, yaml.YAMLError, ValidationError, ValueError) as e:
        logging.basicConfig(level=logging.INFO)
        logger.error("Failed to load configuration '%s': %s", config_path, e)
        return

    logging.basicConfig(level=level.value, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    session = SessionState()
    pipeline = FramePipeline(thresholds)
    feedback_config = config['feedback']
    debouncer = None
    if feedback_config.get('debounce', True):
        debouncer = FeedbackDebouncer(feedback_config.get('window', 5), feedback_config.get('min_votes', 3))

    shown_letter = session.current_letter

    def on_session_change(snapshot):
        nonlocal shown_letter
        if snapshot.current_letter != shown_letter:
            shown_letter = snapshot.current_letter
            logger.info("Practising letter %s", shown_letter)
            if debouncer:
                debouncer.reset()

    session.subscribe(on_session_change)
    fps_history = deque(maxlen=100)
    tracker = None

    try:
        with CameraManager(config['camera']) as camera:
            tracker = HandTracker(config['tracking'])
            visualizer = Visualizer(config['visualization'])
            logger.info("Practising letter %s", session.current_letter)

            while camera.is_running():
                frame_start_time = time.perf_counter()

                frame, metadata = camera.get_frame()
                if frame is None:
                    time.sleep(0.001)
                    continue

                hand = tracker.detect(frame)
                event = pipeline.process(hand, session, metadata)
                shown = debouncer.update(event.result) if debouncer else event.result

                latency = time.perf_counter() - frame_start_time
                fps_history.append(1.0 / latency if latency > 0 else 0)
                avg_fps = np.mean(fps_history)

                output_frame = visualizer.render(frame, event, shown, hand, avg_fps)
                cv2.imshow('Alphabet Coach', output_frame)

                if not handle_key(cv2.waitKey(1) & 0xFF, session):
                    logger.info("Shutdown signal received.")
                    break

            stats = camera.get_stats()
            logger.info("Captured %d frames at %.1f fps (%d failed reads)",
                        stats["frames_captured"], stats["capture_fps"], stats["failed_reads"])

    except IOError as e:
        logger.error("Failed to initialize camera: %s", e)
    except KeyError as e:
        logger.error("Missing configuration key: %s", e)
    finally:
        if tracker is not None:
            tracker.close()
        cv2.destroyAllWindows()
        logger.info("Application terminated.")

if __name__ == "__main__":
    main()
