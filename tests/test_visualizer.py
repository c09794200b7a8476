import numpy as np
import pytest

from sign_engine.common.enums import ClassificationResult
from sign_engine.common.models import FeedbackEvent, LandmarkPoint
from sign_engine.visualization.visualizer import Visualizer

from poses import OPEN_PALM


@pytest.fixture
def frame():
    return np.zeros((480, 640, 3), dtype=np.uint8)


def make_event(result):
    return FeedbackEvent(target_letter='B', result=result, timestamp=0.0, processing_time_ms=0.4)


def test_render_returns_annotated_copy(frame):
    hand = [LandmarkPoint(x=x, y=y, z=z) for x, y, z in OPEN_PALM]
    output = Visualizer({'draw_landmarks': True, 'draw_hud': True}).render(
        frame, make_event(ClassificationResult.CORRECT), hand=hand, current_fps=29.7)

    assert output.shape == frame.shape
    assert output.any()
    assert not frame.any()


def test_landmarks_are_drawn_where_the_hand_is(frame):
    hand = [LandmarkPoint(x=x, y=y, z=z) for x, y, z in OPEN_PALM]
    visualizer = Visualizer({'draw_landmarks': True, 'draw_hud': False})

    with_hand = visualizer.render(frame, make_event(ClassificationResult.CORRECT), hand=hand)
    without_hand = visualizer.render(frame, make_event(ClassificationResult.CORRECT))

    wrist_x, wrist_y = int(round(0.5 * 640)), int(round(0.8 * 480))
    assert with_hand[wrist_y, wrist_x].any()
    assert not without_hand[wrist_y, wrist_x].any()


def test_feedback_override_changes_the_message_colour(frame):
    visualizer = Visualizer({'draw_hud': False})
    event = make_event(ClassificationResult.INCORRECT)

    raw = visualizer.render(frame, event)
    debounced = visualizer.render(frame, event, feedback=ClassificationResult.CORRECT)

    assert not np.array_equal(raw, debounced)


def test_lost_hand_hides_the_debounced_verdict(frame):
    visualizer = Visualizer({'draw_hud': False})
    waiting = make_event(ClassificationResult.WAITING)

    stale = visualizer.render(frame, waiting, feedback=ClassificationResult.CORRECT)
    plain = visualizer.render(frame, waiting)

    assert not waiting.hand_detected
    assert np.array_equal(stale, plain)
