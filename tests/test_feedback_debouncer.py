import pytest

from sign_engine.common.enums import ClassificationResult
from sign_engine.processing.feedback_debouncer import FeedbackDebouncer

W = ClassificationResult.WAITING
C = ClassificationResult.CORRECT
I = ClassificationResult.INCORRECT


def feed(debouncer, results):
    return [debouncer.update(r) for r in results]


def test_starts_waiting():
    assert FeedbackDebouncer().stable is W


def test_needs_enough_votes_before_switching():
    debouncer = FeedbackDebouncer(window=5, min_votes=3)
    assert feed(debouncer, [C, C, C]) == [W, W, C]


def test_single_odd_frame_does_not_flicker():
    debouncer = FeedbackDebouncer(window=5, min_votes=3)
    feed(debouncer, [C, C, C, C])
    assert debouncer.update(I) is C
    assert debouncer.update(C) is C


def test_window_forgets_old_frames():
    debouncer = FeedbackDebouncer(window=3, min_votes=2)
    feed(debouncer, [C, C, C])
    assert feed(debouncer, [I, I]) == [C, I]


def test_reset():
    debouncer = FeedbackDebouncer(window=3, min_votes=2)
    feed(debouncer, [C, C])
    debouncer.reset()
    assert debouncer.stable is W
    assert debouncer.update(I) is W


@pytest.mark.parametrize("window,min_votes", [(0, 1), (3, 0), (3, 4)])
def test_rejects_bad_settings(window, min_votes):
    with pytest.raises(ValueError):
        FeedbackDebouncer(window, min_votes)
