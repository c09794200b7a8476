# alphabet_coach/sign_engine/processing/feedback_debouncer.py
from collections import Counter, deque
from ..common.enums import ClassificationResult

class FeedbackDebouncer:
    """
    Majority vote over the last few verdicts so the on-screen feedback does not
    flicker when a single frame disagrees with its neighbours.
    """

    def __init__(self, window: int = 5, min_votes: int = 3):
        if window < 1:
            raise ValueError(f"window must be at least 1, got {window}")
        if not 1 <= min_votes <= window:
            raise ValueError(f"min_votes must be between 1 and {window}, got {min_votes}")
        self.min_votes = min_votes
        self._history = deque(maxlen=window)
        self._stable = ClassificationResult.WAITING

    @property
    def stable(self) -> ClassificationResult:
        return self._stable

    def update(self, result: ClassificationResult) -> ClassificationResult:
        self._history.append(ClassificationResult(result))
        winner, votes = Counter(self._history).most_common(1)[0]
        if votes >= self.min_votes:
            self._stable = winner
        return self._stable

    def reset(self) -> None:
        self._history.clear()
        self._stable = ClassificationResult.WAITING
