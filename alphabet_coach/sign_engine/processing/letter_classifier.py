# alphabet_coach/sign_engine/processing/letter_classifier.py
import logging
from typing import Callable, Dict, Optional
from ..common.config import ClassifierThresholds
from ..common.enums import ClassificationResult, Finger
from ..common.errors import UnsupportedLetterError
from ..common.hand_topology import FINGER_JOINTS, FINGER_TIPS, INDEX_PIP, MIDDLE_PIP, RING_MCP, is_letter
from ..common.models import FingerMetric, NormalizedHandFrame
from . import predicates

logger = logging.getLogger(__name__)

THUMB, INDEX, MIDDLE, RING, PINKY = Finger.THUMB, Finger.INDEX, Finger.MIDDLE, Finger.RING, Finger.PINKY

class HandShape:
    """One frame's finger metrics and points, with the predicates bound to the current thresholds."""

    def __init__(self, metrics: Dict[Finger, FingerMetric], nf: NormalizedHandFrame,
                 thresholds: ClassifierThresholds):
        self.metrics = metrics
        self.nf = nf
        self.threshold = thresholds.touch_distance

    def extended(self, *fingers: Finger) -> bool:
        return all(self.metrics[f].extended for f in fingers)

    def curled(self, *fingers: Finger) -> bool:
        return all(self.metrics[f].curled for f in fingers)

    def curved(self, *fingers: Finger) -> bool:
        return all(self.metrics[f].curved for f in fingers)

    def folded(self, *fingers: Finger) -> bool:
        """Curled tighter than a curve, i.e. tucked into the palm."""
        return all(self.metrics[f].curled and not self.metrics[f].curved for f in fingers)

    def tip(self, finger: Finger):
        return self.nf.point(FINGER_TIPS[finger])

    def touching(self, a, b) -> bool:
        return predicates.touching(self._resolve(a), self._resolve(b), self.threshold)

    def adjacent(self, a: Finger, b: Finger) -> bool:
        return predicates.adjacent(self.tip(a), self.tip(b), self.threshold)

    def spread(self, a: Finger, b: Finger) -> bool:
        return predicates.spread(self.tip(a), self.tip(b), self.threshold)

    def crossed(self, a: Finger, b: Finger) -> bool:
        base_a, base_b = (self.nf.point(FINGER_JOINTS[f][0]) for f in (a, b))
        return predicates.crossed(self.tip(a), self.tip(b), base_a, base_b)

    def points_down(self, finger: Finger) -> bool:
        return predicates.points_down(self.metrics[finger])

    @property
    def vertical(self) -> bool:
        return predicates.is_hand_vertical(self.nf)

    @property
    def thumb_across(self) -> bool:
        return predicates.thumb_across_palm(self.nf)

    def _resolve(self, ref):
        # fingers mean their tips, ints are raw landmark indices
        if isinstance(ref, Finger):
            return self.tip(ref)
        return self.nf.point(ref)

Rule = Callable[[HandShape], bool]

# Every rule pins all five fingers, the thumb included, to a definite state.

def _a(h: HandShape) -> bool:
    return h.curled(INDEX, MIDDLE, RING, PINKY) and h.extended(THUMB) and not h.thumb_across and h.vertical

def _b(h: HandShape) -> bool:
    return h.extended(INDEX, MIDDLE, RING, PINKY) and h.curled(THUMB) and h.vertical and h.adjacent(INDEX, MIDDLE)

def _c(h: HandShape) -> bool:
    return h.curved(INDEX, MIDDLE, RING, PINKY) and h.extended(THUMB) and not h.touching(THUMB, INDEX)

def _d(h: HandShape) -> bool:
    others = min(h.tip(MIDDLE)[1], h.tip(RING)[1], h.tip(PINKY)[1])
    return (h.extended(INDEX) and h.curled(MIDDLE, RING, PINKY) and h.curled(THUMB)
            and h.vertical and h.tip(INDEX)[1] < others and h.tip(THUMB)[0] < h.tip(INDEX)[0])

def _e(h: HandShape) -> bool:
    return h.folded(INDEX, MIDDLE, RING, PINKY) and h.curled(THUMB) and h.tip(THUMB)[1] > h.tip(INDEX)[1]

def _f(h: HandShape) -> bool:
    return (h.curled(INDEX) and h.extended(MIDDLE, RING, PINKY) and h.extended(THUMB)
            and h.touching(THUMB, INDEX) and h.vertical)

def _g(h: HandShape) -> bool:
    return h.extended(INDEX, THUMB) and h.curled(MIDDLE, RING, PINKY) and not h.vertical

def _h(h: HandShape) -> bool:
    return (h.extended(INDEX, MIDDLE) and h.curled(RING, PINKY) and h.curled(THUMB) and not h.vertical
            and h.adjacent(INDEX, MIDDLE))

def _i(h: HandShape) -> bool:
    return h.curled(INDEX, MIDDLE, RING) and h.extended(PINKY) and h.curled(THUMB) and h.vertical

def _j(h: HandShape) -> bool:
    # static stand-in for the traced J: the I shape tipped over at the end of the stroke
    return h.curled(INDEX, MIDDLE, RING) and h.extended(PINKY) and h.curled(THUMB) and not h.vertical

def _k(h: HandShape) -> bool:
    return (h.extended(INDEX, MIDDLE, THUMB) and h.curled(RING, PINKY) and h.vertical
            and not h.points_down(INDEX) and h.touching(THUMB, MIDDLE_PIP))

def _l(h: HandShape) -> bool:
    return (h.extended(INDEX, THUMB) and h.curled(MIDDLE, RING, PINKY) and h.vertical
            and not h.points_down(INDEX) and h.spread(THUMB, INDEX))

def _m(h: HandShape) -> bool:
    return (h.curled(INDEX, MIDDLE, RING) and h.extended(PINKY) and h.curled(THUMB)
            and h.tip(THUMB)[0] < h.nf.point(RING_MCP)[0])

def _n(h: HandShape) -> bool:
    return (h.curled(INDEX, MIDDLE) and h.extended(RING, PINKY) and h.curled(THUMB)
            and h.tip(THUMB)[0] < h.nf.point(RING_MCP)[0])

def _o(h: HandShape) -> bool:
    return h.curved(INDEX, MIDDLE, RING, PINKY) and h.extended(THUMB) and h.touching(THUMB, INDEX)

def _p(h: HandShape) -> bool:
    return h.extended(INDEX, MIDDLE) and h.curled(RING, PINKY) and h.extended(THUMB) and h.points_down(INDEX)

def _q(h: HandShape) -> bool:
    return h.extended(INDEX, THUMB) and h.curled(MIDDLE, RING, PINKY) and h.points_down(INDEX)

def _two_up(h: HandShape) -> bool:
    """Index and middle up, ring and pinky down, thumb holding them: the base of U, V and R."""
    return h.extended(INDEX, MIDDLE) and h.curled(RING, PINKY) and h.curled(THUMB) and h.vertical

def _r(h: HandShape) -> bool:
    return _two_up(h) and h.adjacent(INDEX, MIDDLE) and h.crossed(INDEX, MIDDLE)

def _s(h: HandShape) -> bool:
    return (h.curled(INDEX, MIDDLE, RING, PINKY) and h.curled(THUMB) and h.thumb_across
            and h.tip(THUMB)[1] <= h.tip(INDEX)[1] and not h.touching(THUMB, INDEX_PIP))

def _t(h: HandShape) -> bool:
    return h.curled(INDEX, MIDDLE, RING, PINKY) and h.curled(THUMB) and h.touching(THUMB, INDEX_PIP)

def _u(h: HandShape) -> bool:
    return _two_up(h) and h.adjacent(INDEX, MIDDLE) and not h.crossed(INDEX, MIDDLE)

def _v(h: HandShape) -> bool:
    return _two_up(h) and h.spread(INDEX, MIDDLE)

def _w(h: HandShape) -> bool:
    return h.extended(INDEX, MIDDLE, RING) and h.curled(PINKY) and h.curled(THUMB) and h.vertical

def _x(h: HandShape) -> bool:
    return (h.curved(INDEX) and h.folded(MIDDLE, RING, PINKY) and h.curled(THUMB) and h.vertical
            and not h.touching(THUMB, INDEX))

def _y(h: HandShape) -> bool:
    return h.extended(THUMB, PINKY) and h.curled(INDEX, MIDDLE, RING) and h.spread(THUMB, PINKY)

def _z(h: HandShape) -> bool:
    # static stand-in for the traced Z: a single index finger held sideways
    return h.extended(INDEX) and h.curled(MIDDLE, RING, PINKY) and h.curled(THUMB) and not h.vertical

LETTER_RULES: Dict[str, Rule] = {
    'A': _a, 'B': _b, 'C': _c, 'D': _d, 'E': _e, 'F': _f, 'G': _g,
    'H': _h, 'I': _i, 'J': _j, 'K': _k, 'L': _l, 'M': _m, 'N': _n,
    'O': _o, 'P': _p, 'Q': _q, 'R': _r, 'S': _s, 'T': _t, 'U': _u,
    'V': _v, 'W': _w, 'X': _x, 'Y': _y, 'Z': _z,
}

# Letters that are signed with motion; the rules above only check the final pose.
STATIC_APPROXIMATIONS = frozenset({'J', 'Z'})

class LetterClassifier:
    """Decides whether one hand frame shows the requested letter."""

    def __init__(self, thresholds: Optional[ClassifierThresholds] = None):
        self.thresholds = thresholds or ClassifierThresholds()

    def classify(self, letter: str, metrics: Dict[Finger, FingerMetric],
                 nf: NormalizedHandFrame) -> ClassificationResult:
        if not is_letter(letter):
            raise UnsupportedLetterError(letter)

        shape = HandShape(metrics, nf, self.thresholds)
        matched = bool(LETTER_RULES[letter](shape))
        logger.debug("Letter %s rule %s", letter, "matched" if matched else "not matched")
        return ClassificationResult.CORRECT if matched else ClassificationResult.INCORRECT
