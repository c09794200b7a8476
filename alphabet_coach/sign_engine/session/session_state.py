# alphabet_coach/sign_engine/session/session_state.py
import logging
from typing import Callable, List
from ..common.enums import ClassificationResult
from ..common.hand_topology import ALPHABET, is_letter
from ..common.models import SessionSnapshot

logger = logging.getLogger(__name__)

Listener = Callable[[SessionSnapshot], None]

class SessionState:
    """
    The practice session's single source of truth: the letter being practised and
    the verdict for the latest frame.

    Navigation calls and the frame pipeline are expected to run on the same thread.
    Listeners are called synchronously, in registration order, whenever the snapshot
    changes.
    """

    def __init__(self):
        self._current_letter = ALPHABET[0]
        self._last_result = ClassificationResult.WAITING
        self._listeners: List[Listener] = []

    @property
    def current_letter(self) -> str:
        return self._current_letter

    @property
    def last_result(self) -> ClassificationResult:
        return self._last_result

    def snapshot(self) -> SessionSnapshot:
        return SessionSnapshot(current_letter=self._current_letter, last_result=self._last_result)

    def next_letter(self) -> None:
        """Advances one letter, wrapping from Z back to A."""
        idx = ALPHABET.index(self._current_letter)
        self._update(letter=ALPHABET[(idx + 1) % len(ALPHABET)])

    def previous_letter(self) -> None:
        """Steps back one letter. Stays on A rather than wrapping to Z."""
        idx = ALPHABET.index(self._current_letter)
        if idx > 0:
            self._update(letter=ALPHABET[idx - 1])

    def set_letter(self, code) -> None:
        """Jumps to a letter given as a single character, any case. Anything else is ignored."""
        if not isinstance(code, str) or len(code) != 1 or not code.isascii():
            logger.debug("Ignoring set_letter(%r): not a single ASCII character", code)
            return
        letter = code.upper()
        if not is_letter(letter):
            logger.debug("Ignoring set_letter(%r): not a letter A-Z", code)
            return
        self._update(letter=letter)

    def record_result(self, result: ClassificationResult) -> None:
        self._update(result=ClassificationResult(result))

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Registers a change listener and returns a callable that removes it again."""
        self._listeners.append(listener)

        def unsubscribe():
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _update(self, letter=None, result=None) -> None:
        before = (self._current_letter, self._last_result)
        if letter is not None:
            self._current_letter = letter
        if result is not None:
            self._last_result = result
        if (self._current_letter, self._last_result) == before:
            return

        snapshot = self.snapshot()
        for listener in list(self._listeners):
            listener(snapshot)
