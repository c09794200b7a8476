# alphabet_coach/sign_engine/common/errors.py

class SignEngineError(Exception):
    """Base class for errors raised by the sign engine."""

class MalformedInputError(SignEngineError, ValueError):
    """A landmark frame that cannot be measured. Callers turn this into WAITING."""

class UnsupportedLetterError(SignEngineError, ValueError):
    """The requested target is not a letter A-Z. This is a caller bug."""

    def __init__(self, letter):
        super().__init__(f"Unsupported target letter: {letter!r} (expected one of A-Z)")
        self.letter = letter
