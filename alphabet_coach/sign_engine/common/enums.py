# alphabet_coach/sign_engine/common/enums.py
from enum import Enum

class Finger(str, Enum):
    """The five digits, in landmark order."""
    THUMB = "thumb"
    INDEX = "index"
    MIDDLE = "middle"
    RING = "ring"
    PINKY = "pinky"

class ClassificationResult(str, Enum):
    """Per-frame verdict for the requested letter."""
    WAITING = "waiting"
    CORRECT = "correct"
    INCORRECT = "incorrect"

    @property
    def message(self) -> str:
        if self is ClassificationResult.CORRECT:
            return "Correct!"
        if self is ClassificationResult.INCORRECT:
            return "Try again"
        return "Waiting..."

class LogLevel(str, Enum):
    """Defines logging levels for structured logging."""
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
