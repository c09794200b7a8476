# alphabet_coach/sign_engine/common/hand_topology.py
import string
from typing import Dict, List, Tuple
from .enums import Finger

LANDMARK_COUNT = 21

ALPHABET = string.ascii_uppercase

WRIST = 0
THUMB_CMC, THUMB_MCP, THUMB_IP, THUMB_TIP = 1, 2, 3, 4
INDEX_MCP, INDEX_PIP, INDEX_DIP, INDEX_TIP = 5, 6, 7, 8
MIDDLE_MCP, MIDDLE_PIP, MIDDLE_DIP, MIDDLE_TIP = 9, 10, 11, 12
RING_MCP, RING_PIP, RING_DIP, RING_TIP = 13, 14, 15, 16
PINKY_MCP, PINKY_PIP, PINKY_DIP, PINKY_TIP = 17, 18, 19, 20

# (base, bend joint, tip) used to measure each finger's bend.
# The thumb has no MCP/PIP pair of its own, so CMC and IP stand in for them.
FINGER_JOINTS: Dict[Finger, Tuple[int, int, int]] = {
    Finger.THUMB: (THUMB_CMC, THUMB_IP, THUMB_TIP),
    Finger.INDEX: (INDEX_MCP, INDEX_PIP, INDEX_TIP),
    Finger.MIDDLE: (MIDDLE_MCP, MIDDLE_PIP, MIDDLE_TIP),
    Finger.RING: (RING_MCP, RING_PIP, RING_TIP),
    Finger.PINKY: (PINKY_MCP, PINKY_PIP, PINKY_TIP),
}

FINGER_TIPS: Dict[Finger, int] = {finger: joints[2] for finger, joints in FINGER_JOINTS.items()}

HAND_CONNECTIONS: List[Tuple[int, int]] = [
    (0, 1), (1, 2), (2, 3), (3, 4),
    (0, 5), (5, 6), (6, 7), (7, 8),
    (5, 9), (9, 10), (10, 11), (11, 12),
    (9, 13), (13, 14), (14, 15), (15, 16),
    (13, 17), (17, 18), (18, 19), (19, 20),
    (0, 17),
]

def is_letter(value) -> bool:
    """True for a single uppercase ASCII letter A-Z."""
    return isinstance(value, str) and len(value) == 1 and value in ALPHABET
