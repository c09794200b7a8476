"""
Synthetic right-hand poses in image coordinates, palm toward the camera with the
thumb on the right of the image. Knuckles sit on y = 0.60 and the wrist below them.
"""
import math

WRIST = (0.50, 0.80, 0.0)
MCP_Y = 0.60
MCP_X = (0.56, 0.53, 0.50, 0.47)  # index, middle, ring, pinky

THUMB_CURLED = [(0.55, 0.75, 0.0), (0.58, 0.70, 0.0), (0.56, 0.65, 0.0), (0.51, 0.66, 0.0)]
THUMB_UP = [(0.55, 0.75, 0.0), (0.58, 0.70, 0.0), (0.61, 0.65, 0.0), (0.64, 0.60, 0.0)]
THUMB_OUT = [(0.55, 0.75, 0.0), (0.60, 0.72, 0.0), (0.65, 0.69, 0.0), (0.70, 0.66, 0.0)]
THUMB_TO_INDEX_TIP = [(0.55, 0.75, 0.0), (0.58, 0.70, 0.0), (0.61, 0.65, 0.0), (0.63, 0.52, 0.0)]
THUMB_TUCKED = [(0.55, 0.75, 0.0), (0.57, 0.70, 0.0), (0.53, 0.66, 0.0), (0.46, 0.67, 0.0)]
THUMB_TO_CURLED_INDEX = [(0.55, 0.75, 0.0), (0.56, 0.71, 0.0), (0.57, 0.67, 0.0), (0.58, 0.63, 0.0)]
THUMB_TO_MIDDLE = [(0.55, 0.75, 0.0), (0.545, 0.69, 0.0), (0.54, 0.63, 0.0), (0.535, 0.57, 0.0)]
THUMB_OVER_FINGERS = [(0.55, 0.75, 0.0), (0.58, 0.70, 0.0), (0.57, 0.64, 0.0), (0.51, 0.61, 0.0)]
THUMB_BETWEEN = [(0.55, 0.75, 0.0), (0.58, 0.69, 0.0), (0.59, 0.62, 0.0), (0.55, 0.56, 0.0)]


def straight(lean=0.0):
    """Finger held straight, leaning `lean` units sideways per unit of height."""
    def joints(x):
        return [(x + 0.06 * lean, 0.54, 0.0), (x + 0.10 * lean, 0.50, 0.0), (x + 0.14 * lean, 0.46, 0.0)]
    return joints


def curled(tip_y=0.63):
    """Finger folded into the palm, tip ending below the knuckle."""
    def joints(x):
        return [(x, 0.54, 0.0), (x, (0.54 + tip_y) / 2, -0.015), (x, tip_y, -0.03)]
    return joints


def curved(angle=2.0):
    """Finger bent at the middle joint by `angle` radians, tip hooking toward the thumb."""
    def joints(x):
        tip = (x + 0.08 * math.sin(angle), 0.54 + 0.08 * math.cos(angle), 0.0)
        dip = ((x + tip[0]) / 2, (0.54 + tip[1]) / 2, 0.0)
        return [(x, 0.54, 0.0), dip, tip]
    return joints


def build_hand(thumb=THUMB_CURLED, index=None, middle=None, ring=None, pinky=None):
    fingers = [index or curled(), middle or curled(), ring or curled(), pinky or curled()]
    points = [WRIST] + list(thumb)
    for mcp_x, finger in zip(MCP_X, fingers):
        points.append((mcp_x, MCP_Y, 0.0))
        points.extend(finger(mcp_x))
    return points


def rotate_quarter_turn(points, center=(0.5, 0.6)):
    """Rotates x/y by 90 degrees about `center`, leaving depth alone."""
    cx, cy = center
    return [(cx - (y - cy), cy + (x - cx), z) for x, y, z in points]


def scale_about_centroid(points, k):
    cx = sum(p[0] for p in points) / len(points)
    cy = sum(p[1] for p in points) / len(points)
    return [(cx + k * (x - cx), cy + k * (y - cy), z) for x, y, z in points]


def translate(points, dx, dy):
    return [(x + dx, y + dy, z) for x, y, z in points]


FIST = build_hand()
OPEN_PALM = build_hand(index=straight(), middle=straight(), ring=straight(), pinky=straight())
POSES = {
    'A': build_hand(thumb=THUMB_UP),
    'B': OPEN_PALM,
    'C': build_hand(thumb=THUMB_UP, index=curved(), middle=curved(), ring=curved(), pinky=curved()),
    'D': build_hand(index=straight(), middle=curled(0.62), ring=curled(0.63), pinky=curled(0.64)),
    'E': FIST,
    'F': build_hand(thumb=THUMB_TO_CURLED_INDEX, middle=straight(), ring=straight(), pinky=straight()),
    'I': build_hand(pinky=straight()),
    'K': build_hand(thumb=THUMB_TO_MIDDLE, index=straight(), middle=straight()),
    'L': build_hand(thumb=THUMB_OUT, index=straight()),
    'M': build_hand(thumb=THUMB_TUCKED, pinky=straight()),
    'N': build_hand(thumb=THUMB_TUCKED, ring=straight(), pinky=straight()),
    'O': build_hand(thumb=THUMB_TO_INDEX_TIP, index=curved(), middle=curved(), ring=curved(), pinky=curved()),
    'R': build_hand(index=straight(-0.2), middle=straight(0.2)),
    'S': build_hand(thumb=THUMB_OVER_FINGERS),
    'T': build_hand(thumb=THUMB_BETWEEN),
    'U': build_hand(index=straight(), middle=straight()),
    'V': build_hand(index=straight(0.6), middle=straight(-0.6)),
    'W': build_hand(index=straight(), middle=straight(), ring=straight()),
    'X': build_hand(index=curved()),
    'Y': build_hand(thumb=THUMB_OUT, pinky=straight()),
}
# sideways and upside-down letters are the upright shapes turned
POSES['G'] = rotate_quarter_turn(POSES['L'])
POSES['H'] = rotate_quarter_turn(POSES['U'])
POSES['J'] = rotate_quarter_turn(POSES['I'])
POSES['Z'] = rotate_quarter_turn(POSES['D'])
POSES['P'] = rotate_quarter_turn(rotate_quarter_turn(POSES['K']))
POSES['Q'] = rotate_quarter_turn(rotate_quarter_turn(POSES['L']))


def mirror(points):
    """Flips the hand left to right, as a left hand signing the same letter."""
    return [(1.0 - x, y, z) for x, y, z in points]
