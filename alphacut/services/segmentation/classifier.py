from __future__ import annotations

# Near-white studio backgrounds; JPEG artifacts keep "white" from being exactly 255.
BACKGROUND_THRESHOLD = 240


def is_background(r: int, g: int, b: int) -> bool:
    return r > BACKGROUND_THRESHOLD and g > BACKGROUND_THRESHOLD and b > BACKGROUND_THRESHOLD
