"""
Auto-rotation schedule.

Each plane follows sin(tick * f) * 180 + 180 degrees, f being the plane's
frequency, and the tick advances by TICK_STEP every FRAME_INTERVAL_MS.
The schedule is pure; whoever plays it back owns the timer.
"""

import numpy as np

from tesseract.projection import Rotations, rotations_from_degrees

FRAME_INTERVAL_MS = 50
TICK_STEP = 0.5
PLANE_FREQUENCIES = (0.02, 0.015, 0.01)  # WX, WY, WZ


def auto_rotation_degrees(tick):
    return tuple(float(np.sin(tick * f) * 180.0 + 180.0) for f in PLANE_FREQUENCIES)


def auto_rotation(tick) -> Rotations:
    return rotations_from_degrees(*auto_rotation_degrees(tick))


def tick_schedule(n_frames, start=0.0):
    # Tick is advanced before each render.
    if n_frames < 0:
        raise ValueError(f"n_frames must be non-negative, got {n_frames}")
    return [start + TICK_STEP * (k + 1) for k in range(n_frames)]


def rotation_frames(n_frames, start=0.0):
    return [auto_rotation(t) for t in tick_schedule(n_frames, start)]
