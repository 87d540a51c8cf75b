"""
4D rotation + perspective projection of hypercube vertices.

The projection divides by (VIEWER_W - w) after rotation, so a point whose
rotated w equals VIEWER_W has no finite image. That case is not clamped:
the raw inf/nan comes back to the caller and a warning is logged.
"""

import logging
from typing import NamedTuple

import numpy as np

from tesseract.linalg import multiply, rotation_wx, rotation_wy, rotation_wz

logger = logging.getLogger(__name__)

PROJECTION_SCALE = 100.0
VIEWER_W = 2.0


class Rotations(NamedTuple):
    wx: float = 0.0
    wy: float = 0.0
    wz: float = 0.0


class ProjectedVertex(NamedTuple):
    x: float
    y: float
    z: float
    label: str


def rotations_from_degrees(wx_deg, wy_deg, wz_deg):
    # No wrap-around: sin/cos handle periodicity.
    return Rotations(
        float(np.deg2rad(wx_deg)),
        float(np.deg2rad(wy_deg)),
        float(np.deg2rad(wz_deg)),
    )


def compose_rotation(rotations):
    """
    M = WX(wx) @ WY(wy) @ WZ(wz), each plane right-multiplied in that order.
    """
    wx, wy, wz = rotations
    M = rotation_wx(wx)
    M = multiply(M, rotation_wy(wy))
    M = multiply(M, rotation_wz(wz))
    return M


def apply_rotation(point, M):
    # rotated[i] = sum_j point[j] * M[i, j]
    p = np.asarray(point, dtype=float)
    return np.asarray(M, dtype=float) @ p


def project_to_3d(rotated):
    r = np.asarray(rotated, dtype=float)
    w = r[3]
    with np.errstate(divide="ignore", invalid="ignore"):
        scale = np.float64(PROJECTION_SCALE) / (VIEWER_W - w)
        out = r[:3] * scale
    if not np.all(np.isfinite(out)):
        logger.warning("Projection singular at w=%.6f (viewer at w=%.1f): %s", w, VIEWER_W, out)
    return out


def project_4d_to_3d(point, rotations):
    M = compose_rotation(rotations)
    return project_to_3d(apply_rotation(point, M))


def project_vertices(vertices, rotations):
    """
    Project every vertex for one render pass, keeping the labels.

    The composed matrix is built once per pass; each record equals
    project_4d_to_3d(vertex.coords, rotations).
    """
    M = compose_rotation(rotations)
    projected = []
    for v in vertices:
        x, y, z = project_to_3d(apply_rotation(v.coords, M))
        projected.append(ProjectedVertex(float(x), float(y), float(z), v.label))
    return projected
