"""
4x4 matrix helpers and the three elementary 4D rotations.

Matrices are plain (4, 4) float arrays, row-major. The rotation layouts are
fixed: renderings must match the reference animation exactly.
"""

import numpy as np


def identity():
    return np.eye(4)


def transpose(m):
    return np.asarray(m, dtype=float).T


def multiply(a, b):
    """
    Standard matrix product, result[i, j] = sum_k a[i, k] * b[k, j].
    """
    a = np.asarray(a, dtype=float)
    b = np.asarray(b, dtype=float)
    return a @ b


# ---------- Elementary rotations ----------

def rotation_wx(angle):
    c = np.cos(angle)
    s = np.sin(angle)
    return np.array([
        [c,   -s,   0.0, 0.0],
        [s,    c,   0.0, 0.0],
        [0.0, 0.0,  1.0, 0.0],
        [0.0, 0.0,  0.0, 1.0],
    ])


def rotation_wy(angle):
    c = np.cos(angle)
    s = np.sin(angle)
    return np.array([
        [c,   0.0,  -s,  0.0],
        [0.0, 1.0,  0.0, 0.0],
        [s,   0.0,   c,  0.0],
        [0.0, 0.0,  0.0, 1.0],
    ])


def rotation_wz(angle):
    c = np.cos(angle)
    s = np.sin(angle)
    return np.array([
        [c,   0.0, 0.0,  -s],
        [0.0, 1.0, 0.0, 0.0],
        [0.0, 0.0, 1.0, 0.0],
        [s,   0.0, 0.0,   c],
    ])
