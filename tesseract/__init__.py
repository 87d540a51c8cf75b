"""
Tesseract playground: 4D hypercube topology, 4D rotations and the
perspective projection used to draw it.
"""

from tesseract.linalg import multiply, rotation_wx, rotation_wy, rotation_wz
from tesseract.topology import Vertex, generate_vertices, generate_edges, hypercube
from tesseract.projection import (
    Rotations,
    ProjectedVertex,
    compose_rotation,
    apply_rotation,
    project_to_3d,
    project_4d_to_3d,
    project_vertices,
    rotations_from_degrees,
)

__all__ = [
    "multiply",
    "rotation_wx",
    "rotation_wy",
    "rotation_wz",
    "Vertex",
    "generate_vertices",
    "generate_edges",
    "hypercube",
    "Rotations",
    "ProjectedVertex",
    "compose_rotation",
    "apply_rotation",
    "project_to_3d",
    "project_4d_to_3d",
    "project_vertices",
    "rotations_from_degrees",
]
