"""
Vertices and edges of the 4D hypercube.

Vertex i carries the 4-bit binary label of i (MSB first); a '1' bit puts
the matching coordinate at +1, a '0' bit at -1. Two vertices share an edge
when their indices differ in exactly one bit.
"""

from functools import lru_cache
from typing import List, NamedTuple, Tuple

N_DIMS = 4
N_VERTICES = 2 ** N_DIMS


class Vertex(NamedTuple):
    coords: Tuple[float, float, float, float]
    label: str


def generate_vertices() -> List[Vertex]:
    vertices = []
    for i in range(N_VERTICES):
        label = format(i, f"0{N_DIMS}b")
        coords = tuple(1.0 if bit == "1" else -1.0 for bit in label)
        vertices.append(Vertex(coords, label))
    return vertices


def generate_edges(vertices) -> List[Tuple[int, int]]:
    """
    Connect every pair (i, j), i < j, whose indices differ in one bit.
    Enumeration order is i ascending, then j ascending.
    """
    n = len(vertices)
    edges = []
    for i in range(n):
        for j in range(i + 1, n):
            if bin(i ^ j).count("1") == 1:
                edges.append((i, j))
    return edges


@lru_cache(maxsize=None)
def hypercube():
    """
    Cached (vertices, edges) pair; the topology never changes at runtime.
    """
    vertices = tuple(generate_vertices())
    edges = tuple(generate_edges(vertices))
    return vertices, edges
