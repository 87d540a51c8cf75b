"""
Render adapter tests

Plotly figures, camera event merging and matplotlib SVG / GIF export.
"""

import math

import matplotlib.pyplot as plt
import pytest

from tesseract.animation import rotation_frames
from tesseract.linalg import identity
from tesseract.projection import ProjectedVertex, Rotations, project_vertices
from tesseract.render import (
    DEFAULT_CAMERA,
    LABEL_OFFSET,
    build_edge_lines,
    create_animation_gif,
    draw_frame,
    export_svg,
    format_matrix_latex,
    make_animated_figure,
    make_tesseract_figure,
    make_tesseract_figure_3d,
    merge_camera_events,
)
from tesseract.topology import hypercube


@pytest.fixture
def scene():
    vertices, edges = hypercube()
    projected = project_vertices(vertices, Rotations(0.3, 0.6, 0.9))
    return vertices, edges, projected


def _with_degenerate_vertex(projected):
    broken = list(projected)
    broken[0] = ProjectedVertex(math.inf, math.nan, -math.inf, broken[0].label)
    return broken


def test_edge_lines_have_separators(scene):
    """Two endpoints plus a None separator per edge"""
    _, edges, projected = scene
    xs, ys, zs = build_edge_lines(projected, edges)
    assert len(xs) == len(ys) == len(zs) == 3 * len(edges)
    assert xs[2::3] == [None] * len(edges)

    i, j = edges[0]
    assert xs[0] == pytest.approx(projected[i].x)
    assert ys[1] == pytest.approx(projected[j].y)


def test_edge_lines_drop_non_finite_coordinates(scene):
    """A degenerate vertex becomes None so the line breaks instead of failing"""
    _, edges, projected = scene
    xs, ys, zs = build_edge_lines(_with_degenerate_vertex(projected), edges)
    # edges[0] == (0, 1): first point is the broken vertex
    assert xs[0] is None and ys[0] is None and zs[0] is None
    assert xs[1] is not None
    assert all(v is None or math.isfinite(v) for v in xs + ys + zs)


def test_2d_figure_traces(scene):
    """Edges, vertices and labels, labels offset below the vertex"""
    _, edges, projected = scene
    fig = make_tesseract_figure(projected, edges, show_labels=True)
    assert [t.name for t in fig.data] == ["Edges", "Vertices", "Labels"]

    labels = fig.data[2]
    assert list(labels.text) == [v.label for v in projected]
    assert list(labels.y) == pytest.approx([v.y + LABEL_OFFSET for v in projected])

    no_labels = make_tesseract_figure(projected, edges, show_labels=False)
    assert len(no_labels.data) == 2


def test_2d_figure_tolerates_degenerate_vertex(scene):
    """Non-finite coordinates are left out of the plotted data"""
    _, edges, projected = scene
    fig = make_tesseract_figure(_with_degenerate_vertex(projected), edges)
    assert fig.data[1].x[0] is None
    assert fig.data[2].y[0] is None


def test_animated_figure_has_one_frame_per_rotation(scene):
    """Plotly frames and slider steps follow the schedule"""
    vertices, edges, _ = scene
    frames = rotation_frames(12)
    fig = make_animated_figure(vertices, edges, frames)
    assert len(fig.frames) == 12
    assert len(fig.layout.sliders[0].steps) == 12
    assert [b.label for b in fig.layout.updatemenus[0].buttons] == ["Play", "Pause"]


def test_animated_figure_needs_frames(scene):
    """An empty schedule cannot be animated"""
    vertices, edges, _ = scene
    with pytest.raises(ValueError):
        make_animated_figure(vertices, edges, [])


def test_3d_figure(scene):
    """3D view carries edges and labelled vertices"""
    _, edges, projected = scene
    fig = make_tesseract_figure_3d(projected, edges, uirevision_key="k")
    assert len(fig.data) == 2
    assert list(fig.data[1].text) == [v.label for v in projected]
    assert fig.layout.scene.camera.eye.x == pytest.approx(DEFAULT_CAMERA["eye"]["x"])
    assert fig.layout.uirevision == "k"


def test_merge_camera_events_without_camera():
    """No events, or events without camera keys, leave the camera alone"""
    assert merge_camera_events(None) is None
    assert merge_camera_events([]) is None
    assert merge_camera_events([{"xaxis.range": [0, 1]}, "junk"]) is None


def test_merge_camera_events_full_camera():
    """A full scene.camera payload is taken as-is"""
    cam = {"eye": {"x": 0.1, "y": 0.2, "z": 0.3}, "up": {"x": 0, "y": 0, "z": 1}}
    assert merge_camera_events([{"scene.camera": cam}]) == cam


def test_merge_camera_events_partial_update():
    """Dotted keys update the current camera without mutating the default"""
    cam = merge_camera_events([{"scene.camera.eye.x": "2.5"}], DEFAULT_CAMERA)
    assert cam["eye"]["x"] == 2.5
    assert cam["eye"]["y"] == DEFAULT_CAMERA["eye"]["y"]
    assert DEFAULT_CAMERA["eye"]["x"] == 1.6


def test_merge_camera_events_malformed_eye():
    """A camera without a usable eye falls back to the default"""
    cam = merge_camera_events([{"scene.camera": {"up": {"x": 0, "y": 1, "z": 0}}}])
    assert cam == DEFAULT_CAMERA


def test_format_matrix_latex():
    """4 rows of 4 entries in a bmatrix"""
    latex = format_matrix_latex(identity())
    assert latex.startswith("\\begin{bmatrix}")
    assert latex.endswith("\\end{bmatrix}")
    assert "1.000 & 0.000 & 0.000 & 0.000" in latex
    assert latex.count("\\\\") == 3


def test_draw_frame_skips_degenerate_vertex(scene):
    """Drawing never fails on the projection singularity"""
    _, edges, projected = scene
    fig = plt.figure()
    ax = fig.add_subplot(111)
    try:
        draw_frame(ax, _with_degenerate_vertex(projected), edges, show_labels=True)
        # 4 edges touch vertex 0
        assert len(ax.lines) == len(edges) - 4
        assert len(ax.texts) == len(projected) - 1
    finally:
        plt.close(fig)


def test_export_svg(scene):
    """SVG export returns an SVG document"""
    _, edges, projected = scene
    svg = export_svg(projected, edges)
    assert isinstance(svg, bytes)
    assert b"<svg" in svg


def test_create_animation_gif(scene, tmp_path):
    """GIF export writes one animated file"""
    vertices, edges, _ = scene
    out = tmp_path / "tesseract.gif"
    create_animation_gif(str(out), vertices, edges, rotation_frames(3), fps=10)
    assert out.exists()
    assert out.read_bytes()[:6] in (b"GIF87a", b"GIF89a")
