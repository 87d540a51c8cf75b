"""
Drawing side of the playground: plotly figures for the Streamlit page and
matplotlib frames for SVG / GIF export.

Nothing here does geometry; it takes ProjectedVertex records plus the edge
index pairs and puts them on screen. Non-finite coordinates (the projection
singularity) are turned into gaps.
"""

import io
import logging
import math

import numpy as np
import plotly.graph_objects as go
import matplotlib.pyplot as plt
from matplotlib.animation import PillowWriter

from tesseract.animation import FRAME_INTERVAL_MS
from tesseract.projection import project_vertices

logger = logging.getLogger(__name__)

# Color scheme
C_EDGE = "#4fc3f7"      # cyan
C_VERTEX = "#ff7043"    # orange
C_LABEL = "#444444"     # gray
C_BG = "#ffffff"

VERTEX_RADIUS = 5
LABEL_OFFSET = 20
AXIS_HALF = 300.0

DEFAULT_CAMERA = dict(
    eye=dict(x=1.6, y=1.6, z=1.2),
    up=dict(x=0, y=1, z=0),
)


# ---------- Helpers ----------

def _finite_or_none(value):
    value = float(value)
    return value if math.isfinite(value) else None


def build_edge_lines(projected, edges):
    xs, ys, zs = [], [], []
    for i, j in edges:
        p, q = projected[i], projected[j]
        xs.extend([_finite_or_none(p.x), _finite_or_none(q.x), None])
        ys.extend([_finite_or_none(p.y), _finite_or_none(q.y), None])
        zs.extend([_finite_or_none(p.z), _finite_or_none(q.z), None])
    return xs, ys, zs


def _vertex_columns(projected):
    xs = [_finite_or_none(v.x) for v in projected]
    ys = [_finite_or_none(v.y) for v in projected]
    zs = [_finite_or_none(v.z) for v in projected]
    labels = [v.label for v in projected]
    return xs, ys, zs, labels


def _label_positions(xs, ys):
    # Labels sit LABEL_OFFSET below the vertex (y grows downward on screen)
    return xs, [None if y is None else y + LABEL_OFFSET for y in ys]


def format_matrix_latex(m):
    m = np.asarray(m, dtype=float)
    rows = [" & ".join("%.3f" % v for v in row) for row in m]
    return "\\begin{bmatrix}\n" + " \\\\\n".join(rows) + "\n\\end{bmatrix}"


# ---------- Plotly 2D figure ----------

def _frame_traces_2d(projected, edges, show_labels):
    ex, ey, _ = build_edge_lines(projected, edges)
    vx, vy, _, labels = _vertex_columns(projected)

    traces = [
        go.Scatter(
            x=ex, y=ey,
            mode="lines",
            line=dict(width=2, color=C_EDGE),
            name="Edges",
            hoverinfo="skip",
        ),
        go.Scatter(
            x=vx, y=vy,
            mode="markers",
            marker=dict(size=2 * VERTEX_RADIUS, color=C_VERTEX),
            name="Vertices",
            text=labels,
            hovertemplate="%{text}<br>x=%{x:.3f}<br>y=%{y:.3f}<extra></extra>",
        ),
    ]
    if show_labels:
        lx, ly = _label_positions(vx, vy)
        traces.append(go.Scatter(
            x=lx, y=ly,
            mode="text",
            text=labels,
            textfont=dict(size=11, color=C_LABEL),
            name="Labels",
            hoverinfo="skip",
            showlegend=False,
        ))
    return traces


def _layout_2d(fig, title, height):
    fig.update_layout(
        template="plotly_white",
        title=title,
        height=height,
        showlegend=True,
        margin=dict(l=0, r=0, t=40, b=0),
        legend=dict(x=0.02, y=0.98),
        xaxis=dict(range=[-AXIS_HALF, AXIS_HALF], zeroline=False, showgrid=False, visible=False),
        # SVG-style screen coordinates: y grows downward
        yaxis=dict(range=[AXIS_HALF, -AXIS_HALF], zeroline=False, showgrid=False, visible=False,
                   scaleanchor="x", scaleratio=1),
    )


def make_tesseract_figure(projected, edges, show_labels=True, height=700):
    fig = go.Figure(data=_frame_traces_2d(projected, edges, show_labels))
    _layout_2d(fig, "Tesseract: 4D rotation, perspective projection", height)
    return fig


def make_animated_figure(vertices, edges, frames, show_labels=True, height=700):
    """
    Plotly figure that plays the given Rotations sequence, one frame every
    FRAME_INTERVAL_MS.
    """
    if not frames:
        raise ValueError("make_animated_figure needs at least one frame")

    per_frame = [project_vertices(vertices, r) for r in frames]

    fig = go.Figure(
        data=_frame_traces_2d(per_frame[0], edges, show_labels),
        frames=[
            go.Frame(data=_frame_traces_2d(p, edges, show_labels), name=str(k))
            for k, p in enumerate(per_frame)
        ],
    )
    _layout_2d(fig, "Tesseract: auto-rotation", height)

    play_args = dict(
        frame=dict(duration=FRAME_INTERVAL_MS, redraw=True),
        transition=dict(duration=0),
        fromcurrent=True,
        mode="immediate",
    )
    fig.update_layout(
        updatemenus=[dict(
            type="buttons",
            showactive=False,
            x=0.02, y=0.02,
            xanchor="left", yanchor="bottom",
            buttons=[
                dict(label="Play", method="animate", args=[None, play_args]),
                dict(label="Pause", method="animate",
                     args=[[None], dict(frame=dict(duration=0, redraw=False), mode="immediate")]),
            ],
        )],
        sliders=[dict(
            active=0,
            currentvalue=dict(prefix="frame "),
            steps=[
                dict(method="animate", label=str(k),
                     args=[[str(k)], dict(frame=dict(duration=0, redraw=True), mode="immediate")])
                for k in range(len(frames))
            ],
        )],
    )
    return fig


# ---------- Plotly 3D figure (intermediate 3D projection) ----------

def make_tesseract_figure_3d(projected, edges, camera=None, uirevision_key=None, height=800):
    ex, ey, ez = build_edge_lines(projected, edges)
    vx, vy, vz, labels = _vertex_columns(projected)

    fig = go.Figure()
    fig.add_trace(go.Scatter3d(
        x=ex, y=ey, z=ez,
        mode="lines",
        line=dict(width=4, color=C_EDGE),
        name="Edges",
        hoverinfo="skip",
    ))
    fig.add_trace(go.Scatter3d(
        x=vx, y=vy, z=vz,
        mode="markers+text",
        marker=dict(size=4, color=C_VERTEX),
        text=labels,
        textposition="top center",
        name="Vertices",
        hovertemplate="%{text}<br>x=%{x:.3f}<br>y=%{y:.3f}<br>z=%{z:.3f}<extra></extra>",
    ))

    rng = [-AXIS_HALF, AXIS_HALF]
    fig.update_layout(
        template="plotly_white",
        uirevision=uirevision_key,
        scene=dict(
            xaxis=dict(range=rng, title="x", showbackground=False, zeroline=False),
            yaxis=dict(range=rng, title="y", showbackground=False, zeroline=False),
            zaxis=dict(range=rng, title="z", showbackground=False, zeroline=False),
            aspectmode="cube",
        ),
        scene_camera=camera or DEFAULT_CAMERA,
        margin=dict(l=0, r=0, t=40, b=0),
        legend=dict(x=0.02, y=0.98),
        title="3D intermediate (before dropping z)",
        height=height,
    )
    return fig


def merge_camera_events(events, current=None):
    """
    Pull the latest scene camera out of plotly relayout events.

    Returns the new camera dict, or None when the events carry no camera.
    """
    if not events:
        return None

    cam = None
    for e in events:
        if not isinstance(e, dict):
            continue

        if "scene.camera" in e and isinstance(e["scene.camera"], dict):
            cam = e["scene.camera"]
            continue

        cam_update = {}
        for k, v in e.items():
            if isinstance(k, str) and k.startswith("scene.camera."):
                cam_update[k.replace("scene.camera.", "")] = v
        if not cam_update:
            continue

        base = cam or current or DEFAULT_CAMERA
        cam = {
            "eye": dict(base.get("eye", DEFAULT_CAMERA["eye"])),
            "up": dict(base.get("up", DEFAULT_CAMERA["up"])),
        }
        for subk, subv in cam_update.items():
            if "." not in subk:
                continue
            top, leaf = subk.split(".", 1)
            cam.setdefault(top, {})
            try:
                cam[top][leaf] = float(subv)
            except (TypeError, ValueError):
                cam[top][leaf] = subv

    if cam is None:
        return None
    eye = cam.get("eye")
    if not isinstance(eye, dict) or any(ax not in eye for ax in ("x", "y", "z")):
        return dict(DEFAULT_CAMERA)
    return cam


# ---------- Matplotlib frames (SVG / GIF) ----------

def draw_frame(ax, projected, edges, show_labels=True, title=None):
    ax.cla()
    ax.set_facecolor(C_BG)

    for i, j in edges:
        p, q = projected[i], projected[j]
        if not all(math.isfinite(c) for c in (p.x, p.y, q.x, q.y)):
            continue
        ax.plot([p.x, q.x], [p.y, q.y], color=C_EDGE, linewidth=1.5)

    finite = [v for v in projected if math.isfinite(v.x) and math.isfinite(v.y)]
    if finite:
        ax.scatter([v.x for v in finite], [v.y for v in finite],
                   s=(2 * VERTEX_RADIUS) ** 2, color=C_VERTEX, zorder=3)
    if show_labels:
        for v in finite:
            ax.text(v.x, v.y + LABEL_OFFSET, v.label,
                    ha="center", va="center", fontsize=8, color=C_LABEL)

    ax.set_xlim(-AXIS_HALF, AXIS_HALF)
    ax.set_ylim(AXIS_HALF, -AXIS_HALF)
    ax.set_aspect("equal")
    ax.axis("off")
    if title:
        ax.set_title(title)


def export_svg(projected, edges, show_labels=True):
    fig = plt.figure(figsize=(6.4, 6.4))
    ax = fig.add_subplot(111)
    try:
        draw_frame(ax, projected, edges, show_labels)
        buf = io.BytesIO()
        fig.savefig(buf, format="svg", bbox_inches="tight")
    finally:
        plt.close(fig)
    return buf.getvalue()


def create_animation_gif(filename, vertices, edges, frames, fps=None, show_labels=True):
    if fps is None:
        fps = 1000 // FRAME_INTERVAL_MS

    fig = plt.figure(figsize=(6.4, 6.4))
    ax = fig.add_subplot(111)

    writer = PillowWriter(fps=fps)
    logger.info("Writing %d frames to %s at %d fps", len(frames), filename, fps)

    try:
        with writer.saving(fig, filename, dpi=100):
            for k, rotations in enumerate(frames):
                projected = project_vertices(vertices, rotations)
                draw_frame(ax, projected, edges, show_labels, title=f"frame {k}")
                writer.grab_frame()
    finally:
        plt.close(fig)
