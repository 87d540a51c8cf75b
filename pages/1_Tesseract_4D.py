# -*- coding: utf-8 -*-
"""
4D hypercube (tesseract) page: three rotation sliders, live projection,
3D intermediate view, auto-rotation playback, SVG and GIF export.

How to run locally:

    streamlit run Home.py
"""

import os
import numpy as np
import streamlit as st

from streamlit_plotly_events import plotly_events

from tesseract.animation import FRAME_INTERVAL_MS, TICK_STEP, auto_rotation_degrees, rotation_frames
from tesseract.logger import setup_logger
from tesseract.projection import compose_rotation, project_vertices, rotations_from_degrees
from tesseract.render import (
    DEFAULT_CAMERA,
    create_animation_gif,
    export_svg,
    format_matrix_latex,
    make_animated_figure,
    make_tesseract_figure,
    make_tesseract_figure_3d,
    merge_camera_events,
)
from tesseract.topology import hypercube

GIF_FILENAME = "tesseract_animation.gif"

logger = setup_logger()


def main():
    st.set_page_config(
        page_title="4D Hypercube (Tesseract)",
        layout="wide"
    )

    # Camera persistence state
    if "plotly_camera" not in st.session_state:
        st.session_state.plotly_camera = DEFAULT_CAMERA.copy()
    if "uirevision_key" not in st.session_state:
        st.session_state.uirevision_key = "keep_camera_tesseract_v1"

    st.title("4D Hypercube: Rotation & Projection")

    st.write(
        """
        A **tesseract** has 16 vertices at (±1, ±1, ±1, ±1) and 32 edges joining
        vertices whose binary labels differ in one bit. Rotate it in the
        **W-X**, **W-Y** and **W-Z** planes and watch its perspective shadow.
        """
    )

    vertices, edges = hypercube()

    for key in ("rot_wx", "rot_wy", "rot_wz"):
        if key not in st.session_state:
            st.session_state[key] = 0.0

    # Sidebar: auto-rotation start
    st.sidebar.header("Auto-rotation start")
    start_tick = st.sidebar.slider("Start tick", 0.0, 1000.0, 0.0, TICK_STEP)
    if st.sidebar.button("Load auto-rotation angles at start tick"):
        wx0, wy0, wz0 = auto_rotation_degrees(start_tick)
        st.session_state.rot_wx = float(round(wx0))
        st.session_state.rot_wy = float(round(wy0))
        st.session_state.rot_wz = float(round(wz0))

    st.sidebar.markdown("---")
    st.sidebar.header("Rotation angles (degrees)")
    wx_deg = st.sidebar.slider("Rotate in W-X plane", 0.0, 360.0, step=1.0, key="rot_wx")
    wy_deg = st.sidebar.slider("Rotate in W-Y plane", 0.0, 360.0, step=1.0, key="rot_wy")
    wz_deg = st.sidebar.slider("Rotate in W-Z plane", 0.0, 360.0, step=1.0, key="rot_wz")

    st.sidebar.markdown("---")
    view = st.sidebar.radio(
        "View:",
        ["2D projection", "3D intermediate", "Auto-rotate"],
        index=0,
    )
    show_labels = st.sidebar.checkbox("Show vertex labels", value=True)
    n_frames = st.sidebar.slider("Animation frames", 20, 400, 200, 10)

    rotations = rotations_from_degrees(wx_deg, wy_deg, wz_deg)
    M = compose_rotation(rotations)
    projected = project_vertices(vertices, rotations)

    n_degenerate = sum(1 for v in projected if not np.all(np.isfinite([v.x, v.y, v.z])))
    if n_degenerate:
        st.warning(
            f"{n_degenerate} vertex(es) sit at the viewer (rotated w = 2); "
            "their projection is infinite and they are left out of the drawing."
        )

    col1, col2 = st.columns([4, 1])

    with col1:
        if view == "2D projection":
            st.subheader("Projected wireframe")
            fig = make_tesseract_figure(projected, edges, show_labels=show_labels)
            st.plotly_chart(fig, use_container_width=True)

        elif view == "3D intermediate":
            st.subheader("3D intermediate (drag to rotate, view persists)")
            fig_3d = make_tesseract_figure_3d(
                projected,
                edges,
                camera=st.session_state.plotly_camera,
                uirevision_key=st.session_state.uirevision_key,
            )
            events = plotly_events(
                fig_3d,
                click_event=False,
                select_event=False,
                hover_event=True,
                override_height=800,
                key="plotly_events_tesseract",
            )
            cam = merge_camera_events(events, st.session_state.plotly_camera)
            if cam is not None:
                st.session_state.plotly_camera = cam
            st.caption("Rotate/zoom the plot, click it once, then move a slider. The view should stay.")

        else:
            st.subheader("Auto-rotation")
            frames = rotation_frames(n_frames, start=start_tick)
            fig = make_animated_figure(vertices, edges, frames, show_labels=show_labels)
            st.plotly_chart(fig, use_container_width=True)
            st.caption(
                f"Each plane follows sin(tick·f)·180° + 180°; one frame every {FRAME_INTERVAL_MS} ms."
            )

    with col2:
        st.subheader("Composed rotation")
        st.latex(r"M = R_{WX}\,R_{WY}\,R_{WZ}")
        st.latex("M \\approx " + format_matrix_latex(M))
        st.markdown(
            r"""
Each vertex $p$ is rotated to $p' = M p$, then projected with

$$
s = \frac{100}{2 - p'_w}, \qquad (x, y, z) = s\,(p'_x, p'_y, p'_z).
$$
"""
        )

        st.download_button(
            "Download frame as SVG",
            data=export_svg(projected, edges, show_labels=show_labels),
            file_name="tesseract.svg",
            mime="image/svg+xml",
        )

    with st.expander("Projected vertices"):
        st.dataframe(
            [
                {"label": v.label, "x": v.x, "y": v.y, "z": v.z}
                for v in projected
            ],
            use_container_width=True,
        )

    # ---------- GIF generation ----------
    st.markdown("---")
    st.markdown("## GIF animation of the auto-rotation")

    if st.button(f"Generate GIF animation ({GIF_FILENAME})"):
        with st.spinner("Generating GIF animation (this may take a bit)..."):
            try:
                create_animation_gif(
                    filename=GIF_FILENAME,
                    vertices=vertices,
                    edges=edges,
                    frames=rotation_frames(n_frames, start=start_tick),
                    show_labels=show_labels,
                )
                st.success(f"Animation saved as {GIF_FILENAME}")
            except Exception as e:
                logger.exception("GIF export failed")
                st.error(f"Failed to create animation. Error: {e}")

    if os.path.exists(GIF_FILENAME):
        vc1, vc2, vc3 = st.columns([1, 2, 1])
        with vc2:
            st.image(GIF_FILENAME)


if __name__ == "__main__":
    main()
