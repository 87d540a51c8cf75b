# -*- coding: utf-8 -*-
"""
Home page for the Tesseract Playground.
"""

import base64
from pathlib import Path

import streamlit as st
import streamlit.components.v1 as components


st.set_page_config(
    page_title="Tesseract Playground",
    layout="wide"
)

st.title("Tesseract Playground")

st.write(
    """
    Rotate a 4-dimensional hypercube and watch its shadow in the plane.

    - **4D Hypercube**: 16 vertices, 32 edges, rotations in the W-X, W-Y and
      W-Z planes, a perspective divide by the rotated w coordinate, and an
      auto-rotation you can play back or save as a GIF.
    """
)

# ----------------------------
# Caching helper
# ----------------------------
@st.cache_data(show_spinner=False)
def load_gif_b64(path_str: str, file_mtime: float) -> str:
    """
    Read a local GIF and return base64 string.
    Cache invalidates when the file changes because file_mtime is part of the key.
    """
    with open(path_str, "rb") as f:
        return base64.b64encode(f.read()).decode("utf-8")


def autoplay_gif_panel(gif_path: Path, title: str, height: int = 400) -> None:
    if gif_path.exists():
        st.markdown(title)
        b64 = load_gif_b64(str(gif_path), gif_path.stat().st_mtime)
        components.html(
            f'<img src="data:image/gif;base64,{b64}" style="width:100%">',
            height=height,
        )
    else:
        st.info(f"{gif_path.name} not found yet. Generate it from the 4D Hypercube page.")


col1, col2 = st.columns(2)

with col1:
    st.subheader("4D Hypercube")
    st.write(
        """
        Each vertex (±1, ±1, ±1, ±1) is rotated by
        R_WX · R_WY · R_WZ and projected with scale = 100 / (2 − w).
        Vertices are labelled with their 4-bit index, so you can follow
        them through the rotation.
        """
    )
    if st.button("Go to 4D Hypercube"):
        st.switch_page("pages/1_Tesseract_4D.py")

with col2:
    autoplay_gif_panel(
        Path(__file__).parent / "tesseract_animation.gif",
        "##### Auto-rotation (last generated GIF)",
        height=500
    )
