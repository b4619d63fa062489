#!/usr/bin/env python3
"""
TensorGrid Viewer - see a tensor shape as a block of cubes.

Launch with:
    streamlit run TensorGrid/web/app.py

or via the console script::

    tensorgrid [port]

Use cases:
- Check how a (B, C, H, W) batch is laid out before writing indexing code
- Compare tiling (every outer index repeated in space) with slicing
  (one selected index per outer dim)
- Heat-colour a small tensor literal to spot structure in its values
"""

import json

import streamlit as st

from TensorGrid.core.axes import DIM_ORDERS, MODES, SLICING
from TensorGrid.core.config import MAX_CELLS_RANGE
from TensorGrid.core.layout import count_instances
from TensorGrid.core.session import ViewSession
from TensorGrid.core.settings import settings_to_json
from TensorGrid.core.utils import layout_to_dataframe, value_range
from TensorGrid.viz.base import COLORMAPS
from TensorGrid.viz.plotly_scene import build_figure
from TensorGrid.viz.static import save_layout_png

# Above this many cubes the scene switches to point markers
CUBE_LIMIT = 4000

# ---------------------------------------------------------------------------
# Session
# ---------------------------------------------------------------------------

st.set_page_config(page_title="TensorGrid", layout="wide")
st.title("🧊 TensorGrid")
st.markdown("Visualize N-dimensional tensor shapes as 3D grids of cubes")

if "tg_session" not in st.session_state:
    st.session_state["tg_session"] = ViewSession()
session: ViewSession = st.session_state["tg_session"]

# ---------------------------------------------------------------------------
# Sidebar: inputs
# ---------------------------------------------------------------------------

with st.sidebar:
    st.header("📐 Tensor")

    shape_text = st.text_input(
        "Shape (comma separated integers)",
        value=session.shape_text,
        help="Any text works: every number is one dimension, e.g. 'B: 2, C: 3'",
    )
    if shape_text != session.shape_text:
        session.set_shape_text(shape_text)

    session.labels_text = st.text_input(
        "Axis labels (optional, comma separated)",
        value=session.labels_text,
        placeholder="e.g. B, T, C, H, W",
    )

    session.data_text = st.text_area(
        "JSON data (optional nested array)",
        value=session.data_text,
        placeholder="[[1, 2], [3, 4]]",
        height=100,
    )
    if session.data_text.strip() and session.tensor is None:
        st.warning("JSON data is not a valid array; using the shape text instead.")

    shape = session.shape
    st.caption(f"Shape: {tuple(shape)}  •  rank {len(shape)}")

    st.divider()
    st.header("🧭 Axes")

    session.dim_order = st.radio(
        "Dimension order",
        DIM_ORDERS,
        index=DIM_ORDERS.index(session.dim_order),
        help="Which dims go to the Y / X / Z axes",
    )
    for axis, label in session.axis_labels.as_dict().items():
        st.text(f"{axis.upper()}: {label.text()}")

    st.divider()
    st.header("🧱 Outer Dimensions")

    session.set_mode(st.radio(
        "Mode",
        MODES,
        index=MODES.index(session.mode),
        horizontal=True,
        help="Tiling repeats every outer index in space; slicing shows one",
    ))

    if not session.outer_dims:
        st.caption("No outer dimensions (rank ≤ 3)")
    elif session.mode == SLICING:
        for dim in session.page_dims:
            size = shape[dim]
            current = min(session.slice_indices.get(dim, 0), size - 1)
            if size > 1:
                chosen = st.slider(f"Slice: {session.label_for(dim)}",
                                   0, size - 1, current, key=f"slice_{dim}")
            else:
                chosen = 0
                st.text(f"Slice: {session.label_for(dim)} [0 / 0]")
            session.set_slice_index(dim, chosen)

    st.divider()
    low, high = MAX_CELLS_RANGE
    session.set_max_cells(st.slider("Max cells / dim", low, high, session.max_cells))
    st.caption("High values may reduce performance.")

    with st.expander("🎨 Style Options", expanded=False):
        cmap = st.selectbox("Colormap", COLORMAPS, index=0)
        show_cubes = st.checkbox("Draw cubes", value=True)

# ---------------------------------------------------------------------------
# Main Area: scene
# ---------------------------------------------------------------------------

config = session.config()
n_cells = count_instances(config)

if n_cells == 0:
    st.info("👆 Enter a shape to continue")
    st.stop()

instances = session.layout()
plot_type = "cubes" if show_cubes and n_cells <= CUBE_LIMIT else "points"
if show_cubes and plot_type == "points":
    st.caption(f"{n_cells} cells: drawing points instead of cubes.")

fig = build_figure(instances, axis_labels=session.axis_labels,
                   labels=session.labels, plot_type=plot_type, cmap=cmap)
st.plotly_chart(fig, use_container_width=True)

col1, col2, col3 = st.columns(3)
col1.metric("Cells drawn", n_cells)
col2.metric("Mode", session.mode)
bounds = value_range(instances)
col3.metric("Value range", "—" if bounds is None else f"{bounds[0]:g} … {bounds[1]:g}")

# ---------------------------------------------------------------------------
# Export
# ---------------------------------------------------------------------------

st.divider()
df = layout_to_dataframe(instances, session.labels)
col1, col2, col3 = st.columns(3)

with col1:
    png = save_layout_png(instances, axis_labels=session.axis_labels,
                          plot_type=plot_type, cmap=cmap)
    st.download_button(
        label="💾 Export PNG",
        data=png,
        file_name="tensor-grid.png",
        mime="image/png",
    )

with col2:
    st.download_button(
        label="💾 Export JSON settings",
        data=settings_to_json(session.settings()),
        file_name="tensor-grid-settings.json",
        mime="application/json",
    )

with col3:
    st.download_button(
        label="💾 Export cells (CSV)",
        data=df.to_csv(index=False),
        file_name="tensor-grid-cells.csv",
        mime="text/csv",
    )

# ---------------------------------------------------------------------------
# Inspection
# ---------------------------------------------------------------------------

with st.expander("📄 Cells"):
    st.dataframe(df.head(500))
    st.text(f"{len(df)} cells × {len(df.columns)} columns")

with st.expander("🔧 Layout config"):
    st.code(json.dumps(session.settings().to_dict(), indent=2), language="json")
