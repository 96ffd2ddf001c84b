"""
Streamlit entrypoint for the container loading planner.
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Dict, List

import pandas as pd
import streamlit as st

# Add parent directory to path to allow imports
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from container_loader.config_loader import load_container_presets, load_default_cargo
from container_loader.core.solver_cargo_to_container import PackResult, pack_cargo_into_container
from container_loader.logger import configure_logging
from container_loader.models.cargo import CargoSpec
from container_loader.models.container import Container

CARGO_COLUMNS = ["id", "name", "length", "width", "height", "weight", "quantity", "allow_rotation"]


@st.cache_data
def default_cargo_frame() -> pd.DataFrame:
    rows = [spec.to_dict() for spec in load_default_cargo()]
    return pd.DataFrame(rows, columns=CARGO_COLUMNS + ["color"])


def build_container_inputs(presets: Dict[str, Container]) -> Container:
    with st.expander("Container", expanded=True):
        options = {preset.name: preset for preset in presets.values()}
        selected = st.selectbox(
            "Container Type",
            list(options.keys()),
            index=0,
            help="Select a standard container; dimensions can be customised below",
        )
        template = options[selected]

        st.markdown("**Inner Dimensions**")
        col1, col2, col3, col4 = st.columns(4)
        length = col1.number_input("Length (mm)", min_value=1.0, value=template.length, step=1.0)
        width = col2.number_input("Width (mm)", min_value=1.0, value=template.width, step=1.0)
        height = col3.number_input("Height (mm)", min_value=1.0, value=template.height, step=1.0)
        max_weight = col4.number_input("Max Weight (kg)", min_value=1.0, value=template.max_weight, step=1.0)

        volume = length * width * height / 1_000_000_000
        st.caption(f"Container Volume: {volume:.2f} m³ | Payload: {max_weight:,.0f} kg")

    return Container(
        container_id=template.container_id,
        name=template.name,
        length=float(length),
        width=float(width),
        height=float(height),
        max_weight=float(max_weight),
    )


def build_cargo_inputs() -> List[CargoSpec]:
    with st.expander("Cargo", expanded=True):
        edited = st.data_editor(
            default_cargo_frame(),
            num_rows="dynamic",
            use_container_width=True,
            column_order=CARGO_COLUMNS,
            key="cargo_editor",
        )
    # Blank cells come back as NaN; drop them so the spec sees them as missing.
    rows = [
        {key: value for key, value in row.items() if not pd.isna(value)}
        for row in edited.to_dict("records")
    ]
    return [CargoSpec.from_dict(row) for row in rows]


def render_results(container: Container, result: PackResult) -> None:
    st.divider()
    st.markdown("## Loading Results")

    summary_cols = st.columns(4)
    summary_cols[0].metric("Items Placed", result.placed_count)
    summary_cols[1].metric("Items Unplaced", len(result.unplaced_items))
    summary_cols[2].metric("Total Weight (kg)", f"{result.total_weight:,.1f}")
    cog_x, cog_y, cog_z = result.center_of_gravity
    summary_cols[3].metric(
        "Centre of Gravity (mm)",
        f"{cog_x:.0f} / {cog_y:.0f} / {cog_z:.0f}",
        help="Weighted centre of the cargo relative to the container centre (x length, y height, z width)",
    )

    with st.expander(f"{container.name} Utilisation", expanded=True):
        st.progress(min(result.volume_utilization_pct / 100, 1.0), text=f"Volume: {result.volume_utilization_pct:.2f}%")
        st.progress(min(result.weight_utilization_pct / 100, 1.0), text=f"Weight: {result.weight_utilization_pct:.2f}%")

    st.markdown("### Loading Sequence")
    st.dataframe(
        pd.DataFrame([item.as_dict() for item in result.placed_items]),
        use_container_width=True,
        hide_index=True,
    )

    if result.unplaced_items:
        st.markdown("### Unplaced Items")
        st.dataframe(
            pd.DataFrame([item.as_dict() for item in result.unplaced_items]),
            use_container_width=True,
            hide_index=True,
        )


def main() -> None:
    configure_logging()
    st.set_page_config(page_title="Container Loader", layout="wide")
    st.title("Container Loading Planner")

    st.divider()

    presets = load_container_presets()

    with st.form("input_form"):
        container = build_container_inputs(presets)
        st.divider()
        specs = build_cargo_inputs()
        st.divider()

        st.markdown("**Loading Settings**")
        gap = st.number_input(
            "Stacking Gap (mm)",
            min_value=0.0,
            value=0.0,
            step=1.0,
            help="Clearance kept between neighbouring boxes",
        )

        col1, col2, col3 = st.columns([1, 2, 1])
        with col2:
            submitted = st.form_submit_button("Calculate Loading Plan", type="primary", use_container_width=True)

    if submitted:
        try:
            st.session_state.pop("results", None)
            with st.spinner("Loading cargo..."):
                result = pack_cargo_into_container(container, specs, gap=float(gap))
            st.session_state["results"] = {"container": container, "result": result}
            st.success("Loading plan completed.")
        except ValueError as exc:
            st.error(f"Loading failed: {exc}")

    results = st.session_state.get("results")
    if results:
        render_results(results["container"], results["result"])


if __name__ == "__main__":
    main()
