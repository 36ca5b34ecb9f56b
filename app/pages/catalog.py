"""
Catalog browser page rendering.
"""

from __future__ import annotations

import pandas as pd
import streamlit as st

from app.catalog_registry import CATALOG_SPECS
from app.session_controller import get_catalog


def render_catalog_page() -> None:
    labels = {spec.label: spec.catalog_type for spec in CATALOG_SPECS.values()}
    label = st.selectbox("Catalog", list(labels.keys()))
    items = get_catalog(labels[label])

    df = pd.DataFrame([item.model_dump() for item in items], columns=["id", "prompt", "answer"])
    st.caption(f"{len(df)} items")
    st.dataframe(df, hide_index=True, use_container_width=True)
