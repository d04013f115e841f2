"""
Styles Package

- palette: color tokens and gender badge colors
- metric_card: metric cards and badges
"""

import streamlit as st

from connector_guide.styles.palette import COLORS


def inject_all_styles() -> None:
    """Inject global CSS once per rerun."""
    st.markdown(
        f"""
        <style>
        .block-container {{ padding-top: 2rem; max-width: 1100px; }}
        .stButton > button {{ border-radius: 999px; }}
        .cg-muted {{ color: {COLORS["text_secondary"]}; }}
        .cg-step-done {{ color: {COLORS["success"]}; font-weight: 600; }}
        .cg-step-active {{ color: {COLORS["accent"]}; font-weight: 700; }}
        </style>
        """,
        unsafe_allow_html=True,
    )


__all__ = ["COLORS", "inject_all_styles"]
