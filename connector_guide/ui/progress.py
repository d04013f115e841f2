"""
Wizard Progress Bar

Shows the five wizard steps with icons, marking completed and active steps,
and an overall progress bar. Step titles come from translations by fixed
step index.
"""

from typing import List

import streamlit as st

from connector_guide.config import TOTAL_STEPS
from connector_guide.i18n import translate

STEP_TITLE_KEYS = [
    "connector_guide.step1.title",
    "connector_guide.step2.title",
    "connector_guide.step3.title",
    "connector_guide.step4.title",
    "connector_guide.step5.results_title",
]

STEP_ICONS = ["📦", "⚡", "↕️", "⚙️", "✅"]


def step_titles(lang: str) -> List[str]:
    """Translated step titles, index 0 = step 1."""
    return [translate(lang, key) for key in STEP_TITLE_KEYS]


def render_progress_bar(current_step: int, lang: str) -> None:
    """
    Render the step indicator.

    Args:
        current_step: Active step (1..TOTAL_STEPS)
        lang: Display language
    """
    titles = step_titles(lang)
    cols = st.columns(TOTAL_STEPS)

    for index, (col, title) in enumerate(zip(cols, titles), start=1):
        if index < current_step:
            marker, css_class = "✔", "cg-step-done"
        elif index == current_step:
            marker, css_class = STEP_ICONS[index - 1], "cg-step-active"
        else:
            marker, css_class = STEP_ICONS[index - 1], "cg-muted"
        with col:
            st.markdown(
                f'<div style="text-align:center;" class="{css_class}">'
                f'<div style="font-size:1.5rem;">{marker}</div>{title}</div>',
                unsafe_allow_html=True,
            )

    st.progress(current_step / TOTAL_STEPS)
