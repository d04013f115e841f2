"""
Metric Card Component

Reusable card for prominent values: result counts on the results page and
quick specs (poles, gender, orientation, mounting) on the connector detail
page.

Usage:
    from connector_guide.styles.metric_card import render_metric_card

    render_metric_card(
        value=4,
        label="Poles",
        icon="⚡"
    )
"""

from typing import Any, Optional
import streamlit as st

from connector_guide.styles.palette import COLORS


def format_metric_value(value: Any) -> str:
    """Format ints with separators, floats with 2 decimals, None as a dash."""
    if value is None:
        return "–"
    if isinstance(value, bool):
        return str(value)
    if isinstance(value, int):
        return f"{value:,}"
    if isinstance(value, float):
        return f"{value:.2f}"
    return str(value)


def render_metric_card(
    value: Any,
    label: str,
    description: Optional[str] = None,
    icon: Optional[str] = None,
    centered: bool = True
) -> None:
    """
    Render a prominent metric card with design system styling.

    Args:
        value: The metric value to display
        label: Primary label for the metric
        description: Optional detail below the value
        icon: Optional emoji shown before the label
        centered: Whether to center the card content (default: True)

    Examples:
        >>> render_metric_card(3, "Socket connectors", icon="🔌")
        >>> render_metric_card("Horizontal", "Orientation", centered=False)
    """
    formatted_value = format_metric_value(value)
    full_label = f"{icon} {label}" if icon else label
    container_style = "text-align: center;" if centered else ""

    st.markdown(
        f"""
        <div style="
            {container_style}
            padding: 1.25rem;
            background: {COLORS["bg_elevated"]};
            border-radius: 0.5rem;
            border: 1px solid {COLORS["border"]};
            box-shadow: 0 1px 3px rgba(0,0,0,0.05);
            margin: 0.75rem 0;
        ">
            <div style="
                font-size: 0.75rem;
                font-weight: 600;
                text-transform: uppercase;
                letter-spacing: 0.05em;
                color: {COLORS["text_secondary"]};
                margin-bottom: 0.5rem;
            ">
                {full_label}
            </div>
            <div style="
                font-size: 2rem;
                font-weight: 600;
                color: {COLORS["accent"]};
                line-height: 1.2;
            ">
                {formatted_value}
            </div>
            {f'''
            <div style="
                font-size: 0.875rem;
                color: {COLORS["text_secondary"]};
                margin-top: 0.5rem;
            ">
                {description}
            </div>
            ''' if description else ''}
        </div>
        """,
        unsafe_allow_html=True
    )


def render_metric_row(metrics: list) -> None:
    """
    Render a row of metric cards side by side.

    Args:
        metrics: List of dicts with keys: value, label, description (optional), icon (optional)
    """
    if not metrics:
        return

    cols = st.columns(len(metrics))

    for idx, metric in enumerate(metrics):
        with cols[idx]:
            render_metric_card(
                value=metric["value"],
                label=metric["label"],
                description=metric.get("description"),
                icon=metric.get("icon"),
                centered=True
            )


def render_badge(text: str, background: str) -> str:
    """Return inline HTML for a pill badge (embed in st.markdown)."""
    return (
        f'<span style="display:inline-block; padding:0.2rem 0.7rem; border-radius:999px; '
        f'background:{background}; color:#fff; font-weight:600; font-size:0.8rem; '
        f'margin-right:0.4rem;">{text}</span>'
    )
