"""
Connector Card

Card for one connector in the results grid and in the mating-connector /
assembly-variant lists of the detail page. Links to the detail page.
"""

import streamlit as st

from connector_guide.app.routing import connector_url
from connector_guide.i18n import translate
from connector_guide.styles.metric_card import render_badge
from connector_guide.styles.palette import COLORS, gender_color
from connector_guide.wizard.models import ConnectorRecord


def connector_subtitle(connector: ConnectorRecord, lang: str) -> str:
    """Display name, or a generated "4-pole Female connector" description."""
    if connector.display_name:
        return connector.display_name
    return translate(
        lang,
        "connector_guide.connector_card.pole_connector",
        count=connector.pole_count,
        gender=connector.gender,
    )


def render_connector_card(connector: ConnectorRecord, lang: str, show_video: bool = True) -> None:
    """Render a bordered card with video, badges and a details link."""
    with st.container(border=True):
        if show_video and connector.video_360_url:
            st.video(connector.video_360_url, loop=True, autoplay=True, muted=True)

        st.markdown(f"#### {connector.model}")
        st.markdown(
            f'<p style="color:{COLORS["text_secondary"]}; margin-top:-0.5rem;">'
            f"{connector_subtitle(connector, lang)}</p>",
            unsafe_allow_html=True,
        )

        badges = [
            render_badge(connector.gender, gender_color(connector.gender)),
            render_badge(
                "⚡ " + translate(lang, "connector_guide.connector_card.pole_label", count=connector.pole_count),
                COLORS["text_secondary"],
            ),
        ]
        if connector.orientation:
            badges.append(render_badge(f"↕ {connector.orientation}", COLORS["text_secondary"]))
        st.markdown("".join(badges), unsafe_allow_html=True)

        if connector.is_special_version:
            st.warning(translate(lang, "connector_guide.connector_card.special_version"))

        st.markdown(
            f"[{translate(lang, 'connector_guide.connector_card.view_details')} →]"
            f"({connector_url(connector.id, lang)})"
        )


def render_connector_grid(connectors, lang: str, columns: int = 3, show_video: bool = True) -> None:
    """Render connectors as cards, `columns` per row."""
    connectors = list(connectors)
    for start in range(0, len(connectors), columns):
        cols = st.columns(columns)
        for col, connector in zip(cols, connectors[start:start + columns]):
            with col:
                render_connector_card(connector, lang, show_video=show_video)
