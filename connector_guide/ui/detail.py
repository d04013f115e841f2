"""
Connector Detail Page

Shows one connector addressed by ?page=connector&id=<id>:
quick specs, 360° video, documents, compatible terminals (matched through
the connector's terminal_suffix), mating connectors and assembly variants.
"""

import logging
from typing import List

import streamlit as st

from connector_guide.app.routing import PAGE_CONNECTOR_GUIDE, page_url
from connector_guide.catalog.base import ConnectorCatalog
from connector_guide.errors import CatalogQueryError, ConnectorNotFound
from connector_guide.i18n import translate
from connector_guide.styles.metric_card import render_metric_row
from connector_guide.ui.connector_card import connector_subtitle, render_connector_grid
from connector_guide.wizard.models import ConnectorRecord, TerminalRecord

logger = logging.getLogger(__name__)


def quick_specs(connector: ConnectorRecord, lang: str) -> List[dict]:
    """Metric-row entries for the quick specs row (missing values shown as n/a)."""
    missing = translate(lang, "connector_detail.not_available")
    return [
        {"value": connector.pole_count, "label": translate(lang, "connector_detail.quick_specs.poles"), "icon": "⚡"},
        {"value": connector.gender, "label": translate(lang, "connector_detail.quick_specs.gender"), "icon": "🔌"},
        {
            "value": connector.orientation or missing,
            "label": translate(lang, "connector_detail.quick_specs.orientation"),
            "icon": "↕️",
        },
        {
            "value": connector.mounting_type or missing,
            "label": translate(lang, "connector_detail.quick_specs.mounting"),
            "icon": "🔩",
        },
    ]


def compatible_terminals(catalog: ConnectorCatalog, connector: ConnectorRecord) -> List[TerminalRecord]:
    if not connector.terminal_suffix:
        return []
    return catalog.find_terminals(terminal_type=connector.terminal_suffix)


def _render_back_link(lang: str) -> None:
    st.markdown(
        f"[← {translate(lang, 'connector_detail.back_to_guide')}]({page_url(PAGE_CONNECTOR_GUIDE, lang)})"
    )


def _render_documents(connector: ConnectorRecord, lang: str) -> None:
    links = []
    if connector.technical_drawing_url:
        links.append(f"📐 [{translate(lang, 'connector_detail.technical_drawing')}]({connector.technical_drawing_url})")
    if connector.keying_pdf:
        links.append(f"🔑 [{translate(lang, 'connector_detail.keying_document')}]({connector.keying_pdf})")
    for link in links:
        st.markdown(link)


def _render_terminals(terminals: List[TerminalRecord], lang: str) -> None:
    st.markdown(f"### {translate(lang, 'connector_detail.terminals')}")
    if not terminals:
        st.caption(translate(lang, "connector_detail.no_terminals"))
        return
    st.dataframe(
        [
            {
                "spec_number": terminal.spec_number,
                "gender": terminal.gender,
                "description": terminal.description,
            }
            for terminal in terminals
        ],
        use_container_width=True,
        hide_index=True,
    )


def _render_related(catalog: ConnectorCatalog, ids, title_key: str, lang: str) -> None:
    if not ids:
        return
    connectors = catalog.get_connectors(list(ids))
    if not connectors:
        return
    st.markdown(f"### {translate(lang, title_key)}")
    render_connector_grid(connectors, lang, show_video=False)


def render_connector_detail(catalog: ConnectorCatalog, connector_id: str, lang: str) -> None:
    """Render the detail page, or a not-found message with a link back."""
    _render_back_link(lang)

    try:
        connector = catalog.get_connector(connector_id)
    except ConnectorNotFound:
        logger.info(f"Connector detail requested for unknown id {connector_id!r}")
        st.warning(translate(lang, "connector_detail.not_found"))
        return
    except CatalogQueryError as e:
        logger.error(f"Could not load connector {connector_id!r}: {e}")
        st.error(translate(lang, "app.catalog_unavailable", error=e))
        return

    st.title(connector.model)
    st.caption(connector_subtitle(connector, lang))

    render_metric_row(quick_specs(connector, lang))

    col_media, col_info = st.columns([3, 2])
    with col_media:
        if connector.video_360_url:
            st.markdown(f"**{translate(lang, 'connector_detail.video')}**")
            st.video(connector.video_360_url, loop=True)
    with col_info:
        if connector.special_notes:
            st.info(f"**{translate(lang, 'connector_detail.special_notes')}:** {connector.special_notes}")
        _render_documents(connector, lang)

    st.divider()
    try:
        _render_terminals(compatible_terminals(catalog, connector), lang)
        _render_related(catalog, connector.mates_with, "connector_detail.mating_connectors", lang)
        _render_related(catalog, connector.assembly_variants, "connector_detail.assembly_variants", lang)
    except CatalogQueryError as e:
        logger.error(f"Could not load related data for connector {connector_id!r}: {e}")
        st.error(translate(lang, "app.catalog_unavailable", error=e))
