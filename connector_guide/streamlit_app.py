"""
Streamlit App for the Connector Guide

Main entry point. Delegates to the sidebar and page modules.

Architecture:
- app/sidebar.py: Sidebar rendering and controls
- app/routing.py: Query-parameter routing
- ui/*.py: Page-specific rendering logic
- This file: Configuration, initialization, routing

Usage:
    streamlit run connector_guide/streamlit_app.py
"""

import logging

import streamlit as st

from connector_guide.app.routing import (
    PAGE_CATALOG,
    PAGE_CONNECTOR,
    PAGE_INSTALLATION,
    PAGE_TERMINALS,
    Route,
    resolve_route,
)
from connector_guide.app.sidebar import render_sidebar
from connector_guide.catalog import ConnectorCatalog, create_catalog
from connector_guide.config import RESULTS_STEP, Settings, configure_logging, load_settings
from connector_guide.i18n import set_language, translate
from connector_guide.styles import inject_all_styles
from connector_guide.ui import (
    render_catalog_page,
    render_connector_detail,
    render_current_step,
    render_installation_page,
    render_navigation,
    render_progress_bar,
    render_results,
    render_terminals_page,
)
from connector_guide.utils import get_catalog_error, init_session_state
from connector_guide.wizard.state import ConnectorWizard

logger = logging.getLogger(__name__)


# ============================================================================
# RESOURCES
# ============================================================================

@st.cache_resource
def get_settings() -> Settings:
    settings = load_settings()
    configure_logging(settings.log_level)
    logger.info(
        f"Connector guide starting (catalog: {'supabase' if settings.has_supabase else 'csv'}, "
        f"language: {settings.default_language})"
    )
    return settings


@st.cache_resource
def get_catalog() -> ConnectorCatalog:
    """Catalog shared by all sessions of this process."""
    return create_catalog(get_settings())


# ============================================================================
# PAGES
# ============================================================================

def render_guide_page(wizard: ConnectorWizard, lang: str) -> None:
    """Hero, step indicator, current step (or results) and navigation."""
    st.title(f"🔌 {translate(lang, 'connector_guide.page_title')}")
    st.caption(translate(lang, "connector_guide.page_description"))

    render_progress_bar(wizard.step, lang)
    st.divider()

    with st.container(border=True):
        if wizard.step == RESULTS_STEP:
            render_results(wizard, lang)
        else:
            render_current_step(wizard, lang)

    render_navigation(wizard, lang)


def _route_to_active_page(route: Route, wizard: ConnectorWizard) -> None:
    if route.page == PAGE_INSTALLATION:
        render_installation_page(route.lang)
    elif route.page == PAGE_CATALOG:
        render_catalog_page(get_catalog(), route.lang)
    elif route.page == PAGE_TERMINALS:
        render_terminals_page(get_catalog(), route.lang)
    elif route.page == PAGE_CONNECTOR:
        render_connector_detail(get_catalog(), route.connector_id, route.lang)
    else:
        render_guide_page(wizard, route.lang)


# ============================================================================
# MAIN APPLICATION
# ============================================================================

def main():
    """Main Streamlit app entry point."""

    st.set_page_config(
        page_title="Connector Guide",
        page_icon="🔌",
        layout="wide"
    )

    inject_all_styles()

    settings = get_settings()

    # Language and page come from the URL so links can be shared
    route = resolve_route(st.query_params.to_dict(), default_lang=settings.default_language)
    set_language(route.lang)

    wizard = init_session_state(settings, get_catalog)

    with st.sidebar:
        render_sidebar(route.page, wizard)

    if wizard is None:
        # Static pages still work without a catalog
        if route.page == PAGE_INSTALLATION:
            render_installation_page(route.lang)
            return
        st.error(translate(route.lang, "app.catalog_unavailable", error=get_catalog_error()))
        return

    _route_to_active_page(route, wizard)


if __name__ == "__main__":
    main()
