"""
Sidebar Module

Responsibilities:
- Branding
- Language toggle
- Page navigation (mirrored into the `page` query parameter)
- Wizard reset button
"""

from typing import Optional

import streamlit as st

from connector_guide.app.routing import NAV_PAGES, PAGE_CONNECTOR, PAGE_CONNECTOR_GUIDE
from connector_guide.i18n import t
from connector_guide.ui.catalog import FILTER_PARAMS
from connector_guide.styles.palette import COLORS
from connector_guide.ui.i18n import render_language_toggle_compact
from connector_guide.ui.wizard_steps import reset_wizard
from connector_guide.wizard.state import ConnectorWizard


def _get_sidebar_branding_html() -> str:
    return f"""
    <div style="text-align: center; padding: 1rem 0;">
        <div style="font-size: 3rem;">🔌</div>
        <h3 style="margin: 0.5rem 0 0 0; font-size: 1.1rem; font-weight: 600;">
            {t("app.title")}
        </h3>
        <p style="margin: 0.25rem 0 0 0; font-size: 0.8rem; color: {COLORS["text_secondary"]};">
            {t("app.tagline")}
        </p>
    </div>
    """


def render_sidebar(active_page: str, wizard: Optional[ConnectorWizard]) -> None:
    """
    Render complete sidebar with all controls.

    Args:
        active_page: Page resolved from the query parameters
        wizard: Session wizard, None when the catalog is unavailable
    """
    st.markdown(_get_sidebar_branding_html(), unsafe_allow_html=True)
    st.markdown("---")

    render_language_toggle_compact()
    st.divider()

    _render_page_selector(active_page)

    if wizard is not None:
        st.divider()
        if st.button(f"🔄 {t('app.reset_wizard')}", use_container_width=True):
            reset_wizard(wizard)
            _switch_page(PAGE_CONNECTOR_GUIDE)
            st.rerun()


def _render_page_selector(active_page: str) -> None:
    """Render page navigation radio."""
    st.markdown(f"### {t('app.navigation')}")
    # The detail page belongs to the guide in the navigation
    current = PAGE_CONNECTOR_GUIDE if active_page == PAGE_CONNECTOR else active_page
    page = st.radio(
        t("app.navigation"),
        options=list(NAV_PAGES),
        format_func=lambda name: t(f"app.pages.{name}"),
        index=list(NAV_PAGES).index(current),
        key=f"page_selector_{current}",
        label_visibility="collapsed",
    )
    if page != current:
        _switch_page(page)
        st.rerun()


def _switch_page(page: str) -> None:
    """Point the URL at `page`, dropping parameters owned by other pages."""
    for name in ("id",) + FILTER_PARAMS:
        st.query_params.pop(name, None)
    st.query_params["page"] = page
