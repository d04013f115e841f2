"""
Session State Management

Central definition of the Streamlit session keys used by the app, and the
helpers that create the per-session wizard on first use.
"""

import logging
from typing import Callable, Optional

import streamlit as st

from connector_guide.catalog.base import ConnectorCatalog
from connector_guide.config import Settings
from connector_guide.wizard.fetcher import ResultFetcher
from connector_guide.wizard.state import ConnectorWizard

logger = logging.getLogger(__name__)


class SessionStateKeys:
    """Session state key names."""
    WIZARD = "connector_wizard"
    CATALOG_ERROR = "catalog_error"
    ACTIVE_PAGE = "active_page"


def init_session_state(
    settings: Settings,
    catalog_factory: Callable[[], ConnectorCatalog],
) -> Optional[ConnectorWizard]:
    """
    Create the session's wizard if it does not exist yet.

    Returns:
        The session wizard, or None if the catalog could not be created
        (the error is stored under SessionStateKeys.CATALOG_ERROR)
    """
    if SessionStateKeys.WIZARD in st.session_state:
        return st.session_state[SessionStateKeys.WIZARD]

    try:
        catalog = catalog_factory()
    except Exception as e:
        logger.error(f"Could not create catalog: {e}")
        st.session_state[SessionStateKeys.CATALOG_ERROR] = str(e)
        return None

    wizard = ConnectorWizard(fetcher=ResultFetcher(catalog, timeout_seconds=settings.query_timeout_seconds))
    st.session_state[SessionStateKeys.WIZARD] = wizard
    st.session_state.pop(SessionStateKeys.CATALOG_ERROR, None)
    logger.info("Created connector wizard for new session")
    return wizard


def get_wizard() -> Optional[ConnectorWizard]:
    return st.session_state.get(SessionStateKeys.WIZARD)


def get_catalog_error() -> Optional[str]:
    return st.session_state.get(SessionStateKeys.CATALOG_ERROR)
