"""
Terminals Page

Lists every terminal in the catalog, grouped by terminal type.
"""

import logging

import pandas as pd
import streamlit as st

from connector_guide.catalog.base import ConnectorCatalog, group_terminals
from connector_guide.errors import CatalogQueryError
from connector_guide.i18n import translate

logger = logging.getLogger(__name__)


def terminals_to_frame(terminals) -> pd.DataFrame:
    columns = ["spec_number", "gender", "description"]
    return pd.DataFrame(
        [{column: getattr(terminal, column) for column in columns} for terminal in terminals],
        columns=columns,
    )


def render_terminals_page(catalog: ConnectorCatalog, lang: str) -> None:
    st.title(translate(lang, "terminals.title"))
    st.caption(translate(lang, "terminals.description"))

    try:
        terminals = catalog.find_terminals()
    except CatalogQueryError as e:
        logger.error(f"Could not load terminals: {e}")
        st.error(translate(lang, "app.catalog_unavailable", error=e))
        return

    if not terminals:
        st.info(translate(lang, "terminals.empty"))
        return

    for terminal_type, group in group_terminals(terminals).items():
        with st.expander(f"**{terminal_type}** · {translate(lang, 'terminals.count', count=len(group))}"):
            st.dataframe(terminals_to_frame(group), use_container_width=True, hide_index=True)
            images = [terminal.image_url for terminal in group if terminal.image_url]
            if images:
                st.image(images, width=120)
