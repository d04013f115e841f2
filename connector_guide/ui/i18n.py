"""
Language Toggle

Sidebar buttons that switch the session language. The choice is mirrored
into the `lang` query parameter so links and reloads keep the language.

    from connector_guide.ui.i18n import render_language_toggle_compact
"""

import streamlit as st

from connector_guide.i18n import (
    LANGUAGE_FLAGS,
    SUPPORTED_LANGUAGES,
    get_language,
    set_language,
    t,
)


def switch_language(lang: str) -> None:
    """Set the session language and keep the URL in sync."""
    set_language(lang)
    st.query_params["lang"] = get_language()


def render_language_toggle_compact() -> None:
    """
    Render compact language toggle (sidebar version).

    One button per supported language; the active one is bold and disabled.
    """
    current_lang = get_language()
    st.caption(t("app.language"))

    cols = st.columns(len(SUPPORTED_LANGUAGES))
    for col, lang in zip(cols, SUPPORTED_LANGUAGES):
        label = f"{LANGUAGE_FLAGS.get(lang, '')} {lang.upper()}".strip()
        with col:
            if st.button(
                f"**{label}**" if lang == current_lang else label,
                use_container_width=True,
                disabled=(lang == current_lang),
                key=f"lang_compact_{lang}",
                help=SUPPORTED_LANGUAGES[lang],
            ):
                switch_language(lang)
                st.rerun()


__all__ = [
    "switch_language",
    "render_language_toggle_compact",
]
