"""
Installation Guide Page

Static crimping and assembly instructions; all text comes from translations.
"""

import streamlit as st

from connector_guide.i18n import translate, translate_list


def render_installation_page(lang: str) -> None:
    st.title(translate(lang, "installation.title"))
    st.caption(translate(lang, "installation.subtitle"))

    st.warning(
        f"**⚠️ {translate(lang, 'installation.safety_warning.title')}**\n\n"
        f"{translate(lang, 'installation.safety_warning.body')}"
    )

    col_tools, col_steps = st.columns([1, 2])
    with col_tools:
        st.markdown(f"### 🧰 {translate(lang, 'installation.tools.title')}")
        st.markdown("\n".join(f"- {item}" for item in translate_list(lang, "installation.tools.items")))
    with col_steps:
        st.markdown(f"### 📋 {translate(lang, 'installation.steps.title')}")
        st.markdown(
            "\n".join(
                f"{number}. {item}"
                for number, item in enumerate(translate_list(lang, "installation.steps.items"), start=1)
            )
        )
