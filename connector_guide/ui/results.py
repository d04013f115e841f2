"""
Result Renderer - Connector Guide Step 5

Projects the wizard's ResultSet and loading flag onto the results page:
- loading: spinner placeholder
- empty: "no results" card with a reset action
- results: header, one section per non-empty role with counts and cards,
  and a comparison table

build_results_view() holds the projection and does no rendering, so it can
be checked without a Streamlit runtime.

Usage:
    from connector_guide.ui.results import render_results
    render_results(wizard, lang)
"""

from dataclasses import dataclass, field
from typing import List, Optional

import pandas as pd
import streamlit as st

from connector_guide.i18n import translate
from connector_guide.styles.metric_card import render_badge, render_metric_row
from connector_guide.styles.palette import COLORS, gender_color
from connector_guide.ui.connector_card import render_connector_grid
from connector_guide.ui.wizard_steps import application_label, orientation_label, reset_wizard
from connector_guide.wizard.models import ConnectorRecord, ConnectorRole, ResultSet, WizardAnswers
from connector_guide.wizard.query import ROLE_GENDERS
from connector_guide.wizard.state import ConnectorWizard

VIEW_LOADING = "loading"
VIEW_EMPTY = "empty"
VIEW_RESULTS = "results"

# Message group and badge key per role, in display order
ROLE_SECTIONS = [
    (ConnectorRole.SOCKET, "sockets", "female_badge"),
    (ConnectorRole.TAB, "tabs", "male_badge"),
    (ConnectorRole.HEADER, "headers", "pcb_badge"),
]


@dataclass
class ResultSection:
    """One role's partition as shown on the page."""
    role: ConnectorRole
    message_group: str
    badge_key: str
    connectors: List[ConnectorRecord] = field(default_factory=list)

    @property
    def count(self) -> int:
        return len(self.connectors)

    @property
    def count_key(self) -> str:
        suffix = "found" if self.count == 1 else "found_plural"
        return f"connector_guide.step5.{self.message_group}.{suffix}"

    @property
    def title_key(self) -> str:
        return f"connector_guide.step5.{self.message_group}.title"

    @property
    def badge_message_key(self) -> str:
        return f"connector_guide.step5.{self.message_group}.{self.badge_key}"


@dataclass
class ResultsView:
    state: str
    sections: List[ResultSection] = field(default_factory=list)

    @property
    def total(self) -> int:
        return sum(section.count for section in self.sections)


def build_results_view(results: ResultSet, loading: bool) -> ResultsView:
    """Project results and loading flag onto a ResultsView."""
    if loading:
        return ResultsView(state=VIEW_LOADING)

    sections = [
        ResultSection(role=role, message_group=group, badge_key=badge, connectors=list(results.for_role(role)))
        for role, group, badge in ROLE_SECTIONS
        if results.for_role(role)
    ]
    if not sections:
        return ResultsView(state=VIEW_EMPTY)
    return ResultsView(state=VIEW_RESULTS, sections=sections)


def results_to_frame(results: ResultSet, lang: Optional[str] = None) -> pd.DataFrame:
    """
    Flatten results into a comparison table.

    Column headers are translated when `lang` is given, otherwise the raw
    keys (role, model, poles, orientation, special_version) are used.
    """
    columns = ["role", "model", "poles", "orientation", "special_version"]
    rows = [
        {
            "role": role.value,
            "model": connector.model,
            "poles": connector.pole_count,
            "orientation": connector.orientation,
            "special_version": connector.is_special_version,
        }
        for role, _, _ in ROLE_SECTIONS
        for connector in results.for_role(role)
    ]
    frame = pd.DataFrame(rows, columns=columns)
    if lang is not None:
        frame = frame.rename(columns={
            column: translate(lang, f"connector_guide.step5.columns.{column}") for column in columns
        })
    return frame


def based_on_text(answers: WizardAnswers, lang: str) -> str:
    return translate(
        lang,
        "connector_guide.step5.based_on",
        pole_count=answers.pole_count or 0,
        orientation=orientation_label(lang, answers.orientation) if answers.orientation else "",
        application_type=application_label(lang, answers.application_type) if answers.application_type else "",
    )


def _render_loading(lang: str) -> None:
    with st.container(border=True):
        with st.spinner(translate(lang, "connector_guide.step5.loading")):
            st.markdown(
                f'<p style="text-align:center; font-size:1.2rem;">'
                f'{translate(lang, "connector_guide.step5.loading")}</p>',
                unsafe_allow_html=True,
            )


def _render_empty(wizard: ConnectorWizard, lang: str) -> None:
    with st.container(border=True):
        st.markdown(
            f"""
            <div style="text-align:center; padding:1.5rem; background:{COLORS["warning_bg"]}; border-radius:0.5rem;">
                <div style="font-size:3rem;">⚠️</div>
                <h3>{translate(lang, "connector_guide.step5.no_results.title")}</h3>
                <p style="color:{COLORS["text_secondary"]};">
                    {translate(lang, "connector_guide.step5.no_results.description")}
                </p>
            </div>
            """,
            unsafe_allow_html=True,
        )
        if st.button(
            f"🔄 {translate(lang, 'connector_guide.step5.no_results.button_text')}",
            key="cg_no_results_reset",
            use_container_width=True,
        ):
            reset_wizard(wizard)
            st.rerun()


def _render_section(section: ResultSection, lang: str) -> None:
    gender = ROLE_GENDERS[section.role].value
    st.markdown(
        f"### {render_badge(translate(lang, section.badge_message_key), gender_color(gender))} "
        f"{translate(lang, section.title_key)}",
        unsafe_allow_html=True,
    )
    st.caption(translate(lang, section.count_key, count=section.count))
    render_connector_grid(section.connectors, lang)


def render_results(wizard: ConnectorWizard, lang: str) -> None:
    """Render the results step for the wizard's current ResultSet."""
    view = build_results_view(wizard.results, wizard.loading)

    if view.state == VIEW_LOADING:
        _render_loading(lang)
        return

    if view.state == VIEW_EMPTY:
        _render_empty(wizard, lang)
        return

    st.markdown(f"## ✅ {translate(lang, 'connector_guide.step5.results_title')}")
    st.caption(based_on_text(wizard.answers, lang))

    render_metric_row([
        {
            "value": section.count,
            "label": translate(lang, section.title_key),
        }
        for section in view.sections
    ])

    for section in view.sections:
        st.divider()
        _render_section(section, lang)

    st.divider()
    with st.expander(f"📋 {translate(lang, 'connector_guide.step5.summary_table')}"):
        st.dataframe(results_to_frame(wizard.results, lang), use_container_width=True, hide_index=True)
