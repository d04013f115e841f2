"""
Connector Wizard Step Components

Renders the four question steps of the connector guide and the navigation
buttons under them. Each step writes its answer straight into the session's
ConnectorWizard; gating happens through the disabled Next button.

Widget keys carry a form epoch that changes on reset, so a restarted wizard
does not show the previous run's selections.
"""

from typing import List, Optional

import streamlit as st

from connector_guide.config import MAX_POLE_COUNT, MIN_POLE_COUNT, RESULTS_STEP
from connector_guide.i18n import translate
from connector_guide.wizard.models import ApplicationType, Orientation
from connector_guide.wizard.state import ConnectorWizard

SESSION_KEY_FORM_EPOCH = "wizard_form_epoch"

APPLICATION_KEYS = {
    ApplicationType.WIRE_TO_WIRE: "wire_to_wire",
    ApplicationType.WIRE_TO_BOARD: "wire_to_board",
    ApplicationType.BOARD_TO_BOARD: "board_to_board",
}

APPLICATION_BADGES = {
    ApplicationType.WIRE_TO_WIRE: ("socket_badge", "tab_badge"),
    ApplicationType.WIRE_TO_BOARD: ("socket_badge", "pcb_badge"),
    ApplicationType.BOARD_TO_BOARD: ("pcb_badge1", "pcb_badge2"),
}

POLE_COUNTS: List[int] = list(range(MIN_POLE_COUNT, MAX_POLE_COUNT + 1))


def _form_epoch() -> int:
    return st.session_state.get(SESSION_KEY_FORM_EPOCH, 0)


def _key(name: str) -> str:
    return f"cg_{name}_{_form_epoch()}"


def _index_of(options: list, value) -> Optional[int]:
    return options.index(value) if value in options else None


def application_label(lang: str, application_type: ApplicationType) -> str:
    return translate(lang, f"connector_guide.step1.{APPLICATION_KEYS[application_type]}.title")


def orientation_label(lang: str, orientation: Orientation) -> str:
    return translate(lang, f"connector_guide.step3.{orientation.value}.title")


def pole_label(lang: str, count: int) -> str:
    unit_key = "pole" if count == 1 else "poles"
    return f"{count} {translate(lang, f'connector_guide.step2.{unit_key}')}"


def reset_wizard(wizard: ConnectorWizard) -> None:
    """Reset the wizard and start a fresh set of step widgets."""
    wizard.reset()
    st.session_state[SESSION_KEY_FORM_EPOCH] = _form_epoch() + 1


def _step_header(lang: str, step_key: str) -> None:
    st.markdown(f"### {translate(lang, f'connector_guide.{step_key}.title')}")
    st.caption(translate(lang, f"connector_guide.{step_key}.description"))


def render_step_1_application_type(wizard: ConnectorWizard, lang: str) -> None:
    """Step 1: wire-to-wire / wire-to-board / board-to-board."""
    _step_header(lang, "step1")
    options = list(ApplicationType)

    def describe(application_type: ApplicationType) -> str:
        prefix = f"connector_guide.step1.{APPLICATION_KEYS[application_type]}"
        badges = " + ".join(
            translate(lang, f"{prefix}.{badge}") for badge in APPLICATION_BADGES[application_type]
        )
        return f"**{translate(lang, f'{prefix}.title')}** ({badges})"

    selected = st.radio(
        translate(lang, "connector_guide.step1.title"),
        options=options,
        index=_index_of(options, wizard.answers.application_type),
        format_func=lambda value: application_label(lang, value),
        captions=[translate(lang, f"connector_guide.step1.{APPLICATION_KEYS[o]}.description") for o in options],
        key=_key("application_type"),
        label_visibility="collapsed",
    )
    if selected is not None:
        st.markdown(describe(selected))
    if selected is not None and selected != wizard.answers.application_type:
        wizard.update_answers(application_type=selected)


def render_step_2_pole_count(wizard: ConnectorWizard, lang: str) -> None:
    """Step 2: number of poles."""
    _step_header(lang, "step2")
    selected = st.radio(
        translate(lang, "connector_guide.step2.title"),
        options=POLE_COUNTS,
        index=_index_of(POLE_COUNTS, wizard.answers.pole_count),
        format_func=lambda count: pole_label(lang, count),
        horizontal=True,
        key=_key("pole_count"),
        label_visibility="collapsed",
    )
    if selected is not None and selected != wizard.answers.pole_count:
        wizard.update_answers(pole_count=selected)


def render_step_3_orientation(wizard: ConnectorWizard, lang: str) -> None:
    """Step 3: horizontal / vertical / either."""
    _step_header(lang, "step3")
    options = list(Orientation)
    selected = st.radio(
        translate(lang, "connector_guide.step3.title"),
        options=options,
        index=_index_of(options, wizard.answers.orientation),
        format_func=lambda value: orientation_label(lang, value),
        captions=[translate(lang, f"connector_guide.step3.{o.value}.description") for o in options],
        key=_key("orientation"),
        label_visibility="collapsed",
    )
    if selected is not None and selected != wizard.answers.orientation:
        wizard.update_answers(orientation=selected)


def render_step_4_special_requirements(wizard: ConnectorWizard, lang: str) -> None:
    """Step 4: optional refinements."""
    _step_header(lang, "step4")

    checkboxes = [
        ("requires_locking", "locking", "🔒"),
        ("special_version", "special_version", "⭐"),
        ("specific_keying", "keying", "🔑"),
    ]
    updates = {}
    for field_name, message_key, icon in checkboxes:
        checked = st.checkbox(
            f"{icon} {translate(lang, f'connector_guide.step4.{message_key}.title')}",
            value=getattr(wizard.answers, field_name),
            help=translate(lang, f"connector_guide.step4.{message_key}.description"),
            key=_key(field_name),
        )
        if checked != getattr(wizard.answers, field_name):
            updates[field_name] = checked

    if updates:
        wizard.update_answers(updates)

    st.info(translate(lang, "connector_guide.step4.info_message"))


STEP_RENDERERS = {
    1: render_step_1_application_type,
    2: render_step_2_pole_count,
    3: render_step_3_orientation,
    4: render_step_4_special_requirements,
}


def render_current_step(wizard: ConnectorWizard, lang: str) -> None:
    renderer = STEP_RENDERERS.get(wizard.step)
    if renderer is not None:
        renderer(wizard, lang)


def render_navigation(wizard: ConnectorWizard, lang: str) -> None:
    """Back / Next buttons for question steps, Refine / Start over on results."""
    col_back, _, col_next = st.columns([1, 2, 1])

    if wizard.step < RESULTS_STEP:
        with col_back:
            if st.button(
                f"◀ {translate(lang, 'connector_guide.navigation.back')}",
                disabled=(wizard.step == 1),
                use_container_width=True,
                key="cg_nav_back",
            ):
                wizard.retreat()
                st.rerun()

        is_last_question = wizard.step == RESULTS_STEP - 1
        next_label = translate(
            lang,
            "connector_guide.navigation.show_results" if is_last_question else "connector_guide.navigation.next",
        )
        with col_next:
            if st.button(
                f"{next_label} ▶",
                disabled=not wizard.is_step_valid(),
                type="primary",
                use_container_width=True,
                key="cg_nav_next",
            ):
                if is_last_question:
                    with st.spinner(translate(lang, "connector_guide.step5.loading")):
                        wizard.advance()
                else:
                    wizard.advance()
                st.rerun()
    else:
        with col_back:
            if st.button(
                f"◀ {translate(lang, 'connector_guide.navigation.refine_selection')}",
                use_container_width=True,
                key="cg_nav_refine",
            ):
                wizard.retreat()
                st.rerun()
        with col_next:
            if st.button(
                f"🔄 {translate(lang, 'connector_guide.navigation.start_over')}",
                type="primary",
                use_container_width=True,
                key="cg_nav_start_over",
            ):
                reset_wizard(wizard)
                st.rerun()
