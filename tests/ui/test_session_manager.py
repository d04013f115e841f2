"""
Tests for per-session wizard creation
"""

import pytest
import streamlit as st

from connector_guide.config import Settings
from connector_guide.errors import ConfigurationError
from connector_guide.utils import SessionStateKeys, get_catalog_error, get_wizard, init_session_state
from connector_guide.wizard.state import ConnectorWizard


@pytest.fixture
def session_state(monkeypatch):
    state = {}
    monkeypatch.setattr(st, "session_state", state)
    return state


def test_wizard_is_created_once_per_session(session_state, fake_catalog):
    factory_calls = []

    def factory():
        factory_calls.append(True)
        return fake_catalog

    settings = Settings(query_timeout_seconds=3.0)
    first = init_session_state(settings, factory)
    second = init_session_state(settings, factory)

    assert isinstance(first, ConnectorWizard)
    assert first is second
    assert get_wizard() is first
    assert first.fetcher.timeout_seconds == 3.0
    assert len(factory_calls) == 1


def test_catalog_failure_is_stored_for_display(session_state):
    def factory():
        raise ConfigurationError("No catalog configured")

    assert init_session_state(Settings(), factory) is None
    assert get_wizard() is None
    assert get_catalog_error() == "No catalog configured"
    assert SessionStateKeys.WIZARD not in session_state
