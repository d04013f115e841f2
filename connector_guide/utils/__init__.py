"""
Utilities Package

- session_manager: Streamlit session keys and per-session wizard
"""

from connector_guide.utils.session_manager import (
    SessionStateKeys,
    get_catalog_error,
    get_wizard,
    init_session_state,
)

__all__ = [
    "SessionStateKeys",
    "get_catalog_error",
    "get_wizard",
    "init_session_state",
]
