"""
Shared fixtures for the connector guide tests.

FakeCatalog is an in-memory ConnectorCatalog that records every query and
can be told to fail, block or run a callback for a given gender.
"""

import threading
from typing import Any, Callable, Dict, List, Mapping, Optional, Sequence

import pytest

from connector_guide.catalog.base import ConnectorCatalog
from connector_guide.errors import CatalogQueryError, ConnectorNotFound
from connector_guide.wizard.models import ConnectorRecord, TerminalRecord


CONNECTOR_ROWS = [
    {"id": "1", "model": "MX-4F-H", "gender": "Female", "pole_count": 4, "orientation": "Horizontal"},
    {"id": "2", "model": "MX-4M-H", "gender": "Male", "pole_count": 4, "orientation": "Horizontal"},
    {"id": "3", "model": "MX-4F-V", "gender": "Female", "pole_count": 4, "orientation": "Vertical"},
    {"id": "4", "model": "MX-6P-H", "gender": "PCB", "pole_count": 6, "orientation": "Horizontal"},
    {"id": "5", "model": "MX-6P-V", "gender": "PCB", "pole_count": 6, "orientation": "Vertical"},
    {
        "id": "6",
        "model": "MX-4F-H-S",
        "gender": "Female",
        "pole_count": 4,
        "orientation": "Horizontal",
        "is_special_version": True,
        "terminal_suffix": "MT1",
        "mates_with": "2",
    },
    {"id": "7", "model": "AX-4F-H", "gender": "Female", "pole_count": 4, "orientation": "Horizontal"},
]

TERMINAL_ROWS = [
    {"id": "t1", "spec_number": "MT1-1.0", "terminal_type": "MT1", "gender": "Female"},
    {"id": "t2", "spec_number": "MT1-0.5", "terminal_type": "MT1", "gender": "Female"},
    {"id": "t3", "spec_number": "MT2-0.5", "terminal_type": "MT2", "gender": "Male"},
]


class FakeCatalog(ConnectorCatalog):
    """Records queries; matching is plain equality on the row dicts."""

    def __init__(self, rows: Sequence[Mapping[str, Any]] = (), terminals: Sequence[Mapping[str, Any]] = ()):
        self.rows = [ConnectorRecord.from_row(row) for row in rows]
        self.terminals = [TerminalRecord.from_row(row) for row in terminals]
        self.calls: List[Dict[str, Any]] = []
        self.fail_genders = set()
        self.block: Optional[threading.Event] = None
        self.block_genders = set()
        self.on_query: Optional[Callable[[Dict[str, Any]], None]] = None
        self._lock = threading.Lock()

    def find_connectors(self, predicates, order_by="model"):
        predicates = dict(predicates)
        with self._lock:
            self.calls.append(predicates)
        if self.on_query is not None:
            self.on_query(predicates)
        gender = predicates.get("gender")
        if gender in self.block_genders and self.block is not None:
            self.block.wait(timeout=5)
        if gender in self.fail_genders:
            raise CatalogQueryError(f"{gender} query failed", predicates=predicates)

        matched = [
            record for record in self.rows
            if all(getattr(record, column) == value for column, value in predicates.items())
        ]
        if order_by:
            matched.sort(key=lambda record: getattr(record, order_by))
        return matched

    def get_connector(self, connector_id):
        for record in self.rows:
            if record.id == str(connector_id):
                return record
        raise ConnectorNotFound(str(connector_id))

    def get_connectors(self, connector_ids):
        ids = {str(connector_id) for connector_id in connector_ids}
        return sorted((record for record in self.rows if record.id in ids), key=lambda record: record.model)

    def find_terminals(self, terminal_type=None):
        terminals = [t for t in self.terminals if terminal_type is None or t.terminal_type == terminal_type]
        return sorted(terminals, key=lambda terminal: terminal.spec_number)


# ============================================================================
# FIXTURES
# ============================================================================


@pytest.fixture
def connector_rows():
    return [dict(row) for row in CONNECTOR_ROWS]


@pytest.fixture
def terminal_rows():
    return [dict(row) for row in TERMINAL_ROWS]


@pytest.fixture
def fake_catalog(connector_rows, terminal_rows):
    """FakeCatalog loaded with the sample connectors and terminals."""
    return FakeCatalog(connector_rows, terminal_rows)


@pytest.fixture
def empty_catalog():
    return FakeCatalog()
