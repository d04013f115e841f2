"""
Tests for wizard answers, catalog records and result sets
"""

import math

import pytest

from connector_guide.errors import InvalidAnswer
from connector_guide.wizard.models import (
    ConnectorRecord,
    ConnectorRole,
    Orientation,
    ResultSet,
    TerminalRecord,
    WizardAnswers,
)


class TestWizardAnswers:

    def test_defaults(self):
        answers = WizardAnswers()
        assert answers.to_dict() == {
            "application_type": None,
            "pole_count": None,
            "orientation": None,
            "requires_locking": False,
            "special_version": False,
            "specific_keying": False,
        }

    def test_merged_returns_new_instance(self):
        answers = WizardAnswers(pole_count=4)
        merged = answers.merged(orientation="either")
        assert merged is not answers
        assert merged.orientation is Orientation.EITHER
        assert answers.orientation is None

    @pytest.mark.parametrize("pole_count", [2, 12])
    def test_pole_count_bounds_are_inclusive(self, pole_count):
        assert WizardAnswers(pole_count=pole_count).pole_count == pole_count

    def test_float_pole_count_is_rejected(self):
        with pytest.raises(InvalidAnswer):
            WizardAnswers(pole_count=4.5)

    def test_to_dict_uses_enum_values(self):
        answers = WizardAnswers(application_type="wire-to-board", pole_count=3, orientation="vertical")
        data = answers.to_dict()
        assert data["application_type"] == "wire-to-board"
        assert data["orientation"] == "vertical"


class TestRecords:

    def test_connector_from_row_normalizes_values(self):
        record = ConnectorRecord.from_row({
            "id": 7,
            "model": "MX-4F-H",
            "gender": "Female",
            "pole_count": 4.0,
            "orientation": "Horizontal",
            "is_special_version": None,
            "display_name": math.nan,
            "mates_with": "1| 2 |",
            "assembly_variants": ["9"],
            "unknown_column": "ignored",
        })

        assert record.id == "7"
        assert record.pole_count == 4
        assert record.is_special_version is False
        assert record.display_name is None
        assert record.mates_with == ("1", "2")
        assert record.assembly_variants == ("9",)
        assert record.title == "MX-4F-H"

    def test_title_prefers_display_name(self):
        record = ConnectorRecord(id="1", model="MX", gender="PCB", pole_count=2, display_name="Header")
        assert record.title == "Header"

    def test_terminal_from_row(self):
        terminal = TerminalRecord.from_row({"id": 3, "spec_number": "MT1-0.5", "terminal_type": "MT1"})
        assert terminal.id == "3"
        assert terminal.gender is None


class TestResultSet:

    def test_from_partitions(self):
        record = ConnectorRecord(id="1", model="MX", gender="Male", pole_count=2)
        results = ResultSet.from_partitions(
            {ConnectorRole.TAB: [record]},
            failed_roles=frozenset({ConnectorRole.SOCKET}),
        )
        assert results.tabs == [record]
        assert results.sockets == []
        assert results.total == 1
        assert results.for_role("tab") == [record]
        assert results.failed_roles == frozenset({ConnectorRole.SOCKET})
