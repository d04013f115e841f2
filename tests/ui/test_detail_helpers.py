"""
Tests for the connector detail and terminals page helpers
"""

from connector_guide.ui.connector_card import connector_subtitle
from connector_guide.ui.detail import compatible_terminals, quick_specs
from connector_guide.ui.terminals import terminals_to_frame


def test_compatible_terminals_follow_terminal_suffix(fake_catalog):
    connector = fake_catalog.get_connector("6")
    assert [t.spec_number for t in compatible_terminals(fake_catalog, connector)] == ["MT1-0.5", "MT1-1.0"]


def test_connector_without_suffix_has_no_terminals(fake_catalog):
    assert compatible_terminals(fake_catalog, fake_catalog.get_connector("1")) == []


def test_quick_specs_mark_missing_values(fake_catalog):
    specs = quick_specs(fake_catalog.get_connector("1"), "en")
    assert [spec["value"] for spec in specs] == [4, "Female", "Horizontal", "n/a"]
    assert [spec["label"] for spec in specs] == ["Poles", "Gender", "Orientation", "Mounting"]


def test_subtitle_is_generated_without_display_name(fake_catalog):
    assert connector_subtitle(fake_catalog.get_connector("2"), "en") == "4-pole Male connector"


def test_terminals_table(fake_catalog):
    frame = terminals_to_frame(fake_catalog.find_terminals("MT2"))
    assert frame.to_dict("records") == [{"spec_number": "MT2-0.5", "gender": "Male", "description": None}]
