"""
Tests for the pandas-backed DataFrameCatalog
"""

import pandas as pd
import pytest

from connector_guide.catalog import DataFrameCatalog, create_catalog, group_terminals
from connector_guide.config import Settings
from connector_guide.errors import CatalogQueryError, ConfigurationError, ConnectorNotFound


# ============================================================================
# FIXTURES
# ============================================================================


@pytest.fixture
def catalog(connector_rows, terminal_rows):
    return DataFrameCatalog.from_records(connector_rows, terminal_rows)


@pytest.fixture
def csv_catalog_paths(tmp_path):
    connectors = tmp_path / "connectors.csv"
    connectors.write_text(
        "id,model,gender,pole_count,orientation,is_special_version,mates_with,terminal_suffix\n"
        "10,MX-2F-H,Female,2,Horizontal,false,11|12,MT1\n"
        "11,MX-2M-H,Male,2,Horizontal,TRUE,,MT2\n"
        "12,MX-2M-V,Male,2,Vertical,0,,\n",
        encoding="utf-8",
    )
    terminals = tmp_path / "terminals.csv"
    terminals.write_text(
        "id,spec_number,terminal_type,gender\n"
        "1,MT1-0.5,MT1,Female\n"
        "2,MT2-0.5,MT2,Male\n",
        encoding="utf-8",
    )
    return connectors, terminals


# ============================================================================
# QUERIES
# ============================================================================


class TestFindConnectors:

    def test_equality_filters(self, catalog):
        found = catalog.find_connectors({"gender": "Female", "pole_count": 4, "orientation": "Horizontal"})
        assert [c.id for c in found] == ["7", "1", "6"]

    def test_results_ordered_by_model(self, catalog):
        found = catalog.find_connectors({"gender": "Female"})
        models = [c.model for c in found]
        assert models == sorted(models)

    def test_special_version_filter(self, catalog):
        found = catalog.find_connectors({"gender": "Female", "is_special_version": True})
        assert [c.id for c in found] == ["6"]

    def test_no_match_returns_empty_list(self, catalog):
        assert catalog.find_connectors({"gender": "Male", "pole_count": 12}) == []

    def test_unsupported_column_raises(self, catalog):
        with pytest.raises(CatalogQueryError) as exc_info:
            catalog.find_connectors({"colour": "red"})
        assert exc_info.value.table == "connectors"
        assert exc_info.value.predicates == {"colour": "red"}

    def test_records_have_clean_optional_fields(self, catalog):
        record = catalog.find_connectors({"id": "1"})[0]
        assert record.display_name is None
        assert record.is_special_version is False
        assert record.mates_with == ()


class TestLookups:

    def test_get_connector(self, catalog):
        connector = catalog.get_connector("6")
        assert connector.model == "MX-4F-H-S"
        assert connector.mates_with == ("2",)

    def test_get_connector_accepts_non_string_ids(self, catalog):
        assert catalog.get_connector(6).id == "6"

    def test_get_connector_unknown_id_raises(self, catalog):
        with pytest.raises(ConnectorNotFound) as exc_info:
            catalog.get_connector("nope")
        assert exc_info.value.connector_id == "nope"

    def test_get_connectors_skips_unknown_ids(self, catalog):
        found = catalog.get_connectors(["2", "1", "missing"])
        assert [c.model for c in found] == ["MX-4F-H", "MX-4M-H"]

    def test_find_terminals_by_type_sorted_by_spec_number(self, catalog):
        terminals = catalog.find_terminals("MT1")
        assert [t.spec_number for t in terminals] == ["MT1-0.5", "MT1-1.0"]

    def test_find_all_terminals(self, catalog):
        assert len(catalog.find_terminals()) == 3

    def test_group_terminals(self, catalog):
        groups = group_terminals(catalog.find_terminals())
        assert list(groups) == ["MT1", "MT2"]
        assert len(groups["MT1"]) == 2


class TestConstruction:

    def test_missing_required_column_raises(self):
        with pytest.raises(CatalogQueryError):
            DataFrameCatalog(pd.DataFrame({"id": [1], "model": ["X"]}))

    def test_empty_catalog(self):
        catalog = DataFrameCatalog.from_records([])
        assert len(catalog) == 0
        assert catalog.find_connectors({"gender": "Female"}) == []
        assert catalog.find_terminals() == []

    def test_from_csv(self, csv_catalog_paths):
        connectors, terminals = csv_catalog_paths
        catalog = DataFrameCatalog.from_csv(connectors, terminals)

        assert len(catalog) == 3
        assert catalog.get_connector("10").mates_with == ("11", "12")
        assert catalog.get_connector("11").is_special_version is True
        assert catalog.get_connector("12").is_special_version is False
        assert catalog.get_connector("12").terminal_suffix is None
        assert [c.id for c in catalog.find_connectors({"gender": "Male", "pole_count": 2})] == ["11", "12"]
        assert [t.id for t in catalog.find_terminals("MT2")] == ["2"]


class TestCreateCatalog:

    def test_csv_catalog_when_supabase_not_configured(self, csv_catalog_paths):
        connectors, terminals = csv_catalog_paths
        catalog = create_catalog(Settings(catalog_csv=str(connectors), terminals_csv=str(terminals)))
        assert isinstance(catalog, DataFrameCatalog)

    def test_no_source_configured_raises(self):
        with pytest.raises(ConfigurationError):
            create_catalog(Settings())
