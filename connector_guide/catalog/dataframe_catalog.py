"""
In-Memory DataFrame Catalog

ConnectorCatalog over pandas DataFrames. Used for offline runs (catalog
exported to CSV) and as the default test double.

CSV conventions:
- list columns (mates_with, assembly_variants) are "|"-separated ids
- is_special_version accepts true/false

Usage:
    from connector_guide.catalog.dataframe_catalog import DataFrameCatalog

    catalog = DataFrameCatalog.from_csv("connectors.csv", "terminals.csv")
"""

import logging
from pathlib import Path
from typing import Any, Iterable, List, Mapping, Optional, Sequence, Union

import pandas as pd

from connector_guide.catalog.base import ConnectorCatalog, check_predicates
from connector_guide.config import CONNECTORS_TABLE, DEFAULT_ORDER_FIELD, TERMINALS_TABLE
from connector_guide.errors import CatalogQueryError, ConnectorNotFound
from connector_guide.wizard.models import ConnectorRecord, TerminalRecord

logger = logging.getLogger(__name__)

CONNECTOR_COLUMNS = ["id", "model", "gender", "pole_count", "orientation", "is_special_version"]
TERMINAL_COLUMNS = ["id", "spec_number", "terminal_type"]


def _records(frame: pd.DataFrame) -> List[dict]:
    """DataFrame rows as dicts with missing values mapped to None."""
    return frame.astype(object).where(frame.notna(), None).to_dict("records")


class DataFrameCatalog(ConnectorCatalog):
    """ConnectorCatalog backed by pandas DataFrames."""

    def __init__(self, connectors: pd.DataFrame, terminals: Optional[pd.DataFrame] = None):
        missing = [col for col in CONNECTOR_COLUMNS if col not in connectors.columns]
        if missing:
            raise CatalogQueryError(
                f"Connector table is missing column(s): {', '.join(missing)}",
                table=CONNECTORS_TABLE,
            )
        self._connectors = connectors.copy()
        self._connectors["id"] = self._connectors["id"].astype(str)
        if "is_special_version" in self._connectors:
            self._connectors["is_special_version"] = (
                self._connectors["is_special_version"].fillna(False).astype(bool)
            )

        if terminals is None:
            terminals = pd.DataFrame(columns=TERMINAL_COLUMNS)
        self._terminals = terminals.copy()
        self._terminals["id"] = self._terminals["id"].astype(str)

    @classmethod
    def from_records(
        cls,
        connectors: Iterable[Mapping[str, Any]],
        terminals: Iterable[Mapping[str, Any]] = (),
    ) -> "DataFrameCatalog":
        connector_frame = pd.DataFrame(list(connectors))
        if connector_frame.empty:
            connector_frame = pd.DataFrame(columns=CONNECTOR_COLUMNS)
        terminal_frame = pd.DataFrame(list(terminals))
        if terminal_frame.empty:
            terminal_frame = pd.DataFrame(columns=TERMINAL_COLUMNS)
        return cls(connector_frame, terminal_frame)

    @classmethod
    def from_csv(
        cls,
        connectors_path: Union[str, Path],
        terminals_path: Optional[Union[str, Path]] = None,
    ) -> "DataFrameCatalog":
        logger.info(f"Loading connector catalog from {connectors_path}")
        connectors = pd.read_csv(connectors_path)
        if "is_special_version" in connectors:
            connectors["is_special_version"] = (
                connectors["is_special_version"].astype(str).str.strip().str.lower().isin(["true", "1", "yes"])
            )
        terminals = pd.read_csv(terminals_path) if terminals_path else None
        return cls(connectors, terminals)

    def __len__(self) -> int:
        return len(self._connectors)

    def find_connectors(
        self,
        predicates: Mapping[str, Any],
        order_by: Optional[str] = DEFAULT_ORDER_FIELD,
    ) -> List[ConnectorRecord]:
        check_predicates(predicates, table=CONNECTORS_TABLE)

        frame = self._connectors
        mask = pd.Series(True, index=frame.index)
        for column, value in predicates.items():
            if column not in frame.columns:
                raise CatalogQueryError(
                    f"Column '{column}' does not exist",
                    table=CONNECTORS_TABLE,
                    predicates=predicates,
                )
            mask &= frame[column] == value

        matched = frame[mask]
        if order_by and order_by in matched.columns:
            matched = matched.sort_values(order_by, kind="stable")

        return [ConnectorRecord.from_row(row) for row in _records(matched)]

    def get_connector(self, connector_id: str) -> ConnectorRecord:
        matched = self._connectors[self._connectors["id"] == str(connector_id)]
        if matched.empty:
            raise ConnectorNotFound(str(connector_id))
        return ConnectorRecord.from_row(_records(matched.head(1))[0])

    def get_connectors(self, connector_ids: Sequence[str]) -> List[ConnectorRecord]:
        ids = [str(connector_id) for connector_id in connector_ids]
        matched = self._connectors[self._connectors["id"].isin(ids)]
        if DEFAULT_ORDER_FIELD in matched.columns:
            matched = matched.sort_values(DEFAULT_ORDER_FIELD, kind="stable")
        return [ConnectorRecord.from_row(row) for row in _records(matched)]

    def find_terminals(self, terminal_type: Optional[str] = None) -> List[TerminalRecord]:
        frame = self._terminals
        if terminal_type:
            if "terminal_type" not in frame.columns:
                raise CatalogQueryError("Column 'terminal_type' does not exist", table=TERMINALS_TABLE)
            frame = frame[frame["terminal_type"] == terminal_type]
        if "spec_number" in frame.columns:
            frame = frame.sort_values("spec_number", kind="stable")
        return [TerminalRecord.from_row(row) for row in _records(frame)]
