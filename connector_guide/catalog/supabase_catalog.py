"""
Supabase Catalog

Reads connectors and terminals from the hosted Postgres catalog through the
supabase-py client.

Usage:
    from connector_guide.catalog.supabase_catalog import SupabaseCatalog

    catalog = SupabaseCatalog.from_credentials(url, key)
    catalog.find_connectors({"gender": "Female", "pole_count": 4})
"""

import logging
from typing import Any, List, Mapping, Optional, Sequence

import httpx
from postgrest.exceptions import APIError
from supabase import Client, create_client

from connector_guide.catalog.base import ConnectorCatalog, check_predicates
from connector_guide.config import CONNECTORS_TABLE, DEFAULT_ORDER_FIELD, TERMINALS_TABLE
from connector_guide.errors import CatalogQueryError, ConnectorNotFound
from connector_guide.wizard.models import ConnectorRecord, TerminalRecord

logger = logging.getLogger(__name__)


class SupabaseCatalog(ConnectorCatalog):
    """ConnectorCatalog backed by Supabase tables."""

    def __init__(
        self,
        client: Client,
        connectors_table: str = CONNECTORS_TABLE,
        terminals_table: str = TERMINALS_TABLE,
    ):
        self._client = client
        self._connectors_table = connectors_table
        self._terminals_table = terminals_table

    @classmethod
    def from_credentials(cls, url: str, key: str, **kwargs) -> "SupabaseCatalog":
        logger.info(f"Connecting to Supabase catalog at {url}")
        return cls(create_client(url, key), **kwargs)

    def _execute(self, query, table: str, predicates: Optional[Mapping[str, Any]] = None) -> List[dict]:
        try:
            response = query.execute()
        except (APIError, httpx.HTTPError) as e:
            raise CatalogQueryError(
                f"Query on '{table}' failed: {e}",
                table=table,
                predicates=predicates,
            ) from e
        return response.data or []

    def find_connectors(
        self,
        predicates: Mapping[str, Any],
        order_by: Optional[str] = DEFAULT_ORDER_FIELD,
    ) -> List[ConnectorRecord]:
        check_predicates(predicates, table=self._connectors_table)

        query = self._client.table(self._connectors_table).select("*")
        for column, value in predicates.items():
            query = query.eq(column, value)
        if order_by:
            query = query.order(order_by)

        rows = self._execute(query, self._connectors_table, predicates)
        logger.debug(f"{len(rows)} connectors matched {dict(predicates)}")
        return [ConnectorRecord.from_row(row) for row in rows]

    def get_connector(self, connector_id: str) -> ConnectorRecord:
        query = (
            self._client.table(self._connectors_table)
            .select("*")
            .eq("id", connector_id)
            .limit(1)
        )
        rows = self._execute(query, self._connectors_table, {"id": connector_id})
        if not rows:
            raise ConnectorNotFound(connector_id)
        return ConnectorRecord.from_row(rows[0])

    def get_connectors(self, connector_ids: Sequence[str]) -> List[ConnectorRecord]:
        if not connector_ids:
            return []
        query = (
            self._client.table(self._connectors_table)
            .select("*")
            .in_("id", list(connector_ids))
            .order(DEFAULT_ORDER_FIELD)
        )
        rows = self._execute(query, self._connectors_table, {"id": list(connector_ids)})
        return [ConnectorRecord.from_row(row) for row in rows]

    def find_terminals(self, terminal_type: Optional[str] = None) -> List[TerminalRecord]:
        query = self._client.table(self._terminals_table).select("*")
        predicates = {}
        if terminal_type:
            query = query.eq("terminal_type", terminal_type)
            predicates["terminal_type"] = terminal_type
        query = query.order("spec_number")
        rows = self._execute(query, self._terminals_table, predicates)
        return [TerminalRecord.from_row(row) for row in rows]
