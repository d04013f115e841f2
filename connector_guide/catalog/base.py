"""
Catalog Read Interface

The wizard and the pages never talk to the database directly. They receive a
ConnectorCatalog, which makes the data source swappable (hosted Supabase in
production, an in-memory DataFrame catalog offline and in tests).

All reads are equality filters; the catalog is never written through this
interface.
"""

from abc import ABC, abstractmethod
from typing import Any, Iterable, List, Mapping, Optional, Sequence

from connector_guide.config import DEFAULT_ORDER_FIELD
from connector_guide.errors import CatalogQueryError
from connector_guide.wizard.models import ConnectorRecord, TerminalRecord

# Columns the connector catalog accepts in equality predicates
QUERYABLE_FIELDS = frozenset({
    "id",
    "gender",
    "pole_count",
    "orientation",
    "is_special_version",
})


def check_predicates(predicates: Mapping[str, Any], table: Optional[str] = None) -> None:
    """Raise CatalogQueryError for predicate columns the catalog does not filter on."""
    unknown = sorted(set(predicates) - QUERYABLE_FIELDS)
    if unknown:
        raise CatalogQueryError(
            f"Unsupported filter column(s): {', '.join(unknown)}",
            table=table,
            predicates=predicates,
        )


class ConnectorCatalog(ABC):
    """Read-only access to connectors and terminals."""

    @abstractmethod
    def find_connectors(
        self,
        predicates: Mapping[str, Any],
        order_by: Optional[str] = DEFAULT_ORDER_FIELD,
    ) -> List[ConnectorRecord]:
        """
        Return connectors matching every equality predicate.

        Raises:
            CatalogQueryError: If the query cannot be executed
        """

    @abstractmethod
    def get_connector(self, connector_id: str) -> ConnectorRecord:
        """
        Return a single connector.

        Raises:
            ConnectorNotFound: If no connector has this id
            CatalogQueryError: If the query cannot be executed
        """

    @abstractmethod
    def get_connectors(self, connector_ids: Sequence[str]) -> List[ConnectorRecord]:
        """Return the connectors whose ids are listed (unknown ids are skipped)."""

    @abstractmethod
    def find_terminals(self, terminal_type: Optional[str] = None) -> List[TerminalRecord]:
        """Return terminals, optionally restricted to one terminal type."""


def group_terminals(terminals: Iterable[TerminalRecord]) -> dict:
    """Group terminals by terminal_type, keeping catalog order within a group."""
    groups: dict = {}
    for terminal in terminals:
        groups.setdefault(terminal.terminal_type, []).append(terminal)
    return groups
