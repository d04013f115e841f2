"""
Exception hierarchy for the connector guide.

Catalog failures are raised by catalog implementations and handled where the
page can still render something useful (the wizard's result fetcher, the
detail and terminals pages).
"""

from typing import Any, Mapping, Optional


class ConnectorGuideError(Exception):
    """Base class for all connector guide errors."""


class ConfigurationError(ConnectorGuideError):
    """Raised when the application is missing required settings."""


class CatalogQueryError(ConnectorGuideError):
    """Raised when a catalog read fails."""

    def __init__(
        self,
        message: str,
        table: Optional[str] = None,
        predicates: Optional[Mapping[str, Any]] = None,
    ):
        super().__init__(message)
        self.table = table
        self.predicates = dict(predicates or {})


class ConnectorNotFound(ConnectorGuideError):
    """Raised when a connector id does not exist in the catalog."""

    def __init__(self, connector_id: str):
        super().__init__(f"Connector not found: {connector_id}")
        self.connector_id = connector_id


class InvalidAnswer(ConnectorGuideError, ValueError):
    """Raised when a wizard answer is outside its allowed values."""


class IncompleteAnswers(InvalidAnswer):
    """Raised when a query is composed before the required answers are set."""
