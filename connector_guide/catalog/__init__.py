"""
Catalog Package

Read-only access to the connector and terminal catalog.

- base: ConnectorCatalog interface
- supabase_catalog: hosted catalog (production)
- dataframe_catalog: pandas-backed catalog (offline CSV, tests)
"""

import logging

from connector_guide.catalog.base import ConnectorCatalog, QUERYABLE_FIELDS, group_terminals
from connector_guide.catalog.dataframe_catalog import DataFrameCatalog
from connector_guide.config import Settings
from connector_guide.errors import ConfigurationError

logger = logging.getLogger(__name__)


def create_catalog(settings: Settings) -> ConnectorCatalog:
    """
    Build the catalog configured in `settings`.

    Supabase is used when both URL and key are set, otherwise the CSV
    catalog.

    Raises:
        ConfigurationError: If no catalog source is configured
    """
    if settings.has_supabase:
        # Imported lazily so offline runs do not need the hosted client configured
        from connector_guide.catalog.supabase_catalog import SupabaseCatalog
        return SupabaseCatalog.from_credentials(settings.supabase_url, settings.supabase_key)

    if settings.catalog_csv:
        return DataFrameCatalog.from_csv(settings.catalog_csv, settings.terminals_csv)

    raise ConfigurationError(
        "No catalog configured: set SUPABASE_URL and SUPABASE_KEY, "
        "or CONNECTOR_CATALOG_CSV for an offline catalog"
    )


__all__ = [
    "ConnectorCatalog",
    "DataFrameCatalog",
    "QUERYABLE_FIELDS",
    "create_catalog",
    "group_terminals",
]
