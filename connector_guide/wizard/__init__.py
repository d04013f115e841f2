"""
Connector Selection Wizard

- models: answers, catalog records, result partitions
- query: answers -> per-role catalog predicates
- fetcher: concurrent role queries -> ResultSet
- state: step machine (ConnectorWizard)

ConnectorWizard and ResultFetcher are imported from their modules directly
(they depend on the catalog package, which depends on the models here).
"""

from connector_guide.wizard.models import (
    ApplicationType,
    ConnectorRecord,
    ConnectorRole,
    Gender,
    Orientation,
    ResultSet,
    TerminalRecord,
    WizardAnswers,
)
from connector_guide.wizard.query import (
    ROLE_GENDERS,
    ROLES_BY_APPLICATION,
    RoleQuery,
    compose_filters,
    compose_queries,
    serialize_orientation,
)

__all__ = [
    "ApplicationType",
    "ConnectorRecord",
    "ConnectorRole",
    "Gender",
    "Orientation",
    "ResultSet",
    "TerminalRecord",
    "WizardAnswers",
    "ROLE_GENDERS",
    "ROLES_BY_APPLICATION",
    "RoleQuery",
    "compose_filters",
    "compose_queries",
    "serialize_orientation",
]
