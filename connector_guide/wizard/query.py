"""
Query Composer - Wizard Answers to Catalog Predicates

Translates WizardAnswers into one equality-predicate set per connector role.

Business rule (which roles are fetched):
- wire-to-wire:   sockets + tabs
- wire-to-board:  sockets + headers
- board-to-board: headers only

Every role gets the same filters:
- pole_count (always)
- orientation, unless the answer is "either" (stored capitalized, see
  serialize_orientation)
- is_special_version, only when special_version is requested

requires_locking and specific_keying are collected by the wizard but not
translated into filters. Callers that need them pass `refinements`.

Usage:
    from connector_guide.wizard.query import compose_queries

    queries = compose_queries(answers)
    for role, query in queries.items():
        catalog.find_connectors(query.predicates, order_by=query.order_by)
"""

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Mapping, Sequence, Tuple

from connector_guide.config import DEFAULT_ORDER_FIELD
from connector_guide.errors import IncompleteAnswers
from connector_guide.wizard.models import (
    ApplicationType,
    ConnectorRole,
    Gender,
    Orientation,
    WizardAnswers,
)

# A refinement maps the answers to extra equality predicates
Refinement = Callable[[WizardAnswers], Mapping[str, Any]]

ROLES_BY_APPLICATION: Dict[ApplicationType, Tuple[ConnectorRole, ...]] = {
    ApplicationType.WIRE_TO_WIRE: (ConnectorRole.SOCKET, ConnectorRole.TAB),
    ApplicationType.WIRE_TO_BOARD: (ConnectorRole.SOCKET, ConnectorRole.HEADER),
    ApplicationType.BOARD_TO_BOARD: (ConnectorRole.HEADER,),
}

ROLE_GENDERS: Dict[ConnectorRole, Gender] = {
    ConnectorRole.SOCKET: Gender.FEMALE,
    ConnectorRole.TAB: Gender.MALE,
    ConnectorRole.HEADER: Gender.PCB,
}


@dataclass(frozen=True)
class RoleQuery:
    """Catalog query for one connector role."""
    role: ConnectorRole
    filters: Dict[str, Any] = field(default_factory=dict)
    order_by: str = DEFAULT_ORDER_FIELD

    @property
    def gender(self) -> Gender:
        return ROLE_GENDERS[self.role]

    @property
    def predicates(self) -> Dict[str, Any]:
        """All equality predicates, including the role's gender."""
        return {"gender": self.gender.value, **self.filters}


def serialize_orientation(orientation: Orientation) -> str:
    """Orientation as stored in the catalog ("horizontal" -> "Horizontal")."""
    value = Orientation(orientation).value
    return value[:1].upper() + value[1:]


def roles_for(application_type: ApplicationType) -> Tuple[ConnectorRole, ...]:
    return ROLES_BY_APPLICATION[ApplicationType(application_type)]


def compose_filters(answers: WizardAnswers) -> Dict[str, Any]:
    """
    Build the role-independent filters for the given answers.

    Raises:
        IncompleteAnswers: If pole_count is not set
    """
    if answers.pole_count is None:
        raise IncompleteAnswers("pole_count is required to compose a connector query")

    filters: Dict[str, Any] = {"pole_count": answers.pole_count}

    if answers.orientation is not None and answers.orientation != Orientation.EITHER:
        filters["orientation"] = serialize_orientation(answers.orientation)

    if answers.special_version:
        filters["is_special_version"] = True

    return filters


def compose_queries(
    answers: WizardAnswers,
    refinements: Sequence[Refinement] = (),
) -> Dict[ConnectorRole, RoleQuery]:
    """
    Compose one RoleQuery per role fetched for the answers' application type.

    Args:
        answers: Completed wizard answers (application_type and pole_count set)
        refinements: Optional callables adding predicates to every role

    Returns:
        Dict mapping each fetched role to its query. Roles not fetched for
        the application type are absent.

    Raises:
        IncompleteAnswers: If application_type or pole_count is not set
    """
    if answers.application_type is None:
        raise IncompleteAnswers("application_type is required to compose a connector query")

    filters = compose_filters(answers)
    for refinement in refinements:
        filters.update(refinement(answers))

    return {
        role: RoleQuery(role=role, filters=dict(filters))
        for role in roles_for(answers.application_type)
    }
