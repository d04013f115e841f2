"""
Tests for the Query Composer (wizard answers -> per-role catalog predicates)

Covers:
1. Role selection per application type
2. Shared filters (pole count, orientation casing, special version)
3. Incomplete answers
4. Refinement extension point
"""

import pytest

from connector_guide.errors import IncompleteAnswers
from connector_guide.wizard.models import ApplicationType, ConnectorRole, Orientation, WizardAnswers
from connector_guide.wizard.query import (
    RoleQuery,
    compose_filters,
    compose_queries,
    roles_for,
    serialize_orientation,
)


# ============================================================================
# ROLE SELECTION
# ============================================================================


class TestRoleSelection:
    """Which roles are fetched for each application type."""

    def test_wire_to_wire_fetches_sockets_and_tabs(self):
        assert roles_for(ApplicationType.WIRE_TO_WIRE) == (ConnectorRole.SOCKET, ConnectorRole.TAB)

    def test_wire_to_board_fetches_sockets_and_headers(self):
        assert roles_for(ApplicationType.WIRE_TO_BOARD) == (ConnectorRole.SOCKET, ConnectorRole.HEADER)

    def test_board_to_board_fetches_headers_only(self):
        assert roles_for("board-to-board") == (ConnectorRole.HEADER,)

    def test_role_gender_is_added_to_predicates(self):
        query = RoleQuery(role=ConnectorRole.TAB, filters={"pole_count": 4})
        assert query.predicates == {"gender": "Male", "pole_count": 4}
        assert query.order_by == "model"


# ============================================================================
# SCENARIOS
# ============================================================================


class TestComposedQueries:
    """Filters composed from complete answers."""

    def test_wire_to_wire_horizontal(self):
        answers = WizardAnswers(application_type="wire-to-wire", pole_count=4, orientation="horizontal")

        queries = compose_queries(answers)

        assert set(queries) == {ConnectorRole.SOCKET, ConnectorRole.TAB}
        assert queries[ConnectorRole.SOCKET].filters == {"pole_count": 4, "orientation": "Horizontal"}
        assert queries[ConnectorRole.TAB].filters == {"pole_count": 4, "orientation": "Horizontal"}
        assert ConnectorRole.HEADER not in queries

    def test_board_to_board_either_has_no_orientation(self):
        answers = WizardAnswers(application_type="board-to-board", pole_count=6, orientation="either")

        queries = compose_queries(answers)

        assert list(queries) == [ConnectorRole.HEADER]
        assert queries[ConnectorRole.HEADER].filters == {"pole_count": 6}
        assert "orientation" not in queries[ConnectorRole.HEADER].predicates

    @pytest.mark.parametrize("application_type", list(ApplicationType))
    def test_special_version_adds_filter_to_every_role(self, application_type):
        answers = WizardAnswers(
            application_type=application_type,
            pole_count=4,
            orientation="vertical",
            special_version=True,
        )

        for query in compose_queries(answers).values():
            assert query.filters["is_special_version"] is True
            assert query.filters["orientation"] == "Vertical"

    def test_special_version_absent_when_not_requested(self):
        answers = WizardAnswers(application_type="wire-to-board", pole_count=2, orientation="horizontal")
        for query in compose_queries(answers).values():
            assert "is_special_version" not in query.filters

    def test_locking_and_keying_do_not_filter(self):
        answers = WizardAnswers(
            application_type="wire-to-wire",
            pole_count=4,
            orientation="either",
            requires_locking=True,
            specific_keying=True,
        )
        assert compose_filters(answers) == {"pole_count": 4}

    def test_roles_get_independent_filter_dicts(self):
        answers = WizardAnswers(application_type="wire-to-wire", pole_count=4, orientation="horizontal")
        queries = compose_queries(answers)

        queries[ConnectorRole.SOCKET].filters["pole_count"] = 99

        assert queries[ConnectorRole.TAB].filters["pole_count"] == 4


# ============================================================================
# ORIENTATION CASING AND EDGE CASES
# ============================================================================


class TestOrientationSerialization:

    @pytest.mark.parametrize("orientation,expected", [
        (Orientation.HORIZONTAL, "Horizontal"),
        (Orientation.VERTICAL, "Vertical"),
        ("either", "Either"),
    ])
    def test_first_letter_is_capitalized(self, orientation, expected):
        assert serialize_orientation(orientation) == expected


class TestIncompleteAnswers:

    def test_missing_application_type_raises(self):
        with pytest.raises(IncompleteAnswers):
            compose_queries(WizardAnswers(pole_count=4, orientation="horizontal"))

    def test_missing_pole_count_raises(self):
        with pytest.raises(IncompleteAnswers):
            compose_queries(WizardAnswers(application_type="wire-to-wire", orientation="horizontal"))

    def test_missing_orientation_means_no_orientation_filter(self):
        answers = WizardAnswers(application_type="board-to-board", pole_count=6)
        assert compose_queries(answers)[ConnectorRole.HEADER].filters == {"pole_count": 6}


class TestRefinements:
    """Extension point for answers the composer does not translate itself."""

    def test_refinement_predicates_are_added_to_every_role(self):
        def locking(answers):
            return {"has_lock": True} if answers.requires_locking else {}

        answers = WizardAnswers(
            application_type="wire-to-wire",
            pole_count=4,
            orientation="horizontal",
            requires_locking=True,
        )

        queries = compose_queries(answers, refinements=[locking])

        assert all(query.filters["has_lock"] is True for query in queries.values())

    def test_refinement_returning_nothing_leaves_filters_unchanged(self):
        answers = WizardAnswers(application_type="board-to-board", pole_count=6, orientation="either")
        queries = compose_queries(answers, refinements=[lambda a: {}])
        assert queries[ConnectorRole.HEADER].filters == {"pole_count": 6}
