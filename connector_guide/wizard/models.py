"""
Connector Wizard Data Model

Defines the answers collected by the connector selection wizard, the catalog
records it reads, and the per-role result partitions it displays.

Classes:
--------
- ApplicationType, Orientation: enumerated wizard answers
- ConnectorRole, Gender: physical mating categories and their stored values
- WizardAnswers: mutable answers owned by the wizard
- ConnectorRecord, TerminalRecord: read-only catalog rows
- ResultSet: sockets / tabs / headers found for one wizard run

Example:
--------
>>> answers = WizardAnswers(application_type="wire-to-wire", pole_count=4)
>>> answers.application_type
<ApplicationType.WIRE_TO_WIRE: 'wire-to-wire'>
>>> answers.merged(orientation="horizontal").orientation
<Orientation.HORIZONTAL: 'horizontal'>
"""

import math
import numbers
from dataclasses import dataclass, field, fields, replace
from enum import Enum
from typing import Any, Dict, FrozenSet, List, Mapping, Optional, Tuple

from connector_guide.config import MAX_POLE_COUNT, MIN_POLE_COUNT
from connector_guide.errors import InvalidAnswer


class ApplicationType(str, Enum):
    """How the connector pair is mounted."""
    WIRE_TO_WIRE = "wire-to-wire"
    WIRE_TO_BOARD = "wire-to-board"
    BOARD_TO_BOARD = "board-to-board"


class Orientation(str, Enum):
    """Cable exit orientation requested by the user."""
    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"
    EITHER = "either"


class ConnectorRole(str, Enum):
    """Physical mating category of a connector."""
    SOCKET = "socket"
    TAB = "tab"
    HEADER = "header"


class Gender(str, Enum):
    """Gender values as stored in the catalog."""
    FEMALE = "Female"
    MALE = "Male"
    PCB = "PCB"


def _coerce_enum(enum_cls, value: Any, field_name: str):
    if value is None or isinstance(value, enum_cls):
        return value
    try:
        return enum_cls(value)
    except ValueError:
        allowed = ", ".join(member.value for member in enum_cls)
        raise InvalidAnswer(f"{field_name} must be one of: {allowed} (got {value!r})")


def _coerce_pole_count(value: Any) -> Optional[int]:
    if value is None:
        return None
    # bool is an int subclass; reject it explicitly
    if isinstance(value, bool):
        raise InvalidAnswer(f"pole_count must be an integer (got {value!r})")
    if isinstance(value, str):
        value = value.strip()
        if not value.isdigit():
            raise InvalidAnswer(f"pole_count must be an integer (got {value!r})")
        value = int(value)
    if not isinstance(value, numbers.Integral):
        raise InvalidAnswer(f"pole_count must be an integer (got {value!r})")
    value = int(value)
    if not MIN_POLE_COUNT <= value <= MAX_POLE_COUNT:
        raise InvalidAnswer(
            f"pole_count must be between {MIN_POLE_COUNT} and {MAX_POLE_COUNT} (got {value})"
        )
    return value


@dataclass
class WizardAnswers:
    """
    Answers collected across the wizard steps.

    Attributes:
    -----------
    application_type : Optional[ApplicationType]
        Step 1 answer
    pole_count : Optional[int]
        Step 2 answer, within MIN_POLE_COUNT..MAX_POLE_COUNT
    orientation : Optional[Orientation]
        Step 3 answer
    requires_locking, special_version, specific_keying : bool
        Step 4 refinements (optional)
    """
    application_type: Optional[ApplicationType] = None
    pole_count: Optional[int] = None
    orientation: Optional[Orientation] = None
    requires_locking: bool = False
    special_version: bool = False
    specific_keying: bool = False

    def __post_init__(self):
        self.application_type = _coerce_enum(ApplicationType, self.application_type, "application_type")
        self.orientation = _coerce_enum(Orientation, self.orientation, "orientation")
        self.pole_count = _coerce_pole_count(self.pole_count)
        for name in ("requires_locking", "special_version", "specific_keying"):
            value = getattr(self, name)
            if not isinstance(value, bool):
                raise InvalidAnswer(f"{name} must be a boolean (got {value!r})")

    @classmethod
    def field_names(cls) -> Tuple[str, ...]:
        return tuple(f.name for f in fields(cls))

    def merged(self, **updates: Any) -> "WizardAnswers":
        """
        Return a copy with `updates` applied.

        Raises:
            InvalidAnswer: If a field name is unknown or a value is not allowed
        """
        unknown = set(updates) - set(self.field_names())
        if unknown:
            raise InvalidAnswer(f"Unknown wizard answer(s): {', '.join(sorted(unknown))}")
        return replace(self, **updates)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a plain dictionary (enum values as strings)."""
        return {
            "application_type": self.application_type.value if self.application_type else None,
            "pole_count": self.pole_count,
            "orientation": self.orientation.value if self.orientation else None,
            "requires_locking": self.requires_locking,
            "special_version": self.special_version,
            "specific_keying": self.specific_keying,
        }


def _clean(value: Any) -> Any:
    """Map catalog nulls (None, NaN) to None."""
    if value is None:
        return None
    if isinstance(value, float) and math.isnan(value):
        return None
    return value


def _as_tuple(value: Any) -> Tuple[str, ...]:
    value = _clean(value)
    if value is None:
        return ()
    if isinstance(value, str):
        return tuple(part.strip() for part in value.split("|") if part.strip())
    return tuple(str(item) for item in value)


@dataclass(frozen=True)
class ConnectorRecord:
    """A physical connector part from the catalog."""
    id: str
    model: str
    gender: str
    pole_count: int
    orientation: Optional[str] = None
    is_special_version: bool = False
    display_name: Optional[str] = None
    video_360_url: Optional[str] = None
    category: Optional[str] = None
    connector_type: Optional[str] = None
    mounting_type: Optional[str] = None
    terminal_suffix: Optional[str] = None
    mates_with: Tuple[str, ...] = ()
    assembly_variants: Tuple[str, ...] = ()
    technical_drawing_url: Optional[str] = None
    keying_pdf: Optional[str] = None
    special_notes: Optional[str] = None

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "ConnectorRecord":
        """Build a record from a catalog row, ignoring unknown columns."""
        known = {f.name for f in fields(cls)}
        data = {key: _clean(value) for key, value in row.items() if key in known}
        data["id"] = str(data["id"])
        data["pole_count"] = int(data["pole_count"])
        data["is_special_version"] = bool(data.get("is_special_version") or False)
        data["mates_with"] = _as_tuple(data.get("mates_with"))
        data["assembly_variants"] = _as_tuple(data.get("assembly_variants"))
        return cls(**data)

    @property
    def title(self) -> str:
        return self.display_name or self.model


@dataclass(frozen=True)
class TerminalRecord:
    """A crimp terminal from the catalog."""
    id: str
    spec_number: str
    terminal_type: str
    gender: Optional[str] = None
    description: Optional[str] = None
    image_url: Optional[str] = None

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "TerminalRecord":
        known = {f.name for f in fields(cls)}
        data = {key: _clean(value) for key, value in row.items() if key in known}
        data["id"] = str(data["id"])
        return cls(**data)


@dataclass
class ResultSet:
    """Connectors found for one wizard run, partitioned by role."""
    sockets: List[ConnectorRecord] = field(default_factory=list)
    tabs: List[ConnectorRecord] = field(default_factory=list)
    headers: List[ConnectorRecord] = field(default_factory=list)
    failed_roles: FrozenSet[ConnectorRole] = frozenset()

    @classmethod
    def from_partitions(
        cls,
        partitions: Mapping[ConnectorRole, List[ConnectorRecord]],
        failed_roles: FrozenSet[ConnectorRole] = frozenset(),
    ) -> "ResultSet":
        return cls(
            sockets=list(partitions.get(ConnectorRole.SOCKET, [])),
            tabs=list(partitions.get(ConnectorRole.TAB, [])),
            headers=list(partitions.get(ConnectorRole.HEADER, [])),
            failed_roles=frozenset(failed_roles),
        )

    def for_role(self, role: ConnectorRole) -> List[ConnectorRecord]:
        return {
            ConnectorRole.SOCKET: self.sockets,
            ConnectorRole.TAB: self.tabs,
            ConnectorRole.HEADER: self.headers,
        }[ConnectorRole(role)]

    def counts(self) -> Dict[ConnectorRole, int]:
        return {role: len(self.for_role(role)) for role in ConnectorRole}

    @property
    def total(self) -> int:
        return len(self.sockets) + len(self.tabs) + len(self.headers)

    def is_empty(self) -> bool:
        return self.total == 0
