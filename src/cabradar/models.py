"""Data models for CabRadar detail entities.

These are plain dataclasses built fresh for every detail page load.
Coordinates are always ``(lon, lat)`` as delivered in GeoJSON geometry.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

Coordinates = tuple[float, float]


class RoadKind(str, Enum):
    """Kind of road reference, in display precedence order."""

    M = "M"
    A = "A"
    STREET = "Street"


class InspectorReportType(str, Enum):
    """Inspector check classification reported by drivers."""

    TFL = "tfl"
    POLICE_CHECK = "police-check"
    CLEAR = "clear"


@dataclass(frozen=True)
class RoadReference:
    """Structured reference to a road parsed from free text.

    Attributes:
        kind: Motorway, A-road or plain street
        code: Numeric/alphanumeric suffix for M/A roads (e.g. "406"),
            street display name for streets
    """

    kind: RoadKind
    code: str

    def to_dict(self) -> dict[str, str]:
        return {"type": self.kind.value, "number": self.code}


@dataclass
class RoadDisruption:
    """Road disruption detail (roadworks, closures, incidents)."""

    id: str
    road_name: str
    severity: str = "Moderate"
    category: str = "Road Works"
    sub_category: str = "Maintenance"
    current_update: str = "Road disruption reported"
    comments: str = ""
    road_description: str = ""
    from_date: str | None = None
    to_date: str | None = None
    last_updated: str | None = None
    road_type: RoadKind = RoadKind.STREET
    road_number: str = "Unknown"
    affected_roads: list[RoadReference] = field(default_factory=list)
    coordinates: Coordinates | None = None

    @property
    def display_name(self) -> str:
        return self.road_name

    @property
    def description(self) -> str:
        return self.current_update


@dataclass
class Event:
    """Event detail (concerts, sports, expos...)."""

    id: str
    title: str
    category: str = "event"
    size: str | None = None
    venue_name: str | None = None
    start_local: str | None = None
    true_end: str | None = None
    attendance: int | None = None
    postcode: str | None = None
    venue_formatted_address: str | None = None
    icon: str | None = None
    is_ending_soon: bool = False
    comment: str | None = None
    distance_km: float | None = None
    coordinates: Coordinates | None = None

    @property
    def display_name(self) -> str:
        return self.title or self.venue_name or ""

    @property
    def description(self) -> str:
        return self.comment or f"{self.category} event"


@dataclass
class Inspector:
    """Enforcement check ("inspector") reported at a location."""

    id: str
    report_type: InspectorReportType
    location_name: str
    original_message: str = ""
    formatted_address: str = ""
    location_type: str | None = None
    match_type: str | None = None
    time: str | None = None
    distance_km: float | None = None
    coordinates: Coordinates | None = None

    @property
    def display_name(self) -> str:
        return self.location_name


@dataclass
class DisruptionInfo:
    """One line/service disruption at a transport stop."""

    line: str | None
    description: str
    type: str = "Disruption"
    from_date: str | None = None

    @classmethod
    def from_feed(cls, data: dict[str, Any]) -> "DisruptionInfo":
        return cls(
            line=data.get("line"),
            description=data.get("description") or "",
            type=data.get("type") or "Disruption",
            from_date=data.get("fromDate"),
        )


@dataclass
class TransportDisruption:
    """Public transport disruption at a station or stop."""

    id: str
    service: str
    common_name: str
    disruptions: dict[str, DisruptionInfo] = field(default_factory=dict)
    airport_tag: bool = False
    distance_km: float | None = None
    coordinates: Coordinates | None = None

    @property
    def display_name(self) -> str:
        return self.common_name

    @property
    def _first_disruption(self) -> DisruptionInfo | None:
        return next(iter(self.disruptions.values()), None)

    @property
    def status(self) -> str:
        first = self._first_disruption
        return first.type if first else "Disruption"

    @property
    def description(self) -> str:
        first = self._first_disruption
        if first and first.description:
            return first.description
        return f"{self.service} disruption"

    @property
    def from_date(self) -> str | None:
        first = self._first_disruption
        return first.from_date if first else None

    @property
    def affected_lines(self) -> list[str]:
        return list(self.disruptions)

    @property
    def affected_stations(self) -> list[str]:
        return [self.common_name]


DetailEntity = RoadDisruption | Event | Inspector | TransportDisruption
