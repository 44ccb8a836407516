"""Feed categories, GeoJSON envelope models and errors.

The list feed returns GeoJSON FeatureCollections::

    {
        "type": "FeatureCollection",
        "features": [
            {
                "type": "Feature",
                "geometry": {"type": "Point", "coordinates": [-0.1276, 51.5074]},
                "properties": {...category fields...},
                "distance_km": 0.4
            }
        ]
    }
"""

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from cabradar.models import Coordinates


class FeedCategory(str, Enum):
    """Feed category, value is the feed path segment."""

    ROADS = "roads"
    EVENTS = "events"
    INSPECTORS = "inspectors"
    DISRUPTIONS = "disruptions"

    @property
    def uses_box_size(self) -> bool:
        """Whether the category is queried with explicit width/height."""
        return self in (FeedCategory.EVENTS, FeedCategory.DISRUPTIONS)


class FeedGeometry(BaseModel):
    """GeoJSON geometry of a feature."""

    model_config = ConfigDict(extra="allow")

    type: str | None = None
    coordinates: Any = None

    @property
    def position(self) -> Coordinates | None:
        """First ``(lon, lat)`` position of the geometry.

        Points return their own position, lines and polygons their first
        vertex.
        """
        coords = self.coordinates
        while isinstance(coords, list) and coords and isinstance(coords[0], list):
            coords = coords[0]
        if (
            isinstance(coords, list)
            and len(coords) >= 2
            and all(isinstance(c, (int, float)) for c in coords[:2])
        ):
            return float(coords[0]), float(coords[1])
        return None


class FeedFeature(BaseModel):
    """Single feature returned by the feed."""

    model_config = ConfigDict(extra="allow")

    geometry: FeedGeometry | None = None
    properties: dict[str, Any] = Field(default_factory=dict)
    distance_km: float | None = None

    @field_validator("distance_km", mode="before")
    @classmethod
    def coerce_distance(cls, value: Any) -> float | None:
        """Map unparseable distances to None; the field is display-only."""
        if isinstance(value, bool):
            return None
        try:
            return float(value)
        except (TypeError, ValueError):
            return None

    @property
    def position(self) -> Coordinates | None:
        return self.geometry.position if self.geometry else None


class FeatureCollection(BaseModel):
    """Parsed feed response.

    Attributes:
        features: Features that passed validation, in feed order
        malformed: True when the response had no usable ``features`` array
    """

    features: list[FeedFeature] = Field(default_factory=list)
    malformed: bool = False


class ErrorKind(str, Enum):
    """Tag carried by every feed error so callers can branch on it."""

    NETWORK = "network"
    NOT_FOUND = "not_found"
    MALFORMED_FEED = "malformed_feed"


class FeedError(Exception):
    """Base exception for feed access and resolution failures."""

    kind: ErrorKind


class NetworkError(FeedError):
    """Feed request failed or returned a non-success status."""

    kind = ErrorKind.NETWORK

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class EntityNotFoundError(FeedError):
    """No feed candidate matched the requested slug."""

    kind = ErrorKind.NOT_FOUND

    def __init__(self, category: FeedCategory, slug: str, candidates: int = 0) -> None:
        super().__init__(
            f"No {category.value} entity matches slug {slug!r} ({candidates} candidates)"
        )
        self.category = category
        self.slug = slug
        self.candidates = candidates


class MalformedFeedError(EntityNotFoundError):
    """Feed response lacked a ``features`` array.

    A subclass of EntityNotFoundError: callers handling "not found" get
    malformed responses too, callers that care can catch this one first.
    """

    kind = ErrorKind.MALFORMED_FEED
