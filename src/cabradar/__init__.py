"""CabRadar detail page support.

This package derives URL slugs for map features from the CabRadar list
feed, resolves slugs back to features by re-querying the area, and parses
free-text road descriptions into sorted road references.
"""

from cabradar.config import DisplayConfig, FeedConfig
from cabradar.feeds import (
    EntityNotFoundError,
    ErrorKind,
    FeedCategory,
    FeedClient,
    FeedError,
    MalformedFeedError,
    NetworkError,
)
from cabradar.models import (
    Event,
    Inspector,
    InspectorReportType,
    RoadDisruption,
    RoadKind,
    RoadReference,
    TransportDisruption,
)
from cabradar.resolvers import (
    resolve_event,
    resolve_inspector,
    resolve_road_disruption,
    resolve_transport_disruption,
)
from cabradar.slugs import (
    event_slug,
    inspector_slug,
    make_slug,
    normalize,
    road_disruption_slug,
    transport_disruption_slug,
)

__all__ = [
    # Config
    "FeedConfig",
    "DisplayConfig",
    # Feed
    "FeedClient",
    "FeedCategory",
    "ErrorKind",
    "FeedError",
    "NetworkError",
    "EntityNotFoundError",
    "MalformedFeedError",
    # Models
    "RoadKind",
    "RoadReference",
    "RoadDisruption",
    "Event",
    "Inspector",
    "InspectorReportType",
    "TransportDisruption",
    # Slugs
    "normalize",
    "make_slug",
    "road_disruption_slug",
    "event_slug",
    "inspector_slug",
    "transport_disruption_slug",
    # Resolvers
    "resolve_road_disruption",
    "resolve_event",
    "resolve_inspector",
    "resolve_transport_disruption",
]
