"""Access to the CabRadar geospatial list feed."""

from cabradar.feeds.base import (
    EntityNotFoundError,
    ErrorKind,
    FeatureCollection,
    FeedCategory,
    FeedError,
    FeedFeature,
    FeedGeometry,
    MalformedFeedError,
    NetworkError,
)
from cabradar.feeds.client import FeedClient

__all__ = [
    # Client
    "FeedClient",
    "FeedCategory",
    # Envelope
    "FeatureCollection",
    "FeedFeature",
    "FeedGeometry",
    # Errors
    "ErrorKind",
    "FeedError",
    "NetworkError",
    "EntityNotFoundError",
    "MalformedFeedError",
]
