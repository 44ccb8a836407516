"""Slug resolution for detail pages.

The feed has no per-item endpoint, so a detail page URL only carries a slug
(``oxford-street-TIMS-12345``). Resolving it means re-querying the area
around the search origin and finding the feature whose regenerated slug
matches. Ids are never split back out of the slug because both names and
ids may contain hyphens.

Every resolver performs exactly one feed request and then a synchronous
scan. When several candidates produce the same slug the first one in feed
order wins.
"""

import logging
from collections.abc import Callable
from typing import Any, TypeVar

from cabradar.feeds.base import (
    EntityNotFoundError,
    FeedCategory,
    FeedFeature,
    MalformedFeedError,
)
from cabradar.feeds.client import FeedClient
from cabradar.models import (
    Coordinates,
    DisruptionInfo,
    Event,
    Inspector,
    InspectorReportType,
    RoadDisruption,
    TransportDisruption,
)
from cabradar.parsers.roads import extract_road_name, parse_affected_roads, primary_road
from cabradar.slugs import make_slug, normalize

logger = logging.getLogger(__name__)

T = TypeVar("T", RoadDisruption, Event, Inspector, TransportDisruption)

# Number of candidate names logged when a slug cannot be resolved
DIAGNOSTIC_CANDIDATES = 5


def _text(value: Any) -> str:
    """Return value as a stripped string, empty for None."""
    if value is None:
        return ""
    return str(value).strip()


def _coordinates(feature: FeedFeature, lon: Any = None, lat: Any = None) -> Coordinates | None:
    """Feature geometry position, else the given property fallback."""
    position = feature.position
    if position is not None:
        return position
    if isinstance(lon, (int, float)) and isinstance(lat, (int, float)):
        return float(lon), float(lat)
    return None


def _distance(feature: FeedFeature) -> float | None:
    if feature.distance_km is not None:
        return feature.distance_km
    value = feature.properties.get("distance_km")
    return float(value) if isinstance(value, (int, float)) else None


def road_disruption_from_feature(feature: FeedFeature) -> RoadDisruption | None:
    """Build a RoadDisruption from a roads feed feature.

    The display name prefers the road name written after a bracketed code in
    the comments, then in the road description, then the ``road_name``
    field. Returns None for features without ``disruption_id``.
    """
    props = feature.properties
    disruption_id = _text(props.get("disruption_id"))
    if not disruption_id:
        return None

    description = _text(props.get("road_description"))
    comments = _text(props.get("comments"))
    road_name = (
        extract_road_name(comments)
        or extract_road_name(description)
        or _text(props.get("road_name"))
        or description
        or "Unknown Road"
    )
    road_type, road_number = primary_road(description, comments)
    severity = _text(props.get("severity")) or "Moderate"

    return RoadDisruption(
        id=disruption_id,
        road_name=road_name,
        severity=severity,
        category=_text(props.get("category")) or "Road Works",
        sub_category=_text(props.get("sub_category")) or "Maintenance",
        current_update=(
            _text(props.get("current_update"))
            or _text(props.get("category"))
            or "Road disruption reported"
        ),
        comments=comments,
        road_description=description,
        from_date=props.get("from_date"),
        to_date=props.get("to_date"),
        last_updated=props.get("last_updated"),
        road_type=road_type,
        road_number=road_number,
        affected_roads=parse_affected_roads(description),
        coordinates=_coordinates(feature),
    )


def event_from_feature(feature: FeedFeature) -> Event:
    """Build an Event from an events feed feature.

    Features without ``id`` are kept with an empty id; their slug is the
    normalized title (or venue name) alone.
    """
    props = feature.properties
    event_id = _text(props.get("id"))

    attendance = props.get("attendance")
    return Event(
        id=event_id,
        title=_text(props.get("title")),
        category=_text(props.get("category")) or "event",
        size=props.get("size"),
        venue_name=props.get("venue_name"),
        start_local=props.get("start_local"),
        true_end=props.get("true_end"),
        attendance=int(attendance) if isinstance(attendance, (int, float)) else None,
        postcode=props.get("postcode"),
        venue_formatted_address=props.get("venue_formatted_address"),
        icon=props.get("icon"),
        is_ending_soon=bool(props.get("is_ending_soon")),
        comment=props.get("comment"),
        distance_km=_distance(feature),
        coordinates=_coordinates(feature, props.get("event_lon"), props.get("event_lat")),
    )


def inspector_from_feature(feature: FeedFeature) -> Inspector:
    """Build an Inspector from an inspectors feed feature.

    The location name is the feed id, else ``location``, else ``name``.
    Report details live in the nested ``data`` object.
    """
    props = feature.properties
    inspector_id = _text(props.get("id"))
    location_name = inspector_id or _text(props.get("location")) or _text(props.get("name"))

    data = props.get("data")
    if not isinstance(data, dict):
        data = {}
    raw_type = _text(data.get("type"))
    try:
        report_type = InspectorReportType(raw_type)
    except ValueError:
        logger.debug(f"Unknown inspector type {raw_type!r} for {location_name!r}, using clear")
        report_type = InspectorReportType.CLEAR

    return Inspector(
        id=inspector_id,
        report_type=report_type,
        location_name=location_name,
        original_message=_text(data.get("originalMessage")),
        formatted_address=_text(data.get("formattedAddress")),
        location_type=data.get("locationType"),
        match_type=data.get("matchType"),
        time=data.get("time"),
        distance_km=_distance(feature),
        coordinates=_coordinates(feature),
    )


def transport_disruption_from_feature(feature: FeedFeature) -> TransportDisruption:
    """Build a TransportDisruption from a disruptions feed feature."""
    props = feature.properties
    disruption_id = _text(props.get("id"))

    raw_disruptions = props.get("disruptions")
    if not isinstance(raw_disruptions, dict):
        raw_disruptions = {}
    disruptions = {
        str(line): DisruptionInfo.from_feed(info)
        for line, info in raw_disruptions.items()
        if isinstance(info, dict)
    }

    return TransportDisruption(
        id=disruption_id,
        service=_text(props.get("service")),
        common_name=_text(props.get("commonName")),
        disruptions=disruptions,
        airport_tag=bool(props.get("airport_tag")),
        distance_km=_distance(feature),
        coordinates=_coordinates(feature, props.get("long"), props.get("lat")),
    )


def slug_matches(slug: str, display_name: str, entity_id: str) -> bool:
    """Check whether a slug identifies a candidate.

    The slug is compared, after normalization, with the candidate's
    regenerated slug. Candidates without an id regenerate to their
    normalized name alone.
    """
    target = normalize(slug)
    if not target:
        return False
    return target == normalize(make_slug(display_name, entity_id))


async def _resolve(
    client: FeedClient,
    category: FeedCategory,
    slug: str,
    lat: float | None,
    lon: float | None,
    build: Callable[[FeedFeature], T | None],
) -> T:
    """Fetch candidates for a category and return the first slug match.

    Raises:
        NetworkError: If the feed request fails.
        MalformedFeedError: If the feed response had no features array.
        EntityNotFoundError: If no candidate matches.
    """
    collection = await client.fetch_features(category, lat=lat, lon=lon)

    considered: list[str] = []
    for feature in collection.features:
        entity = build(feature)
        if entity is None:
            continue
        if slug_matches(slug, entity.display_name, entity.id):
            logger.debug(f"Resolved {category.value} slug {slug!r} to {entity.id}")
            return entity
        considered.append(normalize(entity.display_name))

    logger.warning(
        f"No {category.value} match for slug {slug!r} among {len(considered)} candidates; "
        f"first candidates: {considered[:DIAGNOSTIC_CANDIDATES]}"
    )
    if collection.malformed:
        raise MalformedFeedError(category, slug)
    raise EntityNotFoundError(category, slug, candidates=len(considered))


async def resolve_road_disruption(
    client: FeedClient, slug: str, lat: float | None = None, lon: float | None = None
) -> RoadDisruption:
    """Resolve a road disruption detail page slug."""
    return await _resolve(
        client, FeedCategory.ROADS, slug, lat, lon, road_disruption_from_feature
    )


async def resolve_event(
    client: FeedClient, slug: str, lat: float | None = None, lon: float | None = None
) -> Event:
    """Resolve an event detail page slug."""
    return await _resolve(client, FeedCategory.EVENTS, slug, lat, lon, event_from_feature)


async def resolve_inspector(
    client: FeedClient, slug: str, lat: float | None = None, lon: float | None = None
) -> Inspector:
    """Resolve an inspector detail page slug."""
    return await _resolve(
        client, FeedCategory.INSPECTORS, slug, lat, lon, inspector_from_feature
    )


async def resolve_transport_disruption(
    client: FeedClient, slug: str, lat: float | None = None, lon: float | None = None
) -> TransportDisruption:
    """Resolve a transport disruption detail page slug."""
    return await _resolve(
        client,
        FeedCategory.DISRUPTIONS,
        slug,
        lat,
        lon,
        transport_disruption_from_feature,
    )
