"""URL slugs for detail pages.

A slug is ``<normalized-name>-<opaque-id>``, e.g. ``lambeth-bridge-TIMS-204461``.
The feed id is appended unmodified and may itself contain hyphens, so the id
cannot be reliably split back out of a slug. Resolution regenerates the slug
for every candidate instead (see ``cabradar.resolvers``).
"""

import re

_NON_ALNUM_RUN = re.compile(r"[^a-z0-9]+")


def normalize(name: str | None) -> str:
    """Normalize a display name for use in a slug.

    Lowercases, collapses every run of characters outside ``[a-z0-9]`` into a
    single hyphen and strips leading/trailing hyphens. Idempotent.

    Args:
        name: Display name (None is treated as empty).

    Returns:
        Normalized name, empty string for empty input.

    Example:
        >>> normalize("A302 Kennington Park Road!")
        'a302-kennington-park-road'
    """
    if not name:
        return ""
    return _NON_ALNUM_RUN.sub("-", name.lower()).strip("-")


def make_slug(name: str | None, entity_id: str) -> str:
    """Build a slug from a display name and a feed id.

    Falls back to the lowercased id alone when the name normalizes to
    nothing. Not injective: different names can produce the same slug.
    """
    base = normalize(name)
    if not base:
        return entity_id.lower()
    return f"{base}-{entity_id}"


def road_disruption_slug(road_name: str | None, disruption_id: str) -> str:
    """Slug for a road disruption detail page."""
    return make_slug(road_name, disruption_id)


def event_slug(title: str | None, event_id: str) -> str:
    """Slug for an event detail page."""
    return make_slug(title, event_id)


def inspector_slug(location_name: str | None, inspector_id: str) -> str:
    """Slug for an inspector detail page."""
    return make_slug(location_name, inspector_id)


def transport_disruption_slug(common_name: str | None, disruption_id: str) -> str:
    """Slug for a transport disruption detail page."""
    return make_slug(common_name, disruption_id)


def extract_id_from_slug(slug: str) -> str:
    """Return the last hyphen-delimited token of a slug.

    Lossy when the id contains hyphens (``TIMS-204461`` comes back as
    ``204461``). Only meant for logging and display.
    """
    return slug.rsplit("-", 1)[-1]
