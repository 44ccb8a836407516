"""Parsers for free-text feed fields."""

from cabradar.parsers.roads import (
    extract_road_name,
    extract_street_names,
    parse_affected_roads,
    parse_road_codes,
    primary_road,
    sort_roads,
)

__all__ = [
    "parse_road_codes",
    "extract_street_names",
    "extract_road_name",
    "primary_road",
    "sort_roads",
    "parse_affected_roads",
]
