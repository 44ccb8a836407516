"""Road reference extraction from free-text road descriptions.

Road disruption feeds describe affected roads in free text, e.g.::

    "[A302] Kennington Park Road (SE11)"
    "[M25] Junction 10, [A3] Portsmouth Road"
    "High Street, Bankside"

Bracketed codes are motorways (M) and A-roads; anything else between
commas/semicolons is treated as a street name. None of the functions here
raise: text without matches yields empty results.
"""

import re

from cabradar.models import RoadKind, RoadReference

ROAD_CODE_PATTERN = re.compile(r"\[([AM])(\d+[A-Z]*)\]")
BARE_ROAD_CODE_PATTERN = re.compile(r"^[AM]\d+[A-Z]*$")
_PARENTHESIZED = re.compile(r"\([^)]*\)")
_NAME_AFTER_CODE = re.compile(r"\s*([^(\[]+)")
_SEPARATORS = re.compile(r"[,;]")
_DIGIT_RUNS = re.compile(r"(\d+)")

_KIND_RANK = {RoadKind.M: 0, RoadKind.A: 1, RoadKind.STREET: 2}


def parse_road_codes(text: str | None) -> list[RoadReference]:
    """Extract bracketed M/A road codes.

    Args:
        text: Road description, e.g. "[A302] Kennington Park Road (SE11)"

    Returns:
        One reference per bracketed code, in order of appearance. The code
        excludes brackets and the kind letter ("[A302]" -> A/"302").
    """
    if not text:
        return []
    return [
        RoadReference(kind=RoadKind(kind), code=code)
        for kind, code in ROAD_CODE_PATTERN.findall(text)
    ]


def extract_street_names(text: str | None) -> list[RoadReference]:
    """Extract plain street names.

    Bracketed road codes and parenthesized asides are removed, the rest is
    split on commas and semicolons. Empty segments and bare codes such as
    "A3" are dropped.
    """
    if not text:
        return []

    cleaned = ROAD_CODE_PATTERN.sub("", text)
    cleaned = _PARENTHESIZED.sub("", cleaned).strip()

    streets = []
    for segment in _SEPARATORS.split(cleaned):
        segment = segment.strip()
        if not segment or BARE_ROAD_CODE_PATTERN.match(segment):
            continue
        streets.append(RoadReference(kind=RoadKind.STREET, code=segment))
    return streets


def extract_road_name(text: str | None) -> str | None:
    """Return the road name written right after the first bracketed code.

    "[A3] Clapham Road (SW4), lane closed" -> "Clapham Road"
    """
    if not text:
        return None
    match = ROAD_CODE_PATTERN.search(text)
    if not match:
        return None
    name_match = _NAME_AFTER_CODE.match(text, match.end())
    if not name_match:
        return None
    name = name_match.group(1).strip().rstrip(",;").strip()
    return name or None


def primary_road(
    description: str | None, comments: str | None = None
) -> tuple[RoadKind, str]:
    """Return kind and number of the first bracketed code.

    The description is searched first, then the comments. Without any
    bracketed code the road is a street with unknown number.
    """
    for text in (description, comments):
        codes = parse_road_codes(text)
        if codes:
            return codes[0].kind, codes[0].code
    return RoadKind.STREET, "Unknown"


def _natural_key(code: str) -> list[int | str]:
    # Chunks alternate str/int starting with str, so keys always compare
    return [int(chunk) if chunk.isdigit() else chunk.lower() for chunk in _DIGIT_RUNS.split(code)]


def sort_roads(roads: list[RoadReference]) -> list[RoadReference]:
    """Sort road references for display.

    Motorways first, then A-roads, then streets. Within a kind, codes are
    compared numerically where they contain digits ("9" before "40"), then
    lexically. The sort is stable, so duplicate mentions keep their order.

    Returns:
        New sorted list; the input is left untouched.
    """
    return sorted(
        roads,
        key=lambda road: (_KIND_RANK[road.kind], _natural_key(road.code), road.code),
    )


def parse_affected_roads(description: str | None) -> list[RoadReference]:
    """Parse a road description into the affected roads shown on a detail page.

    Sorted M/A codes come first, followed by street names in text order.
    """
    return sort_roads(parse_road_codes(description)) + extract_street_names(description)
