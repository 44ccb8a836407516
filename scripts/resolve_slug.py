#!/usr/bin/env python3
"""Resolve a detail page slug against the live feed and print it as JSON.

Usage:
    # Road disruption around central London
    uv run python scripts/resolve_slug.py road-disruption lambeth-bridge-TIMS-204461

    # Event near a given origin
    uv run python scripts/resolve_slug.py event o2-arena-concert-ev123 --lat 51.503 --lon 0.003

Exit codes: 0 resolved, 1 not found, 2 network error.
"""

import argparse
import asyncio
import dataclasses
import json
import logging
import sys
from collections.abc import Awaitable, Callable
from typing import Any

from cabradar.config import FeedConfig
from cabradar.feeds import EntityNotFoundError, FeedClient, MalformedFeedError, NetworkError
from cabradar.models import DetailEntity
from cabradar.resolvers import (
    resolve_event,
    resolve_inspector,
    resolve_road_disruption,
    resolve_transport_disruption,
)

logger = logging.getLogger(__name__)

Resolver = Callable[[FeedClient, str, float | None, float | None], Awaitable[DetailEntity]]

RESOLVERS: dict[str, Resolver] = {
    "road-disruption": resolve_road_disruption,
    "event": resolve_event,
    "inspector": resolve_inspector,
    "transport-disruption": resolve_transport_disruption,
}

EXIT_NOT_FOUND = 1
EXIT_NETWORK_ERROR = 2


def entity_to_json(entity: DetailEntity) -> dict[str, Any]:
    """Serialize an entity, including its display name and description."""
    data = dataclasses.asdict(entity)
    data["display_name"] = entity.display_name
    description = getattr(entity, "description", None)
    if description is not None:
        data["description"] = description
    return data


async def resolve(
    category: str,
    slug: str,
    lat: float | None = None,
    lon: float | None = None,
    config: FeedConfig | None = None,
) -> DetailEntity:
    """Resolve a slug of the given category with a fresh client."""
    async with FeedClient(config) as client:
        return await RESOLVERS[category](client, slug, lat, lon)


def setup_logging(verbose: bool = False) -> None:
    """Configure logging."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def run(args: argparse.Namespace) -> int:
    """Resolve and print; return process exit code."""
    try:
        entity = asyncio.run(resolve(args.category, args.slug, args.lat, args.lon))
    except MalformedFeedError as e:
        logger.error(f"Feed returned malformed data: {e}")
        return EXIT_NOT_FOUND
    except EntityNotFoundError as e:
        logger.error(str(e))
        return EXIT_NOT_FOUND
    except NetworkError as e:
        logger.error(f"Feed request failed: {e}")
        return EXIT_NETWORK_ERROR

    print(json.dumps(entity_to_json(entity), indent=2, ensure_ascii=False))
    return 0


def main() -> None:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(description="Resolve a CabRadar detail page slug")
    parser.add_argument("category", choices=sorted(RESOLVERS), help="Entity category")
    parser.add_argument("slug", help="Slug from the detail page URL")
    parser.add_argument("--lat", type=float, default=None, help="Search origin latitude")
    parser.add_argument("--lon", type=float, default=None, help="Search origin longitude")
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose logging",
    )

    args = parser.parse_args()

    setup_logging(args.verbose)
    sys.exit(run(args))


if __name__ == "__main__":
    main()
