"""HTTP client for the CabRadar list feed.

The feed exposes only bounding-box queries per category::

    GET {base_url}/list/roads?lat=51.5074&lon=-0.1276
    GET {base_url}/list/events?lat=51.5074&lon=-0.1276&width=1000&height=1000

There is no per-item endpoint; detail pages re-query the area and match
locally (see ``cabradar.resolvers``).
"""

import logging
from typing import Any

import httpx
from pydantic import ValidationError

from cabradar.config import FeedConfig
from cabradar.feeds.base import (
    FeatureCollection,
    FeedCategory,
    FeedFeature,
    NetworkError,
)

logger = logging.getLogger(__name__)


class FeedClient:
    """Async HTTP client for the list feed.

    Constructed explicitly and passed to resolvers; holds no state besides
    its configuration and the underlying connection pool. Requests are not
    retried.

    Example:
        async with FeedClient() as client:
            collection = await client.fetch_features(FeedCategory.ROADS)
            print(f"{len(collection.features)} road disruptions")
    """

    def __init__(
        self,
        config: FeedConfig | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            config: Optional configuration, uses defaults if not provided.
            transport: Optional httpx transport (e.g. ``httpx.MockTransport``).
        """
        self.config = config or FeedConfig()
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    @property
    def client(self) -> httpx.AsyncClient:
        """Get or create HTTP client."""
        if self._client is None:
            self._client = httpx.AsyncClient(
                base_url=self.config.feed_url,
                timeout=self.config.request_timeout,
                headers={
                    "User-Agent": self.config.user_agent,
                    "Accept": "application/json",
                },
                follow_redirects=True,
                transport=self._transport,
            )
        return self._client

    async def close(self) -> None:
        """Close the HTTP client."""
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> "FeedClient":
        return self

    async def __aexit__(self, *_args: object) -> None:
        await self.close()

    def build_params(
        self,
        category: FeedCategory,
        lat: float | None = None,
        lon: float | None = None,
    ) -> dict[str, Any]:
        """Build query parameters for a category, filling in the default origin."""
        params: dict[str, Any] = {
            "lat": self.config.default_lat if lat is None else lat,
            "lon": self.config.default_lon if lon is None else lon,
        }
        if category.uses_box_size:
            params["width"] = self.config.box_width
            params["height"] = self.config.box_height
        return params

    async def fetch_features(
        self,
        category: FeedCategory,
        lat: float | None = None,
        lon: float | None = None,
    ) -> FeatureCollection:
        """Fetch all features of a category around a search origin.

        Args:
            category: Feed category to query.
            lat: Latitude of the box centre (default from config).
            lon: Longitude of the box centre (default from config).

        Returns:
            FeatureCollection; ``malformed`` is set when the body had no
            usable ``features`` array.

        Raises:
            NetworkError: If the request fails or returns a non-2xx status.
        """
        params = self.build_params(category, lat, lon)
        path = f"/list/{category.value}"
        logger.debug(f"Fetching {category.value} from {path} with {params}")

        try:
            response = await self.client.get(path, params=params)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            status = e.response.status_code
            logger.warning(f"{category.value} feed returned {status}")
            raise NetworkError(
                f"{category.value} feed error: {status}", status_code=status
            ) from e
        except httpx.RequestError as e:
            logger.warning(f"{category.value} feed request failed: {e}")
            raise NetworkError(f"Network error: {e}") from e

        try:
            data = response.json()
        except ValueError as e:
            logger.warning(f"{category.value} feed returned invalid JSON: {e}")
            return FeatureCollection(malformed=True)

        return self._parse_collection(data, category)

    def _parse_collection(self, data: Any, category: FeedCategory) -> FeatureCollection:
        """Parse a feed body into a FeatureCollection.

        Features failing validation are skipped.
        """
        raw_features = data.get("features") if isinstance(data, dict) else None
        if not isinstance(raw_features, list):
            logger.warning(f"{category.value} feed response has no features array")
            return FeatureCollection(malformed=True)

        features = []
        for index, raw in enumerate(raw_features):
            try:
                features.append(FeedFeature.model_validate(raw))
            except ValidationError as e:
                logger.debug(f"Skipping invalid {category.value} feature #{index}: {e}")
                continue

        logger.debug(f"Parsed {len(features)} {category.value} features")
        return FeatureCollection(features=features)
