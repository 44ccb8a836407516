"""Configuration for the CabRadar feed client and detail resolution."""

import os
from dataclasses import dataclass, field

from dotenv import load_dotenv

load_dotenv()

# Central London, used when a detail page carries no search origin
LONDON_LAT = 51.5074
LONDON_LON = -0.1276


@dataclass
class FeedConfig:
    """Configuration for the geospatial list feed."""

    # Feed base URL (without the /list/<category> path)
    base_url: str = field(
        default_factory=lambda: os.getenv(
            "CABRADAR_FEED_BASE_URL", "https://list-api-service.hellocabradar.workers.dev"
        )
    )

    # Request timeout in seconds
    request_timeout: float = field(
        default_factory=lambda: float(os.getenv("CABRADAR_REQUEST_TIMEOUT", "10"))
    )

    # User-Agent header for requests
    user_agent: str = field(
        default_factory=lambda: os.getenv("CABRADAR_USER_AGENT", "CabRadar/1.0")
    )

    # Search origin used when the caller passes none
    default_lat: float = field(
        default_factory=lambda: float(os.getenv("CABRADAR_DEFAULT_LAT", str(LONDON_LAT)))
    )
    default_lon: float = field(
        default_factory=lambda: float(os.getenv("CABRADAR_DEFAULT_LON", str(LONDON_LON)))
    )

    # Bounding box size for categories queried with width/height
    box_width: int = field(default_factory=lambda: int(os.getenv("CABRADAR_BOX_WIDTH", "1000")))
    box_height: int = field(
        default_factory=lambda: int(os.getenv("CABRADAR_BOX_HEIGHT", "1000"))
    )

    @property
    def feed_url(self) -> str:
        """Return base URL without trailing slash."""
        return self.base_url.rstrip("/")


@dataclass
class DisplayConfig:
    """Configuration for detail page display helpers."""

    # An entity counts as live if updated within this many minutes
    live_window_minutes: int = field(
        default_factory=lambda: int(os.getenv("CABRADAR_LIVE_WINDOW_MINUTES", "5"))
    )
