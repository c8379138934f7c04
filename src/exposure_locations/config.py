import logging
import os
from dataclasses import dataclass
from functools import lru_cache
from zoneinfo import ZoneInfo

from dotenv import load_dotenv

load_dotenv()

NZ_SOURCE_URL = (
    "https://raw.githubusercontent.com/minhealthnz/nz-covid-data/main/"
    "locations-of-interest/august-2021/locations-of-interest.geojson"
)
AU_SOURCE_URL = "https://data.crisper.net.au/table/covid_contact_locations"


def _optional_float(name: str) -> float | None:
    raw = os.getenv(name, "").strip()
    if not raw:
        return None
    return float(raw)


@dataclass(frozen=True)
class Settings:
    """Application settings loaded from environment variables."""

    # Upstream sources
    nz_source_url: str = os.getenv("NZ_SOURCE_URL", NZ_SOURCE_URL)
    au_source_url: str = os.getenv("AU_SOURCE_URL", AU_SOURCE_URL)
    # Unset means wait on upstream indefinitely
    fetch_timeout: float | None = _optional_float("FETCH_TIMEOUT")

    # Reshaping
    nz_timezone: str = os.getenv("NZ_TIMEZONE", "Pacific/Auckland")

    # Logging
    log_level: str = os.getenv("LOG_LEVEL", "INFO").upper()

    # API
    api_host: str = os.getenv("API_HOST", "0.0.0.0")
    api_port: int = int(os.getenv("API_PORT", "8000"))
    api_reload: bool = os.getenv("API_RELOAD", "true").lower() == "true"

    @property
    def nz_tzinfo(self) -> ZoneInfo:
        """Timezone the NZ dataset's wall-clock times are published in."""
        return ZoneInfo(self.nz_timezone)

    def __post_init__(self) -> None:
        """Validate settings after initialization."""
        if self.fetch_timeout is not None and self.fetch_timeout <= 0:
            raise ValueError(f"FETCH_TIMEOUT must be positive, got {self.fetch_timeout}")

        if self.log_level not in logging.getLevelNamesMapping():
            raise ValueError(f"LOG_LEVEL must be a logging level name, got {self.log_level!r}")


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


# Global settings instance
settings = get_settings()


def configure_logging(level: str | None = None) -> None:
    """Configure root logging once for the process."""
    logging.basicConfig(
        level=level or settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
