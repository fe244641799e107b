"""Configuration schema using Pydantic.

Why this exists:
- Type-safe configuration with validation
- Environment variable support
- Multiple deployment profiles (local, offline, ...)
- Clear documentation of all settings

How to extend:
1. Add new fields to existing config classes
2. Create new config classes for new components
3. Update config.example.toml with new settings
"""

from enum import Enum
from pathlib import Path
from typing import Any, Optional

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from placefinder.entities import MAX_RESULTS, Coordinate

# Location seeded into an empty store on first start
DEFAULT_LOCATION = Coordinate(latitude=14.586716, longitude=121.062449)


class LogLevel(str, Enum):
    """Logging levels."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class PlaceSearchProviderType(str, Enum):
    """Supported place-search providers."""

    HERE = "here"
    STATIC = "static"


class CoordinateStoreType(str, Enum):
    """Supported coordinate stores."""

    SQLITE = "sqlite"
    MEMORY = "memory"


class PlaceSearchConfig(BaseModel):
    """Place-search provider configuration."""

    provider: PlaceSearchProviderType = PlaceSearchProviderType.HERE
    api_key: Optional[str] = "HERE_API_KEY"
    base_url: Optional[str] = None
    timeout: float = Field(default=20.0, gt=0)
    extra_params: dict[str, Any] = Field(default_factory=dict)


class CoordinateStoreConfig(BaseModel):
    """Coordinate store configuration."""

    store_type: CoordinateStoreType = CoordinateStoreType.SQLITE
    # Defaults to locations.db inside AppConfig.data_dir
    connection_string: Optional[str] = None
    extra_params: dict[str, Any] = Field(default_factory=dict)

    def model_post_init(self, __context: Any) -> None:
        """Expand ~ in connection string."""
        if self.connection_string and "~" in self.connection_string:
            self.connection_string = self.connection_string.replace(
                "~", str(Path.home())
            )


class SearchConfig(BaseModel):
    """Search pipeline configuration."""

    max_results: int = Field(
        default=MAX_RESULTS,
        gt=0,
        le=MAX_RESULTS,
        description="Places kept from the provider response, in received order",
    )


class AppConfig(BaseSettings):
    """Main application configuration.

    Loads from:
    1. Config file (TOML)
    2. Environment variables (prefixed with PLACEFINDER_)
    3. .env file
    """

    model_config = SettingsConfigDict(
        env_prefix="PLACEFINDER_",
        env_nested_delimiter="__",
        case_sensitive=False,
    )

    # Application settings
    log_level: LogLevel = LogLevel.INFO
    json_logs: bool = False
    log_dir: Optional[Path] = None
    data_dir: Path = Field(default=Path.home() / ".placefinder")

    # Startup seeding of an empty store
    seed_default_location: bool = True
    default_location: Coordinate = DEFAULT_LOCATION

    # Component configurations
    place_search: PlaceSearchConfig = Field(default_factory=PlaceSearchConfig)
    coordinate_store: CoordinateStoreConfig = Field(default_factory=CoordinateStoreConfig)
    search: SearchConfig = Field(default_factory=SearchConfig)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls,
        init_settings,
        env_settings,
        dotenv_settings,
        file_secret_settings,
    ):
        """Let environment variables override values read from the config file."""
        return env_settings, init_settings, dotenv_settings, file_secret_settings

    def model_post_init(self, __context: Any) -> None:
        """Post-initialization: create data directory and place the store inside it."""
        self.data_dir = self.data_dir.expanduser()
        self.data_dir.mkdir(parents=True, exist_ok=True)
        if self.coordinate_store.connection_string is None:
            self.coordinate_store.connection_string = f"sqlite:///{self.data_dir / 'locations.db'}"
        if self.log_dir:
            self.log_dir = self.log_dir.expanduser()

    @property
    def initial_location(self) -> Optional[Coordinate]:
        """Coordinate to seed into an empty store, if seeding is enabled."""
        return self.default_location if self.seed_default_location else None
