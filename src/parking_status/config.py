"""Configuration models and loading utilities."""

import os
from pathlib import Path

import yaml
from pydantic import BaseModel, Field, field_validator

CONFIG_ENV_VAR = "PARKING_STATUS_CONFIG"

# Path segment the API uses for the selected lot
RESERVED_LOT_NAMES = ("current",)


class OccupiedSpotConfig(BaseModel):
    """A spot that should start out occupied."""

    row: int
    col: int
    vehicle_id: str


class LotConfig(BaseModel):
    """Parking lot definition."""

    name: str
    hourly_rate: float = Field(ge=0)
    rows: int = Field(gt=0)
    cols: int = Field(gt=0)
    occupied: list[OccupiedSpotConfig] = []

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Lot name must not be blank")
        if v in RESERVED_LOT_NAMES:
            raise ValueError(f"Lot name '{v}' is reserved")
        return v


class RefreshConfig(BaseModel):
    """Periodic state refresh configuration."""

    interval_seconds: int = Field(default=30, gt=0)


class APIConfig(BaseModel):
    """API server configuration."""

    host: str = "0.0.0.0"
    port: int = 8000


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = "INFO"

    @field_validator("level")
    @classmethod
    def normalize_level(cls, v: str) -> str:
        level = v.upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"Unknown log level: {v}")
        return level


class AppConfig(BaseModel):
    """Main application configuration."""

    lots: list[LotConfig] = []
    use_sample_data: bool = True  # Seed built-in lots when none are configured
    refresh: RefreshConfig = RefreshConfig()
    api: APIConfig = APIConfig()
    logging: LoggingConfig = LoggingConfig()


def load_config(path: str | Path) -> AppConfig:
    """
    Load configuration from a YAML file.

    Args:
        path: Path to the configuration file

    Returns:
        Validated AppConfig instance

    Raises:
        FileNotFoundError: If config file doesn't exist
        ValueError: If config is invalid
    """
    config_path = Path(path)

    if not config_path.exists():
        raise FileNotFoundError(f"Configuration file not found: {config_path}")

    with open(config_path) as f:
        data = yaml.safe_load(f)

    return AppConfig(**(data or {}))


def get_config_path() -> Path:
    """Get the configuration file path, honouring PARKING_STATUS_CONFIG."""
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        return Path(env_path)

    local_config = Path("config/config.yaml")
    if local_config.exists():
        return local_config

    # Docker layout
    parent_config = Path("/app/config/config.yaml")
    if parent_config.exists():
        return parent_config

    return local_config  # Return default even if doesn't exist
