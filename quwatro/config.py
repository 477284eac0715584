"""
Configuration settings for the QUWATRO suite.

Uses Pydantic Settings to load environment variables for log file locations,
store capacities, alert thresholds and logging. Defaults reproduce the
behaviour of the interactive suite, so no variable has to be set.
"""
from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from quwatro.domain.seed import seed_locations


class Settings(BaseSettings):
    # Storage
    data_dir: Path = Field(Path("."), alias="QUWATRO_DATA_DIR")
    water_log_file: str = Field("usage.txt", alias="QUWATRO_WATER_LOG_FILE")
    heat_index_log_file: str = Field(
        "TempTerra_Knowledge_Hub_log.txt", alias="QUWATRO_HEAT_INDEX_LOG_FILE"
    )
    climate_log_file: str = Field("EcoPulse_Log.txt", alias="QUWATRO_CLIMATE_LOG_FILE")

    # Store capacities (None = unbounded)
    location_capacity: Optional[int] = Field(None, ge=1, alias="QUWATRO_LOCATION_CAPACITY")
    heat_index_capacity: int = Field(100, ge=1, alias="QUWATRO_HEAT_INDEX_CAPACITY")
    climate_history_capacity: int = Field(100, ge=1, alias="QUWATRO_CLIMATE_HISTORY_CAPACITY")

    # Thresholds
    high_usage_threshold: float = Field(500.0, alias="QUWATRO_HIGH_USAGE_THRESHOLD")
    heatwave_threshold_c: float = Field(38.0, alias="QUWATRO_HEATWAVE_THRESHOLD_C")
    flood_threshold_mm: float = Field(100.0, alias="QUWATRO_FLOOD_THRESHOLD_MM")
    dry_spell_humidity_pct: float = Field(30.0, alias="QUWATRO_DRY_SPELL_HUMIDITY_PCT")

    # Logging
    log_level: str = Field("WARNING", alias="QUWATRO_LOG_LEVEL")
    log_json: bool = Field(False, alias="QUWATRO_LOG_JSON")
    log_file: Optional[Path] = Field(None, alias="QUWATRO_LOG_FILE")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    @field_validator("location_capacity")
    @classmethod
    def _room_for_seeded_locations(cls, value: Optional[int]) -> Optional[int]:
        seeded = len(seed_locations())
        if value is not None and value < seeded:
            raise ValueError(f"must hold the {seeded} default locations, got {value}")
        return value

    @property
    def water_log_path(self) -> Path:
        return self.data_dir / self.water_log_file

    @property
    def heat_index_log_path(self) -> Path:
        return self.data_dir / self.heat_index_log_file

    @property
    def climate_log_path(self) -> Path:
        return self.data_dir / self.climate_log_file


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Retrieve a cached instance of Settings to avoid repeated env parsing.
    """
    return Settings()


__all__ = ["Settings", "get_settings"]
