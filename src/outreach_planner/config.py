"""
Configuration management for the Outreach Planner.
"""

import os
from datetime import timedelta
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel, Field

from .temporal.models import REQUESTED_SCENARIO_TAG, AggregationConfiguration


class PlannerConfig(BaseModel):
    """Planning horizon and aggregation parameters."""

    horizon_days: float = Field(default=14.0, gt=0.0, le=365.0)
    default_scenario: str = Field(default=REQUESTED_SCENARIO_TAG)
    bucket_hours: float = Field(default=1.0, gt=0.0, le=24.0)
    min_window_hours: float = Field(default=2.0, ge=0.0, le=168.0)


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = Field(default="INFO")
    file_path: Optional[str] = Field(default="./logs/outreach_planner.log")
    max_size: str = Field(default="10MB")
    backup_count: int = Field(default=5)


class Config(BaseModel):
    """Main configuration class."""

    planner: PlannerConfig = Field(default_factory=PlannerConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @classmethod
    def load_from_env(cls, env_file: Optional[str] = None) -> "Config":
        """Load configuration from environment variables."""
        if env_file:
            load_dotenv(env_file)
        else:
            # Try to load from .env file in current directory
            env_path = Path(".env")
            if env_path.exists():
                load_dotenv(env_path)

        planner = PlannerConfig(
            horizon_days=float(os.getenv("PLANNER_HORIZON_DAYS", "14")),
            default_scenario=os.getenv("PLANNER_SCENARIO", REQUESTED_SCENARIO_TAG),
            bucket_hours=float(os.getenv("PLANNER_BUCKET_HOURS", "1")),
            min_window_hours=float(os.getenv("PLANNER_MIN_WINDOW_HOURS", "2"))
        )

        # An empty LOG_FILE_PATH disables file logging
        log_file = os.getenv("LOG_FILE_PATH", "./logs/outreach_planner.log")
        logging = LoggingConfig(
            level=os.getenv("LOG_LEVEL", "INFO"),
            file_path=log_file or None,
            max_size=os.getenv("LOG_MAX_SIZE", "10MB"),
            backup_count=int(os.getenv("LOG_BACKUP_COUNT", "5"))
        )

        return cls(planner=planner, logging=logging)

    def aggregation_config(self) -> AggregationConfiguration:
        """Build the aggregation engine configuration from planner settings."""
        return AggregationConfiguration(
            bucket_duration=timedelta(hours=self.planner.bucket_hours),
            min_window_duration=timedelta(hours=self.planner.min_window_hours)
        )
