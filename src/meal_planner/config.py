"""Application configuration."""

import os
from pathlib import Path

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    catalog_path: Path | None = None
    plan_days: int = Field(default=3, ge=1)
    meal_names: list[str] = Field(
        default_factory=lambda: ["Lunch", "Dinner"], min_length=1
    )
    serving_min_factor: float = Field(default=0.7, gt=0)
    serving_max_factor: float = Field(default=1.5, gt=0)
    protein_window: int = Field(default=2, ge=0)
    carb_window: int = Field(default=2, ge=0)
    vegetable_window: int = Field(default=4, ge=0)
    prep_overhead_minutes: int = Field(default=5, ge=0)
    debug: bool = False
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_prefix="MEAL_PLANNER_",
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )

    @model_validator(mode="after")
    def check_serving_bounds(self) -> "Settings":
        if self.serving_min_factor > self.serving_max_factor:
            raise ValueError("serving_min_factor must not exceed serving_max_factor")
        return self
