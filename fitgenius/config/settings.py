from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

Language = Literal["en", "zh-TW"]


class Settings(BaseSettings):
    log_level: str = Field(default="INFO", validation_alias="LOG_LEVEL")
    language: Language = Field(default="en", validation_alias="FITGENIUS_LANGUAGE")
    timezone: str = Field(default="UTC", validation_alias="FITGENIUS_TIMEZONE")

    # Session timing
    rest_seconds: int = Field(default=60, validation_alias="FITGENIUS_REST_SECONDS")
    tick_interval_seconds: float = Field(default=1.0, validation_alias="FITGENIUS_TICK_INTERVAL_SECONDS")

    # Coaching
    overload_increment_kg: float = Field(default=2.5, validation_alias="FITGENIUS_OVERLOAD_INCREMENT_KG")

    # Fail-closed defaults for malformed exercise targets
    default_sets: int = Field(default=3, validation_alias="FITGENIUS_DEFAULT_SETS")
    default_reps: int = Field(default=10, validation_alias="FITGENIUS_DEFAULT_REPS")
    default_exercise_minutes: int = Field(default=5, validation_alias="FITGENIUS_DEFAULT_EXERCISE_MINUTES")

    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore",
        populate_by_name=True,
    )

    @field_validator("rest_seconds", "default_sets", "default_reps")
    @classmethod
    def validate_positive_int(cls, value: int) -> int:
        if value <= 0:
            raise ValueError("Session defaults must be positive integers")
        return value

    @field_validator("tick_interval_seconds", "overload_increment_kg")
    @classmethod
    def validate_positive_float(cls, value: float) -> float:
        if value <= 0:
            raise ValueError("Tick interval and overload increment must be positive")
        return value

    @field_validator("default_exercise_minutes")
    @classmethod
    def validate_non_negative(cls, value: int) -> int:
        if value < 0:
            raise ValueError("FITGENIUS_DEFAULT_EXERCISE_MINUTES cannot be negative")
        return value


settings = Settings()
