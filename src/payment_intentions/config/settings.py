"""Settings for the payment intention creation workflow.

Priority chain (highest to lowest):
  1. Init kwargs
  2. Env vars with the ``PAYMENT_INTENTIONS_`` prefix
  3. ``.env`` file in the working directory
  4. Code defaults below
"""

from __future__ import annotations

from datetime import timedelta
from decimal import Decimal
from typing import Literal

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from payment_intentions.application.use_cases import CreationPolicy
from payment_intentions.domain.value_objects import RateLimit, ValueWindow


class PaymentIntentionSettings(BaseSettings):
    # Value window (inclusive)
    min_value: Decimal = Field(default=Decimal("1"))
    max_value: Decimal = Field(default=Decimal("10000"))

    # Rolling rate limit window per payer
    max_per_window: int = Field(default=5, ge=1)
    rate_limit_period: timedelta = Field(default=timedelta(days=1))

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    log_json: bool = False

    model_config = SettingsConfigDict(
        env_prefix="PAYMENT_INTENTIONS_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("rate_limit_period", mode="before")
    @classmethod
    def seconds_to_timedelta(cls, v: object) -> object:
        """Accept a plain number of seconds (``3600``) as well as ISO-8601 (``PT1H``)."""
        if isinstance(v, str) and v.strip().isdigit():
            return timedelta(seconds=int(v.strip()))
        return v

    @model_validator(mode="after")
    def check_bounds(self) -> PaymentIntentionSettings:
        if self.min_value > self.max_value:
            raise ValueError(
                f"min_value ({self.min_value}) must not exceed max_value ({self.max_value})"
            )
        if self.rate_limit_period <= timedelta(0):
            raise ValueError("rate_limit_period must be positive")
        return self

    def to_policy(self) -> CreationPolicy:
        """Build the domain policy the creation use case enforces."""
        return CreationPolicy(
            value_window=ValueWindow(minimum=self.min_value, maximum=self.max_value),
            rate_limit=RateLimit(
                max_per_window=self.max_per_window,
                period=self.rate_limit_period,
            ),
        )
