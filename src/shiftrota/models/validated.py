"""
Pydantic Validated Models
=========================
Pydantic validation layer for configuration objects crossing the
CLI/API boundary.

Usage:
    from shiftrota.models.validated import ValidatedEngineConfig

    config = ValidatedEngineConfig(rest_weekday=4, billing_cutoff_day=12)
    engine_config = config.to_dataclass()

Note: the engine itself only consumes the EngineConfig dataclass.
"""
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class ValidatedCapacity(BaseModel):
    """Seat limits per shift."""
    model_config = ConfigDict(validate_assignment=True)

    night: int = Field(default=1, ge=0, le=20)
    evening: int = Field(default=2, ge=0, le=20)
    morning: Optional[int] = Field(default=None, ge=0, description="None = unbounded")
    rest_day_night: int = Field(default=1, ge=0, le=20)
    rest_day_evening: int = Field(default=1, ge=0, le=20)
    rest_day_morning: int = Field(default=1, ge=0, le=20)
    billing_rest_day_morning: int = Field(default=2, ge=0, le=20)


class ValidatedEngineConfig(BaseModel):
    """
    Pydantic-validated engine configuration.

    Use this for strict validation at API boundaries.
    Can be converted to/from the dataclass EngineConfig.
    """
    model_config = ConfigDict(validate_assignment=True)

    rest_weekday: int = Field(default=4, ge=0, le=6, description="0=Monday .. 6=Sunday")
    week_start_weekday: int = Field(default=5, ge=0, le=6)
    billing_mode: bool = Field(default=True)
    billing_cutoff_day: int = Field(default=12, ge=1, le=31)
    honor_exemption_flags: bool = Field(default=False)
    leads_avoid_late_shifts: bool = Field(default=False)
    capacity: ValidatedCapacity = Field(default_factory=ValidatedCapacity)

    @field_validator("billing_cutoff_day")
    @classmethod
    def validate_cutoff(cls, v: int) -> int:
        """Cutoff must fall in the first half of any month."""
        if v > 28:
            raise ValueError("billing_cutoff_day cannot exceed 28")
        return v

    @model_validator(mode="after")
    def validate_model(self):
        """Cross-field validation."""
        if self.capacity.rest_day_evening > self.capacity.evening:
            raise ValueError("rest_day_evening cannot exceed evening capacity")
        if self.capacity.rest_day_night > self.capacity.night:
            raise ValueError("rest_day_night cannot exceed night capacity")
        return self

    def to_dataclass(self):
        """Convert to dataclass EngineConfig for the engine."""
        from shiftrota.models.constraints import EngineConfig
        from shiftrota.models.rules import ShiftCapacityPolicy

        return EngineConfig(
            rest_weekday=self.rest_weekday,
            week_start_weekday=self.week_start_weekday,
            billing_mode=self.billing_mode,
            billing_cutoff_day=self.billing_cutoff_day,
            honor_exemption_flags=self.honor_exemption_flags,
            leads_avoid_late_shifts=self.leads_avoid_late_shifts,
            capacity=ShiftCapacityPolicy(**self.capacity.model_dump()),
        )

    @classmethod
    def from_dataclass(cls, config) -> "ValidatedEngineConfig":
        """Create from dataclass EngineConfig."""
        return cls(
            rest_weekday=config.rest_weekday,
            week_start_weekday=config.week_start_weekday,
            billing_mode=config.billing_mode,
            billing_cutoff_day=config.billing_cutoff_day,
            honor_exemption_flags=config.honor_exemption_flags,
            leads_avoid_late_shifts=config.leads_avoid_late_shifts,
            capacity=ValidatedCapacity(**config.capacity.to_dict()),
        )
