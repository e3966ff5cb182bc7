from __future__ import annotations

import math

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class TestEntry(BaseModel):
    model_config = ConfigDict(frozen=True)
    __test__ = False  # not a pytest class

    substance: str = Field(min_length=1)  # e.g., "Glucose", "Hemoglobin (Hb)"
    value: float = Field(allow_inf_nan=False)
    unit: str = Field(min_length=1)  # e.g., "mg/dL"
    min_range: float | None = Field(default=None, allow_inf_nan=False)
    max_range: float | None = Field(default=None, allow_inf_nan=False)

    @field_validator("substance", "unit", mode="before")
    @classmethod
    def _strip(cls, v: object) -> object:
        return v.strip() if isinstance(v, str) else v

    @model_validator(mode="after")
    def _range_bounds_paired(self) -> TestEntry:
        if (self.min_range is None) != (self.max_range is None):
            raise ValueError("min_range and max_range must be given together")
        return self

    @property
    def has_range(self) -> bool:
        return self.min_range is not None and self.max_range is not None


class Group(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str = Field(min_length=1)  # header text as it appeared in the report
    tests: tuple[TestEntry, ...] = Field(min_length=1)


def parse_number(token: str | None) -> float | None:
    """Parse a numeric token into a finite float, or None if it is not one."""
    if not token:
        return None
    try:
        number = float(token)
    except ValueError:
        return None
    return number if math.isfinite(number) else None
