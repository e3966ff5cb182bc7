from __future__ import annotations

from pydantic import BaseModel


class ComponentRecord(BaseModel):
    """One stored test result row, keyed by the report it came from."""

    result_id: str
    group_name: str
    component_name: str
    measured_value: float
    unit: str
    min_range: float | None = None
    max_range: float | None = None
    is_within_range: bool | None = None  # None when the row has no range
