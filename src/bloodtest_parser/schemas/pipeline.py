from __future__ import annotations

from pydantic import BaseModel

from bloodtest_parser.schemas.report import Group


class ParseResult(BaseModel):
    source: str
    groups: list[Group]
    total_time_seconds: float
    success: bool
    error: str | None = None

    @property
    def test_count(self) -> int:
        return sum(len(group.tests) for group in self.groups)
