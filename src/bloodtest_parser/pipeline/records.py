from __future__ import annotations

import logging

from bloodtest_parser.pipeline.flag import is_within_range
from bloodtest_parser.schemas.records import ComponentRecord
from bloodtest_parser.schemas.report import Group

logger = logging.getLogger(__name__)


def to_records(groups: list[Group], result_id: str) -> list[ComponentRecord]:
    """Flatten parsed groups into storage rows, in document order."""
    records = [
        ComponentRecord(
            result_id=result_id,
            group_name=group.name,
            component_name=test.substance,
            measured_value=test.value,
            unit=test.unit,
            min_range=test.min_range,
            max_range=test.max_range,
            is_within_range=is_within_range(test),
        )
        for group in groups
        for test in group.tests
    ]
    logger.info("records: %d rows for result %s", len(records), result_id)
    return records


def group_records(
    records: list[ComponentRecord],
) -> dict[str, list[ComponentRecord]]:
    """Regroup stored rows by group name for display.

    Groups keep the order in which they were first seen. Rows from repeated
    group names (e.g. a panel continued on a second page) are merged.
    """
    grouped: dict[str, list[ComponentRecord]] = {}
    for record in records:
        grouped.setdefault(record.group_name, []).append(record)
    return grouped
