from __future__ import annotations

import logging
from typing import Literal

from bloodtest_parser.schemas.report import Group, TestEntry

logger = logging.getLogger(__name__)

FlagType = Literal["normal", "high", "low"]


def range_flag(test: TestEntry) -> FlagType | None:
    """Classify a value against its reference range; bounds are inclusive."""
    if not test.has_range:
        return None
    if test.value < test.min_range:
        return "low"
    if test.value > test.max_range:
        return "high"
    return "normal"


def is_within_range(test: TestEntry) -> bool | None:
    flag = range_flag(test)
    return None if flag is None else flag == "normal"


def flag_out_of_range(groups: list[Group]) -> dict[str, object]:
    total_tests = 0
    ranged_tests = 0
    flags: list[dict[str, object]] = []

    for group in groups:
        for test in group.tests:
            total_tests += 1
            flag = range_flag(test)
            if flag is None:
                continue
            ranged_tests += 1
            if flag != "normal":
                flags.append(
                    {
                        "group": group.name,
                        "substance": test.substance,
                        "value": test.value,
                        "flag": flag,
                        "min_range": test.min_range,
                        "max_range": test.max_range,
                    }
                )

    logger.info(
        "flag: %d/%d ranged tests out of range (%d tests total)",
        len(flags),
        ranged_tests,
        total_tests,
    )

    return {
        "total_tests": total_tests,
        "ranged_tests": ranged_tests,
        "flagged_count": len(flags),
        "flags": flags,
    }
