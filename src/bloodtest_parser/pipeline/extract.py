from __future__ import annotations

import logging
import re
from functools import lru_cache

from pydantic import ValidationError

from bloodtest_parser.schemas.config import ParserConfig
from bloodtest_parser.schemas.report import TestEntry, parse_number

logger = logging.getLogger(__name__)

# Example rows:
#   "Glucose    95    mg/dL    70-100"
#   "Hemoglobin (Hb)    14.2    g/dL    (13.5-17.5)"
#   "TSH 2.1 mIU/L <0.4–4.0>"
NAME = r"(?P<substance>[^0-9]+?)"
VALUE = r"(?P<value>[\d.]+)"
UNIT = r"(?P<unit>\w+/?\w*)"


@lru_cache(maxsize=32)
def line_patterns(config: ParserConfig) -> tuple[re.Pattern[str], ...]:
    """Compile the data-line patterns: name/value/unit/range first, then name/value/unit."""
    base = rf"^{NAME}\s+{VALUE}\s+{UNIT}"
    if not config.range_separators:
        return (re.compile(base),)

    separator = "[" + "".join(re.escape(c) for c in config.range_separators) + "]+"
    ranged = (
        rf"{base}\s*(?:[(<]?(?P<min_range>[\d.]+){separator}(?P<max_range>[\d.]+)[)>]?)?"
    )
    return re.compile(ranged), re.compile(base)


def parse_test_line(line: str, config: ParserConfig | None = None) -> TestEntry | None:
    """Parse one trimmed data line into a TestEntry.

    Returns None for anything that is not a usable row (letterhead, footers,
    page numbers, values that are not numbers). A malformed reference range
    only drops the range; the rest of the entry is kept.
    """
    config = config or ParserConfig()

    for pattern in line_patterns(config):
        match = pattern.match(line)
        if match is None:
            continue

        fields = match.groupdict()
        substance = fields["substance"].strip()
        unit = fields["unit"].strip()
        value = parse_number(fields["value"])
        if not substance or not unit or value is None:
            logger.debug("extract: missing or invalid field, skipped %r", line)
            return None

        min_range = parse_number(fields.get("min_range"))
        max_range = parse_number(fields.get("max_range"))
        if min_range is None or max_range is None:
            if fields.get("min_range") or fields.get("max_range"):
                logger.debug("extract: invalid range dropped in %r", line)
            min_range = max_range = None

        try:
            entry = TestEntry(
                substance=substance,
                value=value,
                unit=unit,
                min_range=min_range,
                max_range=max_range,
            )
        except ValidationError as exc:
            logger.debug("extract: rejected %r: %s", line, exc)
            return None

        logger.debug(
            "extract: %s = %s %s", entry.substance, entry.value, entry.unit
        )
        return entry

    logger.debug("extract: no pattern matched %r", line)
    return None
