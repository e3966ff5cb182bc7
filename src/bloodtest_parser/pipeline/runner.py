from __future__ import annotations

import logging
import time
from pathlib import Path

from bloodtest_parser.pipeline.classify import is_group_header
from bloodtest_parser.pipeline.extract import parse_test_line
from bloodtest_parser.schemas.config import ParserConfig
from bloodtest_parser.schemas.pipeline import ParseResult
from bloodtest_parser.schemas.report import Group, TestEntry

logger = logging.getLogger(__name__)


def parse_report(text: str, config: ParserConfig | None = None) -> list[Group]:
    """Convert OCR text of a blood-test report into groups of test entries.

    Single forward pass. A header line closes the open group and opens a new
    one; data lines are attached to the open group. Lines before the first
    header and lines that do not parse are dropped. Groups that collected no
    tests are never returned. Never raises for malformed input.
    """
    config = config or ParserConfig()
    groups: list[Group] = []
    current_name: str | None = None
    current_tests: list[TestEntry] = []

    lines = text.splitlines()
    logger.debug("parse: %d lines to process", len(lines))

    for raw_line in lines:
        line = raw_line.strip()
        if not line:
            continue

        if is_group_header(line, config):
            if current_name is not None:
                _close_group(groups, current_name, current_tests)
            current_name = line
            current_tests = []
            continue

        if current_name is None:
            continue

        entry = parse_test_line(line, config)
        if entry is not None:
            current_tests.append(entry)

    if current_name is not None:
        _close_group(groups, current_name, current_tests)

    logger.info(
        "parse: %d groups, %d tests",
        len(groups),
        sum(len(group.tests) for group in groups),
    )
    return groups


def _close_group(groups: list[Group], name: str, tests: list[TestEntry]) -> None:
    if not tests:
        logger.debug("parse: dropping empty group %r", name)
        return
    logger.debug("parse: closing group %r with %d tests", name, len(tests))
    groups.append(Group(name=name, tests=tuple(tests)))


def parse_file(path: str | Path, config: ParserConfig | None = None) -> ParseResult:
    """Read a UTF-8 text file and parse it. Read failures become a failed result."""
    start = time.time()

    try:
        text = Path(path).read_text(encoding="utf-8")
        groups = parse_report(text, config)
    except (OSError, UnicodeDecodeError) as exc:
        logger.error("parse: failed to read %s - %s", path, exc)
        return ParseResult(
            source=str(path),
            groups=[],
            total_time_seconds=time.time() - start,
            success=False,
            error=str(exc),
        )

    total_time = time.time() - start
    logger.info("parse: %s complete in %.3fs", path, total_time)
    return ParseResult(
        source=str(path),
        groups=groups,
        total_time_seconds=total_time,
        success=True,
    )
