from __future__ import annotations

import logging
import re
from functools import lru_cache

from bloodtest_parser.schemas.config import ParserConfig

logger = logging.getLogger(__name__)


@lru_cache(maxsize=32)
def header_patterns(config: ParserConfig) -> tuple[re.Pattern[str], ...]:
    """Compile the header rules for a config, in the order they are tried.

    1. All caps: ASCII uppercase letters and whitespace only, case-sensitive.
    2. Starts with a category name such as "CHEMISTRY", any case.
    3. Starts with a panel phrase such as "Lipid Panel", any case.
    """
    patterns = [re.compile(rf"[A-Z\s]{{{config.min_header_length},}}")]
    for vocabulary in (config.category_names, config.panel_phrases):
        if vocabulary:
            alternation = "|".join(re.escape(term) for term in vocabulary)
            patterns.append(re.compile(rf"(?:{alternation})", re.IGNORECASE))
    return tuple(patterns)


def is_group_header(line: str, config: ParserConfig | None = None) -> bool:
    """Return True if a trimmed, non-empty line opens a new group."""
    config = config or ParserConfig()
    all_caps, *vocabulary = header_patterns(config)

    if all_caps.fullmatch(line):
        logger.debug("classify: all-caps header %r", line)
        return True
    if any(pattern.match(line) for pattern in vocabulary):
        logger.debug("classify: vocabulary header %r", line)
        return True
    return False
