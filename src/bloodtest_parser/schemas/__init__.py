"""Schema definitions for parsed blood-test reports."""
from bloodtest_parser.schemas.report import Group, TestEntry
from bloodtest_parser.schemas.records import ComponentRecord
from bloodtest_parser.schemas.pipeline import ParseResult
from bloodtest_parser.schemas.config import ParserConfig

__all__ = [
    "Group", "TestEntry",
    "ComponentRecord", "ParseResult", "ParserConfig",
]
