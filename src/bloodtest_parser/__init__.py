"""Structured records from OCR text of blood-test reports."""
from bloodtest_parser.pipeline.runner import parse_file, parse_report
from bloodtest_parser.schemas import Group, ParserConfig, TestEntry

__all__ = ["parse_report", "parse_file", "Group", "TestEntry", "ParserConfig"]
