"""Text-to-record parsing stages."""
from bloodtest_parser.pipeline.classify import is_group_header
from bloodtest_parser.pipeline.extract import parse_test_line
from bloodtest_parser.pipeline.flag import flag_out_of_range, is_within_range, range_flag
from bloodtest_parser.pipeline.records import group_records, to_records
from bloodtest_parser.pipeline.runner import parse_file, parse_report

__all__ = [
    "is_group_header", "parse_test_line",
    "range_flag", "is_within_range", "flag_out_of_range",
    "to_records", "group_records",
    "parse_report", "parse_file",
]
