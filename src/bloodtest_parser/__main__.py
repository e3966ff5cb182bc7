"""Blood-Test Report Parser CLI.

Usage:
    uv run python -m bloodtest_parser --input <path> [options]
    uv run python -m bloodtest_parser --batch <dir> [options]
"""

from __future__ import annotations
import argparse
import json
import logging
import sys
from pathlib import Path


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bloodtest_parser",
        description="Convert OCR text of blood-test reports into grouped test results",
    )
    group = parser.add_mutually_exclusive_group(required=True)
    group.add_argument(
        "--input",
        metavar="PATH",
        help="Path to a single report text file",
    )
    group.add_argument(
        "--batch", metavar="DIR", help="Directory of report .txt files to process"
    )

    parser.add_argument(
        "--output",
        metavar="PATH",
        default=None,
        help="Write output to file (default: stdout)",
    )
    parser.add_argument(
        "--format",
        choices=["json", "records", "summary"],
        default="json",
        help="Output format: json (groups), records (flat rows) or summary (human-readable table)",
    )
    parser.add_argument(
        "--report-id",
        metavar="ID",
        default=None,
        help="Report identifier for --format records (default: file name stem)",
    )
    parser.add_argument(
        "--separators",
        metavar="CHARS",
        default=None,
        help="Characters accepted between range bounds (default: hyphen, en dash, em dash)",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log line-by-line parsing decisions to stderr",
    )
    return parser


def format_summary(result) -> str:
    """Format ParseResult as human-readable text table."""
    from bloodtest_parser.pipeline.flag import flag_out_of_range, range_flag

    lines = []
    lines.append(f"Blood Test Report -- {Path(result.source).name}")
    lines.append("=" * (len(lines[0])))

    if not result.success:
        lines.append(f"Error: {result.error}")
        return "\n".join(lines)

    if not result.groups:
        lines.append("No test results found.")
        return "\n".join(lines)

    col_widths = [24, 10, 10, 16, 8]
    header = f"| {'Test':<{col_widths[0]}} | {'Value':<{col_widths[1]}} | {'Unit':<{col_widths[2]}} | {'Reference':<{col_widths[3]}} | {'Flag':<{col_widths[4]}} |"
    separator = "|" + "|".join("-" * (w + 2) for w in col_widths) + "|"

    for group in result.groups:
        lines.append("")
        lines.append(f"{group.name}:")
        lines.append(header)
        lines.append(separator)
        for test in group.tests:
            ref_str = f"{test.min_range:g}-{test.max_range:g}" if test.has_range else ""
            flag_str = (range_flag(test) or "").upper()
            lines.append(
                f"| {test.substance:<{col_widths[0]}} "
                f"| {test.value:<{col_widths[1]}g} "
                f"| {test.unit:<{col_widths[2]}} "
                f"| {ref_str:<{col_widths[3]}} "
                f"| {flag_str:<{col_widths[4]}} |"
            )

    summary = flag_out_of_range(result.groups)
    lines.append("")
    lines.append(
        f"Parsed: {len(result.groups)} groups, {result.test_count} tests "
        f"in {result.total_time_seconds:.3f}s"
    )
    lines.append(
        f"Flagged: {summary['flagged_count']} out of range "
        f"({summary['ranged_tests']} with a reference range)"
    )

    return "\n".join(lines)


def main() -> int:
    parser = build_parser()
    args = parser.parse_args()

    # Configure logging
    log_level = logging.DEBUG if args.verbose else logging.WARNING
    logging.basicConfig(
        level=log_level, format="%(levelname)s: %(message)s", stream=sys.stderr
    )

    from bloodtest_parser.pipeline.records import to_records
    from bloodtest_parser.pipeline.runner import parse_file
    from bloodtest_parser.schemas.config import ParserConfig

    if args.separators is not None:
        config = ParserConfig(range_separators=args.separators)
    else:
        config = ParserConfig()

    if args.input:
        input_path = Path(args.input)
        if not input_path.is_file():
            print(f"Error: input file not found: {args.input}", file=sys.stderr)
            return 2
        paths = [input_path]
    else:
        batch_dir = Path(args.batch)
        if not batch_dir.is_dir():
            print(f"Error: batch directory not found: {args.batch}", file=sys.stderr)
            return 2
        paths = sorted(batch_dir.glob("*.txt"))
        if not paths:
            print(f"Error: no .txt files found in {args.batch}", file=sys.stderr)
            return 2

    results = [parse_file(path, config) for path in paths]

    # Format output
    if args.format == "summary":
        output_text = "\n\n".join(format_summary(r) for r in results)
    elif args.format == "records":
        rows = []
        for result in results:
            result_id = args.report_id or Path(result.source).stem
            rows.extend(r.model_dump() for r in to_records(result.groups, result_id))
        output_text = json.dumps(rows, indent=2)
    else:
        if len(results) == 1:
            output_data = results[0].model_dump()
        else:
            output_data = [r.model_dump() for r in results]
        output_text = json.dumps(output_data, indent=2, default=str)

    # Write output
    if args.output:
        Path(args.output).write_text(output_text)
    else:
        print(output_text)

    if any(not r.success for r in results):
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
