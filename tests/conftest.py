"""Shared pytest fixtures for bloodtest_parser tests."""

import pytest
from bloodtest_parser.schemas.config import ParserConfig


SAMPLE_REPORT = """\
ACME CLINICAL LABORATORIES
Patient: Jane Doe   DOB: 01/02/1980

Complete Blood Count
Hemoglobin (Hb)    14.2    g/dL    13.5-17.5
White Blood Cells  12.3    K/uL    (4.5-11.0)
Platelets          250     K/uL

CHEMISTRY
Glucose            95      mg/dL   70–100
Creatinine         0.6     mg/dL   <0.7-1.3>
Sodium             abc     mmol/L  136-145

LIPIDS
THYROID
TSH 2.1 mIU/L 0.4-4.0

Page 1
"""


@pytest.fixture
def default_config() -> ParserConfig:
    """ParserConfig with the built-in vocabularies and separators."""
    return ParserConfig()


@pytest.fixture
def sample_report() -> str:
    """A small OCR-style report: letterhead, three populated groups, one empty."""
    return SAMPLE_REPORT


@pytest.fixture
def report_file(tmp_path, sample_report):
    """sample_report written to a UTF-8 .txt file."""
    path = tmp_path / "report_001.txt"
    path.write_text(sample_report, encoding="utf-8")
    return path
