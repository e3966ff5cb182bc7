from dataclasses import dataclass

DEFAULT_CATEGORY_NAMES = (
    "HEMATOLOGY",
    "CHEMISTRY",
    "LIPIDS",
    "THYROID",
    "VITAMINS",
    "HORMONES",
    "PROTEINS",
)

DEFAULT_PANEL_PHRASES = (
    "Complete Blood Count",
    "Metabolic Panel",
    "Lipid Panel",
)


@dataclass(frozen=True)
class ParserConfig:
    category_names: tuple[str, ...] = DEFAULT_CATEGORY_NAMES
    panel_phrases: tuple[str, ...] = DEFAULT_PANEL_PHRASES
    range_separators: str = "-–—"  # hyphen, en dash, em dash; OCR fonts vary
    min_header_length: int = 3  # all-caps header rule
