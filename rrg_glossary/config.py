import os
from dataclasses import dataclass

# ---- Paths ----
PDF_PATH = os.environ.get('RRG_PDF', 'rrg/2020-02-28.pdf')
DB_FILE = os.environ.get('RRG_DB', 'glossary.db')

# ---- Style knobs ----
# Font identifiers are specific to the document template: run
# `rrg-glossary --list-fonts` against a new edition to find them.
BANNER_FONT = os.environ.get('RRG_BANNER_FONT', 'g_d0_f1')   # big, blue, bold ("GLOSSARY", "ERRATA")
TITLE_FONT = os.environ.get('RRG_TITLE_FONT', 'g_d0_f2')     # large black subtitle ("ABILITIES")
TITLE_MIN_HEIGHT = 18.0
REGION_START = os.environ.get('RRG_REGION_START', 'GLOSSARY')


@dataclass(frozen=True)
class StyleConfig:
    """How the rulebook styles the text we care about."""
    banner_font: str = BANNER_FONT
    title_font: str = TITLE_FONT
    title_min_height: float = TITLE_MIN_HEIGHT
    region_start: str = REGION_START

    @classmethod
    def from_env(cls) -> 'StyleConfig':
        return cls(
            banner_font=os.environ.get('RRG_BANNER_FONT', BANNER_FONT),
            title_font=os.environ.get('RRG_TITLE_FONT', TITLE_FONT),
            title_min_height=float(os.environ.get('RRG_TITLE_MIN_HEIGHT', TITLE_MIN_HEIGHT)),
            region_start=os.environ.get('RRG_REGION_START', REGION_START),
        )


DEFAULT_STYLE = StyleConfig()
