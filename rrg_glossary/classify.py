from dataclasses import dataclass
from typing import Optional, Tuple

from rrg_glossary.config import DEFAULT_STYLE, StyleConfig


@dataclass(frozen=True)
class TextFragment:
    """One positioned run of text, as the PDF engine reports it."""
    text: str
    font: str
    height: float
    page: int = -1
    bbox: Optional[Tuple[float, float, float, float]] = None


class ClassifiedFragment:
    """A view over a TextFragment that understands the rulebook's styling."""

    def __init__(self, fragment: TextFragment, style: StyleConfig = DEFAULT_STYLE):
        self.fragment = fragment
        self.style = style

    @property
    def is_region_banner(self) -> bool:
        """Big, blue and bold, the way "GLOSSARY" and "ERRATA" are set."""
        return self.fragment.font == self.style.banner_font

    @property
    def is_entry_title(self) -> bool:
        """Large black subtitle, the way "ABILITIES" is set."""
        return (self.fragment.font == self.style.title_font
                and self.fragment.height >= self.style.title_min_height)

    @property
    def text(self) -> str:
        return self.fragment.text

    def __repr__(self):
        kind = 'banner' if self.is_region_banner else 'title' if self.is_entry_title else 'body'
        return f"ClassifiedFragment({kind}, {self.text!r})"


def classify(fragment: TextFragment, style: StyleConfig = DEFAULT_STYLE) -> ClassifiedFragment:
    return ClassifiedFragment(fragment, style)
