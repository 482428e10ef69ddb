import logging
import re
from typing import Dict, Iterable, List

from rrg_glossary.classify import ClassifiedFragment, TextFragment, classify
from rrg_glossary.config import DEFAULT_STYLE, StyleConfig
from rrg_glossary.normalize import normalize_string

# Anything parseInt() would accept: page numbers and running headers share the
# subtitle style, e.g. "42" or "12 RULES REFERENCE".
NUMERIC_TITLE = re.compile(r"^\s*[+-]?\d")


def is_numeric_title(title: str) -> bool:
    return bool(NUMERIC_TITLE.match(title))


class Glossary:
    """Groups body text under the most recent entry title.

    Title runs accumulate into `pending_title` (a title can be split over
    several runs) and body runs into `pending_body`. A title run that follows
    body text starts a new section; one that follows another title run extends
    it. `complete()` commits the pair when both are non-empty and always resets
    both.
    """

    def __init__(self):
        self.content: Dict[str, List[str]] = {}
        self.pending_title: List[str] = []
        self.pending_body: List[str] = []
        self.overwritten = 0

    def add_text(self, text: ClassifiedFragment) -> None:
        content = normalize_string(text.text)
        if content == '':
            return
        if text.is_entry_title:
            if self.pending_body:
                self.complete()
            self.pending_title.append(content)
        else:
            self.pending_body.append(content)

    def complete(self) -> None:
        if self.is_completable:
            title = ''.join(self.pending_title)
            if not is_numeric_title(title):
                if title in self.content:
                    self.overwritten += 1
                    logging.info(f"Glossary term {title!r} seen again; keeping the later definition")
                self.content[title] = list(self.pending_body)
        self.pending_title = []
        self.pending_body = []

    @property
    def is_completable(self) -> bool:
        return bool(self.pending_title) and bool(self.pending_body)


def build_glossary(fragments: Iterable[TextFragment], style: StyleConfig = DEFAULT_STYLE) -> Dict[str, List[str]]:
    """Run the whole fragment stream through a Glossary.

    Only fragments between the region-start banner and the next banner are
    collected. Fragments must arrive in reading order.
    """
    glossary = Glossary()
    within_glossary = False
    for fragment in fragments:
        text = classify(fragment, style)
        if text.is_region_banner:
            within_glossary = text.text == style.region_start
        elif within_glossary:
            glossary.add_text(text)
    glossary.complete()
    logging.info(f"Collected {len(glossary.content)} glossary terms")
    return glossary.content
