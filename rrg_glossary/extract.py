import os
from collections import Counter
from typing import Dict, Iterator, List, Tuple

import fitz  # PyMuPDF

from rrg_glossary.classify import TextFragment, classify
from rrg_glossary.config import DEFAULT_STYLE, StyleConfig


def page_fragments(page: fitz.Page, page_num: int) -> List[TextFragment]:
    """Return the text spans of one page, in the order PyMuPDF reads them."""
    text_dict = page.get_text("dict")
    fragments: List[TextFragment] = []
    for b in text_dict.get('blocks', []):
        # type 1 is an image block
        if b.get('type', 0) != 0:
            continue
        for l in b.get('lines', []):
            for s in l.get('spans', []):
                fragments.append(TextFragment(
                    text=s.get('text', ''),
                    font=s.get('font', ''),
                    height=float(s.get('size', 0)),
                    page=page_num,
                    bbox=tuple(s.get('bbox', (0, 0, 0, 0))),
                ))
    return fragments


def iter_fragments(pdf_path: str) -> Iterator[TextFragment]:
    """Yield every span of the document, page by page.

    Pages are read lazily. A page PyMuPDF cannot read aborts the whole run:
    skipping it would silently merge glossary entries across the gap.
    """
    with fitz.open(pdf_path) as doc:
        for i in range(doc.page_count):
            page = doc.load_page(i)
            yield from page_fragments(page, i + 1)


def font_usage(pdf_path: str) -> List[Tuple[str, float, int, str]]:
    """Tally (font, size) pairs across the document, most used first.

    Returns (font, size, count, sample text) rows; handy for finding the
    banner and title fonts of a new edition.
    """
    counts: Counter = Counter()
    samples: Dict[Tuple[str, float], str] = {}
    for f in iter_fragments(pdf_path):
        key = (f.font, round(f.height, 1))
        counts[key] += 1
        if key not in samples and f.text.strip():
            samples[key] = f.text.strip()[:40]
    return [(font, size, n, samples.get((font, size), '')) for (font, size), n in counts.most_common()]


def render_debug_overlays(pdf_path: str, out_dir: str, style: StyleConfig = DEFAULT_STYLE) -> List[str]:
    """Draw boxes around banners (blue) and entry titles (green), one PNG per page."""
    from PIL import Image, ImageDraw

    os.makedirs(out_dir, exist_ok=True)
    written: List[str] = []
    scale = 2
    with fitz.open(pdf_path) as doc:
        for i in range(doc.page_count):
            page = doc.load_page(i)
            marked = []
            for f in page_fragments(page, i + 1):
                text = classify(f, style)
                if text.is_region_banner:
                    marked.append(((0, 90, 255), f.bbox))
                elif text.is_entry_title:
                    marked.append(((0, 200, 0), f.bbox))
            if not marked:
                continue
            pix = page.get_pixmap(matrix=fitz.Matrix(scale, scale))
            img = Image.frombytes("RGB", [pix.width, pix.height], pix.samples)
            draw = ImageDraw.Draw(img)
            for color, bb in marked:
                x0, y0, x1, y1 = [v * scale for v in bb]
                draw.rectangle([x0, y0, x1, y1], outline=color, width=2)
            out_path = os.path.join(out_dir, f"page_{i + 1:03d}.png")
            img.save(out_path)
            written.append(out_path)
    return written
