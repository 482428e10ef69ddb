import fitz
import pytest

from rrg_glossary.classify import TextFragment
from rrg_glossary.config import StyleConfig

BANNER = 'g_d0_f1'
TITLE = 'g_d0_f2'
BODY = 'g_d0_f3'


def banner(text):
    return TextFragment(text=text, font=BANNER, height=30)


def title(text, height=20):
    return TextFragment(text=text, font=TITLE, height=height)


def body(text):
    return TextFragment(text=text, font=BODY, height=10)


@pytest.fixture
def style():
    return StyleConfig(banner_font=BANNER, title_font=TITLE, title_min_height=18, region_start='GLOSSARY')


# Base-14 fonts report predictable span font names.
PDF_STYLE = StyleConfig(banner_font='Helvetica-Bold', title_font='Helvetica', title_min_height=18, region_start='GLOSSARY')


@pytest.fixture
def pdf_style():
    return PDF_STYLE


@pytest.fixture
def rulebook_pdf(tmp_path):
    """A three page stand-in for the rules reference."""
    doc = fitz.open()

    page = doc.new_page()
    page.insert_text((72, 72), "INTRODUCTION", fontname="hebo", fontsize=28)
    page.insert_text((72, 120), "BEFORE", fontname="helv", fontsize=20)
    page.insert_text((72, 150), "Rules text that is not part of the glossary.", fontname="tiro", fontsize=11)

    page = doc.new_page()
    page.insert_text((72, 72), "GLOSSARY", fontname="hebo", fontsize=28)
    page.insert_text((72, 120), "ABILITIES", fontname="helv", fontsize=20)
    page.insert_text((72, 150), "A power a character may use.", fontname="tiro", fontsize=11)
    page.insert_text((72, 190), "ACTION", fontname="helv", fontsize=20)
    page.insert_text((72, 220), "A discrete task taken in a turn.", fontname="tiro", fontsize=11)

    page = doc.new_page()
    page.insert_text((72, 72), "Continued on the next page.", fontname="tiro", fontsize=11)
    page.insert_text((72, 120), "ERRATA", fontname="hebo", fontsize=28)
    page.insert_text((72, 160), "AFTER", fontname="helv", fontsize=20)
    page.insert_text((72, 190), "Errata text.", fontname="tiro", fontsize=11)

    path = tmp_path / "rrg.pdf"
    doc.save(str(path))
    doc.close()
    return path
