import pytest

from rrg_glossary.normalize import normalize_string


def test_empty_becomes_line_break():
    assert normalize_string('') == '\n'


def test_printable_ascii_is_only_trimmed():
    assert normalize_string('  A power a character may use.  ') == 'A power a character may use.'
    assert normalize_string('~!@#$%^&*()_+{}|:"<>?') == '~!@#$%^&*()_+{}|:"<>?'


def test_whitespace_only_is_empty():
    assert normalize_string('   ') == ''


def test_typographic_characters_are_replaced():
    assert normalize_string('“Quoted”') == '"Quoted"'
    assert normalize_string('don’t') == "don't"
    assert normalize_string('one–two—three') == 'one-two-three'
    assert normalize_string('© 2020') == '© 2020'
    assert normalize_string('90º') == '90º'


def test_no_break_space_is_removed():
    assert normalize_string('a\u00a0b') == 'ab'


def test_bullets():
    assert normalize_string('•') == '* '
    assert normalize_string('»') == '  * '


def test_icon_glyphs_are_dropped():
    assert normalize_string('\ue000Surge') == 'Surge'
    assert normalize_string('Hit \U0001f5e1') == 'Hit '


def test_unknown_characters_are_dropped(caplog):
    with caplog.at_level('DEBUG'):
        assert normalize_string('café') == 'caf'
    assert '233' in caplog.text


@pytest.mark.parametrize('s', [
    'A power a character may use.',
    '“Quoted” text — with dashes',
    'Copyright © 2020',
    '\ue000icon',
    'a\u00a0b',
    'café au lait',
])
def test_idempotent(s):
    once = normalize_string(s)
    assert normalize_string(once) == once
