import logging

# Characters outside printable ASCII that the rulebook actually uses.
REPLACE_UNICODE_CHARACTERS = {
    160: '',       # no-break space
    169: '©',
    186: 'º',
    187: '  * ',   # nested bullet glyph
    8211: '-',     # –
    8212: '-',     # —
    8217: "'",     # ’
    8220: '"',     # “
    8221: '"',     # ”
    8226: '* ',    # •
}

# Glyphs from the decorative icon fonts live up here.
PRIVATE_GLYPH_MIN = 50000


def is_standard_character(code: int) -> bool:
    return 32 <= code <= 126


def normalize_string(s: str) -> str:
    """Sanitize one run of extracted text.

    An empty run becomes "\\n" so it survives as a paragraph break. Everything
    else is stripped and filtered character by character: printable ASCII is
    kept, icon glyphs are dropped, known typographic characters are replaced
    and anything else is dropped.
    """
    if not s:
        return '\n'
    s = s.strip()
    out = []
    for ch in s:
        code = ord(ch)
        if is_standard_character(code):
            out.append(ch)
        elif code >= PRIVATE_GLYPH_MIN:
            continue
        else:
            replace = REPLACE_UNICODE_CHARACTERS.get(code)
            if replace is not None:
                out.append(replace)
            else:
                logging.debug(f"Unknown character <{code}> {ch!r} in {s!r}")
    return ''.join(out)
