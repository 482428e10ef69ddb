import json

from rrg_glossary.render import massage, to_json, to_markdown

GLOSSARY = {
    'ABILITIES': ['A power a character may use.'],
    'ACTION': ['A discrete task taken in a turn.', 'Actions include:', '* ', 'Attack', '  * ', 'Melee'],
}


def test_massage():
    assert massage(GLOSSARY) == {
        'ABILITIES': 'A power a character may use. ',
        'ACTION': 'A discrete task taken in a turn. Actions include: \n* Attack \n  * Melee ',
    }


def test_markdown():
    md = to_markdown({'ABILITIES': ['A power a character may use.']})
    assert md == '# Glossary\n\n## ABILITIES\n\nA power a character may use. \n'


def test_markdown_empty():
    assert to_markdown({}) == '# Glossary\n'


def test_json():
    data = json.loads(to_json(GLOSSARY, source='rrg.pdf'))
    assert data['source'] == 'rrg.pdf'
    assert data['count'] == 2
    assert list(data['entries']) == ['ABILITIES', 'ACTION']
