import json
from typing import Dict, List

BULLETS = ('* ', '  * ')


def massage(glossary: Dict[str, List[str]]) -> Dict[str, str]:
    """Join each term's lines into one string; bullets start a new line."""
    out = {}
    for term, lines in glossary.items():
        parts = []
        for line in lines or []:
            if line in BULLETS:
                parts.append(f"\n{line}")
            else:
                parts.append(f"{line} ")
        out[term] = ''.join(parts)
    return out


def to_markdown(glossary: Dict[str, List[str]]) -> str:
    massaged = massage(glossary)
    markdown = ['# Glossary\n']
    for term, text in massaged.items():
        markdown.append(f"\n## {term}\n\n")
        markdown.append(text)
        markdown.append('\n')
    return ''.join(markdown)


def to_json(glossary: Dict[str, List[str]], source: str = '') -> str:
    massaged = massage(glossary)
    return json.dumps({
        'source': source,
        'count': len(massaged),
        'entries': massaged,
    }, ensure_ascii=False, indent=2)
