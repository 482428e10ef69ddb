import json
import sqlite3
from typing import Any, Dict

from rrg_glossary.config import DB_FILE

SCHEMA_SQL = """
CREATE TABLE IF NOT EXISTS terms (
  id INTEGER PRIMARY KEY AUTOINCREMENT,
  term TEXT NOT NULL,
  definition TEXT NOT NULL,
  position INTEGER NOT NULL     -- order of appearance in the rulebook
);
CREATE INDEX IF NOT EXISTS idx_terms_term ON terms(term);

-- FTS for fast search
CREATE VIRTUAL TABLE IF NOT EXISTS terms_fts USING fts5(
  term, definition, content='terms', content_rowid='id'
);
"""


def get_db(db_path: str = DB_FILE) -> sqlite3.Connection:
    conn = sqlite3.connect(db_path)
    conn.row_factory = sqlite3.Row
    return conn


def create_schema(conn: sqlite3.Connection):
    c = conn.cursor()
    for stmt in SCHEMA_SQL.strip().split(';'):
        s = stmt.strip()
        if s:
            c.execute(s + ';')
    conn.commit()


def load_json(path: str) -> Dict[str, Any]:
    with open(path, 'r', encoding='utf-8') as f:
        return json.load(f)


def migrate(entries: Dict[str, str], db_path: str = DB_FILE) -> int:
    """Replace the database contents with `entries` (term -> joined definition)."""
    conn = get_db(db_path)
    try:
        create_schema(conn)
        c = conn.cursor()
        # Clear existing data
        c.execute('DELETE FROM terms;')
        c.execute("INSERT INTO terms_fts(terms_fts) VALUES('delete-all');")
        for position, (term, definition) in enumerate(entries.items()):
            c.execute('INSERT INTO terms(term, definition, position) VALUES(?, ?, ?)',
                      (term, definition.strip(), position))
        # Populate FTS
        c.execute('INSERT INTO terms_fts(rowid, term, definition) SELECT id, term, definition FROM terms;')
        conn.commit()
    finally:
        conn.close()
    return len(entries)


def migrate_json(json_path: str, db_path: str = DB_FILE) -> int:
    data = load_json(json_path)
    return migrate(data.get('entries', {}), db_path)
