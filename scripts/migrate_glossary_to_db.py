import sys

from rrg_glossary.config import DB_FILE
from rrg_glossary.db import migrate_json


if __name__ == '__main__':
    if len(sys.argv) < 2:
        print('Usage: python scripts/migrate_glossary_to_db.py data/glossary.json')
        sys.exit(1)
    count = migrate_json(sys.argv[1], DB_FILE)
    print(f"Migrated {count} terms into {DB_FILE} and FTS5 full-text index")
