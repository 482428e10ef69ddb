from flask import Flask, Response, request, jsonify
import os

from rrg_glossary.config import DB_FILE
from rrg_glossary.db import get_db as open_db
from rrg_glossary.render import to_markdown

app = Flask(__name__)
app.config['GLOSSARY_DB'] = DB_FILE


def get_db():
    return open_db(app.config['GLOSSARY_DB'])


@app.route('/search')
def search():
    query = request.args.get('q', '').strip()
    # Pagination params
    try:
        limit = max(1, min(int(request.args.get('limit', 40)), 200))
    except ValueError:
        limit = 40
    try:
        offset = max(0, int(request.args.get('offset', 0)))
    except ValueError:
        offset = 0
    if not query:
        return jsonify({'results': [], 'count': 0, 'total_count': 0, 'offset': offset, 'limit': limit, 'query': query})
    match = fts_prefix(query)
    conn = get_db()
    c = conn.cursor()
    c.execute('SELECT COUNT(*) AS cnt FROM terms_fts WHERE terms_fts MATCH ?', (match,))
    total = c.fetchone()['cnt']
    # Page of results (FTS5 rank ordering)
    c.execute('''
        SELECT term, definition FROM terms_fts
        WHERE terms_fts MATCH ?
        ORDER BY rank
        LIMIT ? OFFSET ?;
    ''', (match, limit, offset))
    results = [(row['term'], row['definition']) for row in c.fetchall()]
    conn.close()
    return jsonify({'results': results, 'count': len(results), 'total_count': total, 'offset': offset, 'limit': limit, 'query': query})


@app.route('/suggest')
def suggest():
    query = request.args.get('q', '').strip()
    if not query:
        return jsonify({'suggestions': []})
    conn = get_db()
    c = conn.cursor()
    # Prefix match on the term column only (autocomplete)
    c.execute('''
        SELECT term FROM terms_fts
        WHERE terms_fts MATCH ?
        ORDER BY rank
        LIMIT 8;
    ''', ('term:' + fts_prefix(query),))
    suggestions = [row['term'] for row in c.fetchall()]
    conn.close()
    return jsonify({'suggestions': suggestions})


@app.route('/entry')
def entry_by_term():
    term = request.args.get('term', '').strip()
    if not term:
        return jsonify({'ok': False, 'error': 'missing term'}), 400
    conn = get_db()
    c = conn.cursor()
    # Exact match (terms are upper case in the rulebook), then prefix
    c.execute('SELECT id, term, definition, position FROM terms WHERE term = ? COLLATE NOCASE LIMIT 1;', (term,))
    row = c.fetchone()
    if not row:
        c.execute("SELECT id, term, definition, position FROM terms WHERE term LIKE ? ESCAPE '\\' ORDER BY position LIMIT 1;", (like_prefix(term),))
        row = c.fetchone()
        if not row:
            conn.close()
            return jsonify({'ok': False, 'error': 'not found'}), 404
    result = {
        'id': row['id'],
        'term': row['term'],
        'definition': row['definition'],
        'position': row['position'],
    }
    conn.close()
    return jsonify({'ok': True, 'entry': result})


@app.route('/index')
def index_letters():
    conn = get_db()
    c = conn.cursor()
    c.execute("SELECT DISTINCT UPPER(SUBSTR(term, 1, 1)) AS letter FROM terms ORDER BY letter ASC;")
    letters = [row['letter'] for row in c.fetchall()]
    conn.close()
    return jsonify({'letters': letters})


@app.route('/glossary.md')
def glossary_markdown():
    conn = get_db()
    c = conn.cursor()
    c.execute('SELECT term, definition FROM terms ORDER BY position ASC;')
    # Stored definitions are already joined; render them as one-line entries
    glossary = {row['term']: [row['definition']] for row in c.fetchall()}
    conn.close()
    return Response(to_markdown(glossary), mimetype='text/markdown')


def like_prefix(query: str) -> str:
    # % and _ in user input match literally
    escaped = query.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
    return escaped + "%"


def fts_prefix(query: str) -> str:
    # Quote so punctuation in user input can't break the FTS5 query syntax
    return '"' + query.replace('"', '""') + '"*'


if __name__ == '__main__':
    port = int(os.environ.get('PORT', '5002'))
    app.run(debug=True, host='0.0.0.0', port=port)
