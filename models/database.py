import sqlite3

from flask import current_app, g


def get_db():
    if "db" not in g:
        g.db = sqlite3.connect(current_app.config["DATABASE"])
        g.db.row_factory = sqlite3.Row
        g.db.execute("PRAGMA foreign_keys = ON")
    return g.db


def close_db(e=None):
    db = g.pop("db", None)
    if db is not None:
        db.close()


def query_db(query, args=(), one=False):
    cur = get_db().execute(query, args)
    rv = cur.fetchall()
    cur.close()
    return (rv[0] if rv else None) if one else rv


def execute_db(query, args=()):
    """Run a write statement, commit, and return the new row id."""
    db = get_db()
    cursor = db.execute(query, args)
    db.commit()
    return cursor.lastrowid


def like_pattern(term):
    """Wrap a search term for ``LIKE ? ESCAPE '\\'`` with its wildcards escaped."""
    escaped = term.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
    return f"%{escaped}%"


def paginate(query, count_query, args=(), page=1, per_page=10):
    """Return one page of rows for ``query`` together with the total count."""
    page = max(page, 1)
    offset = (page - 1) * per_page
    rows = query_db(f"{query} LIMIT ? OFFSET ?", list(args) + [per_page, offset])
    count_row = query_db(count_query, args, one=True)
    total = count_row["cnt"] if count_row else 0
    return rows, total


def init_app(app):
    app.teardown_appcontext(close_db)
