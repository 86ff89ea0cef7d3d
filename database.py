import os
import sqlite3
from pathlib import Path

DEFAULT_DB_PATH = "medlog.db" if os.name == "nt" else "/tmp/medlog.db"
DB_PATH = os.environ.get("DB_PATH", DEFAULT_DB_PATH)

COLLECTION_NAMES = ("patients", "medications", "logs")


def get_connection():
    db_file = Path(DB_PATH)
    db_file.parent.mkdir(parents=True, exist_ok=True)
    conn = sqlite3.connect(str(db_file))
    conn.row_factory = sqlite3.Row
    return conn


def create_tables(conn):
    cursor = conn.cursor()

    # One row per collection, the records stored as a JSON array.
    cursor.execute(
        """
        CREATE TABLE IF NOT EXISTS Collection (
            name TEXT PRIMARY KEY,
            data TEXT NOT NULL,
            updated_at TEXT NOT NULL
        )
        """
    )
    conn.commit()


def seed_collections(conn):
    cursor = conn.cursor()
    cursor.executemany(
        """
        INSERT OR IGNORE INTO Collection (name, data, updated_at)
        VALUES (?, '[]', datetime('now'))
        """,
        [(name,) for name in COLLECTION_NAMES],
    )
    conn.commit()


def init_db():
    conn = get_connection()
    create_tables(conn)
    seed_collections(conn)
    conn.close()
