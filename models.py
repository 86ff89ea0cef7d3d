import json
import logging
from datetime import datetime

from database import COLLECTION_NAMES, get_connection

logger = logging.getLogger(__name__)


def _check_collection_name(name):
    if name not in COLLECTION_NAMES:
        raise ValueError(f"Unknown collection: {name!r}")


# Collection store operations

def get_collection(name):
    _check_collection_name(name)
    conn = get_connection()
    cursor = conn.cursor()
    cursor.execute("SELECT data FROM Collection WHERE name = ?", (name,))
    row = cursor.fetchone()
    conn.close()
    if row is None:
        return []
    return json.loads(row["data"])


def save_collection(name, records):
    _check_collection_name(name)
    if not isinstance(records, list):
        raise TypeError(f"Collection {name!r} must be a list of records")

    conn = get_connection()
    cursor = conn.cursor()
    cursor.execute(
        """
        INSERT INTO Collection (name, data, updated_at)
        VALUES (?, ?, ?)
        ON CONFLICT(name) DO UPDATE SET
            data = excluded.data,
            updated_at = excluded.updated_at
        """,
        (name, json.dumps(records), datetime.now().isoformat(timespec="seconds")),
    )
    conn.commit()
    conn.close()
    logger.info("Saved %d records to %s", len(records), name)


def load_snapshot():
    """Read every collection fresh, so callers get their own copies."""
    return {name: get_collection(name) for name in COLLECTION_NAMES}
