"""PostgreSQL storage implementation."""

import os

import psycopg2
from psycopg2.extras import RealDictCursor

from core.interfaces import Storage
from server.file_storage import DEFAULT_CONFIG_FILE, read_config_file

SCHEMA = """
    CREATE TABLE IF NOT EXISTS kv_store (
        key VARCHAR(255) PRIMARY KEY,
        value TEXT NOT NULL,
        updated_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
    )
"""

UPSERT = """
    INSERT INTO kv_store (key, value, updated_at)
    VALUES (%s, %s, CURRENT_TIMESTAMP)
    ON CONFLICT (key)
    DO UPDATE SET value = EXCLUDED.value, updated_at = CURRENT_TIMESTAMP
"""


class PostgresStorage(Storage):
    """Key-value store in a single kv_store table."""

    def __init__(self, config_file: str = None, db_url: str = None):
        self.config_file = config_file or DEFAULT_CONFIG_FILE
        self.db_url = db_url or os.environ.get('DATABASE_URL', 'postgresql://localhost:5432/tango')
        self._conn = None

    @property
    def conn(self):
        """Open the connection on first use, creating the table if needed."""
        if self._conn is None or self._conn.closed:
            self._conn = psycopg2.connect(self.db_url)
            with self._conn.cursor() as cur:
                cur.execute(SCHEMA)
            self._conn.commit()
        return self._conn

    def close(self):
        if self._conn is not None and not self._conn.closed:
            self._conn.close()

    def load_config(self) -> dict:
        return read_config_file(self.config_file)

    def _write(self, action: str, key: str, sql: str, params: tuple) -> None:
        """Run one statement and commit; roll back and re-raise on failure."""
        try:
            with self.conn.cursor() as cur:
                cur.execute(sql, params)
            self.conn.commit()
        except psycopg2.Error as e:
            print(f"Error {action} {key}: {e}")
            self.conn.rollback()
            raise

    def get_item(self, key: str) -> str | None:
        try:
            with self.conn.cursor(cursor_factory=RealDictCursor) as cur:
                cur.execute("SELECT value FROM kv_store WHERE key = %s", (key,))
                row = cur.fetchone()
        except psycopg2.Error as e:
            print(f"Error reading {key}: {e}")
            return None
        return row['value'] if row else None

    def set_item(self, key: str, value: str) -> None:
        self._write('saving', key, UPSERT, (key, value))

    def remove_item(self, key: str) -> None:
        self._write('deleting', key, "DELETE FROM kv_store WHERE key = %s", (key,))
