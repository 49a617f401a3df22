"""
Database Manager for PocketCalc
Handles the SQLite key-value store that holds the saved calculator state
"""
import sqlite3
from datetime import datetime

import config
from logging_config import get_logger

logger = get_logger(__name__)


class Database:
    def __init__(self, db_path=config.DB_PATH):
        self.db_path = db_path
        self.init_database()

    def get_connection(self):
        """Create and return a database connection"""
        return sqlite3.connect(self.db_path)

    def init_database(self):
        """Initialize database tables"""
        conn = self.get_connection()
        cursor = conn.cursor()

        # Key-value settings table
        cursor.execute('''
            CREATE TABLE IF NOT EXISTS settings (
                key TEXT PRIMARY KEY,
                value TEXT NOT NULL,
                updated_at TEXT NOT NULL
            )
        ''')

        conn.commit()
        conn.close()
        logger.debug("Database ready at %s", self.db_path)

    def get_value(self, key):
        """Return the stored text for a key, or None"""
        conn = self.get_connection()
        cursor = conn.cursor()
        cursor.execute('SELECT value FROM settings WHERE key = ?', (key,))
        row = cursor.fetchone()
        conn.close()
        return row[0] if row else None

    def set_value(self, key, value):
        """Insert or replace the text stored under a key"""
        updated_at = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
        conn = self.get_connection()
        cursor = conn.cursor()
        cursor.execute('''
            INSERT OR REPLACE INTO settings (key, value, updated_at)
            VALUES (?, ?, ?)
        ''', (key, value, updated_at))
        conn.commit()
        conn.close()

    def delete_value(self, key):
        """Remove a key; returns True if something was deleted"""
        conn = self.get_connection()
        cursor = conn.cursor()
        cursor.execute('DELETE FROM settings WHERE key = ?', (key,))
        deleted = cursor.rowcount > 0
        conn.commit()
        conn.close()
        return deleted
