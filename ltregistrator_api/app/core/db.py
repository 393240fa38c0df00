"""
SQLite database integration and simple migration system.

This module provides functions for obtaining a database connection
(``get_connection``) and applying migrations (``init_db``).  Every
function takes the database path explicitly; the services receive the
path from the application factory, which makes it easy to point tests
at a temporary file.

The migration mechanism stores applied migration versions in the
``migrations`` table and executes new migrations in order.
"""

import logging
import os
import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator

logger = logging.getLogger(__name__)


MIGRATIONS: list[tuple[int, str]] = [
    # Migration 1: initial schema
    (
        1,
        """
        CREATE TABLE IF NOT EXISTS projects (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            name TEXT NOT NULL UNIQUE
        );

        CREATE TABLE IF NOT EXISTS employees (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            first_name TEXT NOT NULL,
            second_name TEXT NOT NULL,
            mail TEXT NOT NULL UNIQUE,
            max_role TEXT NOT NULL DEFAULT 'Employee',
            created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
        );

        CREATE TABLE IF NOT EXISTS employee_projects (
            employee_id INTEGER NOT NULL,
            project_id INTEGER NOT NULL,
            PRIMARY KEY (employee_id, project_id),
            FOREIGN KEY(employee_id) REFERENCES employees(id) ON DELETE CASCADE,
            FOREIGN KEY(project_id) REFERENCES projects(id) ON DELETE CASCADE
        );

        CREATE TABLE IF NOT EXISTS leaves (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            employee_id INTEGER NOT NULL,
            type_leave TEXT NOT NULL,
            start_date TEXT NOT NULL,
            end_date TEXT NOT NULL,
            status TEXT NOT NULL DEFAULT 'Pending',
            created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
            updated_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
            FOREIGN KEY(employee_id) REFERENCES employees(id) ON DELETE CASCADE
        );
        """,
    ),
    # Migration 2: speed up per-employee leave listing
    (
        2,
        """
        CREATE INDEX IF NOT EXISTS idx_leaves_employee ON leaves(employee_id);
        """,
    ),
]


SQLITE_MAX_INTEGER = 2**63 - 1


def fits_integer_column(value: int) -> bool:
    """Whether ``value`` can be bound to an SQLite INTEGER parameter.

    Larger ids cannot name a stored row, and binding them raises
    ``OverflowError``.
    """
    return -SQLITE_MAX_INTEGER - 1 <= value <= SQLITE_MAX_INTEGER


def get_database_path(database_url: str) -> str:
    """Compute the path to the SQLite database file.

    Absolute paths and the special ``:memory:`` name are returned as
    is.  Relative paths are resolved against the project root (the
    directory containing the ``ltregistrator_api`` package).
    """
    if database_url == ":memory:" or os.path.isabs(database_url):
        return database_url
    base_dir = Path(__file__).resolve().parent.parent.parent.parent
    return str((base_dir / database_url).resolve())


def get_connection(database_path: str) -> sqlite3.Connection:
    """Create and return a new SQLite connection.

    Rows are returned as ``sqlite3.Row`` so columns can be accessed by
    name.  Foreign key enforcement is switched on for the lifetime of
    the connection; SQLite keeps it off by default.
    """
    conn = sqlite3.connect(database_path)
    conn.row_factory = sqlite3.Row
    conn.execute("PRAGMA foreign_keys = ON")
    return conn


@contextmanager
def get_cursor(database_path: str) -> Iterator[sqlite3.Cursor]:
    """Yield a cursor inside a transaction.

    Commits when the block exits normally, rolls back when it raises,
    and always closes the connection.
    """
    conn = get_connection(database_path)
    try:
        yield conn.cursor()
        conn.commit()
    except Exception:
        conn.rollback()
        raise
    finally:
        conn.close()


def init_db(database_path: str) -> None:
    """Initialise the database and apply pending migrations.

    Creates the ``migrations`` table if it does not exist, checks the
    current schema version and applies any newer entries of
    ``MIGRATIONS`` in order.  Append new migrations with an incremented
    version number; never edit an applied one.
    """
    conn = get_connection(database_path)
    try:
        cursor = conn.cursor()
        cursor.execute(
            """
            CREATE TABLE IF NOT EXISTS migrations (
                version INTEGER PRIMARY KEY,
                applied_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
            )
            """
        )
        row = cursor.execute("SELECT MAX(version) AS version FROM migrations").fetchone()
        current = row["version"] or 0
        for version, sql in MIGRATIONS:
            if version <= current:
                continue
            cursor.executescript(sql)
            cursor.execute("INSERT INTO migrations (version) VALUES (?)", (version,))
            conn.commit()
            logger.info("Applied migration %s", version)
    finally:
        conn.close()
