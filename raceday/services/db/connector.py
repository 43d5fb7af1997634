"""
Database connector for the embedded SQLite store.

This module provides functions to open the catalog database and execute
compiled, parameterized queries against it.
"""

import threading
from typing import Any

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine

from ...errors.exceptions import DatabaseError

_engines: dict[str, Engine] = {}
_engines_lock = threading.Lock()


def get_engine(database_path: str) -> Engine:
    """
    Get or create the engine for a SQLite database file.
    Engines are kept per path so each file has a single pool.

    Args:
        database_path: Path of the SQLite database file

    Returns:
        A SQLAlchemy engine bound to the database
    """
    with _engines_lock:
        engine = _engines.get(database_path)
        if engine is None:
            engine = create_engine(
                f"sqlite:///{database_path}",
                connect_args={"check_same_thread": False},
            )
            _engines[database_path] = engine
        return engine


def close_connections():
    """
    Close all open connections.
    This should be called when shutting down the application.
    """
    with _engines_lock:
        while _engines:
            _, engine = _engines.popitem()
            engine.dispose()


def query(
    sql_query: str, database_path: str, params: list[Any] | tuple[Any, ...] | None = None
) -> list[dict]:
    """
    Execute a query against the catalog database.

    Args:
        sql_query: SQL query to execute, using ``?`` placeholders
        database_path: Path of the SQLite database file
        params: Positional values bound to the placeholders

    Returns:
        Query results as a list of dictionaries

    Raises:
        DatabaseError: If the query fails
    """
    engine = get_engine(database_path)

    try:
        with engine.connect() as conn:
            result = conn.exec_driver_sql(sql_query, tuple(params or ()))
            return [dict(row._mapping) for row in result]
    except Exception as e:
        raise DatabaseError(message=f"Query failed: {str(e)}") from e
