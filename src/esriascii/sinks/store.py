"""Relational Store Sink.

The store sink persists one header row per run and one data row per cell
referencing it. The storage itself sits behind `GridRepository`, so the sink
knows nothing about connections or SQL.
"""

import logging
import sqlite3
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional

from esriascii.models import Cell, Header
from esriascii.sinks.base import OutputSink

logger = logging.getLogger(__name__)


class GridRepository(ABC):
    """Persistence operations the store sink needs."""

    @abstractmethod
    def insert_header(self, header: Header) -> int:
        """Persist the header and return its identifier."""
        pass

    @abstractmethod
    def insert_cell(self, header_id: int, cell: Cell) -> None:
        pass

    @abstractmethod
    def commit(self) -> None:
        pass

    @abstractmethod
    def close(self) -> None:
        pass


class SqliteGridRepository(GridRepository):
    """GridRepository backed by a SQLite database file."""

    def __init__(self, db_path: str):
        self.db_path = db_path
        self._conn: Optional[sqlite3.Connection] = None

    @property
    def conn(self) -> sqlite3.Connection:
        if self._conn is None:
            if self.db_path != ':memory:':
                Path(self.db_path).parent.mkdir(parents=True, exist_ok=True)
            conn = sqlite3.connect(self.db_path, timeout=5.0)
            try:
                conn.execute("PRAGMA foreign_keys = ON")
                ensure_schema(conn)
            except BaseException:
                conn.close()
                raise
            self._conn = conn
        return self._conn

    def insert_header(self, header: Header) -> int:
        cursor = self.conn.execute(
            """
            INSERT INTO esri_header(name, ncols, nrows, xllcorner, yllcorner, cellsize, nodata_value)
            VALUES (?, ?, ?, ?, ?, ?, ?)
            """,
            (header.name, header.ncols, header.nrows, header.xllcorner,
             header.yllcorner, header.cellsize, header.nodata_value),
        )
        return cursor.lastrowid

    def insert_cell(self, header_id: int, cell: Cell) -> None:
        self.conn.execute(
            "INSERT INTO esri_data(lat, lon, value, header_id) VALUES (?, ?, ?, ?)",
            (cell.latitude, cell.longitude, cell.value, header_id),
        )

    def commit(self) -> None:
        if self._conn is not None:
            self._conn.commit()

    def close(self) -> None:
        if self._conn is not None:
            self._conn.close()
            self._conn = None


def ensure_schema(conn: sqlite3.Connection) -> None:
    conn.execute(
        """
        CREATE TABLE IF NOT EXISTS esri_header (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            name TEXT NOT NULL,
            ncols INTEGER NOT NULL,
            nrows INTEGER NOT NULL,
            xllcorner REAL NOT NULL,
            yllcorner REAL NOT NULL,
            cellsize REAL NOT NULL,
            nodata_value REAL NOT NULL
        )
        """
    )
    conn.execute(
        """
        CREATE TABLE IF NOT EXISTS esri_data (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            lat REAL NOT NULL,
            lon REAL NOT NULL,
            value REAL NOT NULL,
            header_id INTEGER NOT NULL REFERENCES esri_header(id)
        )
        """
    )
    conn.commit()


class StoreSink(OutputSink):
    name = 'store'

    def __init__(self, repository: GridRepository):
        self.repository = repository
        self.header_id: Optional[int] = None

    def open(self, header: Header, has_nodata_value: bool) -> None:
        try:
            self.header_id = self.repository.insert_header(header)
        except BaseException:
            # A sink that fails to open is never closed by the run.
            self.repository.close()
            raise
        logger.debug(f"Stored header for {header.name} as id {self.header_id}")

    def write(self, cell: Cell) -> None:
        self.repository.insert_cell(self.header_id, cell)

    def close(self) -> None:
        try:
            self.repository.commit()
        finally:
            self.repository.close()
