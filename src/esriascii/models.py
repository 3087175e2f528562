"""
Data models for the esriascii package.

This module contains the dataclasses passed between the readers, the
output sinks and the run orchestration.
"""

import dataclasses
import datetime as dt
from enum import Enum
from typing import Optional

from returns.maybe import Maybe, Nothing

from esriascii import constants


@dataclasses.dataclass(frozen=True)
class Header:
    """
    The validated header block of an ESRI ASCII raster file.

    `name` is not part of the file; it identifies the region when the
    header is persisted.
    """

    name: str
    ncols: int
    nrows: int
    xllcorner: float
    yllcorner: float
    cellsize: float
    nodata_value: float = constants.DEFAULT_NODATA_VALUE

    def parameters(self) -> dict:
        """The six file parameters, in file order."""
        return {
            constants.NCOLS: self.ncols,
            constants.NROWS: self.nrows,
            constants.XLLCORNER: self.xllcorner,
            constants.YLLCORNER: self.yllcorner,
            constants.CELLSIZE: self.cellsize,
            constants.NODATA_VALUE: self.nodata_value,
        }

    @property
    def cell_count(self) -> int:
        return self.ncols * self.nrows


@dataclasses.dataclass(frozen=True)
class Cell:
    """One grid sample tagged with the coordinates of its cell."""

    row: int
    col: int
    latitude: float
    longitude: float
    value: float


class RunState(Enum):
    """Where a run is in its lifecycle. FAILED is terminal."""

    INIT = "init"
    HEADER_PARSED = "header_parsed"
    STREAMING = "streaming"
    DONE = "done"
    FAILED = "failed"


@dataclasses.dataclass
class RunRecord:
    input_file: str
    state: RunState = RunState.INIT
    header: Maybe[Header] = dataclasses.field(default_factory=lambda: Nothing)
    has_nodata_value: bool = False
    cells_written: int = 0
    startDatetime: Maybe[dt.datetime] = dataclasses.field(default_factory=lambda: Nothing)
    endDatetime: Maybe[dt.datetime] = dataclasses.field(default_factory=lambda: Nothing)
    error: Optional[Exception] = None

    @property
    def successful(self) -> bool:
        return self.state is RunState.DONE
