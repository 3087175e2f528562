"""ESRI ASCII Grid Reader.

This module streams the data block of an ESRI ASCII raster file as Cells,
one row at a time, in row-major order.
"""

import logging
import threading
from typing import Iterator, List, Optional

from esriascii import coordinates
from esriascii.errors import MalformedValue, RowWidthMismatch, RunCancelled, TruncatedGrid
from esriascii.models import Cell, Header
from esriascii.readers.line_source import LineSource

logger = logging.getLogger(__name__)


def parse_row(line: str, header: Header, row: int, line_number: Optional[int] = None) -> List[float]:
    """Parse one data line into exactly `header.ncols` values.

    Raises:
        RowWidthMismatch: If the line does not hold ncols values
        MalformedValue: If a token is not numeric
    """
    tokens = line.split()
    if len(tokens) != header.ncols:
        raise RowWidthMismatch(header.ncols, len(tokens), row)

    values = []
    for token in tokens:
        try:
            values.append(float(token))
        except ValueError:
            raise MalformedValue('value', token, line_number, row=row) from None
    return values


def cells(source: LineSource, header: Header,
          cancel: Optional[threading.Event] = None) -> Iterator[Cell]:
    """Yield every cell of the data block.

    The source must be positioned at the first data row, which is where
    `read_header` leaves it. Lines after the last declared row are ignored.

    Args:
        source: Lines of the file following the header
        header: The validated header of the same file
        cancel: Checked before each row; when set the stream stops

    Yields:
        nrows * ncols Cells, top row first, west to east within a row

    Raises:
        TruncatedGrid: If the input ends before nrows rows
        RowWidthMismatch: If a row does not hold ncols values
        MalformedValue: If a value is not numeric
        RunCancelled: If `cancel` is set between rows
    """
    for row in range(header.nrows):
        if cancel is not None and cancel.is_set():
            raise RunCancelled(row)

        line = source.next_line()
        if line is None:
            raise TruncatedGrid(header.nrows, row)

        values = parse_row(line, header, row, source.line_number)
        lat = coordinates.latitude(header, row)
        for col, value in enumerate(values):
            yield Cell(row, col, lat, coordinates.longitude(header, col), value)

    logger.debug(f"Read {header.nrows} rows of {header.ncols} values")
