"""
Mapping from grid positions to geographic coordinates.

Row 0 is the northern edge of the grid and column 0 its western edge. Each
value is the lower-left corner of the cell.
"""

from esriascii.models import Header


def latitude(header: Header, row: int) -> float:
    return header.yllcorner + header.nrows * header.cellsize - (row + 1) * header.cellsize


def longitude(header: Header, col: int) -> float:
    return header.xllcorner + col * header.cellsize


def coordinates(header: Header, row: int, col: int) -> tuple[float, float]:
    """Returns the (latitude, longitude) pair for a cell."""
    return latitude(header, row), longitude(header, col)
