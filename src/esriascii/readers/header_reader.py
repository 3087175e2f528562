"""ESRI ASCII Header Reader.

This module reads and validates the header block of an ESRI ASCII raster
file: five mandatory parameters in a fixed order, followed by an optional
nodata_value parameter.
"""

import logging
import math
from typing import Optional, Tuple

from funcy import first

from esriascii import constants
from esriascii.errors import MalformedValue, MissingParameter, TruncatedHeader
from esriascii.models import Header
from esriascii.readers.line_source import LineSource

logger = logging.getLogger(__name__)


def parse_header_line(line: str) -> Tuple[Optional[str], list]:
    """Split a header line into its lower-cased key and the remaining tokens.

    Args:
        line: One line of the header block

    Returns:
        Tuple of (key, value tokens); key is None for a blank line
    """
    tokens = line.split()
    key = first(tokens)
    return (key.lower() if key else None), tokens[1:]


def parse_value(name: str, tokens: list, line_number: int) -> float:
    """Parse the single value token of a header line.

    Raises:
        MalformedValue: If there is not exactly one numeric token
    """
    if len(tokens) != 1:
        raise MalformedValue(name, ' '.join(tokens), line_number)
    try:
        return float(tokens[0])
    except ValueError:
        raise MalformedValue(name, tokens[0], line_number) from None


def _dimension(name: str, value: float, line_number: int) -> int:
    if not value.is_integer() or value < 1:
        raise MalformedValue(name, str(value), line_number)
    return int(value)


def read_header(source: LineSource, name: str = constants.DEFAULT_REGION_NAME) -> Tuple[Header, bool]:
    """Read the header block from the start of an ESRI ASCII raster file.

    Consumes five lines, plus a sixth when it holds nodata_value. When the
    sixth line is anything else it is pushed back onto the source so it is
    read again as the first data row.

    Args:
        source: Lines of the file, positioned at the first line
        name: Region name stored with the header

    Returns:
        Tuple of (Header, has_nodata_value)

    Raises:
        TruncatedHeader: If the input ends before the mandatory parameters
        MissingParameter: If a mandatory parameter is absent or out of order
        MalformedValue: If a parameter value is not a valid number
    """
    values = {}
    has_nodata_value = True

    for index, parameter in enumerate(constants.HEADER_PARAMETERS):
        line = source.next_line()
        if line is None:
            if parameter == constants.NODATA_VALUE:
                has_nodata_value = False
                break
            raise TruncatedHeader(constants.MANDATORY_HEADER_LINES, index)

        key, tokens = parse_header_line(line)
        if key == parameter:
            values[parameter] = parse_value(parameter, tokens, source.line_number)
        elif parameter == constants.NODATA_VALUE:
            has_nodata_value = False
            source.push_back(line)
        else:
            raise MissingParameter(parameter, key, source.line_number)

    ncols = _dimension(constants.NCOLS, values[constants.NCOLS], 1)
    nrows = _dimension(constants.NROWS, values[constants.NROWS], 2)
    if not math.isfinite(values[constants.CELLSIZE]) or values[constants.CELLSIZE] <= 0:
        raise MalformedValue(constants.CELLSIZE, str(values[constants.CELLSIZE]), 5)

    header = Header(
        name=name,
        ncols=ncols,
        nrows=nrows,
        xllcorner=values[constants.XLLCORNER],
        yllcorner=values[constants.YLLCORNER],
        cellsize=values[constants.CELLSIZE],
        nodata_value=values.get(constants.NODATA_VALUE, constants.DEFAULT_NODATA_VALUE),
    )
    if not has_nodata_value:
        logger.debug(f"No {constants.NODATA_VALUE} in header, using {constants.DEFAULT_NODATA_VALUE}")
    logger.debug(f"Header processed as {header}")

    return header, has_nodata_value
