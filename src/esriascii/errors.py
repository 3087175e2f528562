"""
Errors raised while parsing an ESRI ASCII raster file and dispatching its
cells to output sinks.

Every error carries the processing stage it came from so callers can report
where a run stopped.
"""

from typing import Optional


class EsriAsciiError(Exception):
    """Base class for every unrecoverable parse or dispatch failure."""

    stage = 'run'


class InputUnavailable(EsriAsciiError):
    stage = 'input'

    def __init__(self, path, reason):
        self.path = path
        self.reason = reason
        super().__init__(f'Unable to read input file {path}: {reason}')


class TruncatedHeader(EsriAsciiError):
    stage = 'header'

    def __init__(self, expected: int, found: int):
        self.expected = expected
        self.found = found
        super().__init__(
            f'Invalid esri file format: header has {found} line(s), expected at least {expected}'
        )


class MissingParameter(EsriAsciiError):
    stage = 'header'

    def __init__(self, name: str, found: Optional[str] = None, line_number: Optional[int] = None):
        self.name = name
        self.found = found
        self.line_number = line_number
        message = f'Invalid esri file format: header parameter {name} not found'
        if line_number is not None:
            message += f' (line {line_number} starts with {found!r})'
        super().__init__(message)


class MalformedValue(EsriAsciiError):
    stage = 'header'

    def __init__(self, name: str, token: Optional[str], line_number: Optional[int] = None,
                 row: Optional[int] = None):
        self.name = name
        self.token = token
        self.line_number = line_number
        self.row = row
        if row is not None:
            self.stage = 'grid'
        message = f'Invalid value {token!r} for {name}'
        if row is not None:
            message += f' in row {row}'
        if line_number is not None:
            message += f' (line {line_number})'
        super().__init__(message)


class RowWidthMismatch(EsriAsciiError):
    stage = 'grid'

    def __init__(self, expected_cols: int, actual_cols: int, row: int):
        self.expected_cols = expected_cols
        self.actual_cols = actual_cols
        self.row = row
        super().__init__(
            f'Row {row} has {actual_cols} value(s), header declares ncols {expected_cols}'
        )


class TruncatedGrid(EsriAsciiError):
    stage = 'grid'

    def __init__(self, expected_rows: int, found_rows: int):
        self.expected_rows = expected_rows
        self.found_rows = found_rows
        super().__init__(
            f'Data block ends after {found_rows} row(s), header declares nrows {expected_rows}'
        )


class RunCancelled(EsriAsciiError):
    stage = 'grid'

    def __init__(self, row: int):
        self.row = row
        super().__init__(f'Run cancelled before row {row}')


class SinkError(EsriAsciiError):
    stage = 'sink'
    operation = 'use'

    def __init__(self, sink_name: str, reason):
        self.sink_name = sink_name
        self.reason = reason
        super().__init__(f'Unable to {self.operation} {sink_name} output: {reason}')


class SinkOpenFailed(SinkError):
    operation = 'open'


class SinkWriteFailed(SinkError):
    operation = 'write to'


class SinkCloseFailed(SinkError):
    operation = 'close'
