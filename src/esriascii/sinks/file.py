from typing import Optional, TextIO

from esriascii.models import Cell, Header
from esriascii.sinks.base import OutputSink, format_cell


class FileSink(OutputSink):
    """Writes one `latitude,longitude,value` line per cell to a flat file."""

    name = 'file'

    def __init__(self, path: str):
        self.path = path
        self._file: Optional[TextIO] = None

    def open(self, header: Header, has_nodata_value: bool) -> None:
        self._file = open(self.path, 'w', newline='\n')

    def write(self, cell: Cell) -> None:
        if self._file is None:
            raise ValueError(f'{self.path} is not open for writing')
        print(format_cell(cell), file=self._file)

    def close(self) -> None:
        if self._file is not None:
            self._file.close()
            self._file = None
