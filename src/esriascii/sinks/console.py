import sys
from typing import Optional, TextIO

from esriascii.models import Cell, Header
from esriascii.sinks.base import OutputSink, single_precision


class ConsoleSink(OutputSink):
    """Displays the header and every cell in human-readable form."""

    name = 'console'

    def __init__(self, stream: Optional[TextIO] = None):
        self._stream = stream

    @property
    def stream(self) -> TextIO:
        # sys.stdout may be replaced after the sink is built
        return self._stream if self._stream is not None else sys.stdout

    def open(self, header: Header, has_nodata_value: bool) -> None:
        print('esri header processed as:', file=self.stream)
        print(f'  + name: {header.name}', file=self.stream)
        for k, v in header.parameters().items():
            print(f'  + {k}: {v}', file=self.stream)
        if not has_nodata_value:
            print('  (nodata_value not in header, using default)', file=self.stream)
        print(file=self.stream)

    def write(self, cell: Cell) -> None:
        print(f'lat: {single_precision(cell.latitude)}, '
              f'lon: {single_precision(cell.longitude)}, '
              f'value: {cell.value}', file=self.stream)

    def close(self) -> None:
        self.stream.flush()
