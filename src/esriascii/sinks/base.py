"""Base Output Sink Module.

This module provides the interface every output sink implements, plus the
record formatting shared by the text sinks.
"""

from abc import ABC, abstractmethod

import numpy as np

from esriascii.models import Cell, Header


def single_precision(value: float) -> str:
    """Format a coordinate at 32-bit float resolution."""
    return str(np.float32(value))


def format_cell(cell: Cell, separator: str = ',') -> str:
    return separator.join([
        single_precision(cell.latitude),
        single_precision(cell.longitude),
        str(cell.value),
    ])


class OutputSink(ABC):
    """Abstract base class for output sinks.

    A run calls `open` once, `write` once per cell in emission order, and
    `close` once, even when the run fails after `open` succeeded.
    """

    name = 'output'

    @abstractmethod
    def open(self, header: Header, has_nodata_value: bool) -> None:
        """Prepare the sink for the cells of a grid described by `header`."""
        pass

    @abstractmethod
    def write(self, cell: Cell) -> None:
        pass

    @abstractmethod
    def close(self) -> None:
        """Release anything acquired by `open`."""
        pass
