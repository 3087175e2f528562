from esriascii.readers.line_source import LineSource
from esriascii.readers.header_reader import read_header
from esriascii.readers.grid_reader import cells

__all__ = ["LineSource", "cells", "read_header"]
