from esriascii.sinks.base import OutputSink, format_cell, single_precision
from esriascii.sinks.console import ConsoleSink
from esriascii.sinks.file import FileSink
from esriascii.sinks.store import GridRepository, SqliteGridRepository, StoreSink

__all__ = [
    "ConsoleSink",
    "FileSink",
    "GridRepository",
    "OutputSink",
    "SqliteGridRepository",
    "StoreSink",
    "format_cell",
    "single_precision",
]
