from collections.abc import Callable

from esriascii import constants
from esriascii.config import Config
from esriascii.sinks.base import OutputSink
from esriascii.sinks.console import ConsoleSink
from esriascii.sinks.file import FileSink
from esriascii.sinks.store import SqliteGridRepository, StoreSink


def lookup(device: str) -> Callable[[Config], OutputSink]:
    """
    Determine which sink to build for the given output device name.
    """
    sinks = {
        constants.CONSOLE_DEVICE: lambda configuration: ConsoleSink(),
        constants.FILE_DEVICE: lambda configuration: FileSink(configuration.output_file),
        constants.STORE_DEVICE: lambda configuration: StoreSink(
            SqliteGridRepository(configuration.store)
        ),
    }

    return sinks[constants.DEVICE_ALIASES[device.lower()]]


def build_sinks(configuration: Config) -> list[OutputSink]:
    """
    Returns the sinks for every configured device, in the order listed.
    """
    return [lookup(device)(configuration) for device in configuration.devices]
