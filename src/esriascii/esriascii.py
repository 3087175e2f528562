import configparser
import datetime as dt
import logging
import os.path
import sys
import threading
from typing import Optional

from funcy import reraise
from pyfiglet import Figlet
from returns.maybe import Some
from rich.prompt import Confirm, Prompt

from esriascii import config
from esriascii import constants
from esriascii.errors import (
    EsriAsciiError,
    InputUnavailable,
    SinkCloseFailed,
    SinkOpenFailed,
    SinkWriteFailed,
)
from esriascii.models import Cell, Header, RunRecord, RunState
from esriascii.readers import LineSource, cells, read_header
from esriascii.sinks.base import OutputSink
from esriascii.sinks.registry import build_sinks


CONSOLE_FORMAT = "%(message)s"
LOGFILE_FORMAT = "%(asctime)s|%(levelname)s|%(name)s|%(message)s"
INPUT_ENCODING = "utf-8"

logger = logging.getLogger(__name__)

def init_logging(configuration: config.Config):
    logger = logging.getLogger('esriascii')
    logger.setLevel(logging.DEBUG)
    logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(logging.INFO)
    console_handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))
    logger.addHandler(console_handler)

    if configuration.log_file:
        logfile_handler = logging.FileHandler(configuration.log_file, "w")
        logfile_handler.setLevel(logging.DEBUG)
        logfile_handler.setFormatter(logging.Formatter(LOGFILE_FORMAT))
        logger.addHandler(logfile_handler)

def banner():
    """
    Displays the name of this utility using incredible ASCII-art.
    """
    f = Figlet(font='slant')
    return f.renderText('esriascii')

def init_config(configuration_file):
    """
    Prompts the user for configuration values and then creates a valid configuration file.
    """
    print("""This utility will create an esriascii configuration file by prompting """
          """you for values for each of the configuration parameters.""")
    print()
    if not configuration_file:
        configuration_file = Prompt.ask("configuration file name", default="esriascii.ini")
    else:
        print(f'Creating configuration file {configuration_file}')
        print()

    if (os.path.exists(configuration_file)):
        print(f'WARNING: The {configuration_file} already exists.')
        overwrite = Confirm.ask("Overwrite?")
        if not overwrite:
            print('Not overwriting existing file. Exiting.')
            exit(1)

    cfg_parser = configparser.ConfigParser()

    print()
    print(f'{constants.SOURCE_SECTION_NAME} Parameters')
    print('--------------------------------------------------')
    cfg_parser.add_section(constants.SOURCE_SECTION_NAME)
    cfg_parser.set(constants.SOURCE_SECTION_NAME, "input_file", Prompt.ask("ESRI ASCII raster file"))
    cfg_parser.set(constants.SOURCE_SECTION_NAME, "region_name", Prompt.ask("Region name", default=constants.DEFAULT_REGION_NAME))
    print()

    print()
    print(f'{constants.DESTINATION_SECTION_NAME} Parameters')
    print('--------------------------------------------------')
    cfg_parser.add_section(constants.DESTINATION_SECTION_NAME)
    cfg_parser.set(constants.DESTINATION_SECTION_NAME, "devices", Prompt.ask("Output devices (console, file, store)", default=constants.DEFAULT_DEVICES))
    cfg_parser.set(constants.DESTINATION_SECTION_NAME, "output_file", Prompt.ask("Output file", default=constants.DEFAULT_OUTPUT_FILE))
    cfg_parser.set(constants.DESTINATION_SECTION_NAME, "store", Prompt.ask("SQLite database file", default=constants.DEFAULT_STORE))

    print()
    print(f'{constants.SETTINGS_SECTION_NAME} Parameters')
    print('--------------------------------------------------')
    cfg_parser.add_section(constants.SETTINGS_SECTION_NAME)
    cfg_parser.set(constants.SETTINGS_SECTION_NAME, "log_file", Prompt.ask("Log file", default=constants.DEFAULT_LOG_FILE))

    print()
    print(f'Saving new configuration: {configuration_file}')
    with open(configuration_file, "tw") as file:
        cfg_parser.write(file)

    return configuration_file

# -------------------------------------------------------------------

def process(configuration: config.Config, cancel: Optional[threading.Event] = None) -> RunRecord:
    """
    Parses the configured input file to every configured output device and
    logs a summary. Raises the run's error, if any, after the summary.
    """
    valid, errors = config.validate(configuration)
    if not valid:
        logger.error("The configuration is invalid:")
        for msg in errors:
            logger.error(" * " + msg)
        raise ValueError('Invalid configuration')

    sinks = build_sinks(configuration)
    logger.info(f"Parsing {configuration.input_file} to {', '.join(configuration.devices)}")
    record = run(configuration.input_file, sinks, configuration.region_name, cancel)
    log_record(record)

    if record.error is not None:
        raise record.error
    return record

def run(input_file: str, sinks: list[OutputSink],
        region_name: str = constants.DEFAULT_REGION_NAME,
        cancel: Optional[threading.Event] = None) -> RunRecord:
    """
    Reads the header, opens every sink, then streams each cell to every sink
    in order. Sinks that were opened are always closed. Failures are
    returned in the record rather than raised.
    """
    record = RunRecord(input_file, startDatetime=Some(dt.datetime.now()))
    opened = []

    try:
        with open_input(input_file) as input_lines, reading(input_file):
            source = LineSource(input_lines)
            header, has_nodata_value = read_header(source, region_name)
            record.header = Some(header)
            record.has_nodata_value = has_nodata_value
            record.state = RunState.HEADER_PARSED

            for sink in sinks:
                open_sink(sink, header, has_nodata_value)
                opened.append(sink)

            record.state = RunState.STREAMING
            for cell in cells(source, header, cancel):
                dispatch(opened, cell)
                record.cells_written += 1
    except BaseException as e:
        close_sinks(opened, cleanup=True)
        if not isinstance(e, EsriAsciiError):
            raise
        return end_record(record, RunState.FAILED, e)

    try:
        close_sinks(opened)
    except SinkCloseFailed as e:
        return end_record(record, RunState.FAILED, e)
    return end_record(record, RunState.DONE)

def open_input(path: str):
    try:
        return open(path, 'r', encoding=INPUT_ENCODING)
    except OSError as e:
        raise InputUnavailable(path, e.strerror or e) from e

def reading(path: str):
    """
    Turns failures while reading the input, such as bytes that do not
    decode, into InputUnavailable.
    """
    return reraise((OSError, UnicodeDecodeError), lambda e: InputUnavailable(path, e))

def open_sink(sink: OutputSink, header: Header, has_nodata_value: bool) -> None:
    with reraise(Exception, lambda e: SinkOpenFailed(sink.name, e)):
        sink.open(header, has_nodata_value)

def dispatch(sinks: list[OutputSink], cell: Cell) -> None:
    for sink in sinks:
        with reraise(Exception, lambda e: SinkWriteFailed(sink.name, e)):
            sink.write(cell)

def close_sinks(sinks: list[OutputSink], cleanup: bool = False) -> None:
    """
    Closes every sink, even when an earlier one fails to close. During
    cleanup after a failed run close errors are only logged; otherwise the
    first one is raised once every sink has been given a chance to close.
    """
    first_error = None
    for sink in sinks:
        try:
            with reraise(Exception, lambda e: SinkCloseFailed(sink.name, e)):
                sink.close()
        except SinkCloseFailed as e:
            logger.error(str(e))
            if first_error is None:
                first_error = e

    if first_error is not None and not cleanup:
        raise first_error

def end_record(record: RunRecord, state: RunState, error: Optional[Exception] = None) -> RunRecord:
    record.state = state
    record.error = error
    record.endDatetime = Some(dt.datetime.now())
    return record

def log_record(record: RunRecord) -> RunRecord:
    start = record.startDatetime.value_or(None)
    end = record.endDatetime.value_or(None)

    logger.info("")
    logger.info("Processing Summary")
    logger.info("==================")
    logger.info(f"Input       : {record.input_file}")
    logger.info(f"NODATA value: {'from header' if record.has_nodata_value else 'default'}")
    logger.info(f"Cells       : {record.cells_written}")
    logger.info(f"Successful  : {record.successful}")
    logger.info(f"Start       : {start}")
    logger.info(f"End         : {end}")
    if start is not None and end is not None:
        logger.info(f"Time elapsed: {end - start}")
    logger.debug(f"Final state: {record.state.value}")
    if record.error is not None:
        logger.error(f"Failed during {record.error.stage}: {record.error}")
    return record
