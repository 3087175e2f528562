import configparser
import dataclasses
import os.path
import re

from funcy import distinct

from esriascii import constants


@dataclasses.dataclass
class Config:
    input_file: str
    region_name: str
    devices: list
    output_file: str
    store: str
    log_file: str

    def show(self):
        print()
        print('Using configuration:')
        for k,v in self.__dict__.items():
            if k == 'devices':
                v = ', '.join(v)
            print(f'  + {k}: {v}')


def config_parser_factory(configuration_file):
    """
    Returns a ConfigParser by reading the specified file.
    """
    if configuration_file is None or not os.path.exists(configuration_file):
        raise ValueError(f'Unable to find configuration file {configuration_file}')
    cfg_parser = configparser.ConfigParser(interpolation=configparser.ExtendedInterpolation())
    cfg_parser.read(configuration_file)
    return cfg_parser


def parse_devices(devices):
    """
    Returns the canonical device names from a comma and/or space separated
    string such as 'con,file'. Unknown names are kept so they can be reported
    by validate().
    """
    if isinstance(devices, str):
        devices = re.split(r'[,\s]+', devices)
    names = [d.strip().lower() for d in devices if d and d.strip()]
    return list(distinct(constants.DEVICE_ALIASES.get(name, name) for name in names))


def _get_configuration_value(section, name, value_type, config_parser, overrides):
    """
    Returns a value from the provided config parser; any value for the key that
    is provided in the 'overrides' dictionary will take precedence.
    """
    value = overrides.get(name)
    if value is None:
        value = config_parser.get(section, name)
    if value_type is list:
        return parse_devices(value)
    return value


def configuration(config_parser, overrides):
    """
    Returns a valid Config object that is populated from the provided config
    parser, with values overriden with anything provided in 'overrides'.
    """
    config_parser['DEFAULT'] = {
        'region_name': constants.DEFAULT_REGION_NAME,
        'devices': constants.DEFAULT_DEVICES,
        'output_file': constants.DEFAULT_OUTPUT_FILE,
        'store': constants.DEFAULT_STORE,
        'log_file': constants.DEFAULT_LOG_FILE,
        'input_file': '',
    }
    for section in [constants.SOURCE_SECTION_NAME,
                    constants.DESTINATION_SECTION_NAME,
                    constants.SETTINGS_SECTION_NAME]:
        if not config_parser.has_section(section):
            config_parser.add_section(section)

    try:
        return Config(
            _get_configuration_value(constants.SOURCE_SECTION_NAME, 'input_file', str, config_parser, overrides),
            _get_configuration_value(constants.SOURCE_SECTION_NAME, 'region_name', str, config_parser, overrides),
            _get_configuration_value(constants.DESTINATION_SECTION_NAME, 'devices', list, config_parser, overrides),
            _get_configuration_value(constants.DESTINATION_SECTION_NAME, 'output_file', str, config_parser, overrides),
            _get_configuration_value(constants.DESTINATION_SECTION_NAME, 'store', str, config_parser, overrides),
            _get_configuration_value(constants.SETTINGS_SECTION_NAME, 'log_file', str, config_parser, overrides),
        )
    except configparser.Error as e:
        raise ValueError(f'Unable to read the configuration file: {e}') from e


def validate(configuration):
    """
    Validates each value in the configuration.
    """
    known_devices = set(constants.DEVICE_ALIASES.values())
    validations = [
        ['input_file', lambda path: bool(path) and os.path.exists(path), 'The input_file does not exist.'],
        ['region_name', lambda name: bool(name), 'The region_name must be set.'],
        ['devices', lambda devices: len(devices) > 0, 'At least one output device must be set.'],
        ['devices', lambda devices: set(devices) <= known_devices, 'The devices must be console, file, and/or store.'],
    ]
    if constants.FILE_DEVICE in configuration.devices:
        validations.append(['output_file', lambda path: bool(path), 'When writing to file, output_file must be set.'])
    if constants.STORE_DEVICE in configuration.devices:
        validations.append(['store', lambda path: bool(path), 'When writing to store, store must be set.'])

    errors = [msg for name, fn, msg in validations if not fn(getattr(configuration, name))]
    return len(errors) == 0, errors
