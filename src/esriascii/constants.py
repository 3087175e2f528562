# Default configuration values
DEFAULT_REGION_NAME = 'region'
DEFAULT_DEVICES = 'console'
DEFAULT_OUTPUT_FILE = '/tmp/file.out'
DEFAULT_STORE = ''
DEFAULT_LOG_FILE = 'esriascii.log'

# Configuration sections
SOURCE_SECTION_NAME = 'Source'
DESTINATION_SECTION_NAME = 'Destination'
SETTINGS_SECTION_NAME = 'Settings'

# Output devices, with the short names accepted on the command line
CONSOLE_DEVICE = 'console'
FILE_DEVICE = 'file'
STORE_DEVICE = 'store'
DEVICE_ALIASES = {
    'con': CONSOLE_DEVICE,
    'console': CONSOLE_DEVICE,
    'file': FILE_DEVICE,
    'db': STORE_DEVICE,
    'store': STORE_DEVICE,
}

# ESRI ASCII raster header parameters, in the order they must appear
NCOLS = 'ncols'
NROWS = 'nrows'
XLLCORNER = 'xllcorner'
YLLCORNER = 'yllcorner'
CELLSIZE = 'cellsize'
NODATA_VALUE = 'nodata_value'
HEADER_PARAMETERS = (NCOLS, NROWS, XLLCORNER, YLLCORNER, CELLSIZE, NODATA_VALUE)
MANDATORY_HEADER_LINES = 5
DEFAULT_NODATA_VALUE = -9999.0
