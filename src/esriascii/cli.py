import configparser

import click

from esriascii import config
from esriascii import esriascii
from esriascii.errors import EsriAsciiError


EXAMPLES = """\b
Examples:
  esriascii process -i /abc.asc
  esriascii process -i /abc.asc -d con,file
  esriascii process -i /abc.asc -d file -o /tmp/results.out
  esriascii process -i /abc.asc -d db --store /tmp/grid.sqlite -n alps
  esriascii process -c esriascii.ini
"""


def _configuration(config_filename, overrides):
    if config_filename:
        cfg_parser = config.config_parser_factory(config_filename)
    else:
        cfg_parser = configparser.ConfigParser(interpolation=configparser.ExtendedInterpolation())
    return config.configuration(cfg_parser, overrides)


@click.group(epilog="For detailed help on each command, run: esriascii COMMAND --help")
def cli():
    """The esriascii utility validates ESRI ASCII raster data files and
    parses them to the console, a file, and/or a database."""
    pass

@cli.command()
@click.option('-c', '--config', help='Path to configuration file to create or replace')
def init(config):
    """Populates a configuration file based on user input."""
    click.echo(esriascii.banner())
    config = esriascii.init_config(config)
    click.echo(f'Initialized the esriascii configuration file {config}')

@cli.command()
@click.option('-c', '--config', 'config_filename', help='Path to configuration file to display', required=True)
def info(config_filename):
    """Summarizes the contents of a configuration file."""
    click.echo(esriascii.banner())
    configuration = _configuration(config_filename, {})
    configuration.show()

@cli.command(epilog=EXAMPLES)
@click.option('-c', '--config', 'config_filename', help='Path to configuration file')
@click.option('-i', '--in', 'input_file', help='ESRI ASCII raster file to parse')
@click.option('-d', '--dev', 'devices', help='Output device(s): con, file, db, e.g. -d con,file')
@click.option('-o', '--out', 'output_file', help='File to persist parsed results (used with file)')
@click.option('--store', help='SQLite database to persist parsed results (used with db)')
@click.option('-n', '--name', 'region_name', help='Name identifying the region (used with db)')
def process(config_filename, input_file, devices, output_file, store, region_name):
    """Parses an ESRI ASCII raster file to the configured output devices."""
    click.echo(esriascii.banner())
    overrides = {
        'input_file': input_file,
        'devices': devices,
        'output_file': output_file,
        'store': store,
        'region_name': region_name,
    }
    try:
        configuration = _configuration(config_filename, overrides)
        esriascii.init_logging(configuration)
        esriascii.process(configuration)
    except (EsriAsciiError, ValueError) as e:
        click.echo("\nUnable to parse data: " + str(e), err=True)
        exit(1)
    click.echo(f'Parsed {configuration.input_file}')

@cli.command()
@click.option('-i', '--in', 'input_file', help='ESRI ASCII raster file to validate', required=True)
def validate(input_file):
    """Checks the header and data block of a file without writing any output."""
    record = esriascii.run(input_file, [])
    if record.error is not None:
        click.echo(f"Invalid {record.error.stage}: {record.error}", err=True)
        exit(1)

    header = record.header.unwrap()
    click.echo(f'{input_file} is valid')
    for k, v in header.parameters().items():
        click.echo(f'  + {k}: {v}')
    click.echo(f"  nodata_value {'present' if record.has_nodata_value else 'absent, default used'}")
    click.echo(f'  {record.cells_written} cells')

if __name__ == "__main__":
    cli()
