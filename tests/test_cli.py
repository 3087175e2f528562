from unittest.mock import patch

from click.testing import CliRunner
import pytest

from esriascii.cli import cli
from esriascii.errors import RowWidthMismatch


# Unit tests for the 'cli' module functions.
#
# The test boundary is the cli module's interface with the esriascii module,
# so in addition to testing the cli module's behavior, the tests should mock
# that module's functions and assert that cli functions call them with the
# correct parameters, correctly handle their return values, and handle any
# exceptions they may throw.

@pytest.fixture
def cli_runner():
    return CliRunner()

@pytest.fixture
def grid_file(tmp_path):
    path = tmp_path / "grid.asc"
    path.write_text("ncols 2\nnrows 1\nxllcorner 0\nyllcorner 0\ncellsize 1\n7 8\n")
    return str(path)

@pytest.fixture
def config_file(tmp_path, grid_file):
    path = tmp_path / "grid.ini"
    path.write_text(
        "[Source]\n"
        f"input_file = {grid_file}\n"
        "region_name = alps\n"
        "[Destination]\n"
        "devices = file\n"
        f"output_file = {tmp_path / 'grid.out'}\n"
        "[Settings]\n"
        "log_file =\n"
    )
    return str(path)

def test_without_subcommand(cli_runner):
    result = cli_runner.invoke(cli)
    assert 'Usage' in result.output
    assert 'Commands' in result.output
    for subcommand in ['info', 'init', 'process', 'validate']:
        assert subcommand in result.output

def test_help(cli_runner):
    result = cli_runner.invoke(cli, ['--help'])
    assert result.exit_code == 0

def test_process_help_shows_examples(cli_runner):
    result = cli_runner.invoke(cli, ['process', '--help'])
    assert result.exit_code == 0
    assert '-d con,file' in result.output

def test_info_requires_config(cli_runner):
    result = cli_runner.invoke(cli, ['info'])
    assert result.exit_code != 0

def test_info_with_config_summarizes(cli_runner, config_file):
    result = cli_runner.invoke(cli, ['info', '--config', config_file])
    assert result.exit_code == 0
    for key in ['input_file', 'region_name', 'devices', 'output_file', 'store', 'log_file']:
        assert key in result.output

@patch('esriascii.esriascii.process')
def test_process_with_config_calls_process(mock, cli_runner, config_file):
    result = cli_runner.invoke(cli, ['process', '--config', config_file])
    assert mock.called
    assert result.exit_code == 0

@patch('esriascii.esriascii.process')
def test_process_flags_override_config(process_mock, cli_runner, config_file):
    result = cli_runner.invoke(cli, ['process', '-c', config_file, '-d', 'con,db', '--store', 'x.sqlite', '-n', 'andes'])

    assert result.exit_code == 0
    args = process_mock.call_args.args
    assert len(args) == 1
    configuration = args[0]
    assert configuration.devices == ['console', 'store']
    assert configuration.store == 'x.sqlite'
    assert configuration.region_name == 'andes'

@patch('esriascii.esriascii.process')
def test_process_without_config_uses_flags(process_mock, cli_runner, grid_file):
    result = cli_runner.invoke(cli, ['process', '-i', grid_file])
    assert result.exit_code == 0
    configuration = process_mock.call_args.args[0]
    assert configuration.input_file == grid_file
    assert configuration.devices == ['console']

@patch('esriascii.esriascii.process', side_effect=RowWidthMismatch(2, 3, 0))
def test_process_error_exits_non_zero(mock, cli_runner, config_file):
    result = cli_runner.invoke(cli, ['process', '--config', config_file])
    assert result.exit_code == 1
    assert 'Unable to parse data' in result.output

def test_process_with_missing_config_file(cli_runner, tmp_path):
    result = cli_runner.invoke(cli, ['process', '--config', str(tmp_path / 'missing.ini')])
    assert result.exit_code == 1

def test_process_writes_output_file(cli_runner, config_file, tmp_path):
    result = cli_runner.invoke(cli, ['process', '--config', config_file])
    assert result.exit_code == 0
    assert (tmp_path / 'grid.out').read_text() == "0.0,0.0,7.0\n0.0,1.0,8.0\n"

def test_validate_reports_valid_file(cli_runner, grid_file):
    result = cli_runner.invoke(cli, ['validate', '-i', grid_file])
    assert result.exit_code == 0
    assert 'is valid' in result.output
    assert 'absent, default used' in result.output
    assert '2 cells' in result.output

def test_validate_reports_invalid_file(cli_runner, tmp_path):
    path = tmp_path / "bad.asc"
    path.write_text("ncols 2\nnrows 1\nxllcorner 0\nyllcorner 0\ncellsize 1\n7 8 9\n")
    result = cli_runner.invoke(cli, ['validate', '-i', str(path)])
    assert result.exit_code == 1
    assert 'Invalid grid' in result.output

def test_validate_requires_input(cli_runner):
    result = cli_runner.invoke(cli, ['validate'])
    assert result.exit_code != 0

def test_validate_reports_undecodable_file(cli_runner, tmp_path):
    path = tmp_path / "binary.asc"
    path.write_bytes(b"\xff\xfe\x00\x01")
    result = cli_runner.invoke(cli, ['validate', '-i', str(path)])
    assert result.exit_code == 1
    assert 'Invalid input' in result.output
