import pytest

from esriascii.models import Cell, Header
from esriascii.sinks.base import format_cell, single_precision
from esriascii.sinks.file import FileSink


@pytest.fixture
def header():
    return Header("alps", ncols=2, nrows=1, xllcorner=0.0, yllcorner=0.0, cellsize=1.0)


def test_single_precision_rounds_to_float32():
    assert single_precision(0.1 + 0.2) == "0.3"
    assert single_precision(1 / 3) == "0.33333334"


def test_format_cell():
    assert format_cell(Cell(0, 0, 1.0, -2.5, -9999.0)) == "1.0,-2.5,-9999.0"


def test_integral_value_keeps_float_form():
    assert format_cell(Cell(0, 0, 0.0, 0.0, float("13"))) == "0.0,0.0,13.0"


def test_writes_one_line_per_cell(tmp_path, header):
    path = tmp_path / "grid.out"
    sink = FileSink(str(path))
    sink.open(header, True)
    sink.write(Cell(0, 0, 1.0, 0.0, 5.0))
    sink.write(Cell(0, 1, 1.0, 1.0, 6.5))
    sink.close()

    assert path.read_text() == "1.0,0.0,5.0\n1.0,1.0,6.5\n"


def test_open_truncates_existing_file(tmp_path, header):
    path = tmp_path / "grid.out"
    path.write_text("stale\n")
    sink = FileSink(str(path))
    sink.open(header, True)
    sink.close()

    assert path.read_text() == ""


def test_close_without_open_is_harmless(tmp_path):
    FileSink(str(tmp_path / "never.out")).close()


def test_open_fails_for_missing_directory(tmp_path, header):
    with pytest.raises(OSError):
        FileSink(str(tmp_path / "missing" / "grid.out")).open(header, True)


def test_write_before_open_raises(tmp_path):
    sink = FileSink(str(tmp_path / "grid.out"))
    with pytest.raises(ValueError):
        sink.write(Cell(0, 0, 1.0, 0.0, 5.0))


def test_write_after_close_raises(tmp_path, header):
    sink = FileSink(str(tmp_path / "grid.out"))
    sink.open(header, True)
    sink.close()
    with pytest.raises(ValueError):
        sink.write(Cell(0, 0, 1.0, 0.0, 5.0))
