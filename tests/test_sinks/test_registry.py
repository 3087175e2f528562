import pytest

from esriascii.config import Config
from esriascii.sinks.console import ConsoleSink
from esriascii.sinks.file import FileSink
from esriascii.sinks.registry import build_sinks, lookup
from esriascii.sinks.store import SqliteGridRepository, StoreSink


@pytest.fixture
def fake_config():
    return Config(
        "in.asc",
        "region",
        ["store", "console", "file"],
        "/tmp/out.txt",
        "/tmp/grid.sqlite",
        "",
    )


@pytest.mark.parametrize("device,sink_class", [
    ("console", ConsoleSink),
    ("con", ConsoleSink),
    ("file", FileSink),
    ("store", StoreSink),
    ("db", StoreSink),
    ("DB", StoreSink),
])
def test_lookup(fake_config, device, sink_class):
    assert isinstance(lookup(device)(fake_config), sink_class)


def test_lookup_unknown_device():
    with pytest.raises(KeyError):
        lookup("printer")


def test_build_sinks_keeps_configured_order(fake_config):
    sinks = build_sinks(fake_config)
    assert [s.name for s in sinks] == ["store", "console", "file"]


def test_build_sinks_uses_configured_paths(fake_config):
    store, _, file = build_sinks(fake_config)
    assert file.path == "/tmp/out.txt"
    assert isinstance(store.repository, SqliteGridRepository)
    assert store.repository.db_path == "/tmp/grid.sqlite"
