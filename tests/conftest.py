import logging

import pytest


@pytest.fixture(autouse=True)
def isolated_logging(tmp_path, monkeypatch):
    # Default log files are written to the working directory.
    monkeypatch.chdir(tmp_path)
    yield
    logger = logging.getLogger("esriascii")
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)
