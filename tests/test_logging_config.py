"""Tests for the logging setup."""

import logging

import pytest
from phantom3d.logging_config import setup_logging
from phantom3d.phantoms import presets, rasterize_ellipsoids


@pytest.fixture
def phantom3d_logger():
    logger = logging.getLogger('phantom3d')
    yield logger
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)


def test_setup_logging_no_duplicate_handlers(phantom3d_logger):
    """Repeated setup replaces the handlers."""
    setup_logging()
    setup_logging()
    assert len(phantom3d_logger.handlers) == 1
    assert phantom3d_logger.level == logging.INFO


def test_setup_logging_file(phantom3d_logger, tmp_path):
    """Debug messages of the rasterizer end up in the log file."""
    log_file = tmp_path / 'phantom.log'
    setup_logging(logging.DEBUG, log_file)
    assert len(phantom3d_logger.handlers) == 2
    rasterize_ellipsoids(presets.preset_ellipsoids('shepp-logan'), 4)
    for handler in phantom3d_logger.handlers:
        handler.flush()
    content = log_file.read_text()
    assert 'Rasterizing 10 ellipsoids on a 4^3 grid' in content
    assert 'phantom3d.phantoms.rasterize - DEBUG' in content


def test_rasterize_logs_debug(caplog):
    """The rasterizer reports the number of ellipsoids at debug level."""
    with caplog.at_level(logging.DEBUG, logger='phantom3d'):
        rasterize_ellipsoids(presets.preset_ellipsoids('yu-ye-wang'), 3)
    assert 'Rasterizing 10 ellipsoids on a 3^3 grid' in caplog.text
