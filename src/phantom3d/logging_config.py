"""Logging configuration for scripts using phantom3d.

The package itself only creates module level loggers and installs no handlers.
"""

import logging
import sys
from os import PathLike


def setup_logging(level: int = logging.INFO, log_file: str | PathLike | None = None) -> logging.Logger:
    """Configure the logger of the 'phantom3d' namespace.

    Parameters
    ----------
    level
        logging level, e.g. `logging.DEBUG` to see per-phantom voxel counts
    log_file
        optional path of a file that receives the log in addition to stdout

    Returns
    -------
        the configured logger
    """
    logger = logging.getLogger('phantom3d')
    logger.setLevel(level)

    # repeated setup must not duplicate the output
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s', datefmt='%H:%M:%S')

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, mode='w', encoding='utf-8')
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.debug('Logging initialized.')
    return logger
