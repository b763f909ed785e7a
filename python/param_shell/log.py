"""Logging setup: package loggers render through Rich."""
import logging

from rich.logging import RichHandler

from .utils.output import err_console

PACKAGE_LOGGER = "param_shell"


def configure_logging(verbose=False):
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    if not any(isinstance(h, RichHandler) for h in logger.handlers):
        handler = RichHandler(console=err_console, show_time=False, show_path=verbose)
        handler.setFormatter(logging.Formatter("%(message)s"))
        logger.addHandler(handler)
    logger.propagate = False
    return logger
