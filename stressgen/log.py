"""Shared logging configuration for stressgen modules."""

import logging
import sys

PACKAGE_LOGGER = "stressgen"


def get_logger(name: str) -> logging.Logger:
    package = logging.getLogger(PACKAGE_LOGGER)
    if not package.handlers and not logging.root.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(
            logging.Formatter("[%(levelname)s] %(name)s: %(message)s")
        )
        handler.setLevel(logging.DEBUG)
        package.addHandler(handler)
        package.setLevel(logging.INFO)
    return logging.getLogger(name)


def set_verbose(verbose: bool) -> None:
    """Switch the package logger between INFO and DEBUG."""

    get_logger(PACKAGE_LOGGER).setLevel(logging.DEBUG if verbose else logging.INFO)
