# shopsearch/core/logging.py
import logging
import sys
import colorlog

from shopsearch.core.config import get_settings

ENGINE_LOGGER = "shopsearch"

def configure_logging(level=None, engine_level=None):
    """
    Install a colored stdout handler on the root logger.
    `level` defaults to DEBUG when Settings.DEBUG is set, INFO otherwise.
    `engine_level` tunes the shopsearch loggers alone (per-call search logs),
    defaulting to `level`.
    """
    if level is None:
        level = logging.DEBUG if get_settings().DEBUG else logging.INFO

    handler = colorlog.StreamHandler(sys.stdout)
    handler.setFormatter(
        colorlog.ColoredFormatter(
            "%(log_color)s%(asctime)s %(levelname)-8s [%(name)s]%(reset)s %(message)s",
            datefmt="%H:%M:%S",
            log_colors={
                "DEBUG": "cyan",
                "INFO": "green",
                "WARNING": "yellow",
                "ERROR": "red",
                "CRITICAL": "bold_red",
            },
        )
    )

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers = [handler]

    logging.getLogger(ENGINE_LOGGER).setLevel(engine_level if engine_level is not None else level)
