"""Logging configuration for applications embedding klang."""

import logging
import sys

# Log levels for klang components
LOGGING_CONFIG = {
    "klang": logging.INFO,
    "klang.core": logging.INFO,
    # Every bundle read logs at debug; keep it quiet unless asked
    "klang.infra": logging.WARNING,
}


class ColoredFormatter(logging.Formatter):
    """Console formatter that colors the level and marks klang's own loggers.

    Records from ``klang.*`` loggers get a bold name so cache activity
    stands out among the host application's log lines.
    """

    LEVEL_COLORS = {
        logging.DEBUG: "\033[36m",
        logging.INFO: "\033[32m",
        logging.WARNING: "\033[33m",
        logging.ERROR: "\033[31m",
        logging.CRITICAL: "\033[35m",
    }
    BOLD = "\033[1m"
    RESET = "\033[0m"

    def format(self, record: logging.LogRecord) -> str:
        levelname, name = record.levelname, record.name
        color = self.LEVEL_COLORS.get(record.levelno)
        if color:
            record.levelname = f"{color}{levelname}{self.RESET}"
        if name == "klang" or name.startswith("klang."):
            record.name = f"{self.BOLD}{name}{self.RESET}"
        try:
            return super().format(record)
        finally:
            # other handlers see the plain record
            record.levelname, record.name = levelname, name


def setup_logging(debug: bool = False, stream=None) -> None:
    """Configure console logging for klang."""
    level = logging.DEBUG if debug else logging.INFO

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # Remove existing handlers
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler(stream or sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(ColoredFormatter(
        "%(asctime)s %(levelname)-8s %(name)s - %(message)s",
        datefmt="%H:%M:%S",
    ))
    root_logger.addHandler(console_handler)

    for logger_name, logger_level in LOGGING_CONFIG.items():
        # debug opens up every klang component
        logging.getLogger(logger_name).setLevel(logging.DEBUG if debug else logger_level)

    logging.getLogger(__name__).info(
        "Logging configured (console=%s)", "DEBUG" if debug else "INFO"
    )
