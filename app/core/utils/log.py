import logging
import logging.config
import queue
from enum import Enum
from logging.handlers import QueueHandler, QueueListener
from pathlib import Path
from typing import Any

from uvicorn.logging import DefaultFormatter

from app.core.utils.config import Settings

LOGS_DIRECTORY = Path("logs/")


class ColoredConsoleFormatter(DefaultFormatter):
    """Console formatter highlighting the level name and colouring the message by level"""

    class ConsoleColors(str, Enum):
        DEBUG = "\033[38;5;12m"
        INFO = "\033[38;5;10m"
        WARNING = "\033[38;5;11m"
        ERROR = "\033[38;5;9m"
        CRITICAL = "\033[38;5;1m"
        BOLD = "\033[1m"
        END = "\033[0m"

    def __init__(self, *args, **kwargs):
        super().__init__(datefmt="%d-%b-%y %H:%M:%S")

        self.formatters = {
            level: logging.Formatter(
                f"%(asctime)s - %(name)s - {self.ConsoleColors.BOLD.value}%(levelname)s{self.ConsoleColors.END.value}"
                f" - {self.ConsoleColors[logging.getLevelName(level)].value}%(message)s{self.ConsoleColors.END.value}",
                self.datefmt,
            )
            for level in (
                logging.DEBUG,
                logging.INFO,
                logging.WARNING,
                logging.ERROR,
                logging.CRITICAL,
            )
        }

    def format(self, record: logging.LogRecord) -> str:
        formatter = self.formatters.get(record.levelno, self.formatters[logging.ERROR])
        return formatter.format(record)


class LogConfig:
    """
    Loggers of the service:
     - `filmes.access`: one line per request, with its request id
     - `filmes.error`: startup, database initialization and errors

    Call `LogConfig().initialize_loggers(settings)` once per process, before the application starts.
    """

    LOG_FORMAT: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    def get_config_dict(self, settings: Settings) -> dict[str, Any]:
        """
        Return the configuration in the `logging.config.dictConfig` format.
        See https://docs.python.org/3/library/logging.config.html#logging-config-dictschema
        """
        level = "DEBUG" if settings.LOG_DEBUG_MESSAGES else "INFO"

        return {
            "version": 1,
            # SQLAlchemy and uvicorn loggers are only kept in debug mode
            "disable_existing_loggers": not settings.LOG_DEBUG_MESSAGES,
            "formatters": {
                "default": {
                    "format": self.LOG_FORMAT,
                    "datefmt": "%d-%b-%y %H:%M:%S",
                },
                "console_formatter": {
                    "()": "app.core.utils.log.ColoredConsoleFormatter",
                },
            },
            "handlers": {
                "console": {
                    "formatter": "console_formatter",
                    "class": "logging.StreamHandler",
                    "level": level,
                },
                "file_errors": {
                    "formatter": "default",
                    "class": "logging.handlers.RotatingFileHandler",
                    "filename": str(LOGS_DIRECTORY / "errors.log"),
                    "maxBytes": 1024 * 1024 * 10,  # 10 MB
                    "backupCount": 20,
                    "level": "INFO",
                },
                "file_access": {
                    "formatter": "default",
                    "class": "logging.handlers.RotatingFileHandler",
                    "filename": str(LOGS_DIRECTORY / "access.log"),
                    "maxBytes": 1024 * 1024 * 40,  # 40 MB
                    "backupCount": 50,
                    "level": "INFO",
                },
            },
            "loggers": {
                "root": {
                    "level": "DEBUG",
                    "handlers": ["console"],
                },
                "filmes": {
                    "propagate": False,
                },
                "filmes.access": {
                    "handlers": ["file_access", "console"],
                    "level": level,
                },
                "filmes.error": {
                    "handlers": ["file_errors", "console"],
                    "level": level,
                },
                # Replaced by filmes.access, which knows the request id
                "uvicorn.access": {"handlers": []},
                "uvicorn.error": {
                    "handlers": ["file_errors", "console"],
                    "level": level,
                    "propagate": False,
                },
            },
        }

    @staticmethod
    def move_handlers_to_queue(logger: logging.Logger) -> None:
        """
        Replace the handlers of `logger` by a single `QueueHandler`.

        The original handlers are run by a `QueueListener` thread, so that writing
        to the console or to files never blocks the event loop.
        """
        log_queue: queue.Queue[Any] = queue.Queue(-1)
        listener = QueueListener(
            log_queue,
            *logger.handlers,
            respect_handler_level=True,
        )
        listener.start()

        logger.handlers = [QueueHandler(log_queue)]

    def initialize_loggers(self, settings: Settings) -> None:
        # File handlers can not create their directory
        LOGS_DIRECTORY.mkdir(parents=True, exist_ok=True)

        config_dict = self.get_config_dict(settings=settings)
        logging.config.dictConfig(config_dict)

        for name in config_dict["loggers"]:
            logger = logging.getLogger(name)
            if logger.handlers:
                self.move_handlers_to_queue(logger)
