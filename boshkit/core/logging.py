"""
Logging Configuration Module
============================

Provides centralized logging configuration for boshkit, plus the
line-oriented console loggers that commands print through.

This module sets up:
- Diagnostic logging on stderr with rich formatting
- Optional file logging
- Configurable log levels
- :class:`ConsoleLogger`, the ``println`` / ``prompt_with_details`` sink
  handed to commands

Functions
---------
setup_logging
    Configure application-wide logging.
get_logger
    Get a logger for a specific module.

Example
-------
>>> from boshkit.core.logging import setup_logging, get_logger
>>>
>>> setup_logging(level="INFO", log_file="boshkit.log")
>>> logger = get_logger(__name__)
>>> logger.info("Listing resource groups")

Notes
-----
Diagnostic records always go to stderr. Standard output is reserved for
``export`` lines so that ``eval "$(boshkit print-env)"`` keeps working.

See Also
--------
logging : Python standard library logging module.
rich.logging : Rich library's logging handler.
"""

from __future__ import annotations

import logging
from typing import Optional, Union

from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.prompt import Confirm

# Default format for log messages
DEFAULT_FORMAT = "%(message)s"
FILE_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(
    level: Union[str, int] = "WARNING",
    log_file: Optional[str] = None,
    rich_tracebacks: bool = True,
    console: Optional[Console] = None,
) -> None:
    """
    Configure application-wide logging.

    Sets up logging with a Rich console handler and an optional file
    handler. Should be called once at application startup.

    Parameters
    ----------
    level : str or int, default="WARNING"
        Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
    log_file : str, optional
        Path to log file. If provided, logs will be written to this file.
    rich_tracebacks : bool, default=True
        Whether to use Rich for exception tracebacks.
    console : Console, optional
        Rich Console instance. If not provided, creates one on stderr.

    Examples
    --------
    >>> setup_logging(level="INFO")
    >>> setup_logging(level="DEBUG", log_file="boshkit.log")
    """
    if isinstance(level, str):
        level = getattr(logging, level.upper(), logging.WARNING)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers.clear()

    rich_console = console or Console(stderr=True)
    console_handler = RichHandler(
        console=rich_console,
        show_time=True,
        show_path=False,
        rich_tracebacks=rich_tracebacks,
        tracebacks_show_locals=False,
        markup=False,
    )
    console_handler.setLevel(level)
    console_handler.setFormatter(logging.Formatter(DEFAULT_FORMAT))
    root_logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(level)
        file_handler.setFormatter(
            logging.Formatter(FILE_FORMAT, datefmt=DATE_FORMAT)
        )
        root_logger.addHandler(file_handler)

    # Reduce noise from third-party libraries
    logging.getLogger("azure").setLevel(logging.WARNING)
    logging.getLogger("urllib3").setLevel(logging.WARNING)

    root_logger.debug(
        f"Logging configured: level={logging.getLevelName(level)}, "
        f"file={log_file or 'None'}"
    )


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger for a specific module.

    Parameters
    ----------
    name : str
        Logger name (typically __name__ from the calling module).

    Returns
    -------
    logging.Logger
        Configured logger instance.
    """
    return logging.getLogger(name)


class ConsoleLogger:
    """
    Line-oriented output sink used by commands.

    Wraps a Rich Console. Lines go straight to the console's file,
    untouched by Rich rendering, and deletion candidates are confirmed
    one at a time through Rich prompts.

    Parameters
    ----------
    console : Console, optional
        Console to write to. Defaults to a stdout console.
    no_confirm : bool, default=False
        If True, :meth:`prompt_with_details` answers yes without asking.

    Example
    -------
    >>> stdout = ConsoleLogger()
    >>> stderr = ConsoleLogger(Console(stderr=True))
    >>> stdout.println("export BOSH_CLIENT=admin")
    >>> stderr.println("No credhub server found.")
    """

    def __init__(
        self,
        console: Optional[Console] = None,
        no_confirm: bool = False,
    ) -> None:
        self.console = console or Console()
        self.no_confirm = no_confirm

    def println(self, message: str) -> None:
        """Write one line exactly as given."""
        # Raw write: Console.print expands tabs and :emoji: codes.
        self.console.file.write(message + "\n")
        self.console.file.flush()

    def prompt_with_details(self, resource_type: str, name: str) -> bool:
        """
        Ask whether a single resource should be included.

        Parameters
        ----------
        resource_type : str
            Type tag of the resource (e.g. ``"Resource Group"``).
        name : str
            Provider-assigned name of the resource.

        Returns
        -------
        bool
            True if the user confirmed, or if ``no_confirm`` is set.
        """
        if self.no_confirm:
            return True

        return Confirm.ask(
            f"[bold]{escape(resource_type)} {escape(name)}[/bold]: delete?",
            console=self.console,
            default=False,
        )
