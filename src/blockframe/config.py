"""Runtime configuration of blockframe.

blockframe is a library, so it doesn't emit anything unless
the application asks for it. The loggers of all the modules
live under the ``blockframe`` logger, which by default only
has a :class:`logging.NullHandler` attached.

For quick debugging sessions it's possible to enable
a console handler directly from here::

    >>> import logging
    >>> from blockframe import config
    >>> config.enable_debug()
    >>> config.get_logger().level == logging.DEBUG
    True
    >>> config.disable_debug()

The module also holds the options that drive how frames are
rendered when printed, see :func:`set_display_options`.
"""

import logging

LOGGER_NAME = "blockframe"

LOG_FORMATS = {
    "simple": "%(levelname).1s %(name)s: %(message)s",
    "verbose": "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
}

display_max_rows: int = 20
"""How many rows are shown when a frame is printed."""

display_max_width: int = 30
"""Cells longer than this are truncated when a frame is printed."""

_log_level: int = logging.WARNING
_log_format: str = "simple"
_handler: logging.Handler | None = None


def get_logger() -> logging.Logger:
    """Get the root logger of blockframe.

    Modules create their own child loggers through
    ``logging.getLogger(__name__)``, configuring this one
    affects all of them.
    """
    return logging.getLogger(LOGGER_NAME)


def set_log_level(level: int) -> None:
    """Set the logging level and print log messages to stderr.

    The first call attaches a :class:`logging.StreamHandler`
    to the blockframe logger, subsequent calls only change
    the level.

    :param level: Logging level, like ``logging.DEBUG``.
    """
    global _log_level, _handler

    _log_level = level
    logger = get_logger()
    logger.setLevel(level)
    if _handler is None:
        _handler = logging.StreamHandler()
        _handler.setFormatter(logging.Formatter(LOG_FORMATS[_log_format]))
        logger.addHandler(_handler)
    _handler.setLevel(level)


def set_log_format(format_name: str) -> None:
    """Set the format of the messages printed by :func:`set_log_level`.

    :param format_name: Either ``"simple"`` or ``"verbose"``.
    """
    global _log_format

    if format_name not in LOG_FORMATS:
        raise ValueError(f"Unknown format: {format_name}. Use 'simple' or 'verbose'")

    _log_format = format_name
    if _handler is not None:
        _handler.setFormatter(logging.Formatter(LOG_FORMATS[format_name]))


def enable_debug() -> None:
    """Shortcut for ``set_log_level(logging.DEBUG)``."""
    set_log_level(logging.DEBUG)


def disable_debug() -> None:
    """Go back to only reporting warnings and errors."""
    set_log_level(logging.WARNING)


def set_display_options(
    max_rows: int | None = None, max_width: int | None = None
) -> None:
    """Change how frames are rendered by ``str(frame)``.

    Options that are not provided are left untouched.

    :param max_rows: How many rows to print before truncating.
    :param max_width: Maximum length of the text of a cell.
    """
    global display_max_rows, display_max_width

    if max_rows is not None:
        if max_rows < 0:
            raise ValueError("max_rows must be a positive number")
        display_max_rows = max_rows
    if max_width is not None:
        if max_width < 4:
            raise ValueError("max_width must be at least 4")
        display_max_width = max_width
