"""
Logging for the contact sheet builder.

Every module logs through the ``contact_sheet`` logger defined here. A run
reports its catalog counts and output path at INFO, skipped or clipped
images at WARNING, and each decoded file at DEBUG, which ``--verbose``
turns on through ``set_verbosity``.
"""

import logging

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(message)s"


def setup_logger(
        name: str = __name__,
        level: int = logging.INFO,
        formatter: logging.Formatter | None = None,
        handler: logging.Handler | None = None,
) -> logging.Logger:
    """
    Return the named logger with a single stderr handler attached.

    The handler is attached only the first time a name is seen, so
    importing modules repeatedly never duplicates output. Propagation is
    switched off so the tool's output does not depend on the root logger
    of whatever process imports it.

    Args:
        name: Logger name.
        level: Initial level; ``set_verbosity`` changes it later.
        formatter: Replaces the default ``LOG_FORMAT`` formatter.
        handler: Replaces the default stderr ``StreamHandler``.

    Returns:
        The configured logger.

    """
    logger_instance = logging.getLogger(name)
    logger_instance.setLevel(level)
    if not logger_instance.handlers:
        if formatter is None:
            formatter = logging.Formatter(LOG_FORMAT)
        if handler is None:
            handler = logging.StreamHandler()
        handler.setFormatter(formatter)
        logger_instance.addHandler(handler)
        logger_instance.propagate = False
    return logger_instance


def set_verbosity(*, verbose: bool) -> None:
    """Show per-file DEBUG messages when ``verbose``, else INFO and up."""
    logger.setLevel(logging.DEBUG if verbose else logging.INFO)


logger = setup_logger("contact_sheet")
