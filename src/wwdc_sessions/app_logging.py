"""Opt-in console logging for scripts that use the session registry."""

import logging

PACKAGE_LOGGER = "wwdc_sessions"
_HANDLER_NAME = "wwdc_sessions.console"


def configure_logging(level: str | int = logging.INFO) -> logging.Logger:
    """Set the package log level and attach one console handler.

    Repeated calls only update the level. Propagation to the root logger is
    left untouched, so host applications keep their own handlers.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level.upper() if isinstance(level, str) else level)
    if any(handler.name == _HANDLER_NAME for handler in logger.handlers):
        return logger
    handler = logging.StreamHandler()
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(logging.Formatter("%(levelname)s: %(name)s: %(message)s"))
    logger.addHandler(handler)
    return logger
