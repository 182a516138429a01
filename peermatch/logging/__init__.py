"""Structured logging helpers for peermatch."""

import logging
from typing import Optional, Union


class ComponentLoggerAdapter(logging.LoggerAdapter):
    """LoggerAdapter that stamps a component name onto every record.

    Extra fields passed on the individual call win over the adapter's own.
    """

    def process(self, msg, kwargs):
        kwargs["extra"] = {**self.extra, **kwargs.get("extra", {})}
        return msg, kwargs


def get_logger(
    name: str, component: Optional[str] = None
) -> Union[logging.Logger, ComponentLoggerAdapter]:
    """Get a module logger, optionally bound to a component.

    Args:
        name: Logger name (usually __name__)
        component: Component label added to every record (e.g. "matching")

    Returns:
        Plain logger, or a ComponentLoggerAdapter when component is given

    Example:
        >>> logger = get_logger(__name__, component="directory")
        >>> logger.info("Supporters loaded", extra={"event": "directory.loaded"})
    """
    logger = logging.getLogger(name)
    if component:
        return ComponentLoggerAdapter(logger, {"component": component})
    return logger
