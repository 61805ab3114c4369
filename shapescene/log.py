import logging
from typing import Optional, Union

from . import settings

FORMAT = "%(levelname)s %(name)s: %(message)s"


def setup_default_logging(level: Optional[Union[int, str]] = None) -> None:
    """Give scripts using shapescene a console handler.

    Does nothing when the root logger already has handlers, so an
    application's own setup always wins. ``level`` defaults to
    ``SHAPESCENE_LOG_LEVEL``.
    """
    if logging.getLogger().handlers:
        return
    logging.basicConfig(level=settings.log_level(level), format=FORMAT)


__all__ = ["setup_default_logging"]
