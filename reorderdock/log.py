"""Logging for the dock widget and demo application.

Loggers live under the 'reorderdock.' namespace, one per module:

  controller -- drag gesture transitions (start, hover, leave, commit, cancel)
  dnd        -- GTK drag signals and drops the dock refused
  dock       -- widget construction
  tiles      -- icon theme lookups that failed
  app        -- startup

Everything below INFO is gesture tracing; set REORDERDOCK_LOG_LEVEL=DEBUG
to follow a drag.
"""

import logging
import os

LOG_LEVEL = os.environ.get("REORDERDOCK_LOG_LEVEL", "WARNING").upper()

logging.basicConfig(
    format="%(asctime)s.%(msecs)03d %(name)-22s %(levelname)-5s %(message)s",
    datefmt="%H:%M:%S",
    level=getattr(logging, LOG_LEVEL, logging.WARNING),
)


def get_logger(name: str) -> logging.Logger:
    """Return the module logger 'reorderdock.<name>'."""
    return logging.getLogger(f"reorderdock.{name}")
