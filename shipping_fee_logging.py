"""
Root logger setup for shipping fee callers.

The calculator itself never logs; the quote orchestrator logs each step at
DEBUG and gate failures at WARNING. The level comes from SHIPPING_FEE_LOG_LEVEL
unless passed explicitly.
"""

import logging
import sys
from typing import Optional

from shipping_fee_settings import get_settings

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def configure_logging(level: Optional[str] = None) -> None:
    """Configure root logging.

    Args:
        level: The log level string. Defaults to the configured log_level;
            unknown names fall back to INFO.
    """
    if level is None:
        level = get_settings().log_level

    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
        stream=sys.stdout,
        force=True,
    )
