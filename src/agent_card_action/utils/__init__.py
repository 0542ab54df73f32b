"""Shared utility functions.

Key modules:
    - parsing: Tolerant JSON extraction from process output
    - logging: Logging configuration and credential masking
    - protocols: Host capability interface
"""

from .parsing import extract_json, truncate
from .logging import configure_logging, get_logger, mask_credentials
from .protocols import HostProtocol

__all__ = [
    # parsing
    "extract_json",
    "truncate",
    # logging
    "configure_logging",
    "get_logger",
    "mask_credentials",
    # protocols
    "HostProtocol",
]
