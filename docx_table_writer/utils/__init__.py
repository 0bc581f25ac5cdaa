"""
Utilities: logging setup and length conversions.
"""

from .logger import get_logger, configure_logging, set_log_level, add_file_handler
from .units import (
    pt_to_twip,
    twip_to_pt,
    inch_to_twip,
    cm_to_twip,
    emu_to_twip,
    parse_length,
)

__all__ = [
    "get_logger",
    "configure_logging",
    "set_log_level",
    "add_file_handler",
    "pt_to_twip",
    "twip_to_pt",
    "inch_to_twip",
    "cm_to_twip",
    "emu_to_twip",
    "parse_length",
]
