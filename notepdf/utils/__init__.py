"""Helper utilities for notepdf."""

from .files import atomic_write_bytes
from .logger import add_file_handler, configure_logging

__all__ = ["add_file_handler", "atomic_write_bytes", "configure_logging"]
