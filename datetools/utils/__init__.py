"""Shared utilities for datetools package."""

from datetools.utils.dataloader import (
    find_data_file,
    format_not_found_error,
)

__all__ = [
    # Data loading
    "find_data_file",
    "format_not_found_error",
]
