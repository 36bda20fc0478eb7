"""Shared data loading utilities.

This module provides the data-file search used by the string-table loader,
with an environment override ahead of the data shipped with the package.
"""

from pathlib import Path
from typing import List, Optional, Tuple


def find_data_file(
    module_file: str,
    filenames: List[str],
    override_dir: Optional[str] = None,
) -> Optional[Path]:
    """Find data file by searching standard locations.

    Search priority:
    1. Override directory (e.g. from an environment variable), if given
    2. Module-local data: {module_dir}/data/

    Args:
        module_file: __file__ from the calling module (e.g., __file__)
        filenames: List of candidate filenames to search for (e.g., ['ru-RU.yaml', 'ru.yaml'])
        override_dir: Directory searched before the shipped data

    Returns:
        Path to found file, or None if not found

    Examples:
        >>> # From timeago/timeagolocale.py
        >>> path = find_data_file(__file__, ['ru-RU.yaml', 'ru.yaml'],
        ...                       override_dir=os.environ.get("DATETOOLS_STRINGS_PATH"))
    """
    # Priority 1: Override directory
    if override_dir:
        for filename in filenames:
            p = Path(override_dir) / filename
            if p.exists():
                return p

    # Priority 2: Module-local data (shipped with the package)
    data_dir = Path(module_file).parent / "data"
    for filename in filenames:
        p = data_dir / filename
        if p.exists():
            return p

    return None


def format_not_found_error(
    what: str,
    searched_locations: List[Tuple[str, Path]],
    fix_instructions: List[str],
) -> str:
    """Format a helpful FileNotFoundError message.

    Args:
        what: Description of the missing data (e.g., 'string table')
        searched_locations: List of (description, path) tuples for locations searched
        fix_instructions: List of commands/instructions to fix the issue

    Returns:
        Formatted error message string
    """
    lines = [f"No {what} found in standard locations.\n"]

    lines.append("Searched:")
    for i, (desc, path) in enumerate(searched_locations, 1):
        lines.append(f"  {i}. {desc}: {path}")

    lines.append("\nTo fix:")
    for instruction in fix_instructions:
        lines.append(f"  • {instruction}")

    return "\n".join(lines)


__all__ = [
    "find_data_file",
    "format_not_found_error",
]
