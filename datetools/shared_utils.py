"""
Shared Utility Functions
------------------------

Common functions used across datetools modules.

Functions:
  - normalize_locale_identifier: Canonical "ll-RR" locale identifier
  - load_yaml_file: Load and parse YAML file
"""

import re
from pathlib import Path
from typing import Optional


def normalize_locale_identifier(s: Optional[str]) -> str:
    """
    Normalize a locale identifier to "ll" or "ll-RR" form.

    Transformations:
      - Strip whitespace
      - Drop POSIX codeset and modifier ("ru_RU.UTF-8@euro" -> "ru_RU")
      - Replace underscores with hyphens
      - Lowercase language, uppercase region

    Args:
        s: Locale identifier (IETF or POSIX style)

    Returns:
        Normalized identifier, or "" for empty/"C"/"POSIX" locales

    Examples:
        >>> normalize_locale_identifier("ru_RU.UTF-8")
        'ru-RU'

        >>> normalize_locale_identifier("EN")
        'en'

        >>> normalize_locale_identifier("C.UTF-8")
        ''
    """
    if not s:
        return ""

    s = s.strip()
    s = re.split(r"[.@]", s, maxsplit=1)[0]

    if s.upper() in ("C", "POSIX"):
        return ""

    parts = [p for p in s.replace("_", "-").split("-") if p]
    if not parts:
        return ""

    language = parts[0].lower()
    if len(parts) == 1:
        return language
    return f"{language}-{parts[1].upper()}"


def load_yaml_file(path: Path) -> dict:
    """
    Load and parse YAML file.

    Args:
        path: Path to YAML file

    Returns:
        Parsed YAML data as dictionary

    Raises:
        FileNotFoundError: If file does not exist

    Examples:
        >>> data = load_yaml_file(Path("datetools/timeago/data/en.yaml"))
        >>> data['Yesterday']
        'Yesterday'
    """
    import yaml

    if not path.exists():
        raise FileNotFoundError(f"Required file not found: {path}")

    with open(path, 'r', encoding='utf-8') as f:
        return yaml.safe_load(f) or {}


__all__ = [
    "normalize_locale_identifier",
    "load_yaml_file",
]
