"""Locale lookup for relative-time strings.

Resolves the preferred locale from the environment, loads the YAML string
table for it, and applies the plural-suffix rule used to pick grammatical
number forms in languages with more than two of them.

Configuration (read at call time):
    DATETOOLS_LOCALE        Preferred locale, e.g. "ru-RU"
    LC_ALL / LC_MESSAGES / LANG
                            POSIX fallbacks, e.g. "ru_RU.UTF-8"
    DATETOOLS_STRINGS_PATH  Directory overriding the shipped string tables
"""

import logging
import math
import os
from functools import lru_cache
from pathlib import Path
from typing import Optional

from datetools.shared_utils import load_yaml_file, normalize_locale_identifier
from datetools.utils.dataloader import find_data_file, format_not_found_error

logger = logging.getLogger(__name__)

DEFAULT_LOCALE = "en"
STRINGS_PATH_ENV = "DATETOOLS_STRINGS_PATH"

# Languages whose tables carry "", "_" and "__" key variants
_SLAVIC_PLURAL_LANGUAGES = {"ru", "uk"}


class MissingTranslationError(KeyError):
    """Raised in strict mode when a string table has no entry for a key."""

    def __init__(self, key: str, locale: str):
        self.key = key
        self.locale = locale
        super().__init__(f"No translation for {key!r} in locale {locale!r}")


def get_preferred_locale() -> str:
    """
    Preferred locale from the environment.

    Checks DATETOOLS_LOCALE, then LC_ALL, LC_MESSAGES and LANG.

    Returns:
        Normalized locale identifier (default: "en")

    Examples:
        >>> os.environ["DATETOOLS_LOCALE"] = "ru_RU"
        >>> get_preferred_locale()
        'ru-RU'
    """
    for var in ("DATETOOLS_LOCALE", "LC_ALL", "LC_MESSAGES", "LANG"):
        locale = normalize_locale_identifier(os.environ.get(var))
        if locale:
            return locale
    return DEFAULT_LOCALE


def resolve_locale(locale: Optional[str] = None) -> str:
    """Normalize an explicit locale, or fall back to the preferred one."""
    locale = normalize_locale_identifier(locale)
    return locale or get_preferred_locale()


def plural_suffix(value: float, locale: Optional[str] = None) -> str:
    """
    Key suffix selecting the grammatical number form for `value`.

    Russian and Ukrainian use three forms:
      - "__" for 1, 21, 31, ... (but not 11)
      - "_"  for 2-4, 22-24, ... (but not 12-14)
      - ""   for everything else (0, 5-20, 25-30, ...)

    All other languages get "".

    Examples:
        >>> plural_suffix(21, "ru")
        '__'
        >>> plural_suffix(3, "uk")
        '_'
        >>> plural_suffix(12, "ru")
        ''
        >>> plural_suffix(3, "en")
        ''
    """
    language = resolve_locale(locale).split("-")[0]
    if language not in _SLAVIC_PLURAL_LANGUAGES:
        return ""

    n = int(math.floor(value))
    xy = n % 100
    y = n % 10

    if y == 0 or y > 4 or 10 < xy < 15:
        return ""
    if 1 < y < 5 and (xy < 10 or xy > 20):
        return "_"
    if y == 1 and xy != 11:
        return "__"
    return ""


def _candidate_filenames(locale: str) -> list[str]:
    names = [f"{locale}.yaml"]
    language = locale.split("-")[0]
    if language != locale:
        names.append(f"{language}.yaml")
    return names


@lru_cache(maxsize=32)
def _load_table(locale: str, strings_dir: Optional[str]) -> tuple[str, dict]:
    """Return (locale of the table actually loaded, table)."""
    path = find_data_file(__file__, _candidate_filenames(locale), override_dir=strings_dir)

    if path is None:
        if locale == DEFAULT_LOCALE:
            data_dir = Path(__file__).parent / "data"
            raise FileNotFoundError(format_not_found_error(
                "string table",
                [
                    ("Environment variable", Path(strings_dir or "Not set")),
                    ("Package data", data_dir),
                ],
                [
                    f"Reinstall datetools so {data_dir}/{DEFAULT_LOCALE}.yaml is present",
                    f"Or point {STRINGS_PATH_ENV} at a directory containing {DEFAULT_LOCALE}.yaml",
                ],
            ))
        logger.warning(f"No string table for locale {locale!r}, falling back to {DEFAULT_LOCALE!r}")
        return _load_table(DEFAULT_LOCALE, strings_dir)

    return path.stem, load_yaml_file(path)


def _table_for(locale: Optional[str]) -> tuple[str, dict]:
    return _load_table(resolve_locale(locale), os.environ.get(STRINGS_PATH_ENV) or None)


def load_strings(locale: Optional[str] = None) -> dict:
    """
    Load the string table for a locale.

    Lookup order: exact locale ("ru-RU.yaml"), language ("ru.yaml"), then
    the default "en.yaml". The override directory from
    DATETOOLS_STRINGS_PATH is searched before the shipped tables.

    Returns:
        Mapping of English phrase keys to localized text (cached, do not mutate)

    Raises:
        FileNotFoundError: If not even the default table can be found
    """
    return _table_for(locale)[1]


def table_locale(locale: Optional[str] = None) -> str:
    """
    Locale of the string table that serves `locale`.

    Differs from the requested locale after a fallback, e.g. "fr" is
    served by "en" and "ru-RU" by "ru".
    """
    return _table_for(locale)[0]


def string_for(key: str, locale: Optional[str] = None, *, strict: bool = False) -> str:
    """
    Localized text for a phrase key.

    A missing key is reported rather than fatal: it is logged at WARNING
    and the key itself is returned, unless `strict` is set.

    Args:
        key: Phrase key, e.g. "Yesterday" or "%d _years ago"
        locale: Locale to look up (default: preferred locale)
        strict: Raise MissingTranslationError instead of falling back

    Returns:
        Localized text (may still contain a %d placeholder)
    """
    locale = resolve_locale(locale)
    table = load_strings(locale)

    if key in table:
        return table[key]

    if strict:
        raise MissingTranslationError(key, locale)

    logger.warning(f"Missing translation for {key!r} in locale {locale!r}")
    return key


__all__ = [
    "DEFAULT_LOCALE",
    "MissingTranslationError",
    "get_preferred_locale",
    "resolve_locale",
    "plural_suffix",
    "load_strings",
    "table_locale",
    "string_for",
]
