# linguify:header:start
#
#   project      : Linguify
#   file         : model.py
#   file_relpath : src/linguify/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 The Linguify Authors
#
# linguify:header:end

"""Linguify configuration model.

The on-disk config is a JSON object with three sections:

    {
      "languages": {"source": "en", "targets": ["en"]},
      "locales": {"directory": "locales", "separator": "."},
      "output": {"json_indentation": 2}
    }

Sections may also be written with dotted keys (``"languages.source": "en"``);
both spellings are normalized through [`flatten`][linguify.core.objects.flatten]
and [`unflatten`][linguify.core.objects.unflatten] before values are read.

Scope:
    - *In scope*: data shape, field defaults, dict conversion.
    - *Out of scope*: file I/O, which lives in [`linguify.config.io`][linguify.config.io].
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Final

from linguify.config.getters import (
    get_int_value_checked,
    get_string_list_value_checked,
    get_string_value_checked,
)
from linguify.config.logging import get_logger
from linguify.core.guards import is_structure
from linguify.core.objects import flatten, sort, unflatten
from linguify.core.types import DEFAULT_SEPARATOR

if TYPE_CHECKING:
    from linguify.config.logging import LinguifyLogger
    from linguify.core.types import Structure

logger: LinguifyLogger = get_logger(__name__)


class Keys:
    """Section and key names used in the config file."""

    LANGUAGES: Final[str] = "languages"
    SOURCE: Final[str] = "source"
    TARGETS: Final[str] = "targets"

    LOCALES: Final[str] = "locales"
    DIRECTORY: Final[str] = "directory"
    SEPARATOR: Final[str] = "separator"

    OUTPUT: Final[str] = "output"
    JSON_INDENTATION: Final[str] = "json_indentation"


DEFAULT_SOURCE_LANGUAGE: Final[str] = "en"
DEFAULT_LOCALES_DIR: Final[str] = "locales"
DEFAULT_JSON_INDENTATION: Final[int] = 2


def _section(data: Structure, key: str) -> Structure:
    """Return the sub-table at ``key``, or an empty dict when missing or not a table."""
    value: Any | None = data.get(key)
    if value is None:
        return {}
    if is_structure(value):
        return value
    logger.warning("Expected table for section %r, got %r; using defaults", key, value)
    return {}


@dataclass(frozen=True, slots=True)
class Config:
    """Immutable Linguify configuration.

    Attributes:
        source_language (str): Language code translations are authored in.
        languages (tuple[str, ...]): Language codes Linguify manages. Each one is
            a top-level key in the merged translation catalog.
        locales_dir (str): Directory holding the per-language catalogs.
        separator (str): Separator joining nested translation keys.
        json_indentation (int): Indentation used when writing JSON files.
    """

    source_language: str = DEFAULT_SOURCE_LANGUAGE
    languages: tuple[str, ...] = (DEFAULT_SOURCE_LANGUAGE,)
    locales_dir: str = DEFAULT_LOCALES_DIR
    separator: str = DEFAULT_SEPARATOR
    json_indentation: int = DEFAULT_JSON_INDENTATION

    @classmethod
    def from_dict(cls, data: Structure) -> Config:
        """Build a config from a parsed JSON object.

        Missing keys take their defaults. Values of the wrong type are reported
        with a warning and replaced by their defaults.

        Args:
            data (Structure): Parsed config, nested or with dotted keys.

        Returns:
            Config: The resulting config.
        """
        normalized: Structure = unflatten(flatten(data))
        logger.trace("Normalized config data: %s", normalized)

        languages_tbl: Structure = _section(normalized, Keys.LANGUAGES)
        locales_tbl: Structure = _section(normalized, Keys.LOCALES)
        output_tbl: Structure = _section(normalized, Keys.OUTPUT)

        source_language: str = get_string_value_checked(
            languages_tbl,
            Keys.SOURCE,
            where=Keys.LANGUAGES,
            default=DEFAULT_SOURCE_LANGUAGE,
        )
        targets: list[str] = get_string_list_value_checked(
            languages_tbl,
            Keys.TARGETS,
            where=Keys.LANGUAGES,
            default=[source_language],
        )
        # The source language is always managed
        if source_language not in targets:
            targets.insert(0, source_language)

        separator: str = get_string_value_checked(
            locales_tbl,
            Keys.SEPARATOR,
            where=Keys.LOCALES,
            default=DEFAULT_SEPARATOR,
        )
        if not separator:
            logger.warning(
                "Empty separator in %s.%s; using %r",
                Keys.LOCALES,
                Keys.SEPARATOR,
                DEFAULT_SEPARATOR,
            )
            separator = DEFAULT_SEPARATOR

        return cls(
            source_language=source_language,
            languages=tuple(dict.fromkeys(targets)),
            locales_dir=get_string_value_checked(
                locales_tbl,
                Keys.DIRECTORY,
                where=Keys.LOCALES,
                default=DEFAULT_LOCALES_DIR,
            ),
            separator=separator,
            json_indentation=get_int_value_checked(
                output_tbl,
                Keys.JSON_INDENTATION,
                where=Keys.OUTPUT,
                default=DEFAULT_JSON_INDENTATION,
                min_value=0,
            ),
        )

    def to_dict(self) -> Structure:
        """Return the config as a nested, key-sorted plain dict."""
        return sort(
            {
                Keys.LANGUAGES: {
                    Keys.SOURCE: self.source_language,
                    Keys.TARGETS: list(self.languages),
                },
                Keys.LOCALES: {
                    Keys.DIRECTORY: self.locales_dir,
                    Keys.SEPARATOR: self.separator,
                },
                Keys.OUTPUT: {
                    Keys.JSON_INDENTATION: self.json_indentation,
                },
            }
        )
