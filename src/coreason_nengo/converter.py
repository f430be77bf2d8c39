# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_nengo

from functools import lru_cache
from typing import Any

from coreason_nengo.config import current_reference_year, settings
from coreason_nengo.era_table import EraTable, default_era_table
from coreason_nengo.exceptions import EraLabelParseError
from coreason_nengo.formatting import format_era_year, format_gregorian_year
from coreason_nengo.resolver import EraResolver
from coreason_nengo.schemas import EraSpan
from coreason_nengo.utils_date import parse_era_label
from coreason_nengo.utils_logger import logger
from coreason_nengo.validation import verify_era_name, verify_month, verify_year


class JapaneseEraConverter:
    """
    Public entry point for Gregorian <-> Japanese era conversion.

    Inputs are verified before they reach the resolver, so resolver failures
    are always about the calendar (no such era, year out of range), never
    about malformed arguments.
    """

    def __init__(self, table: EraTable | None = None, reference_year: int | None = None) -> None:
        # Sampled once so every query made through this instance agrees on the current era
        self._reference_year = current_reference_year(reference_year)
        if table is None:
            table = load_era_table(self._reference_year)
        self._resolver = EraResolver(table, self._reference_year)

    @property
    def reference_year(self) -> int:
        return self._reference_year

    @property
    def table(self) -> EraTable:
        return self._resolver.table

    def get_current_era(self) -> EraSpan:
        return self._resolver.table.current_era

    def gregorian_to_era(self, year: Any, month: Any = None) -> str | list[str]:
        """
        Converts a Gregorian year to an era label such as "Reiwa 3".
        Without a month a boundary year is ambiguous, so every matching label is returned.
        """
        if month is None:
            return self.gregorian_to_era_by_year(year)

        year = verify_year(year)
        month = verify_month(month)
        span = self._resolver.resolve_by_year_month(year, month)
        label = format_era_year(span, year)
        logger.debug(f"Resolved {year}-{month:02d} to {label}")
        return label

    def gregorian_to_era_by_year(self, year: Any) -> list[str]:
        year = verify_year(year)
        labels = [format_era_year(span, year) for span in self._resolver.resolve_by_year(year)]
        logger.debug(f"Resolved {year} to {labels}")
        return labels

    def era_to_gregorian(self, era_name: Any, era_year: Any) -> str:
        """Converts e.g. ("Reiwa", 3) to "2021 CE"."""
        return format_gregorian_year(self.era_to_gregorian_year(era_name, era_year))

    def era_to_gregorian_year(self, era_name: Any, era_year: Any) -> int:
        era_name = verify_era_name(era_name)
        gregorian_year = self._resolver.resolve_to_gregorian(era_name, era_year)
        logger.debug(f"Resolved {era_name} {era_year} to {gregorian_year}")
        return gregorian_year

    def era_label_to_gregorian(self, label: str) -> str:
        """Parses a free-text era label ("Heisei 31", "令和元年", "R2") and converts it."""
        parsed = parse_era_label(label, self._resolver.table)
        if parsed is None:
            raise EraLabelParseError(label)
        span, era_year = parsed
        return self.era_to_gregorian(span.name, era_year)


def load_era_table(reference_year: int) -> EraTable:
    """Era table from ERA_TABLE_PATH when configured, else the built-in table."""
    if settings.ERA_TABLE_PATH:
        return EraTable.from_json_file(settings.ERA_TABLE_PATH, reference_year)
    return default_era_table(reference_year)


@lru_cache(maxsize=1)
def get_default_converter() -> JapaneseEraConverter:
    """Process-wide converter; the reference year is fixed when it is first built."""
    return JapaneseEraConverter()


def get_current_era() -> EraSpan:
    return get_default_converter().get_current_era()


def gregorian_to_era(year: Any, month: Any = None) -> str | list[str]:
    return get_default_converter().gregorian_to_era(year, month)


def gregorian_to_era_by_year(year: Any) -> list[str]:
    return get_default_converter().gregorian_to_era_by_year(year)


def era_to_gregorian(era_name: Any, era_year: Any) -> str:
    return get_default_converter().era_to_gregorian(era_name, era_year)
