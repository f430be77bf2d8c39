# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_nengo

from coreason_nengo.era_table import EraTable
from coreason_nengo.exceptions import EraNotFoundError
from coreason_nengo.schemas import EraSpan
from coreason_nengo.utils_logger import logger
from coreason_nengo.validation import verify_era_exists, verify_era_year


class EraResolver:
    """
    Matches Gregorian years (and months) to eras and back.

    Stateless apart from the immutable table and the injected reference year,
    so one instance can be shared freely between threads.
    """

    def __init__(self, table: EraTable, reference_year: int) -> None:
        self._table = table
        self._reference_year = reference_year

    @property
    def table(self) -> EraTable:
        return self._table

    @property
    def reference_year(self) -> int:
        return self._reference_year

    def resolve_by_year_month(self, year: int, month: int) -> EraSpan:
        """
        Finds the era covering `year`/`month`.

        Spans are scanned in table order and the checks below are applied per
        span; they overlap, so the order matters and the first match wins:

        1. `year` lies past the open current era.
        2. A single-year era covers `year` but not `month`: stop with EraNotFoundError.
        3. `year` is the era's last year and `month` precedes the end month.
        4. `year` is the era's first year and `month` is on or after the start month.
        5. `year` lies strictly between the era's first and last year. The open
           current era also owns every month of the reference year.

        Boundary years are only ever matched by 3 and 4, so a month between an
        era's end month and its successor's start month matches nothing.
        """
        for span in self._table:
            if self._is_past_current_era(span, year):
                return self._table.current_era
            if self._is_month_outside_single_year_era(span, year, month):
                logger.debug(f"{year}-{month:02d} falls outside single-year era {span.name}")
                raise EraNotFoundError()
            if year == span.end_year and month < span.end_month:
                return span
            if year == span.start_year and month >= span.start_month:
                return span
            # Start year excluded: months before start_month there are the predecessor's or a gap
            if span.start_year < year < span.end_year:
                return span
            if span.start_year < year == span.end_year and self.is_open_current_era(span):
                return span

        raise EraNotFoundError()

    def resolve_by_year(self, year: int) -> list[EraSpan]:
        """
        Finds every era covering any part of `year`, earliest first.
        A boundary year yields both the outgoing and the incoming era.
        """
        matches = [
            span
            for span in self._table
            if span.start_year <= year <= span.end_year or self._is_past_current_era(span, year)
        ]
        if not matches:
            raise EraNotFoundError()
        return matches

    def resolve_to_gregorian(self, era_name: str, era_year: int) -> int:
        span = verify_era_exists(self._table.find_by_name(era_name), era_name)
        verify_era_year(span, era_year, open_ended=self.is_open_current_era(span))
        return span.gregorian_year_of(era_year)

    def is_open_current_era(self, span: EraSpan) -> bool:
        """True when `span` is the table's last era and still tracks the reference year."""
        return span is self._table.current_era and span.end_year == self._reference_year

    def _is_past_current_era(self, span: EraSpan, year: int) -> bool:
        return year > span.end_year and span.end_year == self._reference_year

    @staticmethod
    def _is_month_outside_single_year_era(span: EraSpan, year: int, month: int) -> bool:
        return (
            span.start_year == year
            and span.is_single_year
            and (month < span.start_month or month > span.end_month)
        )
