# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_nengo

from typing import Any

from coreason_nengo.exceptions import EraYearOutOfRangeError, InvalidInputError, UnknownEraError
from coreason_nengo.schemas import EraSpan


def _is_int(value: Any) -> bool:
    # bool is an int subclass but never a valid year or month
    return isinstance(value, int) and not isinstance(value, bool)


def verify_year(value: Any) -> int:
    if not _is_int(value):
        raise InvalidInputError(f"Year must be an integer, got {type(value).__name__}: {value!r}")
    return int(value)


def verify_month(value: Any) -> int:
    if not _is_int(value):
        raise InvalidInputError(f"Month must be an integer, got {type(value).__name__}: {value!r}")
    if not 1 <= value <= 12:
        raise InvalidInputError(f"Month must be between 1 and 12, got {value}")
    return int(value)


def verify_era_name(value: Any) -> str:
    if not isinstance(value, str) or not value.strip():
        raise InvalidInputError(f"Era name must be a non-empty string, got {value!r}")
    return value.strip()


def verify_era_exists(span: EraSpan | None, era_name: str) -> EraSpan:
    if span is None:
        raise UnknownEraError(era_name)
    return span


def verify_era_year(span: EraSpan, era_year: Any, open_ended: bool = False) -> int:
    """
    Checks that `era_year` is a valid year count inside `span`.
    Era year 1 is the start year; the upper bound is lifted for the open current era.
    """
    if not _is_int(era_year):
        raise InvalidInputError(f"Era year must be an integer, got {type(era_year).__name__}: {era_year!r}")

    max_year = None if open_ended else span.year_count
    if era_year < 1 or (max_year is not None and era_year > max_year):
        raise EraYearOutOfRangeError(span.name, era_year, max_year)
    return int(era_year)
