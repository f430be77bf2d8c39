# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_nengo

import pytest
from coreason_nengo.schemas import EraSpan
from pydantic import ValidationError


def test_era_span_valid() -> None:
    span = EraSpan(name="Heisei", kanji="平成", start_year=1989, end_year=2019, start_month=1, end_month=5)
    assert span.name == "Heisei"
    assert span.year_count == 31
    assert not span.is_single_year
    assert span.era_year_of(2019) == 31
    assert span.gregorian_year_of(31) == 2019


def test_era_span_strips_name() -> None:
    span = EraSpan(name="  Reiwa ", start_year=2019, end_year=2026, start_month=5, end_month=12)
    assert span.name == "Reiwa"


def test_era_span_single_year() -> None:
    span = EraSpan(name="Short", start_year=2005, end_year=2005, start_month=3, end_month=8)
    assert span.is_single_year
    assert span.year_count == 1


def test_era_span_rejects_empty_name() -> None:
    with pytest.raises(ValidationError):
        EraSpan(name="", start_year=2000, end_year=2001, start_month=1, end_month=1)
    with pytest.raises(ValidationError):
        EraSpan(name="   ", start_year=2000, end_year=2001, start_month=1, end_month=1)


def test_era_span_rejects_bad_months() -> None:
    with pytest.raises(ValidationError):
        EraSpan(name="X", start_year=2000, end_year=2001, start_month=0, end_month=1)
    with pytest.raises(ValidationError):
        EraSpan(name="X", start_year=2000, end_year=2001, start_month=1, end_month=13)


def test_era_span_rejects_reversed_years() -> None:
    with pytest.raises(ValidationError, match="start_year 2001 is after end_year 2000"):
        EraSpan(name="X", start_year=2001, end_year=2000, start_month=1, end_month=1)


def test_era_span_is_immutable() -> None:
    span = EraSpan(name="X", start_year=2000, end_year=2001, start_month=1, end_month=1)
    with pytest.raises(ValidationError):
        span.end_year = 2010  # type: ignore[misc]


def test_era_span_ignores_extra_fields() -> None:
    span = EraSpan.model_validate(
        {"name": "X", "start_year": 2000, "end_year": 2001, "start_month": 1, "end_month": 1, "emperor": "?"}
    )
    assert not hasattr(span, "emperor")
