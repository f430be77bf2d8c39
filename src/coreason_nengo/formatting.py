# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_nengo

from coreason_nengo.schemas import EraSpan


def format_era_year(span: EraSpan, gregorian_year: int) -> str:
    """Formats as "<Name> <n>", era year 1 being the year the era began."""
    return f"{span.name} {span.era_year_of(gregorian_year)}"


def format_gregorian_year(year: int) -> str:
    return f"{year} CE"
