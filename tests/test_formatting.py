# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_nengo

from coreason_nengo.formatting import format_era_year, format_gregorian_year
from coreason_nengo.schemas import EraSpan

REIWA = EraSpan(name="Reiwa", start_year=2019, end_year=2026, start_month=5, end_month=12)


def test_format_era_year() -> None:
    assert format_era_year(REIWA, 2019) == "Reiwa 1"
    assert format_era_year(REIWA, 2021) == "Reiwa 3"
    # Years past the stored end still count on
    assert format_era_year(REIWA, 2040) == "Reiwa 22"


def test_format_gregorian_year() -> None:
    assert format_gregorian_year(2021) == "2021 CE"
    assert format_gregorian_year(645) == "645 CE"
