# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_nengo

import polars as pl
import pytest
from coreason_nengo.converter import JapaneseEraConverter
from coreason_nengo.transform_eras import add_era_column, add_gregorian_column
from polars.testing import assert_series_equal


@pytest.fixture  # type: ignore[misc]
def conv() -> JapaneseEraConverter:
    return JapaneseEraConverter(reference_year=2026)


def test_add_era_column_with_month(conv: JapaneseEraConverter) -> None:
    df = pl.DataFrame({"year": [2019, 2019, 1945, 1600], "month": [4, 5, 8, 1]})
    result = add_era_column(df, "year", "month", converter=conv)

    expected = pl.Series("era", ["Heisei 31", "Reiwa 1", "Showa 20", None], dtype=pl.String)
    assert_series_equal(result["era"], expected)
    # Source columns untouched
    assert result.columns == ["year", "month", "era"]


def test_add_era_column_nulls_and_bad_months(conv: JapaneseEraConverter) -> None:
    df = pl.DataFrame({"y": [2019, None, 2020], "m": [None, 5, 13]})
    result = add_era_column(df, "y", "m", output_column="label", converter=conv)
    assert result["label"].to_list() == [None, None, None]


def test_add_era_column_year_only(conv: JapaneseEraConverter) -> None:
    df = pl.DataFrame({"year": [2019, 2020, None, 1600]})
    result = add_era_column(df, "year", converter=conv)

    assert result["era"].dtype == pl.List(pl.String)
    assert result["era"].to_list() == [["Heisei 31", "Reiwa 1"], ["Reiwa 2"], None, None]


def test_add_era_column_missing_columns(conv: JapaneseEraConverter) -> None:
    df = pl.DataFrame({"year": [2019]})
    with pytest.raises(ValueError, match="Missing required column: yr"):
        add_era_column(df, "yr", converter=conv)
    with pytest.raises(ValueError, match="Missing required column: month"):
        add_era_column(df, "year", "month", converter=conv)


def test_add_gregorian_column(conv: JapaneseEraConverter) -> None:
    df = pl.DataFrame(
        {
            "era": ["Reiwa", "Heisei", "令和", "Taika", None, "Showa"],
            "era_year": [3, 31, 1, 1, 2, 99],
        }
    )
    result = add_gregorian_column(df, "era", "era_year", converter=conv)

    expected = pl.Series("gregorian_year", [2021, 2019, 2019, None, None, None], dtype=pl.Int64)
    assert_series_equal(result["gregorian_year"], expected)


def test_add_gregorian_column_missing_columns(conv: JapaneseEraConverter) -> None:
    df = pl.DataFrame({"era": ["Reiwa"]})
    with pytest.raises(ValueError, match="Missing required column: era_year"):
        add_gregorian_column(df, "era", "era_year", converter=conv)


def test_default_converter_used() -> None:
    df = pl.DataFrame({"year": [1989], "month": [6]})
    result = add_era_column(df, "year", "month")
    assert result["era"].to_list() == ["Heisei 1"]
