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

import polars as pl

from coreason_nengo.converter import JapaneseEraConverter, get_default_converter
from coreason_nengo.exceptions import EraError
from coreason_nengo.utils_logger import logger


def add_era_column(
    df: pl.DataFrame,
    year_column: str,
    month_column: str | None = None,
    output_column: str = "era",
    converter: JapaneseEraConverter | None = None,
) -> pl.DataFrame:
    """
    Adds an era label column computed from a Gregorian year (and optional month) column.

    With a month column the output is a String ("Reiwa 3").
    Without one the output is a List[String], since a boundary year maps to two eras.
    Rows that cannot be resolved get null; they are logged, not raised.
    """
    if year_column not in df.columns:
        raise ValueError(f"Missing required column: {year_column}")
    if month_column is not None and month_column not in df.columns:
        raise ValueError(f"Missing required column: {month_column}")

    conv = converter or get_default_converter()

    if month_column is None:

        def to_labels(year: Any) -> list[str] | None:
            try:
                return conv.gregorian_to_era_by_year(year)
            except EraError as e:
                logger.warning(f"Could not convert year {year!r}: {e}")
                return None

        return df.with_columns(
            pl.col(year_column).map_elements(to_labels, return_dtype=pl.List(pl.String)).alias(output_column)
        )

    # map_elements on a struct sees every row, so nulls are handled here
    def to_label(struct: dict[str, Any]) -> str | None:
        year = struct.get(year_column)
        month = struct.get(month_column)
        if year is None or month is None:
            return None
        try:
            label = conv.gregorian_to_era(year, month)
        except EraError as e:
            logger.warning(f"Could not convert {year!r}-{month!r}: {e}")
            return None
        return label if isinstance(label, str) else None  # pragma: no cover

    return df.with_columns(
        pl.struct([year_column, month_column]).map_elements(to_label, return_dtype=pl.String).alias(output_column)
    )


def add_gregorian_column(
    df: pl.DataFrame,
    era_column: str,
    era_year_column: str,
    output_column: str = "gregorian_year",
    converter: JapaneseEraConverter | None = None,
) -> pl.DataFrame:
    """
    Adds an Int64 Gregorian year column computed from an era name and an era year column.
    Unknown eras and out-of-range era years become null.
    """
    for c in (era_column, era_year_column):
        if c not in df.columns:
            raise ValueError(f"Missing required column: {c}")

    conv = converter or get_default_converter()

    def to_year(struct: dict[str, Any]) -> int | None:
        era_name = struct.get(era_column)
        era_year = struct.get(era_year_column)
        if era_name is None or era_year is None:
            return None
        try:
            return conv.era_to_gregorian_year(era_name, era_year)
        except EraError as e:
            logger.warning(f"Could not convert {era_name!r} {era_year!r}: {e}")
            return None

    return df.with_columns(
        pl.struct([era_column, era_year_column]).map_elements(to_year, return_dtype=pl.Int64).alias(output_column)
    )
