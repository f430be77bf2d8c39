# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_nengo

import click
import polars as pl

from coreason_nengo.config import current_reference_year
from coreason_nengo.converter import JapaneseEraConverter, load_era_table
from coreason_nengo.era_table import EraTable
from coreason_nengo.exceptions import EraError
from coreason_nengo.transform_eras import add_era_column
from coreason_nengo.utils_logger import logger


@click.group()
@click.option("--reference-year", type=int, default=None, help="Year treated as the present (defaults to today).")
@click.option(
    "--era-table",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="JSON file of era records replacing the built-in table.",
)
@click.pass_context
def cli(ctx: click.Context, reference_year: int | None, era_table: str | None) -> None:
    """CoReason Japanese era (nengo) converter CLI."""
    ctx.ensure_object(dict)
    ctx.obj["reference_year"] = reference_year
    ctx.obj["era_table"] = era_table
    logger.info(f"CLI started. Reference year: {reference_year or 'today'}")


def _build_converter(ctx: click.Context) -> JapaneseEraConverter:
    reference_year = current_reference_year(ctx.obj["reference_year"])
    try:
        if ctx.obj["era_table"]:
            table = EraTable.from_json_file(ctx.obj["era_table"], reference_year)
        else:
            table = load_era_table(reference_year)
    except EraError as e:
        raise click.ClickException(str(e)) from e
    return JapaneseEraConverter(table=table, reference_year=reference_year)


@cli.command()
@click.pass_context
def current_era(ctx: click.Context) -> None:
    """Print the current era."""
    era = _build_converter(ctx).get_current_era()
    label = f"{era.name} ({era.kanji})" if era.kanji else era.name
    click.echo(f"{label}, since {era.start_year}-{era.start_month:02d}")


@cli.command()
@click.argument("year", type=int)
@click.option("--month", type=int, default=None, help="Month (1-12); without it a boundary year yields two eras.")
@click.pass_context
def to_era(ctx: click.Context, year: int, month: int | None) -> None:
    """Convert a Gregorian YEAR to its era label(s)."""
    converter = _build_converter(ctx)
    try:
        result = converter.gregorian_to_era(year, month)
    except EraError as e:
        raise click.ClickException(str(e)) from e

    labels = [result] if isinstance(result, str) else result
    for label in labels:
        click.echo(label)


@cli.command()
@click.argument("era_name")
@click.argument("era_year", type=int)
@click.pass_context
def to_gregorian(ctx: click.Context, era_name: str, era_year: int) -> None:
    """Convert ERA_NAME ERA_YEAR (e.g. Reiwa 3) to a Gregorian year."""
    converter = _build_converter(ctx)
    try:
        click.echo(converter.era_to_gregorian(era_name, era_year))
    except EraError as e:
        raise click.ClickException(str(e)) from e


@cli.command()
@click.argument("label")
@click.pass_context
def parse(ctx: click.Context, label: str) -> None:
    """Parse an era LABEL such as "Heisei 31" or "令和元年" and print the Gregorian year."""
    converter = _build_converter(ctx)
    try:
        click.echo(converter.era_label_to_gregorian(label))
    except EraError as e:
        raise click.ClickException(str(e)) from e


@cli.command()
@click.argument("input_path", type=click.Path(exists=True, dir_okay=False))
@click.argument("output_path", type=click.Path(dir_okay=False))
@click.option("--year-column", required=True, help="Column holding Gregorian years.")
@click.option("--month-column", default=None, help="Optional column holding months.")
@click.option("--output-column", default="era", help="Name of the added era column.")
@click.pass_context
def convert_csv(
    ctx: click.Context,
    input_path: str,
    output_path: str,
    year_column: str,
    month_column: str | None,
    output_column: str,
) -> None:
    """Add an era column to a CSV file."""
    converter = _build_converter(ctx)
    df = pl.read_csv(input_path)
    try:
        df = add_era_column(df, year_column, month_column, output_column, converter=converter)
    except ValueError as e:
        raise click.ClickException(str(e)) from e

    if month_column is None:
        # CSV has no list type
        df = df.with_columns(pl.col(output_column).list.join(" / "))

    df.write_csv(output_path)
    logger.info(f"Wrote {len(df)} rows to {output_path}")


if __name__ == "__main__":
    cli()  # pragma: no cover
