# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_nengo

import json
from collections.abc import Iterable, Iterator
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from coreason_nengo.era_data import JAPANESE_ERAS
from coreason_nengo.exceptions import EraTableError
from coreason_nengo.schemas import EraSpan
from coreason_nengo.utils_logger import logger


class EraTable:
    """
    Immutable, chronologically ordered sequence of eras.

    The table never re-sorts its input: records must already be in ascending
    order and may only touch at a shared boundary year. The last span is the
    current era.
    """

    def __init__(self, spans: Iterable[EraSpan]) -> None:
        self._spans: tuple[EraSpan, ...] = tuple(spans)
        if not self._spans:
            raise EraTableError("Era table must contain at least one era")

        self._check_order()
        self._by_name = self._index_names()

    @classmethod
    def from_records(cls, records: Iterable[dict[str, Any]], reference_year: int) -> "EraTable":
        """
        Builds a table from plain dicts.
        The last record may leave `end_year` as None to mark the open current era;
        it is then closed at `reference_year` (end_month defaults to 12).
        """
        rows = [dict(r) for r in records]
        spans = []
        for i, row in enumerate(rows):
            is_last = i == len(rows) - 1
            if row.get("end_year") is None:
                if not is_last:
                    raise EraTableError(f"Only the current (last) era may be open-ended, got {row.get('name')!r}")
                row["end_year"] = reference_year
                if row.get("end_month") is None:
                    row["end_month"] = 12

            try:
                spans.append(EraSpan.model_validate(row))
            except ValidationError as e:
                raise EraTableError(f"Invalid era record at position {i}: {e}") from e

        return cls(spans)

    @classmethod
    def from_json_file(cls, path: str | Path, reference_year: int) -> "EraTable":
        """Loads era records from a JSON array file."""
        file_path = Path(path)
        logger.info(f"Loading era table from {file_path}")
        try:
            records = json.loads(file_path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as e:
            raise EraTableError(f"Era table file {file_path} is not valid JSON: {e}") from e

        if not isinstance(records, list):
            raise EraTableError(f"Era table file {file_path} must contain a JSON array of records")

        return cls.from_records(records, reference_year)

    @property
    def spans(self) -> tuple[EraSpan, ...]:
        return self._spans

    @property
    def current_era(self) -> EraSpan:
        return self._spans[-1]

    def find_by_name(self, name: str) -> EraSpan | None:
        """Exact lookup by romanized name or kanji name."""
        return self._by_name.get(name)

    def aliases(self) -> dict[str, EraSpan]:
        """
        Lower-cased name, kanji and abbreviation of each era mapped to the era.
        Used for matching era labels found in free text.
        """
        result: dict[str, EraSpan] = {}
        for span in self._spans:
            for alias in (span.name, span.kanji, span.abbreviation):
                if alias:
                    result[alias.lower()] = span
        return result

    def __len__(self) -> int:
        return len(self._spans)

    def __iter__(self) -> Iterator[EraSpan]:
        return iter(self._spans)

    def __getitem__(self, index: int) -> EraSpan:
        return self._spans[index]

    def __repr__(self) -> str:
        return f"EraTable({self._spans[0].name}..{self.current_era.name}, {len(self)} eras)"

    def _check_order(self) -> None:
        for prev, cur in zip(self._spans, self._spans[1:]):
            if (cur.start_year, cur.start_month) < (prev.start_year, prev.start_month):
                raise EraTableError(f"Eras are not in chronological order: {cur.name} starts before {prev.name}")
            # Adjacent eras may share the boundary year, but never overlap by month
            if cur.start_year < prev.end_year or (
                cur.start_year == prev.end_year and cur.start_month < prev.end_month
            ):
                raise EraTableError(f"Era {cur.name} starts before {prev.name} ends")

    def _index_names(self) -> dict[str, EraSpan]:
        index: dict[str, EraSpan] = {}
        abbreviations: set[str] = set()
        for span in self._spans:
            for key in (span.name, span.kanji):
                if key is None:
                    continue
                if key in index:
                    raise EraTableError(f"Duplicate era name: {key!r}")
                index[key] = span
            if span.abbreviation:
                if span.abbreviation in abbreviations:
                    raise EraTableError(f"Duplicate era abbreviation: {span.abbreviation!r}")
                abbreviations.add(span.abbreviation)
        return index


def default_era_table(reference_year: int) -> EraTable:
    """Built-in table (Kansei onwards) with the current era closed at `reference_year`."""
    return EraTable.from_records(JAPANESE_ERAS, reference_year)
