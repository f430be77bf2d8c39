# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_nengo

from pydantic import BaseModel, ConfigDict, Field, model_validator


class EraSpan(BaseModel):
    """
    A single Japanese era expressed as a Gregorian year/month span.

    The start and end month are month granular: an era that ends in May and
    a successor that starts in May share that boundary year.
    """

    model_config = ConfigDict(frozen=True, extra="ignore", str_strip_whitespace=True)

    name: str = Field(min_length=1)
    start_year: int
    end_year: int
    start_month: int = Field(ge=1, le=12)
    end_month: int = Field(ge=1, le=12)
    kanji: str | None = Field(default=None, min_length=1)
    abbreviation: str | None = Field(default=None, min_length=1)

    @model_validator(mode="after")
    def check_year_order(self) -> "EraSpan":
        if self.start_year > self.end_year:
            raise ValueError(f"start_year {self.start_year} is after end_year {self.end_year} for era {self.name}")
        return self

    @property
    def is_single_year(self) -> bool:
        return self.start_year == self.end_year

    @property
    def year_count(self) -> int:
        # Era years run 1..year_count; boundary years count for both eras.
        return self.end_year - self.start_year + 1

    def era_year_of(self, gregorian_year: int) -> int:
        return gregorian_year - self.start_year + 1

    def gregorian_year_of(self, era_year: int) -> int:
        return self.start_year + (era_year - 1)
