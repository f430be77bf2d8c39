# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_nengo


class EraError(ValueError):
    """
    Base class for every era conversion failure.
    Subclasses ValueError so callers that already guard conversions with
    `except ValueError` keep working.
    """


class EraNotFoundError(EraError):
    """A Gregorian year (and month) matches no era in the table."""

    def __init__(self, message: str = "The passed arguments do not match any existing eras.") -> None:
        super().__init__(message)


class UnknownEraError(EraError):
    def __init__(self, era_name: str) -> None:
        self.era_name = era_name
        super().__init__(f"Unknown era name: {era_name!r}")


class EraYearOutOfRangeError(EraError):
    def __init__(self, era_name: str, era_year: int, max_year: int | None) -> None:
        self.era_name = era_name
        self.era_year = era_year
        self.max_year = max_year
        if max_year is None:
            bounds = "1 or later"
        else:
            bounds = f"between 1 and {max_year}"
        super().__init__(f"Era year {era_year} is out of range for {era_name} (must be {bounds})")


class InvalidInputError(EraError):
    """Raised by the input verifier for wrongly typed or out-of-domain primitives."""


class EraTableError(EraError):
    """The era table violates ordering, overlap or uniqueness rules."""


class EraLabelParseError(EraError):
    def __init__(self, label: str) -> None:
        self.label = label
        super().__init__(f"Could not parse era label: {label!r}")
