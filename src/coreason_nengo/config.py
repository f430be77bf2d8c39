# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_nengo

import datetime

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.
    """

    # Era resolution
    # The "present year" that marks the open-ended current era. None means today's year.
    NENGO_REFERENCE_YEAR: int | None = None
    # Optional JSON file with era records replacing the built-in table
    ERA_TABLE_PATH: str | None = None

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FILE: str | None = "logs/app.log"  # None disables the JSON file sink

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


settings = Settings()


def current_reference_year(override: int | None = None) -> int:
    """
    Returns the reference year used to recognise the current era.
    Precedence: explicit override, NENGO_REFERENCE_YEAR, today's calendar year.
    """
    if override is not None:
        return override
    if settings.NENGO_REFERENCE_YEAR is not None:
        return settings.NENGO_REFERENCE_YEAR
    return datetime.date.today().year
