# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_nengo

import re
import unicodedata
from functools import lru_cache

from coreason_nengo.era_table import EraTable
from coreason_nengo.schemas import EraSpan

# "Gannen" / 元年 is the first year of an era
GANNEN_TOKENS = {"gannen", "元", "元年"}


def build_era_label_pattern(table: EraTable) -> re.Pattern[str]:
    """
    Regex matching "<era alias><optional space><year>", with aliases taken from the table.
    Longest aliases come first so "Heisei" wins over the abbreviation "H".
    An alias may not follow a Latin letter, so "Summer 3" is not read as "R3";
    kanji aliases may still follow other kanji ("承認日令和2年").
    """
    aliases = sorted(table.aliases(), key=len, reverse=True)
    era_pattern = "(?<![A-Za-z])(?P<era>" + "|".join(re.escape(a) for a in aliases) + ")"
    year_pattern = r"(?P<year>\d+|Gannen|元)年?"
    return re.compile(f"{era_pattern}\\s*{year_pattern}", re.IGNORECASE)


@lru_cache(maxsize=16)
def _label_matcher(table: EraTable) -> tuple[re.Pattern[str], dict[str, EraSpan]]:
    # EraTable is immutable and hashed by identity, so one compiled pattern per table
    return build_era_label_pattern(table), table.aliases()


def parse_era_label(text: str | None, table: EraTable) -> tuple[EraSpan, int] | None:
    """
    Parses an era label such as "Reiwa 3", "H31", "令和元年" or "Showa Gannen".
    Supports English and Kanji era names and full-width digits.
    Returns (era, era_year) or None if parsing fails.
    """
    if not text:
        return None

    # NFKC folds full-width digits and letters to ASCII
    clean_str = unicodedata.normalize("NFKC", text).strip()

    pattern, aliases = _label_matcher(table)
    match = pattern.search(clean_str)
    if not match:
        return None

    span = aliases.get(match.group("era").lower())
    if span is None:  # pragma: no cover
        return None

    year_str = match.group("year")
    if year_str.lower() in GANNEN_TOKENS:
        era_year = 1
    else:
        era_year = int(year_str)

    return span, era_year
