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

# Japanese eras in chronological order, Kansei (1789) onwards.
# Start/end months are the Gregorian month of the proclamation of the era and of its successor.
# Pre-1873 boundaries are converted from the lunisolar calendar and are month granular only.
# The last record is the current era: end_year None is filled with the reference year at load time.
JAPANESE_ERAS: list[dict[str, Any]] = [
    {"name": "Kansei", "kanji": "寛政", "start_year": 1789, "start_month": 2, "end_year": 1801, "end_month": 3},
    {"name": "Kyowa", "kanji": "享和", "start_year": 1801, "start_month": 3, "end_year": 1804, "end_month": 3},
    {"name": "Bunka", "kanji": "文化", "start_year": 1804, "start_month": 3, "end_year": 1818, "end_month": 5},
    {"name": "Bunsei", "kanji": "文政", "start_year": 1818, "start_month": 5, "end_year": 1831, "end_month": 1},
    {"name": "Tenpo", "kanji": "天保", "start_year": 1831, "start_month": 1, "end_year": 1845, "end_month": 1},
    {"name": "Koka", "kanji": "弘化", "start_year": 1845, "start_month": 1, "end_year": 1848, "end_month": 4},
    {"name": "Kaei", "kanji": "嘉永", "start_year": 1848, "start_month": 4, "end_year": 1855, "end_month": 1},
    {"name": "Ansei", "kanji": "安政", "start_year": 1855, "start_month": 1, "end_year": 1860, "end_month": 4},
    {"name": "Man'en", "kanji": "万延", "start_year": 1860, "start_month": 4, "end_year": 1861, "end_month": 3},
    {"name": "Bunkyu", "kanji": "文久", "start_year": 1861, "start_month": 3, "end_year": 1864, "end_month": 3},
    {"name": "Genji", "kanji": "元治", "start_year": 1864, "start_month": 3, "end_year": 1865, "end_month": 5},
    {"name": "Keio", "kanji": "慶応", "start_year": 1865, "start_month": 5, "end_year": 1868, "end_month": 10},
    {
        "name": "Meiji",
        "kanji": "明治",
        "abbreviation": "M",
        "start_year": 1868,
        "start_month": 10,
        "end_year": 1912,
        "end_month": 7,
    },
    {
        "name": "Taisho",
        "kanji": "大正",
        "abbreviation": "T",
        "start_year": 1912,
        "start_month": 7,
        "end_year": 1926,
        "end_month": 12,
    },
    {
        "name": "Showa",
        "kanji": "昭和",
        "abbreviation": "S",
        "start_year": 1926,
        "start_month": 12,
        "end_year": 1989,
        "end_month": 1,
    },
    {
        "name": "Heisei",
        "kanji": "平成",
        "abbreviation": "H",
        "start_year": 1989,
        "start_month": 1,
        "end_year": 2019,
        "end_month": 5,
    },
    {
        "name": "Reiwa",
        "kanji": "令和",
        "abbreviation": "R",
        "start_year": 2019,
        "start_month": 5,
        "end_year": None,
        "end_month": None,
    },
]
