# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_nengo

import sys
from pathlib import Path

from loguru import logger

from coreason_nengo.config import settings

# Remove default handler
logger.remove()

# Sink 1: Stderr
# Format: Time | Level | Module:Function:Line - Message
logger.add(
    sys.stderr,
    level=settings.LOG_LEVEL,
    format=(
        "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
        "<level>{level: <8}</level> | "
        "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - "
        "<level>{message}</level>"
    ),
)

# Sink 2: File
# Rotation: 500 MB
# Retention: 10 days
# Serialization: JSON
# Enqueue: Async safe
if settings.LOG_FILE:
    logger.add(
        Path(settings.LOG_FILE),
        rotation="500 MB",
        retention="10 days",
        serialize=True,
        enqueue=True,
        level="DEBUG",
    )

__all__ = ["logger"]
