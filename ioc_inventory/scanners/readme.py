"""README description lookup shared by both scanners."""

from __future__ import annotations

import logging
from pathlib import Path

logger = logging.getLogger(__name__)


def read_description(readme: Path) -> str:
    """Return the first line of ``readme``, or an empty string.

    A missing or unreadable README is not an error: many IOCs have none.
    """
    try:
        with readme.open(encoding="utf-8", errors="replace") as f:
            line = f.readline()
    except OSError as e:
        logger.debug("No description from %s: %s", readme, e)
        return ""
    return line.rstrip("\r\n")
