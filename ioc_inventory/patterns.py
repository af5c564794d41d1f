"""Regular expressions for redirect table lines and IOC versions.

Redirect table lines look like::

    BL07I-DI-IOC-01    /dls_sw/prod/R3.14.12.7/ioc/BL07I/BL07I-DI-IOC-01/4-3/bin/...

The IOC name is any whitespace-free token containing the user query, and the
version is the first dash-delimited numeric path segment (``4-3``).
"""

from __future__ import annotations

import re

from ioc_inventory.exceptions import InvalidPatternError
from ioc_inventory.models import WORK_VERSION

__all__ = [
    "compile_pattern",
    "build_redirect_pattern",
    "classify_version",
    "VERSION_RE",
]

# Optional R prefix covers release directories such as /R3-14-12-7/.
VERSION_RE = re.compile(r"/R?(?P<version>\d+(?:-\d+)+)/")


def compile_pattern(pattern: str) -> re.Pattern[str]:
    """Compile a user supplied pattern.

    Raises:
        InvalidPatternError: If the pattern is not a valid regular expression.
    """
    try:
        return re.compile(pattern)
    except re.error as e:
        raise InvalidPatternError(f"Invalid pattern {pattern!r}: {e}") from e


def build_redirect_pattern(query: str) -> re.Pattern[str]:
    """Build the ``<name> <path>`` line pattern for names containing ``query``."""
    # Validate the query on its own so the error names the user's input.
    compile_pattern(query)
    return compile_pattern(rf"^(?P<name>\S*(?:{query})\S*)\s+(?P<path>\S+)$")


def classify_version(path: str, work_root: str, unknown_version: str) -> str:
    """Classify the version of an IOC from its deployed path.

    Returns the numeric release segment if present, ``WORK`` for paths under
    ``work_root``, otherwise ``unknown_version``.
    """
    if match := VERSION_RE.search(path):
        return match.group("version")
    if path.startswith(work_root):
        return WORK_VERSION
    return unknown_version
