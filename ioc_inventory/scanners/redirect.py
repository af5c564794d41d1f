"""Redirect table scanner.

The redirector table lists every IOC at the facility with the path it boots
from. Lines whose name contains the query become configured IOC records;
everything else in the file is ignored.
"""

from __future__ import annotations

import logging
from pathlib import Path

from ioc_inventory.exceptions import RedirectTableError
from ioc_inventory.models import IocRecord
from ioc_inventory.patterns import build_redirect_pattern, classify_version
from ioc_inventory.scanners.readme import read_description
from ioc_inventory.settings import DEFAULT_WORK_ROOT, UNKNOWN_VERSION

logger = logging.getLogger(__name__)


def readme_for_path(path: str) -> Path:
    """README at the root of a deployed IOC, i.e. the part before ``/bin/``."""
    return Path(path.split("/bin/", 1)[0]) / "README"


def scan_redirect_table(
    table_path: Path,
    query: str,
    *,
    work_root: str = DEFAULT_WORK_ROOT,
    unknown_version: str = UNKNOWN_VERSION,
) -> dict[str, IocRecord]:
    """Find configured IOCs whose name contains ``query``.

    Args:
        table_path: Redirect table file.
        query: Literal substring or regular expression matched inside names.
        work_root: Prefix identifying work-in-progress deployments.
        unknown_version: Version used when the path carries no information.

    Returns:
        Mapping of IOC name to record. Later lines win for repeated names.

    Raises:
        InvalidPatternError: If ``query`` is not a valid regular expression.
        RedirectTableError: If the table cannot be opened or read.
    """
    line_re = build_redirect_pattern(query)

    iocs: dict[str, IocRecord] = {}
    skipped = 0
    try:
        with table_path.open(encoding="utf-8", errors="replace") as f:
            for line in f:
                match = line_re.match(line.rstrip("\r\n"))
                if match is None:
                    skipped += 1
                    continue
                name = match.group("name")
                path = match.group("path")
                iocs[name] = IocRecord(
                    name=name,
                    version=classify_version(path, work_root, unknown_version),
                    description=read_description(readme_for_path(path)),
                    path=path,
                )
    except OSError as e:
        raise RedirectTableError(
            f"Error reading redirect table {table_path}: {e}"
        ) from e

    logger.info(
        "Redirect table %s: %d IOCs matched %r (%d lines skipped)",
        table_path,
        len(iocs),
        query,
        skipped,
    )
    return iocs
