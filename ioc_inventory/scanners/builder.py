"""Builder descriptor scanner.

Each beamline has a builder support module whose ``etc/makeIocs`` directory
holds one ``<IOC>.xml`` descriptor per generated IOC, optionally with a
``<IOC>_README`` whose first line describes it.
"""

from __future__ import annotations

import logging
from pathlib import Path

from ioc_inventory.exceptions import BuilderDirectoryError
from ioc_inventory.models import BUILDER_VERSION, IocRecord
from ioc_inventory.patterns import compile_pattern
from ioc_inventory.scanners.readme import read_description
from ioc_inventory.settings import DEFAULT_BUILDER_ROOT

logger = logging.getLogger(__name__)

DESCRIPTOR_SUFFIX = ".xml"


def builder_directory(beamline: str, template: str = DEFAULT_BUILDER_ROOT) -> Path:
    """Resolve the descriptor directory for ``beamline`` from ``template``."""
    return Path(template.format(beamline=beamline))


def scan_builder_descriptors(directory: Path, pattern: str) -> dict[str, IocRecord]:
    """Find builder IOCs whose name matches ``pattern``.

    Args:
        directory: Builder ``makeIocs`` directory.
        pattern: Regular expression searched for in each descriptor stem.

    Returns:
        Mapping of IOC name to a ``BUILDER`` record with ``builder=True``.

    Raises:
        InvalidPatternError: If ``pattern`` is not a valid regular expression.
        BuilderDirectoryError: If the directory cannot be listed.
    """
    name_re = compile_pattern(pattern)

    try:
        file_names = sorted(entry.name for entry in directory.iterdir())
    except OSError as e:
        raise BuilderDirectoryError(
            f"Error reading builder IOCs from {directory}: {e}"
        ) from e

    iocs: dict[str, IocRecord] = {}
    for file_name in file_names:
        if not file_name.endswith(DESCRIPTOR_SUFFIX):
            continue
        name = file_name.split(".", 1)[0]
        if not name_re.search(name):
            logger.debug("Skipping builder descriptor %s", file_name)
            continue
        iocs[name] = IocRecord(
            name=name,
            version=BUILDER_VERSION,
            description=read_description(directory / f"{name}_README"),
            builder=True,
        )

    logger.info(
        "Builder directory %s: %d IOCs matched %r", directory, len(iocs), pattern
    )
    return iocs
