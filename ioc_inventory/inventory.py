"""Inventory resolution: scan, merge and sort IOC records.

The redirect table is the primary source. Builder descriptors add IOCs that
are not configured yet and mark configured ones as builder generated.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from functools import reduce
from types import MappingProxyType

from ioc_inventory.models import IocRecord, combine
from ioc_inventory.scanners import (
    builder_directory,
    scan_builder_descriptors,
    scan_redirect_table,
)
from ioc_inventory.settings import InventorySettings

logger = logging.getLogger(__name__)


def _fold_record(
    merged: Mapping[str, IocRecord], record: IocRecord
) -> Mapping[str, IocRecord]:
    existing = merged.get(record.name)
    updated = record if existing is None else combine(existing, record)
    return MappingProxyType({**merged, record.name: updated})


def merge_records(
    configured: Mapping[str, IocRecord],
    builder: Mapping[str, IocRecord],
) -> Mapping[str, IocRecord]:
    """Merge builder records into configured records by name.

    Neither input is modified; the result is a new read-only mapping.
    """
    return reduce(_fold_record, builder.values(), MappingProxyType(dict(configured)))


def sorted_records(records: Mapping[str, IocRecord]) -> list[IocRecord]:
    """Records ordered by IOC name."""
    return sorted(records.values(), key=lambda record: record.name)


def resolve_inventory(
    settings: InventorySettings,
    beamline: str,
    pattern: str | None = None,
    *,
    include_builder: bool = True,
) -> list[IocRecord]:
    """Resolve the IOC inventory for a beamline.

    Args:
        settings: Filesystem locations and version policy.
        beamline: Beamline identifier, e.g. ``BL07I``.
        pattern: Name query or regex; defaults to ``beamline`` when None.
            An empty pattern matches every IOC.
        include_builder: Also scan the beamline's builder descriptors.

    Returns:
        Merged records sorted by name.

    Raises:
        InventoryError: If a required file or directory cannot be read, or
            the pattern is invalid.
    """
    query = pattern if pattern is not None else beamline

    configured = scan_redirect_table(
        settings.redirect_table,
        query,
        work_root=settings.work_root,
        unknown_version=settings.unknown_version,
    )

    if include_builder:
        directory = builder_directory(beamline, settings.builder_root)
        builder = scan_builder_descriptors(directory, query)
    else:
        builder = {}

    merged = merge_records(configured, builder)
    logger.info(
        "Resolved %d IOCs for %s (%d configured, %d builder)",
        len(merged),
        beamline,
        len(configured),
        len(builder),
    )
    return sorted_records(merged)
