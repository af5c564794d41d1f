"""IOC records and the rules for combining partial records."""

from __future__ import annotations

from dataclasses import asdict, dataclass, replace
from typing import Any

BUILDER_VERSION = "BUILDER"
WORK_VERSION = "WORK"


@dataclass(frozen=True, order=True)
class IocRecord:
    """A single IOC, possibly only partially resolved.

    Ordering compares ``name`` first, so sorting a list of records sorts it
    by name.

    Attributes:
        name: IOC name, the unique key (e.g. ``BL07I-DI-IOC-01``).
        version: Release version, ``WORK``, ``BUILDER`` or an unknown sentinel.
        description: First line of the IOC's README, empty if none.
        path: Deployed path from the redirect table, if configured.
        builder: True when the IOC has a builder descriptor.
    """

    name: str
    version: str
    description: str = ""
    path: str | None = None
    builder: bool = False

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


def combine(primary: IocRecord, secondary: IocRecord) -> IocRecord:
    """Combine two partial records describing the same IOC.

    Fields come from ``primary`` except the builder flag, which is the OR of
    both, and an empty description, which ``secondary`` may fill.

    Raises:
        ValueError: If the records have different names.
    """
    if primary.name != secondary.name:
        raise ValueError(
            f"Cannot combine records for different IOCs: "
            f"{primary.name!r} and {secondary.name!r}"
        )
    return replace(
        primary,
        description=primary.description or secondary.description,
        builder=primary.builder or secondary.builder,
    )
