"""Project settings loaded from pyproject.toml [tool.ioc-inventory] section.

Keys:
  redirect-table  : redirector table mapping IOC names to deployed paths
  work-root       : prefix of work-in-progress (non-released) deployments
  builder-root    : builder descriptor directory template, ``{beamline}`` placeholder
  unknown-version : version shown when a path carries no release information

All settings support environment variable overrides (IOC_INVENTORY_* prefix),
which may also be supplied through a ``.env`` file.
"""

import os
from dataclasses import dataclass
from functools import cache
from pathlib import Path

import tomllib

DEFAULT_REDIRECT_TABLE = "/dls_sw/prod/etc/redirector/redirect_table"
DEFAULT_WORK_ROOT = "/dls_sw/work"
DEFAULT_BUILDER_ROOT = "/dls_sw/work/R3.14.12.7/support/{beamline}-BUILDER/etc/makeIocs"

# Sentinel for "no version info, not a work path". The redirect-only listing
# historically printed WORK? while the merged listing prints ?.
UNKNOWN_VERSION = "?"
UNKNOWN_VERSION_NO_BUILDER = "WORK?"


@cache
def _load_pyproject_settings() -> dict:
    """Load settings from pyproject.toml [tool.ioc-inventory] section.

    Returns:
        Dictionary of settings from pyproject.toml, empty dict if not found.
    """
    current = Path(__file__).resolve().parent
    while current != current.parent:
        candidate = current / "pyproject.toml"
        if candidate.exists():
            break
        current = current.parent
    else:
        return {}

    try:
        data = tomllib.loads(candidate.read_text())
    except (OSError, tomllib.TOMLDecodeError):
        return {}
    return data.get("tool", {}).get("ioc-inventory", {})


def _get_setting(env_var: str, key: str, default: str) -> str:
    """Resolve one string setting: env var → pyproject key → default."""
    if env := os.getenv(env_var):
        return env
    value = _load_pyproject_settings().get(key)
    return str(value) if value is not None else default


def get_redirect_table() -> Path:
    """Get the redirect table path.

    Priority: IOC_INVENTORY_REDIRECT_TABLE env → redirect-table → DLS default.
    """
    return Path(
        _get_setting(
            "IOC_INVENTORY_REDIRECT_TABLE", "redirect-table", DEFAULT_REDIRECT_TABLE
        )
    )


def get_work_root() -> str:
    """Get the work-in-progress deployment prefix.

    Priority: IOC_INVENTORY_WORK_ROOT env → work-root → /dls_sw/work.
    """
    return _get_setting("IOC_INVENTORY_WORK_ROOT", "work-root", DEFAULT_WORK_ROOT)


def get_builder_root() -> str:
    """Get the builder directory template (contains ``{beamline}``).

    Priority: IOC_INVENTORY_BUILDER_ROOT env → builder-root → DLS default.
    """
    return _get_setting(
        "IOC_INVENTORY_BUILDER_ROOT", "builder-root", DEFAULT_BUILDER_ROOT
    )


def get_unknown_version(include_builder: bool = True) -> str:
    """Get the sentinel used for paths with no version and no work prefix.

    Priority: IOC_INVENTORY_UNKNOWN_VERSION env → unknown-version →
    ``?`` (``WORK?`` when builder descriptors are not scanned).
    """
    default = UNKNOWN_VERSION if include_builder else UNKNOWN_VERSION_NO_BUILDER
    return _get_setting("IOC_INVENTORY_UNKNOWN_VERSION", "unknown-version", default)


@dataclass(frozen=True)
class InventorySettings:
    """Resolved filesystem locations and policy for one inventory run.

    Attributes:
        redirect_table: Path of the redirector table file.
        work_root: Path prefix marking work-in-progress deployments.
        builder_root: Builder directory template with a ``{beamline}`` field.
        unknown_version: Version sentinel for unclassifiable paths.
    """

    redirect_table: Path
    work_root: str = DEFAULT_WORK_ROOT
    builder_root: str = DEFAULT_BUILDER_ROOT
    unknown_version: str = UNKNOWN_VERSION

    @classmethod
    def from_environment(
        cls,
        *,
        include_builder: bool = True,
        redirect_table: str | Path | None = None,
        work_root: str | None = None,
        builder_root: str | None = None,
        unknown_version: str | None = None,
    ) -> "InventorySettings":
        """Build settings, letting explicit arguments win over configuration."""
        return cls(
            redirect_table=Path(redirect_table)
            if redirect_table
            else get_redirect_table(),
            work_root=work_root or get_work_root(),
            builder_root=builder_root or get_builder_root(),
            unknown_version=unknown_version
            or get_unknown_version(include_builder=include_builder),
        )
