"""Shared fixtures: a miniature beamline deployment under tmp_path."""

from __future__ import annotations

from pathlib import Path

import pytest

from ioc_inventory import settings
from ioc_inventory.settings import InventorySettings

_ENV_VARS = (
    "IOC_INVENTORY_REDIRECT_TABLE",
    "IOC_INVENTORY_WORK_ROOT",
    "IOC_INVENTORY_BUILDER_ROOT",
    "IOC_INVENTORY_UNKNOWN_VERSION",
    "NO_COLOR",
)


@pytest.fixture(autouse=True)
def _clean_environment(monkeypatch):
    """Isolate tests from the caller's IOC_INVENTORY_* settings."""
    for var in _ENV_VARS:
        monkeypatch.delenv(var, raising=False)
    monkeypatch.setenv("IOC_INVENTORY_RICH", "0")
    settings._load_pyproject_settings.cache_clear()


@pytest.fixture
def deployment(tmp_path) -> Path:
    """Build a redirect table and a BL07I builder directory.

    Layout::

        redirect_table
        prod/ioc/BL07I/BL07I-MO-IOC-01/2-1/README
        work/BL07I-VA-IOC-02/README
        support/BL07I-BUILDER/etc/makeIocs/{*.xml, *_README}
    """
    prod = tmp_path / "prod"
    work = tmp_path / "work"

    motion = prod / "ioc" / "BL07I" / "BL07I-MO-IOC-01" / "2-1"
    motion.mkdir(parents=True)
    (motion / "README").write_text("Motion controller IOC\nSecond line\n")

    vacuum = work / "BL07I-VA-IOC-02"
    vacuum.mkdir(parents=True)
    (vacuum / "README").write_text("Vacuum IOC (work copy)\n")

    table = tmp_path / "redirect_table"
    table.write_text(
        "# redirector table\n"
        f"BL07I-MO-IOC-01   {motion}/bin/linux-x86_64/stBL07I-MO-IOC-01.boot\n"
        f"BL07I-VA-IOC-02   {vacuum}/bin/linux-x86_64/stBL07I-VA-IOC-02.boot\n"
        "BL07I-DI-IOC-01   /dls_sw/prod/R3-14-12-7/support/module/bin\n"
        "BL03I-DI-IOC-09   /dls_sw/prod/1-0/bin\n"
        "BL07I-PS-IOC-03   /somewhere/else/bin\n"
        "this line is malformed\n"
    )

    makeiocs = tmp_path / "support" / "BL07I-BUILDER" / "etc" / "makeIocs"
    makeiocs.mkdir(parents=True)
    (makeiocs / "BL07I-EA-IOC-05.xml").write_text("<components/>\n")
    (makeiocs / "BL07I-EA-IOC-05_README").write_text("Eiger detector IOC\n")
    (makeiocs / "BL07I-MO-IOC-01.xml").write_text("<components/>\n")
    (makeiocs / "BL07I-MO-IOC-01_README").write_text("Builder motion IOC\n")
    (makeiocs / "BL07I-DI-IOC-01.xml").write_text("<components/>\n")
    (makeiocs / "BL03I-EA-IOC-01.xml").write_text("<components/>\n")
    (makeiocs / "Makefile").write_text("include $(TOP)/configure/RULES\n")
    (makeiocs / "BL07I-VA-IOC-02.xml.bak").write_text("<components/>\n")

    return tmp_path


@pytest.fixture
def inventory_settings(deployment) -> InventorySettings:
    """Settings pointing at the ``deployment`` tree."""
    return InventorySettings(
        redirect_table=deployment / "redirect_table",
        work_root=str(deployment / "work"),
        builder_root=str(deployment / "support" / "{beamline}-BUILDER" / "etc" / "makeIocs"),
    )
