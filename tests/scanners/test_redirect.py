"""Tests for the redirect table scanner."""

from __future__ import annotations

from pathlib import Path

import pytest

from ioc_inventory.exceptions import InvalidPatternError, RedirectTableError
from ioc_inventory.scanners.redirect import readme_for_path, scan_redirect_table


def _scan(deployment: Path, query: str = "BL07I", **kwargs):
    kwargs.setdefault("work_root", str(deployment / "work"))
    return scan_redirect_table(deployment / "redirect_table", query, **kwargs)


class TestScanRedirectTable:
    def test_matching_lines_only(self, deployment):
        """Each matching line yields one record, other lines none."""
        iocs = _scan(deployment)
        assert sorted(iocs) == [
            "BL07I-DI-IOC-01",
            "BL07I-MO-IOC-01",
            "BL07I-PS-IOC-03",
            "BL07I-VA-IOC-02",
        ]

    def test_release_version(self, deployment):
        ioc = _scan(deployment)["BL07I-DI-IOC-01"]
        assert ioc.version == "3-14-12-7"
        assert ioc.path == "/dls_sw/prod/R3-14-12-7/support/module/bin"
        assert ioc.builder is False

    def test_ioc_version_from_deployment(self, deployment):
        assert _scan(deployment)["BL07I-MO-IOC-01"].version == "2-1"

    def test_work_version(self, deployment):
        assert _scan(deployment)["BL07I-VA-IOC-02"].version == "WORK"

    def test_unknown_version(self, deployment):
        assert _scan(deployment)["BL07I-PS-IOC-03"].version == "?"
        iocs = _scan(deployment, unknown_version="WORK?")
        assert iocs["BL07I-PS-IOC-03"].version == "WORK?"

    def test_description_from_readme(self, deployment):
        iocs = _scan(deployment)
        assert iocs["BL07I-MO-IOC-01"].description == "Motion controller IOC"
        assert iocs["BL07I-VA-IOC-02"].description == "Vacuum IOC (work copy)"

    def test_missing_readme_gives_empty_description(self, deployment):
        assert _scan(deployment)["BL07I-DI-IOC-01"].description == ""

    def test_other_beamline_query(self, deployment):
        iocs = _scan(deployment, "BL03I")
        assert list(iocs) == ["BL03I-DI-IOC-09"]
        assert iocs["BL03I-DI-IOC-09"].version == "1-0"

    def test_regex_query(self, deployment):
        assert list(_scan(deployment, "BL07I-(MO|VA)")) == [
            "BL07I-MO-IOC-01",
            "BL07I-VA-IOC-02",
        ]

    def test_last_line_wins(self, tmp_path):
        table = tmp_path / "redirect_table"
        table.write_text(
            "BL07I-DI-IOC-01 /dls_sw/prod/1-0/bin\n"
            "BL07I-DI-IOC-01 /dls_sw/prod/1-1/bin\n"
        )
        iocs = scan_redirect_table(table, "BL07I")
        assert iocs["BL07I-DI-IOC-01"].version == "1-1"

    def test_crlf_lines(self, tmp_path):
        table = tmp_path / "redirect_table"
        table.write_bytes(b"BL07I-DI-IOC-01 /dls_sw/prod/1-0/bin\r\n")
        assert scan_redirect_table(table, "BL07I")["BL07I-DI-IOC-01"].version == "1-0"

    def test_empty_table(self, tmp_path):
        table = tmp_path / "redirect_table"
        table.write_text("")
        assert scan_redirect_table(table, "BL07I") == {}

    def test_missing_table_raises(self, tmp_path):
        missing = tmp_path / "nope"
        with pytest.raises(RedirectTableError, match="redirect table"):
            scan_redirect_table(missing, "BL07I")

    def test_table_is_directory_raises(self, tmp_path):
        with pytest.raises(RedirectTableError):
            scan_redirect_table(tmp_path, "BL07I")

    def test_invalid_query_raises(self, deployment):
        with pytest.raises(InvalidPatternError):
            _scan(deployment, "BL07I[")


class TestReadmeForPath:
    def test_strips_bin(self):
        assert readme_for_path(
            "/dls_sw/prod/ioc/BL07I-DI-IOC-01/4-3/bin/linux-x86_64/st.boot"
        ) == Path("/dls_sw/prod/ioc/BL07I-DI-IOC-01/4-3/README")

    def test_without_bin(self):
        assert readme_for_path("/opt/ioc") == Path("/opt/ioc/README")
