"""Scanners producing partial IOC records from files on disk."""

from ioc_inventory.scanners.builder import builder_directory, scan_builder_descriptors
from ioc_inventory.scanners.readme import read_description
from ioc_inventory.scanners.redirect import readme_for_path, scan_redirect_table

__all__ = [
    "builder_directory",
    "read_description",
    "readme_for_path",
    "scan_builder_descriptors",
    "scan_redirect_table",
]
