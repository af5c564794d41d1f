"""IOC Inventory - list the IOCs deployed for a beamline."""

import importlib.metadata

try:
    __version__ = importlib.metadata.version("ioc-inventory")
except importlib.metadata.PackageNotFoundError:  # pragma: no cover - source checkout
    __version__ = "0.0.0"

__all__ = ["__version__"]
