"""Automatic rich output detection for the inventory table.

Decides whether the table is drawn with Rich box characters and colour or
as a plain ASCII grid suitable for pipes, files and ``grep``.

Detection priority:
1. ``IOC_INVENTORY_RICH`` env var: explicit override (``0``/``false``/``no``
   to disable, ``1``/``true``/``yes`` to force enable)
2. ``NO_COLOR`` env var: standard convention, disables rich
3. ``stdout.isatty()``: false in pipes and redirects, disables rich
"""

from __future__ import annotations

import os
import sys


def should_use_rich() -> bool:
    """Determine whether to use Rich styled output."""
    override = os.environ.get("IOC_INVENTORY_RICH", "").strip().lower()
    if override in ("0", "false", "no"):
        return False
    if override in ("1", "true", "yes"):
        return True

    if os.environ.get("NO_COLOR") is not None:
        return False

    try:
        return sys.stdout.isatty()
    except (AttributeError, ValueError):
        return False
