"""CLI interface for IOC Inventory."""

import logging

import click
from dotenv import load_dotenv

from ioc_inventory import __version__
from ioc_inventory.exceptions import InventoryError

# Load IOC_INVENTORY_* settings from a .env file if present
load_dotenv()

logger = logging.getLogger(__name__)


@click.command()
@click.argument("beamline")
@click.argument("pattern", required=False)
@click.option(
    "--redirect-table",
    type=click.Path(dir_okay=False),
    help="Redirect table file (env: IOC_INVENTORY_REDIRECT_TABLE).",
)
@click.option(
    "--work-root",
    help="Path prefix of work-in-progress IOCs (env: IOC_INVENTORY_WORK_ROOT).",
)
@click.option(
    "--builder-root",
    help=(
        "Builder descriptor directory, with a {beamline} placeholder "
        "(env: IOC_INVENTORY_BUILDER_ROOT)."
    ),
)
@click.option(
    "--unknown-version",
    help=(
        "Version shown for paths without release information "
        "(env: IOC_INVENTORY_UNKNOWN_VERSION). Defaults to '?', or 'WORK?' "
        "with --no-builder."
    ),
)
@click.option(
    "--no-builder",
    is_flag=True,
    help="Only list IOCs from the redirect table.",
)
@click.option("--paths", "show_path", is_flag=True, help="Show deployed paths.")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON.")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose logging.")
@click.option("--quiet", "-q", is_flag=True, help="Only log errors.")
@click.version_option(__version__, "--version", message="%(version)s")
def main(
    beamline: str,
    pattern: str | None,
    redirect_table: str | None,
    work_root: str | None,
    builder_root: str | None,
    unknown_version: str | None,
    no_builder: bool,
    show_path: bool,
    as_json: bool,
    verbose: bool,
    quiet: bool,
) -> None:
    """List the IOCs deployed for BEAMLINE.

    PATTERN selects IOC names and defaults to BEAMLINE. It can be any part
    of the IOC names to match, or a regex pattern.

    \b
    Examples:
      ioc-inventory BL07I                 All BL07I IOCs
      ioc-inventory BL07I 'BL07I.*EA.*'   Only the EA IOCs
      ioc-inventory BL07I --no-builder    Redirect table entries only
      ioc-inventory BL07I --json          Machine-readable output
    """
    from ioc_inventory.cli.logging import configure_cli_logging
    from ioc_inventory.cli.report import output_json, render_inventory
    from ioc_inventory.inventory import resolve_inventory
    from ioc_inventory.settings import InventorySettings

    configure_cli_logging(verbose=verbose, quiet=quiet)

    include_builder = not no_builder
    settings = InventorySettings.from_environment(
        include_builder=include_builder,
        redirect_table=redirect_table,
        work_root=work_root,
        builder_root=builder_root,
        unknown_version=unknown_version,
    )
    logger.debug("Settings: %s", settings)

    try:
        records = resolve_inventory(
            settings, beamline, pattern, include_builder=include_builder
        )
    except InventoryError as e:
        raise click.ClickException(str(e)) from e

    if as_json:
        output_json(records)
    else:
        render_inventory(records, show_path=show_path)


__all__ = ["main"]
