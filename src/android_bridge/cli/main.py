"""Command-line interface for the Android bridge.

This is the main entry point that delegates to command modules.
"""

from pathlib import Path
from typing import Any, Optional

import click

from ..utils.logging_config import (
    configure_third_party_loggers,
    set_log_level,
    setup_logging,
)
from .commands import (
    BridgeApp,
    call_command,
    doctor_command,
    open_file_manager_command,
    scan_command,
    status_command,
    strategies_command,
)


@click.group()
@click.option(
    "--log-level",
    default="WARNING",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]),
    help="Set logging level",
)
@click.option("--log-file", type=click.Path(), help="Log to file")
@click.option("--debug", is_flag=True, help="Shortcut for --log-level DEBUG")
@click.option(
    "-s",
    "--serial",
    default=None,
    help="Device serial (overrides ANDROID_BRIDGE_DEVICE_SERIAL)",
)
@click.pass_context
def cli(
    ctx: Any,
    log_level: str,
    log_file: str,
    debug: bool,
    serial: Optional[str],
) -> None:
    """Android Bridge.

    Index files in the device media store and open a file browser on a
    connected Android device.
    """
    setup_logging(log_level=log_level, log_file=Path(log_file) if log_file else None)
    configure_third_party_loggers()
    if debug:
        set_log_level("DEBUG")

    # Tests inject a ready-made app through ``obj``
    if ctx.obj is not None:
        return

    config_override = {}
    if serial:
        config_override["device_serial"] = serial

    ctx.obj = BridgeApp(config_override)


cli.add_command(scan_command)
cli.add_command(open_file_manager_command)
cli.add_command(call_command)
cli.add_command(doctor_command)
cli.add_command(strategies_command)
cli.add_command(status_command)


if __name__ == "__main__":
    cli()
