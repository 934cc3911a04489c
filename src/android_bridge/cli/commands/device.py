"""Device and configuration inspection commands."""

import logging

import click
from rich.console import Console

from ...core.device import AdbPlatform, is_adb_available
from ...core.errors import DeviceError
from ..display import display_config, display_devices, display_strategies
from .app import BridgeApp

console = Console()
logger = logging.getLogger(__name__)


@click.command("doctor")
@click.pass_obj
def doctor_command(app: BridgeApp) -> None:
    """Check that adb is installed and a device is connected."""
    if not is_adb_available(app.config.adb_path):
        console.print(f"[red]❌ adb not found: {app.config.adb_path}[/red]")
        raise click.exceptions.Exit(1)
    console.print(f"[green]✓[/green] adb found: {app.config.adb_path}")

    if not isinstance(app.platform, AdbPlatform):
        console.print("[yellow]⚠️ Not using an adb platform, skipping device check")
        return

    try:
        devices = app.platform.list_devices()
    except DeviceError as e:
        logger.debug("Device listing failed", exc_info=True)
        raise click.ClickException(str(e))

    display_devices(devices, selected=app.config.device_serial)
    if not any(state == "device" for _, state in devices):
        console.print("[red]❌ No ready device connected[/red]")
        raise click.exceptions.Exit(1)


@click.command("strategies")
@click.pass_obj
def strategies_command(app: BridgeApp) -> None:
    """List file browser strategies in the order they are tried."""
    display_strategies(app.launcher.strategies)


@click.command("status")
@click.pass_obj
def status_command(app: BridgeApp) -> None:
    """Show configuration and registered channels."""
    display_config(app.config, app.messenger.channels)
