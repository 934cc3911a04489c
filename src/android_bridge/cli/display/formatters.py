"""Display formatters and UI helpers for CLI."""

import logging
from typing import Any, List, Optional, Sequence, Tuple

from rich.console import Console
from rich.table import Table

from ...channels import Reply
from ...config import Config
from ...core.launcher import LaunchStrategy

console = Console()
logger = logging.getLogger(__name__)


def display_reply(reply: Reply) -> None:
    """Display a channel reply.

    Args:
        reply: Encoded reply from the messenger
    """
    if "success" in reply:
        console.print(f"[green]✓[/green] {reply['success']}")
    elif "error" in reply:
        error: dict[str, Any] = reply["error"]
        console.print(f"[red]❌ {error['code']}[/red]: {error.get('message') or ''}")
        details = error.get("details")
        if details:
            console.print(f"   [dim]Details: {details}[/dim]")
    else:
        console.print("[yellow]⚠️ Not implemented[/yellow]")


def display_strategies(strategies: Sequence[LaunchStrategy]) -> None:
    """Display the strategy chain in priority order."""
    table = Table(title="File Browser Strategies", show_header=True)
    table.add_column("#", style="dim", justify="right")
    table.add_column("Strategy", style="cyan", no_wrap=True)
    table.add_column("Description", style="green")

    for position, strategy in enumerate(strategies, start=1):
        table.add_row(str(position), strategy.strategy_id, strategy.description)

    console.print(table)


def display_devices(
    devices: List[Tuple[str, str]], selected: Optional[str] = None
) -> None:
    """Display devices reported by adb.

    Args:
        devices: ``(serial, state)`` pairs
        selected: Configured serial, highlighted when present
    """
    if not devices:
        console.print("[yellow]⚠️ No devices attached[/yellow]")
        return

    table = Table(title="Connected Devices", show_header=True)
    table.add_column("Serial", style="cyan", no_wrap=True)
    table.add_column("State", style="magenta")

    for serial, state in devices:
        marker = " (selected)" if serial == selected else ""
        style = "green" if state == "device" else "yellow"
        table.add_row(f"{serial}{marker}", f"[{style}]{state}[/{style}]")

    console.print(table)


def display_config(config: Config, channels: List[str]) -> None:
    """Display configuration and registered channels."""
    table = Table(title="Android Bridge Configuration")
    table.add_column("Setting", style="cyan", no_wrap=True)
    table.add_column("Value", style="magenta")

    table.add_row("adb", config.adb_path)
    table.add_row("Device", config.device_serial or "(adb default)")
    table.add_row("adb Timeout", f"{config.adb_timeout:g}s")
    table.add_row("Downloads Directory", config.downloads_dir)
    table.add_row("Documents URI", config.documents_uri)
    table.add_row("File Managers", "\n".join(config.file_manager_packages) or "-")
    scan_timeout = config.scan_timeout
    table.add_row(
        "Scan Timeout", f"{scan_timeout:g}s" if scan_timeout is not None else "none"
    )
    table.add_row("Channels", "\n".join(channels))

    console.print(table)
