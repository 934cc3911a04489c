"""Commands that go through the bridge channels."""

import logging
from typing import Optional, Tuple

import click
from rich.console import Console

from ...channels import OPEN_FILE_MANAGER, SCAN_FILE, Reply
from ...core.completion import FutureTimeoutError
from ..display import display_reply
from .app import BridgeApp

console = Console()
logger = logging.getLogger(__name__)


def _finish(reply: Reply) -> None:
    """Print a reply and exit non-zero on error."""
    display_reply(reply)
    if "error" in reply:
        raise click.exceptions.Exit(1)


@click.command("scan")
@click.argument("path")
@click.option(
    "--timeout",
    type=float,
    default=None,
    help="Seconds to wait for the media store (default: from config, else forever)",
)
@click.pass_obj
def scan_command(app: BridgeApp, path: str, timeout: Optional[float]) -> None:
    """Ask the device media store to index PATH.

    Examples:
        android-bridge scan /storage/emulated/0/Download/report.pdf
    """
    wait = timeout if timeout is not None else app.config.scan_timeout
    try:
        with console.status(f"[bold green]Scanning {path}..."):
            reply = app.call(
                app.config.media_scanner_channel,
                SCAN_FILE,
                {"path": path},
                timeout=wait,
            )
    except FutureTimeoutError:
        raise click.ClickException(f"No scan result from the device after {wait}s")
    _finish(reply)


@click.command("open-file-manager")
@click.pass_obj
def open_file_manager_command(app: BridgeApp) -> None:
    """Open a file browser on the device."""
    reply = app.call(app.config.file_manager_channel, OPEN_FILE_MANAGER)
    _finish(reply)


def _parse_arguments(pairs: Tuple[str, ...]) -> dict:
    arguments = {}
    for pair in pairs:
        key, sep, value = pair.partition("=")
        if not sep or not key:
            raise click.BadParameter(
                f"Expected key=value, got {pair!r}", param_hint="--arg"
            )
        arguments[key] = value
    return arguments


@click.command("call")
@click.argument("channel")
@click.argument("method")
@click.option(
    "-a",
    "--arg",
    "pairs",
    multiple=True,
    help="Method argument as key=value (repeatable)",
)
@click.option("--timeout", type=float, default=None, help="Seconds to wait")
@click.pass_obj
def call_command(
    app: BridgeApp,
    channel: str,
    method: str,
    pairs: Tuple[str, ...],
    timeout: Optional[float],
) -> None:
    """Invoke METHOD on CHANNEL and print the raw reply.

    Examples:
        android-bridge call com.allworkdone.upflow.file_manager openFileManager

        android-bridge call com.allworkdone.upflow.media_scanner scanFile \\
            -a path=/storage/emulated/0/Download/report.pdf
    """
    arguments = _parse_arguments(pairs)
    try:
        reply = app.call(channel, method, arguments, timeout=timeout)
    except FutureTimeoutError:
        raise click.ClickException(f"No reply after {timeout}s")
    _finish(reply)
