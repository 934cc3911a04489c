"""Application object shared by the CLI commands."""

import logging
from typing import Any, Dict, Optional

from ...channels import ChannelMessenger, Reply, register_bridge
from ...config import get_config
from ...core.device import AdbPlatform, DevicePlatform
from ...core.launcher import FileBrowserLauncher
from ...core.media import MediaIndexRequester

logger = logging.getLogger(__name__)


class BridgeApp:
    """Bridge operations registered on an in-process messenger."""

    def __init__(
        self,
        config_override: Optional[Dict[str, Any]] = None,
        platform: Optional[DevicePlatform] = None,
    ) -> None:
        """Initialize application.

        Args:
            config_override: Optional configuration overrides
            platform: Device platform; an ``AdbPlatform`` from config when None
        """
        self.config = get_config()
        if config_override:
            for key, value in config_override.items():
                setattr(self.config, key, value)

        self.platform = platform or AdbPlatform(
            adb_path=self.config.adb_path,
            serial=self.config.device_serial,
            timeout=self.config.adb_timeout,
        )
        self.requester = MediaIndexRequester(self.platform)
        self.launcher = FileBrowserLauncher.from_config(self.platform, self.config)

        self.messenger = ChannelMessenger()
        register_bridge(
            self.messenger,
            self.requester,
            self.launcher,
            channel_prefix=self.config.channel_prefix,
        )

    def call(
        self,
        channel: str,
        method: str,
        arguments: Optional[Dict[str, Any]] = None,
        timeout: Optional[float] = None,
    ) -> Reply:
        """Invoke a method on a channel and wait for the reply.

        Raises:
            FutureTimeoutError: If no reply arrived within ``timeout``
        """
        logger.debug(f"Calling {channel}#{method} with {arguments or {}}")
        return self.messenger.invoke(channel, method, arguments).result(timeout)
