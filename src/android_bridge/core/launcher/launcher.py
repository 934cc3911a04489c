"""File browser launcher.

Tries each strategy once, in declared order, and stops at the first one that
presents a file browser. A strategy that raises is treated as unavailable and
never stops the chain.
"""

import logging
from typing import TYPE_CHECKING, List, Optional, Sequence

from ...models.models import LaunchExhausted, LaunchOutcome, LaunchSuccess
from ..device.platform import DevicePlatform
from .strategies import LaunchStrategy, default_strategies

if TYPE_CHECKING:  # pragma: no cover - type checking only
    from ...config import Config

logger = logging.getLogger(__name__)


class FileBrowserLauncher:
    """Present a file browser using an ordered chain of strategies."""

    def __init__(
        self,
        platform: DevicePlatform,
        strategies: Optional[Sequence[LaunchStrategy]] = None,
    ) -> None:
        """Initialize the launcher.

        Args:
            platform: Device platform the strategies act on
            strategies: Strategy chain; the default chain when None
        """
        self.platform = platform
        self.strategies = (
            tuple(strategies) if strategies is not None else default_strategies()
        )

    @classmethod
    def from_config(
        cls, platform: DevicePlatform, config: "Config"
    ) -> "FileBrowserLauncher":
        """Create a launcher whose strategies follow the configuration."""
        return cls(
            platform,
            default_strategies(
                documents_uri=config.documents_uri,
                downloads_dir=config.downloads_dir,
                packages=config.file_manager_packages,
            ),
        )

    @property
    def strategy_ids(self) -> List[str]:
        """Identifiers of the strategies in the order they are tried."""
        return [strategy.strategy_id for strategy in self.strategies]

    def launch(self) -> LaunchOutcome:
        """Present a file browser.

        Returns:
            ``LaunchSuccess`` for the first strategy that worked, or
            ``LaunchExhausted`` listing every strategy tried
        """
        attempted: List[str] = []
        for strategy in self.strategies:
            attempted.append(strategy.strategy_id)
            message = self._attempt(strategy)
            if message is not None:
                logger.info(f"File browser opened via {strategy.strategy_id}")
                return LaunchSuccess(strategy_id=strategy.strategy_id, message=message)

        logger.warning(f"No suitable file manager found (tried {attempted})")
        return LaunchExhausted(attempted=tuple(attempted))

    def _attempt(self, strategy: LaunchStrategy) -> Optional[str]:
        try:
            return strategy.attempt(self.platform)
        except Exception as e:
            logger.debug(f"Strategy {strategy.strategy_id} failed: {e}")
            return None
