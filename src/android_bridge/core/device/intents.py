"""Intent descriptions for actions issued on the device."""

from dataclasses import dataclass
from dataclasses import field as dataclass_field
from dataclasses import replace
from typing import Dict, Optional, Tuple

ACTION_VIEW = "android.intent.action.VIEW"
ACTION_GET_CONTENT = "android.intent.action.GET_CONTENT"
ACTION_CHOOSER = "android.intent.action.CHOOSER"
ACTION_MAIN = "android.intent.action.MAIN"
ACTION_MEDIA_SCANNER_SCAN_FILE = "android.intent.action.MEDIA_SCANNER_SCAN_FILE"

CATEGORY_OPENABLE = "android.intent.category.OPENABLE"
CATEGORY_LAUNCHER = "android.intent.category.LAUNCHER"

EXTRA_TITLE = "android.intent.extra.TITLE"

FLAG_ACTIVITY_NEW_TASK = 0x10000000


@dataclass(frozen=True)
class Intent:
    """An immutable description of an OS-level "open" action."""

    action: str
    data: Optional[str] = None
    mime_type: Optional[str] = None
    categories: Tuple[str, ...] = ()
    flags: int = 0
    package: Optional[str] = None
    component: Optional[str] = None
    extras: Dict[str, str] = dataclass_field(default_factory=dict)
    # Set on chooser intents only
    target: Optional["Intent"] = None

    def with_component(self, component: str) -> "Intent":
        """Return a copy of this intent aimed at an explicit component."""
        return replace(self, component=component)

    @property
    def is_chooser(self) -> bool:
        """Whether this intent wraps another one in a chooser."""
        return self.action == ACTION_CHOOSER and self.target is not None

    @classmethod
    def create_chooser(cls, target: "Intent", title: str) -> "Intent":
        """Wrap ``target`` in a user-facing chooser.

        Args:
            target: Intent offered to the user
            title: Title shown above the list of handlers

        Returns:
            Chooser intent carrying ``target``
        """
        return cls(
            action=ACTION_CHOOSER,
            flags=FLAG_ACTIVITY_NEW_TASK,
            extras={EXTRA_TITLE: title},
            target=target,
        )

    def to_am_args(self) -> Tuple[str, ...]:
        """Render the intent as ``am``/``cmd package`` arguments."""
        args = ["-a", self.action]
        if self.data:
            args += ["-d", self.data]
        if self.mime_type:
            args += ["-t", self.mime_type]
        for category in self.categories:
            args += ["-c", category]
        if self.flags:
            args += ["-f", hex(self.flags)]
        for key, value in self.extras.items():
            args += ["--es", key, value]
        if self.component:
            args += ["-n", self.component]
        elif self.package:
            args += ["-p", self.package]
        return tuple(args)
