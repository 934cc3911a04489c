"""Android Bridge.

Native Android capabilities for an application shell: index newly written
files in the media store, and open a file browser by trying a fixed chain of
strategies until one succeeds.
"""

__version__ = "1.0.0"
__author__ = "Anton"
__email__ = ""

from .channels import ChannelMessenger, MethodChannel, register_bridge
from .config import Config
from .core.launcher import FileBrowserLauncher
from .core.media import MediaIndexRequester
from .models import LaunchExhausted, LaunchSuccess, ScanFailure, ScanSuccess

__all__ = [
    "ChannelMessenger",
    "Config",
    "FileBrowserLauncher",
    "LaunchExhausted",
    "LaunchSuccess",
    "MediaIndexRequester",
    "MethodChannel",
    "ScanFailure",
    "ScanSuccess",
    "register_bridge",
]
