"""Core bridge functionality.

This package is organized by concern:
- device: intents and the adb-backed device platform
- launcher: file browser strategy chain
- media: media store scan requests
- errors: error classification shared by all of the above
"""

__all__: list[str] = []
