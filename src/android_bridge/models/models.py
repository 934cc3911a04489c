"""Data models for the Android bridge."""

from typing import Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, field_validator

from ..core.errors import ErrorCode


class ScanRequest(BaseModel):
    """A request to (re)index a single file in the media store."""

    path: Optional[str] = None

    @field_validator("path")
    @classmethod
    def validate_path(cls, v: Optional[str]) -> str:
        """Require a non-empty absolute path. The value is kept as given."""
        if v is None:
            raise ValueError("File path is null")
        stripped = v.strip()
        if not stripped:
            raise ValueError("File path is empty")
        if not stripped.startswith("/"):
            raise ValueError(f"File path is not absolute: {v}")
        return v

    model_config = ConfigDict(frozen=True)


class ScanSuccess(BaseModel):
    """The media index scanned the file."""

    indexed_path: str
    uri: Optional[str] = None

    @property
    def ok(self) -> bool:
        """Whether the scan succeeded."""
        return True

    @property
    def message(self) -> str:
        """Confirmation shown to the user."""
        return f"File scanned: {self.indexed_path}"

    model_config = ConfigDict(frozen=True)


class ScanFailure(BaseModel):
    """The scan request could not be issued."""

    reason: str
    code: ErrorCode = ErrorCode.SCAN_ERROR

    @property
    def ok(self) -> bool:
        """Whether the scan succeeded."""
        return False

    model_config = ConfigDict(frozen=True)


ScanOutcome = Union[ScanSuccess, ScanFailure]


class LaunchSuccess(BaseModel):
    """A strategy presented a file browser."""

    strategy_id: str
    message: str

    @property
    def ok(self) -> bool:
        """Whether the launch succeeded."""
        return True

    model_config = ConfigDict(frozen=True)


class LaunchExhausted(BaseModel):
    """Every strategy was tried and none succeeded."""

    attempted: Tuple[str, ...]

    @property
    def ok(self) -> bool:
        """Whether the launch succeeded."""
        return False

    @property
    def message(self) -> str:
        """Description of the exhausted chain."""
        return "No suitable file manager found"

    model_config = ConfigDict(frozen=True)


LaunchOutcome = Union[LaunchSuccess, LaunchExhausted]
