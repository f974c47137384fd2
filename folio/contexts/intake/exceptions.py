"""Custom exceptions for the intake context."""

from pathlib import Path
from typing import List, Optional


class ConfigLoadError(Exception):
    """
    Exception raised when no configuration document could be obtained.

    This is the only hard failure of the intake context: malformed fields inside
    a loaded document are recovered during normalization and never raise.

    Attributes:
        message: Error description
        requested: The path the caller asked for (None for the embedded default)
        candidates: Paths that were tried, in order
    """

    def __init__(
        self,
        message: str,
        requested: Optional[str] = None,
        candidates: Optional[List[Path]] = None,
    ):
        self.message = message
        self.requested = requested
        self.candidates = candidates or []

        parts = [message]
        if self.candidates:
            parts.append("Tried:")
            parts.extend(f"  - {path}" for path in self.candidates)

        super().__init__("\n".join(parts))
