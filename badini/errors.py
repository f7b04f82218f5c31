from __future__ import annotations

from typing import Sequence


class BadiniError(Exception):
    """Base exception for badini failures."""


class ConfigurationError(BadiniError):
    """Raised when the gateway cannot be configured."""

    def __init__(self, message: str, reason: str = "InvalidConfiguration") -> None:
        super().__init__(message)
        self.reason = reason


class MissingApiKeyError(ConfigurationError):
    """Raised when no configured source yields an API key."""

    def __init__(self, checked: Sequence[str]) -> None:
        self.checked = tuple(checked)
        super().__init__(
            "API key is missing. Checked: " + (", ".join(self.checked) or "<none>"),
            reason="MissingApiKey",
        )


class ProviderError(BadiniError):
    """Raised when provider calls fail."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class TranslationFailed(BadiniError):
    """Raised when a translation cannot be produced."""
