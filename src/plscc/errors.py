"""
Exceptions for the PLS Command Center.

Two families:
    - input errors (bad document text, unsupported or unreadable files),
      surfaced to the user with an actionable message;
    - upstream errors (missing credential, network failure, non-success
      status, malformed reply), recovered locally by the extraction fallback
      or turned into an unsuccessful chat envelope.
"""

from typing import Any, Optional


class PLSError(Exception):
    """
    Base exception for all PLS Command Center errors.

    Attributes:
        message: Human-readable message
        details: Extra context for logs and API responses
    """

    def __init__(self, message: str, details: Optional[dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        """Converts to an API error envelope."""
        result: dict[str, Any] = {"success": False, "error": self.message}
        if self.details:
            result["details"] = self.details
        return result


# === Input errors ===

class InputValidationError(PLSError):
    """Document text missing or too short for analysis."""


class UnsupportedFileTypeError(PLSError):
    """File extension outside .pdf/.docx/.doc/.txt."""

    def __init__(self, extension: str):
        super().__init__(
            f"Unsupported file type: {extension}",
            details={"extension": extension},
        )


class DocumentFormatError(PLSError):
    """Supported extension whose format cannot be read (legacy .doc)."""


class DocumentReadError(PLSError):
    """Text extraction failed for a supported file."""


# === Upstream errors ===

class UpstreamServiceError(PLSError):
    """The model provider failed or replied with something unusable."""

    def __init__(self, message: str, status_code: Optional[int] = None, details: Optional[dict[str, Any]] = None):
        self.status_code = status_code
        super().__init__(message, details=details)


class CredentialMissingError(UpstreamServiceError):
    """No API key configured for the model provider."""

    def __init__(self):
        super().__init__("ANTHROPIC_API_KEY not configured")


# === Client-side errors ===

class RelayError(PLSError):
    """The relay server rejected the request or could not be reached."""
