"""
Exception hierarchy

Every failure the form knows how to recover from derives from FaultNoteError.
The remote errors carry a short ``label`` used to build the status line shown
to the user.
"""
from typing import Optional


class FaultNoteError(Exception):
    """Base class for all FaultNote errors"""

    def __init__(self, message: str, cause: Optional[Exception] = None):
        self.message = message
        self.cause = cause
        super().__init__(message)


class ConfigurationError(FaultNoteError):
    """Raised when the remote collaborator cannot be configured (e.g. no API key)"""


class RemoteError(FaultNoteError):
    """Base class for failures reported by the remote collaborator"""
    label = "Remote error"

    def __init__(self, message: str, status_code: Optional[int] = None,
                 cause: Optional[Exception] = None):
        super().__init__(message, cause=cause)
        self.status_code = status_code

    def user_message(self) -> str:
        return f"{self.label}: {self.message}"


class NetworkError(RemoteError):
    """Transport failure or unexpected HTTP status"""
    label = "Network error"


class RemoteTimeoutError(NetworkError):
    """The remote call did not finish within the client timeout"""
    label = "Request timed out"


class AuthError(RemoteError):
    """The remote rejected our credentials"""
    label = "Authentication failed"


class NotFoundError(RemoteError):
    """The target document does not exist or is not shared with the integration"""
    label = "Page not found"
