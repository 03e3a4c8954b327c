from chromepdf.errors import ExternalServiceError, ValidationError


class BrowserRuntimeError(ExternalServiceError):
    """Base browser subsystem error."""


class BrowserNotFoundError(BrowserRuntimeError):
    """Raised when no candidate browser binary is installed on this machine."""


class BrowserLaunchError(BrowserRuntimeError):
    """Raised when the browser binary could not be started."""


class BrowserProcessError(BrowserRuntimeError):
    """Raised when the browser exits with a non-zero status."""

    def __init__(self, returncode, stderr="", command=None):
        self.returncode = returncode
        self.stderr = stderr or ""
        self.command = list(command or [])
        detail = self.stderr.strip() or "no error output"
        super().__init__(f"Browser exited with code {returncode}: {detail}")


class InputConfigurationError(ValidationError, BrowserRuntimeError):
    """Raised for a missing input or an unsupported input mode."""


__all__ = [
    "BrowserLaunchError",
    "BrowserNotFoundError",
    "BrowserProcessError",
    "BrowserRuntimeError",
    "InputConfigurationError",
]
