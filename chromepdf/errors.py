"""Project-wide error types.

Caller mistakes (bad input mode, no input) derive from ``ValidationError``.
Problems with the host browser (not installed, cannot start, non-zero
exit) derive from ``ExternalServiceError``. Plain ``OSError`` from temp
file handling is not wrapped.
"""


class ProjectError(Exception):
    """Base for all chromepdf errors."""


class ValidationError(ProjectError):
    """The converter was configured with unusable input."""


class ExternalServiceError(ProjectError):
    """The browser binary is missing or failed to print."""


__all__ = ["ProjectError", "ValidationError", "ExternalServiceError"]
