"""Convert HTML, local files or URLs to PDF with a headless Chrome."""

from . import browser, constants, errors, infra, paths
from .browser import (
    BrowserLaunchError,
    BrowserNotFoundError,
    BrowserProcessError,
    BrowserRuntimeError,
    InputConfigurationError,
    InputMode,
    detect_browser_runtime,
    prepare_input,
)
from .converter import ChromePdf, make

__all__ = [
    "BrowserLaunchError",
    "BrowserNotFoundError",
    "BrowserProcessError",
    "BrowserRuntimeError",
    "ChromePdf",
    "InputConfigurationError",
    "InputMode",
    "browser",
    "constants",
    "detect_browser_runtime",
    "errors",
    "infra",
    "make",
    "paths",
    "prepare_input",
]
