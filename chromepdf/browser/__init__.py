"""Browser subsystem: binary discovery, input staging, flags and process runs."""

from chromepdf.browser.errors import (
    BrowserLaunchError,
    BrowserNotFoundError,
    BrowserProcessError,
    BrowserRuntimeError,
    InputConfigurationError,
)
from chromepdf.browser.flags import ChromeFlags
from chromepdf.browser.inputs import InputMode, PreparedInput, prepare_input
from chromepdf.browser.process import build_command, run_browser
from chromepdf.browser.runtime import (
    BrowserRuntimeInfo,
    BrowserRuntimeStatus,
    detect_browser_runtime,
    find_browser_binary,
)

__all__ = [
    "BrowserLaunchError",
    "BrowserNotFoundError",
    "BrowserProcessError",
    "BrowserRuntimeError",
    "BrowserRuntimeInfo",
    "BrowserRuntimeStatus",
    "ChromeFlags",
    "InputConfigurationError",
    "InputMode",
    "PreparedInput",
    "build_command",
    "detect_browser_runtime",
    "find_browser_binary",
    "prepare_input",
    "run_browser",
]
