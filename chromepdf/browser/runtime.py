import logging
import shutil
from dataclasses import dataclass
from enum import Enum

from chromepdf.constants import DEFAULT_BINARIES

logger = logging.getLogger(__name__)


class BrowserRuntimeStatus(str, Enum):
    READY = "READY"
    MISSING_RUNTIME = "MISSING_RUNTIME"


@dataclass(frozen=True)
class BrowserRuntimeInfo:
    status: BrowserRuntimeStatus
    detail: str
    binary: str | None = None


def find_browser_binary(candidates=DEFAULT_BINARIES) -> str | None:
    """Return the path of the first candidate found on the executable search path."""
    for name in candidates:
        path = shutil.which(name)
        if path:
            logger.debug("Resolved browser binary %r to %s", name, path)
            return path
    return None


def missing_runtime_detail(candidates) -> str:
    probed = ", ".join(candidates) or "(none)"
    return (
        "A Chrome binary could not be found. "
        f"Install Google Chrome or Chromium. Probed: {probed}"
    )


def detect_browser_runtime(candidates=DEFAULT_BINARIES) -> BrowserRuntimeInfo:
    names = list(candidates)
    binary = find_browser_binary(names)
    if binary:
        return BrowserRuntimeInfo(
            status=BrowserRuntimeStatus.READY,
            detail=f"Browser binary detected: {binary}",
            binary=binary,
        )

    return BrowserRuntimeInfo(
        status=BrowserRuntimeStatus.MISSING_RUNTIME,
        detail=missing_runtime_detail(names),
    )
