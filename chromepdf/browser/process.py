import logging
import subprocess

from chromepdf.browser.errors import BrowserLaunchError, BrowserProcessError
from chromepdf.constants import PRINT_TO_PDF_FLAG

logger = logging.getLogger(__name__)


def build_command(binary: str, flags, output_target: str, input_reference: str) -> list[str]:
    """Assemble the browser argv; flag order is kept exactly as given."""
    return [binary, *flags, PRINT_TO_PDF_FLAG + output_target, input_reference]


def run_browser(cmd: list[str]) -> subprocess.CompletedProcess:
    """Run *cmd* to completion and raise if the browser fails."""
    logger.debug("Running browser: %s", cmd)
    try:
        result = subprocess.run(cmd, capture_output=True, text=True)
    except OSError as exc:
        raise BrowserLaunchError(f"Could not start browser {cmd[0]}: {exc}") from exc

    if result.returncode != 0:
        raise BrowserProcessError(result.returncode, result.stderr, command=cmd)
    return result


__all__ = ["build_command", "run_browser"]
