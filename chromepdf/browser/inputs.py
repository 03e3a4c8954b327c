import logging
import os
import tempfile
from dataclasses import dataclass
from enum import Enum
from urllib.parse import quote

from chromepdf.browser.errors import InputConfigurationError
from chromepdf.constants import (
    DATA_URI_PREFIX,
    FILE_URI_PREFIX,
    TEMP_FILE_PREFIX,
    TEMP_INPUT_SUFFIX,
)

logger = logging.getLogger(__name__)


class InputMode(str, Enum):
    TEXT = "text"
    FILE = "file"
    URL = "url"


@dataclass(frozen=True)
class PreparedInput:
    reference: str
    temp_path: str | None = None


def coerce_input_mode(value) -> InputMode:
    if isinstance(value, InputMode):
        return value
    if isinstance(value, str):
        try:
            return InputMode(value.strip().lower())
        except ValueError:
            pass
    raise InputConfigurationError(f"Unsupported input mode: {value!r}")


def write_temp_html(content: str, temp_dir: str | None = None) -> str:
    """Stage *content* in a new uniquely named ``.html`` file and return its path.

    Browsers sniff the document type from the extension, so the suffix is
    chosen at creation time.
    """
    fd, path = tempfile.mkstemp(prefix=TEMP_FILE_PREFIX, suffix=TEMP_INPUT_SUFFIX, dir=temp_dir)
    try:
        with os.fdopen(fd, "w", encoding="utf-8", newline="") as handle:
            handle.write(content)
    except Exception:
        try:
            os.remove(path)
        except OSError as exc:
            logger.warning("Could not remove partial temp input %s: %s", path, exc)
        raise
    logger.debug("Staged HTML input in %s", path)
    return path


def build_data_uri(content: str) -> str:
    return DATA_URI_PREFIX + quote(content, safe="")


def prepare_input(content: str, mode, use_temp_file: bool = True, temp_dir: str | None = None) -> PreparedInput:
    """Turn *content* into the reference the browser is told to open.

    TEXT content is written to a temp ``.html`` file (returned as a plain
    path) or inlined as a percent-encoded ``data:`` URI. FILE content is a
    local path and becomes a ``file://`` reference. URL content is passed
    through untouched. Only the TEXT temp-file case returns a ``temp_path``
    the caller must delete.
    """
    mode = coerce_input_mode(mode)
    if not content:
        raise InputConfigurationError("No input has been set.")

    if mode == InputMode.TEXT:
        if use_temp_file:
            path = write_temp_html(content, temp_dir)
            return PreparedInput(reference=path, temp_path=path)
        return PreparedInput(reference=build_data_uri(content))

    if mode == InputMode.FILE:
        return PreparedInput(reference=FILE_URI_PREFIX + content)

    return PreparedInput(reference=content)


__all__ = [
    "InputMode",
    "PreparedInput",
    "build_data_uri",
    "coerce_input_mode",
    "prepare_input",
    "write_temp_html",
]
