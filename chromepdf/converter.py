"""HTML to PDF conversion through a headless Chrome/Chromium subprocess."""

import logging
import os
import tempfile

from chromepdf.browser.errors import BrowserNotFoundError, InputConfigurationError
from chromepdf.browser.flags import ChromeFlags, as_list
from chromepdf.browser.inputs import InputMode, coerce_input_mode, prepare_input
from chromepdf.browser.process import build_command, run_browser
from chromepdf.browser.runtime import find_browser_binary, missing_runtime_detail
from chromepdf.constants import DEFAULT_BINARIES, DEFAULT_FLAGS, TEMP_FILE_PREFIX, TEMP_OUTPUT_SUFFIX

logger = logging.getLogger(__name__)


def _discard(path: str) -> None:
    try:
        os.remove(path)
    except FileNotFoundError:
        return
    except OSError as exc:
        logger.warning("Could not remove temp file %s: %s", path, exc)


def _create_temp_output(temp_dir: str | None) -> str:
    fd, path = tempfile.mkstemp(prefix=TEMP_FILE_PREFIX, suffix=TEMP_OUTPUT_SUFFIX, dir=temp_dir)
    os.close(fd)
    return path


def _read_bytes(path: str) -> bytes:
    with open(path, "rb") as handle:
        return handle.read()


class ChromePdf:
    """Render HTML text, a local file or a URL to PDF with a headless browser.

    The browser binary is resolved on first use and then cached for the
    lifetime of the instance; build a new instance to probe again. An
    instance is not safe to share between threads.
    """

    INPUT_TEXT = InputMode.TEXT
    INPUT_FILE = InputMode.FILE
    INPUT_URL = InputMode.URL

    def __init__(self, binaries=None, flags=None, use_temp_file=True, temp_dir=None):
        self.binaries = as_list(DEFAULT_BINARIES if binaries is None else binaries)
        self._flags = ChromeFlags(DEFAULT_FLAGS if flags is None else flags)
        self._binary = None
        self._use_temp_file = bool(use_temp_file)
        self.temp_dir = temp_dir
        self._input = None
        self._input_mode = InputMode.TEXT

    @classmethod
    def from_config(cls, config):
        use_temp_file = config.get("use_temp_file", True)
        if not isinstance(use_temp_file, bool):
            use_temp_file = True
        converter = cls(
            binaries=config.get("binaries") or None,
            flags=config.get("flags"),
            use_temp_file=use_temp_file,
            temp_dir=config.get("temp_dir") or None,
        )
        binary = config.get("binary")
        if binary:
            converter.set_binary(binary)
        return converter

    def binary_path(self) -> str | None:
        if self._binary:
            return self._binary
        self._binary = find_browser_binary(self.binaries)
        return self._binary

    def set_binary(self, path):
        self._binary = os.fspath(path) if path else None
        return self

    def set_input(self, content: str, mode=InputMode.TEXT):
        if not content:
            raise InputConfigurationError("Input content is required.")
        self._input_mode = coerce_input_mode(mode)
        self._input = content
        return self

    def use_temp_file(self, status: bool):
        self._use_temp_file = bool(status)
        return self

    def add_flag(self, flag):
        self._flags.add(flag)
        return self

    def set_flags(self, flags):
        self._flags.replace(flags)
        return self

    def remove_flag(self, flag):
        self._flags.remove(flag)
        return self

    def get_flags(self) -> tuple:
        return self._flags.as_tuple()

    def render(self, output_path=None):
        """Print the current input to PDF.

        Returns the PDF bytes, or ``output_path`` as a string when the browser
        was told to write there. Temp files made for this call are removed on
        every exit path.
        """
        binary = self.binary_path()
        if not binary:
            raise BrowserNotFoundError(missing_runtime_detail(self.binaries))
        if not self._input:
            raise InputConfigurationError("No input has been set. Call set_input() first.")

        prepared = prepare_input(self._input, self._input_mode, self._use_temp_file, self.temp_dir)
        temp_output = None
        try:
            try:
                if not output_path:
                    temp_output = _create_temp_output(self.temp_dir)
                target = temp_output or os.fspath(output_path)
                run_browser(build_command(binary, self._flags, target, prepared.reference))
            finally:
                if prepared.temp_path:
                    _discard(prepared.temp_path)

            if temp_output is None:
                return target
            return _read_bytes(temp_output)
        finally:
            if temp_output:
                _discard(temp_output)

    print_pdf = render


def make(content: str, output_path=None, input_mode=InputMode.TEXT):
    """Render *content* with a default-configured converter."""
    return ChromePdf().set_input(content, input_mode).render(output_path)


__all__ = ["ChromePdf", "make"]
