import subprocess

import pytest

from chromepdf.browser import process
from chromepdf.browser.errors import BrowserLaunchError, BrowserProcessError
from chromepdf.browser.process import build_command, run_browser


def test_build_command_keeps_flag_order():
    cmd = build_command("/usr/bin/chromium", ["--b", "--a"], "/tmp/out.pdf", "https://example.com")

    assert cmd == [
        "/usr/bin/chromium",
        "--b",
        "--a",
        "--print-to-pdf=/tmp/out.pdf",
        "https://example.com",
    ]


def test_run_browser_raises_with_stderr_and_code(monkeypatch):
    def fake_run(cmd, capture_output, text):
        assert capture_output is True
        assert text is True
        return subprocess.CompletedProcess(cmd, 3, stdout="", stderr="boom\n")

    monkeypatch.setattr(process.subprocess, "run", fake_run)

    with pytest.raises(BrowserProcessError) as excinfo:
        run_browser(["chromium", "page.html"])

    assert excinfo.value.returncode == 3
    assert excinfo.value.stderr == "boom\n"
    assert excinfo.value.command == ["chromium", "page.html"]
    assert "boom" in str(excinfo.value)


def test_run_browser_wraps_spawn_failure(monkeypatch):
    def fake_run(cmd, capture_output, text):
        raise FileNotFoundError(cmd[0])

    monkeypatch.setattr(process.subprocess, "run", fake_run)

    with pytest.raises(BrowserLaunchError):
        run_browser(["/missing/chromium"])


def test_run_browser_returns_completed_process(monkeypatch):
    monkeypatch.setattr(
        process.subprocess,
        "run",
        lambda cmd, capture_output, text: subprocess.CompletedProcess(cmd, 0, stdout="", stderr=""),
    )

    assert run_browser(["chromium"]).returncode == 0
