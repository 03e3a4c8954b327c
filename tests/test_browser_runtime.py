from chromepdf.browser import runtime
from chromepdf.browser.runtime import (
    BrowserRuntimeStatus,
    detect_browser_runtime,
    find_browser_binary,
)


def _fake_which(found):
    calls = []

    def fake_which(name):
        calls.append(name)
        return found.get(name)

    return fake_which, calls


def test_find_browser_binary_prefers_first_candidate(monkeypatch):
    fake_which, calls = _fake_which({
        "google-chrome": "/usr/bin/google-chrome",
        "chromium": "/usr/bin/chromium",
    })
    monkeypatch.setattr(runtime.shutil, "which", fake_which)

    assert find_browser_binary() == "/usr/bin/google-chrome"
    assert calls == ["google-chrome"]


def test_find_browser_binary_falls_through_to_chromium(monkeypatch):
    fake_which, calls = _fake_which({"chromium": "/snap/bin/chromium"})
    monkeypatch.setattr(runtime.shutil, "which", fake_which)

    assert find_browser_binary() == "/snap/bin/chromium"
    assert calls == ["google-chrome", "chromium"]


def test_find_browser_binary_returns_none_when_missing(monkeypatch):
    fake_which, _calls = _fake_which({})
    monkeypatch.setattr(runtime.shutil, "which", fake_which)

    assert find_browser_binary(["brave"]) is None


def test_detect_browser_runtime_ready(monkeypatch):
    fake_which, _calls = _fake_which({"chromium": "/usr/bin/chromium"})
    monkeypatch.setattr(runtime.shutil, "which", fake_which)

    info = detect_browser_runtime()
    assert info.status == BrowserRuntimeStatus.READY
    assert info.binary == "/usr/bin/chromium"


def test_detect_browser_runtime_missing(monkeypatch):
    fake_which, _calls = _fake_which({})
    monkeypatch.setattr(runtime.shutil, "which", fake_which)

    info = detect_browser_runtime()
    assert info.status == BrowserRuntimeStatus.MISSING_RUNTIME
    assert info.binary is None
    assert "google-chrome, chromium" in info.detail
