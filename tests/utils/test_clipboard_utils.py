from __future__ import annotations

import logging

import pyperclip
import pytest

from utils import clipboard_utils as clipboard_module
from utils.clipboard_utils import ClipboardUtils


def test_copy_writes_clipboard(monkeypatch: pytest.MonkeyPatch) -> None:
    copied: list[str] = []
    monkeypatch.setattr(clipboard_module.pyperclip, "copy", copied.append)

    assert ClipboardUtils.copy("EN: Hello\nDE: Hallo") is True
    assert copied == ["EN: Hello\nDE: Hallo"]


def test_copy_without_clipboard(monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.DEBUG, logger="DeepLSearch")

    def fail(text: str) -> None:
        raise pyperclip.PyperclipException("no clipboard mechanism")

    monkeypatch.setattr(clipboard_module.pyperclip, "copy", fail)

    assert ClipboardUtils.copy("Hallo") is False
    assert any(rec.levelno == logging.ERROR and "no clipboard" in rec.message for rec in caplog.records)
