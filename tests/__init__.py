"""Unit tests for DeepL Search.

Tests use pytest with asyncio support; HTTP calls and the clipboard are replaced via monkeypatch.
"""
